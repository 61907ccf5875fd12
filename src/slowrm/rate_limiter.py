"""Rate-to-chunk-size policy for throttled removal."""

from dataclasses import dataclass

from slowrm.errors import InvalidRateConfigError
from slowrm.size import U64_MAX, Size
from slowrm.utils.logging import get_logger
from slowrm.utils.validators import validate_non_negative_int, validate_positive_int

logger = get_logger(__name__)

DEFAULT_CHUNK_REMOVAL_PER_SECOND = 10


@dataclass(frozen=True)
class RemovalPlan:
    """What one second of removal rounds amounts to."""

    rate: int
    rounds_per_second: int
    chunk_size: int

    @property
    def bytes_per_second(self) -> int:
        return self.chunk_size * self.rounds_per_second

    @property
    def dropped_bytes_per_second(self) -> int:
        """Bytes per second lost to the floor division remainder."""
        return max(self.rate - self.bytes_per_second, 0)

    @property
    def overshoots(self) -> bool:
        """True when a full second of rounds removes more than ``rate``."""
        return self.bytes_per_second > self.rate


@dataclass(frozen=True, kw_only=True)
class SlowRm:
    """Removal rate configuration.

    Attributes:
        rate: Rate of removal, in bytes per second.
        chunk_removal_per_second: Number of removal rounds per second. It
            sets the size of each individual removal: a higher value gives
            a smoother, more consistent removal but adds load on the drives.
    """

    rate: int
    chunk_removal_per_second: int = DEFAULT_CHUNK_REMOVAL_PER_SECOND

    def __post_init__(self) -> None:
        try:
            validate_non_negative_int(self.rate, "rate")
            validate_positive_int(
                self.chunk_removal_per_second, "chunk_removal_per_second"
            )
        except ValueError as e:
            raise InvalidRateConfigError(str(e)) from e

        if self.rate > U64_MAX:
            raise InvalidRateConfigError(f"rate cannot exceed {U64_MAX} bytes")

        if self.chunk_removal_per_second > U64_MAX:
            raise InvalidRateConfigError(
                f"chunk_removal_per_second cannot exceed {U64_MAX}"
            )

    @classmethod
    def from_size(
        cls,
        rate: Size,
        chunk_removal_per_second: int = DEFAULT_CHUNK_REMOVAL_PER_SECOND,
    ) -> "SlowRm":
        """Build the configuration from a Size expressing bytes per second."""
        return cls(
            rate=rate.as_bytes(), chunk_removal_per_second=chunk_removal_per_second
        )

    @property
    def rate_size(self) -> Size:
        return Size.from_bytes(self.rate)

    def max_size_per_chunk_removal(self) -> int:
        """Determine how many bytes should be removed in a single round.

        A rate lower than the number of rounds would floor to 0 and stall the
        removal, so the whole rate is returned instead. Otherwise the rate is
        split evenly and the remainder is dropped.
        """
        if self.rate < self.chunk_removal_per_second:
            chunk_size = self.rate
        else:
            chunk_size = self.rate // self.chunk_removal_per_second

        logger.debug(
            "chunk_size_computed",
            rate=self.rate,
            chunk_removal_per_second=self.chunk_removal_per_second,
            chunk_size=chunk_size,
        )
        return chunk_size

    def plan(self) -> RemovalPlan:
        return RemovalPlan(
            rate=self.rate,
            rounds_per_second=self.chunk_removal_per_second,
            chunk_size=self.max_size_per_chunk_removal(),
        )
