"""Exception hierarchy for slowrm."""


class SlowRmError(Exception):
    """Base exception for slowrm."""

    pass


class InvalidRateConfigError(SlowRmError, ValueError):
    """Removal rate configuration is not usable."""

    pass


class SizeOverflowError(SlowRmError, OverflowError):
    """Size arithmetic exceeded the 64-bit unsigned range."""

    pass
