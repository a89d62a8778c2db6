"""constats-specific exceptions."""


class ConstatsError(Exception):
    """Base class for every error raised by constats."""


class InvalidInputError(ConstatsError, ValueError):
    """Raised when a sample set is empty or cannot be read as int64 samples.

    No partial statistics are produced when this is raised.
    """


class DegenerateDistributionError(ConstatsError):
    """Raised when a histogram is requested for statistics without inliers.

    ``calculate`` itself succeeds on such input and leaves every normalized
    field of the result set to ``None``; check ``Stats.degenerate`` before
    rendering to avoid this error.
    """
