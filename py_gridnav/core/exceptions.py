"""Exception types raised by the grid navigation core."""


class ConfigurationError(ValueError):
    """Raised when a grid, endpoint or tuning parameter is malformed.

    Raised before any algorithm runs; the core never repairs a bad grid by
    guessing a start or finish cell.
    """


class GenerationInvariantViolated(RuntimeError):
    """Raised when a generator cannot connect start and finish after repair.

    This signals a bug in a generator, not a normal runtime condition.
    """
