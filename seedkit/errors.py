class SeedkitError(Exception):
    """Base class for seedkit-specific errors."""


# Argument validation
class InvalidSeedError(SeedkitError, ValueError):
    pass


class InvalidRangeError(SeedkitError, ValueError):
    pass


class InvalidBoundError(SeedkitError, ValueError):
    pass


# Entropy supply
class EntropyUnavailableError(SeedkitError, RuntimeError):
    pass
