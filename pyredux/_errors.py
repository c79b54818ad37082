__all__ = (
    "ConcurrencyError",
    "ConfigurationError",
    "InvalidActionError",
    "InvalidStateError",
    "StoreError",
    "UsageError",
)


class StoreError(Exception):
    pass


class ConfigurationError(StoreError):
    pass


class UsageError(StoreError):
    pass


class InvalidActionError(UsageError):
    pass


class ConcurrencyError(UsageError):
    pass


class InvalidStateError(StoreError):
    pass
