"""Custom error types used in lightbnb."""


class LightbnbError(Exception):
    """Base class for lightbnb data-access errors."""


class InvalidCriteria(LightbnbError, ValueError):
    """Property search criteria could not be validated."""


class InvalidLimit(LightbnbError, ValueError):
    """Result limit is not a positive integer."""


class StoreError(LightbnbError):
    """The database rejected or failed to run a statement."""


class StoreNotConfigured(StoreError):
    """No Postgres DSN or host/database settings were provided."""


class InvalidFragment(LightbnbError, ValueError):
    """A predicate fragment does not reference the placeholder its position requires."""
