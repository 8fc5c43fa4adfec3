"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services hold the record lifecycle rules and talk to the store
    only through repository interfaces.
    """

    pass
