"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services hold the rules that act on quotes and users through
    repositories; they receive every collaborator through ``__init__``.
    """

    pass
