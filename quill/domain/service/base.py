"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services hold the rules that span more than one entity or need
    a repository to be checked.
    """

    pass
