"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Services hold the gateway's rules for credentials, link quotas and
    payment forwarding. They talk to repositories and gateways only through
    the interfaces declared in the domain layer.
    """

    pass
