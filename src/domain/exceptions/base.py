"""Base domain exception."""


class DomainException(Exception):
    """
    Base exception for savings planner errors raised outside the engine.

    Engine rule failures are returned as invalid transactions; this
    hierarchy covers requests the service cannot serve at all, such as
    an unknown investment instrument. ``code`` is the machine-readable
    error sent back to API clients.
    """

    def __init__(self, message: str, code: str = "DOMAIN_ERROR"):
        self.message = message
        self.code = code
        super().__init__(self.message)
