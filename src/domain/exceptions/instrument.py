"""Investment instrument-related domain exceptions."""

from .base import DomainException


class InstrumentNotFoundException(DomainException):
    """Raised when a returns projection names an unsupported instrument."""

    def __init__(self, instrument: str):
        super().__init__(
            message=f"Instrument not found: {instrument}",
            code="INSTRUMENT_NOT_FOUND",
        )
        self.instrument = instrument
