from typing import Any, Dict, Optional


class ShippingCalcError(Exception):
    """Base exception for all shipping-calc errors."""
    pass

class InvalidArgument(ShippingCalcError, ValueError):
    """Raised when quote parameters are missing, malformed or out of range."""
    pass

class CarrierError(ShippingCalcError):
    """Raised when a carrier reports a fault or an unsuccessful estimate."""

    def __init__(
        self,
        message: str,
        code: Optional[int] = None,
        category: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.code = code
        self.category = category
        self.details = details or {}
        super().__init__(message)

class TransportFailure(ShippingCalcError):
    """Raised when the carrier endpoint can't be reached or answers with an HTTP error."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        response_text: Optional[str] = None,
    ):
        self.message = message
        self.status_code = status_code
        self.response_text = response_text
        super().__init__(message)
