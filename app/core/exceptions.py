from typing import Optional, Any

class TaaraError(Exception):
    """
    Base exception for the TAARA SMS service.
    """
    def __init__(self, message: str, code: str = "INTERNAL_ERROR", status_code: int = 500, details: Optional[Any] = None):
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details
        super().__init__(self.message)

class ValidationError(TaaraError):
    """
    Raised when input validation fails (missing or malformed recipient/message).
    """
    def __init__(self, message: str = "Validation error", details: Optional[Any] = None):
        super().__init__(message, code="VALIDATION_ERROR", status_code=422, details=details)

class ExternalServiceError(TaaraError):
    """
    Raised when an external service fails.
    """
    def __init__(self, message: str = "External service error", details: Optional[Any] = None):
        super().__init__(message, code="EXTERNAL_SERVICE_ERROR", status_code=502, details=details)

class ProviderError(ExternalServiceError):
    """
    Raised when the SMS provider (Twilio) rejects a request or cannot be reached.
    `provider_code` is Twilio's numeric error code when one was returned.
    """
    def __init__(self, message: str = "SMS provider error", provider_code: Optional[int] = None, details: Optional[Any] = None):
        super().__init__(message, details=details)
        self.provider_code = provider_code
