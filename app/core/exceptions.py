from typing import Optional, Any

class OtpRelayError(Exception):
    """
    Base exception for the OTP relay service.
    """
    def __init__(self, message: str, code: str = "INTERNAL_ERROR", status_code: int = 500, details: Optional[Any] = None):
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details
        super().__init__(self.message)

class ValidationError(OtpRelayError):
    """
    Raised when a request body is missing required fields or is not JSON.
    """
    def __init__(self, message: str = "Missing required fields", details: Optional[Any] = None):
        super().__init__(message, code="VALIDATION_ERROR", status_code=400, details=details)

class ConfigurationError(OtpRelayError):
    """
    Raised when provider credentials needed for a request are absent.
    """
    def __init__(self, message: str = "Configuration missing", details: Optional[Any] = None):
        super().__init__(message, code="CONFIGURATION_ERROR", status_code=500, details=details)

class ProviderError(OtpRelayError):
    """
    Raised when a delivery provider (Resend, Twilio) rejects a send.

    The status code is chosen by the caller: email failures are answered
    with 500, SMS failures with 400.
    """
    def __init__(self, message: str = "Provider error", status_code: int = 500, details: Optional[Any] = None):
        super().__init__(message, code="PROVIDER_ERROR", status_code=status_code, details=details)

class UnexpectedError(OtpRelayError):
    """
    Wraps any other failure raised while handling a delivery request.
    """
    def __init__(self, details: Optional[Any] = None):
        super().__init__("Internal server error", code="INTERNAL_ERROR", status_code=500, details=details)

class LogStoreError(Exception):
    """
    Raised by the log store when a delivery record cannot be written.
    Never propagated past DeliveryLogWriter.
    """
    def __init__(self, message: str, table: Optional[str] = None):
        self.message = message
        self.table = table
        super().__init__(message)
