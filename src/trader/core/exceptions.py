"""Application-level exceptions."""

from trader.core.money import cents_to_dollars


class AppError(Exception):
    """Base exception for application errors."""

    def __init__(self, message: str, code: str = "APP_ERROR"):
        self.message = message
        self.code = code
        super().__init__(message)


class ValidationError(AppError):
    """Raised when input validation fails."""

    def __init__(self, message: str):
        super().__init__(message, code="VALIDATION_ERROR")


class NotFoundError(AppError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier):
        super().__init__(f"{resource} not found: {identifier}", code="NOT_FOUND")


class InsufficientFundsError(AppError):
    """Raised when a purchase costs more than the cash available."""

    def __init__(self, available_in_cents: int, attempted_in_cents: int):
        self.available_in_cents = available_in_cents
        self.attempted_in_cents = attempted_in_cents
        super().__init__(
            f"Insufficient funds: {cents_to_dollars(available_in_cents)} "
            f"for purchase of {cents_to_dollars(attempted_in_cents)}",
            code="INSUFFICIENT_FUNDS",
        )


class PriceUnavailableError(AppError):
    """Raised when the price source has no quote for a security."""

    def __init__(self, security_code: str):
        self.security_code = security_code
        super().__init__(
            f"No market price available for {security_code}",
            code="PRICE_UNAVAILABLE",
        )
