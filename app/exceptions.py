class GatewayError(Exception):
    """Base error for a failed generation request.

    Attributes:
        message: short human-readable message returned to the caller
        http_status: status code the handler responds with (500)
    """

    http_status = 500
    default_message = "Unknown error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_dict(self) -> dict:
        return {"error": self.message}

    def __str__(self) -> str:
        return self.message


class ConfigurationError(GatewayError):
    """Raised when the upstream credential is missing. Never retried."""

    default_message = "AI gateway is not configured"


class RateLimitedError(GatewayError):
    http_status = 429
    default_message = "Rate limits exceeded, please try again later."


class PaymentRequiredError(GatewayError):
    http_status = 402
    default_message = "Payment required, please add credits to your workspace."


class UpstreamError(GatewayError):
    default_message = "AI gateway error"


class MissingOutputError(GatewayError):
    """Raised when the gateway answers 200 without the expected artifact."""

    default_message = "No image generated"


def error_from_status(status_code: int) -> GatewayError:
    if status_code == 429:
        return RateLimitedError()
    if status_code == 402:
        return PaymentRequiredError()
    return UpstreamError()
