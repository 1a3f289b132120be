"""Exception taxonomy for the dispatch core.

Every exception here is caught by the Dispatcher and turned into a Failure
result.  None of them is meant to reach the transport layer.
"""

from typing import Optional


class StripeTaxError(Exception):
    """Base class for errors raised inside the dispatch core."""


class UnknownProcedureError(StripeTaxError):
    """Raised when a requested procedure is not registered.

    Attributes:
        procedure_name: Name that was looked up
    """

    def __init__(self, procedure_name: str) -> None:
        super().__init__(f"Unknown procedure: {procedure_name}")
        self.procedure_name = procedure_name


class AbsentCredentialError(StripeTaxError):
    """Raised when neither an explicit apiKey nor a fallback key is available."""

    def __init__(self, message: Optional[str] = None) -> None:
        super().__init__(
            message
            or "No Stripe API key provided. Pass an apiKey argument or set "
            "the STRIPE_API_KEY environment variable."
        )


class DownstreamError(StripeTaxError):
    """Raised when the single Stripe call made by a handler fails.

    Attributes:
        action: Human-readable operation, e.g. "retrieve tax calculation"
        provider_message: Message reported by Stripe
        kind: Stripe error class name, e.g. "AuthenticationError"
    """

    def __init__(self, action: str, provider_message: str, kind: Optional[str] = None) -> None:
        super().__init__(f"Failed to {action}: {provider_message}")
        self.action = action
        self.provider_message = provider_message
        self.kind = kind
