"""Credential Resolver: picks the one Stripe key used for an invocation."""

from typing import Any, Optional

from stripe_tax.errors import AbsentCredentialError


def _present(value: Any) -> bool:
    return isinstance(value, str) and value.strip() != ""


class CredentialResolver:
    """Resolves the Stripe API key for a call.

    The fallback is injected once at startup (from Settings) and never
    re-read, so handlers never touch the environment.
    """

    def __init__(self, fallback: Optional[str] = None) -> None:
        self._fallback = fallback

    @property
    def has_fallback(self) -> bool:
        return _present(self._fallback)

    def resolve(self, explicit: Optional[str] = None) -> str:
        """Return the explicit key if given, else the fallback.

        Raises:
            AbsentCredentialError: If neither is a non-empty string
        """
        if _present(explicit):
            return explicit.strip()
        if _present(self._fallback):
            return self._fallback.strip()
        raise AbsentCredentialError()
