# =============================================================================
# stripe_tax/dispatcher.py  —  Tool Dispatcher
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Runs one invocation end to end and ALWAYS returns an InvocationResult.
#
# THE STEPS (in order, each one can short-circuit):
#   1. Look up the procedure name       → UNKNOWN_PROCEDURE
#   2. Validate + narrow the arguments  → VALIDATION        (no Stripe call)
#   3. Resolve the Stripe API key       → ABSENT_CREDENTIAL (no Stripe call)
#   4. Build a client and run handler   → DOWNSTREAM / INTERNAL
#   5. Wrap the payload                 → Success
#
# The dispatcher owns no mutable state.  Concurrent invocations share only
# the registry, the validator and the credential resolver, all read-only.
# =============================================================================

import logging
from typing import Any, Callable, Optional

import stripe

from stripe_tax.credentials import CredentialResolver
from stripe_tax.envelope import to_envelope
from stripe_tax.errors import AbsentCredentialError, DownstreamError, UnknownProcedureError
from stripe_tax.models import (
    Failure,
    FailureKind,
    InvocationRequest,
    InvocationResult,
    Success,
)
from stripe_tax.registry import ToolRegistry
from stripe_tax.validation import SchemaValidationError, SchemaValidator

logger = logging.getLogger(__name__)

ClientFactory = Callable[[str], Any]

API_KEY_ARGUMENT = "apiKey"


def default_client_factory(api_key: str) -> stripe.StripeClient:
    return stripe.StripeClient(api_key)


class Dispatcher:
    """Routes a procedure name + raw arguments to its handler."""

    def __init__(
        self,
        registry: ToolRegistry,
        credentials: CredentialResolver,
        client_factory: Optional[ClientFactory] = None,
        validator: Optional[SchemaValidator] = None,
    ) -> None:
        self.registry = registry
        self.credentials = credentials
        self.client_factory = client_factory or default_client_factory
        self.validator = validator or SchemaValidator()

    def dispatch(self, procedure_name: str, raw_arguments: Any = None) -> InvocationResult:
        """Run one invocation.  Never raises."""
        try:
            definition = self.registry.lookup(procedure_name)
        except UnknownProcedureError as e:
            logger.warning("%s", e)
            return Failure(str(e), FailureKind.UNKNOWN_PROCEDURE)

        try:
            arguments = self.validator.validate(
                {} if raw_arguments is None else raw_arguments,
                definition.input_schema,
            )
        except SchemaValidationError as e:
            logger.info("Rejected arguments for %s: %s", procedure_name, e.message)
            return Failure(
                f"Invalid arguments for {procedure_name}: {e.message}",
                FailureKind.VALIDATION,
            )

        explicit_key = arguments.pop(API_KEY_ARGUMENT, None)
        api_key = None
        if definition.requires_credential:
            try:
                api_key = self.credentials.resolve(explicit_key)
            except AbsentCredentialError as e:
                logger.info("No credential for %s", procedure_name)
                return Failure(str(e), FailureKind.ABSENT_CREDENTIAL)

        try:
            client = self.client_factory(api_key) if api_key is not None else None
            payload = definition.handler(client, arguments)
        except DownstreamError as e:
            return Failure(str(e), FailureKind.DOWNSTREAM, provider_kind=e.kind)
        except Exception as e:
            logger.exception("Unexpected error in %s", procedure_name)
            return Failure(f"Unexpected error in {procedure_name}: {e}", FailureKind.INTERNAL)

        return Success(payload)

    def handle(self, request: InvocationRequest) -> InvocationResult:
        return self.dispatch(request.procedure_name, request.arguments)

    def call(self, procedure_name: str, raw_arguments: Any = None) -> dict:
        """Dispatch and render the result as a wire envelope."""
        return to_envelope(self.dispatch(procedure_name, raw_arguments))
