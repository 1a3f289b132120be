# =============================================================================
# stripe_tax/__init__.py
# =============================================================================
# This package contains the tool-dispatch core for the Stripe Tax server.
#
# CRITICAL ARCHITECTURAL RULE:
#   Nothing in this package imports FastMCP or any transport framework.
#   The registry, validator, credential resolver, handlers and envelope
#   builder are plain Python.  Handlers talk to Stripe through a client
#   object handed to them, so every module here can be exercised with a
#   stub client and no network access.
#
# THE PIPELINE (one invocation):
#   Dispatcher (lookup by name)
#     → SchemaValidator   (reject malformed arguments)
#     → CredentialResolver (explicit apiKey, else STRIPE_API_KEY)
#     → handler            (exactly one Stripe call)
#     → to_envelope        (uniform wire shape)
# =============================================================================

from stripe_tax.config import Settings, load_settings
from stripe_tax.credentials import CredentialResolver
from stripe_tax.dispatcher import Dispatcher
from stripe_tax.envelope import to_envelope
from stripe_tax.errors import (
    AbsentCredentialError,
    DownstreamError,
    StripeTaxError,
    UnknownProcedureError,
)
from stripe_tax.models import (
    Failure,
    FailureKind,
    InvocationRequest,
    ProcedureDefinition,
    Success,
)
from stripe_tax.registry import ToolRegistry, build_registry
from stripe_tax.validation import SchemaValidationError, SchemaValidator

__version__ = "1.0.0"

__all__ = [
    "AbsentCredentialError",
    "CredentialResolver",
    "Dispatcher",
    "DownstreamError",
    "Failure",
    "FailureKind",
    "InvocationRequest",
    "ProcedureDefinition",
    "SchemaValidationError",
    "SchemaValidator",
    "Settings",
    "StripeTaxError",
    "Success",
    "ToolRegistry",
    "UnknownProcedureError",
    "build_registry",
    "load_settings",
    "to_envelope",
]
