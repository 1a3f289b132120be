# =============================================================================
# stripe_tax/models.py  —  Data Models (the "nouns" of the dispatch core)
# =============================================================================
#
# These dataclasses define the shape of everything that flows through one
# invocation: the procedure being called, the request that names it, and
# the result that comes back.  They carry no behavior.
#
# RESULT TYPE:
#   Inside the core, failures travel as exceptions (see errors.py).  At the
#   dispatcher boundary they are converted into an explicit InvocationResult,
#   either Success or Failure, so the envelope builder inspects a value
#   instead of catching anything.
# =============================================================================

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Optional, Union


# -----------------------------------------------------------------------------
# ProcedureDefinition — one registered tool
# -----------------------------------------------------------------------------
# Created once at process start by registry.build_registry() and never
# mutated afterwards (frozen).  The handler receives a Stripe client (or
# None when the procedure needs no credential) plus the validated,
# narrowed argument dict.
# -----------------------------------------------------------------------------
Handler = Callable[[Any, dict], Any]


@dataclass(frozen=True)
class ProcedureDefinition:
    """A named procedure bound to its input schema and handler."""

    name: str                          # Unique tool name, e.g. "getTaxSettings"
    description: str                   # Shown to MCP clients when listing tools
    input_schema: dict                 # Draft 7 JSON Schema for the arguments
    handler: Handler                   # handler(client, arguments) -> payload
    requires_credential: bool = True   # False skips the credential resolver


@dataclass(frozen=True)
class InvocationRequest:
    """A single call: which procedure, with which untyped arguments."""

    procedure_name: str
    arguments: dict = field(default_factory=dict)


class FailureKind(str, Enum):
    """Category of a failed invocation."""

    UNKNOWN_PROCEDURE = "UNKNOWN_PROCEDURE"
    VALIDATION = "VALIDATION"
    ABSENT_CREDENTIAL = "ABSENT_CREDENTIAL"
    DOWNSTREAM = "DOWNSTREAM"
    INTERNAL = "INTERNAL"


@dataclass(frozen=True)
class Success:
    """The handler returned normally; payload is JSON-serializable."""

    payload: Any

    @property
    def is_error(self) -> bool:
        return False


@dataclass(frozen=True)
class Failure:
    """The invocation failed; message is shown to the caller."""

    message: str
    kind: FailureKind = FailureKind.INTERNAL
    provider_kind: Optional[str] = None  # e.g. "AuthenticationError"

    @property
    def is_error(self) -> bool:
        return True


InvocationResult = Union[Success, Failure]
