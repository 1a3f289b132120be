"""Response Envelope Builder: the one place that defines the wire shape."""

import json
from typing import Any

from stripe_tax.models import Failure, InvocationResult


def to_envelope(result: InvocationResult) -> dict[str, Any]:
    """Convert an InvocationResult into the tool-result envelope.

    Success -> payload pretty-printed as JSON, isError False.
    Failure -> "Error: <message>", isError True.
    """
    if isinstance(result, Failure):
        text = f"Error: {result.message}"
    else:
        text = json.dumps(result.payload, indent=2, ensure_ascii=False, default=str)

    return {
        "content": [{"type": "text", "text": text}],
        "isError": result.is_error,
    }
