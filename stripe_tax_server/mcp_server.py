# =============================================================================
# stripe_tax_server/mcp_server.py  —  FastMCP Server (tools, prompts, resources)
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Exposes the stripe_tax dispatch core over MCP.  Every procedure in the
#   registry becomes one FastMCP tool; the prompt templates and static
#   resources are registered alongside them.
#
# HOW A TOOL CALL FLOWS:
#   1. An MCP client calls a tool by name (e.g. "retrieveTaxCalculation")
#   2. FastMCP routes it to ProcedureTool.run with the raw argument dict
#   3. ProcedureTool hands the name + arguments to the Dispatcher, on a
#      worker thread so a slow Stripe call does not block other calls
#   4. The Dispatcher returns a wire envelope (see stripe_tax/envelope.py)
#   5. Success envelopes become a text tool result; failure envelopes are
#      raised as ToolError, which MCP reports with isError: true
#
# WHY A CUSTOM Tool SUBCLASS:
#   FastMCP normally derives a tool's schema from a Python signature.  Here
#   the schema already exists as data (stripe_tax/schemas.py), and the
#   dispatcher must see the RAW arguments so its own validator decides what
#   is acceptable.  ProcedureTool advertises the registry schema verbatim
#   and passes arguments through untouched.
#
# RUNNING THIS SERVER:
#   a) python main.py
#   b) python -m stripe_tax_server.mcp_server
#   Both speak MCP over stdio.
# =============================================================================

import functools
import json
import logging
import sys
from typing import Any, Optional

import anyio
from fastmcp import FastMCP
from fastmcp.exceptions import ToolError
from fastmcp.tools import Tool
from fastmcp.tools.tool import ToolResult
from mcp.types import TextContent

from stripe_tax import CredentialResolver, Dispatcher, Settings, build_registry, load_settings
from stripe_tax.dispatcher import API_KEY_ARGUMENT, ClientFactory
from stripe_tax.registry import ToolRegistry
from stripe_tax_server import prompts, resources

# =============================================================================
# Logging Setup
# =============================================================================
# We log to STDERR because the MCP server communicates with the client via
# STDOUT.  Anything printed to stdout would corrupt the JSON-RPC stream.
#
# ANSI COLOR CODES:
#     - CYAN for incoming requests (tool name + parameters)
#     - GREEN for successful responses
#     - RED for error responses
#     - YELLOW for status messages
# =============================================================================

_CYAN = "\033[36m"
_GREEN = "\033[32m"
_RED = "\033[31m"
_YELLOW = "\033[33m"
_RESET = "\033[0m"

logger = logging.getLogger("stripe_tax_server")


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s [MCP] %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )


def _redact(arguments: Any) -> Any:
    if isinstance(arguments, dict) and arguments.get(API_KEY_ARGUMENT):
        return {**arguments, API_KEY_ARGUMENT: "***"}
    return arguments


def _log_request(tool_name: str, arguments: Any) -> None:
    """Log an incoming tool call in CYAN.  The apiKey is never logged."""
    logger.info(f"{_CYAN}{tool_name} called with: {json.dumps(_redact(arguments), default=str)}{_RESET}")


def _log_status(message: str) -> None:
    logger.info(f"{_YELLOW}  → {message}{_RESET}")


def _log_response(tool_name: str, envelope: dict) -> dict:
    """Log the envelope (GREEN on success, RED on error), then return it."""
    color = _RED if envelope["isError"] else _GREEN
    text = envelope["content"][0]["text"]
    if not envelope["isError"]:
        text = f"{len(text)} chars"
    logger.info(f"{color}  ← {tool_name} response: {text}{_RESET}")
    return envelope


# =============================================================================
# ProcedureTool — one registry entry exposed as a FastMCP tool
# =============================================================================
class ProcedureTool(Tool):
    """FastMCP tool that forwards raw arguments to the Dispatcher."""

    dispatcher: Any

    async def run(self, arguments: dict[str, Any]) -> ToolResult:
        _log_request(self.name, arguments)
        envelope = await anyio.to_thread.run_sync(
            functools.partial(self.dispatcher.call, self.name, arguments)
        )
        _log_response(self.name, envelope)

        text = envelope["content"][0]["text"]
        if envelope["isError"]:
            raise ToolError(text)
        return ToolResult(content=[TextContent(type="text", text=text)])


def register_tools(mcp: FastMCP, registry: ToolRegistry, dispatcher: Dispatcher) -> None:
    for definition in registry.definitions():
        mcp.add_tool(
            ProcedureTool(
                name=definition.name,
                description=definition.description,
                parameters=definition.input_schema,
                dispatcher=dispatcher,
            )
        )


# =============================================================================
# Resources — static informational text
# =============================================================================
def register_resources(mcp: FastMCP) -> None:
    @mcp.resource(resources.INFO_URI, name="stripe-tax-info", mime_type="text/plain")
    def stripe_tax_info() -> str:
        """What Stripe Tax is and what it does."""
        return resources.STRIPE_TAX_INFO

    @mcp.resource(resources.DOCUMENTATION_URI, name="stripe-tax-docs", mime_type="text/plain")
    def stripe_tax_docs() -> str:
        """Links to the Stripe Tax API documentation."""
        return resources.documentation_text()


# =============================================================================
# Prompts — natural-language requests that lead to a tool call
# =============================================================================
# Argument names are camelCase to match the tools' argument names.
# =============================================================================
def register_prompts(mcp: FastMCP) -> None:
    @mcp.prompt(name="get-tax-settings")
    def get_tax_settings(apiKey: Optional[str] = None) -> str:
        """Ask for the account's current tax settings."""
        return prompts.get_tax_settings_prompt(api_key=apiKey)

    @mcp.prompt(name="update-tax-settings")
    def update_tax_settings(
        country: str,
        taxBehavior: Optional[str] = None,
        taxCode: Optional[str] = None,
        apiKey: Optional[str] = None,
    ) -> str:
        """Ask to update the head office and default tax behavior / code."""
        return prompts.update_tax_settings_prompt(
            country, tax_behavior=taxBehavior, tax_code=taxCode, api_key=apiKey
        )

    @mcp.prompt(name="retrieve-tax-calculation")
    def retrieve_tax_calculation(calculationId: str, apiKey: Optional[str] = None) -> str:
        """Ask for a tax calculation by ID."""
        return prompts.retrieve_tax_calculation_prompt(calculationId, api_key=apiKey)

    @mcp.prompt(name="create-tax-calculation")
    def create_tax_calculation(
        currency: str,
        country: str,
        amount: int,
        apiKey: Optional[str] = None,
    ) -> str:
        """Ask to calculate tax for an amount and customer country."""
        return prompts.create_tax_calculation_prompt(currency, country, amount, api_key=apiKey)

    @mcp.prompt(name="list-tax-calculation-line-items")
    def list_tax_calculation_line_items(
        calculationId: str,
        limit: Optional[int] = None,
        apiKey: Optional[str] = None,
    ) -> str:
        """Ask for the line items of a tax calculation."""
        return prompts.list_tax_calculation_line_items_prompt(calculationId, limit=limit, api_key=apiKey)

    @mcp.prompt(name="list-tax-registrations")
    def list_tax_registrations(limit: Optional[int] = None, apiKey: Optional[str] = None) -> str:
        """Ask for the account's tax registrations."""
        return prompts.list_tax_registrations_prompt(limit=limit, api_key=apiKey)

    @mcp.prompt(name="get-product-tax-code")
    def get_product_tax_code(productId: str, apiKey: Optional[str] = None) -> str:
        """Ask which tax code a product uses."""
        return prompts.get_product_tax_code_prompt(productId, api_key=apiKey)

    @mcp.prompt(name="update-product-tax-code")
    def update_product_tax_code(productId: str, taxCode: str, apiKey: Optional[str] = None) -> str:
        """Ask to assign a tax code to a product."""
        return prompts.update_product_tax_code_prompt(productId, taxCode, api_key=apiKey)

    @mcp.prompt(name="list-invoices")
    def list_invoices(
        customer: Optional[str] = None,
        status: Optional[str] = None,
        limit: Optional[int] = None,
        apiKey: Optional[str] = None,
    ) -> str:
        """Ask for invoices, optionally by customer and status."""
        return prompts.list_invoices_prompt(customer=customer, status=status, limit=limit, api_key=apiKey)

    @mcp.prompt(name="retrieve-invoice")
    def retrieve_invoice(invoiceId: str, apiKey: Optional[str] = None) -> str:
        """Ask for an invoice and its line items."""
        return prompts.retrieve_invoice_prompt(invoiceId, api_key=apiKey)


# =============================================================================
# Server factory
# =============================================================================
def create_server(
    settings: Optional[Settings] = None,
    client_factory: Optional[ClientFactory] = None,
) -> FastMCP:
    """Build the FastMCP server with every tool, prompt and resource.

    Args:
        settings: Process settings; loaded from the environment when omitted.
        client_factory: Builds a Stripe client from an API key.  Defaults to
            stripe.StripeClient; tests pass a stub.
    """
    settings = settings or load_settings()
    registry = build_registry()
    dispatcher = Dispatcher(
        registry,
        CredentialResolver(settings.stripe_api_key),
        client_factory=client_factory,
    )

    mcp = FastMCP(settings.server_name)
    register_tools(mcp, registry, dispatcher)
    register_resources(mcp)
    register_prompts(mcp)
    return mcp


def main() -> None:
    settings = load_settings()
    configure_logging(settings.log_level)

    mcp = create_server(settings)
    if not settings.stripe_api_key:
        _log_status("STRIPE_API_KEY not set; every tool call must pass apiKey")
    logger.info("Stripe Tax API MCP Server started successfully!")
    mcp.run()


# =============================================================================
# Server entry point
# =============================================================================
if __name__ == "__main__":
    main()
