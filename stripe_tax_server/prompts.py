# =============================================================================
# stripe_tax_server/prompts.py  —  Canned natural-language prompt templates
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Builds the user messages behind the server's MCP prompts.  Each builder
#   interpolates caller-supplied strings into a fixed sentence that asks
#   the model to use one of the tools.
#
# API KEYS IN PROMPTS:
#   When the server has STRIPE_API_KEY configured, callers need not pass a
#   key at all, so the "using this API key" clause is only appended when a
#   key was actually supplied.
# =============================================================================

from typing import Optional


def _with_key(text: str, api_key: Optional[str]) -> str:
    if api_key:
        return f"{text} using this API key: {api_key}"
    return text


def _limit_clause(limit: Optional[int]) -> str:
    return f" (limit: {limit})" if limit else ""


def get_tax_settings_prompt(api_key: Optional[str] = None) -> str:
    return _with_key("Retrieve the current tax settings for my Stripe account", api_key)


def update_tax_settings_prompt(
    country: str,
    tax_behavior: Optional[str] = None,
    tax_code: Optional[str] = None,
    api_key: Optional[str] = None,
) -> str:
    lines = [
        "Update my Stripe tax settings with the following information:",
        f"Head office country: {country}",
    ]
    if tax_behavior:
        lines.append(f"Default tax behavior: {tax_behavior}")
    if tax_code:
        lines.append(f"Default tax code: {tax_code}")
    if api_key:
        lines.append(f"Use this API key: {api_key}")
    return "\n".join(lines)


def retrieve_tax_calculation_prompt(calculation_id: str, api_key: Optional[str] = None) -> str:
    return _with_key(f"Retrieve the tax calculation with ID '{calculation_id}'", api_key)


def create_tax_calculation_prompt(
    currency: str,
    country: str,
    amount: int,
    api_key: Optional[str] = None,
) -> str:
    return _with_key(
        f"Create a tax calculation for a customer in {country} "
        f"with an amount of {amount} {currency}",
        api_key,
    )


def list_tax_calculation_line_items_prompt(
    calculation_id: str,
    limit: Optional[int] = None,
    api_key: Optional[str] = None,
) -> str:
    return _with_key(
        f"List the line items for tax calculation with ID '{calculation_id}'{_limit_clause(limit)}",
        api_key,
    )


def list_tax_registrations_prompt(limit: Optional[int] = None, api_key: Optional[str] = None) -> str:
    return _with_key(
        f"List all tax registrations for my Stripe account{_limit_clause(limit)}",
        api_key,
    )


def get_product_tax_code_prompt(product_id: str, api_key: Optional[str] = None) -> str:
    return _with_key(f"Retrieve the tax code associated with product '{product_id}'", api_key)


def update_product_tax_code_prompt(
    product_id: str,
    tax_code: str,
    api_key: Optional[str] = None,
) -> str:
    return _with_key(f"Set the tax code of product '{product_id}' to '{tax_code}'", api_key)


def list_invoices_prompt(
    customer: Optional[str] = None,
    status: Optional[str] = None,
    limit: Optional[int] = None,
    api_key: Optional[str] = None,
) -> str:
    text = "List invoices for my Stripe account"
    if customer:
        text += f" for customer '{customer}'"
    if status:
        text += f" with status '{status}'"
    return _with_key(text + _limit_clause(limit), api_key)


def retrieve_invoice_prompt(invoice_id: str, api_key: Optional[str] = None) -> str:
    return _with_key(
        f"Retrieve the invoice with ID '{invoice_id}' and list its line items",
        api_key,
    )
