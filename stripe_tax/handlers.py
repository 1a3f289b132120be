# =============================================================================
# stripe_tax/handlers.py  —  Operation Handlers (one Stripe call each)
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Holds one function per procedure.  Every handler has the same shape:
#
#       handler(client, arguments) -> payload
#
#   where `client` is a stripe.StripeClient built for the resolved key and
#   `arguments` has already been validated and narrowed (apiKey removed).
#
# HANDLER RULES:
#   - Exactly ONE call on `client`.  No retries, no fan-out.
#   - Stripe failures are caught by @stripe_call and re-raised as a single
#     DownstreamError naming the operation and Stripe's message.
#   - The Stripe object returned is converted to plain dicts/lists so the
#     envelope builder can serialize it.
#   - List handlers forward only the options the caller supplied (see
#     pagination.py).
#
# EXPANSION:
#   A line item's tax_breakdown is not included by Stripe unless expanded.
#   The same constants are used everywhere a calculation or its line items
#   are produced, so createTaxCalculation, retrieveTaxCalculation and
#   listTaxCalculationLineItems always return the same line-item shape.
# =============================================================================

import functools
import logging
from collections.abc import Mapping
from typing import Any, Callable

import stripe

from stripe_tax.errors import DownstreamError
from stripe_tax.pagination import PaginationOptions, sparse

logger = logging.getLogger(__name__)

CALCULATION_EXPAND = ["line_items", "line_items.data.tax_breakdown"]
LINE_ITEM_LIST_EXPAND = ["data.tax_breakdown"]


def to_plain(value: Any) -> Any:
    """Recursively convert Stripe objects into plain dicts and lists."""
    if isinstance(value, Mapping):
        return {key: to_plain(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_plain(item) for item in value]
    return value


def stripe_call(action: str) -> Callable:
    """Wrap a handler so Stripe failures surface as DownstreamError.

    Args:
        action: Operation description used in the error message,
            e.g. "retrieve tax calculation"
    """

    def decorator(fn: Callable) -> Callable:
        @functools.wraps(fn)
        def wrapper(client: Any, arguments: dict) -> Any:
            try:
                return to_plain(fn(client, arguments))
            except stripe.StripeError as e:
                message = e.user_message or str(e) or type(e).__name__
                logger.warning("Stripe error during %s: %s", action, message)
                raise DownstreamError(action, message, kind=type(e).__name__) from e

        wrapper.action = action
        return wrapper

    return decorator


def _list_params(arguments: dict, *filters: str) -> dict:
    params = sparse(arguments, filters)
    params.update(PaginationOptions.from_arguments(arguments).to_params())
    return params


# -----------------------------------------------------------------------------
# Tax settings
# -----------------------------------------------------------------------------
@stripe_call("retrieve tax settings")
def get_tax_settings(client, arguments):
    return client.tax.settings.retrieve()


@stripe_call("update tax settings")
def update_tax_settings(client, arguments):
    return client.tax.settings.update(params=arguments["settings"])


# -----------------------------------------------------------------------------
# Tax calculations
# -----------------------------------------------------------------------------
@stripe_call("create tax calculation")
def create_tax_calculation(client, arguments):
    params = {**arguments["params"], "expand": list(CALCULATION_EXPAND)}
    return client.tax.calculations.create(params=params)


@stripe_call("retrieve tax calculation")
def retrieve_tax_calculation(client, arguments):
    return client.tax.calculations.retrieve(
        arguments["calculationId"],
        params={"expand": list(CALCULATION_EXPAND)},
    )


@stripe_call("list tax calculation line items")
def list_tax_calculation_line_items(client, arguments):
    params = _list_params(arguments)
    params["expand"] = list(LINE_ITEM_LIST_EXPAND)
    return client.tax.calculations.line_items.list(arguments["calculationId"], params=params)


# -----------------------------------------------------------------------------
# Tax registrations and tax codes
# -----------------------------------------------------------------------------
@stripe_call("list tax registrations")
def list_tax_registrations(client, arguments):
    return client.tax.registrations.list(params=_list_params(arguments, "status"))


@stripe_call("retrieve tax registration")
def retrieve_tax_registration(client, arguments):
    return client.tax.registrations.retrieve(arguments["registrationId"])


@stripe_call("list tax codes")
def list_tax_codes(client, arguments):
    return client.tax_codes.list(params=_list_params(arguments))


# -----------------------------------------------------------------------------
# Products
# -----------------------------------------------------------------------------
@stripe_call("update product tax code")
def update_product_tax_code(client, arguments):
    return client.products.update(
        arguments["productId"],
        params={"tax_code": arguments["taxCode"]},
    )


@stripe_call("retrieve product tax code")
def get_product_tax_code(client, arguments):
    product = to_plain(client.products.retrieve(arguments["productId"]))
    tax_code = product.get("tax_code")
    # tax_code is an ID string unless the caller's account expands it
    if isinstance(tax_code, Mapping):
        tax_code = tax_code.get("id")
    return {
        "product": product,
        "tax_code": tax_code,
        "has_tax_code": bool(tax_code),
    }


# -----------------------------------------------------------------------------
# Invoices
# -----------------------------------------------------------------------------
@stripe_call("list invoices")
def list_invoices(client, arguments):
    return client.invoices.list(params=_list_params(arguments, "customer", "status"))


@stripe_call("retrieve invoice")
def retrieve_invoice(client, arguments):
    return client.invoices.retrieve(arguments["invoiceId"])


@stripe_call("retrieve invoice line items")
def retrieve_invoice_line_items(client, arguments):
    return client.invoices.line_items.list(arguments["invoiceId"], params=_list_params(arguments))
