"""Shared fixtures: stub Stripe client, dispatchers, and Stripe-shaped data."""

import copy
from unittest.mock import MagicMock

import pytest

from stripe_tax import CredentialResolver, Dispatcher, build_registry

TAX_BREAKDOWN = [
    {
        "amount": 86,
        "jurisdiction": {"country": "US", "display_name": "California", "level": "state", "state": "CA"},
        "sourcing": "destination",
        "tax_rate_details": {"percentage_decimal": "8.625", "tax_type": "sales_tax"},
        "taxability_reason": "standard_rated",
        "taxable_amount": 1000,
    }
]

LINE_ITEM = {
    "id": "tax_li_123",
    "object": "tax.calculation_line_item",
    "amount": 1000,
    "amount_tax": 86,
    "reference": "test_product",
    "tax_behavior": "exclusive",
    "tax_breakdown": TAX_BREAKDOWN,
    "tax_code": "txcd_99999999",
}

CALCULATION = {
    "id": "taxcalc_123",
    "object": "tax.calculation",
    "amount_total": 1086,
    "currency": "usd",
    "tax_amount_exclusive": 86,
    "tax_breakdown": [{"amount": 86, "tax_rate_details": {"percentage_decimal": "8.625"}}],
    "line_items": {
        "object": "list",
        "data": [LINE_ITEM],
        "has_more": False,
        "url": "/v1/tax/calculations/taxcalc_123/line_items",
    },
}

LINE_ITEM_LIST = {
    "object": "list",
    "data": [LINE_ITEM],
    "has_more": False,
    "url": "/v1/tax/calculations/taxcalc_123/line_items",
}

CALCULATION_PARAMS = {
    "currency": "usd",
    "customer_details": {
        "address": {
            "country": "US",
            "line1": "123 Main St",
            "city": "San Francisco",
            "state": "CA",
            "postal_code": "94105",
        },
        "address_source": "shipping",
    },
    "line_items": [{"amount": 1000, "reference": "test_product", "tax_behavior": "exclusive"}],
}

PRODUCT = {
    "id": "prod_simulated123456",
    "object": "product",
    "active": True,
    "name": "Test Product for Tax Code",
    "tax_code": "txcd_30060006",
}


@pytest.fixture
def calculation():
    return copy.deepcopy(CALCULATION)


@pytest.fixture
def line_item_list():
    return copy.deepcopy(LINE_ITEM_LIST)


@pytest.fixture
def calculation_params():
    return copy.deepcopy(CALCULATION_PARAMS)


@pytest.fixture
def product():
    return copy.deepcopy(PRODUCT)


@pytest.fixture
def stripe_client():
    """Stand-in for stripe.StripeClient; records every call made on it."""
    return MagicMock(name="StripeClient")


@pytest.fixture
def client_keys():
    """API keys passed to the client factory, in call order."""
    return []


@pytest.fixture
def client_factory(stripe_client, client_keys):
    def factory(api_key):
        client_keys.append(api_key)
        return stripe_client

    return factory


@pytest.fixture
def make_dispatcher(client_factory):
    def _make(fallback=None, registry=None):
        return Dispatcher(
            build_registry() if registry is None else registry,
            CredentialResolver(fallback),
            client_factory=client_factory,
        )

    return _make


@pytest.fixture
def dispatcher(make_dispatcher):
    """Dispatcher with no fallback key configured."""
    return make_dispatcher()
