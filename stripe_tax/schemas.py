"""
Canonical JSON Schemas for every procedure's arguments.

Building blocks (API key, pagination, addresses) are declared once and
composed into the per-procedure schemas below.  The Validator enforces and
narrows against these, and the MCP server advertises them unchanged as the
tools' input schemas.
"""

from __future__ import annotations

import copy

# Enumerations accepted by Stripe for the fields we expose.
ADDRESS_SOURCE_ENUM = ["shipping", "billing"]
LINE_ITEM_TAX_BEHAVIOR_ENUM = ["exclusive", "inclusive"]
DEFAULT_TAX_BEHAVIOR_ENUM = ["inclusive", "exclusive", "inferred_by_currency"]
TAXABILITY_OVERRIDE_ENUM = ["none", "customer_exempt", "reverse_charge"]
REGISTRATION_STATUS_ENUM = ["active", "all", "expired", "scheduled"]
INVOICE_STATUS_ENUM = ["draft", "open", "paid", "uncollectible", "void"]

MAX_PAGE_SIZE = 100

API_KEY_PROPERTY: dict = {
    "type": "string",
    "description": "Your Stripe API key. Optional when STRIPE_API_KEY is set on the server.",
}

PAGINATION_PROPERTIES: dict = {
    "limit": {
        "type": "integer",
        "minimum": 1,
        "maximum": MAX_PAGE_SIZE,
        "description": "Maximum number of objects to return (1-100)",
    },
    "starting_after": {
        "type": "string",
        "minLength": 1,
        "description": "Pagination cursor for continuing from a previous list",
    },
    "ending_before": {
        "type": "string",
        "minLength": 1,
        "description": "Pagination cursor for returning results before this ID",
    },
}


def _id_property(description: str) -> dict:
    return {"type": "string", "minLength": 1, "description": description}


def _object(properties: dict, required: list[str] | None = None, **extra) -> dict:
    """Tool argument object: always accepts apiKey alongside its own fields."""
    schema = {
        "type": "object",
        "properties": {"apiKey": API_KEY_PROPERTY, **copy.deepcopy(properties)},
        "required": required or [],
    }
    schema.update(extra)
    return schema


AddressSchema: dict = {
    "type": "object",
    "properties": {
        "country": {"type": "string", "minLength": 2, "description": "Two-letter country code"},
        "line1": {"type": "string", "description": "Street address"},
        "line2": {"type": "string", "description": "Additional address details"},
        "city": {"type": "string", "description": "City"},
        "state": {"type": "string", "description": "State or province"},
        "postal_code": {"type": "string", "description": "Postal code"},
    },
    "required": ["country"],
}

TaxIdSchema: dict = {
    "type": "object",
    "properties": {
        "type": {"type": "string", "description": "Tax ID type (e.g. 'eu_vat')"},
        "value": {"type": "string", "description": "Tax ID value"},
    },
    "required": ["type", "value"],
}

CalculationLineItemSchema: dict = {
    "type": "object",
    "properties": {
        "amount": {"type": "integer", "description": "Amount in the currency's smallest unit"},
        "reference": {"type": "string", "description": "Your internal reference for this line item"},
        "tax_code": {"type": "string", "description": "The tax code for this line item"},
        "tax_behavior": {
            "type": "string",
            "enum": LINE_ITEM_TAX_BEHAVIOR_ENUM,
            "description": "How tax is applied to the line item",
        },
        "quantity": {"type": "integer", "minimum": 1},
        "product": {"type": "string", "description": "ID of a Stripe product"},
    },
    "required": ["amount"],
}

CalculationParamsSchema: dict = {
    "type": "object",
    "description": "Parameters for creating a tax calculation",
    "properties": {
        "currency": {"type": "string", "minLength": 3, "description": "Currency code (e.g. 'usd')"},
        "customer_details": {
            "type": "object",
            "properties": {
                "address": AddressSchema,
                "address_source": {
                    "type": "string",
                    "enum": ADDRESS_SOURCE_ENUM,
                    "description": "Source of the address",
                },
                "tax_ids": {"type": "array", "items": TaxIdSchema},
                "taxability_override": {"type": "string", "enum": TAXABILITY_OVERRIDE_ENUM},
            },
            "required": ["address", "address_source"],
        },
        "line_items": {"type": "array", "minItems": 1, "items": CalculationLineItemSchema},
        "tax_date": {"type": "integer", "description": "Unix timestamp to calculate tax as of"},
    },
    "required": ["currency", "customer_details", "line_items"],
}

TaxSettingsUpdateSchema: dict = {
    "type": "object",
    "description": "Tax settings to update",
    "properties": {
        "defaults": {
            "type": "object",
            "properties": {
                "tax_behavior": {"type": "string", "enum": DEFAULT_TAX_BEHAVIOR_ENUM},
                "tax_code": {"type": "string"},
            },
        },
        "head_office": {
            "type": "object",
            "properties": {"address": AddressSchema},
            "required": ["address"],
        },
    },
    "minProperties": 1,
}


GetTaxSettingsSchema = _object({})

UpdateTaxSettingsSchema = _object({"settings": TaxSettingsUpdateSchema}, ["settings"])

CreateTaxCalculationSchema = _object({"params": CalculationParamsSchema}, ["params"])

RetrieveTaxCalculationSchema = _object(
    {"calculationId": _id_property("The ID of the tax calculation to retrieve")},
    ["calculationId"],
)

ListTaxCalculationLineItemsSchema = _object(
    {
        "calculationId": _id_property("The ID of the tax calculation to list line items for"),
        **PAGINATION_PROPERTIES,
    },
    ["calculationId"],
)

ListTaxRegistrationsSchema = _object(
    {
        "status": {
            "type": "string",
            "enum": REGISTRATION_STATUS_ENUM,
            "description": "Only return registrations with this status",
        },
        **PAGINATION_PROPERTIES,
    }
)

RetrieveTaxRegistrationSchema = _object(
    {"registrationId": _id_property("The ID of the tax registration")},
    ["registrationId"],
)

ListTaxCodesSchema = _object(dict(PAGINATION_PROPERTIES))

UpdateProductTaxCodeSchema = _object(
    {
        "productId": _id_property("The ID of the product to update"),
        "taxCode": _id_property("The tax code to assign (e.g. 'txcd_10000000')"),
    },
    ["productId", "taxCode"],
)

GetProductTaxCodeSchema = _object(
    {"productId": _id_property("The ID of the product")},
    ["productId"],
)

ListInvoicesSchema = _object(
    {
        "customer": _id_property("Only return invoices for this customer ID"),
        "status": {
            "type": "string",
            "enum": INVOICE_STATUS_ENUM,
            "description": "Only return invoices with this status",
        },
        **PAGINATION_PROPERTIES,
    }
)

RetrieveInvoiceSchema = _object(
    {"invoiceId": _id_property("The ID of the invoice to retrieve")},
    ["invoiceId"],
)

RetrieveInvoiceLineItemsSchema = _object(
    {"invoiceId": _id_property("The ID of the invoice"), **PAGINATION_PROPERTIES},
    ["invoiceId"],
)
