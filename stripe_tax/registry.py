"""ToolRegistry: Central registry of procedure definitions.

`build_registry()` assembles the default catalogue, binding each tool name
to its input schema (schemas.py) and handler (handlers.py).
"""

import logging

from stripe_tax import handlers, schemas
from stripe_tax.errors import UnknownProcedureError
from stripe_tax.models import ProcedureDefinition

logger = logging.getLogger(__name__)


class ToolRegistry:
    """Central registry for procedure definitions.

    Provides:
    - Registration of procedures by unique name
    - Lookup by name (unknown names raise UnknownProcedureError)
    - Listing for the transport layer
    """

    def __init__(self) -> None:
        self._procedures: dict[str, ProcedureDefinition] = {}

    def register(self, definition: ProcedureDefinition) -> None:
        """Register a procedure.

        Raises:
            ValueError: If a procedure with the same name is already registered
        """
        if definition.name in self._procedures:
            raise ValueError(f"Procedure '{definition.name}' already registered")

        self._procedures[definition.name] = definition

    def lookup(self, name: str) -> ProcedureDefinition:
        """Look up a procedure by name.

        Raises:
            UnknownProcedureError: If no procedure has this name
        """
        if name not in self._procedures:
            raise UnknownProcedureError(name)

        return self._procedures[name]

    def __contains__(self, name: object) -> bool:
        return name in self._procedures

    def __len__(self) -> int:
        return len(self._procedures)

    def names(self) -> list[str]:
        return list(self._procedures)

    def definitions(self) -> list[ProcedureDefinition]:
        return list(self._procedures.values())


# (name, description, schema, handler)
_CATALOGUE = [
    (
        "getTaxSettings",
        "Retrieve the Stripe Tax settings for the account (head office, defaults, status).",
        schemas.GetTaxSettingsSchema,
        handlers.get_tax_settings,
    ),
    (
        "updateTaxSettings",
        "Update the Stripe Tax settings: default tax behavior / tax code and head office address.",
        schemas.UpdateTaxSettingsSchema,
        handlers.update_tax_settings,
    ),
    (
        "createTaxCalculation",
        "Create a tax calculation from a currency, customer address and line items. "
        "Line items are returned with their tax breakdown.",
        schemas.CreateTaxCalculationSchema,
        handlers.create_tax_calculation,
    ),
    (
        "retrieveTaxCalculation",
        "Retrieve a tax calculation by ID, including line items with their tax breakdown.",
        schemas.RetrieveTaxCalculationSchema,
        handlers.retrieve_tax_calculation,
    ),
    (
        "listTaxCalculationLineItems",
        "List the line items of a tax calculation (paginated), each with its tax breakdown.",
        schemas.ListTaxCalculationLineItemsSchema,
        handlers.list_tax_calculation_line_items,
    ),
    (
        "listTaxRegistrations",
        "List the account's tax registrations (paginated, optionally filtered by status).",
        schemas.ListTaxRegistrationsSchema,
        handlers.list_tax_registrations,
    ),
    (
        "retrieveTaxRegistration",
        "Retrieve a single tax registration by ID.",
        schemas.RetrieveTaxRegistrationSchema,
        handlers.retrieve_tax_registration,
    ),
    (
        "listTaxCodes",
        "List the product tax codes Stripe supports (paginated).",
        schemas.ListTaxCodesSchema,
        handlers.list_tax_codes,
    ),
    (
        "updateProductTaxCode",
        "Associate a tax code with a product.",
        schemas.UpdateProductTaxCodeSchema,
        handlers.update_product_tax_code,
    ),
    (
        "getProductTaxCode",
        "Retrieve a product and report its tax code and whether one is set.",
        schemas.GetProductTaxCodeSchema,
        handlers.get_product_tax_code,
    ),
    (
        "listInvoices",
        "List invoices (paginated), optionally filtered by customer ID and status.",
        schemas.ListInvoicesSchema,
        handlers.list_invoices,
    ),
    (
        "retrieveInvoice",
        "Retrieve an invoice by ID.",
        schemas.RetrieveInvoiceSchema,
        handlers.retrieve_invoice,
    ),
    (
        "retrieveInvoiceLineItems",
        "List the line items of an invoice (paginated).",
        schemas.RetrieveInvoiceLineItemsSchema,
        handlers.retrieve_invoice_line_items,
    ),
]


def build_registry() -> ToolRegistry:
    """Create a registry holding every Stripe Tax procedure."""
    registry = ToolRegistry()
    for name, description, input_schema, handler in _CATALOGUE:
        registry.register(
            ProcedureDefinition(
                name=name,
                description=description,
                input_schema=input_schema,
                handler=handler,
            )
        )
    logger.debug("Registered %d procedures", len(registry))
    return registry
