"""Schema Validator tests.

Test Coverage:
- Valid arguments accepted and narrowed to declared fields
- Defaults applied for omitted optional fields
- Required, type, enum and nested-required violations rejected
- Malformed schemas reported as SCHEMA_MALFORMED
"""

import pytest

from stripe_tax import schemas
from stripe_tax.validation import (
    SchemaValidationError,
    SchemaValidator,
    ValidationErrorCode,
)


@pytest.mark.unit
class TestSchemaValidator:
    """Generic validate-and-narrow behavior."""

    def test_valid_input_accepted(self) -> None:
        validator = SchemaValidator()

        schema = {
            "type": "object",
            "properties": {"name": {"type": "string"}, "age": {"type": "integer"}},
            "required": ["name"],
        }

        assert validator.validate({"name": "John", "age": 30}, schema) == {"name": "John", "age": 30}

    def test_unknown_fields_dropped(self) -> None:
        validator = SchemaValidator()

        result = validator.validate(
            {"apiKey": "k", "calculationId": "taxcalc_123", "bogus": True},
            schemas.RetrieveTaxCalculationSchema,
        )

        assert result == {"apiKey": "k", "calculationId": "taxcalc_123"}

    def test_unknown_nested_fields_dropped(self, calculation_params) -> None:
        validator = SchemaValidator()
        calculation_params["customer_details"]["address"]["planet"] = "Earth"
        calculation_params["line_items"][0]["color"] = "blue"

        result = validator.validate({"params": calculation_params}, schemas.CreateTaxCalculationSchema)

        assert "planet" not in result["params"]["customer_details"]["address"]
        assert "color" not in result["params"]["line_items"][0]
        assert result["params"]["line_items"][0]["amount"] == 1000

    def test_defaults_applied_for_omitted_fields(self) -> None:
        validator = SchemaValidator()

        schema = {
            "type": "object",
            "properties": {
                "mode": {"type": "string", "default": "live"},
                "name": {"type": "string"},
            },
        }

        assert validator.validate({"name": "x"}, schema) == {"name": "x", "mode": "live"}

    def test_omitted_optionals_without_default_stay_absent(self) -> None:
        validator = SchemaValidator()

        result = validator.validate({"limit": 3}, schemas.ListTaxRegistrationsSchema)

        assert result == {"limit": 3}

    def test_missing_required_field_rejected(self) -> None:
        validator = SchemaValidator()

        with pytest.raises(SchemaValidationError) as exc_info:
            validator.validate({}, schemas.RetrieveInvoiceSchema)

        error = exc_info.value
        assert error.code == ValidationErrorCode.SCHEMA_INVALID
        assert "invoiceId" in error.message

    def test_wrong_type_rejected(self) -> None:
        validator = SchemaValidator()

        with pytest.raises(SchemaValidationError) as exc_info:
            validator.validate({"limit": "three"}, schemas.ListTaxRegistrationsSchema)

        assert exc_info.value.path == "limit"

    def test_non_object_arguments_rejected(self) -> None:
        validator = SchemaValidator()

        with pytest.raises(SchemaValidationError) as exc_info:
            validator.validate(["not", "an", "object"], schemas.GetTaxSettingsSchema)

        assert exc_info.value.code == ValidationErrorCode.SCHEMA_INVALID

    def test_all_violations_reported(self) -> None:
        validator = SchemaValidator()

        with pytest.raises(SchemaValidationError) as exc_info:
            validator.validate({"limit": 0, "status": "sent"}, schemas.ListInvoicesSchema)

        assert len(exc_info.value.errors) == 2
        assert exc_info.value.errors[0].startswith("limit:")
        assert exc_info.value.errors[1].startswith("status:")

    def test_malformed_schema_reported(self) -> None:
        validator = SchemaValidator()

        with pytest.raises(SchemaValidationError) as exc_info:
            validator.validate({}, {"type": "not-a-type"})

        assert exc_info.value.code == ValidationErrorCode.SCHEMA_MALFORMED


@pytest.mark.unit
class TestProcedureSchemas:
    """Enum and nested-required rules of the procedure schemas."""

    def test_address_source_outside_enum_rejected(self, calculation_params) -> None:
        validator = SchemaValidator()
        calculation_params["customer_details"]["address_source"] = "mail"

        with pytest.raises(SchemaValidationError) as exc_info:
            validator.validate({"params": calculation_params}, schemas.CreateTaxCalculationSchema)

        assert exc_info.value.path == "params.customer_details.address_source"
        assert "mail" in exc_info.value.message

    def test_nested_required_country_missing_rejected(self, calculation_params) -> None:
        validator = SchemaValidator()
        del calculation_params["customer_details"]["address"]["country"]

        with pytest.raises(SchemaValidationError) as exc_info:
            validator.validate({"params": calculation_params}, schemas.CreateTaxCalculationSchema)

        assert exc_info.value.path == "params.customer_details.address"
        assert "'country' is a required property" in exc_info.value.message

    def test_empty_line_items_rejected(self, calculation_params) -> None:
        validator = SchemaValidator()
        calculation_params["line_items"] = []

        with pytest.raises(SchemaValidationError):
            validator.validate({"params": calculation_params}, schemas.CreateTaxCalculationSchema)

    @pytest.mark.parametrize("status", schemas.INVOICE_STATUS_ENUM)
    def test_invoice_status_enum_accepted(self, status) -> None:
        validator = SchemaValidator()

        assert validator.validate({"status": status}, schemas.ListInvoicesSchema) == {"status": status}

    def test_invoice_status_outside_enum_rejected(self) -> None:
        validator = SchemaValidator()

        with pytest.raises(SchemaValidationError) as exc_info:
            validator.validate({"status": "sent"}, schemas.ListInvoicesSchema)

        assert exc_info.value.path == "status"

    def test_empty_cursor_rejected(self) -> None:
        validator = SchemaValidator()

        with pytest.raises(SchemaValidationError):
            validator.validate({"starting_after": ""}, schemas.ListTaxCodesSchema)

    def test_limit_above_page_size_rejected(self) -> None:
        validator = SchemaValidator()

        with pytest.raises(SchemaValidationError):
            validator.validate({"limit": 101}, schemas.ListTaxCodesSchema)

    def test_settings_update_requires_a_field(self) -> None:
        validator = SchemaValidator()

        with pytest.raises(SchemaValidationError):
            validator.validate({"settings": {}}, schemas.UpdateTaxSettingsSchema)

    def test_head_office_requires_country(self) -> None:
        validator = SchemaValidator()

        with pytest.raises(SchemaValidationError) as exc_info:
            validator.validate(
                {"settings": {"head_office": {"address": {"city": "Dublin"}}}},
                schemas.UpdateTaxSettingsSchema,
            )

        assert exc_info.value.path == "settings.head_office.address"
