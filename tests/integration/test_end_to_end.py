"""End-to-end dispatch: raw arguments in, wire envelope out."""

import json

import pytest

from stripe_tax import build_registry

RETRIEVED = {
    "id": "taxcalc_123",
    "object": "tax.calculation",
    "amount_total": 1000,
    "currency": "usd",
    "tax_breakdown": [],
}


@pytest.mark.integration
class TestDispatchEnvelope:
    def test_retrieve_calculation_payload_verbatim(self, dispatcher, stripe_client, client_keys) -> None:
        stripe_client.tax.calculations.retrieve.return_value = dict(RETRIEVED)

        envelope = dispatcher.call("retrieveTaxCalculation", {"apiKey": "k", "calculationId": "taxcalc_123"})

        assert envelope["isError"] is False
        assert len(envelope["content"]) == 1
        assert json.loads(envelope["content"][0]["text"]) == RETRIEVED
        assert client_keys == ["k"]

    def test_missing_credential_envelope(self, dispatcher, stripe_client) -> None:
        envelope = dispatcher.call("getTaxSettings", {})

        assert envelope["isError"] is True
        assert envelope["content"][0]["text"].startswith("Error: ")
        assert "API key" in envelope["content"][0]["text"]
        assert stripe_client.mock_calls == []

    def test_validation_envelope(self, make_dispatcher) -> None:
        envelope = make_dispatcher(fallback="sk_test_fallback").call("listTaxRegistrations", {"limit": 500})

        assert envelope["isError"] is True
        assert "Invalid arguments for listTaxRegistrations" in envelope["content"][0]["text"]

    def test_create_calculation_round_trip(
        self, make_dispatcher, stripe_client, calculation_params, calculation
    ) -> None:
        stripe_client.tax.calculations.create.return_value = calculation
        raw = {"params": {**calculation_params, "unexpected": True}}

        envelope = make_dispatcher(fallback="sk_test_fallback").call("createTaxCalculation", raw)

        sent = stripe_client.tax.calculations.create.call_args.kwargs["params"]
        assert "unexpected" not in sent
        assert sent["customer_details"]["address_source"] == "shipping"
        body = json.loads(envelope["content"][0]["text"])
        assert body["line_items"]["data"][0]["tax_breakdown"][0]["taxable_amount"] == 1000

    def test_line_item_shape_matches_between_procedures(
        self, make_dispatcher, stripe_client, calculation, line_item_list
    ) -> None:
        stripe_client.tax.calculations.retrieve.return_value = calculation
        stripe_client.tax.calculations.line_items.list.return_value = line_item_list
        dispatcher = make_dispatcher(fallback="sk_test_fallback")

        retrieved = json.loads(
            dispatcher.call("retrieveTaxCalculation", {"calculationId": "taxcalc_123"})["content"][0]["text"]
        )
        listed = json.loads(
            dispatcher.call("listTaxCalculationLineItems", {"calculationId": "taxcalc_123"})["content"][0]["text"]
        )

        assert retrieved["line_items"]["data"] == listed["data"]
        retrieve_expand = stripe_client.tax.calculations.retrieve.call_args.kwargs["params"]["expand"]
        list_expand = stripe_client.tax.calculations.line_items.list.call_args.kwargs["params"]["expand"]
        assert [f"line_items.{path}" for path in list_expand] == [
            path for path in retrieve_expand if path.startswith("line_items.")
        ]

    def test_every_procedure_succeeds_with_minimal_arguments(self, make_dispatcher, stripe_client) -> None:
        minimal = {
            "updateTaxSettings": {"settings": {"defaults": {"tax_behavior": "exclusive"}}},
            "createTaxCalculation": {
                "params": {
                    "currency": "usd",
                    "customer_details": {"address": {"country": "US"}, "address_source": "billing"},
                    "line_items": [{"amount": 500}],
                }
            },
            "retrieveTaxCalculation": {"calculationId": "taxcalc_1"},
            "listTaxCalculationLineItems": {"calculationId": "taxcalc_1"},
            "retrieveTaxRegistration": {"registrationId": "taxreg_1"},
            "updateProductTaxCode": {"productId": "prod_1", "taxCode": "txcd_10000000"},
            "getProductTaxCode": {"productId": "prod_1"},
            "retrieveInvoice": {"invoiceId": "in_1"},
            "retrieveInvoiceLineItems": {"invoiceId": "in_1"},
        }
        dispatcher = make_dispatcher(fallback="sk_test_fallback")

        for name in build_registry().names():
            stripe_client.reset_mock()
            stripe_client.products.retrieve.return_value = {"id": "prod_1", "tax_code": None}

            envelope = dispatcher.call(name, minimal.get(name, {}))

            assert envelope["isError"] is False, envelope["content"][0]["text"]
