"""Static informational resources served over MCP."""

INFO_URI = "stripe-tax://info"
DOCUMENTATION_URI = "stripe-tax://documentation"

STRIPE_TAX_INFO = (
    "Stripe Tax helps businesses calculate, collect, and report tax on their "
    "transactions. It supports tax calculations across multiple jurisdictions "
    "and provides features for tax exempt customers and tax reporting."
)

DOCUMENTATION_LINKS = [
    ("General overview", "https://docs.stripe.com/tax/custom"),
    ("Tax Settings API", "https://docs.stripe.com/api/tax/settings"),
    ("Tax Calculations API", "https://docs.stripe.com/api/tax/calculations"),
    ("Tax Calculations Line Items API", "https://docs.stripe.com/api/tax/calculation_line_items"),
    ("Tax Registrations API", "https://docs.stripe.com/api/tax/registrations"),
    ("Tax Codes API", "https://docs.stripe.com/api/tax_codes"),
    ("Products API (tax_code)", "https://docs.stripe.com/api/products"),
    ("Invoices API", "https://docs.stripe.com/api/invoices"),
    ("API Authentication", "https://docs.stripe.com/authentication"),
]


def documentation_text() -> str:
    lines = [f"- {title}: {url}" for title, url in DOCUMENTATION_LINKS]
    return "Stripe Tax Documentation References:\n\n" + "\n".join(lines)
