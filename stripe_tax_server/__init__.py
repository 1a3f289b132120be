# =============================================================================
# stripe_tax_server/__init__.py
# =============================================================================
# This package contains the FastMCP wiring for the Stripe Tax server.
#
# ARCHITECTURAL ROLE:
#   stripe_tax_server/ is the "translation layer" between MCP and the
#   dispatch core in stripe_tax/.  It:
#     1. Turns every registered procedure into a FastMCP tool
#     2. Registers the canned prompts (prompts.py)
#     3. Registers the static resources (resources.py)
#     4. Runs the server over stdio
#
# WHAT THIS PACKAGE DOES NOT DO:
#   - It does NOT validate arguments (the Dispatcher does)
#   - It does NOT call Stripe (the handlers do)
#   - It does NOT shape error text (the envelope builder does)
# =============================================================================
