# =============================================================================
# main.py  —  Entry Point for the Stripe Tax MCP Server
# =============================================================================
#
# HOW TO RUN:
#   uv run python main.py        (or the `stripe-tax-mcp` console script)
#
# WHAT HAPPENS:
#   1. .env is loaded and Settings are read once (stripe_tax/config.py)
#   2. Logging is pointed at stderr
#   3. The registry of thirteen Stripe Tax procedures is built
#   4. The FastMCP server starts speaking MCP over stdin/stdout
#
# CONNECTING A CLIENT:
#   Point any MCP client at this script with stdio transport, e.g.
#     {"command": "uv", "args": ["run", "python", "main.py"],
#      "env": {"STRIPE_API_KEY": "sk_test_..."}}
#   STRIPE_API_KEY is optional; without it every tool call must pass apiKey.
# =============================================================================

from stripe_tax_server.mcp_server import main

if __name__ == "__main__":
    main()
