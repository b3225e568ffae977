"""Stock price MCP server: JSON-RPC over stdio (and HTTP) for get_stock_price."""
