#!/usr/bin/env python3
"""
MCP Tool Definitions - Single Source of Truth

Tool definitions shared between server.py (stdio) and server_http.py (HTTP).
Define tools once, import everywhere.
"""

from mcp.types import Tool

GET_STOCK_PRICE = "get_stock_price"


def get_mcp_tools() -> list[Tool]:
    """
    Return list of MCP tools.

    Single source of truth for tool definitions.
    Both stdio and HTTP servers reach this through handlers.handle_tools_list().
    """
    return [
        Tool(
            name=GET_STOCK_PRICE,
            description="Get current stock price and basic info for a company using Yahoo Finance",
            inputSchema={
                "type": "object",
                "properties": {
                    "symbol": {
                        "type": "string",
                        "description": "Stock symbol (e.g., AAPL, GOOGL, MSFT, TSLA)",
                    }
                },
                "required": ["symbol"]
            }
        ),
    ]
