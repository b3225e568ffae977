"""
Quote formatter - plain text for the get_stock_price tool.

Stock: AAPL
Current Price: $150.00
Previous Close: $145.00
Change: $5.00 (3.45%)
Day High: $151.00
Day Low: $144.00
Volume: 1000000
"""

from stock_price.common.shapes import Quote


def calculate_change(price: float, previous_close: float) -> tuple[float, float]:
    """Absolute and percent change vs previous close (percent is 0 when close is 0)."""
    change = price - previous_close
    change_pct = (change / previous_close) * 100 if previous_close != 0 else 0.0
    return change, change_pct


def format_quote(quote: Quote) -> str:
    """Format quote as text. Day high/low and volume appear only when positive."""
    change, change_pct = calculate_change(quote.price, quote.previous_close)

    lines = [
        f"Stock: {quote.symbol}",
        f"Current Price: ${quote.price:.2f}",
        f"Previous Close: ${quote.previous_close:.2f}",
        f"Change: ${change:.2f} ({change_pct:.2f}%)",
    ]

    if quote.day_high > 0:
        lines.append(f"Day High: ${quote.day_high:.2f}")
    if quote.day_low > 0:
        lines.append(f"Day Low: ${quote.day_low:.2f}")
    if quote.volume > 0:
        lines.append(f"Volume: {quote.volume:.0f}")

    return "\n".join(lines)
