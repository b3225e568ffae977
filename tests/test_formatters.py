#!/usr/bin/env python3
"""Test quote text formatting."""

import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from mcp_stock_price.formatters.quotes import calculate_change, format_quote
from stock_price.common.shapes import Quote


def make_quote(**overrides: float) -> Quote:
    fields = {
        "price": 150.0,
        "previous_close": 145.0,
        "day_high": 151.0,
        "day_low": 144.0,
        "volume": 1000000.0,
    }
    fields.update(overrides)
    return Quote(symbol="AAPL", **fields)


def test_full_quote() -> None:
    """Test every line is present for a complete quote"""
    assert format_quote(make_quote()) == (
        "Stock: AAPL\n"
        "Current Price: $150.00\n"
        "Previous Close: $145.00\n"
        "Change: $5.00 (3.45%)\n"
        "Day High: $151.00\n"
        "Day Low: $144.00\n"
        "Volume: 1000000"
    )
    print("✓ Full quote formatting works")


def test_optional_lines_omitted() -> None:
    """Test day high/low and volume only appear when positive"""
    text = format_quote(make_quote(day_high=0.0, day_low=-1.0, volume=0.0))
    assert "Day High" not in text
    assert "Day Low" not in text
    assert "Volume" not in text
    assert text.endswith("Change: $5.00 (3.45%)")
    print("✓ Optional lines omitted")


def test_zero_previous_close() -> None:
    """Test zero previous close reports 0.00% without dividing"""
    text = format_quote(make_quote(previous_close=0.0))
    assert "Previous Close: $0.00" in text
    assert "Change: $150.00 (0.00%)" in text
    print("✓ Zero previous close handled")


def test_negative_change() -> None:
    text = format_quote(make_quote(price=145.0, previous_close=150.0))
    assert "Change: $-5.00 (-3.33%)" in text


def test_calculate_change() -> None:
    assert calculate_change(110.0, 100.0) == (10.0, 10.0)
    assert calculate_change(5.0, 0.0) == (5.0, 0.0)


if __name__ == "__main__":
    test_full_quote()
    test_optional_lines_omitted()
    test_zero_previous_close()
    print("\nAll formatter tests passed! ✓")
