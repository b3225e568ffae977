"""
Stock quote services.

Fetches a quote from Yahoo Finance by trying a fixed, ordered list of
endpoints. The first endpoint returning a recognized payload with a
non-zero price wins; failures on individual endpoints are logged and skipped.
"""

import logging
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any
from urllib.parse import quote as url_quote

import requests

from stock_price.common.constants import (
    CHART_URL_TEMPLATE,
    QUOTE_URL_TEMPLATE,
    REQUEST_TIMEOUT_SECONDS,
    USER_AGENT,
)
from stock_price.common.shapes import (
    Quote,
    UnrecognizedPayload,
    parse_provider_payload,
)

logger = logging.getLogger(__name__)


class QuoteUnavailableError(Exception):
    """No endpoint produced usable quote data for a symbol"""

    def __init__(self, symbol: str) -> None:
        self.symbol = symbol
        super().__init__(f"Unable to fetch data for symbol: {symbol}")


@dataclass(frozen=True)
class QuoteEndpoint:
    """One candidate provider endpoint"""

    name: str
    url_template: str

    def url_for(self, symbol: str) -> str:
        return self.url_template.format(symbol=url_quote(symbol, safe=""))


ENDPOINTS: tuple[QuoteEndpoint, ...] = (
    QuoteEndpoint("chart", CHART_URL_TEMPLATE),
    QuoteEndpoint("quote", QUOTE_URL_TEMPLATE),
)


def normalize_symbol(symbol: str) -> str:
    """Strip and uppercase a ticker symbol: " aapl " -> "AAPL" """
    return symbol.strip().upper()


def iter_endpoint_urls(symbol: str) -> Iterator[tuple[QuoteEndpoint, str]]:
    """Yield (endpoint, url) pairs in fallback order for one lookup."""
    for endpoint in ENDPOINTS:
        yield endpoint, endpoint.url_for(symbol)


def fetch_json(url: str) -> Any | None:  # noqa: ANN401
    """GET url and decode JSON. Returns None on transport or decode failure."""
    try:
        response = requests.get(
            url,
            headers={"User-Agent": USER_AGENT},
            timeout=REQUEST_TIMEOUT_SECONDS,
        )
    except requests.RequestException as e:
        logger.warning(f"GET {url} failed: {e}")
        return None

    if response.status_code != requests.codes.ok:
        # Yahoo error bodies are still JSON, let the shape check reject them
        logger.info(f"GET {url} returned HTTP {response.status_code}")

    try:
        return response.json()
    except (ValueError, RecursionError) as e:
        logger.warning(f"GET {url} returned undecodable body: {e}")
        return None


def try_endpoint(endpoint: QuoteEndpoint, url: str, symbol: str) -> Quote | None:
    """Fetch one endpoint and extract a quote, or None on any miss."""
    data = fetch_json(url)
    if data is None:
        return None

    payload = parse_provider_payload(data)
    if isinstance(payload, UnrecognizedPayload):
        logger.warning(
            f"{endpoint.name} endpoint returned unrecognized payload for {symbol} "
            f"(keys={list(payload.keys)})"
        )
        return None

    quote = payload.to_quote(symbol)
    if not quote.has_price:
        logger.info(f"{endpoint.name} endpoint returned no price for {symbol}")
        return None

    return quote


def get_stock_quote(symbol: str) -> Quote:
    """Fetch a quote for symbol, falling back across endpoints.

    Args:
        symbol: Ticker symbol; normalized (stripped, uppercased) before use.

    Returns:
        Quote from the first endpoint with usable data.

    Raises:
        QuoteUnavailableError: every endpoint missed.
    """
    symbol = normalize_symbol(symbol)

    for endpoint, url in iter_endpoint_urls(symbol):
        quote = try_endpoint(endpoint, url, symbol)
        if quote is not None:
            logger.info(f"get_stock_quote({symbol}) served by {endpoint.name} endpoint")
            return quote

    raise QuoteUnavailableError(symbol)
