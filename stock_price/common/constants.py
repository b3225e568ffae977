"""Provider constants for Yahoo Finance quote lookups."""

# Endpoint templates, tried in order. {symbol} is URL-escaped on substitution.
CHART_URL_TEMPLATE = "https://query1.finance.yahoo.com/v8/finance/chart/{symbol}"
QUOTE_URL_TEMPLATE = "https://query2.finance.yahoo.com/v1/finance/quoteResponse?symbols={symbol}"

REQUEST_TIMEOUT_SECONDS = 10

# Yahoo rejects requests without a browser-like User-Agent
USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36"
)
