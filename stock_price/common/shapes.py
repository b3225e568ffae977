"""
Yahoo Finance response shapes.

Two payload layouts carry quote data:
- chart:  {"chart": {"result": [{"meta": {...}}]}}
- quote:  {"quoteResponse": {"result": [{...}]}}

parse_provider_payload() validates a decoded body against each known shape
in order and returns a tagged variant. Anything else is UnrecognizedPayload.
"""

from dataclasses import dataclass
from typing import Annotated, Any, Literal

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, ValidationError


def _number_or_zero(value: object) -> float:
    """Coerce provider numbers; missing, null or non-numeric values read as 0."""
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        try:
            return float(value)
        except OverflowError:
            return 0.0
    return 0.0


def _first_only(value: object) -> object:
    """Only the first result entry matters, later entries are not validated."""
    if isinstance(value, list):
        return value[:1]
    return value


Number = Annotated[float, BeforeValidator(_number_or_zero)]


@dataclass(frozen=True)
class Quote:
    """Quote fields shared by both provider shapes."""

    symbol: str
    price: float
    previous_close: float
    day_high: float
    day_low: float
    volume: float

    @property
    def has_price(self) -> bool:
        # A zero price is indistinguishable from missing data
        return self.price != 0


class _ProviderModel(BaseModel):
    model_config = ConfigDict(extra="ignore")


class ChartMeta(_ProviderModel):
    regularMarketPrice: Number = 0.0  # noqa: N815
    previousClose: Number = 0.0  # noqa: N815
    regularMarketDayHigh: Number = 0.0  # noqa: N815
    regularMarketDayLow: Number = 0.0  # noqa: N815
    regularMarketVolume: Number = 0.0  # noqa: N815


class ChartResult(_ProviderModel):
    meta: ChartMeta


class Chart(_ProviderModel):
    result: Annotated[list[ChartResult], BeforeValidator(_first_only), Field(min_length=1)]


class ChartPayload(_ProviderModel):
    """v8 chart endpoint layout"""

    kind: Literal["chart"] = "chart"
    chart: Chart

    def to_quote(self, symbol: str) -> Quote:
        meta = self.chart.result[0].meta
        return Quote(
            symbol=symbol,
            price=meta.regularMarketPrice,
            previous_close=meta.previousClose,
            day_high=meta.regularMarketDayHigh,
            day_low=meta.regularMarketDayLow,
            volume=meta.regularMarketVolume,
        )


class QuoteResult(_ProviderModel):
    regularMarketPrice: Number = 0.0  # noqa: N815
    regularMarketPreviousClose: Number = 0.0  # noqa: N815
    regularMarketDayHigh: Number = 0.0  # noqa: N815
    regularMarketDayLow: Number = 0.0  # noqa: N815
    regularMarketVolume: Number = 0.0  # noqa: N815


class QuoteResponse(_ProviderModel):
    result: Annotated[list[QuoteResult], BeforeValidator(_first_only), Field(min_length=1)]


class QuotePayload(_ProviderModel):
    """v1 quoteResponse endpoint layout"""

    kind: Literal["quote"] = "quote"
    quoteResponse: QuoteResponse  # noqa: N815

    def to_quote(self, symbol: str) -> Quote:
        result = self.quoteResponse.result[0]
        return Quote(
            symbol=symbol,
            price=result.regularMarketPrice,
            previous_close=result.regularMarketPreviousClose,
            day_high=result.regularMarketDayHigh,
            day_low=result.regularMarketDayLow,
            volume=result.regularMarketVolume,
        )


@dataclass(frozen=True)
class UnrecognizedPayload:
    """Decoded body matching neither known shape"""

    keys: tuple[str, ...] = ()
    kind: Literal["unrecognized"] = "unrecognized"


ProviderPayload = ChartPayload | QuotePayload | UnrecognizedPayload

# chart is checked before quote
_SHAPES: tuple[type[ChartPayload] | type[QuotePayload], ...] = (ChartPayload, QuotePayload)


def parse_provider_payload(data: Any) -> ProviderPayload:  # noqa: ANN401
    """Match a decoded JSON body against the known provider shapes."""
    for shape in _SHAPES:
        try:
            return shape.model_validate(data)
        except ValidationError:
            continue

    keys = tuple(str(k) for k in data) if isinstance(data, dict) else ()
    return UnrecognizedPayload(keys=keys)
