"""FastAPI proxy forwarding quote, history and options requests to the provider.

Endpoints:
- GET /quote/{ticker}      latest quote fields
- GET /history/{ticker}    chart points (line, candlestick or Heikin-Ashi)
- GET /options/{ticker}    filtered and sorted options chain
- GET /health              liveness
"""

from enum import Enum
from typing import Optional

import uvicorn
from fastapi import FastAPI, Query, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from ..charts.heikin_ashi import SeedConvention, compute_heikin_ashi
from ..charts.points import chronological, to_candlestick_points, to_line_points
from ..config.defaults import AppConfig
from ..config.loader import ConfigLoader
from ..data.models import FilterSpec, SortDirection, SortSpec, TypeFilter
from ..errors import (
    EmptySeriesError,
    InvalidSymbolError,
    QuoteAppError,
    SymbolNotFoundError,
)
from ..fetch.alpha_vantage import AlphaVantageClient
from ..fetch.base import QuoteProvider
from ..logging.config import configure_logging, get_logger
from ..options.projector import distinct_expirations, project

logger = get_logger(__name__)


class ChartKind(str, Enum):
    LINE = "line"
    CANDLESTICK = "candlestick"
    HEIKIN_ASHI = "heikin-ashi"


def create_app(provider: Optional[QuoteProvider] = None,
               config: Optional[AppConfig] = None) -> FastAPI:
    """
    Build the proxy application.

    Args:
        provider: Market data provider; defaults to an Alpha Vantage client
            built from config
        config: Application config; defaults to the merged ConfigLoader config
    """
    config = config or ConfigLoader.create().load()
    provider = provider or AlphaVantageClient(config.api, config.series)

    app = FastAPI(title="quote-app proxy", version="0.1.0")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(config.server.cors_origins),
        allow_methods=["GET"],
        allow_headers=["*"],
    )
    app.state.provider = provider
    app.state.config = config

    @app.exception_handler(SymbolNotFoundError)
    async def symbol_not_found(request: Request, exc: SymbolNotFoundError):
        logger.info("Ticker not found", path=request.url.path, symbol=exc.symbol)
        return JSONResponse(status_code=404, content={"error": "Ticker not found"})

    @app.exception_handler(InvalidSymbolError)
    async def invalid_symbol(request: Request, exc: InvalidSymbolError):
        return JSONResponse(status_code=400, content={"error": str(exc)})

    @app.exception_handler(QuoteAppError)
    async def provider_failure(request: Request, exc: QuoteAppError):
        logger.error("Provider request failed", path=request.url.path,
                     error_type=type(exc).__name__, error=str(exc))
        return JSONResponse(status_code=500, content={"error": "Internal server error"})

    @app.get("/health")
    def health():
        return {"status": "ok", "provider": provider.name}

    @app.get("/quote/{ticker}")
    def get_quote(ticker: str):
        """Quote fields exactly as the provider names them."""
        return provider.fetch_quote(ticker).fields

    @app.get("/history/{ticker}")
    def get_history(
        ticker: str,
        chart: ChartKind = ChartKind.CANDLESTICK,
        seed: Optional[SeedConvention] = None,
    ):
        """Daily series as chart renderer points, oldest first."""
        bars = provider.fetch_daily_series(ticker)
        seed = seed or SeedConvention(config.series.seed_convention)

        if chart is ChartKind.LINE:
            points = to_line_points(chronological(bars))
        elif chart is ChartKind.CANDLESTICK:
            points = to_candlestick_points(chronological(bars))
        else:
            try:
                points = to_candlestick_points(compute_heikin_ashi(bars, seed=seed))
            except EmptySeriesError:
                points = []

        return {"symbol": ticker.strip().upper(), "chart": chart.value, "points": points}

    @app.get("/options/{ticker}")
    def get_options(
        ticker: str,
        type_filter: TypeFilter = Query(TypeFilter.ALL, alias="type"),
        expiration: Optional[str] = None,
        sort: Optional[str] = None,
        direction: Optional[SortDirection] = None,
    ):
        """Options chain after the type filter, expiration filter and sort."""
        contracts = provider.fetch_options_chain(ticker)

        sort_spec = SortSpec(
            key=sort or config.options.default_sort_key,
            direction=direction or SortDirection(config.options.default_direction),
        )
        view = project(contracts, FilterSpec(type_filter=type_filter, expiration=expiration or None),
                       sort_spec)

        return {
            "symbol": ticker.strip().upper(),
            "contracts": [c.to_dict() for c in view],
            "expirations": distinct_expirations(contracts),
        }

    return app


def main() -> None:
    """Run the proxy with uvicorn on the configured host and port."""
    config = ConfigLoader.create().load()
    configure_logging(level=config.logging.level, format_json=config.logging.format_json)

    logger.info("Starting quote proxy", host=config.server.host, port=config.server.port)
    uvicorn.run(create_app(config=config), host=config.server.host, port=config.server.port)


if __name__ == "__main__":
    main()
