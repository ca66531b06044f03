"""Default configuration parameters for the quote application."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ApiParams:
    """Market data provider parameters."""
    base_url: str = "https://www.alphavantage.co/query"
    api_key: str = ""                                 # Populated from ALPHA_VANTAGE_API_KEY
    timeout_seconds: float = 10.0
    user_agent: str = "quote-app/0.1"


@dataclass(frozen=True)
class SeriesParams:
    """Daily series and Heikin-Ashi parameters."""
    prefer_adjusted: bool = True                      # Try TIME_SERIES_DAILY_ADJUSTED first
    output_size: str = "compact"                      # compact (100 bars) or full
    seed_convention: str = "chronological"            # chronological or feed_order


@dataclass(frozen=True)
class OptionsParams:
    """Options chain view parameters."""
    fetch_options: bool = True
    default_sort_key: str = "strike_price"
    default_direction: str = "ascending"


@dataclass(frozen=True)
class ServerParams:
    """HTTP proxy parameters."""
    host: str = "0.0.0.0"
    port: int = 3000
    cors_origins: tuple[str, ...] = field(default_factory=lambda: ("*",))


@dataclass(frozen=True)
class LoggingParams:
    """Logging output parameters."""
    level: str = "INFO"
    format_json: bool = False


@dataclass(frozen=True)
class AppConfig:
    """Complete application configuration."""
    api: ApiParams
    series: SeriesParams
    options: OptionsParams
    server: ServerParams
    logging: LoggingParams


def get_default_config() -> AppConfig:
    """Get the default configuration instance."""
    return AppConfig(
        api=ApiParams(),
        series=SeriesParams(),
        options=OptionsParams(),
        server=ServerParams(),
        logging=LoggingParams(),
    )
