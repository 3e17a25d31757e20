"""Environment-sourced settings for WeatherSoup.

Call ``load_dotenv()`` before ``load_settings()`` to pick up a local ``.env`` file.
"""

import os
from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from weathersoup.exceptions import ConfigError
from weathersoup.models import SelectorConfig

DEFAULT_USER_AGENT = (
    'Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36'
)

URL_ENV_VARS = {
    'scrape_url_prefix': 'SCRAPE_API_FIRST',
    'scrape_url_suffix': 'SCRAPE_API_LAST',
}

# Optional settings: field name -> environment variable
OPTIONAL_ENV_VARS = {
    'host': 'HOST',
    'port': 'PORT',
    'fetch_timeout': 'FETCH_TIMEOUT',
    'user_agent': 'SCRAPE_USER_AGENT',
    'logfire_token': 'LOGFIRE_TOKEN',
    'log_level': 'LOG_LEVEL',
}


class Settings(BaseModel):
    """Process-wide configuration, built once at startup.

    Attributes:
        scrape_url_prefix: URL text placed before the encoded city name
        scrape_url_suffix: URL text placed after the encoded city name
        selectors: CSS selector for each weather field
        host: Interface the HTTP server binds to
        port: Port the HTTP server listens on
        fetch_timeout: Upstream request timeout in seconds
        user_agent: User-Agent header sent upstream
        cors_origins: Origins allowed by CORS
        logfire_token: Logfire write token, or None to keep telemetry local
        log_level: Root logging level

    """

    model_config = ConfigDict(frozen=True)

    scrape_url_prefix: str = Field(min_length=1)
    scrape_url_suffix: str
    selectors: SelectorConfig
    host: str = '0.0.0.0'
    port: int = Field(default=5000, ge=1, le=65535)
    fetch_timeout: float = Field(default=5.0, gt=0)
    user_agent: str = DEFAULT_USER_AGENT
    cors_origins: tuple[str, ...] = ('*',)
    logfire_token: str | None = None
    log_level: str = 'INFO'

    def build_url(self, encoded_city: str) -> str:
        """Return the upstream page URL for an already URL-encoded city."""
        return f'{self.scrape_url_prefix}{encoded_city}{self.scrape_url_suffix}'


def required_env_vars() -> list[str]:
    """Return every environment variable that must be set."""
    return list(URL_ENV_VARS.values()) + list(SelectorConfig.ENV_VARS.values())


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Build settings from environment variables.

    Args:
        environ: Mapping to read from. Defaults to os.environ.

    Returns:
        Validated Settings

    Raises:
        ConfigError: If any required variable is missing or empty

    """
    env = os.environ if environ is None else environ

    missing = [name for name in required_env_vars() if not env.get(name)]
    if missing:
        raise ConfigError(missing)

    selectors = SelectorConfig(**{field: env[var] for field, var in SelectorConfig.ENV_VARS.items()})
    values: dict = {field: env[var] for field, var in URL_ENV_VARS.items()}
    values.update({field: env[var] for field, var in OPTIONAL_ENV_VARS.items() if env.get(var)})

    origins = env.get('CORS_ORIGINS')
    if origins:
        values['cors_origins'] = tuple(origin.strip() for origin in origins.split(',') if origin.strip())

    try:
        return Settings(selectors=selectors, **values)
    except ValidationError as e:
        fields = ', '.join(str(error['loc'][0]) for error in e.errors())
        raise ConfigError(message=f'Invalid configuration value(s): {fields}') from e
