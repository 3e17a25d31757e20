import pytest

from weathersoup.config import Settings
from weathersoup.models import SelectorConfig


@pytest.fixture
def weather_html():
    return """
    <!DOCTYPE html>
    <html>
    <head>
        <title>Weather in Lisbon</title>
    </head>
    <body>
        <div class="today">
            <span class="date">  Monday, 19 October  </span>
            <span class="temp">18°C</span>
            <p class="cond">Partly cloudy</p>
            <div class="minmax">High 25° Low 14°</div>
            <div class="humpress">Wind 5 km/h.101300.72</div>
        </div>
    </body>
    </html>
    """


@pytest.fixture
def selector_config():
    return SelectorConfig(
        temperature='span.temp',
        min_max_temperature='div.minmax',
        humidity_pressure='div.humpress',
        condition='p.cond',
        date='span.date',
    )


@pytest.fixture
def settings(selector_config):
    return Settings(
        scrape_url_prefix='https://weather.example.com/search?q=',
        scrape_url_suffix='&units=metric',
        selectors=selector_config,
    )


@pytest.fixture
def weather_env():
    return {
        'SCRAPE_API_FIRST': 'https://weather.example.com/search?q=',
        'SCRAPE_API_LAST': '&units=metric',
        'TEMPERATURE_CLASS': 'span.temp',
        'MIN_MAX_TEMPERATURE_CLASS': 'div.minmax',
        'HUMIDITY_PRESSURE_CLASS': 'div.humpress',
        'CONDITION_CLASS': 'p.cond',
        'DATE_CLASS': 'span.date',
    }


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line('markers', 'integration: marks tests as integration tests')
    config.addinivalue_line('markers', 'unit: marks tests as unit tests')


def pytest_collection_modifyitems(config, items):
    """Apply directory-based marks to collected test items."""

    for item in items:
        file_path = str(item.path)

        if '/tests/integration/' in file_path:
            item.add_marker(pytest.mark.integration)
        elif '/tests/unit/' in file_path:
            item.add_marker(pytest.mark.unit)
