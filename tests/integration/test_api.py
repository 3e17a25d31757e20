import pytest
from fastapi.testclient import TestClient

from weathersoup.api import create_app
from weathersoup.api.app import CONTENT_SECURITY_POLICY
from weathersoup.core.fetcher import PageFetcher
from weathersoup.exceptions import CityNotFoundError, UpstreamTimeoutError, UpstreamUnavailableError
from weathersoup.models import FetchResult
from weathersoup.service import WeatherService


@pytest.fixture
def fetcher(mocker, weather_html):
    fetcher = mocker.Mock(spec=PageFetcher)
    fetcher.fetch.return_value = FetchResult(url='https://weather.example.com', html=weather_html)
    return fetcher


@pytest.fixture
def client(settings, fetcher):
    app = create_app(service=WeatherService(settings, fetcher=fetcher))
    with TestClient(app) as client:
        yield client


def test_get_weather(client):
    response = client.get('/api/weather/Lisbon')

    assert response.status_code == 200
    assert response.json() == {
        'date': 'Monday, 19 October',
        'temperature': '18°C',
        'condition': 'Partly cloudy',
        'minTemperature': '25°',
        'maxTemperature': '14°',
        'humidity': '72',
        'pressure': 1013.0,
    }
    assert response.headers['Content-Security-Policy'] == CONTENT_SECURITY_POLICY


def test_city_with_spaces(client, fetcher):
    response = client.get('/api/weather/New%20York')

    assert response.status_code == 200
    fetcher.fetch.assert_called_once_with('New York')


def test_invalid_city(client, fetcher):
    response = client.get('/api/weather/Paris75')

    assert response.status_code == 400
    assert response.json()['code'] == 'INVALID_CITY'
    fetcher.fetch.assert_not_called()


def test_data_not_found(client, fetcher):
    fetcher.fetch.return_value = FetchResult(url='https://weather.example.com', html='<html><body></body></html>')

    response = client.get('/api/weather/Lisbon')

    assert response.status_code == 404
    assert response.json() == {
        'error': 'Weather data not found for the specified city.',
        'code': 'DATA_NOT_FOUND',
    }
    assert response.headers['Content-Security-Policy'] == CONTENT_SECURITY_POLICY


def test_partial_page_degrades(client, fetcher):
    html = '<html><body><span class="temp">3°C</span><p class="cond">Fog</p></body></html>'
    fetcher.fetch.return_value = FetchResult(url='https://weather.example.com', html=html)

    response = client.get('/api/weather/Lisbon')

    assert response.status_code == 200
    body = response.json()
    assert body['date'] is None
    assert body['minTemperature'] == 'N/A'
    assert body['pressure'] == 'N/A'


@pytest.mark.parametrize(
    ('error', 'status_code', 'code'),
    [
        (CityNotFoundError(), 404, 'CITY_NOT_FOUND'),
        (UpstreamTimeoutError(), 504, 'TIMEOUT'),
        (UpstreamUnavailableError(), 503, 'SERVICE_UNAVAILABLE'),
    ],
)
def test_upstream_errors(client, fetcher, error, status_code, code):
    fetcher.fetch.side_effect = error

    response = client.get('/api/weather/Lisbon')

    assert response.status_code == status_code
    assert response.json()['code'] == code


def test_parse_failure_hides_details(settings, fetcher):
    selectors = settings.selectors.model_copy(update={'condition': 'p[class='})
    service = WeatherService(settings.model_copy(update={'selectors': selectors}), fetcher=fetcher)

    with TestClient(create_app(service=service)) as client:
        response = client.get('/api/weather/Lisbon')

    assert response.status_code == 503
    assert response.json() == {
        'error': 'Unable to parse weather data. The weather service might be temporarily unavailable.'
    }


def test_unexpected_error(settings, fetcher):
    fetcher.fetch.side_effect = RuntimeError('kaboom')
    app = create_app(service=WeatherService(settings, fetcher=fetcher))

    with TestClient(app, raise_server_exceptions=False) as client:
        response = client.get('/api/weather/Lisbon', headers={'Origin': 'http://frontend.test'})

    assert response.status_code == 500
    assert response.json() == {
        'error': 'Unexpected server error. Please try again later.',
        'code': 'SERVER_ERROR',
    }
    assert response.headers['Content-Security-Policy'] == CONTENT_SECURITY_POLICY
    assert response.headers['Access-Control-Allow-Origin'] == '*'


def test_health(client):
    assert client.get('/health').json() == {'status': 'ok'}


def test_create_app_requires_config(monkeypatch):
    from weathersoup.exceptions import ConfigError

    for name in ('SCRAPE_API_FIRST', 'TEMPERATURE_CLASS'):
        monkeypatch.delenv(name, raising=False)

    with pytest.raises(ConfigError):
        create_app()


def test_fetcher_closed_on_shutdown(settings, fetcher):
    with TestClient(create_app(service=WeatherService(settings, fetcher=fetcher))):
        pass

    fetcher.close.assert_called_once()
