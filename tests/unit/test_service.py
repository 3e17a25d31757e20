import pytest

from weathersoup.core.fetcher import PageFetcher
from weathersoup.exceptions import DataNotFoundError, InvalidCityError, ParsingError
from weathersoup.models import FetchResult, SelectorConfig
from weathersoup.service import WeatherService, sanitize_city


@pytest.fixture
def fetcher(mocker, weather_html):
    fetcher = mocker.Mock(spec=PageFetcher)
    fetcher.fetch.return_value = FetchResult(url='https://weather.example.com', html=weather_html)
    return fetcher


@pytest.fixture
def service(settings, fetcher):
    return WeatherService(settings, fetcher=fetcher)


def test_get_weather(service, fetcher):
    record = service.get_weather('  Lisbon ')

    fetcher.fetch.assert_called_once_with('Lisbon')
    assert record.temperature == '18°C'
    assert record.pressure == 1013.0


@pytest.mark.parametrize('city', ['', 'X', 'Paris75', '<script>', 'a' * 51, '   '])
def test_invalid_city(service, fetcher, city):
    with pytest.raises(InvalidCityError):
        service.get_weather(city)

    fetcher.fetch.assert_not_called()


def test_hyphens_and_spaces_are_valid(service):
    assert service.validate_city('Rio de Janeiro') == 'Rio de Janeiro'
    assert service.validate_city('Saint-Denis') == 'Saint-Denis'


def test_sanitize_city_escapes_markup():
    assert sanitize_city(' <b>Oslo</b> ') == '&lt;b&gt;Oslo&lt;/b&gt;'


def test_data_not_found_propagates(service, fetcher):
    fetcher.fetch.return_value = FetchResult(url='https://weather.example.com', html='<html><body></body></html>')

    with pytest.raises(DataNotFoundError):
        service.get_weather('Lisbon')


def test_invalid_selector_is_parsing_error(settings, fetcher):
    selectors = settings.selectors.model_copy(update={'temperature': 'span[class='})
    service = WeatherService(settings.model_copy(update={'selectors': selectors}), fetcher=fetcher)

    with pytest.raises(ParsingError) as exc_info:
        service.get_weather('Lisbon')

    assert exc_info.value.status_code == 503
    assert exc_info.value.to_dict() == {
        'error': 'Unable to parse weather data. The weather service might be temporarily unavailable.'
    }


def test_unexpected_parse_failure_is_wrapped(service, mocker):
    mocker.patch('weathersoup.service.assemble_record', side_effect=RuntimeError('boom'))

    with pytest.raises(ParsingError) as exc_info:
        service.parse('<html></html>')

    assert 'boom' not in exc_info.value.message


def test_parse_without_fetching(service, fetcher, weather_html):
    record = service.parse(weather_html)

    assert record.condition == 'Partly cloudy'
    fetcher.fetch.assert_not_called()


def test_default_fetcher(settings):
    service = WeatherService(settings)

    assert service.fetcher.settings is settings
    service.close()


def test_selector_config_unchanged_by_requests(service, settings):
    before = SelectorConfig(**settings.selectors.model_dump())

    service.get_weather('Lisbon')
    service.get_weather('Lisbon')

    assert settings.selectors == before
