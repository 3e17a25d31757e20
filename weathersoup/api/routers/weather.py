"""Weather lookup endpoint."""

from fastapi import APIRouter, Depends

from weathersoup.api.deps import get_service
from weathersoup.models import WeatherRecord
from weathersoup.service import WeatherService

router = APIRouter()


@router.get('/{city}', response_model=WeatherRecord)
def get_weather(city: str, service: WeatherService = Depends(get_service)) -> WeatherRecord:
    """Scrape the current weather for a city."""
    return service.get_weather(city)
