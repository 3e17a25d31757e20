"""Pydantic model for the per-field CSS selector configuration."""

from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field


class SelectorConfig(BaseModel):
    """CSS selectors for each logical weather field.

    Loaded once at startup and never mutated.

    Attributes:
        temperature: Selector for the current temperature
        min_max_temperature: Selector for the combined min/max temperature text
        humidity_pressure: Selector for the combined pressure/humidity text
        condition: Selector for the weather condition label
        date: Selector for the date shown on the page

    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    # Logical field name -> environment variable holding its selector
    ENV_VARS: ClassVar[dict[str, str]] = {
        'temperature': 'TEMPERATURE_CLASS',
        'min_max_temperature': 'MIN_MAX_TEMPERATURE_CLASS',
        'humidity_pressure': 'HUMIDITY_PRESSURE_CLASS',
        'condition': 'CONDITION_CLASS',
        'date': 'DATE_CLASS',
    }

    temperature: str = Field(min_length=1, description='Current temperature')
    min_max_temperature: str = Field(min_length=1, alias='minMaxTemperature', description='Min/max blob')
    humidity_pressure: str = Field(min_length=1, alias='humidityPressure', description='Pressure/humidity blob')
    condition: str = Field(min_length=1, description='Weather condition label')
    date: str = Field(min_length=1, description='Date as shown on the page')

    def as_tuples(self) -> list[tuple[str, str]]:
        """Return selectors as list of (field_name, selector) tuples in extraction order."""
        return [
            ('temperature', self.temperature),
            ('min_max_temperature', self.min_max_temperature),
            ('humidity_pressure', self.humidity_pressure),
            ('condition', self.condition),
            ('date', self.date),
        ]
