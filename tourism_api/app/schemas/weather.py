"""Response models for the demo weather endpoint."""

from typing import List

from pydantic import BaseModel


class DayForecast(BaseModel):
    day: str
    temp: int
    condition: str


class WeatherReport(BaseModel):
    city: str
    date: str
    temperature: int
    condition: str
    forecast: List[DayForecast]
