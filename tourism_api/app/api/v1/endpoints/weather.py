"""
Demo weather endpoint for API v1.

There is no weather provider behind this route: it returns a plausible
random forecast so the web client's weather widget has something to
show.  Temperatures are whole degrees Celsius between 25 and 34.
"""

import random
from datetime import date

from fastapi import APIRouter

from tourism_api.app.schemas.weather import DayForecast, WeatherReport


router = APIRouter()

CONDITIONS = ["Sunny", "Partly Cloudy", "Cloudy", "Rainy"]
FORECAST_DAYS = [
    ("Mon", "Sunny"),
    ("Tue", "Partly Cloudy"),
    ("Wed", "Rainy"),
    ("Thu", "Partly Cloudy"),
]


def _random_temperature() -> int:
    return random.randint(25, 34)


@router.get("/{city}", response_model=WeatherReport)
async def get_weather(city: str) -> WeatherReport:
    return WeatherReport(
        city=city,
        date=date.today().isoformat(),
        temperature=_random_temperature(),
        condition=random.choice(CONDITIONS),
        forecast=[
            DayForecast(day=day, temp=_random_temperature(), condition=condition)
            for day, condition in FORECAST_DAYS
        ],
    )
