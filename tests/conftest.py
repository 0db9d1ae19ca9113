# ABOUTME: Shared test fixtures for the darksky test suite.
# ABOUTME: Provides a realistic forecast document and a minimal one for decode tests.

import copy

import pytest

FULL_DOCUMENT = {
    "latitude": 37.8267,
    "longitude": -122.4233,
    "timezone": "America/Los_Angeles",
    "offset": -7,
    "currently": {
        "time": 1509993277,
        "summary": "Drizzle",
        "icon": "rain",
        "nearestStormDistance": 0,
        "precipIntensity": 0.0089,
        "precipIntensityError": 0.0046,
        "precipProbability": 0.9,
        "precipType": "rain",
        "temperature": 66.1,
        "apparentTemperature": 66.31,
        "dewPoint": 60.77,
        "humidity": 0.83,
        "pressure": 1010.34,
        "windSpeed": 5.59,
        "windGust": 12.03,
        "windBearing": 246,
        "cloudCover": 0.7,
        "uvIndex": 1,
        "visibility": 9.84,
        "ozone": 267.44,
    },
    "minutely": {
        "summary": "Light rain stopping in 13 min., starting again 30 min. later.",
        "icon": "rain",
        "data": [
            {"time": 1509993240, "precipIntensity": 0.007, "precipIntensityError": 0.004, "precipProbability": 0.84, "precipType": "rain"},
            {"time": 1509993300, "precipIntensity": 0.0057, "precipProbability": 0.82},
        ],
    },
    "hourly": {
        "summary": "Rain starting later this afternoon.",
        "icon": "rain",
        "data": [
            {"time": 1509991200, "summary": "Mostly Cloudy", "icon": "partly-cloudy-day", "temperature": 65.76},
            {"time": 1509994800, "summary": "Drizzle", "icon": "rain", "temperature": 66.2},
        ],
    },
    "daily": {
        "summary": "Mixed precipitation throughout the week.",
        "icon": "rain",
        "data": [
            {
                "time": 1509951600,
                "summary": "Rain starting in the afternoon.",
                "icon": "rain",
                "sunriseTime": 1509978720,
                "sunsetTime": 1510015916,
                "moonPhase": 0.59,
                "precipIntensityMax": 0.0503,
                "precipIntensityMaxTime": 1510009200,
                "temperatureHigh": 66.35,
                "temperatureHighTime": 1509994800,
                "temperatureLow": 52.08,
                "temperatureLowTime": 1510056000,
                "temperatureMax": 66.35,
                "temperatureMaxTime": 1509994800,
                "uvIndexTime": 1509994800,
            }
        ],
    },
    "alerts": [
        {
            "title": "Flood Watch for Mason, WA",
            "time": 1509993360,
            "expires": 1510036680,
            "description": "...FLOOD WATCH REMAINS IN EFFECT THROUGH LATE MONDAY NIGHT...",
            "uri": "https://alerts.weather.gov/cap/wwacapget.php?x=WA1255E4DB8494.FloodWatch",
            "severity": "watch",
            "regions": ["Mason"],
        }
    ],
    "flags": {
        "sources": ["meteoalarm", "nearest-precip", "cmc", "gfs", "hrrr"],
        "isd-stations": ["724943-99999", "745039-99999"],
        "nearest-station": 1.835,
        "units": "us",
    },
}

MINIMAL_DOCUMENT = {
    "latitude": 37.8,
    "longitude": -122.4,
    "timezone": "America/Los_Angeles",
    "currently": {"time": 1000, "temperature": 72.5, "icon": "clear-day"},
}


@pytest.fixture
def full_document() -> dict:
    """A deep copy of a realistic response so tests can modify it freely."""
    return copy.deepcopy(FULL_DOCUMENT)


@pytest.fixture
def minimal_document() -> dict:
    return copy.deepcopy(MINIMAL_DOCUMENT)
