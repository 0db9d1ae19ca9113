# ABOUTME: Immutable Pydantic models for Dark Sky forecast responses.
# ABOUTME: Defines the forecast tree (Forecast, Datablock, Datapoint, Alert, Flags) and its enums.

from enum import StrEnum, unique
from typing import Any

from pydantic import BaseModel, ConfigDict


@unique
class Icon(StrEnum):
    """Machine-readable summary icon. Hail, thunderstorm and tornado are reserved by the API."""

    CLEAR_DAY = "clear-day"
    CLEAR_NIGHT = "clear-night"
    CLOUDY = "cloudy"
    FOG = "fog"
    HAIL = "hail"
    PARTLY_CLOUDY_DAY = "partly-cloudy-day"
    PARTLY_CLOUDY_NIGHT = "partly-cloudy-night"
    RAIN = "rain"
    SLEET = "sleet"
    SNOW = "snow"
    THUNDERSTORM = "thunderstorm"
    TORNADO = "tornado"
    WIND = "wind"


@unique
class PrecipitationType(StrEnum):
    RAIN = "rain"
    SLEET = "sleet"
    SNOW = "snow"


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


class Alert(_Frozen):
    """A severe weather warning issued by a governmental authority."""

    title: str
    description: str
    uri: str
    expires: int | None = None
    time: int | None = None
    severity: str | None = None
    regions: tuple[str, ...] | None = None


class Datapoint(_Frozen):
    """Weather conditions at one point in time.

    Only ``time`` is guaranteed. Every other field is None when the API did not
    report it for this location and time, which means unknown rather than zero.
    """

    time: int
    apparent_temperature: float | None = None
    apparent_temperature_high: float | None = None
    apparent_temperature_high_time: int | None = None
    apparent_temperature_low: float | None = None
    apparent_temperature_low_time: int | None = None
    apparent_temperature_max: float | None = None
    apparent_temperature_max_time: int | None = None
    apparent_temperature_min: float | None = None
    apparent_temperature_min_time: int | None = None
    cloud_cover: float | None = None
    cloud_cover_error: float | None = None
    dew_point: float | None = None
    dew_point_error: float | None = None
    humidity: float | None = None
    humidity_error: float | None = None
    icon: Icon | None = None
    moon_phase: float | None = None
    nearest_storm_bearing: float | None = None
    nearest_storm_distance: float | None = None
    ozone: float | None = None
    precip_accumulation: float | None = None
    precip_intensity: float | None = None
    precip_intensity_error: float | None = None
    precip_intensity_max: float | None = None
    precip_intensity_max_error: float | None = None
    precip_intensity_max_time: int | None = None
    precip_probability: float | None = None
    precip_type: PrecipitationType | None = None
    pressure: float | None = None
    pressure_error: float | None = None
    summary: str | None = None
    sunrise_time: int | None = None
    sunset_time: int | None = None
    temperature: float | None = None
    temperature_error: float | None = None
    temperature_high: float | None = None
    temperature_high_time: int | None = None
    temperature_low: float | None = None
    temperature_low_time: int | None = None
    temperature_max: float | None = None
    temperature_max_error: float | None = None
    temperature_max_time: int | None = None
    temperature_min: float | None = None
    temperature_min_error: float | None = None
    temperature_min_time: int | None = None
    uv_index: int | None = None
    uv_index_time: int | None = None
    visibility: float | None = None
    visibility_error: float | None = None
    wind_bearing: float | None = None
    wind_bearing_error: float | None = None
    wind_gust: float | None = None
    wind_gust_time: int | None = None
    wind_speed: float | None = None
    wind_speed_error: float | None = None


class Datablock(_Frozen):
    """A time series (minutely, hourly or daily) with its textual summary."""

    summary: str | None = None
    icon: Icon | None = None
    data: tuple[Datapoint, ...] | None = None


class Flags(_Frozen):
    """Provenance metadata: which stations and sources produced the forecast."""

    darksky_stations: tuple[str, ...] | None = None
    darksky_unavailable: str | None = None
    datapoint_stations: tuple[str, ...] | None = None
    isd_stations: tuple[str, ...] | None = None
    lamp_stations: tuple[str, ...] | None = None
    madis_stations: tuple[str, ...] | None = None
    metar_stations: tuple[str, ...] | None = None
    metno_license: str | None = None
    nearest_station: float | None = None
    sources: tuple[str, ...] | None = None
    units: str | None = None


class Forecast(_Frozen):
    """Root of a decoded forecast response."""

    latitude: float
    longitude: float
    timezone: str
    offset: float | None = None
    alerts: tuple[Alert, ...] = ()
    currently: Datapoint | None = None
    daily: Datablock | None = None
    hourly: Datablock | None = None
    minutely: Datablock | None = None
    flags: Flags | None = None

    @classmethod
    def decode(cls, value: Any) -> "Forecast":
        """Decode a parsed JSON document. Raises DecodeError on the first mismatch."""
        # decode imports this module, so the decoder is resolved at call time
        from darksky.decode import decode_forecast

        return decode_forecast(value)
