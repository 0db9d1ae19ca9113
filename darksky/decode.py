# ABOUTME: Decode layer turning parsed Dark Sky JSON into typed forecast models.
# ABOUTME: Field extractors, coercers, the array combinator and one decoder per entity.

import logging
from collections.abc import Callable
from typing import Any, TypeVar

from darksky.errors import MissingField, TypeMismatch
from darksky.models import Alert, Datablock, Datapoint, Flags, Forecast, Icon, PrecipitationType
from darksky.names import NameMap

logger = logging.getLogger(__name__)

T = TypeVar("T")

U64_LIMIT = 2**64

ICON_NAMES = NameMap("icon", Icon)
PRECIPITATION_TYPE_NAMES = NameMap("precipType", PrecipitationType)


# Coercers. A failing coercer raises TypeMismatch without a field; the
# extractor that called it fills the field in.


def as_u64(value: Any) -> int:
    """Accept a JSON integer in the unsigned 64-bit range. Floats never qualify."""
    if isinstance(value, int) and not isinstance(value, bool) and 0 <= value < U64_LIMIT:
        return value
    raise TypeMismatch(None, "integer", value)


def as_f64(value: Any) -> float:
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        try:
            return float(value)
        except OverflowError:
            # integer literal beyond the float range
            raise TypeMismatch(None, "number", value) from None
    raise TypeMismatch(None, "number", value)


def as_str(value: Any) -> str:
    if isinstance(value, str):
        return value
    raise TypeMismatch(None, "string", value)


def as_object(value: Any) -> dict[str, Any]:
    """Return a shallow working copy of an object node so extraction never mutates the caller's document."""
    if isinstance(value, dict):
        return dict(value)
    raise TypeMismatch(None, "object", value)


def decode_array(value: Any, element_decoder: Callable[[Any], T]) -> tuple[T, ...]:
    """Decode every element of a JSON array in order. The first failing element aborts the whole array."""
    if not isinstance(value, list):
        raise TypeMismatch(None, "array", value)
    return tuple(element_decoder(element) for element in value)


def array_of(element_decoder: Callable[[Any], T]) -> Callable[[Any], tuple[T, ...]]:
    return lambda value: decode_array(value, element_decoder)


# Field extractors


def _coerce(name: str, value: Any, coerce: Callable[[Any], T]) -> T:
    try:
        return coerce(value)
    except TypeMismatch as exc:
        if exc.field is None:
            raise TypeMismatch(name, exc.expected, exc.actual) from None
        raise


def take_required(obj: dict[str, Any], name: str, coerce: Callable[[Any], T]) -> T:
    """Pop ``name`` from ``obj`` and coerce it. Absence raises MissingField."""
    if name not in obj:
        raise MissingField(name)
    return _coerce(name, obj.pop(name), coerce)


def take_optional(obj: dict[str, Any], name: str, coerce: Callable[[Any], T]) -> T | None:
    """Pop ``name`` from ``obj`` and coerce it, or return None when absent or null.

    A present value of the wrong type still raises TypeMismatch.
    """
    value = obj.pop(name, None)
    if value is None:
        return None
    return _coerce(name, value, coerce)


def _ignore_leftovers(obj: dict[str, Any], entity: str) -> None:
    if obj:
        logger.debug("Ignoring unrecognized %s fields: %s", entity, ", ".join(sorted(obj)))


# Entity decoders


def decode_alert(value: Any) -> Alert:
    obj = as_object(value)
    alert = Alert(
        title=take_required(obj, "title", as_str),
        description=take_required(obj, "description", as_str),
        uri=take_required(obj, "uri", as_str),
        expires=take_optional(obj, "expires", as_u64),
        time=take_optional(obj, "time", as_u64),
        severity=take_optional(obj, "severity", as_str),
        regions=take_optional(obj, "regions", array_of(as_str)),
    )
    _ignore_leftovers(obj, "alert")
    return alert


# (attribute, API key, coercer) for every optional datapoint field, in declaration order.
DATAPOINT_FIELDS: tuple[tuple[str, str, Callable[[Any], Any]], ...] = (
    ("apparent_temperature", "apparentTemperature", as_f64),
    ("apparent_temperature_high", "apparentTemperatureHigh", as_f64),
    ("apparent_temperature_high_time", "apparentTemperatureHighTime", as_u64),
    ("apparent_temperature_low", "apparentTemperatureLow", as_f64),
    ("apparent_temperature_low_time", "apparentTemperatureLowTime", as_u64),
    ("apparent_temperature_max", "apparentTemperatureMax", as_f64),
    ("apparent_temperature_max_time", "apparentTemperatureMaxTime", as_u64),
    ("apparent_temperature_min", "apparentTemperatureMin", as_f64),
    ("apparent_temperature_min_time", "apparentTemperatureMinTime", as_u64),
    ("cloud_cover", "cloudCover", as_f64),
    ("cloud_cover_error", "cloudCoverError", as_f64),
    ("dew_point", "dewPoint", as_f64),
    ("dew_point_error", "dewPointError", as_f64),
    ("humidity", "humidity", as_f64),
    ("humidity_error", "humidityError", as_f64),
    ("icon", "icon", ICON_NAMES.decode),
    ("moon_phase", "moonPhase", as_f64),
    ("nearest_storm_bearing", "nearestStormBearing", as_f64),
    ("nearest_storm_distance", "nearestStormDistance", as_f64),
    ("ozone", "ozone", as_f64),
    ("precip_accumulation", "precipAccumulation", as_f64),
    ("precip_intensity", "precipIntensity", as_f64),
    ("precip_intensity_error", "precipIntensityError", as_f64),
    ("precip_intensity_max", "precipIntensityMax", as_f64),
    ("precip_intensity_max_error", "precipIntensityMaxError", as_f64),
    ("precip_intensity_max_time", "precipIntensityMaxTime", as_u64),
    ("precip_probability", "precipProbability", as_f64),
    ("precip_type", "precipType", PRECIPITATION_TYPE_NAMES.decode),
    ("pressure", "pressure", as_f64),
    ("pressure_error", "pressureError", as_f64),
    ("summary", "summary", as_str),
    ("sunrise_time", "sunriseTime", as_u64),
    ("sunset_time", "sunsetTime", as_u64),
    ("temperature", "temperature", as_f64),
    ("temperature_error", "temperatureError", as_f64),
    ("temperature_high", "temperatureHigh", as_f64),
    ("temperature_high_time", "temperatureHighTime", as_u64),
    ("temperature_low", "temperatureLow", as_f64),
    ("temperature_low_time", "temperatureLowTime", as_u64),
    ("temperature_max", "temperatureMax", as_f64),
    ("temperature_max_error", "temperatureMaxError", as_f64),
    ("temperature_max_time", "temperatureMaxTime", as_u64),
    ("temperature_min", "temperatureMin", as_f64),
    ("temperature_min_error", "temperatureMinError", as_f64),
    ("temperature_min_time", "temperatureMinTime", as_u64),
    ("uv_index", "uvIndex", as_u64),
    ("uv_index_time", "uvIndexTime", as_u64),
    ("visibility", "visibility", as_f64),
    ("visibility_error", "visibilityError", as_f64),
    ("wind_bearing", "windBearing", as_f64),
    ("wind_bearing_error", "windBearingError", as_f64),
    ("wind_gust", "windGust", as_f64),
    ("wind_gust_time", "windGustTime", as_u64),
    ("wind_speed", "windSpeed", as_f64),
    ("wind_speed_error", "windSpeedError", as_f64),
)


def decode_datapoint(value: Any) -> Datapoint:
    obj = as_object(value)
    fields: dict[str, Any] = {"time": take_required(obj, "time", as_u64)}
    for attr, key, coerce in DATAPOINT_FIELDS:
        fields[attr] = take_optional(obj, key, coerce)
    _ignore_leftovers(obj, "datapoint")
    return Datapoint(**fields)


def decode_datablock(value: Any) -> Datablock:
    obj = as_object(value)
    block = Datablock(
        summary=take_optional(obj, "summary", as_str),
        icon=take_optional(obj, "icon", ICON_NAMES.decode),
        data=take_optional(obj, "data", array_of(decode_datapoint)),
    )
    _ignore_leftovers(obj, "datablock")
    return block


def decode_flags(value: Any) -> Flags:
    obj = as_object(value)
    flags = Flags(
        darksky_stations=take_optional(obj, "darksky-stations", array_of(as_str)),
        darksky_unavailable=take_optional(obj, "darksky-unavailable", as_str),
        datapoint_stations=take_optional(obj, "datapoint-stations", array_of(as_str)),
        isd_stations=take_optional(obj, "isd-stations", array_of(as_str)),
        lamp_stations=take_optional(obj, "lamp-stations", array_of(as_str)),
        madis_stations=take_optional(obj, "madis-stations", array_of(as_str)),
        metar_stations=take_optional(obj, "metar-stations", array_of(as_str)),
        metno_license=take_optional(obj, "metno-license", as_str),
        nearest_station=take_optional(obj, "nearest-station", as_f64),
        sources=take_optional(obj, "sources", array_of(as_str)),
        units=take_optional(obj, "units", as_str),
    )
    _ignore_leftovers(obj, "flags")
    return flags


def decode_forecast(value: Any) -> Forecast:
    """Decode a whole forecast response.

    Fields are extracted in declaration order and the first failure is raised
    unchanged; no partially populated Forecast is ever returned.
    """
    obj = as_object(value)
    forecast = Forecast(
        latitude=take_required(obj, "latitude", as_f64),
        longitude=take_required(obj, "longitude", as_f64),
        timezone=take_required(obj, "timezone", as_str),
        offset=take_optional(obj, "offset", as_f64),
        alerts=take_optional(obj, "alerts", array_of(decode_alert)) or (),
        currently=take_optional(obj, "currently", decode_datapoint),
        daily=take_optional(obj, "daily", decode_datablock),
        hourly=take_optional(obj, "hourly", decode_datablock),
        minutely=take_optional(obj, "minutely", decode_datablock),
        flags=take_optional(obj, "flags", decode_flags),
    )
    _ignore_leftovers(obj, "forecast")
    return forecast
