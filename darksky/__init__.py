# ABOUTME: Public API of the darksky package.
# ABOUTME: Re-exports the models, decoders, request options, client functions and errors.

from darksky.client import build_forecast_url, create_http_client, fetch_forecast, get_forecast
from darksky.config import API_URL, Settings, load_settings
from darksky.decode import ICON_NAMES, PRECIPITATION_TYPE_NAMES, decode_forecast
from darksky.errors import (
    ConfigError,
    DarkSkyError,
    DecodeError,
    MalformedResponse,
    MissingField,
    TransportError,
    TypeMismatch,
)
from darksky.models import Alert, Datablock, Datapoint, Flags, Forecast, Icon, PrecipitationType
from darksky.names import NameMap
from darksky.options import BLOCK_NAMES, LANGUAGE_NAMES, UNIT_NAMES, Block, ForecastOptions, Language, Unit

__all__ = [
    "API_URL",
    "BLOCK_NAMES",
    "ICON_NAMES",
    "LANGUAGE_NAMES",
    "PRECIPITATION_TYPE_NAMES",
    "UNIT_NAMES",
    "Alert",
    "Block",
    "ConfigError",
    "DarkSkyError",
    "Datablock",
    "Datapoint",
    "DecodeError",
    "Flags",
    "Forecast",
    "ForecastOptions",
    "Icon",
    "Language",
    "MalformedResponse",
    "MissingField",
    "NameMap",
    "PrecipitationType",
    "Settings",
    "TransportError",
    "TypeMismatch",
    "Unit",
    "build_forecast_url",
    "create_http_client",
    "decode_forecast",
    "fetch_forecast",
    "get_forecast",
    "load_settings",
]
