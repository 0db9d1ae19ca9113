# ABOUTME: Request-side enums and the query-parameter builder for forecast requests.
# ABOUTME: Maps Block, Language and Unit choices onto Dark Sky's exclude/extend/lang/units params.

from enum import StrEnum, unique

from pydantic import BaseModel, ConfigDict

from darksky.names import NameMap


@unique
class Block(StrEnum):
    """A section of the response that can be excluded."""

    CURRENTLY = "currently"
    DAILY = "daily"
    FLAGS = "flags"
    HOURLY = "hourly"
    MINUTELY = "minutely"


@unique
class Language(StrEnum):
    ARABIC = "ar"
    AZERBAIJANI = "az"
    BELARUSIAN = "be"
    BOSNIAN = "bs"
    CATALAN = "ca"
    CZECH = "cs"
    GERMAN = "de"
    GREEK = "el"
    ENGLISH = "en"
    SPANISH = "es"
    ESTONIAN = "et"
    FRENCH = "fr"
    CROATIAN = "hr"
    HUNGARIAN = "hu"
    INDONESIAN = "id"
    ITALIAN = "it"
    ICELANDIC = "is"
    CORNISH = "kw"
    NORWEGIAN_BOKMAL = "nb"
    DUTCH = "nl"
    POLISH = "pl"
    PORTUGUESE = "pt"
    RUSSIAN = "ru"
    SLOVAK = "sk"
    SLOVENIAN = "sl"
    SERBIAN = "sr"
    SWEDISH = "sv"
    TETUM = "tet"
    TURKISH = "tr"
    UKRAINIAN = "uk"
    PIG_LATIN = "x-pig-latin"
    CHINESE = "zh"
    TRADITIONAL_CHINESE = "zh-tw"


@unique
class Unit(StrEnum):
    """Unit system for the response. AUTO picks one based on the location."""

    AUTO = "auto"
    CA = "ca"
    SI = "si"
    UK2 = "uk2"
    US = "us"


BLOCK_NAMES = NameMap("exclude", Block)
LANGUAGE_NAMES = NameMap("lang", Language)
UNIT_NAMES = NameMap("units", Unit)


class ForecastOptions(BaseModel):
    """Optional query parameters for a forecast request."""

    model_config = ConfigDict(frozen=True)

    exclude: list[Block] = []
    extend_hourly: bool = False
    language: Language | None = None
    units: Unit | None = None

    def to_params(self) -> dict[str, str]:
        """Build the query string parameters. Unset options are left out entirely."""
        params: dict[str, str] = {}
        if self.exclude:
            # dict.fromkeys keeps first-seen order while dropping repeats
            blocks = dict.fromkeys(BLOCK_NAMES.encode(block) for block in self.exclude)
            params["exclude"] = ",".join(blocks)
        if self.extend_hourly:
            params["extend"] = "hourly"
        if self.language is not None:
            params["lang"] = LANGUAGE_NAMES.encode(self.language)
        if self.units is not None:
            params["units"] = UNIT_NAMES.encode(self.units)
        return params
