# ABOUTME: Contract tests for the enum token tables.
# ABOUTME: Checks decode/encode round trips, injectivity and closed-world rejection for every NameMap.

from enum import StrEnum

import pytest

from darksky.decode import ICON_NAMES, PRECIPITATION_TYPE_NAMES
from darksky.errors import TypeMismatch
from darksky.models import Icon
from darksky.names import NameMap
from darksky.options import BLOCK_NAMES, LANGUAGE_NAMES, UNIT_NAMES

ALL_NAME_MAPS = [ICON_NAMES, PRECIPITATION_TYPE_NAMES, BLOCK_NAMES, LANGUAGE_NAMES, UNIT_NAMES]


@pytest.mark.parametrize("names", ALL_NAME_MAPS, ids=lambda m: m.label)
class TestNameMapTables:
    def test_round_trip(self, names):
        """decode(encode(v)) returns v for every variant.

        Implementation: Walks every member of the enum behind the map.
        Passing implies: The token table is consistent in both directions.
        """
        for member in names.enum_cls:
            assert names.decode(names.encode(member)) is member

    def test_encode_is_injective(self, names):
        tokens = [names.encode(member) for member in names.enum_cls]
        assert len(tokens) == len(set(tokens))

    def test_pairs_cover_every_member(self, names):
        assert [member for member, _ in names.pairs] == list(names.enum_cls)


class TestNameMapDecode:
    def test_known_token(self):
        assert ICON_NAMES.decode("partly-cloudy-night") is Icon.PARTLY_CLOUDY_NIGHT

    def test_unknown_token_lists_known_ones(self):
        """Unknown tokens raise TypeMismatch labelled with the API key.

        Implementation: Decodes 'hurricane' as a precipitation type.
        Passing implies: The error names the field and every accepted token.
        """
        with pytest.raises(TypeMismatch) as exc_info:
            PRECIPITATION_TYPE_NAMES.decode("hurricane")
        error = exc_info.value
        assert error.field == "precipType"
        assert error.expected == "one of rain, sleet, snow"
        assert error.actual == "hurricane"

    def test_non_string_rejected(self):
        with pytest.raises(TypeMismatch) as exc_info:
            UNIT_NAMES.decode(1)
        assert exc_info.value.actual == 1

    def test_duplicate_tokens_rejected(self):
        """A table with aliased tokens cannot be built.

        Implementation: Defines a StrEnum where two members share a value (an alias).
        Passing implies: encode stays injective for any NameMap that exists.
        """

        class Aliased(StrEnum):
            A = "a"
            B = "a"

        with pytest.raises(ValueError):
            NameMap("aliased", Aliased)
