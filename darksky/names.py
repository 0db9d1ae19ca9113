# ABOUTME: Bidirectional mapping between API string tokens and closed enum types.
# ABOUTME: One NameMap per categorical field, shared by response decoding and query building.

from enum import StrEnum
from typing import Any, Generic, TypeVar

from darksky.errors import TypeMismatch

E = TypeVar("E", bound=StrEnum)


class NameMap(Generic[E]):
    """Token table for a closed enum.

    The table is the enum itself: each member's value is its API token, so adding
    a variant is a one-line change to the enum. ``label`` is the API key the tokens
    appear under and is used as the field name in decode errors.
    """

    def __init__(self, label: str, enum_cls: type[E]):
        self.label = label
        self.enum_cls = enum_cls
        self._by_token: dict[str, E] = {member.value: member for member in enum_cls}
        # __members__ includes aliases, which share a token with another member
        if len(self._by_token) != len(enum_cls.__members__):
            raise ValueError(f"{enum_cls.__name__} has duplicate tokens")

    @property
    def pairs(self) -> list[tuple[E, str]]:
        return [(member, member.value) for member in self.enum_cls]

    @property
    def tokens(self) -> list[str]:
        return list(self._by_token)

    def decode(self, value: Any) -> E:
        """Look up a token exactly (case-sensitive); anything else is a TypeMismatch."""
        if isinstance(value, str):
            member = self._by_token.get(value)
            if member is not None:
                return member
        raise TypeMismatch(self.label, f"one of {', '.join(self.tokens)}", value)

    def encode(self, member: E) -> str:
        return str(member.value)

    def __repr__(self) -> str:
        return f"NameMap({self.label!r}, {self.enum_cls.__name__})"
