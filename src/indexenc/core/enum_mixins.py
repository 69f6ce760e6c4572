# topmark:header:start
#
#   project      : IndexEnc
#   file         : enum_mixins.py
#   file_relpath : src/indexenc/core/enum_mixins.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Keyed string enums shared by the encoder and the CLI.

A `KeyedStrEnum` member is its own stable machine key (``Shape.SEQ == "seq"``)
and carries a human label plus the alternative spellings accepted on input.
The keys are what users see: in `UnsupportedShapeError` messages, in the
``--input-format`` / ``--format`` choices and in shell completion.

Example:
    ```python
    class InputFormat(KeyedStrEnum):
        TOML = ("toml", "TOML document", ("tml",))
        JSON = ("json", "JSON document")

    assert InputFormat.parse("TML") is InputFormat.TOML
    assert InputFormat.keys() == ("toml", "json")
    ```
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, TypeVar

if TYPE_CHECKING:
    from collections.abc import Iterable

_KS = TypeVar("_KS", bound="KeyedStrEnum")


def _norm_token(s: str) -> str:
    """Normalize a user token: case-insensitive, '-' and ' ' read as '_'."""
    return s.strip().lower().replace("-", "_").replace(" ", "_")


class KeyedStrEnum(str, Enum):
    """String enum whose value is a stable key, with a label and input aliases.

    Members are declared as ``NAME = (key, label[, aliases])``.

    Attributes:
        label (str): Human-readable description, used in error messages.
        aliases (tuple[str, ...]): Extra tokens accepted by `parse()`.
    """

    label: str
    aliases: tuple[str, ...]

    def __new__(
        cls: type[_KS],
        key: str,
        label: str,
        aliases: Iterable[str] = (),
    ) -> _KS:
        obj: _KS = str.__new__(cls, key)
        obj._value_ = key
        obj.label = label
        obj.aliases = tuple(aliases)
        return obj

    def __str__(self) -> str:
        return str(self.value)

    @property
    def key(self) -> str:
        """Stable machine key (same as `.value`)."""
        return str(self.value)

    @classmethod
    def keys(cls) -> tuple[str, ...]:
        """Return the keys of all members, in declaration order."""
        return tuple(m.key for m in cls)

    @classmethod
    def parse(cls: type[_KS], raw: str | None) -> _KS | None:
        """Parse a user token into a member.

        The token is matched against each member's key, its Python name and
        its aliases, after normalization.

        Args:
            raw (str | None): The token, e.g. ``"JSON"`` or ``"unit-variant"``.

        Returns:
            _KS | None: The matching member, or None.
        """
        if raw is None:
            return None
        token: str = _norm_token(raw)
        for m in cls:
            candidates: tuple[str, ...] = (m.key, m.name, *m.aliases)
            if any(token == _norm_token(c) for c in candidates):
                return m
        return None
