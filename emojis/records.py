# SPDX-FileCopyrightText: 2018-2025 Joonas Rautiola <mail@joinemm.dev>
# SPDX-License-Identifier: MPL-2.0
# https://git.joinemm.dev/miso-bot

from enum import Enum
from functools import total_ordering
from typing import Iterable, Iterator, NamedTuple, Optional

from emojis.groups import Group


class SkinTone(Enum):
    default = "default"
    light = "light"
    medium_light = "medium_light"
    medium = "medium"
    medium_dark = "medium_dark"
    dark = "dark"


class UnicodeVersion(NamedTuple):
    major: int
    minor: int

    @classmethod
    def parse(cls, text: str) -> "UnicodeVersion":
        major, minor = text.split(".", 1)
        return cls(int(major), int(minor))

    def __str__(self):
        return f"{self.major}.{self.minor}"


@total_ordering
class Emoji:
    """A single emoji of the catalog.

    Records are created once by the catalog loader and shared by every index,
    so identity comparisons between lookups hold. Comparing against a plain
    string compares the glyph, ordering follows the Unicode recommended order.
    """

    __slots__ = (
        "_glyph",
        "_name",
        "_group",
        "_order",
        "_shortcodes",
        "_unicode_version",
        "_skin_tone",
        "_family",
    )

    def __init__(
        self,
        glyph: str,
        name: str,
        group: Group,
        order: int,
        shortcodes: Iterable[str] = (),
        unicode_version: Optional[UnicodeVersion] = None,
        skin_tone: Optional[SkinTone] = None,
    ):
        self._glyph = glyph
        self._name = name
        self._group = group
        self._order = order
        self._shortcodes = tuple(shortcodes)
        self._unicode_version = unicode_version
        self._skin_tone = skin_tone
        # all six tone variants, default first
        self._family: Optional[tuple["Emoji", ...]] = None

    @property
    def name(self) -> str:
        return self._name

    @property
    def group(self) -> Group:
        return self._group

    @property
    def order(self) -> int:
        return self._order

    @property
    def unicode_version(self) -> Optional[UnicodeVersion]:
        return self._unicode_version

    @property
    def skin_tone(self) -> Optional[SkinTone]:
        """`None` when the emoji does not support skin tones"""
        return self._skin_tone

    def as_str(self) -> str:
        return self._glyph

    def shortcode(self) -> Optional[str]:
        """The canonical shortcode, if the emoji has any"""
        return self._shortcodes[0] if self._shortcodes else None

    def shortcodes(self) -> Iterator[str]:
        return iter(self._shortcodes)

    def skin_tones(self) -> Optional[Iterator["Emoji"]]:
        if self._family is None:
            return None
        return iter(self._family)

    def with_skin_tone(self, skin_tone: SkinTone) -> Optional["Emoji"]:
        if self._family is None:
            return None
        for emoji in self._family:
            if emoji.skin_tone is skin_tone:
                return emoji
        return None

    def _bind_family(self, family: tuple["Emoji", ...]):
        self._family = family

    def __str__(self):
        return self._glyph

    def __repr__(self):
        return f"Emoji({self._glyph!r}, name={self._name!r}, order={self._order})"

    def __hash__(self):
        return hash(self._glyph)

    def __eq__(self, other):
        if isinstance(other, Emoji):
            return self._glyph == other._glyph
        if isinstance(other, str):
            return self._glyph == other
        return NotImplemented

    def __lt__(self, other):
        if isinstance(other, Emoji):
            return self._order < other._order
        return NotImplemented
