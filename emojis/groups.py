# SPDX-FileCopyrightText: 2018-2025 Joonas Rautiola <mail@joinemm.dev>
# SPDX-License-Identifier: MPL-2.0
# https://git.joinemm.dev/miso-bot

from enum import Enum
from typing import TYPE_CHECKING, Iterator

from emojis import exceptions

if TYPE_CHECKING:
    from emojis.records import Emoji


class Group(Enum):
    """Emoji groups, in the order the Unicode emoji charts list them"""

    smileys_and_emotion = "Smileys & Emotion"
    people_and_body = "People & Body"
    animals_and_nature = "Animals & Nature"
    food_and_drink = "Food & Drink"
    travel_and_places = "Travel & Places"
    activities = "Activities"
    objects = "Objects"
    symbols = "Symbols"
    flags = "Flags"

    @classmethod
    def all(cls) -> Iterator["Group"]:
        return iter(cls)

    @classmethod
    def from_name(cls, name: str) -> "Group":
        """Resolve either the member name (`food_and_drink`) or the Unicode title (`Food & Drink`)"""
        try:
            return cls[name]
        except KeyError:
            pass
        try:
            return cls(name)
        except ValueError:
            raise exceptions.UnknownGroupError(name)

    @property
    def title(self) -> str:
        return self.value

    def emojis(self) -> Iterator["Emoji"]:
        """Iterate over the members of this group in recommended order.

        Every call returns a fresh iterator.
        """
        from emojis.catalog import get_catalog

        return iter(get_catalog().group_members(self))
