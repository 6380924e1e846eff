# SPDX-FileCopyrightText: 2018-2025 Joonas Rautiola <mail@joinemm.dev>
# SPDX-License-Identifier: MPL-2.0
# https://git.joinemm.dev/miso-bot

"""
Offline Unicode emoji catalog.

    >>> import emojis
    >>> emojis.lookup("raised_eyebrow").name
    'face with raised eyebrow'
    >>> next(emojis.search("rket")).as_str()
    '🚀'
"""

from emojis import exceptions
from emojis.catalog import Catalog, get_catalog
from emojis.catalog import iter_emojis as iter
from emojis.groups import Group
from emojis.lookup import get, get_by_shortcode, lookup, normalize_shortcode
from emojis.records import Emoji, SkinTone, UnicodeVersion
from emojis.search import search, search_scored

__all__ = [
    "Catalog",
    "Emoji",
    "Group",
    "SkinTone",
    "UnicodeVersion",
    "exceptions",
    "get",
    "get_by_shortcode",
    "get_catalog",
    "iter",
    "lookup",
    "normalize_shortcode",
    "search",
    "search_scored",
]
