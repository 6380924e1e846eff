# SPDX-FileCopyrightText: 2018-2025 Joonas Rautiola <mail@joinemm.dev>
# SPDX-License-Identifier: MPL-2.0
# https://git.joinemm.dev/miso-bot

from typing import Optional

import regex

from emojis.catalog import get_catalog
from emojis.records import Emoji

SHORTCODE_DELIMITERS = regex.compile(r"\A:|:\Z")


def normalize_shortcode(text: str) -> str:
    """`:rocket:` -> `rocket`, anything else is returned as is"""
    return SHORTCODE_DELIMITERS.sub("", text)


def get(emoji: str) -> Optional[Emoji]:
    """Find an emoji by its literal glyph.

    The emoji presentation selector is optional, so both the fully
    qualified and the unqualified form of an emoji resolve to the same record.
    """
    if not emoji:
        return None
    catalog = get_catalog()
    return catalog.get_by_glyph(emoji) or catalog.get_by_bare_glyph(emoji)


def get_by_shortcode(shortcode: str) -> Optional[Emoji]:
    shortcode = normalize_shortcode(shortcode)
    if not shortcode:
        return None
    return get_catalog().get_by_shortcode(shortcode)


def lookup(query: str) -> Optional[Emoji]:
    """Resolve either a glyph or a shortcode, glyphs taking precedence"""
    return get(query) or get_by_shortcode(query)
