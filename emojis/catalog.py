# SPDX-FileCopyrightText: 2018-2025 Joonas Rautiola <mail@joinemm.dev>
# SPDX-License-Identifier: MPL-2.0
# https://git.joinemm.dev/miso-bot

import threading
from pathlib import Path
from types import MappingProxyType
from typing import Any, Iterable, Iterator, Mapping, Optional

import orjson
from loguru import logger

from emojis.exceptions import CatalogIntegrityError
from emojis.groups import Group
from emojis.records import Emoji, SkinTone, UnicodeVersion

DATA_PATH = Path(__file__).parent / "data" / "emojis.json"

VARIATION_SELECTOR = "\ufe0f"

TONED = [
    SkinTone.light,
    SkinTone.medium_light,
    SkinTone.medium,
    SkinTone.medium_dark,
    SkinTone.dark,
]


def strip_variation_selector(glyph: str) -> str:
    return glyph.replace(VARIATION_SELECTOR, "")


class Catalog:
    """Immutable emoji table with the indices every query reads from.

    Only default skin tone emojis take part in ordered iteration and groups,
    skin tone variants are reachable through glyph and shortcode lookups and
    through their default emoji.
    """

    def __init__(self, emojis: Iterable[Emoji], unicode_version: Optional[str] = None):
        self.unicode_version = unicode_version
        self._by_glyph: dict[str, Emoji] = {}
        self._by_bare_glyph: dict[str, Emoji] = {}
        self._by_shortcode: dict[str, Emoji] = {}

        seen_orders: dict[int, Emoji] = {}
        defaults = []
        for emoji in emojis:
            defaults.append(emoji)
            for member in emoji.skin_tones() or (emoji,):
                self._index(member, seen_orders)

        self.by_order: tuple[Emoji, ...] = tuple(sorted(defaults, key=lambda e: e.order))
        by_group = {group: tuple(e for e in self.by_order if e.group is group) for group in Group}

        self.by_glyph: Mapping[str, Emoji] = MappingProxyType(self._by_glyph)
        self.by_bare_glyph: Mapping[str, Emoji] = MappingProxyType(self._by_bare_glyph)
        self.by_shortcode: Mapping[str, Emoji] = MappingProxyType(self._by_shortcode)
        self.by_group: Mapping[Group, tuple[Emoji, ...]] = MappingProxyType(by_group)

    def _index(self, emoji: Emoji, seen_orders: dict[int, Emoji]):
        glyph = emoji.as_str()
        if not glyph:
            raise CatalogIntegrityError("Emoji with an empty glyph", record=emoji)
        if glyph in self._by_glyph:
            raise CatalogIntegrityError(f"Duplicate glyph {glyph}", record=emoji)
        if emoji.order in seen_orders:
            raise CatalogIntegrityError(
                f"Duplicate order {emoji.order}",
                record=emoji,
                other=seen_orders[emoji.order],
            )
        seen_orders[emoji.order] = emoji
        self._by_glyph[glyph] = emoji
        self._by_bare_glyph.setdefault(strip_variation_selector(glyph), emoji)

        for shortcode in emoji.shortcodes():
            if (previous := self._by_shortcode.get(shortcode)) is not None:
                logger.warning(
                    f"Shortcode :{shortcode}: is shared by {previous!r} and {emoji!r}, keeping the latter"
                )
            self._by_shortcode[shortcode] = emoji

    @classmethod
    def from_file(cls, path: Path | str) -> "Catalog":
        with open(path, "rb") as f:
            document = orjson.loads(f.read())
        catalog = cls.from_document(document)
        logger.info(
            f"Loaded {len(catalog)} emojis ({len(catalog.by_glyph)} including skin tones) "
            f"from {Path(path).name}, Unicode {catalog.unicode_version}"
        )
        return catalog

    @classmethod
    def from_document(cls, document: dict[str, Any]) -> "Catalog":
        try:
            records = document["emojis"]
        except (KeyError, TypeError):
            raise CatalogIntegrityError("Dataset has no `emojis` list")
        return cls.from_records(records, unicode_version=document.get("unicode_version"))

    @classmethod
    def from_records(
        cls, records: Iterable[dict[str, Any]], unicode_version: Optional[str] = None
    ) -> "Catalog":
        return cls((build_emoji(record) for record in records), unicode_version)

    def get_by_glyph(self, glyph: str) -> Optional[Emoji]:
        return self.by_glyph.get(glyph)

    def get_by_bare_glyph(self, glyph: str) -> Optional[Emoji]:
        return self.by_bare_glyph.get(strip_variation_selector(glyph))

    def get_by_shortcode(self, shortcode: str) -> Optional[Emoji]:
        return self.by_shortcode.get(shortcode)

    def all(self) -> tuple[Emoji, ...]:
        return self.by_order

    def group_members(self, group: Group) -> tuple[Emoji, ...]:
        return self.by_group[group]

    def __len__(self):
        return len(self.by_order)


def _field(record: dict[str, Any], name: str):
    try:
        return record[name]
    except KeyError:
        raise CatalogIntegrityError(f"Emoji record is missing `{name}`", record=record)
    except TypeError:
        raise CatalogIntegrityError("Emoji record is not a mapping", record=record)


def _version(record: dict[str, Any]) -> Optional[UnicodeVersion]:
    if (version := record.get("unicode_version")) is None:
        return None
    try:
        return UnicodeVersion.parse(version)
    except (ValueError, AttributeError):
        raise CatalogIntegrityError(f"Invalid unicode version {version!r}", record=record)


def _order(record: dict[str, Any]) -> int:
    order = _field(record, "order")
    if not isinstance(order, int) or isinstance(order, bool):
        raise CatalogIntegrityError(f"Order must be an integer, got {order!r}", record=record)
    return order


def build_emoji(record: dict[str, Any]) -> Emoji:
    """Turn one dataset record, with its skin tone variants, into shared Emoji instances"""
    group_title = _field(record, "group")
    try:
        group = Group(group_title)
    except ValueError:
        raise CatalogIntegrityError(f"Unknown group {group_title!r}", record=record)

    variants = record.get("skin_tones") or []
    if variants and len(variants) != len(TONED):
        raise CatalogIntegrityError(
            f"Expected {len(TONED)} skin tone variants, got {len(variants)}", record=record
        )

    emoji = Emoji(
        glyph=_field(record, "emoji"),
        name=_field(record, "name"),
        group=group,
        order=_order(record),
        shortcodes=record.get("shortcodes", ()),
        unicode_version=_version(record),
        skin_tone=SkinTone.default if variants else None,
    )
    if not variants:
        return emoji

    family = [emoji]
    for tone, variant in zip(TONED, variants):
        if _field(variant, "skin_tone") != tone.value:
            raise CatalogIntegrityError(
                f"Skin tone variants out of order, expected {tone.value}", record=variant
            )
        family.append(
            Emoji(
                glyph=_field(variant, "emoji"),
                name=_field(variant, "name"),
                group=group,
                order=_order(variant),
                shortcodes=variant.get("shortcodes", ()),
                unicode_version=_version(variant),
                skin_tone=tone,
            )
        )

    family = tuple(family)
    for member in family:
        member._bind_family(family)
    return emoji


_catalog: Optional[Catalog] = None
_lock = threading.Lock()


def get_catalog() -> Catalog:
    """The process wide catalog, built from the embedded dataset on first use"""
    global _catalog
    if _catalog is None:
        with _lock:
            if _catalog is None:
                _catalog = Catalog.from_file(DATA_PATH)
    return _catalog


def iter_emojis() -> Iterator[Emoji]:
    """Every default skin tone emoji in recommended order, a fresh iterator per call"""
    return iter(get_catalog().all())
