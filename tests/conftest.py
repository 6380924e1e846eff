import pytest

from emojis.catalog import Catalog, get_catalog


def make_record(emoji, name, order, group="Smileys & Emotion", shortcodes=(), **extra):
    return {
        "emoji": emoji,
        "name": name,
        "group": group,
        "unicode_version": "1.0",
        "order": order,
        "shortcodes": list(shortcodes),
        **extra,
    }


def make_skin_tones(base, name, first_order):
    tones = [
        ("\U0001f3fb", "light"),
        ("\U0001f3fc", "medium_light"),
        ("\U0001f3fd", "medium"),
        ("\U0001f3fe", "medium_dark"),
        ("\U0001f3ff", "dark"),
    ]
    return [
        {
            "emoji": base + modifier,
            "name": f"{name}: {tone.replace('_', '-')} skin tone",
            "unicode_version": "1.0",
            "order": first_order + i,
            "shortcodes": [f"{name.replace(' ', '_')}_tone{i + 1}"],
            "skin_tone": tone,
        }
        for i, (modifier, tone) in enumerate(tones)
    ]


@pytest.fixture
def records():
    return [
        make_record("😀", "grinning face", 0, shortcodes=["grinning"]),
        make_record("🚀", "rocket", 10, group="Travel & Places", shortcodes=["rocket"]),
        make_record("🦗", "cricket", 8, group="Animals & Nature", shortcodes=["cricket"]),
        make_record(
            "👋",
            "waving hand",
            2,
            group="People & Body",
            shortcodes=["wave"],
            skin_tones=make_skin_tones("👋", "waving hand", 3),
        ),
        make_record("🍇", "grapes", 20, group="Food & Drink", shortcodes=["grapes"]),
        make_record("🏁", "chequered flag", 30, group="Flags"),
    ]


@pytest.fixture
def small_catalog(records):
    return Catalog.from_records(records, unicode_version="15.1")


@pytest.fixture(scope="session")
def catalog():
    return get_catalog()
