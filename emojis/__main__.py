# SPDX-FileCopyrightText: 2018-2025 Joonas Rautiola <mail@joinemm.dev>
# SPDX-License-Identifier: MPL-2.0
# https://git.joinemm.dev/miso-bot

import os
import sys
from itertools import islice

from dotenv import load_dotenv
from loguru import logger

# dotenv has to be loaded before the log level is read
load_dotenv()

import emojis  # noqa: E402
from emojis.exceptions import UnknownGroupError  # noqa: E402
from emojis.log import setup_logging  # noqa: E402

USAGE = (
    "usage: emojis [dev] lookup <emoji|shortcode>\n"
    "       emojis [dev] search <query> [limit]\n"
    "       emojis [dev] group <group>\n"
    "       emojis [dev] groups"
)

DEFAULT_SEARCH_LIMIT = 10


def format_emoji(emoji: emojis.Emoji) -> str:
    if shortcode := emoji.shortcode():
        return f"{emoji}  {emoji.name}  :{shortcode}:"
    return f"{emoji}  {emoji.name}"


def usage() -> int:
    print(USAGE, file=sys.stderr)
    return 2


def main(argv: list[str] | None = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)

    developer_mode = args[:1] == ["dev"]
    if developer_mode:
        args = args[1:]
        setup_logging("DEBUG")
        logger.info("Developer mode is ON")
    else:
        setup_logging(os.environ.get("EMOJIS_LOG_LEVEL", "WARNING"))

    match args:
        case ["lookup", query]:
            emoji = emojis.lookup(query)
            if emoji is None:
                print(f"No emoji found for `{query}`", file=sys.stderr)
                return 1
            print(format_emoji(emoji))

        case ["search", query]:
            for emoji in islice(emojis.search(query), DEFAULT_SEARCH_LIMIT):
                print(format_emoji(emoji))

        case ["search", query, limit]:
            try:
                limit = int(limit)
            except ValueError:
                return usage()
            for emoji in islice(emojis.search(query), max(limit, 0)):
                print(format_emoji(emoji))

        case ["group", name]:
            try:
                group = emojis.Group.from_name(name)
            except UnknownGroupError as e:
                print(e, file=sys.stderr)
                return 2
            for emoji in group.emojis():
                print(format_emoji(emoji))

        case ["groups"]:
            for group in emojis.Group.all():
                print(f"{group.name:20} {group.title}")

        case _:
            return usage()

    return 0


if __name__ == "__main__":
    sys.exit(main())
