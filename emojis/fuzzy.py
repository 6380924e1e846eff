# SPDX-FileCopyrightText: 2018-2025 Joonas Rautiola <mail@joinemm.dev>
# SPDX-License-Identifier: MPL-2.0
# https://git.joinemm.dev/miso-bot

"""
Subsequence matching of a query against emoji names and shortcodes.

A query matches when all of its characters appear in the candidate in the
same order, not necessarily next to each other. Matches are compared with
`Score`, a tuple ordered field by field, so a match with fewer skipped
characters always outranks one with more, whatever the bonuses.
"""

from typing import NamedTuple, Optional

import regex

# match begins at the very first character of the candidate
START_BONUS = 3
# match begins at the first letter of a later word
WORD_START_BONUS = 2
# every other query character that lands on the first letter of a word
WORD_BOUNDARY_BONUS = 1

WORD_START = regex.compile(r"(?<![\p{L}\p{N}])[\p{L}\p{N}]")


class Score(NamedTuple):
    contiguity: int
    bonus: int
    precision: float


EMPTY_QUERY_SCORE = Score(0, 0, 0.0)


def word_starts(candidate: str) -> set[int]:
    return {match.start() for match in WORD_START.finditer(candidate)}


def align(query: str, candidate: str) -> Optional[list[int]]:
    """Candidate positions of the query characters, or None if the query is not a subsequence.

    A literal occurrence is preferred over a scattered one, and among literal
    occurrences the first one beginning a word wins.
    """
    if (start := candidate.find(query)) != -1:
        starts = word_starts(candidate)
        first = start
        while start != -1 and start not in starts:
            start = candidate.find(query, start + 1)
        if start == -1:
            start = first
        return list(range(start, start + len(query)))

    positions = []
    cursor = 0
    for char in query:
        cursor = candidate.find(char, cursor)
        if cursor == -1:
            return None
        positions.append(cursor)
        cursor += 1
    return positions


def score(query: str, candidate: str) -> Optional[Score]:
    """Score how well `query` matches `candidate`, higher is better, None is no match.

    An empty query matches every candidate with the same score.
    """
    if not query:
        return EMPTY_QUERY_SCORE

    query = query.lower()
    candidate = candidate.lower()
    if len(query) > len(candidate):
        return None

    positions = align(query, candidate)
    if positions is None:
        return None

    gaps = positions[-1] - positions[0] + 1 - len(positions)

    starts = word_starts(candidate)
    if positions[0] == 0:
        bonus = START_BONUS
    elif positions[0] in starts:
        bonus = WORD_START_BONUS
    else:
        bonus = 0
    bonus += WORD_BOUNDARY_BONUS * sum(1 for position in positions[1:] if position in starts)

    return Score(-gaps, bonus, len(query) / len(candidate))
