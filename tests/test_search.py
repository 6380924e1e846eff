from itertools import islice

import emojis
from emojis.records import SkinTone
from emojis.search import best_score, search, search_scored


def glyphs(results, count=None):
    return [emoji.as_str() for emoji in islice(results, count)]


class TestScenarios:
    def test_rket_finds_rocket(self):
        assert next(emojis.search("rket")).as_str() == "🚀"

    def test_rckt_finds_rocket(self):
        assert next(emojis.search("rckt")).as_str() == "🚀"

    def test_exact_name(self):
        assert next(emojis.search("grapes")) == "🍇"

    def test_exact_shortcode(self):
        assert next(emojis.search("tada")) == "🎉"

    def test_multi_word(self):
        assert next(emojis.search("cat face")) == "🐱"

    def test_thumbs(self):
        assert glyphs(emojis.search("thumbs"), 2) == ["👍", "👎"]

    def test_scored_results_at_top_level(self):
        emoji, score = next(emojis.search_scored("rket"))
        assert emoji == "🚀"
        assert score == best_score("rket", emoji)


class TestContract:
    def test_no_match_is_empty(self):
        assert list(emojis.search("qqqqqqqqqq")) == []

    def test_empty_query_is_whole_catalog(self):
        assert list(emojis.search("")) == list(emojis.iter())

    def test_idempotent(self):
        for query in ("heart", "face", "rket", "", "flag"):
            assert list(emojis.search(query)) == list(emojis.search(query))

    def test_each_call_is_independent(self):
        first = emojis.search("heart")
        second = emojis.search("heart")
        next(first)
        next(first)
        assert glyphs(second, 1) == glyphs(emojis.search("heart"), 1)

    def test_prefix_consumption(self):
        assert glyphs(emojis.search("face"), 5) == glyphs(list(emojis.search("face")), 5)

    def test_only_default_skin_tones(self):
        results = list(emojis.search("thumbs up"))
        assert results
        assert all(emoji.skin_tone in (SkinTone.default, None) for emoji in results)

    def test_ranking_is_sorted(self):
        ranked = list(search_scored("heart"))
        keys = [(score, -emoji.order) for emoji, score in ranked]
        assert keys == sorted(keys, reverse=True)

    def test_ties_in_recommended_order(self):
        ranked = list(search_scored("face"))
        for (a, score_a), (b, score_b) in zip(ranked, ranked[1:]):
            if score_a == score_b:
                assert a.order < b.order

    def test_substring_matches_come_first(self):
        for query in ("heart", "face", "ock", "flag: f"):
            contiguity = [score.contiguity for _emoji, score in search_scored(query)]
            assert contiguity[0] == 0
            assert contiguity == sorted(contiguity, reverse=True)

    def test_matches_shortcodes(self):
        # only the shortcode :+1: contains a plus sign
        assert glyphs(emojis.search("+1"))[0] == "👍"

    def test_best_score_uses_shortcodes(self):
        eyebrow = emojis.lookup("🤨")
        assert best_score("raised_e", eyebrow).contiguity == 0
        assert best_score("zzz", eyebrow) is None


class TestSmallCatalog:
    def test_search_in_given_catalog(self, small_catalog):
        assert glyphs(search("rket", small_catalog)) == ["🚀", "🦗"]

    def test_empty_query(self, small_catalog):
        assert glyphs(search("", small_catalog)) == ["😀", "👋", "🦗", "🚀", "🍇", "🏁"]

    def test_variants_not_searched(self, small_catalog):
        assert glyphs(search("skin tone", small_catalog)) == []
