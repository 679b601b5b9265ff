"""
Tests for tokenizing text and aggregating word frequencies.
"""

import os
import sys

import pytest

# Add parent directory to path for imports
sys.path.append(os.path.dirname(os.path.dirname(__file__)))

from word_frequency import (
    FrequencyAggregator,
    FrequencyTable,
    WordTokenizer,
    count_words,
    strip_trailing_s,
)


@pytest.fixture
def tokenizer():
    return WordTokenizer()


@pytest.mark.unit
class TestWordTokenizer:
    """Test splitting and filtering of raw text."""

    def test_splits_on_whitespace_and_punctuation(self, tokenizer):
        tokens = list(tokenizer.tokenize(["Hello, world! Python;rocks (really)"]))
        assert tokens == ["hello", "world", "python", "rocks", "really"]

    def test_keeps_order_across_chunks(self, tokenizer):
        tokens = list(tokenizer.tokenize(["zebra apple", "mango\nkiwi"]))
        assert tokens == ["zebra", "apple", "mango", "kiwi"]

    def test_drops_single_characters(self, tokenizer):
        assert list(tokenizer.tokenize(["x y z q"])) == []

    def test_rejects_tokens_without_letters(self, tokenizer):
        assert list(tokenizer.tokenize(["1234 56 -- 3.14"])) == []

    def test_keeps_letters_mixed_with_digits(self, tokenizer):
        assert list(tokenizer.tokenize(["python3 mp4"])) == ["python3", "mp4"]

    def test_rejects_characters_outside_allowed_set(self, tokenizer):
        assert list(tokenizer.tokenize(["café naïve plain"])) == ["plain"]

    def test_allows_hyphens_and_inner_apostrophes(self, tokenizer):
        tokens = list(tokenizer.tokenize(["well-known o'clock"]))
        assert tokens == ["well-known", "o'clock"]

    def test_strips_outer_apostrophes_and_underscores(self, tokenizer):
        tokens = list(tokenizer.tokenize(["'quoted' __dunder__ _private"]))
        assert tokens == ["quoted", "dunder", "private"]

    def test_rejects_stop_words_case_insensitively(self, tokenizer):
        assert list(tokenizer.tokenize(["The THE tHe river"])) == ["river"]

    def test_rejects_stop_words_with_trailing_s(self, tokenizer):
        # "others" is "other" + s, "abouts" is "about" + s
        assert list(tokenizer.tokenize(["others abouts rivers"])) == ["rivers"]

    def test_exclude_words_extend_the_stop_list(self):
        tokenizer = WordTokenizer(exclude_words=["Cloud"])
        assert list(tokenizer.tokenize(["cloud clouds rain"])) == ["rain"]

    def test_include_words_remove_stop_words(self):
        tokenizer = WordTokenizer(include_words=["not"])
        assert list(tokenizer.tokenize(["not the end"])) == ["not", "end"]

    def test_custom_stop_words_replace_defaults(self):
        tokenizer = WordTokenizer(stop_words=["river"])
        assert list(tokenizer.tokenize(["the river"])) == ["the"]

    def test_case_sensitive_mode_keeps_case(self):
        tokenizer = WordTokenizer(case_sensitive=True)
        assert list(tokenizer.tokenize(["Python python"])) == ["Python", "python"]

    def test_normalize_returns_none_for_rejected_token(self, tokenizer):
        assert tokenizer.normalize("'") is None
        assert tokenizer.normalize("Mountain") == "mountain"


@pytest.mark.unit
class TestFrequencyAggregator:
    """Test counting, plural merging and ranking."""

    def test_strip_trailing_s(self):
        assert strip_trailing_s("cats") == "cat"
        assert strip_trailing_s("cat") == "cat"

    def test_singular_then_plural_merge(self):
        aggregator = FrequencyAggregator()
        aggregator.add_all(["cat", "cat", "cats"])
        assert aggregator.counts == {"cat": 3}

    def test_plural_then_singular_moves_count_to_singular(self):
        aggregator = FrequencyAggregator()
        aggregator.add_all(["cats", "cat"])
        assert aggregator.counts == {"cat": 2}

    def test_plural_seen_alone_stays_plural(self):
        aggregator = FrequencyAggregator()
        aggregator.add_all(["dogs", "dogs"])
        assert aggregator.counts == {"dogs": 2}

    def test_repeated_words_ending_in_s_accumulate(self):
        aggregator = FrequencyAggregator()
        aggregator.add_all(
            ["analysis", "process", "analysis", "word", "process", "analysis"]
        )
        table = aggregator.build_table()
        assert table.entries == (("analysis", 3), ("process", 2), ("word", 1))

    def test_repeat_keeps_first_seen_position(self):
        aggregator = FrequencyAggregator()
        aggregator.add_all(["class", "glass", "class", "glass"])
        assert aggregator.build_table().words == ["class", "glass"]

    def test_keys_are_unique_merged_forms(self):
        aggregator = FrequencyAggregator()
        aggregator.add_all(["tree", "trees", "trees", "tree", "bird", "birds"])
        assert aggregator.counts == {"tree": 4, "bird": 2}

    def test_ranks_by_descending_count(self):
        aggregator = FrequencyAggregator()
        aggregator.add_all(["low", "high", "high", "mid", "high", "mid"])
        table = aggregator.build_table()
        assert table.entries == (("high", 3), ("mid", 2), ("low", 1))

    def test_ties_keep_first_seen_order(self):
        aggregator = FrequencyAggregator()
        aggregator.add_all(["zeta", "alpha", "zeta", "alpha", "mid"])
        assert aggregator.build_table().words == ["zeta", "alpha", "mid"]

    def test_renamed_plural_keeps_its_first_seen_position(self):
        aggregator = FrequencyAggregator()
        aggregator.add_all(["apples", "pear", "apple", "pear"])
        assert aggregator.build_table().entries == (("apple", 2), ("pear", 2))

    def test_truncates_to_top_ranked_words(self):
        tokens = []
        for i in range(50):
            tokens.extend([f"term{i:02d}"] * (i + 1))

        aggregator = FrequencyAggregator(max_unique_words=10)
        aggregator.add_all(tokens)
        table = aggregator.build_table()

        assert len(table) == 10
        assert table.words == [f"term{i:02d}" for i in range(49, 39, -1)]

    def test_max_and_average_count(self):
        aggregator = FrequencyAggregator()
        aggregator.add_all(["one", "two", "two", "three", "three", "three"])
        table = aggregator.build_table()
        assert table.max_count == 3
        assert table.average_count == pytest.approx(2.0)
        assert table.total_count == 6

    def test_empty_input_gives_empty_table(self):
        table = FrequencyAggregator().build_table()
        assert len(table) == 0
        assert table.max_count == 0
        assert table.average_count == 0.0

    def test_rejects_non_positive_limit(self):
        with pytest.raises(ValueError, match="max_unique_words"):
            FrequencyAggregator(max_unique_words=0)


@pytest.mark.unit
class TestFrequencyTable:
    def test_lookup_and_membership(self):
        table = FrequencyTable([("river", 4), ("sea", 2)])
        assert table["river"] == 4
        assert "sea" in table
        assert "lake" not in table
        assert list(table) == ["river", "sea"]
        assert table.most_common(1) == [("river", 4)]


@pytest.mark.integration
def test_count_words_from_text(sample_text):
    table = count_words([sample_text])

    # "mountains" is seen first, then "mountain" takes its count over
    assert table["mountain"] == 5
    assert table["cloud"] == 5
    assert table["river"] == 5
    assert table["sea"] == 4
    assert "the" not in table
    assert table.max_count == 5
