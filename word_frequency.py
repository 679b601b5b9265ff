"""
Word frequency counting for the word cloud builder.
Tokenizes raw text chunks, merges singular and plural forms, and ranks the result.
"""

import re
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from config import LAYOUT_CONFIG, TOKENIZER_CONFIG

_HAS_LETTER = re.compile(r"[^\W\d_]")
_ALLOWED_CHARS = re.compile(r"^[a-z0-9'_-]+$", re.IGNORECASE)


class WordTokenizer:
    """Splits raw text into normalized candidate words."""

    def __init__(
        self,
        delimiters: Optional[Iterable[str]] = None,
        stop_words: Optional[Iterable[str]] = None,
        exclude_words: Optional[Iterable[str]] = None,
        include_words: Optional[Iterable[str]] = None,
        case_sensitive: Optional[bool] = None,
        min_word_length: Optional[int] = None,
    ):
        """
        Initialize the tokenizer.

        Args:
            delimiters: Characters that separate words
            stop_words: Words that are never counted
            exclude_words: Extra words to treat as stop words
            include_words: Stop words that should be counted after all
            case_sensitive: Whether to keep the original case of each token
            min_word_length: Shortest token that is kept
        """
        if delimiters is None:
            delimiters = TOKENIZER_CONFIG["delimiters"]
        if stop_words is None:
            stop_words = TOKENIZER_CONFIG["stop_words"]
        if case_sensitive is None:
            case_sensitive = TOKENIZER_CONFIG["case_sensitive"]
        if min_word_length is None:
            min_word_length = TOKENIZER_CONFIG["min_word_length"]

        self.case_sensitive = case_sensitive
        self.min_word_length = min_word_length
        self.strip_chars = TOKENIZER_CONFIG["strip_chars"]
        self._split_pattern = re.compile(
            "[" + "".join(re.escape(d) for d in delimiters) + "]+"
        )

        stop_set = {word.lower() for word in stop_words}
        stop_set.update(word.lower() for word in exclude_words or [])
        stop_set.difference_update(word.lower() for word in include_words or [])
        self.stop_words = frozenset(stop_set)

    def tokenize(self, chunks: Iterable[str]) -> Iterator[str]:
        """Yield the accepted tokens from each chunk, in order."""
        for chunk in chunks:
            for raw in self._split_pattern.split(chunk):
                token = self.normalize(raw)
                if token is not None:
                    yield token

    def normalize(self, raw: str) -> Optional[str]:
        """Return the normalized form of a raw token, or None if it is rejected."""
        token = raw.strip(self.strip_chars)
        if not self.case_sensitive:
            token = token.lower()

        if len(token) < self.min_word_length:
            return None
        if not _HAS_LETTER.search(token):
            return None
        if not _ALLOWED_CHARS.match(token):
            return None
        if self.is_stop_word(token):
            return None
        return token

    def is_stop_word(self, token: str) -> bool:
        """Check a token against the stop words, allowing one trailing 's'."""
        lowered = token.lower()
        if lowered in self.stop_words:
            return True
        return lowered.endswith("s") and lowered[:-1] in self.stop_words


class FrequencyTable:
    """Ranked, truncated word counts. Read-only once built."""

    def __init__(self, entries: Iterable[Tuple[str, int]]):
        self._entries: Tuple[Tuple[str, int], ...] = tuple(entries)
        self._counts: Dict[str, int] = dict(self._entries)

    @property
    def entries(self) -> Tuple[Tuple[str, int], ...]:
        return self._entries

    @property
    def words(self) -> List[str]:
        return [word for word, _ in self._entries]

    @property
    def unique_words(self) -> int:
        return len(self._entries)

    @property
    def total_count(self) -> int:
        return sum(count for _, count in self._entries)

    @property
    def max_count(self) -> int:
        return self._entries[0][1] if self._entries else 0

    @property
    def average_count(self) -> float:
        if not self._entries:
            return 0.0
        return self.total_count / len(self._entries)

    def most_common(self, n: Optional[int] = None) -> List[Tuple[str, int]]:
        """Return the top ``n`` entries (all of them if ``n`` is None)."""
        if n is None:
            return list(self._entries)
        return list(self._entries[:n])

    def __getitem__(self, word: str) -> int:
        return self._counts[word]

    def __contains__(self, word: object) -> bool:
        return word in self._counts

    def __iter__(self) -> Iterator[str]:
        return iter(self.words)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"FrequencyTable({list(self._entries)!r})"


def strip_trailing_s(word: str) -> str:
    """Remove a single trailing 's', if present."""
    return word[:-1] if word.endswith("s") else word


class FrequencyAggregator:
    """Counts tokens, folding plural forms into the first-seen variant."""

    def __init__(self, max_unique_words: Optional[int] = None):
        """
        Initialize the aggregator.

        Args:
            max_unique_words: Number of words kept after ranking
        """
        if max_unique_words is None:
            max_unique_words = LAYOUT_CONFIG["max_unique_words"]
        if max_unique_words < 1:
            raise ValueError(
                f"max_unique_words must be at least 1, got {max_unique_words}"
            )
        self.max_unique_words = max_unique_words
        self.counts: Dict[str, int] = {}
        self._first_seen: Dict[str, int] = {}
        self._next_position = 0

    def add(self, token: str) -> None:
        """Count a single token."""
        singular = strip_trailing_s(token)
        plural = token + "s"

        if singular in self.counts:
            self.counts[singular] += 1
        elif token in self.counts:
            self.counts[token] += 1
        elif plural in self.counts:
            # Rename the plural entry; it keeps its place in first-seen order
            self.counts[token] = self.counts.pop(plural) + 1
            self._first_seen[token] = self._first_seen.pop(plural)
        else:
            self.counts[token] = 1
            self._first_seen[token] = self._next_position
            self._next_position += 1

    def add_all(self, tokens: Iterable[str]) -> None:
        """Count every token in the stream."""
        for token in tokens:
            self.add(token)

    def build_table(self) -> FrequencyTable:
        """Rank by descending count (ties in first-seen order) and truncate."""
        ranked = sorted(
            self.counts.items(),
            key=lambda item: (-item[1], self._first_seen[item[0]]),
        )
        return FrequencyTable(ranked[: self.max_unique_words])


def count_words(
    chunks: Iterable[str],
    tokenizer: Optional[WordTokenizer] = None,
    max_unique_words: Optional[int] = None,
) -> FrequencyTable:
    """
    Tokenize text chunks and return the ranked frequency table.

    Args:
        chunks: Raw text chunks
        tokenizer: Tokenizer to use (a default one if None)
        max_unique_words: Number of words kept after ranking

    Returns:
        FrequencyTable of the retained words
    """
    tokenizer = tokenizer or WordTokenizer()
    aggregator = FrequencyAggregator(max_unique_words)
    aggregator.add_all(tokenizer.tokenize(chunks))
    return aggregator.build_table()
