# tweet_explorer/config.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Literal, Optional, Tuple

EmojiMode = Literal["keep", "remove", "demojize"]
WordNormalizer = Optional[Literal["stem", "lemmatize"]]

EMOJI_MODES = ("keep", "remove", "demojize")
WORD_NORMALIZERS = (None, "stem", "lemmatize")


@dataclass(frozen=True)
class TokenizerConfig:
    """
    Options for turning a tweet into tokens.
    `preserve_case`, `reduce_len` and `strip_handles` go straight to nltk's TweetTokenizer.
    """
    normalize: bool = True
    preserve_case: bool = False
    reduce_len: bool = True
    strip_handles: bool = False
    emoji: EmojiMode = "keep"
    remove_stopwords: bool = True
    language: str = "english"
    extra_stopwords: Tuple[str, ...] = ()
    keep_sentinels: bool = True
    min_token_len: int = 2
    normalizer: WordNormalizer = None

    def __post_init__(self):
        if self.emoji not in EMOJI_MODES:
            raise ValueError(f"emoji must be one of {EMOJI_MODES}, got {self.emoji!r}")
        if self.normalizer not in WORD_NORMALIZERS:
            raise ValueError(f"normalizer must be one of {WORD_NORMALIZERS}, got {self.normalizer!r}")
        if self.min_token_len < 0:
            raise ValueError("min_token_len must be >= 0")


@dataclass(frozen=True)
class VectorizerConfig:
    max_features: Optional[int] = 10000
    ngram_range: Tuple[int, int] = (1, 1)
    min_df: int = 1
    max_df: float = 1.0
    sublinear_tf: bool = True


@dataclass(frozen=True)
class ExplorerConfig:
    """Settings for one end-to-end run of the walkthrough (see main.py)."""
    text_column: str = "text"
    drop_retweets: bool = True
    dedup_normalized: bool = True
    top_n: int = 20
    cooc_max_features: Optional[int] = 200
    cooc_min_weight: int = 2
    tokenizer: TokenizerConfig = field(default_factory=TokenizerConfig)
    vectorizer: VectorizerConfig = field(default_factory=VectorizerConfig)


def as_stopword_tuple(words: Optional[Iterable[str]]) -> Tuple[str, ...]:
    """Normalise a user-supplied word list for use in a frozen config."""
    if words is None:
        return ()
    return tuple(w.strip().lower() for w in words if w and w.strip())
