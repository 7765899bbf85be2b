"""
tweet_explorer
===============
Preprocessing and exploratory analysis of tweet corpora.

Modules
-------
- normalization : Ordered rewrite rules turning raw tweets into clean text
- preprocessing : Tokenization, stopwords, emoji handling, stemming/lemmatization
- corpus        : CSV loading, retweet filtering, deduplication
- features      : Term frequencies, TF-IDF ranking, co-occurrence matrix
- plots         : Bar charts, word clouds, co-occurrence networks
- config        : Frozen dataclass settings
"""

from .config import ExplorerConfig, TokenizerConfig, VectorizerConfig
from .normalization import (RULES, NUMBER_TOKEN, USER_TOKEN,
                            NormalizationRule, normalize_series,
                            normalize_text)
from .preprocessing import TweetPreprocessor
from .corpus import (load_tweets, is_retweet, drop_retweets, deduplicate,
                     prepare_corpus)
from .features import (TfidfAnalyzer, cooccurrence_matrix, term_frequencies,
                       top_cooccurrences, top_terms)

__all__ = [
    'ExplorerConfig',
    'TokenizerConfig',
    'VectorizerConfig',
    'RULES',
    'NUMBER_TOKEN',
    'USER_TOKEN',
    'NormalizationRule',
    'normalize_series',
    'normalize_text',
    'TweetPreprocessor',
    'load_tweets',
    'is_retweet',
    'drop_retweets',
    'deduplicate',
    'prepare_corpus',
    'TfidfAnalyzer',
    'cooccurrence_matrix',
    'term_frequencies',
    'top_cooccurrences',
    'top_terms',
]
