"""
preprocessing.py
-----------------
Tokenizer configuration for cleaned tweets: emoji handling, tokenization,
stopword removal, stemming / lemmatization.
"""

import dataclasses
import re

import emoji
import nltk
from nltk.stem import WordNetLemmatizer
from nltk.stem.snowball import SnowballStemmer
from nltk.tokenize import TweetTokenizer

from .config import TokenizerConfig
from .normalization import SENTINELS, normalize_text

_SENTINEL_SPLIT = re.compile("(" + "|".join(re.escape(s) for s in SENTINELS) + ")")

# resource name -> path used by nltk.data.find
_NLTK_RESOURCES = {
    'stopwords': 'corpora/stopwords',
    'wordnet': 'corpora/wordnet',
    'omw-1.4': 'corpora/omw-1.4',
}


def ensure_nltk_resource(name):
    """Download an NLTK corpus once, only if it is not installed yet."""
    try:
        nltk.data.find(_NLTK_RESOURCES.get(name, name))
    except LookupError:
        nltk.download(name, quiet=True)


def load_stopwords(language='english', extra=()):
    """Return NLTK's stopword list for ``language`` plus ``extra`` words."""
    ensure_nltk_resource('stopwords')
    from nltk.corpus import stopwords as nltk_stopwords
    return set(nltk_stopwords.words(language)) | set(extra)


def _emoji_to_words(chars, data):
    # data['en'] looks like ':red_heart:'
    name = data.get('en', '').strip(':').replace('_', ' ')
    return f" {name} "


def handle_emoji(text, mode='keep'):
    """Keep, strip ('remove') or spell out ('demojize') the emoji in ``text``."""
    if mode == 'remove':
        return emoji.replace_emoji(text, replace='')
    if mode == 'demojize':
        return emoji.replace_emoji(text, replace=_emoji_to_words)
    return text


class TweetPreprocessor:
    """Configurable tweet tokenizer.

    Parameters
    ----------
    config : TokenizerConfig, optional
        Tokenization options (default: ``TokenizerConfig()``).
    stopwords : iterable of str, optional
        Stopword list to use instead of NLTK's list for ``config.language``.
        Passing one avoids touching the NLTK data directory.
    **overrides
        Individual ``TokenizerConfig`` fields, e.g. ``normalizer='stem'``.

    Pipeline for one text:
      1. emoji handling ('keep', 'remove' or 'demojize')
      2. ``normalize_text`` (when ``config.normalize``)
      3. TweetTokenizer, with ``<user>`` / ``<number>`` kept whole
      4. stopword and short-token filtering
      5. stemming (Snowball) or lemmatization (WordNet)
    """

    def __init__(self, config=None, stopwords=None, **overrides):
        config = config or TokenizerConfig()
        if overrides:
            config = dataclasses.replace(config, **overrides)
        self.config = config

        self.tokenizer = TweetTokenizer(
            preserve_case=config.preserve_case,
            reduce_len=config.reduce_len,
            strip_handles=config.strip_handles,
        )

        if stopwords is not None:
            self.stopwords = set(stopwords) | set(config.extra_stopwords)
        elif config.remove_stopwords:
            self.stopwords = load_stopwords(config.language, config.extra_stopwords)
        else:
            self.stopwords = set()

        self.stemmer = None
        self.lemmatizer = None
        if config.normalizer == 'stem':
            self.stemmer = SnowballStemmer(config.language)
        elif config.normalizer == 'lemmatize':
            ensure_nltk_resource('wordnet')
            ensure_nltk_resource('omw-1.4')
            self.lemmatizer = WordNetLemmatizer()

    def handle_emoji(self, text):
        return handle_emoji(text, self.config.emoji)

    def _split_tokens(self, text):
        tokens = []
        for part in _SENTINEL_SPLIT.split(text):
            if part in SENTINELS:
                tokens.append(part)
            elif part.strip():
                tokens.extend(self.tokenizer.tokenize(part))
        return tokens

    def _keep(self, token):
        if token in SENTINELS:
            return self.config.keep_sentinels
        if len(token) < self.config.min_token_len:
            return False
        if self.config.remove_stopwords and token.lower() in self.stopwords:
            return False
        return True

    def _reduce(self, token):
        if token in SENTINELS:
            return token
        if self.stemmer is not None:
            return self.stemmer.stem(token)
        if self.lemmatizer is not None:
            return self.lemmatizer.lemmatize(token)
        return token

    def tokenize(self, text):
        """Return the list of tokens for a single raw tweet."""
        if not isinstance(text, str):
            raise TypeError(f"tokenize expects str, got {type(text).__name__}")

        text = self.handle_emoji(text)
        if self.config.normalize:
            text = normalize_text(text)

        tokens = [t for t in self._split_tokens(text) if self._keep(t)]
        return [self._reduce(t) for t in tokens]

    def __call__(self, text):
        """Preprocess a single text string into space-joined tokens."""
        return " ".join(self.tokenize(text))

    def transform_series(self, series):
        """Apply preprocessing to a pandas Series (missing values -> '')."""
        return series.fillna("").astype(str).apply(self)

    def tokenize_series(self, series):
        """Like ``transform_series`` but keeps each row as a token list."""
        return series.fillna("").astype(str).apply(self.tokenize)
