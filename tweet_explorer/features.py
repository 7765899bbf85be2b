"""
features.py
------------
Corpus statistics over preprocessed tweets: raw term frequencies, TF-IDF
term ranking and a document-level co-occurrence matrix.

All functions expect documents that are already tokenized and joined with
single spaces (the output of ``TweetPreprocessor``), so vectorizers split on
whitespace only and sentinels such as ``<user>`` stay intact.
"""

from collections import Counter

import numpy as np
import pandas as pd
from sklearn.feature_extraction.text import CountVectorizer, TfidfVectorizer

from .config import VectorizerConfig

WHITESPACE_TOKENS = r"\S+"


def term_frequencies(token_lists):
    """Count every token across a collection of token lists."""
    counts = Counter()
    for tokens in token_lists:
        counts.update(tokens)
    return counts


def top_terms(token_lists, n=20):
    """Return the ``n`` most frequent terms as a DataFrame (term, count)."""
    most_common = term_frequencies(token_lists).most_common(n)
    return pd.DataFrame(most_common, columns=['term', 'count'])


class TfidfAnalyzer:
    """TF-IDF weighting of a tweet corpus.

    Parameters
    ----------
    config : VectorizerConfig
        max_features, ngram_range, min_df, max_df and sublinear_tf are
        passed to ``TfidfVectorizer``.
    """

    def __init__(self, config=None):
        self.config = config or VectorizerConfig()
        self.vectorizer = TfidfVectorizer(
            max_features=self.config.max_features,
            ngram_range=self.config.ngram_range,
            min_df=self.config.min_df,
            max_df=self.config.max_df,
            sublinear_tf=self.config.sublinear_tf,
            token_pattern=WHITESPACE_TOKENS,
            lowercase=False,
        )
        self.matrix = None
        self._fitted = False

    def fit_transform(self, texts):
        """Fit on ``texts`` and return the document-term TF-IDF matrix."""
        self.matrix = self.vectorizer.fit_transform(texts)
        self._fitted = True
        return self.matrix

    def get_feature_names(self):
        if not self._fitted:
            raise RuntimeError("Call fit_transform() on the corpus first.")
        return self.vectorizer.get_feature_names_out()

    def top_terms(self, n=20):
        """Rank terms by their mean TF-IDF weight across documents.

        Returns
        -------
        pandas.DataFrame with columns: term, tfidf
        """
        if not self._fitted:
            raise RuntimeError("Call fit_transform() on the corpus first.")

        weights = np.asarray(self.matrix.mean(axis=0)).ravel()
        df = pd.DataFrame({'term': self.get_feature_names(), 'tfidf': weights})
        df = df.sort_values(['tfidf', 'term'], ascending=[False, True])
        return df.head(n).reset_index(drop=True)


def cooccurrence_matrix(texts, min_df=1, max_features=None):
    """Term x term matrix counting documents where both terms appear.

    Returns
    -------
    pandas.DataFrame, symmetric, indexed and labelled by term, zero diagonal.
    """
    vectorizer = CountVectorizer(
        binary=True,
        token_pattern=WHITESPACE_TOKENS,
        lowercase=False,
        min_df=min_df,
        max_features=max_features,
    )
    X = vectorizer.fit_transform(texts)
    cooc = (X.T @ X).toarray()
    np.fill_diagonal(cooc, 0)

    terms = vectorizer.get_feature_names_out()
    return pd.DataFrame(cooc, index=terms, columns=terms)


def top_cooccurrences(matrix, n=20, min_weight=1):
    """Strongest term pairs from a co-occurrence matrix, each pair once.

    Returns
    -------
    pandas.DataFrame with columns: source, target, weight
    """
    values = matrix.to_numpy()
    rows, cols = np.triu_indices_from(values, k=1)
    weights = values[rows, cols]
    terms = matrix.index.to_numpy()

    pairs = pd.DataFrame({
        'source': terms[rows],
        'target': terms[cols],
        'weight': weights,
    })
    pairs = pairs[pairs['weight'] >= min_weight]
    pairs = pairs.sort_values(['weight', 'source', 'target'],
                              ascending=[False, True, True])
    return pairs.head(n).reset_index(drop=True)
