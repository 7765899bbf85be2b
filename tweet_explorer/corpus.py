"""
corpus.py
----------
Loading a tweet corpus and filtering it before analysis: retweet removal,
deduplication, and the ``clean_text`` column.
"""

import re

import pandas as pd

from .normalization import normalize_series
from .preprocessing import handle_emoji

_RETWEET_RE = re.compile(r'^\s*"?RT @\w+')


def load_tweets(path, text_column='text', encoding='utf-8'):
    """Read a CSV of tweets.

    Parameters
    ----------
    path : str or Path
    text_column : str
        Column holding the raw tweet text.
    encoding : str
        Passed to ``pandas.read_csv`` (Sentiment140 dumps need 'latin-1').

    Returns
    -------
    pandas.DataFrame with ``text_column`` as str (missing -> '').
    """
    df = pd.read_csv(path, encoding=encoding)
    if text_column not in df.columns:
        raise ValueError(f"Column '{text_column}' not found in {path}. "
                         f"Available: {list(df.columns)}")
    df[text_column] = df[text_column].fillna("").astype(str)
    return df


def is_retweet(text):
    """True for classic retweets, i.e. text starting with 'RT @user'."""
    return bool(_RETWEET_RE.match(text))


def drop_retweets(df, text_column='text'):
    """Return a copy of ``df`` without retweet rows."""
    mask = df[text_column].astype(str).str.match(_RETWEET_RE.pattern)
    return df.loc[~mask].copy()


def _clean_series(series, emoji_mode='keep'):
    """``normalize_series`` after the tokenizer's emoji handling."""
    if emoji_mode != 'keep':
        series = series.fillna("").astype(str).apply(handle_emoji, mode=emoji_mode)
    return normalize_series(series)


def deduplicate(df, text_column='text', normalized=False, emoji='keep'):
    """Drop duplicate tweets, keeping the first occurrence.

    With ``normalized=True`` two tweets count as duplicates when their
    normalized forms match (e.g. same text, different short link). The
    ``emoji`` mode is applied first, so with 'demojize' tweets differing
    only by their emoji stay distinct.
    """
    if normalized:
        key = _clean_series(df[text_column], emoji)
    else:
        key = df[text_column]
    return df.loc[~key.duplicated(keep='first')].copy()


def prepare_corpus(df, text_column='text', drop_rts=True,
                   dedup_normalized=True, emoji='keep', verbose=True):
    """Retweet filter -> dedup -> ``clean_text`` column -> drop empty rows.

    ``emoji`` should match the tokenizer's emoji mode so that emoji-only
    tweets survive when they are spelled out ('demojize').
    The input frame is left untouched; the result has a fresh index.
    """
    n_start = len(df)
    out = df.copy()

    if drop_rts:
        out = drop_retweets(out, text_column)
    n_after_rt = len(out)

    out = deduplicate(out, text_column, normalized=dedup_normalized, emoji=emoji)
    n_after_dedup = len(out)

    out['clean_text'] = _clean_series(out[text_column], emoji)
    out = out[out['clean_text'].str.len() > 0].reset_index(drop=True)

    if verbose:
        print(f"  Rows: {n_start} → {len(out)}")
        print(f"    retweets dropped:   {n_start - n_after_rt}")
        print(f"    duplicates dropped: {n_after_rt - n_after_dedup}")
        print(f"    empty after clean:  {n_after_dedup - len(out)}")

    return out
