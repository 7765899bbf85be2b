"""Unit tests for corpus loading, retweet filtering and deduplication."""

import pandas as pd
import pytest

from tweet_explorer.corpus import (deduplicate, drop_retweets, is_retweet,
                                   load_tweets, prepare_corpus)


@pytest.fixture
def tweets():
    return pd.DataFrame({
        "id": [1, 2, 3, 4, 5, 6],
        "text": [
            "Climate action now! http://a.co/1",
            "RT @greenpeace: Climate action now!",
            "climate action now! http://b.co/2",
            "Climate action now! http://a.co/1",
            "http://only.a/link",
            "Floods again in the valley #weather",
        ],
    })


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("RT @bob: hello", True),
        ('"RT @bob hello', True),
        ("   RT @bob hello", True),
        ("rt @bob hello", False),
        ("ART @bob", False),
        ("hello RT @bob", False),
        ("RT without a handle", False),
    ],
)
def test_is_retweet(text, expected):
    assert is_retweet(text) is expected


def test_drop_retweets(tweets):
    out = drop_retweets(tweets)

    assert 2 not in out["id"].tolist()
    assert len(out) == 5


def test_deduplicate_exact_keeps_first(tweets):
    out = deduplicate(tweets)

    assert out["id"].tolist() == [1, 2, 3, 5, 6]


def test_deduplicate_normalized_ignores_case_and_links(tweets):
    out = deduplicate(tweets, normalized=True)

    # 1, 3 and 4 normalize to "climate action now"
    assert out["id"].tolist() == [1, 2, 5, 6]


def test_prepare_corpus(tweets):
    original = tweets.copy()

    out = prepare_corpus(tweets, verbose=False)

    assert out["id"].tolist() == [1, 6]
    assert out["clean_text"].tolist() == ["climate action now", "floods again in the valley"]
    assert out.index.tolist() == [0, 1]
    pd.testing.assert_frame_equal(tweets, original)


def test_prepare_corpus_keep_retweets_and_exact_dedup(tweets):
    out = prepare_corpus(tweets, drop_rts=False, dedup_normalized=False, verbose=False)

    assert out["id"].tolist() == [1, 2, 3, 6]


def test_prepare_corpus_reports_counts(tweets, capsys):
    prepare_corpus(tweets)

    printed = capsys.readouterr().out
    assert "retweets dropped:   1" in printed
    assert "duplicates dropped: 2" in printed
    assert "empty after clean:  1" in printed


def test_load_tweets(tmp_path):
    path = tmp_path / "tweets.csv"
    pd.DataFrame({"text": ["hello", None], "user": ["a", "b"]}).to_csv(path, index=False)

    df = load_tweets(path)

    assert df["text"].tolist() == ["hello", ""]


def test_load_tweets_missing_column(tmp_path):
    path = tmp_path / "tweets.csv"
    pd.DataFrame({"content": ["hello"]}).to_csv(path, index=False)

    with pytest.raises(ValueError, match="text"):
        load_tweets(path)


def test_load_tweets_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_tweets(tmp_path / "nope.csv")


def test_prepare_corpus_demojize_keeps_emoji_tweets():
    df = pd.DataFrame({"text": ["😀😀", "I ❤️ it", "I 😡 it"]})

    out = prepare_corpus(df, emoji="demojize", verbose=False)

    assert len(out) == 3
    assert out["clean_text"].str.len().gt(0).all()
    assert out["clean_text"].nunique() == 3
    assert out["clean_text"].iloc[0] == "grinning face grinning face"


def test_prepare_corpus_default_strips_emoji_before_dedup():
    df = pd.DataFrame({"text": ["😀😀", "I ❤️ it", "I 😡 it"]})

    out = prepare_corpus(df, verbose=False)

    assert out["text"].tolist() == ["I ❤️ it"]


def test_deduplicate_normalized_with_demojize():
    df = pd.DataFrame({"text": ["great 😀", "great 😡", "great 😀 http://x.co"]})

    assert len(deduplicate(df, normalized=True)) == 1
    assert len(deduplicate(df, normalized=True, emoji="demojize")) == 2
