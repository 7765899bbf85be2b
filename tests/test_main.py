"""End-to-end test of the command line walkthrough."""

import pandas as pd

from tweet_explorer.main import build_config, main, parse_args


def _write_corpus(path):
    pd.DataFrame({"text": [
        "Heavy rain and flood warnings tonight http://t.co/a",
        "RT @weather: Heavy rain and flood warnings tonight",
        "heavy rain and flood warnings tonight http://t.co/b",
        "Storm and rain hit the coast, 3 towns flooded @mayor",
        "Rain rain rain! Flood risk is high #weather",
        "Sunny skies after the storm 😀",
        "http://just.a/link",
    ]}).to_csv(path, index=False)


def test_build_config_maps_flags():
    args = parse_args(["--input", "x.csv", "--keep-retweets", "--normalizer", "stem",
                       "--emoji", "demojize", "--keep-stopwords",
                       "--extra-stopwords", "RT", " amp ", "--drop-sentinels"])
    cfg = build_config(args)

    assert cfg.drop_retweets is False
    assert cfg.tokenizer.normalizer == "stem"
    assert cfg.tokenizer.emoji == "demojize"
    assert cfg.tokenizer.remove_stopwords is False
    assert cfg.tokenizer.extra_stopwords == ("rt", "amp")
    assert cfg.tokenizer.keep_sentinels is False


def test_build_config_defaults():
    cfg = build_config(parse_args(["--input", "x.csv"]))

    assert cfg.drop_retweets is True
    assert cfg.dedup_normalized is True
    assert cfg.tokenizer.normalizer is None
    assert cfg.top_n == 20


def test_main_writes_all_outputs(tmp_path):
    corpus = tmp_path / "tweets.csv"
    _write_corpus(corpus)
    out_root = tmp_path / "results"

    main(["--input", str(corpus), "--out-dir", str(out_root), "--keep-stopwords",
          "--min-weight", "1", "--top-n", "10"])

    (run_dir,) = list(out_root.iterdir())
    names = {p.name for p in run_dir.iterdir()}
    assert {"clean_tweets.csv", "top_terms.csv", "tfidf_terms.csv", "cooccurrence.csv",
            "top_terms.png", "tfidf_terms.png", "wordcloud.png",
            "cooccurrence_network.png"} <= names

    clean = pd.read_csv(run_dir / "clean_tweets.csv")
    # retweet, normalized duplicate and bare link are gone
    assert len(clean) == 4

    top = pd.read_csv(run_dir / "top_terms.csv")
    assert top.iloc[0]["term"] == "rain"
