#!/usr/bin/env python3
"""
main.py
--------
End-to-end walkthrough: load tweets, filter and clean them, tokenize,
then explore term frequencies, TF-IDF and co-occurrences with plots.

Usage:
    python -m tweet_explorer.main --input tweets.csv --text-column text
"""

import argparse
import os
from datetime import datetime

from tweet_explorer.config import (ExplorerConfig, TokenizerConfig,
                                   VectorizerConfig, as_stopword_tuple)
from tweet_explorer.corpus import load_tweets, prepare_corpus
from tweet_explorer.features import (TfidfAnalyzer, cooccurrence_matrix,
                                     term_frequencies, top_cooccurrences,
                                     top_terms)
from tweet_explorer.plots import (plot_cooccurrence_network, plot_top_terms,
                                  plot_wordcloud)
from tweet_explorer.preprocessing import TweetPreprocessor


def parse_args(argv=None):
    p = argparse.ArgumentParser(
        description="Preprocess and explore a corpus of tweets"
    )
    p.add_argument('--input', required=True, help='Path to tweets CSV')
    p.add_argument('--text-column', default='text')
    p.add_argument('--encoding', default='utf-8')
    p.add_argument('--out-dir', default='results_tweet_explorer')
    p.add_argument('--top-n', type=int, default=20)
    p.add_argument('--keep-retweets', action='store_true')
    p.add_argument('--exact-dedup', action='store_true',
                   help='Deduplicate on raw text instead of normalized text')
    p.add_argument('--normalizer', choices=['none', 'stem', 'lemmatize'],
                   default='none')
    p.add_argument('--emoji', choices=['keep', 'remove', 'demojize'],
                   default='keep')
    p.add_argument('--keep-stopwords', action='store_true')
    p.add_argument('--extra-stopwords', nargs='*', default=None)
    p.add_argument('--drop-sentinels', action='store_true',
                   help='Drop <user> and <number> tokens')
    p.add_argument('--min-weight', type=int, default=2,
                   help='Minimum co-occurrence count for network edges')
    return p.parse_args(argv)


def build_config(args):
    tokenizer = TokenizerConfig(
        emoji=args.emoji,
        remove_stopwords=not args.keep_stopwords,
        extra_stopwords=as_stopword_tuple(args.extra_stopwords),
        keep_sentinels=not args.drop_sentinels,
        normalizer=None if args.normalizer == 'none' else args.normalizer,
    )
    return ExplorerConfig(
        text_column=args.text_column,
        drop_retweets=not args.keep_retweets,
        dedup_normalized=not args.exact_dedup,
        top_n=args.top_n,
        cooc_min_weight=args.min_weight,
        tokenizer=tokenizer,
        vectorizer=VectorizerConfig(),
    )


def ensure_dir(path):
    os.makedirs(path, exist_ok=True)
    return path


def run(input_path, cfg, out_dir, encoding='utf-8'):
    """Run every stage and write CSVs / PNGs into ``out_dir``."""

    # ── 1. Data Loading ──────────────────────────────────
    print("=" * 70)
    print("1. DATA LOADING")
    print("=" * 70)

    df = load_tweets(input_path, text_column=cfg.text_column, encoding=encoding)
    print(f"  Loaded {len(df)} tweets from {input_path}")

    # ── 2. Filtering & Cleaning ──────────────────────────
    print("\n" + "=" * 70)
    print("2. FILTERING & CLEANING")
    print("=" * 70)

    df = prepare_corpus(df, text_column=cfg.text_column,
                        drop_rts=cfg.drop_retweets,
                        dedup_normalized=cfg.dedup_normalized,
                        emoji=cfg.tokenizer.emoji)
    if df.empty:
        raise ValueError("No tweets left after filtering and cleaning.")

    # ── 3. Tokenization ──────────────────────────────────
    print("\n" + "=" * 70)
    print("3. TOKENIZATION")
    print("=" * 70)

    preprocessor = TweetPreprocessor(cfg.tokenizer)
    df['tokens'] = preprocessor.tokenize_series(df[cfg.text_column])
    df['tokens_text'] = df['tokens'].apply(" ".join)
    n_tokens = int(df['tokens'].apply(len).sum())
    print(f"  {n_tokens} tokens, "
          f"{len(term_frequencies(df['tokens']))} distinct")

    df[[cfg.text_column, 'clean_text', 'tokens_text']].to_csv(
        os.path.join(out_dir, "clean_tweets.csv"), index=False)

    # ── 4. Frequencies ───────────────────────────────────
    print("\n" + "=" * 70)
    print("4. TERM FREQUENCIES")
    print("=" * 70)

    freq_df = top_terms(df['tokens'], n=cfg.top_n)
    freq_df.to_csv(os.path.join(out_dir, "top_terms.csv"), index=False)
    for term, count in freq_df.head(10).itertuples(index=False, name=None):
        print(f"    {term:<20s} {count:>6d}")

    if not freq_df.empty:
        plot_top_terms(freq_df, os.path.join(out_dir, "top_terms.png"),
                       title=f"Top {cfg.top_n} terms")
        plot_wordcloud(term_frequencies(df['tokens']),
                       os.path.join(out_dir, "wordcloud.png"))

    docs = df.loc[df['tokens_text'].str.len() > 0, 'tokens_text']
    if docs.empty:
        print("\n  No tokens left; skipping TF-IDF and co-occurrence.")
        return df

    # ── 5. TF-IDF ────────────────────────────────────────
    print("\n" + "=" * 70)
    print("5. TF-IDF")
    print("=" * 70)

    analyzer = TfidfAnalyzer(cfg.vectorizer)
    X = analyzer.fit_transform(docs)
    print(f"  Matrix: {X.shape[0]} docs x {X.shape[1]} terms")
    tfidf_df = analyzer.top_terms(cfg.top_n)
    tfidf_df.to_csv(os.path.join(out_dir, "tfidf_terms.csv"), index=False)
    plot_top_terms(tfidf_df, os.path.join(out_dir, "tfidf_terms.png"),
                   title="Top terms by mean TF-IDF", value_col='tfidf')

    # ── 6. Co-occurrence ─────────────────────────────────
    print("\n" + "=" * 70)
    print("6. CO-OCCURRENCE")
    print("=" * 70)

    cooc = cooccurrence_matrix(docs, max_features=cfg.cooc_max_features)
    pairs = top_cooccurrences(cooc, n=cfg.top_n, min_weight=cfg.cooc_min_weight)
    pairs.to_csv(os.path.join(out_dir, "cooccurrence.csv"), index=False)
    print(f"  {len(pairs)} pairs with weight >= {cfg.cooc_min_weight}")
    plot_cooccurrence_network(cooc,
                              os.path.join(out_dir, "cooccurrence_network.png"),
                              top_n=cfg.top_n, min_weight=cfg.cooc_min_weight)

    return df


def main(argv=None):
    args = parse_args(argv)
    cfg = build_config(args)
    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    out_dir = ensure_dir(os.path.join(args.out_dir, ts))

    run(args.input, cfg, out_dir, encoding=args.encoding)
    print(f"\nDone. Outputs in: {out_dir}")


if __name__ == "__main__":
    main()
