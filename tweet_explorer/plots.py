# tweet_explorer/plots.py
from __future__ import annotations

from pathlib import Path
from typing import Mapping

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import networkx as nx
import pandas as pd
from wordcloud import WordCloud

from .features import top_cooccurrences


def _prepare(path) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    return path


def plot_top_terms(freq_df: pd.DataFrame, path, *, title: str = "Top terms",
                   value_col: str = "count") -> Path:
    """Horizontal bar chart of a (term, value) frame, most frequent on top."""
    path = _prepare(path)
    data = freq_df.iloc[::-1]

    fig, ax = plt.subplots(figsize=(8, max(3, 0.3 * len(data))))
    ax.barh(data["term"], data[value_col])
    ax.set_title(title)
    ax.set_xlabel(value_col)
    fig.tight_layout()
    fig.savefig(path, dpi=200)
    plt.close(fig)
    return path


def plot_wordcloud(frequencies: Mapping[str, float], path, *, title: str = "",
                   width: int = 800, height: int = 400) -> Path:
    """Word cloud sized by the given term frequencies (or tf-idf weights)."""
    frequencies = {t: float(v) for t, v in frequencies.items() if v > 0}
    if not frequencies:
        raise ValueError("Cannot draw a word cloud from empty frequencies.")

    path = _prepare(path)
    wc = WordCloud(width=width, height=height, background_color="white")
    wc.generate_from_frequencies(frequencies)

    plt.figure(figsize=(width / 100, height / 100))
    plt.imshow(wc, interpolation="bilinear")
    plt.axis("off")
    if title:
        plt.title(title)
    plt.tight_layout()
    plt.savefig(path, dpi=200)
    plt.close()
    return path


def build_cooccurrence_graph(matrix: pd.DataFrame, *, top_n: int = 50,
                             min_weight: int = 1) -> nx.Graph:
    """Weighted undirected graph of the strongest co-occurring term pairs."""
    pairs = top_cooccurrences(matrix, n=top_n, min_weight=min_weight)
    graph = nx.Graph()
    for row in pairs.itertuples(index=False):
        graph.add_edge(row.source, row.target, weight=int(row.weight))
    return graph


def plot_cooccurrence_network(matrix: pd.DataFrame, path, *, top_n: int = 50,
                              min_weight: int = 1, title: str = "Co-occurrence network",
                              seed: int = 42) -> Path:
    path = _prepare(path)
    graph = build_cooccurrence_graph(matrix, top_n=top_n, min_weight=min_weight)

    fig, ax = plt.subplots(figsize=(10, 10))
    ax.set_title(title)
    ax.axis("off")

    if graph.number_of_edges() > 0:
        pos = nx.spring_layout(graph, k=0.5, seed=seed)
        weights = [d["weight"] for _, _, d in graph.edges(data=True)]
        max_w = max(weights)
        widths = [1 + 4 * w / max_w for w in weights]
        nx.draw_networkx_edges(graph, pos, ax=ax, width=widths, alpha=0.5)
        nx.draw_networkx_nodes(graph, pos, ax=ax, node_size=300, node_color="lightblue")
        nx.draw_networkx_labels(graph, pos, ax=ax, font_size=9)

    fig.tight_layout()
    fig.savefig(path, dpi=200)
    plt.close(fig)
    return path
