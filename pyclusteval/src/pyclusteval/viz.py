"""Visualization utilities for clustering comparisons."""

import numpy as np
import matplotlib.pyplot as plt
import networkx as nx

from .similarity import METHODS, compute_similarity
from .table import check_lengths, encode_labels


def plot_comembership_table(table, names=None, ax=None):
    """Annotated 2x2 heatmap of a comembership table.

    Rows split pairs by the first clustering, columns by the second.

    Parameters
    ----------
    table : ComembershipTable
    names : (str, str) or None
        Names of the two clusterings.
    ax : matplotlib Axes or None

    Returns
    -------
    ax : matplotlib Axes
    """
    if ax is None:
        _, ax = plt.subplots(1, 1, figsize=(5, 4))
    if names is None:
        names = ("Clustering 1", "Clustering 2")

    counts = np.array([[table.n11, table.n10], [table.n01, table.n00]])
    ax.imshow(counts, cmap="Blues", interpolation="nearest")
    vmax = counts.max()
    for (r, c), value in np.ndenumerate(counts):
        color = "white" if vmax and value > 0.5 * vmax else "black"
        ax.text(c, r, str(value), ha="center", va="center", color=color)

    ticks = ["comembers", "not comembers"]
    ax.set_xticks([0, 1])
    ax.set_xticklabels(ticks)
    ax.set_yticks([0, 1])
    ax.set_yticklabels(ticks)
    ax.set_xlabel(names[1])
    ax.set_ylabel(names[0])
    ax.set_title(f"Comembership table ({table.n_pairs} pairs)")
    return ax


def plot_comembership_matrix(labels, ax=None, title="Comemberships"):
    """Display the n x n comembership matrix, observations grouped by label.

    Parameters
    ----------
    labels : array-like of shape (n,)
    ax : matplotlib Axes or None
    title : str

    Returns
    -------
    ax : matplotlib Axes
    """
    if ax is None:
        _, ax = plt.subplots(1, 1, figsize=(5, 5))

    codes, _ = encode_labels(labels)
    order = np.argsort(codes, kind="mergesort")
    matrix = np.equal.outer(codes[order], codes[order])
    ax.imshow(matrix, cmap="Greys", vmin=0, vmax=1, interpolation="nearest")
    ax.set_title(title)
    ax.set_xlabel("Observation (sorted by label)")
    ax.set_ylabel("Observation (sorted by label)")
    return ax


def plot_similarities(table, methods=None, ax=None):
    """Bar chart of similarity coefficients for one comembership table.

    Parameters
    ----------
    table : ComembershipTable
    methods : list of str or None
        Coefficients to show. Defaults to all of METHODS.
    ax : matplotlib Axes or None

    Returns
    -------
    ax : matplotlib Axes
    """
    if ax is None:
        _, ax = plt.subplots(1, 1, figsize=(8, 4))
    if methods is None:
        methods = METHODS

    values = [compute_similarity(table, m) for m in methods]
    x = np.arange(len(values))
    ax.bar(x, values, color="tab:blue")
    ax.axhline(0.0, color="black", linewidth=0.8)
    ax.set_xticks(x)
    ax.set_xticklabels([getattr(m, "value", m) for m in methods],
                       rotation=45, ha="right")
    ax.set_ylabel("Similarity")
    ax.set_title("Clustering similarity")
    ax.grid(True, axis="y", alpha=0.3)
    return ax


def _plot_graph_labels(G, labels, pos, ax, title):
    """Draw graph nodes (in sorted order) colored by cluster label."""
    codes, K = encode_labels(labels)
    cmap = plt.get_cmap("tab10", max(K, 1))

    nx.draw_networkx_edges(G, pos, ax=ax, alpha=0.2)
    nx.draw_networkx_nodes(
        G, pos, ax=ax,
        nodelist=sorted(G.nodes),
        node_color=codes,
        cmap=cmap,
        vmin=0, vmax=max(K - 1, 1),
        node_size=60,
        alpha=0.9,
    )
    ax.set_title(title)
    ax.axis("off")
    return ax


def plot_clusterings(G, labels1, labels2, pos=None, titles=None):
    """Side-by-side drawing of two clusterings of the nodes of a graph.

    Parameters
    ----------
    G : nx.Graph
    labels1, labels2 : array-like of shape (N,)
        Labels in ``sorted(G.nodes)`` order.
    pos : dict or None
        Node positions. If None, uses spring layout.
    titles : (str, str) or None

    Returns
    -------
    fig : matplotlib Figure
    """
    n = check_lengths(labels1, labels2)
    if n != G.number_of_nodes():
        raise ValueError("Labels must have one entry per graph node.")
    if pos is None:
        pos = nx.spring_layout(G, seed=42)
    if titles is None:
        titles = ("Clustering 1", "Clustering 2")

    fig, axes = plt.subplots(1, 2, figsize=(10, 4.5))
    _plot_graph_labels(G, labels1, pos, axes[0], titles[0])
    _plot_graph_labels(G, labels2, pos, axes[1], titles[1])
    fig.tight_layout()
    return fig
