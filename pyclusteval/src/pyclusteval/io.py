"""Read cluster label assignments from text files and networkx graphs."""

import numpy as np
import networkx as nx


def read_labels(path, dtype=str):
    """Parse a label file.

    Labels are whitespace-separated tokens, usually one per line, read in
    file order. Lines starting with '#' are ignored.

    Parameters
    ----------
    path : str or Path
    dtype : type
        Type of the labels (str keeps them as categorical names).

    Returns
    -------
    labels : np.ndarray of shape (n,)
    """
    return np.loadtxt(path, dtype=dtype, ndmin=1).ravel()


def labels_from_graph(G, attr=None):
    """Extract one cluster label per node of a graph.

    Parameters
    ----------
    G : nx.Graph
    attr : str or None
        Node attribute holding the label. If None, nodes are labeled by
        their connected component (weakly connected for directed graphs),
        numbered from 0 in order of their smallest node.

    Returns
    -------
    labels : np.ndarray of shape (N,)
        Labels in ``sorted(G.nodes)`` order.
    """
    nodes = sorted(G.nodes)
    if attr is not None:
        return np.array([G.nodes[v][attr] for v in nodes])

    if G.is_directed():
        components = nx.weakly_connected_components(G)
    else:
        components = nx.connected_components(G)
    component_of = {}
    for k, component in enumerate(sorted(components, key=min)):
        for v in component:
            component_of[v] = k
    return np.array([component_of[v] for v in nodes], dtype=int)
