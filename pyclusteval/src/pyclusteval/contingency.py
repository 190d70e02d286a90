"""Label contingency matrix and pair counts derived from its margins."""

import numpy as np
from scipy.special import comb

from .table import ComembershipTable, check_lengths, encode_labels, n_pairs


def contingency_matrix(labels1, labels2):
    """Count observations for every (label1, label2) combination.

    Parameters
    ----------
    labels1, labels2 : array-like of shape (n,)
        Cluster labels of the same n observations.

    Returns
    -------
    contingency : np.ndarray of shape (K1, K2), dtype int64
        Rows follow the first-appearance order of labels1, columns that of
        labels2.
    """
    check_lengths(labels1, labels2)
    codes1, k1 = encode_labels(labels1)
    codes2, k2 = encode_labels(labels2)

    contingency = np.zeros((k1, k2), dtype=np.int64)
    np.add.at(contingency, (codes1, codes2), 1)
    return contingency


def _sum_comb2(counts):
    """Sum of C(x, 2) over an array of counts, in exact integer arithmetic."""
    return sum(comb(int(x), 2, exact=True) for x in counts[counts > 1])


def pair_counts(labels1, labels2):
    """Comembership table from contingency margins in O(n + K1 * K2).

    A pair is comember in both clusterings iff it falls in a single cell,
    in the first clustering iff it falls in a single row, and in the second
    iff it falls in a single column.

    Returns
    -------
    table : ComembershipTable
    """
    contingency = contingency_matrix(labels1, labels2)
    total = n_pairs(int(contingency.sum()))

    n11 = _sum_comb2(contingency.ravel())
    n10 = _sum_comb2(contingency.sum(axis=1)) - n11
    n01 = _sum_comb2(contingency.sum(axis=0)) - n11
    return ComembershipTable(n11, n10, n01, total - n11 - n10 - n01)
