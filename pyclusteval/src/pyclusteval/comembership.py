"""Pairwise comemberships of clustering labels and their 2x2 table.

Two observations are comembers when a clustering puts them in the same
cluster (Tibshirani and Walther, 2005). Pairs (i, j) with i < j are
enumerated with i varying slowest: (0, 1), (0, 2), ..., (0, n-1), (1, 2), ...
"""

from enum import Enum

import numpy as np
from joblib import Parallel, delayed, effective_n_jobs

from .contingency import pair_counts
from .table import ComembershipTable, check_lengths, encode_labels, n_pairs


class Algorithm(Enum):
    PAIRS = "pairs"              # direct comparison of every label pair
    CONTINGENCY = "contingency"  # margins of the label contingency matrix


def comembership(labels):
    """Compute the comembership of all pairs of observations.

    Parameters
    ----------
    labels : array-like of shape (n,)
        Cluster labels.

    Returns
    -------
    comemberships : np.ndarray of shape (n * (n - 1) / 2,), dtype bool
        Entry k is True iff the k-th pair is clustered together. Empty for
        n < 2.
    """
    codes, _ = encode_labels(labels)
    n = len(codes)
    out = np.empty(n_pairs(n), dtype=bool)
    offset = 0
    for i in range(n - 1):
        stop = offset + n - 1 - i
        np.equal(codes[i + 1:], codes[i], out=out[offset:stop])
        offset = stop
    return out


def _tally_rows(codes1, codes2, start, stop):
    """Tally the pairs (i, j) with start <= i < stop into the four cells."""
    n11 = n10 = n01 = n00 = 0
    for i in range(start, stop):
        same1 = codes1[i + 1:] == codes1[i]
        same2 = codes2[i + 1:] == codes2[i]
        both = np.count_nonzero(same1 & same2)
        n11 += both
        n10 += np.count_nonzero(same1) - both
        n01 += np.count_nonzero(same2) - both
        n00 += np.count_nonzero(~(same1 | same2))
    return n11, n10, n01, n00


def _partition_rows(n, n_blocks):
    """Split rows 0..n-2 into contiguous blocks holding about equal pairs.

    Row i holds the n - 1 - i pairs (i, j > i), so early rows are heavier.
    """
    cum_pairs = np.cumsum(np.arange(n - 1, 0, -1))
    targets = cum_pairs[-1] * np.arange(1, n_blocks) / n_blocks
    cuts = np.searchsorted(cum_pairs, targets, side="left") + 1
    bounds = np.unique(np.concatenate(([0], cuts, [n - 1])))
    return [(int(a), int(b)) for a, b in zip(bounds[:-1], bounds[1:])]


def table_from_labels(labels1, labels2, n_jobs=None, verbose=0):
    """Tally the comembership table by comparing label pairs directly.

    Neither comembership sequence is materialized: each row i compares
    labels[i] against labels[i+1:] in both clusterings at once.

    Parameters
    ----------
    labels1, labels2 : array-like of shape (n,)
        Cluster labels of the same n observations.
    n_jobs : int or None
        Number of worker threads over the pair-index space. None or 1 runs
        serially; -1 uses all cores.
    verbose : int
        Verbosity level.

    Returns
    -------
    table : ComembershipTable
    """
    n = check_lengths(labels1, labels2)
    total = n_pairs(n)
    if total == 0:
        return ComembershipTable(0, 0, 0, 0)

    codes1, _ = encode_labels(labels1)
    codes2, _ = encode_labels(labels2)

    n_blocks = 1 if n_jobs is None else min(effective_n_jobs(n_jobs), n - 1)
    if verbose:
        print(f"  comembership table: n={n} pairs={total} blocks={n_blocks}")

    if n_blocks <= 1:
        counts = _tally_rows(codes1, codes2, 0, n - 1)
    else:
        partials = Parallel(n_jobs=n_blocks, prefer="threads")(
            delayed(_tally_rows)(codes1, codes2, start, stop)
            for start, stop in _partition_rows(n, n_blocks)
        )
        counts = [sum(cell) for cell in zip(*partials)]

    table = ComembershipTable(*(int(c) for c in counts))
    assert table.n_pairs == total, "each pair must land in exactly one cell"
    return table


def _as_comemberships(values):
    """Validate a flat 0/1 sequence and return it as a bool array."""
    values = np.asarray(values).ravel()
    if values.dtype == bool:
        return values
    if values.dtype.kind not in "iuf" or not np.isin(values, (0, 1)).all():
        raise ValueError("Comemberships must be boolean (or 0/1) values.")
    return values.astype(bool)


def comembership_table_from_comemberships(comemberships1, comemberships2):
    """Cross-tabulate two precomputed comembership sequences.

    Parameters
    ----------
    comemberships1, comemberships2 : array-like of shape (m,)
        Boolean (or 0/1) comemberships, position k referring to the same
        pair in both.

    Returns
    -------
    table : ComembershipTable
    """
    check_lengths(comemberships1, comemberships2)
    c1 = _as_comemberships(comemberships1)
    c2 = _as_comemberships(comemberships2)
    return ComembershipTable(
        n11=int(np.count_nonzero(c1 & c2)),
        n10=int(np.count_nonzero(c1 & ~c2)),
        n01=int(np.count_nonzero(~c1 & c2)),
        n00=int(np.count_nonzero(~(c1 | c2))),
    )


def comembership_table(labels1, labels2, comemberships=False,
                       algorithm="pairs", n_jobs=None, verbose=0):
    """Compute the 2x2 contingency table of comembership agreements.

    Parameters
    ----------
    labels1, labels2 : array-like of shape (n,)
        Cluster labels, or comemberships if ``comemberships`` is True.
    comemberships : bool
        If True, the inputs are comembership sequences and are
        cross-tabulated position by position.
    algorithm : str
        'pairs' (compare every pair of labels) or 'contingency' (derive the
        counts from the label contingency matrix). Ignored for
        comembership input.
    n_jobs : int or None
        Worker threads for the 'pairs' algorithm.
    verbose : int
        Verbosity level.

    Returns
    -------
    table : ComembershipTable
    """
    if comemberships:
        return comembership_table_from_comemberships(labels1, labels2)
    algorithm = Algorithm(algorithm)
    if algorithm is Algorithm.CONTINGENCY:
        return pair_counts(labels1, labels2)
    return table_from_labels(labels1, labels2, n_jobs=n_jobs, verbose=verbose)
