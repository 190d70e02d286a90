"""Comembership contingency table and label encoding shared by all engines."""

from collections import namedtuple

import numpy as np

from .exceptions import LengthMismatchError


class ComembershipTable(namedtuple("ComembershipTable",
                                   ["n11", "n10", "n01", "n00"])):
    """2x2 table of comembership agreements over all observation pairs.

    Attributes
    ----------
    n11 : int
        Pairs that are comembers in both clusterings.
    n10 : int
        Pairs that are comembers in the first clustering only.
    n01 : int
        Pairs that are comembers in the second clustering only.
    n00 : int
        Pairs that are comembers in neither clustering.
    """

    __slots__ = ()

    @property
    def n_pairs(self):
        """Total number of pairs tallied."""
        return self.n11 + self.n10 + self.n01 + self.n00

    def as_dict(self):
        return {"n_11": self.n11, "n_10": self.n10,
                "n_01": self.n01, "n_00": self.n00}


def n_pairs(n):
    """Number of unordered pairs C(n, 2); 0 when n < 2."""
    return n * (n - 1) // 2 if n > 1 else 0


def check_lengths(seq1, seq2):
    """Raise LengthMismatchError unless both sequences have the same length."""
    n1, n2 = len(seq1), len(seq2)
    if n1 != n2:
        raise LengthMismatchError(n1, n2)
    return n1


def encode_labels(labels):
    """Map categorical labels to integer codes in order of first appearance.

    Labels are compared with Python equality, so mixed-type sequences
    (e.g. ``[1, "1"]``) keep distinct categories.

    Parameters
    ----------
    labels : array-like of shape (n,)
        Hashable cluster labels.

    Returns
    -------
    codes : np.ndarray of shape (n,), dtype intp
    n_classes : int
    """
    if isinstance(labels, np.ndarray):
        labels = labels.ravel().tolist()
    index = {}
    codes = np.fromiter((index.setdefault(x, len(index)) for x in labels),
                        dtype=np.intp)
    return codes, len(index)
