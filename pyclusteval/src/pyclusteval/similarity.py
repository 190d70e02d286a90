"""Similarity coefficients between two clusterings.

Every coefficient is a closed-form function of the comembership table
(a, b, c, d) = (n11, n10, n01, n00), with N = a + b + c + d pairs. A zero
denominator raises UndefinedStatisticError instead of returning 0, NaN or
infinity.
"""

import math
import operator
from enum import Enum

from .comembership import comembership_table
from .exceptions import UndefinedStatisticError, UnknownMethodError
from .table import ComembershipTable


def _ratio(method, table, num, den):
    if den == 0:
        raise UndefinedStatisticError(method, table)
    return float(num / den)


def adjusted_rand_index(table):
    """Rand index adjusted for chance agreement.

    ARI = (a - E) / ((a + b + a + c) / 2 - E) with E = (a + b)(a + c) / N.
    Both terms are scaled by 2N so that the degenerate case (identical
    one-cluster or all-singleton clusterings) is detected exactly.
    """
    a, b, c, d = table
    N = a + b + c + d
    if N == 0:
        raise UndefinedStatisticError("adjusted_rand", table)
    expected2 = 2 * (a + b) * (a + c)
    return _ratio("adjusted_rand", table,
                  2 * N * a - expected2, N * (2 * a + b + c) - expected2)


def rand_index(table):
    a, b, c, d = table
    return _ratio("rand", table, a + d, a + b + c + d)


def jaccard_index(table):
    a, b, c, d = table
    return _ratio("jaccard", table, a, a + b + c)


def dice_coefficient(table):
    a, b, c, d = table
    return _ratio("dice", table, 2 * a, 2 * a + b + c)


def fowlkes_mallows_index(table):
    """Geometric mean of pair precision and pair recall."""
    a, b, c, d = table
    margins = (a + b) * (a + c)
    if margins == 0:
        raise UndefinedStatisticError("fowlkes_mallows", table)
    return float(a / math.sqrt(margins))


def phi_coefficient(table):
    """Pearson correlation of the two comembership sequences."""
    a, b, c, d = table
    margins = (a + b) * (a + c) * (d + b) * (d + c)
    if margins == 0:
        raise UndefinedStatisticError("phi", table)
    return float((a * d - b * c) / math.sqrt(margins))


def rogers_tanimoto_coefficient(table):
    a, b, c, d = table
    return _ratio("rogers_tanimoto", table, a + d, a + 2 * (b + c) + d)


def russel_rao_coefficient(table):
    a, b, c, d = table
    return _ratio("russel_rao", table, a, a + b + c + d)


def sokal_sneath_coefficient(table):
    a, b, c, d = table
    return _ratio("sokal_sneath", table, a, a + 2 * (b + c))


class Method(Enum):
    ADJUSTED_RAND = "adjusted_rand"
    RAND = "rand"
    JACCARD = "jaccard"
    DICE = "dice"
    FOWLKES_MALLOWS = "fowlkes_mallows"
    PHI = "phi"
    ROGERS_TANIMOTO = "rogers_tanimoto"
    RUSSEL_RAO = "russel_rao"
    SOKAL_SNEATH = "sokal_sneath"

    @property
    def formula(self):
        """Function mapping a ComembershipTable to this coefficient."""
        return _FORMULAS[self]


_FORMULAS = {
    Method.ADJUSTED_RAND: adjusted_rand_index,
    Method.RAND: rand_index,
    Method.JACCARD: jaccard_index,
    Method.DICE: dice_coefficient,
    Method.FOWLKES_MALLOWS: fowlkes_mallows_index,
    Method.PHI: phi_coefficient,
    Method.ROGERS_TANIMOTO: rogers_tanimoto_coefficient,
    Method.RUSSEL_RAO: russel_rao_coefficient,
    Method.SOKAL_SNEATH: sokal_sneath_coefficient,
}

METHODS = tuple(m.value for m in Method)


def resolve_method(method):
    """Return the Method for a name (or Method), else UnknownMethodError."""
    if isinstance(method, Method):
        return method
    try:
        return Method(method)
    except ValueError:
        raise UnknownMethodError(method, METHODS) from None


def compute_similarity(table, method="adjusted_rand"):
    """Evaluate one similarity coefficient on a comembership table.

    Parameters
    ----------
    table : ComembershipTable or 4-tuple (n11, n10, n01, n00)
        Integer cells. Numpy integers are converted to Python ints so the
        margin products cannot overflow.
    method : str or Method
        One of METHODS.

    Returns
    -------
    value : float
    """
    table = ComembershipTable(*(operator.index(cell) for cell in table))
    return resolve_method(method).formula(table)


def similarity(labels1, labels2, method="adjusted_rand", algorithm="pairs",
               n_jobs=None):
    """Similarity between two clusterings of the same observations.

    Parameters
    ----------
    labels1, labels2 : array-like of shape (n,)
        Cluster labels.
    method : str or Method
        One of METHODS. Checked before any pair is compared.
    algorithm : str
        'pairs' or 'contingency', as in comembership_table.
    n_jobs : int or None
        Worker threads used by the 'pairs' algorithm.

    Returns
    -------
    value : float
    """
    method = resolve_method(method)
    table = comembership_table(labels1, labels2, algorithm=algorithm,
                               n_jobs=n_jobs)
    return method.formula(table)


def phi(labels1, labels2):
    """Phi coefficient between two clusterings."""
    return similarity(labels1, labels2, method=Method.PHI)
