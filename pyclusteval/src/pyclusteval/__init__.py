"""pyclusteval: similarity of two clusterings via pairwise comemberships."""

from .table import ComembershipTable
from .comembership import (
    comembership, comembership_table,
    comembership_table_from_comemberships, table_from_labels,
)
from .similarity import Method, METHODS, compute_similarity, similarity, phi
from .exceptions import (
    ClustevalError, LengthMismatchError, UndefinedStatisticError,
    UnknownMethodError,
)
from . import io, viz, contingency

__version__ = "0.1.0"
__all__ = [
    "ComembershipTable", "comembership", "comembership_table",
    "comembership_table_from_comemberships", "table_from_labels",
    "Method", "METHODS", "compute_similarity", "similarity", "phi",
    "ClustevalError", "LengthMismatchError", "UndefinedStatisticError",
    "UnknownMethodError", "io", "viz", "contingency",
]
