"""Errors raised when comparing clusterings."""


class ClustevalError(Exception):
    """Base class for pyclusteval errors."""


class LengthMismatchError(ClustevalError, ValueError):
    """The two label (or comembership) sequences differ in length."""

    def __init__(self, n1, n2):
        self.lengths = (n1, n2)
        super().__init__(
            f"The two sequences must be of equal length (got {n1} and {n2})."
        )


class UndefinedStatisticError(ClustevalError, ArithmeticError):
    """A similarity coefficient has a zero denominator for the given table."""

    def __init__(self, method, table):
        self.method = method
        self.table = table
        super().__init__(
            f"'{method}' is undefined for {table!r} (zero denominator)"
        )


class UnknownMethodError(ClustevalError, ValueError):
    """The requested similarity method is not recognized."""

    def __init__(self, method, valid):
        self.method = method
        self.valid = tuple(valid)
        super().__init__(
            f"Unknown similarity method {method!r}; "
            f"valid methods are: {', '.join(self.valid)}"
        )
