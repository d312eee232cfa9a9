class DHeapError(Exception):
    """Base class for errors raised by the d-ary heap."""


class InvalidArgumentError(DHeapError, ValueError):
    """
    Raised for a branching factor below 2, a non-positive capacity, or an
    index outside the domain of the parent/child index arithmetic.
    """


class UnderflowError(DHeapError, RuntimeError):
    """Raised when the minimum is requested from an empty heap."""
