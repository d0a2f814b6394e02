"""Exception types raised by the geometry kernel.

Every error derives from RaysphereError. The concrete errors also derive
from ValueError so callers that already catch ValueError for bad arguments
keep working.
"""


class RaysphereError(Exception):
    """Base class for all errors raised by raysphere."""


class InvalidDirectionError(RaysphereError, ValueError):
    """A direction vector has zero length or non-finite components."""


class SingularMatrixError(RaysphereError, ValueError):
    """A matrix or transform has no inverse."""
