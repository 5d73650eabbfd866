"""
Exceptions raised by lattice construction and editing.

All errors are input errors: they are raised immediately to the caller and
the lattice or unitcell involved is left unmodified.
"""


class LatticeError(ValueError):
    """Base class for all lattice related errors."""
    pass


class InvalidIndexError(LatticeError, IndexError):
    """A site, bond or lattice-vector index is out of range."""
    pass


class DimensionMismatchError(LatticeError):
    """Two values that must share a spatial or Bravais dimension do not."""
    pass


class InvalidOriginError(LatticeError):
    """An expansion origin does not exist in the source unitcell."""
    pass


class InvalidExtentError(LatticeError):
    """A periodic extent is smaller than one along some direction."""
    pass
