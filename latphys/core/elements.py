"""
Elementary building blocks of unitcells and lattices: sites and bonds.
"""

import numpy as np
from dataclasses import dataclass, field
from typing import Any, Optional, Sequence, Tuple


# Default labels keyed on label type; unknown types fall back to None
DEFAULT_LABELS = {
    int: 1,
    float: 1.0,
    complex: 1 + 0j,
    str: "1",
}


def is_index(value: Any) -> bool:
    """True for Python or numpy integers (booleans excluded)."""
    return isinstance(value, (int, np.integer)) and not isinstance(value, (bool, np.bool_))


def python_label_type(label: Any) -> type:
    """Python type of a label, numpy scalars mapped to their Python counterpart."""
    if isinstance(label, np.generic):
        return type(label.item())
    return type(label)


def default_label(label_type: Optional[type]) -> Any:
    """
    Get the default label for a given label type.

    Parameters
    ----------
    label_type : type or None
        Type of the labels already in use (e.g. ``int`` or ``str``)

    Returns
    -------
    label : Any
        Default label for that type, or None for unhandled types

    Examples
    --------
    >>> default_label(int)
    1
    >>> default_label(str)
    '1'
    """
    return DEFAULT_LABELS.get(label_type)


@dataclass(frozen=True, eq=False)
class Site:
    """
    A point in real space carrying an opaque label.

    Attributes
    ----------
    position : np.ndarray
        Real-space position, shape (D,)
    label : Any
        Opaque label (e.g. sublattice name or integer)

    Notes
    -----
    Sites are immutable and their position array is read-only, so the
    sites handed out by a lattice cannot break its invariants.
    """
    position: np.ndarray
    label: Any = None

    def __post_init__(self):
        position = np.array(self.position, dtype=float).reshape(-1)
        position.setflags(write=False)
        object.__setattr__(self, 'position', position)

    @property
    def dimension(self) -> int:
        """Spatial dimension D of the site."""
        return self.position.shape[0]

    def copy(self) -> 'Site':
        return Site(self.position.copy(), self.label)

    def __repr__(self) -> str:
        return f"Site(position={self.position.tolist()}, label={self.label!r})"


@dataclass(frozen=True)
class Bond:
    """
    Directed connection between two sites.

    Attributes
    ----------
    source : int
        Index of the site the bond starts at
    target : int
        Index of the site the bond points to
    label : Any
        Opaque label (e.g. bond type 'x', 'y', 'z')
    wrap : Tuple[int, ...]
        Number of unit-cell repeats crossed along each lattice vector
        to reach the target copy. Length equals the Bravais dimension N.

    Notes
    -----
    Bonds are immutable values. Editing operations replace them instead of
    mutating them, so a bond can be shared between a lattice and its copy.
    """
    source: int
    target: int
    label: Any = None
    wrap: Tuple[int, ...] = field(default_factory=tuple)

    def __post_init__(self):
        object.__setattr__(self, 'source', int(self.source))
        object.__setattr__(self, 'target', int(self.target))
        object.__setattr__(self, 'wrap', tuple(int(w) for w in self.wrap))

    @property
    def is_periodic(self) -> bool:
        """True if the bond crosses a unit-cell boundary."""
        return any(w != 0 for w in self.wrap)

    @property
    def bravais_dimension(self) -> int:
        """Number of lattice vectors the wrap refers to."""
        return len(self.wrap)

    def reversed(self) -> 'Bond':
        """
        Get the returning bond.

        Returns
        -------
        bond : Bond
            Bond with swapped endpoints and negated wrap
        """
        return Bond(self.target, self.source, self.label, tuple(-w for w in self.wrap))

    def with_endpoints(self, source: int, target: int) -> 'Bond':
        """Copy of this bond pointing between new site indices."""
        return Bond(source, target, self.label, self.wrap)


def zero_wrap(bravais_dimension: int) -> Tuple[int, ...]:
    return (0,) * bravais_dimension


def as_wrap(wrap: Optional[Sequence[int]], bravais_dimension: int) -> Tuple[int, ...]:
    """Normalize a user-supplied wrap, None meaning the zero vector."""
    if wrap is None:
        return zero_wrap(bravais_dimension)
    return tuple(int(w) for w in np.asarray(wrap, dtype=int).reshape(-1))
