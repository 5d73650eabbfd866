"""
Preset unitcells for common lattices.

This module provides concrete Unitcell subclasses for:
- Chain (1D)
- Square, Triangular, Honeycomb, Kagome (2D)
- Simple cubic (3D)

All bonds are nearest-neighbor bonds and every bond comes with its
returning bond.
"""

import numpy as np

from ..elements import Site
from .unitcell import Unitcell


def _check_lattice_constant(lattice_constant: float) -> None:
    if lattice_constant <= 0:
        raise ValueError("Lattice constant must be positive")


class ChainUnitcell(Unitcell):
    """
    One-dimensional chain with a single site.

    Geometry
    --------
    a1 = a * [1]
    Nearest neighbors at wraps (+1) and (-1).

    Parameters
    ----------
    lattice_constant : float, optional
        Lattice constant 'a' (default: 1.0)
    """

    def __init__(self, lattice_constant: float = 1.0):
        _check_lattice_constant(lattice_constant)
        self.lattice_constant = lattice_constant

        super().__init__([[lattice_constant]], sites=[Site([0.0], 1)])
        self.add_bond(0, 0, 1, (1,))


class SquareUnitcell(Unitcell):
    """
    Square Bravais lattice.

    Geometry
    --------
    a1 = a * [1, 0]
    a2 = a * [0, 1]

    Nearest neighbors (4) at distance a, wraps (±1, 0) and (0, ±1).

    Parameters
    ----------
    lattice_constant : float, optional
        Lattice constant 'a' (default: 1.0)
    """

    def __init__(self, lattice_constant: float = 1.0):
        _check_lattice_constant(lattice_constant)
        self.lattice_constant = lattice_constant

        a = lattice_constant
        super().__init__([[a, 0.0], [0.0, a]], sites=[Site([0.0, 0.0], 1)])
        self.add_bond(0, 0, 1, (1, 0))
        self.add_bond(0, 0, 1, (0, 1))


class TriangularUnitcell(Unitcell):
    """
    Triangular (hexagonal) Bravais lattice.

    Geometry
    --------
    Primitive vectors (for lattice constant a):
        a1 = a * [1, 0]
        a2 = a * [1/2, √3/2]

    Nearest neighbors (6) at distance a:
        wraps (±1, 0), (0, ±1), ±(1, -1)

    Parameters
    ----------
    lattice_constant : float, optional
        Lattice constant 'a' (default: 1.0)

    Notes
    -----
    Commonly used for frustrated magnets, where antiferromagnetic
    couplings cannot satisfy all bonds at once.
    """

    def __init__(self, lattice_constant: float = 1.0):
        _check_lattice_constant(lattice_constant)
        self.lattice_constant = lattice_constant

        a = lattice_constant
        super().__init__(
            [[a, 0.0], [a / 2.0, a * np.sqrt(3) / 2.0]],
            sites=[Site([0.0, 0.0], 1)]
        )
        self.add_bond(0, 0, 1, (1, 0))
        self.add_bond(0, 0, 1, (0, 1))
        self.add_bond(0, 0, 1, (1, -1))


class HoneycombUnitcell(Unitcell):
    """
    Honeycomb lattice with a two-site basis (A, B sublattices).

    Geometry
    --------
    a1 = a * [1, 0]
    a2 = a * [1/2, √3/2]

    Sites:
        A (label 1) at [0, 0]
        B (label 2) at (a1 + a2) / 3

    Each site has 3 nearest neighbors at distance a/√3. The three bond
    directions are labeled 'x', 'y' and 'z'; only the 'z' bonds
    (A -> B within the same cell and back) have a zero wrap.

    Parameters
    ----------
    lattice_constant : float, optional
        Lattice constant 'a' (default: 1.0)
    """

    def __init__(self, lattice_constant: float = 1.0):
        _check_lattice_constant(lattice_constant)
        self.lattice_constant = lattice_constant

        a = lattice_constant
        a1 = np.array([a, 0.0])
        a2 = np.array([a / 2.0, a * np.sqrt(3) / 2.0])
        super().__init__(
            [a1, a2],
            sites=[Site([0.0, 0.0], 1), Site((a1 + a2) / 3.0, 2)]
        )
        self.add_bond(0, 1, 'z', (0, 0))
        self.add_bond(0, 1, 'x', (-1, 0))
        self.add_bond(0, 1, 'y', (0, -1))


class KagomeUnitcell(Unitcell):
    """
    Kagome lattice with a three-site basis.

    Geometry
    --------
    a1 = a * [1, 0]
    a2 = a * [1/2, √3/2]

    Sites at 0, a1/2 and a2/2 (labels 1, 2, 3). Every site has 4 nearest
    neighbors at distance a/2.

    Parameters
    ----------
    lattice_constant : float, optional
        Lattice constant 'a' (default: 1.0)
    """

    def __init__(self, lattice_constant: float = 1.0):
        _check_lattice_constant(lattice_constant)
        self.lattice_constant = lattice_constant

        a = lattice_constant
        a1 = np.array([a, 0.0])
        a2 = np.array([a / 2.0, a * np.sqrt(3) / 2.0])
        super().__init__(
            [a1, a2],
            sites=[Site([0.0, 0.0], 1), Site(a1 / 2.0, 2), Site(a2 / 2.0, 3)]
        )
        # up triangles
        self.add_bond(0, 1, 1, (0, 0))
        self.add_bond(0, 2, 1, (0, 0))
        self.add_bond(1, 2, 1, (0, 0))
        # down triangles
        self.add_bond(0, 1, 1, (-1, 0))
        self.add_bond(0, 2, 1, (0, -1))
        self.add_bond(1, 2, 1, (1, -1))


class CubicUnitcell(Unitcell):
    """
    Simple cubic Bravais lattice.

    Geometry
    --------
    a1 = a * [1, 0, 0], a2 = a * [0, 1, 0], a3 = a * [0, 0, 1]
    Nearest neighbors (6) at distance a.

    Parameters
    ----------
    lattice_constant : float, optional
        Lattice constant 'a' (default: 1.0)
    """

    def __init__(self, lattice_constant: float = 1.0):
        _check_lattice_constant(lattice_constant)
        self.lattice_constant = lattice_constant

        super().__init__(lattice_constant * np.eye(3), sites=[Site([0.0, 0.0, 0.0], 1)])
        for direction in np.eye(3, dtype=int):
            self.add_bond(0, 0, 1, direction)


# Unitcell registry for config-based construction
UNITCELL_REGISTRY = {
    'chain': ChainUnitcell,
    'square': SquareUnitcell,
    'triangular': TriangularUnitcell,
    'honeycomb': HoneycombUnitcell,
    'kagome': KagomeUnitcell,
    'cubic': CubicUnitcell,
}


def create_unitcell(unitcell_type: str, **kwargs) -> Unitcell:
    """
    Factory function to create unitcells from string names.

    Parameters
    ----------
    unitcell_type : str
        Type of unitcell ('chain', 'square', 'triangular', 'honeycomb',
        'kagome', 'cubic')
    **kwargs
        Additional arguments passed to the unitcell constructor
        (e.g., lattice_constant=1.5)

    Returns
    -------
    unitcell : Unitcell
        Instantiated unitcell object

    Examples
    --------
    >>> uc = create_unitcell('honeycomb', lattice_constant=1.5)
    >>> isinstance(uc, HoneycombUnitcell)
    True

    Raises
    ------
    ValueError
        If unitcell_type is not recognized
    """
    if unitcell_type not in UNITCELL_REGISTRY:
        available = ', '.join(UNITCELL_REGISTRY.keys())
        raise ValueError(f"Unknown unitcell type '{unitcell_type}'. "
                         f"Available types: {available}")

    unitcell_class = UNITCELL_REGISTRY[unitcell_type]
    return unitcell_class(**kwargs)
