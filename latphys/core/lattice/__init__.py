"""
Lattice geometry module.

This module provides unitcells (infinite periodic generators) and finite
lattices, which share one storage and editing model.

Available preset unitcells:
- ChainUnitcell: 1D chain
- SquareUnitcell, TriangularUnitcell: 2D Bravais lattices
- HoneycombUnitcell, KagomeUnitcell: 2D lattices with a basis
- CubicUnitcell: simple cubic
"""

from .base import AbstractLattice
from .unitcell import Unitcell
from .lattice import Lattice
from .presets import (
    ChainUnitcell,
    SquareUnitcell,
    TriangularUnitcell,
    HoneycombUnitcell,
    KagomeUnitcell,
    CubicUnitcell,
    UNITCELL_REGISTRY,
    create_unitcell
)

__all__ = [
    'AbstractLattice',
    'Unitcell',
    'Lattice',
    'ChainUnitcell',
    'SquareUnitcell',
    'TriangularUnitcell',
    'HoneycombUnitcell',
    'KagomeUnitcell',
    'CubicUnitcell',
    'UNITCELL_REGISTRY',
    'create_unitcell',
]
