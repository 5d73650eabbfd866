"""
Core domain models for the latphys package.

This module contains the fundamental abstractions:
- Site, Bond: elementary building blocks
- Unitcell: infinite periodic generator
- Lattice: finite realization of a unitcell
- construction: the unitcell -> lattice expansion policies

Everything else (I/O, configuration) is built on top of these.
"""

from .elements import Site, Bond, default_label

from .lattice import (
    AbstractLattice,
    Unitcell,
    Lattice,
    ChainUnitcell,
    SquareUnitcell,
    TriangularUnitcell,
    HoneycombUnitcell,
    KagomeUnitcell,
    CubicUnitcell,
    UNITCELL_REGISTRY,
    create_unitcell
)

from .construction import (
    get_lattice_periodic,
    get_lattice_open,
    get_lattice_semiperiodic,
    get_lattice_by_bond_distance,
    AbstractShape,
    Sphere,
    Box,
    PredicateShape,
    get_lattice_by_shape,
    get_lattice_in_sphere,
    get_lattice_in_box
)

from .connectivity import adjacency_matrix, connected_component_labels, reachable_sites

__all__ = [
    # Elements
    'Site',
    'Bond',
    'default_label',

    # Unitcells and lattices
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

    # Construction
    'get_lattice_periodic',
    'get_lattice_open',
    'get_lattice_semiperiodic',
    'get_lattice_by_bond_distance',
    'AbstractShape',
    'Sphere',
    'Box',
    'PredicateShape',
    'get_lattice_by_shape',
    'get_lattice_in_sphere',
    'get_lattice_in_box',

    # Connectivity
    'adjacency_matrix',
    'connected_component_labels',
    'reachable_sites',
]
