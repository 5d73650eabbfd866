"""
latphys: Lattice construction and editing

A Python package for building finite lattices from periodic unitcells and
editing their site and bond connectivity.

Main Components
---------------
core : Domain models (Site, Bond, Unitcell, Lattice) and construction
io : JSON serialization and configuration-driven construction
exceptions : Error taxonomy (LatticeError and subclasses)

Quick Start
-----------
>>> from latphys import create_unitcell, get_lattice_periodic
>>>
>>> # Honeycomb unitcell: 2 sites, 6 bonds
>>> uc = create_unitcell('honeycomb')
>>>
>>> # 4 x 4 block, periodic along a1, open along a2
>>> lattice = get_lattice_periodic(uc, (4, 4), periodic=(True, False))
>>>
>>> # Cut out a vacancy and keep the part connected to site 0
>>> lattice.remove_site(5)
>>> lattice.remove_disconnected_sites(0)
>>> print(lattice)

Logging
-------
All modules log through loggers below 'latphys'. A NullHandler is attached,
so nothing is printed unless the application configures logging, e.g.

>>> import logging
>>> logging.basicConfig(level=logging.INFO)
"""

import logging

__version__ = "0.1.0"
__author__ = "Sung-Min Park"
__email__ = "sungmin.park.0226@gmail.com"

logging.getLogger(__name__).addHandler(logging.NullHandler())

from .exceptions import (
    LatticeError,
    InvalidIndexError,
    DimensionMismatchError,
    InvalidOriginError,
    InvalidExtentError
)

# High-level API exports
from .core import (
    # Elements
    Site,
    Bond,

    # Unitcells and lattices
    AbstractLattice,
    Unitcell,
    Lattice,
    create_unitcell,

    # Construction
    get_lattice_periodic,
    get_lattice_open,
    get_lattice_semiperiodic,
    get_lattice_by_bond_distance,
    get_lattice_by_shape,
    get_lattice_in_sphere,
    get_lattice_in_box,
    Sphere,
    Box,
)

from .io import save_lattice, load_lattice, build_lattice

__all__ = [
    # Version info
    '__version__',
    '__author__',
    '__email__',

    # Errors
    'LatticeError',
    'InvalidIndexError',
    'DimensionMismatchError',
    'InvalidOriginError',
    'InvalidExtentError',

    # Core abstractions
    'Site',
    'Bond',
    'AbstractLattice',
    'Unitcell',
    'Lattice',
    'create_unitcell',
    'get_lattice_periodic',
    'get_lattice_open',
    'get_lattice_semiperiodic',
    'get_lattice_by_bond_distance',
    'get_lattice_by_shape',
    'get_lattice_in_sphere',
    'get_lattice_in_box',
    'Sphere',
    'Box',

    # I/O
    'save_lattice',
    'load_lattice',
    'build_lattice',
]
