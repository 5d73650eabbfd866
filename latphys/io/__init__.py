"""
Input/output: JSON serialization and configuration-driven construction.
"""

from .serialization import save_unitcell, load_unitcell, save_lattice, load_lattice
from .config import (
    CONSTRUCTION_METHODS,
    build_unitcell,
    build_lattice,
    load_config,
    build_lattice_from_file
)

__all__ = [
    'save_unitcell',
    'load_unitcell',
    'save_lattice',
    'load_lattice',
    'CONSTRUCTION_METHODS',
    'build_unitcell',
    'build_lattice',
    'load_config',
    'build_lattice_from_file',
]
