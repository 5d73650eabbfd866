"""
Unitcell -> Lattice expansion.

Three construction policies are available:
- Periodic block (get_lattice_periodic / _open / _semiperiodic): tiles the
  unitcell and wraps or drops boundary bonds per direction
- Bond distance (get_lattice_by_bond_distance): all sites within a number
  of bond hops of an origin
- Shape (get_lattice_by_shape / _in_sphere / _in_box): all sites inside a
  region that are connected to an origin
"""

from .periodic import get_lattice_periodic, get_lattice_open, get_lattice_semiperiodic
from .traversal import get_lattice_by_bond_distance, traverse_bond_graph
from .shapes import (
    AbstractShape,
    Sphere,
    Box,
    PredicateShape,
    get_lattice_by_shape,
    get_lattice_in_sphere,
    get_lattice_in_box
)

__all__ = [
    'get_lattice_periodic',
    'get_lattice_open',
    'get_lattice_semiperiodic',
    'get_lattice_by_bond_distance',
    'traverse_bond_graph',
    'AbstractShape',
    'Sphere',
    'Box',
    'PredicateShape',
    'get_lattice_by_shape',
    'get_lattice_in_sphere',
    'get_lattice_in_box',
]
