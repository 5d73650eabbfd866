"""
Shared fixtures for the latphys test suite.
"""

import numpy as np
import pytest

from latphys.core import (
    Site,
    Bond,
    Lattice,
    create_unitcell,
    get_lattice_open,
)


@pytest.fixture
def square_unitcell():
    """Square unitcell, a = 1, one site, four bonds."""
    return create_unitcell('square')


@pytest.fixture
def honeycomb_unitcell():
    """Honeycomb unitcell, a = 1, two sites, six bonds."""
    return create_unitcell('honeycomb')


@pytest.fixture
def open_square_3x3(square_unitcell):
    """3 x 3 open square block; site t1 * 3 + t2 sits at (t1, t2)."""
    return get_lattice_open(square_unitcell, (3, 3))


@pytest.fixture
def two_site_lattice():
    """Hand-built 2D lattice with unit lattice vectors and two sites."""
    return Lattice(
        [[1.0, 0.0], [0.0, 1.0]],
        sites=[Site([0.0, 0.0], 'A'), Site([0.5, 0.5], 'B')],
    )


def assert_bonds_valid(lattice):
    """Every bond endpoint is a valid site index."""
    for bond in lattice.bonds:
        assert 0 <= bond.source < lattice.num_sites
        assert 0 <= bond.target < lattice.num_sites
        assert len(bond.wrap) == lattice.bravais_dimension


def position_set(lattice, decimals=6):
    """Site positions as a set of rounded tuples."""
    return {tuple(np.round(p, decimals) + 0.0) for p in lattice.positions()}
