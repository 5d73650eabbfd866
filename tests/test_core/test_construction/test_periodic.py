"""
Unit tests for periodic block construction.

Tests:
- Site counts and row-major ordering
- Internal, wrapped and dropped boundary bonds
- Mixed (strip) boundary conditions
- Input validation
"""

import numpy as np
import pytest
from latphys.core import (
    Bond,
    create_unitcell,
    get_lattice_periodic,
    get_lattice_open,
    get_lattice_semiperiodic
)
from latphys.exceptions import DimensionMismatchError, InvalidExtentError

from conftest import assert_bonds_valid


class TestSiteGeneration:
    """Test site counts, order and positions."""

    @pytest.mark.parametrize("name, extent, expected", [
        ('chain', 5, 5),
        ('honeycomb', (3, 2), 12),
        ('kagome', 2, 12),
        ('cubic', (2, 3, 1), 6),
    ])
    def test_site_count(self, name, extent, expected):
        """Number of sites = product of extents x unitcell sites."""
        lattice = get_lattice_periodic(create_unitcell(name), extent)

        assert lattice.num_sites == expected

    def test_row_major_order(self, square_unitcell):
        """Site t1 * L2 + t2 sits at t1 * a1 + t2 * a2."""
        lattice = get_lattice_open(square_unitcell, (2, 3))
        expected = [[t1, t2] for t1 in range(2) for t2 in range(3)]

        assert np.allclose(lattice.positions(), expected)

    def test_basis_index_is_innermost(self, honeycomb_unitcell):
        """Sites of one cell are consecutive, in unitcell order."""
        lattice = get_lattice_open(honeycomb_unitcell, (2, 2))
        basis = honeycomb_unitcell.positions()

        assert lattice.site_labels() == [1, 2] * 4
        # cell (0, 1) is the second cell
        assert np.allclose(lattice.positions()[2], basis[0] + honeycomb_unitcell.a2)
        assert np.allclose(lattice.positions()[3], basis[1] + honeycomb_unitcell.a2)


class TestOpenBoundaries:
    """Test blocks with all bonds leaving the block dropped."""

    def test_single_cell_honeycomb(self, honeycomb_unitcell):
        """A 1 x 1 open honeycomb keeps only the zero-wrap bonds."""
        lattice = get_lattice_open(honeycomb_unitcell, (1, 1))

        assert lattice.num_sites == 2
        assert lattice.is_fully_open
        assert lattice.bonds == (Bond(0, 1, 'z', ()), Bond(1, 0, 'z', ()))

    def test_open_square(self, square_unitcell):
        """A 3 x 3 open square has 12 undirected bonds."""
        lattice = get_lattice_open(square_unitcell, (3, 3))

        assert lattice.num_bonds == 24
        assert not any(b.is_periodic for b in lattice.bonds)
        assert_bonds_valid(lattice)

    def test_unitcell_is_untouched(self, square_unitcell):
        """Construction does not modify the unitcell."""
        get_lattice_open(square_unitcell, (3, 3))

        assert square_unitcell.num_sites == 1
        assert square_unitcell.num_bonds == 4


class TestPeriodicBoundaries:
    """Test blocks with bonds wrapped around."""

    def test_fully_periodic_square(self, square_unitcell):
        """Every site keeps all 4 bonds; lattice vectors are L * a."""
        lattice = get_lattice_periodic(square_unitcell, (3, 3))

        assert lattice.num_bonds == 36
        assert lattice.coordination_numbers().tolist() == [4] * 9
        assert np.allclose(lattice.lattice_vectors, [[3.0, 0.0], [0.0, 3.0]])
        assert np.allclose(np.linalg.norm(lattice.bond_vectors(), axis=1), 1.0)
        assert lattice.unitcell is square_unitcell

    def test_wrap_is_quotient(self):
        """The bond leaving the last cell points to the first with wrap 1."""
        lattice = get_lattice_periodic(create_unitcell('chain'), 4)
        bonds = set(lattice.bonds)

        assert Bond(3, 0, 1, (1,)) in bonds
        assert Bond(0, 3, 1, (-1,)) in bonds
        assert Bond(1, 2, 1, (0,)) in bonds

    def test_extent_one_gives_self_wrapping_bonds(self, square_unitcell):
        """With extent 1 every bond connects the site to itself."""
        lattice = get_lattice_periodic(square_unitcell, (1, 1))

        assert lattice.num_sites == 1
        assert sorted(b.wrap for b in lattice.bonds) == [(-1, 0), (0, -1), (0, 1), (1, 0)]
        assert all(b.source == 0 and b.target == 0 for b in lattice.bonds)

    def test_extent_two_keeps_parallel_bonds(self):
        """With extent 2 both neighbors are the same site; both bonds are kept."""
        lattice = get_lattice_periodic(create_unitcell('chain'), 2)

        assert lattice.num_bonds == 4
        assert set(lattice.bonds) == {
            Bond(0, 1, 1, (0,)), Bond(0, 1, 1, (-1,)),
            Bond(1, 0, 1, (1,)), Bond(1, 0, 1, (0,)),
        }


class TestMixedBoundaries:
    """Test strips: periodic in some directions, open in others."""

    def test_square_strip(self, square_unitcell):
        """Periodic along a1, open along a2."""
        lattice = get_lattice_semiperiodic(square_unitcell, (3, 2), (True, False))

        assert lattice.bravais_dimension == 1
        assert np.allclose(lattice.lattice_vectors, [[3.0, 0.0]])
        assert lattice.num_bonds == 18
        assert all(len(b.wrap) == 1 for b in lattice.bonds)
        assert np.allclose(np.linalg.norm(lattice.bond_vectors(), axis=1), 1.0)

    def test_honeycomb_ribbon(self, honeycomb_unitcell):
        """Edge sites of an open direction lose bonds."""
        lattice = get_lattice_periodic(honeycomb_unitcell, (4, 3), periodic=(True, False))
        coordination = lattice.coordination_numbers()

        assert coordination.max() == 3
        assert coordination.min() == 2
        assert_bonds_valid(lattice)


class TestValidation:
    """Test input validation."""

    @pytest.mark.parametrize("extent", [0, (2, 0), (-1, 3)])
    def test_non_positive_extent_raises(self, square_unitcell, extent):
        """Extents must be at least 1."""
        with pytest.raises(InvalidExtentError):
            get_lattice_periodic(square_unitcell, extent)

    @pytest.mark.parametrize("extent", [True, 2.0, None])
    def test_non_integer_extent_raises(self, square_unitcell, extent):
        """Booleans and floats are not extents."""
        with pytest.raises(InvalidExtentError):
            get_lattice_periodic(square_unitcell, extent)

    def test_extent_length_mismatch_raises(self, square_unitcell):
        """One extent per lattice vector."""
        with pytest.raises(DimensionMismatchError):
            get_lattice_periodic(square_unitcell, (2, 2, 2))

    def test_periodic_length_mismatch_raises(self, square_unitcell):
        """One boundary condition per lattice vector."""
        with pytest.raises(DimensionMismatchError):
            get_lattice_periodic(square_unitcell, 2, periodic=(True,))

    def test_semiperiodic_requires_sequence(self, square_unitcell):
        """A single boolean is ambiguous for a strip geometry."""
        with pytest.raises(TypeError):
            get_lattice_semiperiodic(square_unitcell, 2, True)


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
