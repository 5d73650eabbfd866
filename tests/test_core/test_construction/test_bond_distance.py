"""
Unit tests for bond-distance construction.
"""

import numpy as np
import pytest
from latphys.core import create_unitcell, get_lattice_by_bond_distance
from latphys.exceptions import InvalidOriginError

from conftest import assert_bonds_valid, position_set


class TestSquareDiamond:
    """On the square lattice the bond distance is the Manhattan distance."""

    def test_distance_zero(self, square_unitcell):
        """Only the origin, no bonds."""
        lattice = get_lattice_by_bond_distance(square_unitcell, 0)

        assert lattice.num_sites == 1
        assert lattice.num_bonds == 0
        assert np.allclose(lattice.positions(), [[0.0, 0.0]])

    def test_distance_one(self, square_unitcell):
        """Origin plus four neighbors, four undirected bonds."""
        lattice = get_lattice_by_bond_distance(square_unitcell, 1)

        assert lattice.num_sites == 5
        assert lattice.num_bonds == 8

    def test_distance_two(self, square_unitcell):
        """All sites with |x| + |y| <= 2 and every bond between them."""
        lattice = get_lattice_by_bond_distance(square_unitcell, 2)
        expected = {
            (float(x), float(y))
            for x in range(-2, 3) for y in range(-2, 3)
            if abs(x) + abs(y) <= 2
        }

        assert lattice.num_sites == 13
        assert position_set(lattice) == expected
        assert lattice.num_bonds == 32
        assert_bonds_valid(lattice)

    def test_result_is_fully_open(self, square_unitcell):
        """No lattice vectors and empty wraps."""
        lattice = get_lattice_by_bond_distance(square_unitcell, 2)

        assert lattice.is_fully_open
        assert lattice.lattice_vectors.shape == (0, 2)
        assert all(b.wrap == () for b in lattice.bonds)
        assert lattice.unitcell is square_unitcell

    def test_origin_is_site_zero(self, square_unitcell):
        """Traversal starts from site 0."""
        lattice = get_lattice_by_bond_distance(square_unitcell, 3)

        assert np.allclose(lattice.positions()[0], [0.0, 0.0])

    def test_bond_lengths_preserved(self, square_unitcell):
        """Every bond has unit length."""
        lattice = get_lattice_by_bond_distance(square_unitcell, 3)

        assert np.allclose(np.linalg.norm(lattice.bond_vectors(), axis=1), 1.0)


class TestBasisUnitcells:
    """Test unitcells with several sites."""

    def test_honeycomb_distance_one(self, honeycomb_unitcell):
        """A site and its three neighbors."""
        lattice = get_lattice_by_bond_distance(honeycomb_unitcell, 1)

        assert lattice.num_sites == 4
        assert lattice.num_bonds == 6
        assert lattice.site_labels() == [1, 2, 2, 2]
        assert sorted(lattice.coordination_numbers().tolist()) == [1, 1, 1, 3]

    def test_other_origin(self, honeycomb_unitcell):
        """Starting from site 1 puts that site at index 0."""
        lattice = get_lattice_by_bond_distance(honeycomb_unitcell, 1, origin=1)

        assert lattice.site_labels() == [2, 1, 1, 1]
        assert np.allclose(lattice.positions()[0], honeycomb_unitcell.positions()[1])

    def test_kagome_bond_labels_follow_unitcell(self):
        """Bond labels are copied from the unitcell bonds."""
        uc = create_unitcell('kagome')
        lattice = get_lattice_by_bond_distance(uc, 2)

        assert set(lattice.bond_labels()) <= set(uc.bond_labels())


class TestValidation:
    """Test input validation."""

    @pytest.mark.parametrize("origin", [-1, 1, 0.0])
    def test_invalid_origin_raises(self, square_unitcell, origin):
        """The origin must be a unitcell site index."""
        with pytest.raises(InvalidOriginError):
            get_lattice_by_bond_distance(square_unitcell, 1, origin=origin)

    def test_negative_distance_raises(self, square_unitcell):
        """Negative bond distances are rejected."""
        with pytest.raises(ValueError, match="non-negative"):
            get_lattice_by_bond_distance(square_unitcell, -1)


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
