"""
Unit tests for read-only bond views: organized bond lists and bond vectors.
"""

import numpy as np
import pytest
from latphys.core import Site, Bond, Lattice, get_lattice_periodic
from latphys.exceptions import InvalidIndexError, DimensionMismatchError


@pytest.fixture
def three_bond_lattice():
    """Two sites with bonds (0,1), (1,0), (0,1)."""
    bonds = [Bond(0, 1, 'a'), Bond(1, 0, 'a'), Bond(0, 1, 'b')]
    return Lattice(sites=[Site([0.0]), Site([1.0])], bonds=bonds)


class TestOrganizedBonds:
    """Test grouping bonds by source and target."""

    def test_by_source(self, three_bond_lattice):
        """List i holds the bonds starting at site i, in bond-list order."""
        bonds = three_bond_lattice.bonds
        organized = three_bond_lattice.organize_bonds_by_source()

        assert len(organized) == 2
        assert organized[0] == [bonds[0], bonds[2]]
        assert organized[1] == [bonds[1]]

    def test_by_target(self, three_bond_lattice):
        """List i holds the bonds ending at site i, in bond-list order."""
        bonds = three_bond_lattice.bonds
        organized = three_bond_lattice.organize_bonds_by_target()

        assert organized[0] == [bonds[1]]
        assert organized[1] == [bonds[0], bonds[2]]

    def test_isolated_sites_get_empty_lists(self, three_bond_lattice):
        """Every site has an entry, even without bonds."""
        three_bond_lattice.add_site([2.0])

        assert three_bond_lattice.organize_bonds_by_source()[2] == []
        assert three_bond_lattice.organize_bonds_by_target()[2] == []

    def test_recomputed_after_edit(self, three_bond_lattice):
        """The views follow the current bond list."""
        three_bond_lattice.remove_bonds(0)

        assert three_bond_lattice.organize_bonds_by_source()[0] == [Bond(0, 1, 'b')]


class TestBondVector:
    """Test real-space bond displacements."""

    def test_wrapped_bond_vector(self, two_site_lattice):
        """(0.5, 0.5) - (0, 0) + a1 + a2 = (1.5, 1.5)."""
        bond = Bond(0, 1, None, (1, 1))

        assert np.allclose(two_site_lattice.bond_vector(bond), [1.5, 1.5])

    def test_synthetic_bond_accepted(self, two_site_lattice):
        """The bond does not need to belong to the lattice."""
        assert two_site_lattice.num_bonds == 0
        vector = two_site_lattice.bond_vector(Bond(1, 0, None, (-1, 0)))

        assert np.allclose(vector, [-1.5, -0.5])

    def test_wrap_length_mismatch_raises(self, two_site_lattice):
        """The wrap must have one entry per lattice vector."""
        with pytest.raises(DimensionMismatchError):
            two_site_lattice.bond_vector(Bond(0, 1, None, (1,)))

    def test_invalid_endpoint_raises(self, two_site_lattice):
        """Endpoints must be valid for this lattice."""
        with pytest.raises(InvalidIndexError):
            two_site_lattice.bond_vector(Bond(0, 2, None, (0, 0)))

    def test_open_lattice_bond_vectors(self, three_bond_lattice):
        """Without lattice vectors the vector is the position difference."""
        assert np.allclose(three_bond_lattice.bond_vectors(), [[1.0], [-1.0], [1.0]])

    def test_periodic_block_preserves_bond_vectors(self, honeycomb_unitcell):
        """Wrapped bonds of a periodic block keep the unitcell bond lengths."""
        lattice = get_lattice_periodic(honeycomb_unitcell, (3, 2))
        lengths = np.linalg.norm(lattice.bond_vectors(), axis=1)

        assert np.allclose(lengths, 1.0 / np.sqrt(3))


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
