"""
Unitcell: the periodic generator of a lattice.
"""

import numpy as np
from typing import Dict, Optional, Sequence

from ...exceptions import LatticeError
from ..elements import Site, Bond
from .base import AbstractLattice


class Unitcell(AbstractLattice):
    """
    Infinite periodic tile: lattice vectors + intra-cell sites + bonds.

    A bond (i, j, label, wrap) connects site i in the cell at translation t
    to site j in the cell at translation t + wrap.

    Parameters
    ----------
    lattice_vectors : array_like, shape (N, D)
        Linearly independent lattice vectors as rows, N >= 1
    sites : Sequence[Site], optional
        Sites inside the cell, positions in real space (not fractional)
    bonds : Sequence[Bond], optional
        Bonds with wraps relative to the unit cell
    dimension : int, optional
        Spatial dimension (inferred from lattice_vectors if omitted)

    Examples
    --------
    Square unitcell with one site and its four nearest-neighbor bonds:

    >>> uc = Unitcell([[1.0, 0.0], [0.0, 1.0]], sites=[Site([0.0, 0.0], 1)])
    >>> uc.add_bond(0, 0, 1, (1, 0))
    >>> uc.add_bond(0, 0, 1, (0, 1))
    >>> uc.num_bonds
    4
    """

    def __init__(self,
                 lattice_vectors,
                 sites: Optional[Sequence[Site]] = None,
                 bonds: Optional[Sequence[Bond]] = None,
                 dimension: Optional[int] = None):
        super().__init__(lattice_vectors, sites, bonds, dimension)

        if self.bravais_dimension < 1:
            raise LatticeError("A unitcell needs at least one lattice vector")
        if self.bravais_dimension > self.dimension:
            raise LatticeError(
                f"{self.bravais_dimension} lattice vectors cannot be linearly "
                f"independent in {self.dimension} dimensions"
            )
        if np.linalg.matrix_rank(self._lattice_vectors) != self.bravais_dimension:
            raise LatticeError("Lattice vectors must be linearly independent")

    def copy(self) -> 'Unitcell':
        return Unitcell(self._lattice_vectors, self._sites, self._bonds, self.dimension)

    def to_dict(self) -> Dict:
        """
        Serialize to dictionary.

        Returns
        -------
        data : Dict
            Dictionary with keys 'type' ('unitcell'), 'dimension',
            'lattice_vectors', 'sites' and 'bonds'
        """
        data = {'type': 'unitcell'}
        data.update(self._core_dict())
        return data

    @classmethod
    def from_dict(cls, data: Dict) -> 'Unitcell':
        """
        Reconstruct from dictionary.

        Parameters
        ----------
        data : Dict
            Dictionary from to_dict()
        """
        if data.get('type') != 'unitcell':
            raise ValueError(f"Expected type 'unitcell', got '{data.get('type')}'")
        return cls(**cls._core_from_dict(data))
