"""
Lattice: a finite, indexed realization of a unitcell.
"""

from typing import Dict, Optional, Sequence

from ..elements import Site, Bond
from .base import AbstractLattice
from .unitcell import Unitcell


class Lattice(AbstractLattice):
    """
    Finite lattice with optional residual periodicity.

    Lattices are usually produced by the construction functions in
    latphys.core.construction, but can also be built by hand.

    Parameters
    ----------
    lattice_vectors : array_like, shape (N, D)
        Lattice vectors of the remaining periodic directions. Empty for a
        fully open lattice; one row per direction for strip geometries.
    sites : Sequence[Site], optional
        Sites of the finite lattice
    bonds : Sequence[Bond], optional
        Bonds, each with a wrap of length N
    unitcell : Unitcell, optional
        The unitcell this lattice was generated from. Kept as a read-only
        back-reference; lattice operations never modify it.
    dimension : int, optional
        Spatial dimension. Required for an empty, fully open lattice.

    Attributes
    ----------
    unitcell : Unitcell or None
        Generating unitcell
    """

    def __init__(self,
                 lattice_vectors=(),
                 sites: Optional[Sequence[Site]] = None,
                 bonds: Optional[Sequence[Bond]] = None,
                 unitcell: Optional[Unitcell] = None,
                 dimension: Optional[int] = None):
        if unitcell is not None and not isinstance(unitcell, Unitcell):
            raise TypeError("unitcell must be a Unitcell instance")
        if dimension is None and unitcell is not None:
            dimension = unitcell.dimension

        super().__init__(lattice_vectors, sites, bonds, dimension)
        self.unitcell = unitcell

    @property
    def is_fully_open(self) -> bool:
        """True if no periodic direction remains."""
        return self.bravais_dimension == 0

    def copy(self) -> 'Lattice':
        """
        Create an independent clone sharing only the unitcell reference.

        Examples
        --------
        >>> part = lattice.copy()
        >>> part.remove_sites(range(10))
        >>> lattice.num_sites == part.num_sites + 10
        True
        """
        return Lattice(self._lattice_vectors, self._sites, self._bonds,
                       unitcell=self.unitcell, dimension=self.dimension)

    def to_dict(self) -> Dict:
        """
        Serialize to dictionary.

        Returns
        -------
        data : Dict
            Dictionary with keys 'type' ('lattice'), 'dimension',
            'lattice_vectors', 'sites', 'bonds' and 'unitcell'
            (the unitcell's own dictionary, or None)
        """
        data = {'type': 'lattice'}
        data.update(self._core_dict())
        data['unitcell'] = self.unitcell.to_dict() if self.unitcell is not None else None
        return data

    @classmethod
    def from_dict(cls, data: Dict) -> 'Lattice':
        """
        Reconstruct from dictionary.

        Parameters
        ----------
        data : Dict
            Dictionary from to_dict()
        """
        if data.get('type') != 'lattice':
            raise ValueError(f"Expected type 'lattice', got '{data.get('type')}'")

        unitcell_data = data.get('unitcell')
        unitcell = Unitcell.from_dict(unitcell_data) if unitcell_data else None
        return cls(unitcell=unitcell, **cls._core_from_dict(data))

    def __repr__(self) -> str:
        base = super().__repr__()
        if self.unitcell is None:
            return base
        return f"{base[:-1]}, unitcell={self.unitcell.__class__.__name__})"
