"""
Abstract base class shared by unitcells and finite lattices.

Both objects consist of the same three parts:
- lattice vectors (N vectors of spatial dimension D)
- a list of sites
- a list of bonds, each with an integer wrap of length N

This module implements everything that only depends on those three parts:
validation, read-only accessors, bond indexing and in-place editing.
"""

import logging
import numpy as np
from abc import ABC, abstractmethod
from typing import Any, Dict, Iterable, List, Optional, Sequence, Set, Union

from ...exceptions import LatticeError, InvalidIndexError, DimensionMismatchError
from ..elements import Site, Bond, default_label, python_label_type, as_wrap, is_index
from ..connectivity import reachable_sites

logger = logging.getLogger(__name__)


class AbstractLattice(ABC):
    """
    Abstract base class for unitcells and lattices.

    Design Philosophy
    -----------------
    The object exclusively owns its site and bond lists. Every editing
    operation validates all of its inputs first and only then swaps in the
    new lists, so the invariants below hold after every single call:

    - every bond's source/target is a valid index into the site list
    - every site has the same spatial dimension D
    - every bond's wrap has length N = number of lattice vectors

    Parameters
    ----------
    lattice_vectors : array_like, shape (N, D)
        Lattice vectors as rows. May be empty (N = 0) for fully open lattices.
    sites : Sequence[Site], optional
        Sites (copied on construction)
    bonds : Sequence[Bond], optional
        Bonds between the given sites
    dimension : int, optional
        Spatial dimension D. Only required when it cannot be inferred from
        the lattice vectors or the first site.
    """

    def __init__(self,
                 lattice_vectors,
                 sites: Optional[Sequence[Site]] = None,
                 bonds: Optional[Sequence[Bond]] = None,
                 dimension: Optional[int] = None):
        sites = list(sites) if sites is not None else []
        bonds = list(bonds) if bonds is not None else []

        for site in sites:
            if not isinstance(site, Site):
                raise TypeError(f"sites must be Site instances, got {type(site).__name__}")
        for bond in bonds:
            if not isinstance(bond, Bond):
                raise TypeError(f"bonds must be Bond instances, got {type(bond).__name__}")

        vectors = np.array(lattice_vectors, dtype=float)
        if vectors.ndim == 2 and vectors.shape[1] > 0:
            inferred = vectors.shape[1]
        elif vectors.size == 0:
            inferred = None
        else:
            raise DimensionMismatchError(
                f"lattice_vectors must have shape (N, D), got {vectors.shape}"
            )

        if dimension is None:
            if inferred is not None:
                dimension = inferred
            elif sites:
                dimension = sites[0].dimension
            else:
                raise LatticeError(
                    "Cannot infer the spatial dimension without lattice vectors or sites; "
                    "pass dimension explicitly"
                )

        if inferred is None:
            vectors = np.zeros((0, dimension))
        elif inferred != dimension:
            raise DimensionMismatchError(
                f"Lattice vectors have dimension {inferred}, expected {dimension}"
            )

        self._dimension = int(dimension)
        self._lattice_vectors = vectors
        self._sites: List[Site] = []
        self._bonds: List[Bond] = []

        self._check_sites(sites)
        self._sites = [site.copy() for site in sites]
        self._check_bonds(bonds, len(self._sites))
        self._bonds = bonds

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    def _check_sites(self, sites: Iterable[Site]) -> None:
        for site in sites:
            if site.dimension != self._dimension:
                raise DimensionMismatchError(
                    f"Site position {site.position.tolist()} has dimension "
                    f"{site.dimension}, expected {self._dimension}"
                )

    def _check_site_index(self, index: Any, num_sites: Optional[int] = None) -> None:
        num_sites = self.num_sites if num_sites is None else num_sites
        if not is_index(index) or not 0 <= index < num_sites:
            raise InvalidIndexError(
                f"Site index {index!r} out of range [0, {num_sites})"
            )

    def _check_wrap(self, wrap: Sequence[int]) -> None:
        if len(wrap) != self.bravais_dimension:
            raise DimensionMismatchError(
                f"Bond wrap {tuple(wrap)} has length {len(wrap)}, "
                f"expected Bravais dimension {self.bravais_dimension}"
            )

    def _check_bond(self, bond: Bond, num_sites: Optional[int] = None) -> None:
        if bond.bravais_dimension != self.bravais_dimension:
            raise DimensionMismatchError(
                f"Bond {bond.source} -> {bond.target} has wrap {bond.wrap} of length "
                f"{bond.bravais_dimension}, expected Bravais dimension {self.bravais_dimension}"
            )
        self._check_site_index(bond.source, num_sites)
        self._check_site_index(bond.target, num_sites)

    def _check_bonds(self, bonds: Iterable[Bond], num_sites: int) -> None:
        for bond in bonds:
            self._check_bond(bond, num_sites)

    @staticmethod
    def _index_set(indices: Union[int, Iterable[int]], size: int, kind: str) -> Set[int]:
        if is_index(indices):
            indices = [indices]
        result = set()
        for index in indices:
            if not is_index(index) or not 0 <= index < size:
                raise InvalidIndexError(
                    f"{kind.capitalize()} index {index!r} out of range [0, {size})"
                )
            result.add(int(index))
        return result

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------

    @property
    def lattice_vectors(self) -> np.ndarray:
        """Lattice vectors as rows, shape (N, D). Returns a copy."""
        return self._lattice_vectors.copy()

    @property
    def sites(self) -> tuple:
        return tuple(self._sites)

    @property
    def bonds(self) -> tuple:
        return tuple(self._bonds)

    @property
    def num_sites(self) -> int:
        return len(self._sites)

    @property
    def num_bonds(self) -> int:
        return len(self._bonds)

    @property
    def dimension(self) -> int:
        """Spatial dimension D."""
        return self._dimension

    @property
    def bravais_dimension(self) -> int:
        """Number N of lattice vectors (periodic directions)."""
        return self._lattice_vectors.shape[0]

    @property
    def is_periodic(self) -> bool:
        return self.bravais_dimension > 0

    def positions(self) -> np.ndarray:
        """
        Get all site positions.

        Returns
        -------
        positions : np.ndarray, shape (num_sites, D)
        """
        if not self._sites:
            return np.zeros((0, self._dimension))
        return np.array([site.position for site in self._sites])

    def site_labels(self) -> list:
        return [site.label for site in self._sites]

    def bond_labels(self) -> list:
        return [bond.label for bond in self._bonds]

    def lattice_vector(self, index: int) -> np.ndarray:
        """
        Get a single lattice vector.

        Parameters
        ----------
        index : int
            Zero-based index of the lattice vector (0 for a1)

        Returns
        -------
        vector : np.ndarray, shape (D,)

        Raises
        ------
        InvalidIndexError
            If index is not smaller than the Bravais dimension N
        """
        if not is_index(index) or not 0 <= index < self.bravais_dimension:
            raise InvalidIndexError(
                f"Lattice vector index {index!r} out of range for "
                f"Bravais dimension {self.bravais_dimension}"
            )
        return self._lattice_vectors[index].copy()

    @property
    def a1(self) -> np.ndarray:
        return self.lattice_vector(0)

    @property
    def a2(self) -> np.ndarray:
        return self.lattice_vector(1)

    @property
    def a3(self) -> np.ndarray:
        return self.lattice_vector(2)

    def fractional_to_real(self, fractional) -> np.ndarray:
        """
        Convert fractional coordinates to real-space coordinates.

        Parameters
        ----------
        fractional : array_like, shape (N,)
            Coordinates (n1, n2, ...) in units of lattice vectors

        Returns
        -------
        position : np.ndarray, shape (D,)
            Position in real space: n1*a1 + n2*a2 + ...
        """
        fractional = np.asarray(fractional, dtype=float)
        if fractional.shape != (self.bravais_dimension,):
            raise DimensionMismatchError(
                f"Fractional coordinates {fractional.tolist()} do not match "
                f"Bravais dimension {self.bravais_dimension}"
            )
        return fractional @ self._lattice_vectors

    def real_to_fractional(self, position) -> np.ndarray:
        """
        Convert real-space coordinates to fractional coordinates.

        Parameters
        ----------
        position : array_like, shape (D,)
            Position in real space

        Returns
        -------
        fractional : np.ndarray, shape (N,)
            Coordinates such that position = n1*a1 + n2*a2 + ...

        Notes
        -----
        For N < D (e.g. a chain embedded in the plane) this returns the
        least-squares solution, i.e. the coordinates of the projection onto
        the span of the lattice vectors.
        """
        if not self.is_periodic:
            raise LatticeError("Fully open lattices have no lattice vectors")

        position = np.asarray(position, dtype=float)
        if position.shape != (self._dimension,):
            raise DimensionMismatchError(
                f"Position {position.tolist()} does not match dimension {self._dimension}"
            )
        solution, *_ = np.linalg.lstsq(self._lattice_vectors.T, position, rcond=None)
        return solution

    # ------------------------------------------------------------------
    # Bond indexing
    # ------------------------------------------------------------------

    def organize_bonds_by_source(self) -> List[List[Bond]]:
        """
        Group bonds by the site they start at.

        Returns
        -------
        organized : List[List[Bond]]
            organized[i] holds every bond with source == i, in the relative
            order of the bond list. Recompute after any edit.
        """
        organized = [[] for _ in range(self.num_sites)]
        for bond in self._bonds:
            organized[bond.source].append(bond)
        return organized

    def organize_bonds_by_target(self) -> List[List[Bond]]:
        """Group bonds by the site they point to (see organize_bonds_by_source)."""
        organized = [[] for _ in range(self.num_sites)]
        for bond in self._bonds:
            organized[bond.target].append(bond)
        return organized

    def bond_vector(self, bond: Bond) -> np.ndarray:
        """
        Get the real-space displacement of a bond.

        Parameters
        ----------
        bond : Bond
            Any bond whose endpoints are valid here and whose wrap has
            length N. It does not need to belong to this object.

        Returns
        -------
        vector : np.ndarray, shape (D,)
            position(target) - position(source) + sum_i wrap_i * a_i

        Raises
        ------
        DimensionMismatchError
            If the wrap length differs from the Bravais dimension
        InvalidIndexError
            If source or target is not a valid site index
        """
        self._check_bond(bond)

        displacement = self._sites[bond.target].position - self._sites[bond.source].position
        if bond.wrap:
            displacement = displacement + np.asarray(bond.wrap, dtype=float) @ self._lattice_vectors
        return displacement

    def bond_vectors(self) -> np.ndarray:
        """Displacement vectors of all bonds, shape (num_bonds, D)."""
        if not self._bonds:
            return np.zeros((0, self._dimension))
        return np.array([self.bond_vector(bond) for bond in self._bonds])

    def coordination_numbers(self) -> np.ndarray:
        """Number of outgoing bonds of every site."""
        sources = np.fromiter((b.source for b in self._bonds), dtype=int, count=self.num_bonds)
        return np.bincount(sources, minlength=self.num_sites)

    # ------------------------------------------------------------------
    # Editing
    # ------------------------------------------------------------------

    def set_sites(self, sites: Sequence[Site]) -> None:
        """
        Replace the site list.

        The current bonds must remain valid for the new list, otherwise
        InvalidIndexError is raised and nothing changes.
        """
        sites = list(sites)
        self._check_sites(sites)
        self._check_bonds(self._bonds, len(sites))
        self._sites = [site.copy() for site in sites]

    def set_bonds(self, bonds: Sequence[Bond]) -> None:
        """Replace the bond list after validating every bond."""
        bonds = list(bonds)
        self._check_bonds(bonds, self.num_sites)
        self._bonds = bonds

    def add_site(self, position, label: Any = None) -> int:
        """
        Append a new site.

        Parameters
        ----------
        position : array_like, shape (D,)
            Real-space position
        label : Any, optional
            Site label

        Returns
        -------
        index : int
            Index of the new site (the previous number of sites)
        """
        site = Site(position, label)
        self._check_sites([site])

        self._sites.append(site)
        logger.debug(f"Added site {self.num_sites - 1} at {site.position.tolist()}")
        return self.num_sites - 1

    def add_bond(self,
                 source: int,
                 target: int,
                 label: Any = None,
                 wrap: Optional[Sequence[int]] = None,
                 add_return: bool = True) -> None:
        """
        Append a bond between two existing sites.

        Parameters
        ----------
        source, target : int
            Site indices of the endpoints
        label : Any, optional
            Bond label. Defaults to the default label for the type of the
            labels already present (see elements.default_label).
        wrap : Sequence[int], optional
            Unit-cell offset of the target copy (default: zero vector,
            i.e. a bond inside the same copy)
        add_return : bool, optional
            Also append the returning bond with swapped endpoints and
            negated wrap (default: True)
        """
        self._check_site_index(source)
        self._check_site_index(target)
        wrap = as_wrap(wrap, self.bravais_dimension)
        self._check_wrap(wrap)

        if label is None:
            label_type = python_label_type(self._bonds[0].label) if self._bonds else None
            label = default_label(label_type)

        bond = Bond(source, target, label, wrap)
        self._bonds.append(bond)
        if add_return:
            self._bonds.append(bond.reversed())

        logger.debug(f"Added bond {source} -> {target} with wrap {wrap}"
                     + (" and its returning bond" if add_return else ""))

    def remove_bonds(self, indices: Union[int, Iterable[int]]) -> None:
        """Remove bonds by their index in the bond list (all-or-nothing)."""
        to_remove = self._index_set(indices, self.num_bonds, 'bond')
        self._bonds = [b for i, b in enumerate(self._bonds) if i not in to_remove]
        logger.debug(f"Removed {len(to_remove)} bonds")

    def remove_sites(self, indices: Union[int, Iterable[int]]) -> None:
        """
        Remove sites together with every bond attached to them.

        Parameters
        ----------
        indices : int or Iterable[int]
            Site indices to remove

        Raises
        ------
        InvalidIndexError
            If any index is out of range. Nothing is removed in that case.

        Notes
        -----
        Surviving sites are renumbered to 0..count-1 in their original
        relative order and all surviving bonds are rewritten accordingly.
        The new site and bond lists are built completely before they replace
        the old ones.
        """
        to_remove = self._index_set(indices, self.num_sites, 'site')
        if not to_remove:
            return

        keep = np.ones(self.num_sites, dtype=bool)
        keep[sorted(to_remove)] = False
        new_index = np.cumsum(keep) - 1

        sites = [site for site, kept in zip(self._sites, keep) if kept]
        bonds = [
            bond.with_endpoints(new_index[bond.source], new_index[bond.target])
            for bond in self._bonds
            if keep[bond.source] and keep[bond.target]
        ]

        dropped = self.num_bonds - len(bonds)
        self._sites, self._bonds = sites, bonds
        logger.debug(f"Removed {len(to_remove)} sites and {dropped} dependent bonds")

    def remove_site(self, index: int) -> None:
        """Remove a single site (see remove_sites)."""
        self.remove_sites([index])

    def remove_disconnected_sites(self, origin: int = 0) -> int:
        """
        Remove every site that cannot be reached from origin.

        Parameters
        ----------
        origin : int, optional
            Site whose connected component is kept (default: 0)

        Returns
        -------
        removed : int
            Number of removed sites

        Notes
        -----
        Bonds count as undirected for reachability. The reachable set is
        computed once against the current indexing, then all other sites are
        removed in a single renumbering pass.
        """
        self._check_site_index(origin)

        reachable = reachable_sites(self.num_sites, self._bonds, origin)
        keep = np.zeros(self.num_sites, dtype=bool)
        keep[reachable] = True
        disconnected = np.flatnonzero(~keep)

        self.remove_sites(disconnected.tolist())
        logger.debug(f"Removed {len(disconnected)} sites disconnected from site {origin}")
        return len(disconnected)

    # ------------------------------------------------------------------
    # Copy / serialization / representation
    # ------------------------------------------------------------------

    @abstractmethod
    def copy(self) -> 'AbstractLattice':
        """
        Create an independent clone.

        Returns
        -------
        clone : AbstractLattice
            New object with its own site and bond lists. Editing the clone
            never affects the original and vice versa.
        """
        pass

    @abstractmethod
    def to_dict(self) -> Dict:
        """
        Serialize to dictionary.

        Notes
        -----
        Must include a 'type' field. Labels are stored as-is, so they must be
        JSON-serializable for the result to be written to a file.
        """
        pass

    def _core_dict(self) -> Dict:
        return {
            'dimension': self._dimension,
            'lattice_vectors': self._lattice_vectors.tolist(),
            'sites': [
                {'position': site.position.tolist(), 'label': site.label}
                for site in self._sites
            ],
            'bonds': [
                {'source': b.source, 'target': b.target, 'label': b.label, 'wrap': list(b.wrap)}
                for b in self._bonds
            ],
        }

    @staticmethod
    def _core_from_dict(data: Dict) -> Dict:
        sites = [Site(s['position'], s.get('label')) for s in data.get('sites', [])]
        bonds = [
            Bond(b['source'], b['target'], b.get('label'), tuple(b.get('wrap', ())))
            for b in data.get('bonds', [])
        ]
        return {
            'lattice_vectors': data.get('lattice_vectors', []),
            'sites': sites,
            'bonds': bonds,
            'dimension': data.get('dimension'),
        }

    def summary(self) -> str:
        """Detailed multi-line description."""
        periodic_bonds = sum(1 for b in self._bonds if b.is_periodic)
        site_label_counts: Dict[Any, int] = {}
        for label in self.site_labels():
            site_label_counts[label] = site_label_counts.get(label, 0) + 1
        bond_label_counts: Dict[Any, int] = {}
        for label in self.bond_labels():
            bond_label_counts[label] = bond_label_counts.get(label, 0) + 1

        lines = [
            "=" * 50,
            self.__class__.__name__,
            "=" * 50,
            f"Spatial dimension D: {self.dimension}",
            f"Bravais dimension N: {self.bravais_dimension}",
        ]
        for i, vector in enumerate(self._lattice_vectors):
            lines.append(f"  a{i + 1} = {vector.tolist()}")
        lines.extend([
            f"Sites: {self.num_sites}",
            f"Bonds: {self.num_bonds} ({periodic_bonds} periodic)",
            "",
            "Site labels:",
        ])
        for label, count in site_label_counts.items():
            lines.append(f"  {label!r}: {count}")
        lines.append("Bond labels:")
        for label, count in bond_label_counts.items():
            lines.append(f"  {label!r}: {count}")
        lines.append("=" * 50)

        return "\n".join(lines)

    def __str__(self) -> str:
        return self.summary()

    def __repr__(self) -> str:
        """String representation."""
        name = self.__class__.__name__
        return (f"{name}(D={self.dimension}, N={self.bravais_dimension}, "
                f"sites={self.num_sites}, bonds={self.num_bonds})")
