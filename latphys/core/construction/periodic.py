"""
Periodic block construction.

A block of extent (L1, ..., LN) contains every unitcell site copied to all
translations t with 0 <= t_i < L_i. Bonds leaving the block are either
wrapped around (periodic direction) or dropped (open direction).
"""

import itertools
import logging
import numpy as np
from typing import Sequence, Tuple, Union

from ...exceptions import DimensionMismatchError, InvalidExtentError
from ..elements import Site, Bond, is_index
from ..lattice import Unitcell, Lattice

logger = logging.getLogger(__name__)


def _normalize_extent(extent: Union[int, Sequence[int]], bravais_dimension: int) -> Tuple[int, ...]:
    if is_index(extent):
        extent = (extent,) * bravais_dimension
    elif np.ndim(extent) == 0:
        raise InvalidExtentError(f"Extent must be a positive integer or a sequence of them, got {extent!r}")
    extent = tuple(extent)

    if len(extent) != bravais_dimension:
        raise DimensionMismatchError(
            f"Extent {extent} has length {len(extent)}, "
            f"expected Bravais dimension {bravais_dimension}"
        )
    for value in extent:
        if not is_index(value) or value < 1:
            raise InvalidExtentError(f"Extent must be a positive integer in every direction, got {extent}")
    return tuple(int(value) for value in extent)


def _normalize_periodic(periodic: Union[bool, Sequence[bool]], bravais_dimension: int) -> np.ndarray:
    if isinstance(periodic, (bool, np.bool_)):
        return np.full(bravais_dimension, bool(periodic))

    periodic = np.array(periodic, dtype=bool).reshape(-1)
    if periodic.shape[0] != bravais_dimension:
        raise DimensionMismatchError(
            f"Boundary conditions {periodic.tolist()} have length {periodic.shape[0]}, "
            f"expected Bravais dimension {bravais_dimension}"
        )
    return periodic


def get_lattice_periodic(unitcell: Unitcell,
                         extent: Union[int, Sequence[int]],
                         periodic: Union[bool, Sequence[bool]] = True) -> Lattice:
    """
    Build a finite block of unit cells.

    Parameters
    ----------
    unitcell : Unitcell
        Periodic generator
    extent : int or Sequence[int]
        Number of cells along each lattice vector. A single integer is used
        for every direction.
    periodic : bool or Sequence[bool], optional
        Boundary condition per direction: True wraps bonds around the
        block, False drops bonds that leave it (default: True everywhere)

    Returns
    -------
    lattice : Lattice
        Sites ordered row-major by (translation, unitcell site index).
        Lattice vectors are extent_i * a_i for the periodic directions only,
        and bond wraps have one component per periodic direction.

    Raises
    ------
    DimensionMismatchError
        If extent or periodic does not have one entry per lattice vector
    InvalidExtentError
        If any extent is smaller than 1

    Notes
    -----
    A unitcell bond (i, j, wrap) applied at translation t reaches t' = t + wrap.
    Inside the block it becomes a bond with zero wrap. Outside along periodic
    directions only, it points to the copy at t' mod extent with wrap
    t' // extent. An extent of 1 in a periodic direction therefore gives
    bonds from a site to itself with nonzero wrap; these are kept.

    Examples
    --------
    >>> uc = create_unitcell('square')
    >>> lattice = get_lattice_periodic(uc, (4, 3), periodic=(True, False))
    >>> lattice.num_sites, lattice.bravais_dimension
    (12, 1)
    """
    if not isinstance(unitcell, Unitcell):
        raise TypeError("unitcell must be a Unitcell instance")

    n_dim = unitcell.bravais_dimension
    extent = _normalize_extent(extent, n_dim)
    periodic = _normalize_periodic(periodic, n_dim)
    extent_array = np.array(extent, dtype=int)
    periodic_axes = np.flatnonzero(periodic)

    vectors = unitcell.lattice_vectors
    basis = unitcell.positions()
    n_basis = unitcell.num_sites

    # Row-major grid of all integer translations
    translations = np.array(list(itertools.product(*(range(e) for e in extent))), dtype=int)

    # (num_cells, 1, D) + (1, num_basis, D) -> (num_cells * num_basis, D)
    cell_offsets = translations @ vectors
    positions = (cell_offsets[:, None, :] + basis[None, :, :]).reshape(-1, unitcell.dimension)
    labels = unitcell.site_labels() * len(translations)
    sites = [Site(position, label) for position, label in zip(positions, labels)]

    bonds = []
    dropped = 0
    for cell_index, translation in enumerate(translations):
        for bond in unitcell.bonds:
            shifted = translation + np.asarray(bond.wrap, dtype=int)
            quotient = np.floor_divide(shifted, extent_array)

            if np.any((quotient != 0) & ~periodic):
                dropped += 1
                continue

            resolved = shifted - quotient * extent_array
            target_cell = np.ravel_multi_index(tuple(resolved), extent)
            bonds.append(Bond(
                cell_index * n_basis + bond.source,
                target_cell * n_basis + bond.target,
                bond.label,
                tuple(quotient[periodic_axes])
            ))

    retained_vectors = vectors[periodic_axes] * extent_array[periodic_axes, None]

    lattice = Lattice(retained_vectors, sites, bonds, unitcell=unitcell, dimension=unitcell.dimension)
    logger.info(f"Built lattice of extent {extent} (periodic={periodic.tolist()}): "
                f"{lattice.num_sites} sites, {lattice.num_bonds} bonds, {dropped} boundary bonds dropped")
    return lattice


def get_lattice_open(unitcell: Unitcell, extent: Union[int, Sequence[int]]) -> Lattice:
    """
    Build a finite block with open boundaries in every direction.

    Every unitcell bond that leaves the block is dropped and the result has
    no lattice vectors (see get_lattice_periodic).
    """
    return get_lattice_periodic(unitcell, extent, periodic=False)


def get_lattice_semiperiodic(unitcell: Unitcell,
                             extent: Union[int, Sequence[int]],
                             periodic: Sequence[bool]) -> Lattice:
    """
    Build a strip geometry: periodic in some directions, open in others.

    Parameters
    ----------
    unitcell : Unitcell
        Periodic generator
    extent : int or Sequence[int]
        Number of cells along each lattice vector
    periodic : Sequence[bool]
        One boundary condition per lattice vector

    Examples
    --------
    Zigzag honeycomb ribbon, periodic along a1 and open along a2:

    >>> ribbon = get_lattice_semiperiodic(create_unitcell('honeycomb'), (10, 4), (True, False))
    """
    if isinstance(periodic, (bool, np.bool_)):
        raise TypeError("periodic must give one boundary condition per direction")
    return get_lattice_periodic(unitcell, extent, periodic=periodic)
