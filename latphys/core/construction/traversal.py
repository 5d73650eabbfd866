"""
Breadth-first construction over the bond graph of a unitcell.

Nodes of the bond graph are pairs (translation, unitcell site index); the
unitcell bonds applied at every translation are its edges. Lattices built
here are always fully open: every bond between two admitted nodes is kept
with an empty wrap and no lattice vectors are retained.
"""

import logging
import numpy as np
from collections import deque
from typing import Callable, Dict, List, Tuple

from ...exceptions import InvalidOriginError
from ..elements import Site, Bond, is_index
from ..lattice import Unitcell, Lattice

logger = logging.getLogger(__name__)

Node = Tuple[Tuple[int, ...], int]


def check_origin(unitcell: Unitcell, origin: int) -> None:
    if not is_index(origin) or not 0 <= origin < unitcell.num_sites:
        raise InvalidOriginError(
            f"Origin site {origin!r} out of range for a unitcell with "
            f"{unitcell.num_sites} sites"
        )


def traverse_bond_graph(unitcell: Unitcell,
                        origin: int,
                        admit: Callable[[np.ndarray, int], bool]) -> Lattice:
    """
    Build a lattice by breadth-first traversal from an origin site.

    Parameters
    ----------
    unitcell : Unitcell
        Periodic generator
    origin : int
        Unitcell site the traversal starts at (in the cell at translation 0)
    admit : Callable[[np.ndarray, int], bool]
        Called as admit(position, bond_distance) for every newly discovered
        node; only admitted nodes become sites and are expanded further.

    Returns
    -------
    lattice : Lattice
        Fully open lattice. The origin is site 0 if it is admitted; if it is
        not, the lattice is empty.

    Notes
    -----
    A node is tested when first discovered, which in breadth-first order is
    at its smallest bond distance. A rejected node is never tested again.
    The admit callback must eventually reject, otherwise the traversal of an
    infinite unitcell does not terminate.
    """
    check_origin(unitcell, origin)

    outgoing = unitcell.organize_bonds_by_source()
    vectors = unitcell.lattice_vectors
    basis = unitcell.positions()

    def position_of(node: Node) -> np.ndarray:
        translation, site = node
        return basis[site] + np.asarray(translation, dtype=float) @ vectors

    start: Node = ((0,) * unitcell.bravais_dimension, origin)
    index: Dict[Node, int] = {}
    order: List[Node] = []
    positions: List[np.ndarray] = []

    if admit(position_of(start), 0):
        index[start] = 0
        order.append(start)
        positions.append(position_of(start))

    rejected = set()
    queue = deque((node, 0) for node in order)
    while queue:
        (translation, site), distance = queue.popleft()
        for bond in outgoing[site]:
            neighbor = (tuple(t + w for t, w in zip(translation, bond.wrap)), bond.target)
            if neighbor in index or neighbor in rejected:
                continue

            position = position_of(neighbor)
            if not admit(position, distance + 1):
                rejected.add(neighbor)
                continue

            index[neighbor] = len(order)
            order.append(neighbor)
            positions.append(position)
            queue.append((neighbor, distance + 1))

    labels = unitcell.site_labels()
    sites = [Site(position, labels[node[1]]) for node, position in zip(order, positions)]

    bonds = []
    for source_index, (translation, site) in enumerate(order):
        for bond in outgoing[site]:
            neighbor = (tuple(t + w for t, w in zip(translation, bond.wrap)), bond.target)
            target_index = index.get(neighbor)
            if target_index is not None:
                bonds.append(Bond(source_index, target_index, bond.label, ()))

    return Lattice((), sites, bonds, unitcell=unitcell, dimension=unitcell.dimension)


def get_lattice_by_bond_distance(unitcell: Unitcell,
                                 max_distance: int,
                                 origin: int = 0) -> Lattice:
    """
    Build the lattice of all sites within a bond distance of an origin.

    Parameters
    ----------
    unitcell : Unitcell
        Periodic generator
    max_distance : int
        Maximum number of bond hops from the origin (0 gives only the origin)
    origin : int, optional
        Unitcell site to start from (default: 0)

    Returns
    -------
    lattice : Lattice
        Fully open lattice. Site order follows the traversal and should not
        be relied on beyond the origin being site 0.

    Raises
    ------
    InvalidOriginError
        If origin is not a site of the unitcell
    ValueError
        If max_distance is negative

    Examples
    --------
    >>> lattice = get_lattice_by_bond_distance(create_unitcell('square'), 2)
    >>> lattice.num_sites
    13
    """
    if not is_index(max_distance) or max_distance < 0:
        raise ValueError(f"max_distance must be a non-negative integer, got {max_distance!r}")

    lattice = traverse_bond_graph(unitcell, origin, lambda position, distance: distance <= max_distance)
    logger.info(f"Built lattice within bond distance {max_distance} of site {origin}: "
                f"{lattice.num_sites} sites, {lattice.num_bonds} bonds")
    return lattice
