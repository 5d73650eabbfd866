"""
Bond-graph connectivity helpers.

Sites are graph nodes and bonds are edges. Reachability always treats a
directed bond as adjacency in both directions.
"""

import numpy as np
from typing import Iterable, Tuple
from scipy.sparse import csr_matrix
from scipy.sparse.csgraph import connected_components

from ..exceptions import InvalidIndexError
from .elements import Bond, is_index


def adjacency_matrix(num_sites: int,
                     bonds: Iterable[Bond],
                     directed: bool = False) -> csr_matrix:
    """
    Build the sparse adjacency matrix of the bond graph.

    Parameters
    ----------
    num_sites : int
        Number of sites (matrix is num_sites x num_sites)
    bonds : Iterable[Bond]
        Bonds whose endpoints are valid site indices
    directed : bool, optional
        If False (default), every bond i -> j also marks j -> i

    Returns
    -------
    matrix : csr_matrix, shape (num_sites, num_sites)
        Entry (i, j) counts the bonds from i to j
    """
    bonds = list(bonds)
    rows = np.fromiter((b.source for b in bonds), dtype=int, count=len(bonds))
    cols = np.fromiter((b.target for b in bonds), dtype=int, count=len(bonds))

    if not directed:
        rows, cols = np.concatenate([rows, cols]), np.concatenate([cols, rows])

    data = np.ones(len(rows), dtype=int)
    return csr_matrix((data, (rows, cols)), shape=(num_sites, num_sites))


def connected_component_labels(num_sites: int,
                               bonds: Iterable[Bond]) -> Tuple[int, np.ndarray]:
    """
    Label the weakly connected components of the bond graph.

    Returns
    -------
    n_components : int
        Number of components (isolated sites count as one each)
    labels : np.ndarray, shape (num_sites,)
        Component label of every site
    """
    graph = adjacency_matrix(num_sites, bonds, directed=True)
    return connected_components(graph, directed=True, connection='weak')


def reachable_sites(num_sites: int, bonds: Iterable[Bond], origin: int) -> np.ndarray:
    """
    Find every site reachable from origin through any sequence of bonds.

    Parameters
    ----------
    num_sites : int
        Number of sites in the graph
    bonds : Iterable[Bond]
        Bonds of the graph
    origin : int
        Index of the site to start from

    Returns
    -------
    indices : np.ndarray
        Sorted indices of the reachable sites, origin included

    Raises
    ------
    InvalidIndexError
        If origin is not a valid site index
    """
    if not is_index(origin) or not 0 <= origin < num_sites:
        raise InvalidIndexError(
            f"Origin site {origin!r} out of range for {num_sites} sites"
        )

    _, labels = connected_component_labels(num_sites, bonds)
    return np.flatnonzero(labels == labels[origin])
