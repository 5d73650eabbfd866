"""
Shape-bounded construction.

Sites are admitted by a membership test on their real-space position
instead of a bond-distance bound. Construction is connectivity-gated: a
region inside the shape that cannot be reached from the origin through
admitted sites is never included.
"""

import logging
import numpy as np
from abc import ABC, abstractmethod
from typing import Callable, Optional, Sequence, Union

from ...exceptions import DimensionMismatchError
from ..lattice import Unitcell, Lattice
from .traversal import check_origin, traverse_bond_graph

logger = logging.getLogger(__name__)


class AbstractShape(ABC):
    """
    Abstract base class for real-space membership tests.

    Subclasses implement contains(); shapes are also callable, so any shape
    can be used where a plain predicate is expected.
    """

    @property
    @abstractmethod
    def dimension(self) -> Optional[int]:
        """
        Spatial dimension the shape lives in.

        Returns None if the shape accepts positions of any dimension.
        """
        pass

    @abstractmethod
    def contains(self, position: np.ndarray) -> bool:
        """
        Check whether a position lies inside the shape.

        Parameters
        ----------
        position : np.ndarray, shape (D,)
            Real-space position

        Returns
        -------
        inside : bool
        """
        pass

    def __call__(self, position: np.ndarray) -> bool:
        return self.contains(position)


class Sphere(AbstractShape):
    """
    Open ball ||position - center|| < radius.

    Parameters
    ----------
    radius : float
        Radius, must be positive
    center : array_like, shape (D,)
        Center of the sphere
    """

    def __init__(self, radius: float, center):
        if radius <= 0:
            raise ValueError("Radius must be positive")

        self.radius = float(radius)
        self.center = np.array(center, dtype=float).reshape(-1)

    @property
    def dimension(self) -> int:
        return self.center.shape[0]

    def contains(self, position: np.ndarray) -> bool:
        return bool(np.linalg.norm(np.asarray(position) - self.center) < self.radius)

    def __repr__(self) -> str:
        return f"Sphere(radius={self.radius}, center={self.center.tolist()})"


class Box(AbstractShape):
    """
    Axis-aligned open box |position_k - center_k| < dimensions_k / 2.

    Parameters
    ----------
    dimensions : array_like, shape (D,)
        Edge lengths along every axis, all positive
    center : array_like, shape (D,)
        Center of the box
    """

    def __init__(self, dimensions, center):
        dimensions = np.array(dimensions, dtype=float).reshape(-1)
        center = np.array(center, dtype=float).reshape(-1)

        if np.any(dimensions <= 0):
            raise ValueError("Box dimensions must be positive")
        if dimensions.shape != center.shape:
            raise DimensionMismatchError(
                f"Box dimensions {dimensions.tolist()} and center {center.tolist()} "
                f"have different lengths"
            )

        self.dimensions = dimensions
        self.center = center

    @property
    def dimension(self) -> int:
        return self.center.shape[0]

    def contains(self, position: np.ndarray) -> bool:
        return bool(np.all(np.abs(np.asarray(position) - self.center) < self.dimensions / 2.0))

    def __repr__(self) -> str:
        return f"Box(dimensions={self.dimensions.tolist()}, center={self.center.tolist()})"


class PredicateShape(AbstractShape):
    """Shape defined by an arbitrary boolean function of the position."""

    def __init__(self, predicate: Callable[[np.ndarray], bool], dimension: Optional[int] = None):
        self.predicate = predicate
        self._dimension = dimension

    @property
    def dimension(self) -> Optional[int]:
        return self._dimension

    def contains(self, position: np.ndarray) -> bool:
        return bool(self.predicate(position))


def get_lattice_by_shape(unitcell: Unitcell,
                         shape: Union[AbstractShape, Callable[[np.ndarray], bool]],
                         origin: int = 0) -> Lattice:
    """
    Build the lattice of sites inside a shape, connected to an origin.

    Parameters
    ----------
    unitcell : Unitcell
        Periodic generator
    shape : AbstractShape or Callable[[np.ndarray], bool]
        Membership test on real-space positions
    origin : int, optional
        Unitcell site to start from (default: 0)

    Returns
    -------
    lattice : Lattice
        Fully open lattice of every site reachable from the origin through
        sites inside the shape. Empty if the origin itself is outside.

    Raises
    ------
    InvalidOriginError
        If origin is not a site of the unitcell
    DimensionMismatchError
        If the shape's dimension differs from the unitcell's

    Notes
    -----
    The shape must be bounded, otherwise the traversal does not terminate.
    """
    if not isinstance(shape, AbstractShape):
        if not callable(shape):
            raise TypeError("shape must be an AbstractShape or a callable")
        shape = PredicateShape(shape)

    check_origin(unitcell, origin)
    if shape.dimension is not None and shape.dimension != unitcell.dimension:
        raise DimensionMismatchError(
            f"Shape has dimension {shape.dimension}, unitcell has dimension {unitcell.dimension}"
        )

    lattice = traverse_bond_graph(unitcell, origin, lambda position, distance: shape.contains(position))
    if lattice.num_sites == 0:
        logger.warning(f"Origin site {origin} lies outside {shape!r}; the lattice is empty")
    else:
        logger.info(f"Built lattice inside {shape!r}: "
                    f"{lattice.num_sites} sites, {lattice.num_bonds} bonds")
    return lattice


def _origin_position(unitcell: Unitcell, origin: int) -> np.ndarray:
    check_origin(unitcell, origin)
    return unitcell.sites[origin].position.copy()


def get_lattice_in_sphere(unitcell: Unitcell,
                          radius: float,
                          center: Optional[Sequence[float]] = None,
                          origin: int = 0) -> Lattice:
    """
    Build the lattice of sites inside a sphere.

    Parameters
    ----------
    unitcell : Unitcell
        Periodic generator
    radius : float
        Sphere radius
    center : Sequence[float], optional
        Sphere center (default: position of the origin site)
    origin : int, optional
        Unitcell site to start from (default: 0)

    Examples
    --------
    >>> flake = get_lattice_in_sphere(create_unitcell('honeycomb'), 5.0)
    """
    if center is None:
        center = _origin_position(unitcell, origin)
    return get_lattice_by_shape(unitcell, Sphere(radius, center), origin)


def get_lattice_in_box(unitcell: Unitcell,
                       dimensions: Sequence[float],
                       center: Optional[Sequence[float]] = None,
                       origin: int = 0) -> Lattice:
    """
    Build the lattice of sites inside an axis-aligned box.

    Parameters
    ----------
    unitcell : Unitcell
        Periodic generator
    dimensions : Sequence[float]
        Edge lengths of the box along every axis
    center : Sequence[float], optional
        Box center (default: position of the origin site)
    origin : int, optional
        Unitcell site to start from (default: 0)
    """
    if center is None:
        center = _origin_position(unitcell, origin)
    return get_lattice_by_shape(unitcell, Box(dimensions, center), origin)
