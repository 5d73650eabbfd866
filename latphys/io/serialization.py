"""
Saving and loading unitcells and lattices as JSON.
"""

import json
import logging
from pathlib import Path
from typing import Union

from ..core.lattice import Unitcell, Lattice

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def save_unitcell(path: PathLike, unitcell: Unitcell) -> Path:
    """
    Save a unitcell to a JSON file.

    Parameters
    ----------
    path : str or Path
        Output file
    unitcell : Unitcell
        Unitcell to save. Site and bond labels must be JSON-serializable.

    Returns
    -------
    path : Path
        The written file
    """
    path = Path(path)
    with open(path, 'w') as f:
        json.dump(unitcell.to_dict(), f, indent=4)

    logger.debug(f"Saved {unitcell!r} to {path}")
    return path


def load_unitcell(path: PathLike) -> Unitcell:
    """Load a unitcell saved with save_unitcell."""
    with open(path, 'r') as f:
        data = json.load(f)
    return Unitcell.from_dict(data)


def save_lattice(path: PathLike, lattice: Lattice) -> Path:
    """
    Save a lattice (including its generating unitcell) to a JSON file.

    Parameters
    ----------
    path : str or Path
        Output file
    lattice : Lattice
        Lattice to save. Site and bond labels must be JSON-serializable.

    Returns
    -------
    path : Path
        The written file
    """
    path = Path(path)
    with open(path, 'w') as f:
        json.dump(lattice.to_dict(), f, indent=4)

    logger.debug(f"Saved {lattice!r} to {path}")
    return path


def load_lattice(path: PathLike) -> Lattice:
    """Load a lattice saved with save_lattice."""
    with open(path, 'r') as f:
        data = json.load(f)
    return Lattice.from_dict(data)
