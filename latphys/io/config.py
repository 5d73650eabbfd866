"""
Configuration-driven lattice construction.

A configuration is a plain dictionary (or a JSON file holding one):

    {
        "unitcell": {"type": "honeycomb", "lattice_constant": 1.0},
        "construction": {"method": "periodic", "extent": [6, 4], "periodic": [true, false]}
    }

The "unitcell" entry names a preset from UNITCELL_REGISTRY together with
its keyword arguments, or is a full serialized unitcell ("type": "unitcell").
The "construction" entry names a method from CONSTRUCTION_METHODS; all
other keys are passed on as keyword arguments.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Union

from ..core.lattice import Unitcell, Lattice, create_unitcell
from ..core.construction import (
    get_lattice_periodic,
    get_lattice_open,
    get_lattice_by_bond_distance,
    get_lattice_in_sphere,
    get_lattice_in_box
)

logger = logging.getLogger(__name__)

CONSTRUCTION_METHODS = {
    'periodic': get_lattice_periodic,
    'open': get_lattice_open,
    'bond_distance': get_lattice_by_bond_distance,
    'sphere': get_lattice_in_sphere,
    'box': get_lattice_in_box,
}


def build_unitcell(config: Dict[str, Any]) -> Unitcell:
    """
    Create a unitcell from its configuration entry.

    Parameters
    ----------
    config : Dict
        Either {'type': <preset name>, **constructor kwargs} or a dictionary
        produced by Unitcell.to_dict()

    Returns
    -------
    unitcell : Unitcell

    Raises
    ------
    KeyError
        If 'type' is missing
    ValueError
        If the preset name is unknown
    """
    if 'type' not in config:
        raise KeyError("Unitcell config requires a 'type' entry")

    if config['type'] == 'unitcell':
        return Unitcell.from_dict(config)

    kwargs = {key: value for key, value in config.items() if key != 'type'}
    return create_unitcell(config['type'], **kwargs)


def build_lattice(config: Dict[str, Any]) -> Lattice:
    """
    Create a lattice from a configuration dictionary.

    Parameters
    ----------
    config : Dict
        Dictionary with 'unitcell' and 'construction' entries
        (see module docstring)

    Returns
    -------
    lattice : Lattice

    Examples
    --------
    >>> config = {
    ...     'unitcell': {'type': 'square'},
    ...     'construction': {'method': 'bond_distance', 'max_distance': 3}
    ... }
    >>> build_lattice(config).num_sites
    25
    """
    for key in ('unitcell', 'construction'):
        if key not in config:
            raise KeyError(f"Lattice config requires a '{key}' entry")

    unitcell = build_unitcell(config['unitcell'])

    construction = dict(config['construction'])
    method = construction.pop('method', None)
    if method not in CONSTRUCTION_METHODS:
        available = ', '.join(CONSTRUCTION_METHODS.keys())
        raise ValueError(f"Unknown construction method '{method}'. "
                         f"Available methods: {available}")

    logger.debug(f"Building lattice with method '{method}' and arguments {construction}")
    return CONSTRUCTION_METHODS[method](unitcell, **construction)


def load_config(path: Union[str, Path]) -> Dict[str, Any]:
    """Read a configuration dictionary from a JSON file."""
    with open(path, 'r') as f:
        return json.load(f)


def build_lattice_from_file(path: Union[str, Path]) -> Lattice:
    """Create a lattice from a JSON configuration file."""
    return build_lattice(load_config(path))
