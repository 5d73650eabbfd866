"""
Lattice construction demo.

Builds finite lattices from preset unitcells with each construction method:
- Periodic and strip blocks
- Bond-distance clusters
- Shape-bounded flakes
- Editing and saving the result
"""

import logging
import tempfile
import numpy as np
import sys
from pathlib import Path

# Add latphys to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from latphys import (
    create_unitcell,
    get_lattice_periodic,
    get_lattice_semiperiodic,
    get_lattice_by_bond_distance,
    get_lattice_in_sphere,
    save_lattice,
    load_lattice,
    build_lattice
)


def example_periodic_block():
    """Example 1: Periodic honeycomb block and zigzag ribbon."""
    print("="*60)
    print("Example 1: Periodic honeycomb block")
    print("="*60)

    uc = create_unitcell('honeycomb')
    print(uc)

    torus = get_lattice_periodic(uc, (4, 4))
    print(f"\nTorus: {torus!r}")
    print(f"Coordination numbers: {sorted(set(torus.coordination_numbers().tolist()))}")

    ribbon = get_lattice_semiperiodic(uc, (6, 3), (True, False))
    print(f"Ribbon: {ribbon!r}")
    print(f"Retained lattice vector: {ribbon.a1}")
    print(f"Coordination numbers: {sorted(set(ribbon.coordination_numbers().tolist()))}")


def example_clusters():
    """Example 2: Clusters grown from a single site."""
    print("\n" + "="*60)
    print("Example 2: Bond-distance cluster and circular flake")
    print("="*60)

    square = create_unitcell('square')
    for distance in range(4):
        cluster = get_lattice_by_bond_distance(square, distance)
        print(f"  bond distance {distance}: {cluster.num_sites} sites, {cluster.num_bonds} bonds")

    flake = get_lattice_in_sphere(create_unitcell('kagome'), 3.0)
    radii = np.linalg.norm(flake.positions(), axis=1)
    print(f"\nKagome flake: {flake!r}")
    print(f"Largest radius: {radii.max():.3f}")


def example_editing():
    """Example 3: Cutting a lattice and keeping one piece."""
    print("\n" + "="*60)
    print("Example 3: Editing")
    print("="*60)

    block = get_lattice_periodic(create_unitcell('square'), (5, 5), periodic=False)
    print(f"Block: {block!r}")

    # Remove the middle column (t1 = 2)
    block.remove_sites([2 * 5 + t2 for t2 in range(5)])
    print(f"After removing a column: {block!r}")

    removed = block.remove_disconnected_sites(origin=0)
    print(f"Removed {removed} disconnected sites: {block!r}")


def example_serialization():
    """Example 4: Saving, loading and configuration files."""
    print("\n" + "="*60)
    print("Example 4: Serialization")
    print("="*60)

    config = {
        'unitcell': {'type': 'triangular', 'lattice_constant': 2.0},
        'construction': {'method': 'periodic', 'extent': [3, 3], 'periodic': [True, False]},
    }
    lattice = build_lattice(config)

    with tempfile.TemporaryDirectory() as directory:
        path = save_lattice(Path(directory) / "triangular_strip.json", lattice)
        restored = load_lattice(path)

    print(f"Saved and loaded: {restored!r}")
    print(f"Bonds identical: {restored.bonds == lattice.bonds}")


if __name__ == '__main__':
    logging.basicConfig(level=logging.INFO, format="%(name)s: %(message)s")

    example_periodic_block()
    example_clusters()
    example_editing()
    example_serialization()
