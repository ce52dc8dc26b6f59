"""Example: Hückel orbitals of benzene and naphthalene."""
import sys
sys.path.insert(0, 'src')

from tiny_huckel import (
    MoleculeLibrary,
    calculate,
    draw_energy_levels,
    format_orbital_table,
)

for name in ("benzene", "naphthalene"):
    result = calculate(MoleculeLibrary.get(name))

    print("=" * 50)
    print(f"tiny-huckel: {name.capitalize()}")
    print("=" * 50)
    print(result.summary())
    print()
    print(format_orbital_table(result))
    print()
    print(draw_energy_levels(result))
    print()

    print("π bond orders:")
    for (i, j), order in result.bond_orders().items():
        print(f"  {i + 1:2d}-{j + 1:<2d} {order:.4f}")
    print()
