"""
Grouping of orbitals that share an energy level.

Orbitals are grouped on their rounded energy, the same rounding the
assembler uses for display, so floating-point noise never splits a true
degeneracy and two distinct levels never merge unless they print the same.
"""
from typing import Dict, Mapping, Sequence, Tuple

from .orbitals import MolecularOrbital, round_value

DegenerateGroups = Mapping[float, Tuple[MolecularOrbital, ...]]


def group_degenerate(
        orbitals: Sequence[MolecularOrbital]
) -> Dict[float, Tuple[MolecularOrbital, ...]]:
    """
    Map each energy level to the orbitals on it.

    Keys appear in order of first occurrence and orbitals keep their input
    order within a group, so rank-ordered input yields energy-ordered
    levels.

    Example:
        >>> from tiny_huckel.core import calculate
        >>> from tiny_huckel.molecules import benzene
        >>> groups = group_degenerate(calculate(benzene()).orbitals)
        >>> {e: [o.name for o in g] for e, g in groups.items()}
        {-2.0: ['ψ1'], -1.0: ['ψ2', 'ψ3'], 1.0: ['ψ4', 'ψ5'], 2.0: ['ψ6']}
    """
    groups: Dict[float, list] = {}
    for orbital in orbitals:
        key = round_value(orbital.energy)
        groups.setdefault(key, []).append(orbital)
    return {energy: tuple(members) for energy, members in groups.items()}


def degeneracies(groups: DegenerateGroups) -> Dict[float, int]:
    """Number of orbitals at each level."""
    return {energy: len(members) for energy, members in groups.items()}
