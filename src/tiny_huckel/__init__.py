"""
tiny-huckel: simple Hückel molecular orbitals for conjugated hydrocarbons.

Features:
- Immutable molecular graphs with fluent editing: MolecularGraph(2).add_bond(0, 1)
- Hückel matrix, dense symmetric eigensolver, ranked orbitals
- Occupation, degenerate levels, HOMO/LUMO, π energy, bond orders
- Text tables and ASCII energy-level diagrams

Quick Start:
    >>> from tiny_huckel import MolecularGraph, calculate
    >>> result = calculate(MolecularGraph(2).add_bond(0, 1))
    >>> [(o.name, o.energy, o.occupation.value) for o in result.orbitals]
    [('ψ1', -1.0, 'Occ'), ('ψ2', 1.0, 'Vac')]

Library molecules:
    >>> from tiny_huckel import MoleculeLibrary
    >>> calculate(MoleculeLibrary.get("benzene")).total_pi_energy
    -8.0
"""
__version__ = "1.0.0"

# Core components
from .core import (
    MolecularGraph,
    MolecularOrbital,
    Occupation,
    HuckelResult,
    HuckelCalculator,
    EigenResult,
    calculate,
    validate,
    find_structural_problem,
    build_huckel_matrix,
    decompose,
    assemble,
    group_degenerate,
    HuckelError,
    InvalidIndexError,
    StructuralError,
    EmptyStructureError,
    NoBondsError,
    DisconnectedError,
    DecompositionError,
)

# Molecules
from .molecules import MoleculeLibrary, polyene, annulene

# Visualization
from .visualization import (
    format_orbital_table,
    format_coefficients,
    draw_energy_levels,
    plot_energy_levels,
)

__all__ = [
    # Core
    'MolecularGraph',
    'MolecularOrbital',
    'Occupation',
    'HuckelResult',
    'HuckelCalculator',
    'EigenResult',
    'calculate',
    'validate',
    'find_structural_problem',
    'build_huckel_matrix',
    'decompose',
    'assemble',
    'group_degenerate',
    # Errors
    'HuckelError',
    'InvalidIndexError',
    'StructuralError',
    'EmptyStructureError',
    'NoBondsError',
    'DisconnectedError',
    'DecompositionError',
    # Molecules
    'MoleculeLibrary',
    'polyene',
    'annulene',
    # Visualization
    'format_orbital_table',
    'format_coefficients',
    'draw_energy_levels',
    'plot_energy_levels',
]
