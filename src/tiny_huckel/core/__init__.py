"""Core Hückel components: graph, matrix, eigensolver, orbitals."""
from .errors import (
    HuckelError,
    InvalidIndexError,
    StructuralError,
    EmptyStructureError,
    NoBondsError,
    DisconnectedError,
    DecompositionError,
)
from .graph import MolecularGraph
from .validation import validate, find_structural_problem
from .hamiltonian import build_huckel_matrix, ALPHA, BETA
from .eigensolver import EigenResult, decompose
from .orbitals import (
    MolecularOrbital,
    Occupation,
    ENERGY_DECIMALS,
    assemble,
    normalize_sign,
)
from .degeneracy import group_degenerate, degeneracies
from .calculation import HuckelResult, HuckelCalculator, calculate

__all__ = [
    'HuckelError',
    'InvalidIndexError',
    'StructuralError',
    'EmptyStructureError',
    'NoBondsError',
    'DisconnectedError',
    'DecompositionError',
    'MolecularGraph',
    'validate',
    'find_structural_problem',
    'build_huckel_matrix',
    'ALPHA',
    'BETA',
    'EigenResult',
    'decompose',
    'MolecularOrbital',
    'Occupation',
    'ENERGY_DECIMALS',
    'assemble',
    'normalize_sign',
    'group_degenerate',
    'degeneracies',
    'HuckelResult',
    'HuckelCalculator',
    'calculate',
]
