"""
Molecule Library
==================
Carbon skeletons of common conjugated hydrocarbons, numbered so that atom
0 is always part of the π system.

Molecules:
    ethylene          C2H4   (2 atoms)
    allyl             C3H5   (3 atoms, open chain, odd)
    butadiene         C4H6   (4 atoms)
    cyclobutadiene    C4H4   (4 atoms, degenerate non-bonding pair)
    cyclopentadienyl  C5H5   (5-ring, odd)
    benzene           C6H6   (6-ring)
    hexatriene        C6H8   (6 atoms, open chain)
    fulvene           C6H6   (5-ring with exocyclic CH2)
    naphthalene       C10H8  (two fused 6-rings)

Usage:
    from tiny_huckel.molecules import MoleculeLibrary, annulene

    g = MoleculeLibrary.get("benzene")
    cot = annulene(8)
"""
from typing import Callable, Dict, List

from .core.graph import MolecularGraph


def polyene(n_atoms: int) -> MolecularGraph:
    """Open chain 0-1-2-...-(n-1)."""
    if n_atoms < 2:
        raise ValueError(f"A polyene needs at least 2 atoms, got {n_atoms}")
    return MolecularGraph(n_atoms, [(i, i + 1) for i in range(n_atoms - 1)])


def annulene(n_atoms: int) -> MolecularGraph:
    """Single ring 0-1-...-(n-1)-0."""
    if n_atoms < 3:
        raise ValueError(f"A ring needs at least 3 atoms, got {n_atoms}")
    return MolecularGraph(n_atoms, [(i, (i + 1) % n_atoms) for i in range(n_atoms)])


def ethylene() -> MolecularGraph:
    return polyene(2)


def allyl() -> MolecularGraph:
    return polyene(3)


def butadiene() -> MolecularGraph:
    return polyene(4)


def hexatriene() -> MolecularGraph:
    return polyene(6)


def cyclobutadiene() -> MolecularGraph:
    return annulene(4)


def cyclopentadienyl() -> MolecularGraph:
    return annulene(5)


def benzene() -> MolecularGraph:
    return annulene(6)


def fulvene() -> MolecularGraph:
    """Five-membered ring 0..4 with the exocyclic carbon 5 on atom 0."""
    return annulene(5).add_atom().add_bond(0, 5)


def naphthalene() -> MolecularGraph:
    """
    Ten-atom perimeter with a bridging bond 4-9.

    Rings are {0, 1, 2, 3, 4, 9} and {4, 5, 6, 7, 8, 9}.
    """
    return annulene(10).add_bond(4, 9)


class MoleculeLibrary:
    """
    Named structures for quick calculations.

    Example:
        MoleculeLibrary.names()
        g = MoleculeLibrary.get("naphthalene")
    """

    _registry: Dict[str, Dict] = {
        'ethylene':         {'builder': ethylene,
                             'description': 'Simplest π bond'},
        'allyl':            {'builder': allyl,
                             'description': 'Three-center open chain'},
        'butadiene':        {'builder': butadiene,
                             'description': 'Four-center open chain'},
        'cyclobutadiene':   {'builder': cyclobutadiene,
                             'description': 'Antiaromatic 4-ring'},
        'cyclopentadienyl': {'builder': cyclopentadienyl,
                             'description': 'Five-membered ring'},
        'benzene':          {'builder': benzene,
                             'description': 'Aromatic 6-ring'},
        'hexatriene':       {'builder': hexatriene,
                             'description': 'Six-center open chain'},
        'fulvene':          {'builder': fulvene,
                             'description': 'Cross-conjugated 5-ring'},
        'naphthalene':      {'builder': naphthalene,
                             'description': 'Two fused benzene rings'},
    }

    @classmethod
    def get(cls, name: str) -> MolecularGraph:
        key = name.strip().lower()
        if key not in cls._registry:
            available = ', '.join(cls._registry.keys())
            raise ValueError(f"Unknown molecule '{name}'. Available: {available}")
        return cls._registry[key]['builder']()

    @classmethod
    def names(cls) -> List[str]:
        return list(cls._registry.keys())

    @classmethod
    def describe(cls, name: str) -> str:
        cls.get(name)
        return cls._registry[name.strip().lower()]['description']

    @classmethod
    def builders(cls) -> Dict[str, Callable[[], MolecularGraph]]:
        return {name: info['builder'] for name, info in cls._registry.items()}
