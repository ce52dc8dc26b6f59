"""Tests for the built-in molecule library."""

import pytest
import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from tiny_huckel.molecules import (
    MoleculeLibrary,
    annulene,
    fulvene,
    naphthalene,
    polyene,
)
from tiny_huckel.core.validation import find_structural_problem


class TestGenerators:

    def test_polyene(self):
        g = polyene(4)
        assert g.n_atoms == 4
        assert g.bonds == ((0, 1), (1, 2), (2, 3))

    def test_annulene(self):
        g = annulene(5)
        assert g.n_bonds == 5
        assert all(g.degree(i) == 2 for i in range(5))

    def test_too_small(self):
        with pytest.raises(ValueError):
            polyene(1)
        with pytest.raises(ValueError):
            annulene(2)

    def test_fulvene(self):
        g = fulvene()
        assert g.n_atoms == 6
        assert g.n_bonds == 6
        assert g.degree(0) == 3
        assert g.neighbors(5) == [0]

    def test_naphthalene(self):
        g = naphthalene()
        assert g.n_atoms == 10
        assert g.n_bonds == 11
        assert g.degree(4) == 3
        assert g.degree(9) == 3


class TestLibrary:

    def test_names(self):
        assert MoleculeLibrary.names() == [
            'ethylene', 'allyl', 'butadiene', 'cyclobutadiene',
            'cyclopentadienyl', 'benzene', 'hexatriene', 'fulvene',
            'naphthalene',
        ]

    def test_get_is_case_insensitive(self):
        assert MoleculeLibrary.get("  Benzene ") == annulene(6)

    def test_unknown(self):
        with pytest.raises(ValueError, match="Available"):
            MoleculeLibrary.get("unobtainium")

    def test_describe(self):
        assert "6-ring" in MoleculeLibrary.describe("benzene")

    @pytest.mark.parametrize("name", MoleculeLibrary.names())
    def test_every_molecule_is_valid(self, name):
        assert find_structural_problem(MoleculeLibrary.get(name)) is None

    def test_builders(self):
        builders = MoleculeLibrary.builders()
        assert builders['ethylene']() == polyene(2)
