"""
Tests for structural validation and Hückel matrix construction.

Tests cover:
- EmptyStructure / NoBonds / Disconnected detection and ordering
- Error tags and user-facing messages
- Matrix values, symmetry, dtype and trace
"""

import numpy as np
import pytest
import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from tiny_huckel.core.graph import MolecularGraph
from tiny_huckel.core.hamiltonian import build_huckel_matrix, ALPHA, BETA
from tiny_huckel.core.validation import validate, find_structural_problem
from tiny_huckel.core.errors import (
    StructuralError,
    EmptyStructureError,
    NoBondsError,
    DisconnectedError,
)

TWO_TRIANGLES = MolecularGraph(6, [(0, 1), (1, 2), (2, 0), (3, 4), (4, 5), (5, 3)])


# ─── Validation ──────────────────────────────────────────────────────────

class TestValidation:

    def test_empty_structure(self):
        with pytest.raises(EmptyStructureError):
            validate(MolecularGraph(0))

    def test_no_bonds(self):
        with pytest.raises(NoBondsError):
            validate(MolecularGraph(3))

    def test_disconnected(self):
        with pytest.raises(DisconnectedError) as info:
            validate(TWO_TRIANGLES)
        assert info.value.n_fragments == 2
        assert "2 separate fragments" in str(info.value)

    def test_isolated_atom_is_disconnected(self):
        with pytest.raises(DisconnectedError):
            validate(MolecularGraph(3, [(0, 1)]))

    def test_valid_graph_passes(self):
        assert validate(MolecularGraph(2, [(0, 1)])) is None

    def test_all_are_structural_errors(self):
        for cls in (EmptyStructureError, NoBondsError, DisconnectedError):
            assert issubclass(cls, StructuralError)

    def test_find_structural_problem_returns_instance(self):
        problem = find_structural_problem(MolecularGraph(3))
        assert isinstance(problem, NoBondsError)
        assert problem.kind == "NoBonds"
        assert find_structural_problem(MolecularGraph(2, [(0, 1)])) is None

    def test_kinds(self):
        assert find_structural_problem(MolecularGraph(0)).kind == "EmptyStructure"
        assert find_structural_problem(TWO_TRIANGLES).kind == "Disconnected"

    def test_messages_are_readable(self):
        assert str(EmptyStructureError()) == "Please add atoms to the structure."
        assert str(NoBondsError()) == "Please add bonds between atoms."
        assert "disconnected" in str(DisconnectedError()).lower()


# ─── Matrix construction ─────────────────────────────────────────────────

class TestHuckelMatrix:

    def test_ethylene(self):
        H = build_huckel_matrix(MolecularGraph(2, [(0, 1)]))
        np.testing.assert_array_equal(H, [[0.0, -1.0], [-1.0, 0.0]])

    def test_constants(self):
        assert ALPHA == 0.0
        assert BETA == -1.0

    def test_dtype(self):
        H = build_huckel_matrix(MolecularGraph(3, [(0, 1), (1, 2)]))
        assert H.dtype == np.float64

    def test_symmetric(self):
        g = MolecularGraph(5, [(0, 1), (1, 2), (2, 3), (3, 4), (4, 0), (0, 2)])
        H = build_huckel_matrix(g)
        np.testing.assert_array_equal(H, H.T)

    def test_zero_diagonal_and_trace(self):
        H = build_huckel_matrix(TWO_TRIANGLES)
        np.testing.assert_array_equal(np.diag(H), np.zeros(6))
        assert np.trace(H) == 0.0

    def test_entries_match_bonds(self):
        g = MolecularGraph(4, [(0, 1), (1, 2), (2, 3), (3, 0)])
        H = build_huckel_matrix(g)
        assert np.count_nonzero(H) == 2 * g.n_bonds
        for i in range(4):
            for j in range(4):
                expected = -1.0 if g.has_bond(i, j) else 0.0
                assert H[i, j] == expected

    def test_equals_negative_adjacency(self):
        g = MolecularGraph(6, [(i, (i + 1) % 6) for i in range(6)])
        np.testing.assert_array_equal(build_huckel_matrix(g), -g.adjacency_matrix())

    def test_empty_graph(self):
        assert build_huckel_matrix(MolecularGraph(0)).shape == (0, 0)
