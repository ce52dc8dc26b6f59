"""
Tests for the symmetric eigensolver adapter.

Tests cover:
- Pair count, unit norm and H·v = λv for random graphs
- Eigenvalue sum equals the trace
- Degenerate eigenvalues are all kept
- Input checking (shape, symmetry, finiteness, complex)
- Solver failures surface as DecompositionError
"""

import numpy as np
import pytest
import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from tiny_huckel.core import eigensolver
from tiny_huckel.core.eigensolver import EigenResult, decompose
from tiny_huckel.core.errors import DecompositionError, HuckelError
from tiny_huckel.core.graph import MolecularGraph
from tiny_huckel.core.hamiltonian import build_huckel_matrix


def random_connected_graph(n, rng, extra=0.3):
    """Random spanning tree plus extra random edges."""
    edges = [(i, int(rng.integers(0, i))) for i in range(1, n)]
    for i in range(n):
        for j in range(i + 1, n):
            if rng.random() < extra:
                edges.append((i, j))
    return MolecularGraph(n, edges)


class TestDecomposition:

    @pytest.mark.parametrize("n", [2, 3, 5, 8, 13])
    def test_pairs_are_eigenpairs(self, n):
        rng = np.random.default_rng(n)
        H = build_huckel_matrix(random_connected_graph(n, rng))
        result = decompose(H)
        assert result.size == n
        assert result.eigenvalues.shape == (n,)
        assert result.eigenvectors.shape == (n, n)
        for k in range(n):
            value, vector = result.pair(k)
            np.testing.assert_allclose(H @ vector, value * vector, atol=1e-10)
            assert np.isclose(np.linalg.norm(vector), 1.0)

    @pytest.mark.parametrize("seed", range(5))
    def test_eigenvalue_sum_equals_trace(self, seed):
        rng = np.random.default_rng(seed)
        H = build_huckel_matrix(random_connected_graph(9, rng))
        result = decompose(H)
        assert np.isclose(result.eigenvalues.sum(), np.trace(H), atol=1e-10)

    def test_eigenvectors_orthonormal(self):
        H = build_huckel_matrix(MolecularGraph(6, [(i, (i + 1) % 6) for i in range(6)]))
        V = decompose(H).eigenvectors
        np.testing.assert_allclose(V.T @ V, np.eye(6), atol=1e-10)

    def test_degenerate_values_kept(self):
        H = build_huckel_matrix(MolecularGraph(6, [(i, (i + 1) % 6) for i in range(6)]))
        values = np.sort(decompose(H).eigenvalues)
        np.testing.assert_allclose(values, [-2, -1, -1, 1, 1, 2], atol=1e-10)

    def test_zero_matrix(self):
        result = decompose(np.zeros((3, 3)))
        np.testing.assert_allclose(result.eigenvalues, 0.0)
        assert result.size == 3

    def test_empty_matrix(self):
        assert decompose(np.zeros((0, 0))).size == 0

    def test_result_is_read_only(self):
        result = decompose(np.array([[0.0, -1.0], [-1.0, 0.0]]))
        with pytest.raises(ValueError):
            result.eigenvalues[0] = 5.0
        with pytest.raises(ValueError):
            result.eigenvectors[0, 0] = 5.0

    def test_accepts_integer_input(self):
        result = decompose(np.array([[0, -1], [-1, 0]]))
        np.testing.assert_allclose(np.sort(result.eigenvalues), [-1, 1])


class TestInputChecks:

    def test_not_square(self):
        with pytest.raises(ValueError):
            decompose(np.zeros((2, 3)))

    def test_not_2d(self):
        with pytest.raises(ValueError):
            decompose(np.zeros(4))

    def test_not_symmetric(self):
        with pytest.raises(ValueError):
            decompose(np.array([[0.0, -1.0], [0.0, 0.0]]))

    def test_nan_input(self):
        with pytest.raises(ValueError):
            decompose(np.array([[0.0, np.nan], [np.nan, 0.0]]))

    def test_complex_input(self):
        with pytest.raises(ValueError):
            decompose(np.array([[0, 1j], [-1j, 0]]))


class TestSolverFailures:

    def test_linalg_error_becomes_decomposition_error(self, monkeypatch):
        def failing_eigh(H):
            raise np.linalg.LinAlgError("did not converge")
        monkeypatch.setattr(eigensolver.linalg, "eigh", failing_eigh)
        with pytest.raises(DecompositionError) as info:
            decompose(np.array([[0.0, -1.0], [-1.0, 0.0]]))
        assert info.value.kind == "DecompositionFailed"
        assert "did not converge" in info.value.detail
        assert isinstance(info.value.__cause__, np.linalg.LinAlgError)

    def test_nan_output_rejected(self, monkeypatch):
        def nan_eigh(H):
            n = H.shape[0]
            return np.full(n, np.nan), np.eye(n)
        monkeypatch.setattr(eigensolver.linalg, "eigh", nan_eigh)
        with pytest.raises(DecompositionError):
            decompose(np.array([[0.0, -1.0], [-1.0, 0.0]]))

    def test_missing_pairs_rejected(self, monkeypatch):
        def short_eigh(H):
            return np.array([-1.0]), np.array([[1.0], [0.0]])
        monkeypatch.setattr(eigensolver.linalg, "eigh", short_eigh)
        with pytest.raises(DecompositionError):
            decompose(np.array([[0.0, -1.0], [-1.0, 0.0]]))

    def test_message_is_generic(self):
        err = DecompositionError("LAPACK info=3")
        assert "simpler structure" in str(err)
        assert isinstance(err, HuckelError)


def test_eigen_result_pair():
    result = EigenResult(np.array([2.0, -2.0]), np.eye(2))
    value, vector = result.pair(1)
    assert value == -2.0
    np.testing.assert_array_equal(vector, [0.0, 1.0])
