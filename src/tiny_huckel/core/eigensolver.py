"""
Dense symmetric eigensolver adapter.

Wraps ``scipy.linalg.eigh`` and turns every way it can go wrong into a
single DecompositionError, so callers never see a partial or NaN-filled
decomposition.
"""
import logging
import numpy as np
from dataclasses import dataclass
from scipy import linalg

from .errors import DecompositionError

logger = logging.getLogger(__name__)

# Largest |H - H.T| entry accepted as "symmetric".
SYMMETRY_TOLERANCE = 1e-10


@dataclass(frozen=True, eq=False)
class EigenResult:
    """
    Eigen-decomposition of a real symmetric matrix.

    Column ``k`` of ``eigenvectors`` belongs to ``eigenvalues[k]``. Pairs are
    kept in the solver's order; the sign of each column is arbitrary.
    """
    eigenvalues: np.ndarray   # shape (N,)
    eigenvectors: np.ndarray  # shape (N, N), unit-norm columns

    @property
    def size(self) -> int:
        return int(self.eigenvalues.shape[0])

    def pair(self, k: int):
        """Return ``(eigenvalue, eigenvector)`` for the k-th pair."""
        return float(self.eigenvalues[k]), self.eigenvectors[:, k]


def _check_input(H: np.ndarray) -> np.ndarray:
    H = np.asarray(H)
    if H.ndim != 2 or H.shape[0] != H.shape[1]:
        raise ValueError(f"Expected a square matrix, got shape {H.shape}")
    if np.iscomplexobj(H):
        raise ValueError("Expected a real matrix, got complex entries")
    H = H.astype(np.float64, copy=False)
    if not np.all(np.isfinite(H)):
        raise ValueError("Matrix contains NaN or infinite entries")
    if H.size and np.max(np.abs(H - H.T)) > SYMMETRY_TOLERANCE:
        raise ValueError("Matrix is not symmetric")
    return H


def decompose(H: np.ndarray) -> EigenResult:
    """
    Compute all eigenpairs of the real symmetric matrix ``H``.

    Every eigenvalue is returned, degenerate ones included.

    Parameters
    ----------
    H : np.ndarray
        Real symmetric matrix of shape (N, N).

    Returns
    -------
    EigenResult
        N eigenvalues and N unit-norm eigenvectors (as columns).

    Raises
    ------
    ValueError
        If ``H`` is not a finite real symmetric square matrix.
    DecompositionError
        If the solver fails or returns something other than N finite pairs.
    """
    H = _check_input(H)
    n = H.shape[0]
    if n == 0:
        return EigenResult(eigenvalues=np.zeros(0), eigenvectors=np.zeros((0, 0)))

    try:
        eigenvalues, eigenvectors = linalg.eigh(H)
    except (linalg.LinAlgError, ValueError) as exc:
        logger.error("Eigensolver failed on %dx%d matrix: %s", n, n, exc)
        raise DecompositionError(str(exc)) from exc

    if eigenvalues.shape != (n,) or eigenvectors.shape != (n, n):
        detail = (f"expected {n} eigenpairs, got values {eigenvalues.shape} "
                  f"and vectors {eigenvectors.shape}")
        logger.error("Eigensolver returned wrong shape: %s", detail)
        raise DecompositionError(detail)

    if not (np.all(np.isfinite(eigenvalues)) and np.all(np.isfinite(eigenvectors))):
        logger.error("Eigensolver returned non-finite values for %dx%d matrix", n, n)
        raise DecompositionError("non-finite eigenvalues or eigenvectors")

    eigenvalues = np.real(eigenvalues).astype(np.float64)
    eigenvectors = np.real(eigenvectors).astype(np.float64)
    eigenvalues.setflags(write=False)
    eigenvectors.setflags(write=False)

    logger.debug("Decomposed %dx%d matrix, eigenvalues %s", n, n, eigenvalues)
    return EigenResult(eigenvalues=eigenvalues, eigenvectors=eigenvectors)
