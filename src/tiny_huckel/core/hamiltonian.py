"""
Hückel Hamiltonian construction.

In the simple Hückel model every atom has the same Coulomb integral α and
every bond the same resonance integral β. Measuring energies from α in
units of |β| gives

    H[i, i] = 0
    H[i, j] = H[j, i] = -1   if atoms i and j are bonded
    H[i, j] = 0              otherwise

so bonding orbitals come out with negative eigenvalues.

Example:
    >>> from tiny_huckel.core import MolecularGraph, build_huckel_matrix
    >>> build_huckel_matrix(MolecularGraph(2, [(0, 1)]))
    array([[ 0., -1.],
           [-1.,  0.]])
"""
import logging
import numpy as np

from .graph import MolecularGraph

logger = logging.getLogger(__name__)

# Reference energy (diagonal) and resonance integral (off-diagonal).
ALPHA = 0.0
BETA = -1.0


def build_huckel_matrix(graph: MolecularGraph) -> np.ndarray:
    """
    Build the N×N Hückel matrix for ``graph``.

    Symmetric by construction; each bond writes both (i, j) and (j, i).

    Returns
    -------
    np.ndarray
        float64 array of shape (N, N). N = 0 gives a (0, 0) array.
    """
    n = graph.n_atoms
    H = np.full((n, n), 0.0, dtype=np.float64)
    np.fill_diagonal(H, ALPHA)
    for i, j in graph.bonds:
        H[i, j] = BETA
        H[j, i] = BETA
    logger.debug("Built %dx%d Hückel matrix with %d bonds", n, n, graph.n_bonds)
    return H
