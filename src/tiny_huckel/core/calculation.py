"""
End-to-end Hückel calculation.

Pipeline:
    MolecularGraph → validate → Hückel matrix → eigenpairs → orbitals → levels

Quick start:
    >>> from tiny_huckel.core import MolecularGraph, calculate
    >>> benzene = MolecularGraph(6, [(i, (i + 1) % 6) for i in range(6)])
    >>> result = calculate(benzene)
    >>> [o.energy for o in result.orbitals]
    [-2.0, -1.0, -1.0, 1.0, 1.0, 2.0]
    >>> result.total_pi_energy
    -8.0
"""
import logging
import numpy as np
from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Optional, Tuple

from .degeneracy import DegenerateGroups, group_degenerate
from .eigensolver import EigenResult, decompose
from .graph import Bond, MolecularGraph
from .hamiltonian import build_huckel_matrix
from .orbitals import MolecularOrbital, assemble, homo, lumo, round_value
from .validation import validate

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class HuckelResult:
    """
    Complete result of one calculation.

    Energies are in units of |β| measured from α; negative means bonding.
    Every field is a read-only view. A new calculation produces a new
    result rather than updating this one.
    """
    graph: MolecularGraph
    matrix: np.ndarray
    eigen: EigenResult
    orbitals: Tuple[MolecularOrbital, ...]
    degenerate_groups: DegenerateGroups

    @property
    def n_atoms(self) -> int:
        return self.graph.n_atoms

    @property
    def occupied(self) -> Tuple[MolecularOrbital, ...]:
        return tuple(o for o in self.orbitals if o.is_occupied)

    @property
    def n_pi_electrons(self) -> int:
        """Two electrons per occupied orbital."""
        return 2 * len(self.occupied)

    @property
    def homo(self) -> Optional[MolecularOrbital]:
        return homo(self.orbitals)

    @property
    def lumo(self) -> Optional[MolecularOrbital]:
        return lumo(self.orbitals)

    @property
    def homo_lumo_gap(self) -> Optional[float]:
        h, l = self.homo, self.lumo
        if h is None or l is None:
            return None
        return round_value(l.exact_energy - h.exact_energy)

    @property
    def total_pi_energy(self) -> float:
        """Sum of orbital energies over all π electrons."""
        return round_value(2 * sum(o.exact_energy for o in self.occupied))

    def _occupied_coefficients(self) -> np.ndarray:
        """(N, n_occupied) matrix of exact occupied coefficients."""
        occ = self.occupied
        if not occ:
            return np.zeros((self.n_atoms, 0))
        return np.column_stack([o.exact_coefficients for o in occ])

    def charge_densities(self) -> np.ndarray:
        """
        π-electron population on each atom, q_i = 2 Σ_occ c_i².

        Only basis-independent when no degenerate level is split between
        occupied and vacant orbitals.
        """
        c = self._occupied_coefficients()
        return 2.0 * np.sum(c ** 2, axis=1)

    def bond_orders(self) -> Dict[Bond, float]:
        """Coulson π bond order p_ij = 2 Σ_occ c_i c_j for each bond."""
        c = self._occupied_coefficients()
        return {
            (i, j): round_value(2.0 * float(np.dot(c[i], c[j])))
            for i, j in self.graph.bonds
        }

    def summary(self) -> str:
        lines = [f"Hückel result: {self.n_atoms} atoms, {self.graph.n_bonds} bonds"]
        lines.append(f"  π electrons: {self.n_pi_electrons}")
        lines.append(f"  Total π energy: {self.total_pi_energy:+.4f} |β|")
        if self.homo is not None:
            lines.append(f"  HOMO: {self.homo.name} at {self.homo.energy:+.4f}")
        if self.lumo is not None:
            lines.append(f"  LUMO: {self.lumo.name} at {self.lumo.energy:+.4f}")
        if self.homo_lumo_gap is not None:
            lines.append(f"  HOMO-LUMO gap: {self.homo_lumo_gap:.4f} |β|")
        levels = ", ".join(
            f"{energy:+.4f}" + (f" (x{len(group)})" if len(group) > 1 else "")
            for energy, group in self.degenerate_groups.items()
        )
        lines.append(f"  Levels: {levels}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        energies = ", ".join(f"{o.energy:.4f}" for o in self.orbitals)
        return f"HuckelResult({self.n_atoms} atoms, energies=[{energies}])"


def calculate(graph: MolecularGraph) -> HuckelResult:
    """
    Run a full Hückel calculation on ``graph``.

    Raises
    ------
    StructuralError
        If the graph is empty, has no bonds or is disconnected. Raised
        before any matrix work happens.
    DecompositionError
        If the eigensolver fails.
    """
    validate(graph)

    H = build_huckel_matrix(graph)
    H.setflags(write=False)
    eigen = decompose(H)
    orbitals = assemble(eigen)
    groups = group_degenerate(orbitals)

    logger.debug("Calculated %d orbitals in %d levels for %r",
                 len(orbitals), len(groups), graph)
    return HuckelResult(
        graph=graph,
        matrix=H,
        eigen=eigen,
        orbitals=orbitals,
        degenerate_groups=MappingProxyType(groups),
    )


class HuckelCalculator:
    """
    Keeps the last successful result across recalculations.

    A failed calculation raises and leaves ``last_result`` untouched, so a
    display can keep showing the last good orbitals.

    Example:
        >>> from tiny_huckel.molecules import ethylene
        >>> calc = HuckelCalculator()
        >>> _ = calc.calculate(ethylene())
        >>> calc.calculate(MolecularGraph(0))
        Traceback (most recent call last):
            ...
        tiny_huckel.core.errors.EmptyStructureError: Please add atoms to the structure.
        >>> calc.last_result.n_atoms
        2
    """

    def __init__(self):
        self._last_result: Optional[HuckelResult] = None

    @property
    def last_result(self) -> Optional[HuckelResult]:
        return self._last_result

    def calculate(self, graph: MolecularGraph) -> HuckelResult:
        result = calculate(graph)
        self._last_result = result
        return result

    def clear(self) -> None:
        self._last_result = None
