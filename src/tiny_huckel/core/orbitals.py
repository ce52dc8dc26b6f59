"""
Molecular orbitals assembled from a raw eigen-decomposition.

The assembler sorts eigenpairs by energy, names them ψ1..ψN in that order,
rounds energies and coefficients for display, and fills the lowest
floor(N/2) orbitals with an electron pair each (one π electron per atom).

Example:
    >>> from tiny_huckel.core import build_huckel_matrix, decompose
    >>> from tiny_huckel.molecules import ethylene
    >>> orbitals = assemble(decompose(build_huckel_matrix(ethylene())))
    >>> [(o.name, o.energy, o.occupation.value) for o in orbitals]
    [('ψ1', -1.0, 'Occ'), ('ψ2', 1.0, 'Vac')]
"""
import enum
import numpy as np
from dataclasses import dataclass, field
from typing import Optional, Sequence, Tuple

from .eigensolver import EigenResult

# Decimal places kept for displayed energies and coefficients. Degeneracy
# grouping keys on the same rounding.
ENERGY_DECIMALS = 4

# Coefficients this close to the largest magnitude count as tied for
# the sign convention.
_SIGN_TIE_TOLERANCE = 1e-9


def round_value(x: float, decimals: int = ENERGY_DECIMALS) -> float:
    """Round to ``decimals`` places, never returning -0.0."""
    return round(float(x), decimals) + 0.0


def normalize_sign(vector: np.ndarray) -> np.ndarray:
    """
    Pick a fixed representative of ``{v, -v}``.

    The first coefficient whose magnitude ties for the largest is made
    positive.
    """
    v = np.asarray(vector, dtype=np.float64)
    if v.size == 0:
        return v.copy()
    mags = np.abs(v)
    lead = int(np.argmax(mags >= mags.max() - _SIGN_TIE_TOLERANCE))
    return -v if v[lead] < 0 else v.copy()


class Occupation(enum.Enum):
    OCCUPIED = "Occ"
    VACANT = "Vac"


@dataclass(frozen=True)
class MolecularOrbital:
    """
    One energy-ranked molecular orbital.

    Attributes
    ----------
    rank : int
        1-based position in ascending energy order.
    name : str
        ``"ψ{rank}"``.
    energy : float
        Eigenvalue rounded to ENERGY_DECIMALS, in units of |β| from α.
    coefficients : tuple of float
        Per-atom coefficients, rounded, sign-normalized.
    occupation : Occupation
    exact_energy : float
        Full-precision eigenvalue.
    exact_coefficients : np.ndarray
        Full-precision, sign-normalized, read-only eigenvector.
    """
    rank: int
    name: str
    energy: float
    coefficients: Tuple[float, ...]
    occupation: Occupation
    exact_energy: float = field(repr=False)
    exact_coefficients: np.ndarray = field(repr=False, compare=False)

    @property
    def is_occupied(self) -> bool:
        return self.occupation is Occupation.OCCUPIED

    @property
    def character(self) -> str:
        """``"bonding"``, ``"nonbonding"`` or ``"antibonding"``."""
        if self.energy < 0:
            return "bonding"
        if self.energy > 0:
            return "antibonding"
        return "nonbonding"

    @property
    def beta_coefficient(self) -> float:
        """x in E = α + xβ. Positive for bonding orbitals since β < 0."""
        return round_value(-self.energy)

    @property
    def n_atoms(self) -> int:
        return len(self.coefficients)


def occupied_count(n_orbitals: int) -> int:
    """Number of doubly occupied orbitals for one π electron per atom."""
    return n_orbitals // 2


def assemble(eigen: EigenResult) -> Tuple[MolecularOrbital, ...]:
    """
    Turn raw eigenpairs into ranked, named, occupied/vacant orbitals.

    Ties in energy keep the solver's order (stable sort).
    """
    n = eigen.size
    order = np.argsort(eigen.eigenvalues, kind="stable")
    n_occ = occupied_count(n)

    orbitals = []
    for rank, k in enumerate(order, start=1):
        value, vector = eigen.pair(int(k))
        exact = normalize_sign(vector)
        exact.setflags(write=False)
        orbitals.append(MolecularOrbital(
            rank=rank,
            name=f"ψ{rank}",
            energy=round_value(value),
            coefficients=tuple(round_value(c) for c in exact),
            occupation=Occupation.OCCUPIED if rank <= n_occ else Occupation.VACANT,
            exact_energy=value,
            exact_coefficients=exact,
        ))
    return tuple(orbitals)


def homo(orbitals: Sequence[MolecularOrbital]) -> Optional[MolecularOrbital]:
    """Highest occupied orbital, or None if nothing is occupied."""
    occupied = [o for o in orbitals if o.is_occupied]
    return occupied[-1] if occupied else None


def lumo(orbitals: Sequence[MolecularOrbital]) -> Optional[MolecularOrbital]:
    """Lowest vacant orbital, or None if everything is occupied."""
    for o in orbitals:
        if not o.is_occupied:
            return o
    return None
