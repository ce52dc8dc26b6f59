"""
Text and plot output for Hückel results.

Features:
- Orbital table (energy in β units and occupation)
- Per-atom coefficient listing
- ASCII energy-level diagram with degenerate levels side by side
- Energy-level plot (requires matplotlib)

Energies are printed as the coefficient x in E = α + xβ. Since β < 0,
bonding orbitals have positive x and sit at the bottom of the diagram.
"""
import importlib.util
import logging
from typing import Optional

from .core.calculation import HuckelResult
from .core.orbitals import MolecularOrbital

# matplotlib is imported lazily by plot_energy_levels. Importing this module
# leaves the matplotlib backend alone.
HAS_MPL = importlib.util.find_spec("matplotlib") is not None

logger = logging.getLogger(__name__)

LEVEL_WIDTH = 6           # characters per level in the ASCII diagram
PLOT_LINE_WIDTH = 0.8     # data units per level in the plot
PLOT_LINE_SPACING = 0.15


def format_orbital_table(result: HuckelResult) -> str:
    """
    All orbitals, lowest energy first.

    Example output:
        Orbital   Energy (β)  Occupation
        ψ1           2.0000   Occ
        ψ2           1.0000   Occ
    """
    lines = [f"{'Orbital':<8}  {'Energy (β)':>10}  Occupation"]
    for orbital in result.orbitals:
        lines.append(
            f"{orbital.name:<8}  {orbital.beta_coefficient:>10.4f}  "
            f"{orbital.occupation.value}"
        )
    return "\n".join(lines)


def format_coefficients(orbital: MolecularOrbital) -> str:
    """Per-atom coefficients of one orbital, atoms numbered from 1."""
    lines = [f"{orbital.name}  E = α {_signed_beta(orbital.beta_coefficient)}"]
    for index, coeff in enumerate(orbital.coefficients, start=1):
        lines.append(f"  Atom {index:2d}: {coeff:+.4f}")
    return "\n".join(lines)


def _signed_beta(x: float) -> str:
    sign = "-" if x < 0 else "+"
    return f"{sign} {abs(x):.4f}β"


def _level_glyph(orbital: MolecularOrbital) -> str:
    if orbital.is_occupied:
        pad = (LEVEL_WIDTH - 2) // 2
        return "─" * pad + "↑↓" + "─" * (LEVEL_WIDTH - 2 - pad)
    return "─" * LEVEL_WIDTH


def draw_energy_levels(result: HuckelResult) -> str:
    """
    ASCII energy-level diagram, highest energy at the top.

    Example (butadiene):
         -1.6180 │ ──────  ψ4
         -0.6180 │ ──────  ψ3
          0.6180 │ ──↑↓──  ψ2
          1.6180 │ ──↑↓──  ψ1
    """
    rows = []
    for energy, group in reversed(list(result.degenerate_groups.items())):
        x = group[0].beta_coefficient
        cells = "   ".join(f"{_level_glyph(o)}  {o.name:<4}" for o in group)
        rows.append(f"{x:>9.4f} │ {cells}".rstrip())
    rows.append(f"{'':>9}   Energy (β units)")
    return "\n".join(rows)


def plot_energy_levels(result: HuckelResult, path: Optional[str] = None,
                       title: Optional[str] = None):
    """
    Draw the energy-level diagram with matplotlib.

    Degenerate orbitals are laid out side by side and centered. Occupied
    levels are drawn in red, vacant ones in blue.

    Parameters
    ----------
    result : HuckelResult
    path : str or None
        If given, the figure is saved there and closed.
    title : str or None

    Returns
    -------
    matplotlib.figure.Figure
    """
    if not HAS_MPL:
        raise ImportError("matplotlib required: pip install matplotlib")
    import matplotlib.pyplot as plt

    fig, ax = plt.subplots(figsize=(5, 6))
    for energy, group in result.degenerate_groups.items():
        n = len(group)
        total = n * PLOT_LINE_WIDTH + (n - 1) * PLOT_LINE_SPACING
        start = -total / 2
        for index, orbital in enumerate(group):
            x0 = start + index * (PLOT_LINE_WIDTH + PLOT_LINE_SPACING)
            color = '#D32F2F' if orbital.is_occupied else '#1976D2'
            ax.hlines(energy, x0, x0 + PLOT_LINE_WIDTH, colors=color, linewidth=3)
            ax.text(x0 + PLOT_LINE_WIDTH / 2, energy + 0.05, orbital.name,
                    ha='center', va='bottom', fontsize=9)

    levels = list(result.degenerate_groups.keys())
    ax.set_yticks(levels)
    ax.set_yticklabels([f"{-e:.2f}" for e in levels])
    ax.set_ylabel('Energy (β units)')
    ax.set_xticks([])
    ax.set_xlim(-2.5, 2.5)
    ax.set_title(title or f"Hückel levels ({result.n_atoms} atoms)")
    ax.grid(True, axis='y', alpha=0.3)

    if path is not None:
        fig.savefig(path, dpi=150, bbox_inches='tight')
        plt.close(fig)
        logger.info("Saved energy-level plot to %s", path)
    return fig
