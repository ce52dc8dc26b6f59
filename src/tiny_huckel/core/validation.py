"""Pre-flight structural checks, run before any matrix is built."""
import logging
from typing import Optional

from .errors import (
    StructuralError,
    EmptyStructureError,
    NoBondsError,
    DisconnectedError,
)
from .graph import MolecularGraph

logger = logging.getLogger(__name__)


def find_structural_problem(graph: MolecularGraph) -> Optional[StructuralError]:
    """
    Return the first structural problem with ``graph``, or None.

    Checks run in order: no atoms, no bonds, more than one fragment.
    """
    if graph.n_atoms == 0:
        return EmptyStructureError()
    if graph.n_bonds == 0:
        return NoBondsError()
    components = graph.connected_components()
    if len(components) > 1:
        return DisconnectedError(len(components))
    return None


def validate(graph: MolecularGraph) -> None:
    """
    Raise the matching StructuralError if ``graph`` cannot be calculated.

    Raises
    ------
    EmptyStructureError
        The graph has no atoms.
    NoBondsError
        The graph has atoms but no bonds.
    DisconnectedError
        Some atom is unreachable from atom 0.
    """
    problem = find_structural_problem(graph)
    if problem is not None:
        logger.info("Rejected %r: %s", graph, problem)
        raise problem
