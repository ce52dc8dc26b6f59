"""
Molecular graph: atoms as indices, bonds as unordered index pairs.

The graph is purely combinatorial. Atoms carry no attributes beyond their
index (every atom is an identical π-center) and there are no coordinates;
positions belong to whatever editor produced the structure.

Graphs are immutable. Editing operations return a new graph, so a
calculation always works on a consistent snapshot:

    >>> from tiny_huckel.core import MolecularGraph
    >>> g = MolecularGraph(3).add_bond(0, 1).add_bond(1, 2)
    >>> g.is_connected()
    True
    >>> g.remove_atom(1).bonds
    ()
"""
import operator
import numpy as np
from typing import Iterable, List, Optional, Tuple

from .errors import InvalidIndexError

Bond = Tuple[int, int]


def _as_index(value) -> int:
    if isinstance(value, bool):
        raise InvalidIndexError(f"Atom index must be an integer, got {value!r}")
    try:
        return operator.index(value)
    except TypeError:
        raise InvalidIndexError(
            f"Atom index must be an integer, got {value!r}"
        ) from None


class MolecularGraph:
    """
    Undirected simple graph of π-centers.

    Parameters
    ----------
    n_atoms : int
        Number of atoms. Atoms are addressed as ``0..n_atoms-1``.
    bonds : iterable of (int, int)
        Bonded atom pairs. ``(i, j)`` and ``(j, i)`` are the same bond and
        duplicates collapse to one.

    Raises
    ------
    ValueError
        If ``n_atoms`` is not an integer or is negative.
    InvalidIndexError
        If a bond references an atom out of range or joins an atom to itself.
    """

    __slots__ = ("_n_atoms", "_bonds", "_bond_set")

    def __init__(self, n_atoms: int, bonds: Iterable[Bond] = ()):
        if isinstance(n_atoms, bool):
            raise ValueError(f"Atom count must be an integer, got {n_atoms!r}")
        try:
            n_atoms = operator.index(n_atoms)
        except TypeError:
            raise ValueError(
                f"Atom count must be an integer, got {n_atoms!r}"
            ) from None
        if n_atoms < 0:
            raise ValueError(f"Atom count must be non-negative, got {n_atoms}")
        self._n_atoms = n_atoms

        normalized = set()
        for bond in bonds:
            i, j = bond
            normalized.add(self._normalize(i, j))
        self._bond_set = frozenset(normalized)
        self._bonds: Tuple[Bond, ...] = tuple(sorted(normalized))

    def _normalize(self, i, j) -> Bond:
        i, j = _as_index(i), _as_index(j)
        for idx in (i, j):
            if not 0 <= idx < self._n_atoms:
                raise InvalidIndexError(
                    f"Atom index {idx} out of range for {self._n_atoms} atoms"
                )
        if i == j:
            raise InvalidIndexError(f"Cannot bond atom {i} to itself")
        return (i, j) if i < j else (j, i)

    # ─── Constructors ────────────────────────────────────────────────────

    @classmethod
    def from_edges(cls, edges: Iterable[Bond],
                   n_atoms: Optional[int] = None) -> "MolecularGraph":
        """
        Build a graph from an edge list.

        If ``n_atoms`` is omitted it is inferred as ``max(index) + 1``.
        """
        edges = list(edges)
        if n_atoms is None:
            n_atoms = max((max(_as_index(i), _as_index(j)) for i, j in edges),
                          default=-1) + 1
        return cls(n_atoms, edges)

    @classmethod
    def from_adjacency_matrix(cls, matrix) -> "MolecularGraph":
        """Build a graph from a square 0/1 adjacency matrix (upper triangle read)."""
        adj = np.asarray(matrix)
        if adj.ndim != 2 or adj.shape[0] != adj.shape[1]:
            raise ValueError(f"Adjacency matrix must be square, got shape {adj.shape}")
        n = adj.shape[0]
        edges = [(i, j) for i in range(n) for j in range(i + 1, n)
                 if adj[i, j] != 0]
        return cls(n, edges)

    @classmethod
    def parse_bonds(cls, text: str,
                    n_atoms: Optional[int] = None) -> "MolecularGraph":
        """
        Parse bonds written as ``"0-1,1-2,2-0"``.

        Whitespace is ignored. An empty string gives a graph with no bonds.
        """
        edges = []
        for chunk in text.split(","):
            chunk = chunk.strip()
            if not chunk:
                continue
            parts = chunk.split("-")
            if len(parts) != 2:
                raise ValueError(f"Bad bond '{chunk}': expected 'i-j'")
            try:
                edges.append((int(parts[0]), int(parts[1])))
            except ValueError:
                raise ValueError(f"Bad bond '{chunk}': indices must be integers") from None
        return cls.from_edges(edges, n_atoms=n_atoms)

    # ─── Queries ─────────────────────────────────────────────────────────

    @property
    def n_atoms(self) -> int:
        return self._n_atoms

    @property
    def n_bonds(self) -> int:
        return len(self._bonds)

    @property
    def bonds(self) -> Tuple[Bond, ...]:
        """Bonds as sorted ``(i, j)`` pairs with ``i < j``."""
        return self._bonds

    def has_bond(self, i: int, j: int) -> bool:
        try:
            return self._normalize(i, j) in self._bond_set
        except InvalidIndexError:
            return False

    def neighbors(self, i: int) -> List[int]:
        """Atoms bonded to ``i``, in ascending order."""
        i = self._check_atom(i)
        out = []
        for a, b in self._bonds:
            if a == i:
                out.append(b)
            elif b == i:
                out.append(a)
        return sorted(out)

    def degree(self, i: int) -> int:
        return len(self.neighbors(i))

    def adjacency_matrix(self) -> np.ndarray:
        """Symmetric 0/1 adjacency matrix as float64."""
        adj = np.zeros((self._n_atoms, self._n_atoms), dtype=np.float64)
        for i, j in self._bonds:
            adj[i, j] = adj[j, i] = 1.0
        return adj

    def connected_components(self) -> List[List[int]]:
        """
        Connected components, each a sorted list of atom indices.

        Components are ordered by their smallest atom. Uses an explicit
        stack, so deep chains never hit the recursion limit.
        """
        adjacency: List[List[int]] = [[] for _ in range(self._n_atoms)]
        for i, j in self._bonds:
            adjacency[i].append(j)
            adjacency[j].append(i)

        seen = [False] * self._n_atoms
        components = []
        for root in range(self._n_atoms):
            if seen[root]:
                continue
            seen[root] = True
            stack = [root]
            component = []
            while stack:
                node = stack.pop()
                component.append(node)
                for nxt in adjacency[node]:
                    if not seen[nxt]:
                        seen[nxt] = True
                        stack.append(nxt)
            components.append(sorted(component))
        return components

    def is_connected(self) -> bool:
        """
        True if every atom is reachable from atom 0.

        An empty graph is treated as disconnected.
        """
        if self._n_atoms == 0:
            return False
        return len(self.connected_components()) == 1

    # ─── Editing (each returns a new graph) ──────────────────────────────

    def add_atom(self) -> "MolecularGraph":
        """Append an unbonded atom with index ``n_atoms``."""
        return MolecularGraph(self._n_atoms + 1, self._bonds)

    def add_bond(self, i: int, j: int) -> "MolecularGraph":
        bond = self._normalize(i, j)
        return MolecularGraph(self._n_atoms, self._bonds + (bond,))

    def remove_bond(self, i: int, j: int) -> "MolecularGraph":
        bond = self._normalize(i, j)
        return MolecularGraph(self._n_atoms,
                              [b for b in self._bonds if b != bond])

    def toggle_bond(self, i: int, j: int) -> "MolecularGraph":
        """Add the bond if absent, remove it if present."""
        if self._normalize(i, j) in self._bond_set:
            return self.remove_bond(i, j)
        return self.add_bond(i, j)

    def remove_atom(self, k: int) -> "MolecularGraph":
        """
        Delete atom ``k`` and every bond touching it.

        Atoms above ``k`` shift down by one so indices stay contiguous.
        """
        k = self._check_atom(k)
        def shift(idx):
            return idx - 1 if idx > k else idx

        bonds = [(shift(i), shift(j)) for i, j in self._bonds
                 if i != k and j != k]
        return MolecularGraph(self._n_atoms - 1, bonds)

    def _check_atom(self, i) -> int:
        i = _as_index(i)
        if not 0 <= i < self._n_atoms:
            raise InvalidIndexError(
                f"Atom index {i} out of range for {self._n_atoms} atoms"
            )
        return i

    # ─── Dunder ──────────────────────────────────────────────────────────

    def __eq__(self, other) -> bool:
        if not isinstance(other, MolecularGraph):
            return NotImplemented
        return (self._n_atoms == other._n_atoms
                and self._bond_set == other._bond_set)

    def __hash__(self) -> int:
        return hash((self._n_atoms, self._bond_set))

    def __len__(self) -> int:
        return self._n_atoms

    def __repr__(self) -> str:
        bonds = ",".join(f"{i}-{j}" for i, j in self._bonds)
        return f"MolecularGraph({self._n_atoms} atoms, bonds=[{bonds}])"
