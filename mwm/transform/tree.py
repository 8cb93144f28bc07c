import numpy as np

from ..errors import InvalidLength, InvalidParameters
from ..utils import is_power_of_two


class ScaleTree:
    """
    Complete binary tree (or forest of equal trees) stored as one flat array per level.

    Level 0 holds the roots, level j holds ``n_roots * 2**j`` nodes. The
    children of node k at level j are nodes 2k and 2k+1 at level j+1; there is
    no pointer graph, only index arithmetic.

    Parameters
    ----------
    levels : list of array-like
        Node values, coarsest level first. Level j must have
        ``n_roots * 2**j`` entries.
    n_roots : int, optional
        Number of trees in the forest (power of 2, default 1). Ignored when
        ``levels`` is non-empty, where it is read from the first level.

    Examples
    --------
    >>> tree = ScaleTree.zeros(3)
    >>> [tree.level(j).size for j in range(tree.n_levels)]
    [1, 2, 4]
    >>> tree.children(1, 1)
    (2, 3)
    """

    def __init__(self, levels, n_roots=1):
        levels = [np.asarray(values, dtype=np.float64) for values in levels]
        if levels:
            n_roots = levels[0].size
        if not is_power_of_two(n_roots):
            raise InvalidParameters(f"Number of roots must be a power of 2, got {n_roots}")

        for j, values in enumerate(levels):
            if values.ndim != 1 or values.size != n_roots * 2**j:
                raise InvalidLength(
                    f"Expected {n_roots * 2**j} nodes, got array with shape {values.shape}",
                    level=j)

        self._levels = levels
        self.n_roots = int(n_roots)

    @classmethod
    def zeros(cls, n_levels, n_roots=1):
        """Tree with ``n_levels`` levels of zero-valued nodes."""
        return cls([np.zeros(n_roots * 2**j) for j in range(n_levels)], n_roots=n_roots)

    @property
    def n_levels(self):
        """Number of levels (0 for an empty tree)."""
        return len(self._levels)

    @property
    def n_nodes(self):
        """Total number of nodes over all levels."""
        return sum(values.size for values in self._levels)

    @property
    def leaf_count(self):
        """Number of positions one level below the deepest stored level."""
        return self.n_roots * 2**self.n_levels

    def level(self, j):
        """Flat array of node values at level j (a view, not a copy)."""
        self._check_level(j)
        return self._levels[j]

    def set_level(self, j, values):
        """Replace the node values of level j."""
        self._check_level(j)
        values = np.asarray(values, dtype=np.float64)
        if values.shape != self._levels[j].shape:
            raise InvalidLength(
                f"Expected {self._levels[j].size} nodes, got array with shape {values.shape}",
                level=j)
        self._levels[j] = values.copy()

    def children(self, j, k):
        """Indices of the two children of node k at level j, within level j+1."""
        self._check_node(j, k)
        if j + 1 >= self.n_levels:
            raise IndexError(f"Node {k} at level {j} is a leaf")
        return 2 * k, 2 * k + 1

    def parent(self, j, k):
        """Index of the parent of node k at level j, within level j-1."""
        self._check_node(j, k)
        if j == 0:
            raise IndexError("Root nodes have no parent")
        return k // 2

    def top_down(self):
        """Iterate over (level, values) pairs from the roots to the deepest level."""
        for j in range(self.n_levels):
            yield j, self._levels[j]

    def bottom_up(self):
        """Iterate over (level, values) pairs from the deepest level to the roots."""
        for j in reversed(range(self.n_levels)):
            yield j, self._levels[j]

    def copy(self):
        return ScaleTree([values.copy() for values in self._levels], n_roots=self.n_roots)

    def _check_level(self, j):
        if not 0 <= j < self.n_levels:
            raise IndexError(f"Level {j} out of range for tree with {self.n_levels} levels")

    def _check_node(self, j, k):
        self._check_level(j)
        if not 0 <= k < self._levels[j].size:
            raise IndexError(f"Node {k} out of range at level {j}")

    def __len__(self):
        return self.n_levels

    def __repr__(self):
        return f"ScaleTree(n_levels={self.n_levels}, n_roots={self.n_roots})"
