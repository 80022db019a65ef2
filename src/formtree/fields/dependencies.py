"""
Dependency graph between sibling fields of one object field.

Backed by a NetworkX ``DiGraph`` whose edges run from a dependency to
each field that depends on it, so a topological sort lists dependencies
first. The graph is built once, when the object field is constructed,
and answers three questions during validation: which fields are
dependencies (and so are gated), who depends on a given field, and which
dependents are invalidated when some fields fail.
"""

import logging
from collections.abc import Iterable, Mapping, Sequence

import networkx as nx

from formtree.exceptions import CircularDependencyError, UnknownDependencyError

logger = logging.getLogger(__name__)


class DependencyGraph:
    """Directed acyclic graph of ``dependency -> dependent`` edges."""

    def __init__(
        self,
        names: Iterable[str],
        declarations: Mapping[str, Sequence[str]] | None = None,
    ):
        self.names = list(names)
        self._position = {name: index for index, name in enumerate(self.names)}

        self._graph = nx.DiGraph()
        self._graph.add_nodes_from(self.names)

        for dependent, targets in (declarations or {}).items():
            if dependent not in self._position:
                raise UnknownDependencyError(
                    f"Dependencies declared for unknown field '{dependent}'"
                )
            missing = [target for target in targets if target not in self._position]
            if missing:
                raise UnknownDependencyError(
                    f"Field '{dependent}' depends on unknown field(s): {', '.join(missing)}"
                )

            self._graph.add_edges_from((target, dependent) for target in targets)

        self._check_acyclic()
        self.order = list(
            nx.lexicographical_topological_sort(self._graph, key=self._position.__getitem__)
        )

    def depends_on(self, name: str) -> list[str]:
        """Names *name* directly depends on, in declaration order."""
        return list(self._graph.predecessors(name)) if name in self._graph else []

    def dependents_of(self, name: str) -> list[str]:
        """Names that directly depend on *name*."""
        return list(self._graph.successors(name)) if name in self._graph else []

    def is_dependency(self, name: str) -> bool:
        return name in self._graph and self._graph.out_degree(name) > 0

    def is_dependent(self, name: str) -> bool:
        return name in self._graph and self._graph.in_degree(name) > 0

    def transitive_dependents(self, name: str) -> list[str]:
        """Every field that depends on *name*, directly or through a chain."""
        return sorted(nx.descendants(self._graph, name), key=self._position.__getitem__)

    def cascade(
        self,
        failed: Iterable[str],
        skipped: Iterable[str] = (),
    ) -> dict[str, list[str]]:
        """
        Propagate failures to dependents.

        Returns a mapping of every newly invalidated dependent to the
        direct dependencies that made it invalid. Fields in *failed* are
        not included. Fields in *skipped* took no part in validation:
        they are never invalidated and never pass a failure on.

        Walking in dependency-first order means a dependent sees its
        dependencies' final state, whatever the chain depth.
        """
        invalid = set(failed)
        skipped = set(skipped)
        invalidated: dict[str, list[str]] = {}

        for name in self.order:
            if name in invalid or name in skipped:
                continue
            bad = [target for target in self._graph.predecessors(name) if target in invalid]
            if bad:
                invalidated[name] = bad
                invalid.add(name)

        return invalidated

    def _check_acyclic(self) -> None:
        if nx.is_directed_acyclic_graph(self._graph):
            return

        # Report the cycle the way it is declared: dependent -> dependency
        try:
            edges = nx.find_cycle(self._graph.reverse(copy=False))
        except nx.NetworkXNoCycle:
            raise CircularDependencyError("Circular dependency between fields", []) from None

        cycle = [edge[0] for edge in edges] + [edges[0][0]]
        logger.debug(f"Rejected dependency cycle {cycle}")
        raise CircularDependencyError(
            f"Circular dependency between fields: {' -> '.join(cycle)}", cycle
        )
