"""
Traversal of nested (quoted) quads.

Generalizes :mod:`rdf_quadterms.positions`: a position holding a Quad is
descended into instead of being reported. Every leaf (non-quad term) is
reported together with its positional path, the list of position names
leading from the root quad to the leaf.

Order is depth-first: positions are visited subject, predicate, object,
graph, and a nested quad is fully traversed before its next sibling. For
``<< s p << s2 p2 o2 g2 >> g >>`` the leaves are s, p, s2, p2, o2, g2, g.
"""

from typing import Callable, Iterator, List, Optional, Tuple, TypeVar

from rdf_quadterms.positions import QUAD_POSITIONS, TRIPLE_POSITIONS, PositionName
from rdf_quadterms.terms import DEFAULT_FACTORY, DataFactory, DefaultGraph, Quad, Term

U = TypeVar("U")

Path = List[PositionName]


def _position_names(quad: Quad, omit_default_graph: bool) -> List[PositionName]:
    if omit_default_graph and isinstance(quad.graph, DefaultGraph):
        return TRIPLE_POSITIONS
    return QUAD_POSITIONS


def iter_leaves(quad: Quad, omit_default_graph: bool = False) -> Iterator[Tuple[Term, Path]]:
    """
    Yield ``(leaf, path)`` for every leaf in depth-first position order.

    Uses an explicit stack, so arbitrarily deep nesting does not hit the
    recursion limit. Each yielded path is a fresh list.

    Args:
        quad: The root quad
        omit_default_graph: Skip default-graph terms in graph position, at
            every nesting level
    """
    stack: List[Tuple[Term, Tuple[PositionName, ...]]] = []
    for name in reversed(_position_names(quad, omit_default_graph)):
        stack.append((getattr(quad, name), (name,)))

    while stack:
        term, path = stack.pop()
        if isinstance(term, Quad):
            for name in reversed(_position_names(term, omit_default_graph)):
                stack.append((getattr(term, name), path + (name,)))
        else:
            yield term, list(path)


def for_each_leaf(quad: Quad, fn: Callable[[Term, Path], None]) -> None:
    """Call ``fn(leaf, path)`` for every leaf."""
    for term, path in iter_leaves(quad):
        fn(term, path)


def filter_leaves(quad: Quad, fn: Callable[[Term, Path], bool]) -> List[Term]:
    """Leaves that pass ``fn(leaf, path)``, in traversal order."""
    return [term for term, path in iter_leaves(quad) if fn(term, path)]


def filter_leaf_paths(quad: Quad, fn: Callable[[Term, Path], bool]) -> List[Path]:
    """Paths of the leaves that pass ``fn(leaf, path)``, in traversal order."""
    paths = []
    for term, path in iter_leaves(quad):
        if fn(term, path):
            paths.append(path)
    return paths


def map_leaves(
    quad: Quad,
    fn: Callable[[Term, Path], Term],
    factory: Optional[DataFactory] = None,
) -> Quad:
    """
    Rebuild a quad, replacing each leaf with ``fn(leaf, path)``.

    Nested quads are rebuilt with the same factory and are never passed
    to ``fn``.
    """
    factory = factory or DEFAULT_FACTORY

    def rebuild(current: Quad, prefix: Tuple[PositionName, ...]) -> Quad:
        mapped = []
        for name in QUAD_POSITIONS:
            term = getattr(current, name)
            if isinstance(term, Quad):
                mapped.append(rebuild(term, prefix + (name,)))
            else:
                mapped.append(fn(term, list(prefix + (name,))))
        return factory.quad(*mapped)

    return rebuild(quad, ())


def reduce_leaves(quad: Quad, fn: Callable[[U, Term, Path], U], initial: U) -> U:
    """Left fold ``fn(acc, leaf, path)`` over all leaves."""
    value = initial
    for term, path in iter_leaves(quad):
        value = fn(value, term, path)
    return value


def every_leaf(quad: Quad, fn: Callable[[Term, Path], bool]) -> bool:
    """True if every leaf passes ``fn``; all leaves are checked."""
    results = [bool(fn(term, path)) for term, path in iter_leaves(quad)]
    return all(results)


def some_leaf(quad: Quad, fn: Callable[[Term, Path], bool]) -> bool:
    """True if at least one leaf passes ``fn``; all leaves are checked."""
    results = [bool(fn(term, path)) for term, path in iter_leaves(quad)]
    return any(results)


def get_all_leaves(quad: Quad, omit_default_graph: bool = False) -> List[Term]:
    """All leaves of a (possibly nested) quad, in traversal order."""
    return [term for term, _ in iter_leaves(quad, omit_default_graph)]
