"""
Positional access to the four terms of a quad.

Positions are always visited in the fixed order subject, predicate, object,
graph. Nothing in this module looks inside nested quads; see
:mod:`rdf_quadterms.nested` for that.
"""

from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional, TypeVar

from rdf_quadterms.errors import MalformedQuadError
from rdf_quadterms.terms import DEFAULT_FACTORY, DataFactory, DefaultGraph, Quad, Term

U = TypeVar("U")

PositionName = str

QUAD_POSITIONS: List[PositionName] = ["subject", "predicate", "object", "graph"]
TRIPLE_POSITIONS: List[PositionName] = ["subject", "predicate", "object"]


@dataclass(frozen=True)
class NamedPosition:
    """A term paired with the name of the position it occupies."""
    name: PositionName
    value: Term


def get_positions(quad: Quad, omit_default_graph: bool = False) -> List[Term]:
    """
    Get all terms in the given quad.

    Args:
        quad: A quad
        omit_default_graph: If True and the graph is the default graph,
            the graph term is left out

    Returns:
        The terms in position order.
    """
    if omit_default_graph and isinstance(quad.graph, DefaultGraph):
        return [quad.subject, quad.predicate, quad.object]
    return [quad.subject, quad.predicate, quad.object, quad.graph]


def named_positions(quad: Quad) -> List[NamedPosition]:
    """Convert a quad to named positions; reverse of :func:`from_named_positions`."""
    return [NamedPosition(name, getattr(quad, name)) for name in QUAD_POSITIONS]


def from_named_positions(
    entries: Iterable[NamedPosition],
    default_fn: Optional[Callable[[PositionName], Optional[Term]]] = None,
    factory: Optional[DataFactory] = None,
) -> Quad:
    """
    Collect named positions into a quad.

    Args:
        entries: Named positions, possibly a partial set
        default_fn: Called with the name of each missing position
        factory: Factory used to build the quad

    Returns:
        The resulting quad.

    Raises:
        MalformedQuadError: If an entry names an unknown position, or a
            position is still missing after applying ``default_fn``.
    """
    elements = {}
    for entry in entries:
        if entry.name not in QUAD_POSITIONS:
            raise MalformedQuadError(
                [entry.name], f"Unknown quad position: {entry.name!r}"
            )
        elements[entry.name] = entry.value

    if default_fn is not None:
        for name in QUAD_POSITIONS:
            if elements.get(name) is None:
                elements[name] = default_fn(name)

    missing = [name for name in QUAD_POSITIONS if elements.get(name) is None]
    if missing:
        raise MalformedQuadError(missing)

    return (factory or DEFAULT_FACTORY).quad(
        elements["subject"], elements["predicate"], elements["object"], elements["graph"]
    )


def for_each_position(quad: Quad, fn: Callable[[Term, PositionName], None]) -> None:
    """Call ``fn(term, name)`` for each position."""
    for name in QUAD_POSITIONS:
        fn(getattr(quad, name), name)


def filter_positions(quad: Quad, fn: Callable[[Term, PositionName], bool]) -> List[Term]:
    """Terms whose position passes ``fn``, in position order."""
    return [
        getattr(quad, name) for name in QUAD_POSITIONS if fn(getattr(quad, name), name)
    ]


def filter_position_names(
    quad: Quad, fn: Callable[[Term, PositionName], bool]
) -> List[PositionName]:
    """Names of the positions that pass ``fn``, in position order."""
    return [name for name in QUAD_POSITIONS if fn(getattr(quad, name), name)]


def map_positions(
    quad: Quad,
    fn: Callable[[Term, PositionName], Term],
    factory: Optional[DataFactory] = None,
) -> Quad:
    """
    Build a new quad from ``fn(term, name)`` applied to each position.

    The input quad is left untouched.
    """
    return (factory or DEFAULT_FACTORY).quad(
        fn(quad.subject, "subject"),
        fn(quad.predicate, "predicate"),
        fn(quad.object, "object"),
        fn(quad.graph, "graph"),
    )


def reduce_positions(
    quad: Quad, fn: Callable[[U, Term, PositionName], U], initial: U
) -> U:
    """Left fold ``fn(acc, term, name)`` over the positions."""
    value = initial
    for name in QUAD_POSITIONS:
        value = fn(value, getattr(quad, name), name)
    return value


def every_position(quad: Quad, fn: Callable[[Term, PositionName], bool]) -> bool:
    """
    True if every position passes ``fn``.

    ``fn`` is called for all four positions before the results are combined.
    """
    results = [bool(fn(getattr(quad, name), name)) for name in QUAD_POSITIONS]
    return all(results)


def some_position(quad: Quad, fn: Callable[[Term, PositionName], bool]) -> bool:
    """
    True if at least one position passes ``fn``.

    ``fn`` is called for all four positions before the results are combined.
    """
    results = [bool(fn(getattr(quad, name), name)) for name in QUAD_POSITIONS]
    return any(results)
