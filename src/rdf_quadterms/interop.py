"""
Conversion between rdf_quadterms terms and pyoxigraph values.

Oxigraph represents RDF-star quoted triples as ``pyoxigraph.Triple``. A
nested Quad converts to a Triple only when its graph is the default graph;
oxigraph has no quoted quads.
"""

import logging
from typing import Optional, Union

import pyoxigraph as ox

from rdf_quadterms.errors import InteropError
from rdf_quadterms.terms import (
    DEFAULT_FACTORY,
    BlankNode,
    DataFactory,
    DefaultGraph,
    Literal,
    NamedNode,
    Quad,
    Term,
    Variable,
)

logger = logging.getLogger(__name__)

OxigraphTerm = Union[
    ox.NamedNode, ox.BlankNode, ox.Literal, ox.Variable, ox.DefaultGraph, ox.Triple
]


def to_oxigraph(term: Term) -> OxigraphTerm:
    """
    Convert a term to its pyoxigraph counterpart.

    Raises:
        InteropError: If a nested quad has a named graph, or oxigraph
            rejects a term in its position.
    """
    if isinstance(term, NamedNode):
        return ox.NamedNode(term.value)
    if isinstance(term, BlankNode):
        return ox.BlankNode(term.value)
    if isinstance(term, Literal):
        if term.language:
            return ox.Literal(term.value, language=term.language)
        return ox.Literal(term.value, datatype=ox.NamedNode(term.datatype.value))
    if isinstance(term, Variable):
        return ox.Variable(term.value)
    if isinstance(term, DefaultGraph):
        return ox.DefaultGraph()
    if isinstance(term, Quad):
        if not term.is_triple():
            logger.debug(f"Cannot quote {term} in oxigraph: named graph")
            raise InteropError(f"Quoted quad with a named graph has no oxigraph form: {term}")
        try:
            return ox.Triple(
                to_oxigraph(term.subject),
                to_oxigraph(term.predicate),
                to_oxigraph(term.object),
            )
        except (TypeError, ValueError) as e:
            raise InteropError(f"Oxigraph rejected quoted triple {term}: {e}") from e
    raise InteropError(f"Not a term: {term!r}")


def quad_to_oxigraph(quad: Quad) -> ox.Quad:
    """Convert a top-level quad to a ``pyoxigraph.Quad``."""
    try:
        return ox.Quad(
            to_oxigraph(quad.subject),
            to_oxigraph(quad.predicate),
            to_oxigraph(quad.object),
            to_oxigraph(quad.graph),
        )
    except (TypeError, ValueError) as e:
        raise InteropError(f"Oxigraph rejected quad {quad}: {e}") from e


def from_oxigraph(value, factory: Optional[DataFactory] = None) -> Term:
    """
    Convert a pyoxigraph term, triple or quad to an rdf_quadterms term.

    Triples become quads in the default graph.

    Raises:
        InteropError: If ``value`` is not a pyoxigraph term.
    """
    factory = factory or DEFAULT_FACTORY
    if isinstance(value, ox.NamedNode):
        return factory.named_node(value.value)
    if isinstance(value, ox.BlankNode):
        return factory.blank_node(value.value)
    if isinstance(value, ox.Literal):
        if value.language:
            return factory.literal(value.value, value.language)
        return factory.literal(value.value, factory.named_node(value.datatype.value))
    if isinstance(value, ox.Variable):
        return factory.variable(value.value)
    if isinstance(value, ox.DefaultGraph):
        return factory.default_graph()
    if isinstance(value, ox.Triple):
        return factory.quad(
            from_oxigraph(value.subject, factory),
            from_oxigraph(value.predicate, factory),
            from_oxigraph(value.object, factory),
        )
    if isinstance(value, ox.Quad):
        return factory.quad(
            from_oxigraph(value.subject, factory),
            from_oxigraph(value.predicate, factory),
            from_oxigraph(value.object, factory),
            from_oxigraph(value.graph_name, factory),
        )
    logger.debug(f"Unsupported oxigraph value: {type(value).__name__}")
    raise InteropError(f"Not an oxigraph term: {value!r}")
