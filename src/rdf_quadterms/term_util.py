"""Utilities for lists of terms: de-duplication and filtering by term type."""

from typing import Iterable, List, Union

from rdf_quadterms.terms import (
    BlankNode,
    DefaultGraph,
    Literal,
    NamedNode,
    Quad,
    Term,
    TermType,
    Variable,
)


def uniq_terms(terms: Iterable[Term]) -> List[Term]:
    """Unique terms by structural equality, keeping first occurrences in order."""
    seen = set()
    unique = []
    for term in terms:
        if term not in seen:
            seen.add(term)
            unique.append(term)
    return unique


def get_terms_of_type(terms: Iterable[Term], term_type: Union[TermType, str]) -> List[Term]:
    """
    Terms of the given type.

    Args:
        terms: Terms to filter
        term_type: A TermType or its name, e.g. "NamedNode"

    Raises:
        ValueError: If ``term_type`` is not a known term type.
    """
    wanted = TermType(term_type)
    return [term for term in terms if term.term_type == wanted]


def get_named_nodes(terms: Iterable[Term]) -> List[NamedNode]:
    return get_terms_of_type(terms, TermType.NAMED_NODE)


def get_blank_nodes(terms: Iterable[Term]) -> List[BlankNode]:
    return get_terms_of_type(terms, TermType.BLANK_NODE)


def get_literals(terms: Iterable[Term]) -> List[Literal]:
    return get_terms_of_type(terms, TermType.LITERAL)


def get_variables(terms: Iterable[Term]) -> List[Variable]:
    return get_terms_of_type(terms, TermType.VARIABLE)


def get_default_graphs(terms: Iterable[Term]) -> List[DefaultGraph]:
    return get_terms_of_type(terms, TermType.DEFAULT_GRAPH)


def get_quads(terms: Iterable[Term]) -> List[Quad]:
    return get_terms_of_type(terms, TermType.QUAD)
