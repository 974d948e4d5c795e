"""Lookup of a term inside a nested quad by positional path."""

import logging
from typing import Sequence

from rdf_quadterms.errors import PathTraversalError
from rdf_quadterms.positions import QUAD_POSITIONS
from rdf_quadterms.terms import Quad, Term

logger = logging.getLogger(__name__)


def resolve_path(term: Term, path: Sequence[str]) -> Term:
    """
    Get the term found at ``path`` inside ``term``.

    Args:
        term: A term, usually a (nested) quad
        path: Position names from ``term`` down to the wanted term;
            an empty path returns ``term`` itself

    Raises:
        PathTraversalError: If the path continues past a non-quad term,
            or a segment is not a position name.
    """
    current = term
    for position in path:
        if not isinstance(current, Quad):
            logger.debug(f"Path {list(path)} stops at {current.term_type.value} before {position}")
            raise PathTraversalError(position, current.term_type.value)
        if position not in QUAD_POSITIONS:
            raise PathTraversalError(
                position, current.term_type.value, f"Unknown quad position: {position!r}"
            )
        current = getattr(current, position)
    return current
