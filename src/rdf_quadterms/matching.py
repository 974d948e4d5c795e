"""
Pattern matching over (nested) quads.

Two families of matchers live here:

1. :func:`unify` - the variable-binding matcher. Every occurrence of a
   variable name, at any nesting depth, must resolve to structurally equal
   terms. The candidate may itself contain variables.

2. One-level matchers (:func:`term_matches`, :func:`quad_matches_positions`,
   :func:`quad_matches_pattern`) - pattern variables are plain wildcards with
   no consistency between positions, and the candidate is expected to be
   concrete.

Example:
    pattern   = << ?s <p> ?s ?g >>
    candidate = << <x> <p> <y> <g> >>
    unify(pattern, candidate)  ->  False   (?s cannot be both <x> and <y>)
"""

import logging
from typing import Dict, Optional, Union

from rdf_quadterms.options import MatchOptions
from rdf_quadterms.positions import every_position
from rdf_quadterms.terms import Quad, Term, Variable

logger = logging.getLogger(__name__)

Bindings = Dict[str, Term]


# =============================================================================
# Unification
# =============================================================================

def unify(
    pattern: Quad,
    candidate: Quad,
    options: Optional[MatchOptions] = None,
    *,
    skip_variable_binding: Optional[bool] = None,
    return_bindings: Optional[bool] = None,
) -> Union[bool, Bindings]:
    """
    Check whether ``candidate`` matches ``pattern`` under one consistent
    assignment of the pattern's variables.

    For each position (subject, predicate, object, graph) the pattern term
    is compared with the candidate term:

    - Variable: binds to the candidate term, or, if already bound, requires
      the bound term to equal it. With ``skip_variable_binding``, a
      candidate variable matches without binding.
    - Quad: the candidate term must be a Quad that unifies recursively,
      sharing the same bindings.
    - Anything else: structural equality.

    Args:
        pattern: Pattern quad, may contain variables and nested quads
        candidate: Quad under test, may contain variables
        options: Match options; keyword flags override them

    Returns:
        False on no match. On a match, True, or the binding map if
        ``return_bindings`` is set (empty for a variable-free pattern).
    """
    opts = (options or MatchOptions()).merged(
        skip_variable_binding=skip_variable_binding,
        return_bindings=return_bindings,
    )
    bindings: Bindings = {}

    def match_term(term: Term, other: Term) -> bool:
        if isinstance(term, Variable):
            if opts.skip_variable_binding and isinstance(other, Variable):
                return True
            bound = bindings.get(term.value)
            if bound is None:
                bindings[term.value] = other
                return True
            if not bound.equals(other):
                logger.debug(f"?{term.value} is bound to {bound}, cannot match {other}")
                return False
            return True
        if isinstance(term, Quad):
            return isinstance(other, Quad) and match_quad(term, other)
        return term.equals(other)

    def match_quad(current: Quad, other: Quad) -> bool:
        return every_position(current, lambda term, name: match_term(term, getattr(other, name)))

    if not match_quad(pattern, candidate):
        return False
    if opts.return_bindings:
        return dict(bindings)
    return True


# =============================================================================
# One-level matchers
# =============================================================================

def term_matches(term: Term, pattern: Optional[Term] = None) -> bool:
    """
    Check if a candidate term matches a pattern term.

    At least one of the following must hold:
    - the pattern is None (no constraint)
    - the pattern is a variable
    - both are quads and the term passes :func:`quad_matches_pattern`
    - the pattern equals the term
    """
    return (
        pattern is None
        or isinstance(pattern, Variable)
        or (isinstance(pattern, Quad) and isinstance(term, Quad)
            and quad_matches_pattern(term, pattern))
        or pattern.equals(term)
    )


def quad_matches_positions(
    quad: Quad,
    subject: Optional[Term] = None,
    predicate: Optional[Term] = None,
    object: Optional[Term] = None,
    graph: Optional[Term] = None,
) -> bool:
    """
    Check if a concrete quad matches the given position terms.

    None means "no constraint" for that position. Variables are wildcards;
    repeated variable names are not checked for consistency.
    """
    return (
        term_matches(quad.subject, subject)
        and term_matches(quad.predicate, predicate)
        and term_matches(quad.object, object)
        and term_matches(quad.graph, graph)
    )


def quad_matches_pattern(quad: Quad, pattern: Quad) -> bool:
    """Check if a concrete quad matches every position of ``pattern``."""
    return quad_matches_positions(
        quad, pattern.subject, pattern.predicate, pattern.object, pattern.graph
    )
