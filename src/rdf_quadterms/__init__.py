"""
RDF-QuadTerms: structural matching over nested RDF-star quads.

Positional access, nested traversal with positional paths, and
variable-binding unification for quads that may quote other quads.
"""

__version__ = "0.1.0"

from rdf_quadterms.terms import (
    TermType,
    TERM_TYPES,
    Term,
    NamedNode,
    BlankNode,
    Literal,
    Variable,
    DefaultGraph,
    Quad,
    DataFactory,
    DEFAULT_FACTORY,
)
from rdf_quadterms.errors import (
    QuadTermError,
    PathTraversalError,
    MalformedQuadError,
    OptionsError,
    InteropError,
)
from rdf_quadterms.positions import (
    QUAD_POSITIONS,
    TRIPLE_POSITIONS,
    NamedPosition,
    get_positions,
    named_positions,
    from_named_positions,
    for_each_position,
    filter_positions,
    filter_position_names,
    map_positions,
    reduce_positions,
    every_position,
    some_position,
)
from rdf_quadterms.nested import (
    iter_leaves,
    for_each_leaf,
    filter_leaves,
    filter_leaf_paths,
    map_leaves,
    reduce_leaves,
    every_leaf,
    some_leaf,
    get_all_leaves,
)
from rdf_quadterms.paths import resolve_path
from rdf_quadterms.options import MatchOptions
from rdf_quadterms.matching import (
    unify,
    term_matches,
    quad_matches_positions,
    quad_matches_pattern,
)
from rdf_quadterms.term_util import (
    uniq_terms,
    get_terms_of_type,
    get_named_nodes,
    get_blank_nodes,
    get_literals,
    get_variables,
    get_default_graphs,
    get_quads,
)

__all__ = [
    # Terms
    "TermType",
    "TERM_TYPES",
    "Term",
    "NamedNode",
    "BlankNode",
    "Literal",
    "Variable",
    "DefaultGraph",
    "Quad",
    "DataFactory",
    "DEFAULT_FACTORY",
    # Errors
    "QuadTermError",
    "PathTraversalError",
    "MalformedQuadError",
    "OptionsError",
    "InteropError",
    # Positions
    "QUAD_POSITIONS",
    "TRIPLE_POSITIONS",
    "NamedPosition",
    "get_positions",
    "named_positions",
    "from_named_positions",
    "for_each_position",
    "filter_positions",
    "filter_position_names",
    "map_positions",
    "reduce_positions",
    "every_position",
    "some_position",
    # Nested traversal
    "iter_leaves",
    "for_each_leaf",
    "filter_leaves",
    "filter_leaf_paths",
    "map_leaves",
    "reduce_leaves",
    "every_leaf",
    "some_leaf",
    "get_all_leaves",
    "resolve_path",
    # Matching
    "MatchOptions",
    "unify",
    "term_matches",
    "quad_matches_positions",
    "quad_matches_pattern",
    # Term lists
    "uniq_terms",
    "get_terms_of_type",
    "get_named_nodes",
    "get_blank_nodes",
    "get_literals",
    "get_variables",
    "get_default_graphs",
    "get_quads",
    # Polars / Oxigraph helpers (imported lazily)
    "leaf_frame",
    "to_oxigraph",
    "quad_to_oxigraph",
    "from_oxigraph",
]


# Lazy import for the Polars and Oxigraph helpers
def __getattr__(name):
    if name == "leaf_frame":
        from rdf_quadterms.frames import leaf_frame
        return leaf_frame
    if name in ("to_oxigraph", "quad_to_oxigraph", "from_oxigraph"):
        from rdf_quadterms import interop
        return getattr(interop, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
