"""
Tabular view of a quad's leaves, backed by Polars.

One row per leaf, in traversal order, so leaves of a nested quad can be
filtered and grouped with DataFrame expressions.
"""

import polars as pl

from rdf_quadterms.nested import iter_leaves
from rdf_quadterms.terms import Quad


def leaf_frame(quad: Quad, omit_default_graph: bool = False) -> pl.DataFrame:
    """
    Flatten the leaves of a (possibly nested) quad into a DataFrame.

    Columns:
        path: Dot-joined positional path, e.g. "subject.object"
        depth: Nesting depth of the leaf, 0 for the root quad's own positions
        position: Last segment of the path
        term_type: Term type name, e.g. "NamedNode"
        value: Term value
    """
    paths, depths, positions, term_types, values = [], [], [], [], []
    for term, path in iter_leaves(quad, omit_default_graph):
        paths.append(".".join(path))
        depths.append(len(path) - 1)
        positions.append(path[-1])
        term_types.append(term.term_type.value)
        values.append(term.value)

    return pl.DataFrame({
        "path": pl.Series(paths, dtype=pl.Utf8),
        "depth": pl.Series(depths, dtype=pl.Int64),
        "position": pl.Series(positions, dtype=pl.Utf8),
        "term_type": pl.Series(term_types, dtype=pl.Utf8),
        "value": pl.Series(values, dtype=pl.Utf8),
    })
