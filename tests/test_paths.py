"""Tests for positional path lookup."""

import pytest

from rdf_quadterms import DataFactory, PathTraversalError, QuadTermError
from rdf_quadterms.paths import resolve_path

DF = DataFactory()
S, P, O, G = (DF.named_node(v) for v in "spog")
TREASURE = DF.named_node("TREASURE")

DEEP = DF.quad(
    DF.quad(S, P, DF.quad(DF.quad(S, TREASURE, O, G), P, O, G), G),
    P,
    O,
    G,
)


class TestResolvePath:
    def test_empty_path(self, quad_named_nodes):
        assert resolve_path(S, []) == S
        assert resolve_path(quad_named_nodes, []) == quad_named_nodes

    def test_single_segment(self, quad_named_nodes):
        assert resolve_path(quad_named_nodes, ["subject"]) == S
        assert resolve_path(quad_named_nodes, ["graph"]) == G

    def test_nested(self):
        q = DF.quad(DF.quad(S, TREASURE, O, G), P, O, G)
        assert resolve_path(q, ["subject", "predicate"]) == TREASURE

    def test_deeply_nested(self):
        assert resolve_path(DEEP, ["subject", "object", "subject", "predicate"]) == TREASURE

    def test_path_to_nested_quad(self):
        assert resolve_path(DEEP, ["subject", "object", "subject"]) == DF.quad(S, TREASURE, O, G)

    def test_accepts_tuple(self):
        assert resolve_path(DEEP, ("subject", "object", "subject", "predicate")) == TREASURE


class TestResolvePathErrors:
    def test_past_a_leaf(self):
        q = DF.quad(DF.quad(S, TREASURE, O, G), P, O, G)
        with pytest.raises(PathTraversalError) as exc_info:
            resolve_path(q, ["predicate", "object"])
        assert exc_info.value.position == "object"
        assert exc_info.value.term_type == "NamedNode"

    def test_message(self, quad_named_nodes):
        with pytest.raises(PathTraversalError, match="Tried to get predicate from term of type NamedNode"):
            resolve_path(quad_named_nodes, ["subject", "predicate"])

    def test_past_a_deep_leaf(self):
        with pytest.raises(PathTraversalError, match="Tried to get object from term of type NamedNode"):
            resolve_path(DEEP, ["subject", "object", "subject", "predicate", "object"])

    def test_literal_root(self):
        with pytest.raises(PathTraversalError, match="term of type Literal"):
            resolve_path(DF.literal("x"), ["subject"])

    def test_unknown_position(self, quad_named_nodes):
        with pytest.raises(PathTraversalError, match="Unknown quad position"):
            resolve_path(quad_named_nodes, ["context"])

    def test_is_quad_term_error(self, quad_named_nodes):
        with pytest.raises(QuadTermError):
            resolve_path(quad_named_nodes, ["object", "object"])
