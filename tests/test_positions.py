"""Tests for positional access to quad terms."""

import pytest

from rdf_quadterms import DataFactory, MalformedQuadError
from rdf_quadterms.positions import (
    QUAD_POSITIONS,
    TRIPLE_POSITIONS,
    NamedPosition,
    every_position,
    filter_position_names,
    filter_positions,
    for_each_position,
    from_named_positions,
    get_positions,
    map_positions,
    named_positions,
    reduce_positions,
    some_position,
)

DF = DataFactory()
S, P, O, G = (DF.named_node(v) for v in "spog")


class TestConstants:
    def test_positions(self):
        assert QUAD_POSITIONS == ["subject", "predicate", "object", "graph"]
        assert TRIPLE_POSITIONS == ["subject", "predicate", "object"]


class TestGetPositions:
    def test_quad(self, quad_named_nodes):
        assert get_positions(quad_named_nodes) == [S, P, O, G]

    def test_triple(self, triple_named_nodes):
        assert get_positions(triple_named_nodes) == [S, P, O, DF.default_graph()]

    def test_quad_omit_default_graph(self, quad_named_nodes):
        assert get_positions(quad_named_nodes, omit_default_graph=True) == [S, P, O, G]

    def test_triple_omit_default_graph(self, triple_named_nodes):
        assert get_positions(triple_named_nodes, omit_default_graph=True) == [S, P, O]


class TestNamedPositions:
    def test_named_positions(self, quad_named_nodes):
        assert named_positions(quad_named_nodes) == [
            NamedPosition("subject", S),
            NamedPosition("predicate", P),
            NamedPosition("object", O),
            NamedPosition("graph", G),
        ]

    def test_round_trip(self, quad_named_nodes, triple_named_nodes, quoted_quad):
        for q in (quad_named_nodes, triple_named_nodes, quoted_quad):
            assert from_named_positions(named_positions(q)) == q

    def test_custom_factory(self, quad_named_nodes):
        factory = DataFactory()
        assert from_named_positions(named_positions(quad_named_nodes), factory=factory) == quad_named_nodes

    def test_default_fn_not_called_when_complete(self, quad_named_nodes):
        calls = []
        from_named_positions(named_positions(quad_named_nodes), lambda name: calls.append(name))
        assert calls == []

    @pytest.mark.parametrize("missing", QUAD_POSITIONS)
    def test_default_fn_fills_missing(self, quad_named_nodes, missing):
        entries = [e for e in named_positions(quad_named_nodes) if e.name != missing]
        result = from_named_positions(entries, lambda name: DF.variable(name))
        assert getattr(result, missing) == DF.variable(missing)
        for name in QUAD_POSITIONS:
            if name != missing:
                assert getattr(result, name) == getattr(quad_named_nodes, name)

    def test_missing_without_default_fn(self):
        with pytest.raises(MalformedQuadError) as exc_info:
            from_named_positions([NamedPosition("subject", S), NamedPosition("object", O)])
        assert exc_info.value.missing == ["predicate", "graph"]

    def test_default_fn_returning_none(self):
        entries = [NamedPosition("subject", S), NamedPosition("predicate", P), NamedPosition("object", O)]
        with pytest.raises(MalformedQuadError, match="graph"):
            from_named_positions(entries, lambda name: None)

    def test_unknown_position(self):
        with pytest.raises(MalformedQuadError, match="Unknown"):
            from_named_positions([NamedPosition("context", S)])


class TestForEachPosition:
    def test_order(self, quad_named_nodes):
        seen = []
        for_each_position(quad_named_nodes, lambda term, name: seen.append((term, name)))
        assert seen == [(S, "subject"), (P, "predicate"), (O, "object"), (G, "graph")]

    def test_triple_includes_default_graph(self, triple_named_nodes):
        seen = []
        for_each_position(triple_named_nodes, lambda term, name: seen.append(term))
        assert seen == [S, P, O, DF.default_graph()]


class TestFilter:
    def test_always_false(self, quad_named_nodes):
        assert filter_positions(quad_named_nodes, lambda t, n: False) == []
        assert filter_position_names(quad_named_nodes, lambda t, n: False) == []

    def test_always_true(self, quad_named_nodes):
        assert filter_positions(quad_named_nodes, lambda t, n: True) == [S, P, O, G]
        assert filter_position_names(quad_named_nodes, lambda t, n: True) == QUAD_POSITIONS

    def test_by_value(self, quad_named_nodes):
        assert filter_positions(quad_named_nodes, lambda t, n: t.value == "s") == [S]
        assert filter_position_names(quad_named_nodes, lambda t, n: t.value == "o") == ["object"]

    def test_by_name(self, quad_named_nodes):
        assert filter_positions(quad_named_nodes, lambda t, n: n == "predicate") == [P]


class TestMapPositions:
    def test_identity(self, quad_named_nodes):
        assert map_positions(quad_named_nodes, lambda t, n: t) == quad_named_nodes

    def test_custom_factory(self, quad_named_nodes):
        assert map_positions(quad_named_nodes, lambda t, n: t, DataFactory()) == quad_named_nodes

    def test_variables_for_subject_and_object(self, quad_named_nodes):
        result = map_positions(
            quad_named_nodes,
            lambda t, n: DF.variable(n) if n in ("subject", "object") else t,
        )
        assert result == DF.quad(DF.variable("subject"), P, DF.variable("object"), G)
        assert quad_named_nodes.subject == S


class TestReducePositions:
    def test_concat_values(self, quad_named_nodes):
        assert reduce_positions(quad_named_nodes, lambda acc, t, n: acc + t.value, "") == "spog"

    def test_concat_names(self, quad_named_nodes):
        assert reduce_positions(quad_named_nodes, lambda acc, t, n: acc + n, "") == "subjectpredicateobjectgraph"


class TestEverySome:
    def test_every(self, quad_named_nodes, quad_variables, quad_mixed):
        is_named = lambda t, n: t.term_type == "NamedNode"
        assert every_position(quad_named_nodes, is_named)
        assert not every_position(quad_variables, is_named)
        assert not every_position(quad_mixed, is_named)

    def test_some(self, quad_named_nodes, quad_variables, quad_mixed):
        is_named = lambda t, n: t.term_type == "NamedNode"
        assert some_position(quad_named_nodes, is_named)
        assert not some_position(quad_variables, is_named)
        assert some_position(quad_mixed, is_named)

    def test_every_evaluates_all_positions(self, quad_variables):
        seen = []

        def check(term, name):
            seen.append(name)
            return False

        assert not every_position(quad_variables, check)
        assert seen == QUAD_POSITIONS

    def test_some_evaluates_all_positions(self, quad_named_nodes):
        seen = []

        def check(term, name):
            seen.append(name)
            return True

        assert some_position(quad_named_nodes, check)
        assert seen == QUAD_POSITIONS
