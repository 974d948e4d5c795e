"""Shared term fixtures."""

import pytest

from rdf_quadterms import DataFactory

DF = DataFactory()


@pytest.fixture
def quad_named_nodes():
    return DF.quad(DF.named_node("s"), DF.named_node("p"), DF.named_node("o"), DF.named_node("g"))


@pytest.fixture
def quad_variables():
    return DF.quad(DF.variable("s"), DF.variable("p"), DF.variable("o"), DF.variable("g"))


@pytest.fixture
def quad_mixed():
    return DF.quad(DF.variable("s"), DF.named_node("p"), DF.variable("o"), DF.named_node("g"))


@pytest.fixture
def triple_named_nodes():
    return DF.triple(DF.named_node("s"), DF.named_node("p"), DF.named_node("o"))


def _leaf_quad(suffix):
    return DF.quad(
        DF.named_node(f"s{suffix}"),
        DF.named_node(f"p{suffix}"),
        DF.named_node(f"o{suffix}"),
        DF.named_node(f"g{suffix}"),
    )


@pytest.fixture
def quoted_quad():
    """Every position quotes a quad; the subject is nested two levels deep."""
    return DF.quad(
        DF.quad(_leaf_quad("1.1"), DF.named_node("p1"), DF.named_node("o1"), DF.named_node("g1")),
        _leaf_quad("2"),
        _leaf_quad("3"),
        _leaf_quad("4"),
    )


@pytest.fixture
def quoted_quad_mixed():
    """Like quoted_quad, with two literal leaves."""
    return DF.quad(
        DF.quad(_leaf_quad("1.1"), DF.named_node("p1"), DF.literal("o1"), DF.named_node("g1")),
        _leaf_quad("2"),
        DF.quad(DF.named_node("s3"), DF.named_node("p3"), DF.literal("o3"), DF.named_node("g3")),
        _leaf_quad("4"),
    )
