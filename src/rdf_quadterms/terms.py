"""
Immutable RDF term model with quoted (nested) quads.

All terms are frozen dataclasses, so they are hashable and compare
structurally with ``==``. Each class carries a ``term_type`` discriminator
drawn from :class:`TermType`.

A :class:`Quad` is itself a term and may appear in any position of another
quad, which is how RDF-star quoted triples are represented.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar, Optional, Union


XSD_STRING = "http://www.w3.org/2001/XMLSchema#string"
RDF_LANG_STRING = "http://www.w3.org/1999/02/22-rdf-syntax-ns#langString"


class TermType(str, Enum):
    """Discriminator for the six term variants."""
    NAMED_NODE = "NamedNode"
    BLANK_NODE = "BlankNode"
    LITERAL = "Literal"
    VARIABLE = "Variable"
    DEFAULT_GRAPH = "DefaultGraph"
    QUAD = "Quad"


TERM_TYPES = [t.value for t in TermType]


class _TermMixin:
    """Shared behaviour for all term variants."""

    term_type: ClassVar[TermType]

    def equals(self, other: Any) -> bool:
        """Structural equality; ``None`` never equals a term."""
        return other is not None and self == other


# =============================================================================
# Atomic Terms
# =============================================================================

@dataclass(frozen=True)
class NamedNode(_TermMixin):
    """A resource identified by an IRI."""
    value: str

    term_type: ClassVar[TermType] = TermType.NAMED_NODE

    def __str__(self) -> str:
        return f"<{self.value}>"


@dataclass(frozen=True)
class BlankNode(_TermMixin):
    """A blank node (anonymous resource)."""
    value: str

    term_type: ClassVar[TermType] = TermType.BLANK_NODE

    def __str__(self) -> str:
        return f"_:{self.value}"


@dataclass(frozen=True)
class Literal(_TermMixin):
    """
    An RDF Literal value.

    A non-empty language tag implies the ``rdf:langString`` datatype;
    otherwise the datatype defaults to ``xsd:string``.
    """
    value: str
    language: str = ""
    datatype: NamedNode = field(default=NamedNode(XSD_STRING))

    term_type: ClassVar[TermType] = TermType.LITERAL

    def __post_init__(self):
        if self.language and self.datatype.value == XSD_STRING:
            object.__setattr__(self, "datatype", NamedNode(RDF_LANG_STRING))

    def __str__(self) -> str:
        base = f'"{self.value}"'
        if self.language:
            return f"{base}@{self.language}"
        if self.datatype.value != XSD_STRING:
            return f"{base}^^{self.datatype}"
        return base


@dataclass(frozen=True)
class Variable(_TermMixin):
    """
    A named placeholder (e.g., ?name).

    Only meaningful inside a pattern.
    """
    value: str

    term_type: ClassVar[TermType] = TermType.VARIABLE

    def __str__(self) -> str:
        return f"?{self.value}"


@dataclass(frozen=True)
class DefaultGraph(_TermMixin):
    """Sentinel for "no explicit graph"."""
    value: ClassVar[str] = ""

    term_type: ClassVar[TermType] = TermType.DEFAULT_GRAPH

    def __str__(self) -> str:
        return ""


# =============================================================================
# Quads
# =============================================================================

@dataclass(frozen=True)
class Quad(_TermMixin):
    """
    A quad of terms at subject, predicate, object and graph.

    Any position may hold another Quad. A quad whose graph is the
    DefaultGraph is a triple.
    """
    subject: "Term"
    predicate: "Term"
    object: "Term"
    graph: "Term" = field(default_factory=DefaultGraph)

    value: ClassVar[str] = ""
    term_type: ClassVar[TermType] = TermType.QUAD

    def is_triple(self) -> bool:
        return isinstance(self.graph, DefaultGraph)

    def __str__(self) -> str:
        parts = [str(self.subject), str(self.predicate), str(self.object)]
        if not self.is_triple():
            parts.append(str(self.graph))
        return "<< " + " ".join(parts) + " >>"


# Type alias for any term
Term = Union[NamedNode, BlankNode, Literal, Variable, DefaultGraph, Quad]


# =============================================================================
# Factory
# =============================================================================

class DataFactory:
    """
    Constructs terms and quads.

    Operations that build new quads accept any object with a compatible
    ``quad(subject, predicate, object, graph)`` method; this class is the
    default.
    """

    def __init__(self, blank_node_prefix: str = "df_"):
        self._blank_node_prefix = blank_node_prefix
        self._blank_node_counter = 0

    def named_node(self, value: str) -> NamedNode:
        return NamedNode(value)

    def blank_node(self, value: Optional[str] = None) -> BlankNode:
        """Create a blank node, generating a fresh label if none is given."""
        if value is None:
            value = f"{self._blank_node_prefix}{self._blank_node_counter}"
            self._blank_node_counter += 1
        return BlankNode(value)

    def literal(
        self,
        value: str,
        language_or_datatype: Optional[Union[str, NamedNode]] = None,
    ) -> Literal:
        """
        Create a literal.

        Args:
            value: Lexical form
            language_or_datatype: A language tag (str) or a datatype (NamedNode)
        """
        if isinstance(language_or_datatype, NamedNode):
            return Literal(value, datatype=language_or_datatype)
        if language_or_datatype:
            return Literal(value, language=language_or_datatype)
        return Literal(value)

    def variable(self, value: str) -> Variable:
        return Variable(value)

    def default_graph(self) -> DefaultGraph:
        return DefaultGraph()

    def quad(
        self,
        subject: Term,
        predicate: Term,
        object: Term,
        graph: Optional[Term] = None,
    ) -> Quad:
        """Create a quad; a missing graph means the default graph."""
        return Quad(subject, predicate, object, graph if graph is not None else DefaultGraph())

    def triple(self, subject: Term, predicate: Term, object: Term) -> Quad:
        return self.quad(subject, predicate, object)

    def from_term(self, term: Term) -> Term:
        """Rebuild a term through this factory (recursively for quads)."""
        if isinstance(term, Quad):
            return self.from_quad(term)
        if isinstance(term, NamedNode):
            return self.named_node(term.value)
        if isinstance(term, BlankNode):
            return self.blank_node(term.value)
        if isinstance(term, Literal):
            if term.language:
                return self.literal(term.value, term.language)
            return self.literal(term.value, self.named_node(term.datatype.value))
        if isinstance(term, Variable):
            return self.variable(term.value)
        if isinstance(term, DefaultGraph):
            return self.default_graph()
        raise TypeError(f"Not a term: {term!r}")

    def from_quad(self, quad: Quad) -> Quad:
        return self.quad(
            self.from_term(quad.subject),
            self.from_term(quad.predicate),
            self.from_term(quad.object),
            self.from_term(quad.graph),
        )


DEFAULT_FACTORY = DataFactory()
