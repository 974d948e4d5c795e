"""
Exceptions raised by rdf_quadterms.

A failed match is never an error; these are reserved for malformed input.
"""

from typing import List, Optional


class QuadTermError(Exception):
    """Base class for all rdf_quadterms errors."""
    pass


class PathTraversalError(QuadTermError):
    """Raised when a positional path continues past a non-quad term."""

    def __init__(self, position: str, term_type: str, message: Optional[str] = None):
        self.position = position
        self.term_type = term_type
        super().__init__(
            message or f"Tried to get {position} from term of type {term_type}"
        )


class MalformedQuadError(QuadTermError):
    """Raised when named positions cannot be collected into a complete quad."""

    def __init__(self, missing: List[str], message: Optional[str] = None):
        self.missing = list(missing)
        super().__init__(
            message or f"Missing term for position(s): {', '.join(self.missing)}"
        )


class OptionsError(QuadTermError):
    """Match options validation error."""
    pass


class InteropError(QuadTermError):
    """Raised when a value cannot be converted to or from pyoxigraph."""
    pass
