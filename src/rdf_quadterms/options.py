"""
Match options for the unification engine.

Options are passed per call; there is no global configuration.
"""
from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import Any, Dict, Optional

from rdf_quadterms.errors import OptionsError


@dataclass(frozen=True)
class MatchOptions:
    """
    Options for :func:`rdf_quadterms.matching.unify`.

    Attributes:
        skip_variable_binding: A pattern variable facing a candidate variable
            matches without being bound (for comparing two patterns)
        return_bindings: Return the binding map instead of True on success
    """
    skip_variable_binding: bool = False
    return_bindings: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "skip_variable_binding": self.skip_variable_binding,
            "return_bindings": self.return_bindings,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MatchOptions":
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise OptionsError(f"Unknown match option(s): {', '.join(unknown)}")
        for key, value in data.items():
            if not isinstance(value, bool):
                raise OptionsError(f"Match option {key} must be a bool, got {type(value).__name__}")
        return cls(
            skip_variable_binding=data.get("skip_variable_binding", False),
            return_bindings=data.get("return_bindings", False),
        )

    def merged(self, **overrides: Optional[bool]) -> "MatchOptions":
        """Copy with every non-None override applied."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        if not changes:
            return self
        return replace(self, **changes)
