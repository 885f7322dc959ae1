"""
Exception types raised at the LLM collaborator boundary.

The rule-based engine itself never raises on string input; these only
surface from the collaborator adapter and are absorbed by the
interaction service, which falls back to the deterministic path.
"""


class ArmiError(Exception):
    """Base class for package errors."""


class CollaboratorError(ArmiError):
    """The LLM collaborator returned nothing usable (empty or non-JSON content)."""
