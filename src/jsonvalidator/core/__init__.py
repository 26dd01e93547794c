"""
Validation engine.

``check_type`` is the recursive entry point; per-type keyword checks live in
``constraints``.
"""

from jsonvalidator.core.type_checker import TYPE_PREDICATES, check_type

__all__ = ["TYPE_PREDICATES", "check_type"]
