"""
Opening-hours AST node types.
"""

from openinghours.element import Element
from openinghours.modifier import InvalidModifierError, ModifierKind, RuleModifier

__all__ = [
    "Element",
    "InvalidModifierError",
    "ModifierKind",
    "RuleModifier",
]
