"""
Base class for opening-hours AST nodes.
"""

from abc import ABC, abstractmethod


class Element(ABC):
    """Base AST node. Every node renders to its canonical text via __str__."""

    @abstractmethod
    def copy(self) -> "Element":
        """Return an independent structural copy of this node."""
        ...
