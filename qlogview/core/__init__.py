"""
Core interfaces for plugging parsers and trace groups into qlogview.
"""

from qlogview.core.interfaces import ConnectionOwner, EventParser, FieldDeclarationSource

__all__ = [
    "EventParser",
    "ConnectionOwner",
    "FieldDeclarationSource",
]
