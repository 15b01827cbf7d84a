"""
Views for rendering game snapshots.

This module provides view classes that translate immutable game snapshots
into concrete representations (terminal text or tensors).
"""

from views.text_view import TextView
from views.vector_view import VectorView

__all__ = ["TextView", "VectorView"]
