"""
Reconciliation package: merge, display normalization and roster edits.
"""

from .display import normalize
from .merge import merge

__all__ = ["merge", "normalize"]
