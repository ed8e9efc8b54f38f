from .completeness import score

__all__ = ["score"]
