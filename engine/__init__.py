from .batch import evaluate_batch

__all__ = ["evaluate_batch"]
