from toylang.evaluation.evaluator import evaluate

__all__ = ["evaluate"]
