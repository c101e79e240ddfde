from minischeme.evaluation.evaluator import evaluate

__all__ = ["evaluate"]
