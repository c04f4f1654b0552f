from schemer.evaluation.evaluator import evaluate
from schemer.evaluation.apply import apply
from schemer.evaluation.primitives import PRIMITIVES, unpack_num

__all__ = ["evaluate", "apply", "PRIMITIVES", "unpack_num"]
