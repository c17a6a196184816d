"""Tree-walking evaluator for tinylang. Every node evaluates to an integer; Assign also updates the variable store and
PrintStmt also writes its value on its own line.
"""

from tinylang.lang.error import EvalError
from tinylang.lang.syntax import Assign, BinaryAdd, Number, PrintStmt, Variable


class Evaluator:
    """Evaluates syntax trees against a variable store (dict of name: int), which lives as long as this object."""

    def __init__(self, store=None, stream=None):
        self.store = store if store is not None else {}
        self.stream = stream  # None means sys.stdout at print time

    def evaluate(self, node):
        if isinstance(node, Number):
            return node.value

        elif isinstance(node, Variable):
            try:
                return self.store[node.name]
            except KeyError:
                raise self._undefined(node) from None

        elif isinstance(node, BinaryAdd):
            # walks the left spine in a loop, so long chains like 1 + 1 + ... + 1 do not recurse per term
            rights = []
            while isinstance(node, BinaryAdd):
                rights.append(node.right)
                node = node.left

            value = self.evaluate(node)
            for right in reversed(rights):
                value += self.evaluate(right)
            return value

        elif isinstance(node, Assign):
            value = self.evaluate(node.value)
            self.store[node.name] = value
            return value

        elif isinstance(node, PrintStmt):
            value = self.evaluate(node.expr)
            print(value, file=self.stream)
            return value

        raise TypeError(f"cannot evaluate {type(node).__name__}")

    @staticmethod
    def _undefined(node):
        if node.token is None:
            return EvalError("undefined variable: {}", node.name)
        return EvalError("undefined variable: {}", node.name, line_num=node.token.line, start=node.token.column - 1)


def evaluate(node, store, stream=None):
    """Returns value of node, evaluated against store."""
    return Evaluator(store, stream).evaluate(node)
