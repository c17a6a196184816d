"""Abstract syntax tree for tinylang statements.

```
<stmt>   ::= <identifier> "=" <expr>    ; Assign
           | "print" <expr>             ; PrintStmt
<expr>   ::= <term> ("+" <term>)*       ; BinaryAdd, associating by left: a + b + c = ((a + b) + c)
<term>   ::= <number>                   ; Number
           | <identifier>               ; Variable
```

Each node exclusively owns its children, and a statement's tree is dropped once it has been evaluated.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from tinylang.lang.lexical import Token


class Node(ABC):
    """Superclass of all tinylang syntax tree nodes."""

    @property
    @abstractmethod
    def nodes(self):
        """Child nodes, in evaluation order."""

    @property
    @abstractmethod
    def label(self):
        """Short description of this node, without its children."""

    def display(self, indents=0):
        """Recursively displays tree with readable format.

        Format:
        <Node>(<label>, nodes=[
            <Node>(<label>)  # <-- if nodes is empty
            ...
        ])
        """
        result = f"{'    ' * indents}{type(self).__name__}({self.label}"
        if self.nodes:
            result += ", nodes=["
            for node in self.nodes:
                result += "\n" + node.display(indents + 1) + ","
            result = result[:-1] + f"\n{'    ' * indents}]"
        return result + ")"


@dataclass(frozen=True)
class Number(Node):
    value: int

    @property
    def nodes(self):
        return ()

    @property
    def label(self):
        return str(self.value)


@dataclass(frozen=True)
class Variable(Node):
    """Reference to a variable. token is kept to locate undefined variable errors."""
    name: str
    token: Token = field(default=None, compare=False, repr=False)

    @property
    def nodes(self):
        return ()

    @property
    def label(self):
        return repr(self.name)


@dataclass(frozen=True)
class BinaryAdd(Node):
    """left + right. A chain a + b + c is nested on the left: BinaryAdd(BinaryAdd(a, b), c)."""
    left: Node
    right: Node

    @property
    def nodes(self):
        """Operands of the whole chain of additions rooted here, left to right (a, b, c for a + b + c)."""
        operands = []
        node = self
        while isinstance(node, BinaryAdd):
            operands.append(node.right)
            node = node.left
        operands.append(node)
        return tuple(reversed(operands))

    @property
    def label(self):
        return "'+'"


@dataclass(frozen=True)
class Assign(Node):
    name: str
    value: Node

    @property
    def nodes(self):
        return self.value,

    @property
    def label(self):
        return repr(self.name)


@dataclass(frozen=True)
class PrintStmt(Node):
    expr: Node

    @property
    def nodes(self):
        return self.expr,

    @property
    def label(self):
        return "'print'"
