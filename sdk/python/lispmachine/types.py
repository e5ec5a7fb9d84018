from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Union


class LexemeKind(Enum):
    OPEN_BRACKET = "open-bracket"
    CLOSE_BRACKET = "close-bracket"
    SYMBOL = "symbol"
    STRING = "string"


class NodeKind(Enum):
    EXPRESSION = "expression"
    SYMBOL = "symbol"
    STRING = "string"


_VALUED_LEXEMES = (LexemeKind.SYMBOL, LexemeKind.STRING)


@dataclass(frozen=True)
class Lexeme:
    kind: LexemeKind
    value: Optional[str] = None
    # Offset of the first source character; not part of equality.
    position: Optional[int] = field(default=None, compare=False)

    def __post_init__(self):
        if not isinstance(self.kind, LexemeKind):
            raise ValueError(f"unknown lexeme kind {self.kind!r}")
        if self.kind in _VALUED_LEXEMES:
            if not isinstance(self.value, str):
                raise ValueError(f"{self.kind.value} lexeme requires a text value")
        elif self.value is not None:
            raise ValueError(f"{self.kind.value} lexeme carries no value")


@dataclass(frozen=True)
class Node:
    """One AST element.

    SYMBOL and STRING nodes hold text; an EXPRESSION node holds a tuple
    of child nodes.
    """

    kind: NodeKind
    value: Union[str, tuple["Node", ...]]

    def __post_init__(self):
        if not isinstance(self.kind, NodeKind):
            raise ValueError(f"unknown node kind {self.kind!r}")
        if self.kind is NodeKind.EXPRESSION:
            if not isinstance(self.value, (tuple, list)):
                raise ValueError(f"expression node requires a sequence of children, got {self.value!r}")
            children = tuple(self.value)
            for child in children:
                if not isinstance(child, Node):
                    raise ValueError(f"expression child must be a Node, got {child!r}")
            object.__setattr__(self, "value", children)
        elif not isinstance(self.value, str):
            raise ValueError(f"{self.kind.value} node requires a text value")

    @classmethod
    def symbol(cls, value: str) -> "Node":
        return cls(NodeKind.SYMBOL, value)

    @classmethod
    def string(cls, value: str) -> "Node":
        return cls(NodeKind.STRING, value)

    @classmethod
    def expression(cls, children) -> "Node":
        return cls(NodeKind.EXPRESSION, tuple(children))

    @property
    def children(self) -> tuple["Node", ...]:
        if self.kind is not NodeKind.EXPRESSION:
            raise TypeError(f"{self.kind.value} node has no children")
        return self.value

    @property
    def depth(self) -> int:
        """Bracket nesting depth: 0 for leaves."""
        deepest = 0
        pending = [(self, 0)]
        while pending:
            node, level = pending.pop()
            if node.kind is NodeKind.EXPRESSION:
                level += 1
                deepest = max(deepest, level)
                pending.extend((child, level) for child in node.value)
        return deepest
