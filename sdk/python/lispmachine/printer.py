"""Render lispmachine ASTs back to source text or JSON-able data."""

from typing import Any, Iterable

from .types import Node, NodeKind


def _quote(value: str) -> str:
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def to_source(nodes: Iterable[Node]) -> str:
    """Canonical source text for a program.

    For trees produced by `read`, reading the result gives back an equal
    tree. Hand-built symbols that are empty or contain delimiters or
    structural characters do not survive the trip.
    """
    out: list[str] = []
    # Each frame is [remaining siblings, first sibling not yet written].
    frames = [[iter(nodes), True]]
    while frames:
        frame = frames[-1]
        node = next(frame[0], None)
        if node is None:
            frames.pop()
            if frames:
                out.append(")")
            continue
        if not frame[1]:
            out.append(" ")
        frame[1] = False
        if node.kind is NodeKind.EXPRESSION:
            out.append("(")
            frames.append([iter(node.value), True])
        elif node.kind is NodeKind.STRING:
            out.append(_quote(node.value))
        else:
            out.append(node.value)
    return "".join(out)


def node_to_source(node: Node) -> str:
    return to_source((node,))


def node_to_data(node: Node) -> Any:
    if node.kind is NodeKind.SYMBOL:
        return {"symbol": node.value}
    if node.kind is NodeKind.STRING:
        return {"string": node.value}
    return [node_to_data(child) for child in node.value]


def to_data(nodes: Iterable[Node]) -> list:
    return [node_to_data(node) for node in nodes]
