"""An ordered list of typed hash strings that can be concatenated by type."""

from __future__ import annotations

import sys
from dataclasses import dataclass

_TYPE_MAX = 0xFF


def _check_type(value: int) -> int:
    if not 0 <= value <= _TYPE_MAX:
        raise ValueError(f"node type must be in 0..{_TYPE_MAX}, got {value}")
    return value


def str_concat(a: str, b: str) -> str:
    """Return a new string made of ``a`` followed by ``b``."""
    return a + b


@dataclass(frozen=True)
class StringProcNode:
    """One entry of a :class:`StringProcList`: a type tag and a hash string."""

    type: int
    hash: str

    def __post_init__(self) -> None:
        _check_type(self.type)


class StringProcList:
    """Nodes kept in insertion order."""

    def __init__(self):
        self._nodes: list[StringProcNode] = []

    @property
    def first(self):
        """The first node, or None when the list is empty."""
        return self._nodes[0] if self._nodes else None

    @property
    def last(self):
        """The last node, or None when the list is empty."""
        return self._nodes[-1] if self._nodes else None

    def add_node(self, type: int, hash: str) -> StringProcNode:
        """Append a node with the given type and hash and return it."""
        node = StringProcNode(type, hash)
        self._nodes.append(node)
        return node

    def concat(self, type: int, hash: str) -> str:
        """Return ``hash`` followed by the hashes of every node of ``type``, in order."""
        _check_type(type)
        result = hash
        for node in self._nodes:
            if node.type == type:
                result = str_concat(result, node.hash)
        return result

    def print_to(self, file=None) -> None:
        """Write the length of the list and each node to ``file``."""
        out = file if file is not None else sys.stdout
        out.write(f"List length: {len(self._nodes)}\n")
        for node in self._nodes:
            out.write(f"\tnode hash: {node.hash} | type: {node.type}\n")

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self):
        return iter(self._nodes)