"""A singly linked list of nodes that carry arbitrary content."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional


@dataclass(eq=False)
class Node:
    """One link of a list: its content and the node that follows it."""

    content: Any
    next: Optional["Node"] = None


class LinkedList:
    """A singly linked list with a head node."""

    def __init__(self, items: Optional[Iterable[Any]] = None) -> None:
        self.head: Optional[Node] = None
        for item in items or ():
            self.push_back(Node(item))

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def push_front(self, node: Node) -> None:
        """Put *node* at the head of the list."""
        if node is None:
            raise TypeError("cannot add None to a list")
        if self.head is not None:
            node.next = self.head
        self.head = node

    def push_back(self, node: Optional[Node]) -> None:
        """Link *node*, and whatever follows it, after the last node; None is ignored."""
        if node is None:
            return
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node

    def last(self) -> Optional[Node]:
        """Return the last node, or None for an empty list."""
        tail = None
        for tail in self._nodes():
            pass
        return tail

    def clear(self, delete: Optional[Callable[[Any], Any]]) -> None:
        """Pass each node's content to *delete* and empty the list.

        Without a *delete* callable the list is left as it is.
        """
        if delete is None:
            return
        for node in list(self._nodes()):
            delete(node.content)
        self.head = None

    def iterate(self, func: Optional[Callable[[Any], Any]]) -> None:
        """Call *func* on each node's content, head first."""
        if func is None:
            return
        for node in self._nodes():
            func(node.content)

    def map(
        self,
        func: Callable[[Any], Any],
        delete: Callable[[Any], Any],
    ) -> "LinkedList":
        """Return a new list of ``func(content)`` for every node.

        If *func* returns None for a node, the contents already produced are
        passed to *delete* and ValueError is raised.
        """
        if func is None or delete is None:
            raise TypeError("map needs both a function and a delete callable")
        result = LinkedList()
        for node in self._nodes():
            mapped = func(node.content)
            if mapped is None:
                result.clear(delete)
                raise ValueError("mapping function returned None")
            result.push_back(Node(mapped))
        return result

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        return (node.content for node in self._nodes())