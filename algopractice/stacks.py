"""Stack and queue containers and a few stack algorithms."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from typing import Any

_OPENERS = {")": "(", "]": "[", "}": "{"}


class ArrayQueue:
    """A first-in, first-out queue."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._items: deque[Any] = deque(values)

    def push(self, value: Any) -> None:
        """Add ``value`` at the rear."""
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the item at the front.

        Raises IndexError when the queue is empty.
        """
        if not self._items:
            raise IndexError("pop from empty queue")
        return self._items.popleft()

    def __len__(self) -> int:
        return len(self._items)


class ArrayStack:
    """A last-in, first-out stack."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._items: list[Any] = list(values)

    def push(self, value: Any) -> None:
        """Put ``value`` on top."""
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the top item.

        Raises IndexError when the stack is empty.
        """
        if not self._items:
            raise IndexError("pop from empty stack")
        return self._items.pop()

    def __len__(self) -> int:
        return len(self._items)


def is_balanced(text: str) -> bool:
    """Tell whether the brackets ``()[]{}`` in ``text`` are properly nested.

    Any character that is not an opening bracket needs an open bracket
    pending; with none pending the text is rejected.
    """
    pending: list[str] = []
    for char in text:
        if char in "([{":
            pending.append(char)
            continue
        if not pending:
            return False
        opener = _OPENERS.get(char)
        if opener is None:
            continue
        if pending[-1] != opener:
            return False
        pending.pop()
    return not pending


def reverse_stack(stack: Iterable[Any]) -> list[Any]:
    """Return the stack (bottom first, top last) with its order reversed."""
    return list(reversed(list(stack)))


def sort_stack(stack: Iterable[Any]) -> list[Any]:
    """Return the stack (bottom first, top last) sorted so the largest is on top."""
    return sorted(stack)