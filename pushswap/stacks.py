"""The two stacks and the operations allowed on them."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Deque, Iterable, List, Optional, TextIO

_NAMES = ("a", "b")


@dataclass
class Stacks:
    """Stacks ``a`` and ``b``, top first, with a record of every operation done.

    Each operation that changes a stack is appended to ``operations`` and,
    when ``output`` is set, written to it on its own line. An operation on
    a stack with too few elements does nothing and is not recorded.
    """

    a: Deque[int] = field(default_factory=deque)
    b: Deque[int] = field(default_factory=deque)
    output: Optional[TextIO] = None
    operations: List[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not isinstance(self.a, deque):
            self.a = deque(self.a)
        if not isinstance(self.b, deque):
            self.b = deque(self.b)

    @classmethod
    def from_values(cls, values: Iterable[int], output: Optional[TextIO] = None) -> "Stacks":
        """Stacks with ``values`` in ``a`` (first value on top) and ``b`` empty."""
        return cls(deque(values), deque(), output)

    def _stack(self, name: str) -> Deque[int]:
        if name not in _NAMES:
            raise ValueError(f"stack name must be 'a' or 'b', got {name!r}")
        return self.a if name == "a" else self.b

    def _record(self, operation: str) -> None:
        self.operations.append(operation)
        if self.output is not None:
            self.output.write(operation + "\n")

    def swap(self, name: str) -> None:
        """Exchange the top two elements of the named stack."""
        stack = self._stack(name)
        if len(stack) < 2:
            return
        stack[0], stack[1] = stack[1], stack[0]
        self._record("s" + name)

    def rotate(self, name: str) -> None:
        """Move the top element of the named stack to its bottom."""
        stack = self._stack(name)
        if len(stack) < 2:
            return
        stack.rotate(-1)
        self._record("r" + name)

    def reverse_rotate(self, name: str) -> None:
        """Move the bottom element of the named stack to its top."""
        stack = self._stack(name)
        if len(stack) < 2:
            return
        stack.rotate(1)
        self._record("rr" + name)

    def push(self, name: str) -> None:
        """Move the top of the other stack onto the named stack."""
        target = self._stack(name)
        source = self.b if name == "a" else self.a
        if not source:
            return
        target.appendleft(source.popleft())
        self._record("p" + name)