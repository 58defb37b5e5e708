"""A text buffer with explicit copy and ownership-transfer operations."""

from __future__ import annotations

from typing import Optional


class ResourceWrapper:
    """Owns a private buffer holding a string; the buffer may be handed over."""

    def __init__(self, text: Optional[str] = "") -> None:
        if text is None:
            text = ""
        self._buffer: Optional[bytearray] = bytearray(text.encode("utf-8"))
        self._size = len(self._buffer) + 1

    @property
    def data(self) -> Optional[str]:
        """The held text, or None once the buffer has been handed over."""
        return None if self._buffer is None else self._buffer.decode("utf-8")

    @property
    def size(self) -> int:
        """Buffer size including the terminator; 0 when empty."""
        return self._size

    def copy(self) -> "ResourceWrapper":
        """Return a wrapper with its own copy of the buffer."""
        clone = ResourceWrapper.__new__(ResourceWrapper)
        if self._buffer is None:
            clone._buffer, clone._size = None, 0
        else:
            clone._buffer, clone._size = bytearray(self._buffer), self._size
        return clone

    def take(self) -> "ResourceWrapper":
        """Return a wrapper that owns this buffer, leaving this one empty."""
        target = ResourceWrapper.__new__(ResourceWrapper)
        target._buffer, target._size = self._buffer, self._size
        self._buffer, self._size = None, 0
        return target

    def assign(self, other: "ResourceWrapper") -> "ResourceWrapper":
        """Replace this buffer with a copy of ``other``'s."""
        if other is not self:
            clone = other.copy()
            self._buffer, self._size = clone._buffer, clone._size
        return self

    def take_from(self, other: "ResourceWrapper") -> "ResourceWrapper":
        """Take over ``other``'s buffer, leaving ``other`` empty."""
        if other is not self:
            self._buffer, self._size = other._buffer, other._size
            other._buffer, other._size = None, 0
        return self

    def describe(self, prefix: str = "") -> str:
        """Return a one-line description of the contents, size and buffer identity."""
        if self._buffer is None:
            body = f"ResourceWrapper data: null (size: {self._size}, addr: null)"
        else:
            body = (
                f'ResourceWrapper data: "{self.data}" '
                f"(size: {self._size}, addr: 0x{id(self._buffer):x})"
            )
        return prefix + body

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ResourceWrapper):
            return NotImplemented
        if self._size != other._size:
            return False
        if self._buffer is None and other._buffer is None:
            return True
        if self._buffer is None or other._buffer is None:
            return False
        return self._buffer == other._buffer

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"ResourceWrapper({self.data!r})"