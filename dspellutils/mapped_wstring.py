"""Text paired with a mapping of its positions back to raw buffer offsets."""

from __future__ import annotations

from bisect import bisect_left
from dataclasses import dataclass, field

__all__ = ["MappedWstring"]


@dataclass
class MappedWstring:
    """Decoded text plus, per character, its offset in the raw encoded buffer.

    An empty ``mapping`` means the identity mapping.
    """

    text: str = ""
    mapping: list[int] = field(default_factory=list)

    def to_original_index(self, index: int) -> int:
        return self.mapping[index] if self.mapping else index

    def from_original_index(self, index: int) -> int:
        return bisect_left(self.mapping, index) if self.mapping else index

    def original_length(self) -> int:
        return self.mapping[-1] if self.mapping else len(self.text)

    def append(self, other: MappedWstring) -> None:
        """Append ``other``, separated by a newline when both are non-empty."""
        if self.text and other.text:
            self.text += "\n"
        self.text += other.text
        self.mapping.extend(other.mapping)