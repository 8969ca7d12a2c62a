"""
calschema.geometry.discrete
---------------------------
Finite sequences used by the Troesch analyzer.

  CodeArray   period lengths (codes), e.g. the lengths of the months of a year
  BoolArray   a code of height 1 seen as a word on {0, 1} (code - min)
  SliceArray  distances between consecutive 1's of a BoolArray
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional, Sequence, Tuple

from .forms import QuasiAffineForm


class CodeArray(Sequence[int]):
    """A non-empty, read-only, finite sequence of non-negative codes."""

    __slots__ = ("_codes", "_min", "_max")

    def __init__(self, codes: Sequence[int]):
        codes = tuple(int(c) for c in codes)
        if not codes:
            raise ValueError("codes must not be empty")
        if any(c < 0 for c in codes):
            raise ValueError("codes must be non-negative")
        self._codes = codes
        self._min = min(codes)
        self._max = max(codes)

    # ---------------------------------------------------------
    # Sequence protocol
    # ---------------------------------------------------------

    def __len__(self) -> int:
        return len(self._codes)

    def __getitem__(self, index):
        if isinstance(index, slice):
            return CodeArray(self._codes[index])
        return self._codes[index]

    def __iter__(self) -> Iterator[int]:
        return iter(self._codes)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, CodeArray):
            return self._codes == other._codes
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._codes)

    def __repr__(self) -> str:
        return f"CodeArray({list(self._codes)})"

    # ---------------------------------------------------------
    # Properties
    # ---------------------------------------------------------

    @property
    def min(self) -> int:
        return self._min

    @property
    def max(self) -> int:
        return self._max

    @property
    def height(self) -> int:
        return self._max - self._min

    @property
    def constant(self) -> bool:
        return self.height == 0

    @property
    def reducible(self) -> bool:
        """Convertible to a BoolArray, i.e. height 0 or 1."""
        return self.height < 2

    @property
    def strictly_reducible(self) -> bool:
        """A non-constant code convertible to a BoolArray."""
        return self.height == 1

    # ---------------------------------------------------------
    # Conversions and manipulations
    # ---------------------------------------------------------

    def to_bool_array(self) -> "BoolArray":
        if not self.reducible:
            raise ValueError(f"{self!r} is not reducible (height {self.height})")
        lo = self._min
        return BoolArray(c - lo == 1 for c in self._codes)

    def to_form(self) -> QuasiAffineForm:
        """
        The form (min, 1, 0). Only defined for a constant code; the converse
        is not a function since (4, 1, 0) is the form of {4}, {4, 4}, ...
        """
        if not self.constant:
            raise ValueError(f"{self!r} is not constant")
        return QuasiAffineForm(self._min, 1, 0)

    def rotate(self, start: int) -> "CodeArray":
        if not (0 < start < len(self)):
            raise ValueError(f"start must be in 1..{len(self) - 1}, got {start}")
        return CodeArray(self._codes[start:] + self._codes[:start])

    def slice(self, start: int, length: int) -> "CodeArray":
        if start < 0 or length < 1 or start + length > len(self):
            raise ValueError(f"invalid slice ({start}, {length}) of a code of length {len(self)}")
        return CodeArray(self._codes[start:start + length])

    def append(self, value: int) -> "CodeArray":
        if value < 0:
            raise ValueError("value must be non-negative")
        return CodeArray(self._codes + (value,))

    def is_almost_reducible(self) -> Optional[Tuple["CodeArray", int]]:
        """
        A code is almost reducible if it is not reducible but becomes so once
        a single element is removed. On success returns (new_code, start):

          start == 0   new_code = code[:-1], the removed code is code[-1]
          start > 0    new_code = code.rotate(start)[:-1], the removed code
                       is code[start - 1]

        With two elements, e.g. {4, 2}, both truncations are reducible; the
        first element is kept.
        """
        if self.reducible:
            return None
        if len(self) == 2:
            return CodeArray((self._codes[0],)), 0

        index = self._find_exceptional_index()
        if index is None:
            return None
        start = (index + 1) % len(self)
        new_code = self[:-1] if start == 0 else self.rotate(start)[:-1]
        return new_code, start

    def _find_exceptional_index(self) -> Optional[int]:
        # Either Min's and (Min + 1)'s plus a single Max, or (Max - 1)'s and
        # Max's plus a single Min.
        lo, hi = self._min, self._max
        ko_min = ko_max = False
        index_of_min = index_of_max = -1
        for i, c in enumerate(self._codes):
            if not ko_max and c > lo + 1:
                if c == hi and index_of_max == -1:
                    index_of_max = i
                else:
                    ko_max = True
            if not ko_min and c < hi - 1:
                if c == lo and index_of_min == -1:
                    index_of_min = i
                else:
                    ko_min = True
            if ko_min and ko_max:
                return None
        return index_of_max if ko_min else index_of_min


class BoolArray(Sequence[bool]):
    __slots__ = ("_bits",)

    def __init__(self, bits):
        self._bits = tuple(bool(b) for b in bits)
        if not self._bits:
            raise ValueError("bits must not be empty")

    def __len__(self) -> int:
        return len(self._bits)

    def __getitem__(self, index):
        return self._bits[index]

    def __iter__(self) -> Iterator[bool]:
        return iter(self._bits)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, BoolArray):
            return self._bits == other._bits
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._bits)

    def __repr__(self) -> str:
        return "BoolArray(" + "".join("1" if b else "0" for b in self._bits) + ")"

    def is_true_isolated(self) -> bool:
        """True if no two consecutive elements are both true."""
        return not any(a and b for a, b in zip(self._bits, self._bits[1:]))

    def negate(self) -> "BoolArray":
        return BoolArray(not b for b in self._bits)

    def slice(self) -> "SliceArray":
        """
        Cut the word after each 1. Positions are 1-based and the first slice
        starts at the virtual position 0; a word not ending with a 1 gets a
        terminal truncated slice, as if a 1 followed it.

            0010 -> [3, 2] truncated      1011 -> [1, 2, 1] complete
        """
        slices = []
        last = 0
        for pos, bit in enumerate(self._bits, start=1):
            if bit:
                slices.append(pos - last)
                last = pos
        complete = self._bits[-1]
        if not complete:
            slices.append(len(self._bits) + 1 - last)
        return SliceArray(tuple(slices), complete)


@dataclass(frozen=True)
class SliceArray:
    slices: Tuple[int, ...]
    complete: bool

    def __post_init__(self) -> None:
        if not self.slices:
            raise ValueError("slices must not be empty")
        if any(s <= 0 for s in self.slices):
            raise ValueError("slices must be positive")

    def __len__(self) -> int:
        return len(self.slices)

    def __iter__(self) -> Iterator[int]:
        return iter(self.slices)

    def __getitem__(self, index: int) -> int:
        return self.slices[index]

    def count_internal_slices(self) -> int:
        if len(self.slices) == 1:
            # A single external slice.
            return 0
        return len(self.slices) - 1 - (0 if self.complete else 1)

    def remove_minor_externals(self) -> Tuple[CodeArray, int]:
        """
        Drop the external slices that are shorter than the internal ones.
        Returns (code, g), g being the length of the removed initial slice
        (0 if the initial slice is kept).
        """
        s = self.slices
        if len(s) == 1:
            return CodeArray(s), 0
        if self.complete:
            return self._when_complete()
        if len(s) == 2:
            return self._when_degenerate()
        return self._when_truncated()

    def _when_complete(self) -> Tuple[CodeArray, int]:
        init, interns = self.slices[0], self.slices[1:]
        if init > min(interns):
            return CodeArray(self.slices), 0
        return CodeArray(interns), init

    def _when_degenerate(self) -> Tuple[CodeArray, int]:
        # Two external slices, no internal one.
        init, term = self.slices
        if init < term:
            return CodeArray((term,)), init
        if init == term:
            return CodeArray(self.slices), 0
        return CodeArray((init,)), 0

    def _when_truncated(self) -> Tuple[CodeArray, int]:
        s = self.slices
        init, term, interns = s[0], s[-1], s[1:-1]
        lo = min(interns)
        if init > lo:
            return CodeArray(s if term > lo else s[:-1]), 0
        return CodeArray(s[1:] if term > lo else interns), init
