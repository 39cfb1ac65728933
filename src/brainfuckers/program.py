from __future__ import annotations

from typing import Dict, List

from .errors import make_unmatched_bracket_error

OPCODES = '+-<>[].,'


def is_code_char(ch: str) -> bool:
    return ch in OPCODES


def build_bracket_map(source: str) -> Dict[int, int]:
    """
    Pair every '[' with its ']' in one forward scan.

    The returned dict maps each bracket position to its partner's position,
    in both directions. Raises UnmatchedBracketError for a ']' with nothing
    open, or for the innermost '[' still open at the end of the source.
    """
    stack: List[int] = []
    pairs: Dict[int, int] = {}

    for pos, ch in enumerate(source):
        if ch == '[':
            stack.append(pos)
        elif ch == ']':
            if not stack:
                raise make_unmatched_bracket_error(source=source, position=pos)
            start = stack.pop()
            pairs[start] = pos
            pairs[pos] = start

    if stack:
        raise make_unmatched_bracket_error(source=source, position=stack[-1])
    return pairs


class Program:
    """Immutable source text plus its precomputed bracket pairs."""

    def __init__(self, source: str):
        self._source = source
        self._pairs = build_bracket_map(source)

    @property
    def source(self) -> str:
        return self._source

    def match(self, pc: int) -> int:
        return self._pairs[pc]

    def __len__(self) -> int:
        return len(self._source)

    def __getitem__(self, pc: int) -> str:
        return self._source[pc]

    def __repr__(self) -> str:
        return f"Program(length={len(self._source)}, brackets={len(self._pairs)})"
