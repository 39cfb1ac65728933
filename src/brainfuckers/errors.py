from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple


def _locate(source: str, position: int) -> Tuple[int, int]:
    # 1-based line and column of source[position]
    line = source.count('\n', 0, position) + 1
    line_start = source.rfind('\n', 0, position) + 1
    return line, position - line_start + 1


def _build_context(source: str, line_no_1: int, column: int) -> str:
    lines = source.split('\n')
    text = lines[line_no_1 - 1] if 0 < line_no_1 <= len(lines) else ''
    gutter = f"> {line_no_1:4d} | "
    caret = ' ' * (len(gutter) + column - 1) + '^'
    return f"{gutter}{text}\n{caret}"


def _hint_for(bracket: str) -> Optional[str]:
    if bracket == '[':
        return 'Every "[" needs a matching "]" later in the program.'
    if bracket == ']':
        return 'This "]" closes nothing. Check for an extra "]" or a missing "[" before it.'
    return None


@dataclass
class BFError(Exception):
    message: str

    def __str__(self) -> str:
        return self.message


@dataclass
class UnmatchedBracketError(BFError):
    bracket: str
    position: int
    line: int
    column: int
    context: str


def make_unmatched_bracket_error(*, source: str, position: int) -> UnmatchedBracketError:
    bracket = source[position]
    line, column = _locate(source, position)
    ctx = _build_context(source, line, column)
    hint = _hint_for(bracket)
    hint_block = f"\nHint: {hint}" if hint else ""
    return UnmatchedBracketError(
        message=(
            f"UnmatchedBracketError: unmatched '{bracket}' at position {position} "
            f"(line {line}, column {column})\n{ctx}{hint_block}"
        ),
        bracket=bracket,
        position=position,
        line=line,
        column=column,
        context=ctx,
    )
