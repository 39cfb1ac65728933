#!/usr/bin/env python3
"""
Bracket pairing and unmatched-bracket diagnostics.
"""

import sys
import os
sys.path.append(os.path.join(os.path.dirname(__file__), '..', 'src'))

import pytest

from brainfuckers.errors import BFError, UnmatchedBracketError
from brainfuckers.program import Program, build_bracket_map, is_code_char


def test_pairs_nested_brackets():
    program = Program("+[>[-]<-]")
    assert program.match(1) == 8
    assert program.match(8) == 1
    assert program.match(3) == 5
    assert program.match(5) == 3


def test_non_operators_do_not_affect_pairing():
    pairs = build_bracket_map("a[b[c]d]e")
    assert pairs == {1: 7, 7: 1, 3: 5, 5: 3}


def test_program_is_indexable():
    program = Program("a+.b")
    assert len(program) == 4
    assert program[1] == '+'
    assert program.source == "a+.b"


def test_is_code_char():
    assert all(is_code_char(c) for c in '+-<>[].,')
    assert not is_code_char('a')
    assert not is_code_char('#')


def test_lone_open_bracket():
    with pytest.raises(UnmatchedBracketError) as exc:
        Program("[")
    err = exc.value
    assert err.bracket == '['
    assert err.position == 0
    assert (err.line, err.column) == (1, 1)
    assert "unmatched '['" in str(err)


def test_lone_close_bracket():
    with pytest.raises(UnmatchedBracketError) as exc:
        Program("+]")
    assert exc.value.bracket == ']'
    assert exc.value.position == 1


def test_innermost_open_bracket_is_reported():
    with pytest.raises(UnmatchedBracketError) as exc:
        Program("+[[]")
    assert exc.value.position == 1


def test_error_location_and_context():
    with pytest.raises(UnmatchedBracketError) as exc:
        Program("++\n +]")
    err = exc.value
    assert (err.line, err.column) == (2, 3)
    assert err.context.splitlines()[0].endswith(" +]")
    assert err.context.splitlines()[1].endswith("^")
    assert "Hint:" in str(err)


def test_unmatched_bracket_is_a_bf_error():
    with pytest.raises(BFError):
        Program("]")
