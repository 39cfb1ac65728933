from __future__ import annotations

import logging
from typing import BinaryIO, Optional

from .options import RunOptions
from .program import Program, is_code_char
from .state import ExecutorState

logger = logging.getLogger(__name__)

NEWLINE = 0x0A


class Interpreter:
    """
    Brainfuck executor.

    Runs a Program against a fresh Tape, reading ',' input from ``stdin``
    and writing '.' output to ``stdout``. Both are binary streams.

    Semantics:
    - Cells wrap modulo 256 in both directions
    - ',' at end of input stores 0
    - Characters other than the 8 opcodes are skipped
    - There is no step limit; a program that loops forever runs forever

    Unmatched brackets are detected when the Program is built, before any
    instruction runs.
    """

    def __init__(
        self,
        source: str,
        *,
        stdin: BinaryIO,
        stdout: BinaryIO,
        options: Optional[RunOptions] = None,
    ):
        self.program = Program(source)
        self.state = ExecutorState()
        self.stdin = stdin
        self.stdout = stdout
        self.options = options or RunOptions()

    @property
    def halted(self) -> bool:
        return self.state.pc >= len(self.program)

    def step(self) -> bool:
        """Execute the instruction at the program counter. Returns False once halted."""
        if self.halted:
            return False

        state = self.state
        tape = state.tape
        cmd = self.program[state.pc]

        if cmd == '>':
            tape.move_right()
        elif cmd == '<':
            tape.move_left()
        elif cmd == '+':
            tape.increment()
        elif cmd == '-':
            tape.decrement()
        elif cmd == '.':
            self._write(tape.current())
        elif cmd == ',':
            tape.set(self._read())
        elif cmd == '[':
            if tape.current() == 0:
                state.pc = self.program.match(state.pc)
        elif cmd == ']':
            if tape.current() != 0:
                state.pc = self.program.match(state.pc)

        state.pc += 1
        state.steps += 1
        return True

    def run(self) -> ExecutorState:
        logger.debug(
            "running program of %d characters (%d instructions)",
            len(self.program),
            sum(1 for ch in self.program.source if is_code_char(ch)),
        )
        while self.step():
            pass
        if not self.options.flush_output:
            self.stdout.flush()
        logger.debug(
            "halted after %d steps, pointer at %d", self.state.steps, self.state.tape.position
        )
        return self.state

    def _read(self) -> int:
        data = self.stdin.read(1)
        if not data:
            return 0
        value = data[0]
        if self.options.newline_as_zero and value == NEWLINE:
            return 0
        return value

    def _write(self, value: int) -> None:
        self.stdout.write(bytes((value,)))
        if self.options.flush_output:
            self.stdout.flush()
