from __future__ import annotations

from dataclasses import dataclass, field

from .tape import Tape


@dataclass
class ExecutorState:
    pc: int = 0
    tape: Tape = field(default_factory=Tape)
    steps: int = 0

    def reset(self) -> None:
        self.pc = 0
        self.tape = Tape()
        self.steps = 0
