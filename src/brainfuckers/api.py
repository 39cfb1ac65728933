from __future__ import annotations

import io
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, Optional

from .interpreter import Interpreter
from .options import RunOptions


@dataclass(frozen=True)
class RunResult:
    steps: int
    pc: int
    pointer: int


def read_source(path: str | Path, *, encoding: str = "utf-8") -> str:
    # Only the 8 ASCII opcodes matter, so undecodable bytes become no-ops
    return Path(path).read_bytes().decode(encoding, errors="replace")


def run_string(
    source: str,
    *,
    stdin: Optional[BinaryIO] = None,
    stdout: Optional[BinaryIO] = None,
    options: Optional[RunOptions] = None,
) -> RunResult:
    interpreter = Interpreter(
        source,
        stdin=sys.stdin.buffer if stdin is None else stdin,
        stdout=sys.stdout.buffer if stdout is None else stdout,
        options=options,
    )
    state = interpreter.run()
    return RunResult(steps=state.steps, pc=state.pc, pointer=state.tape.position)


def run_bytes(source: str, *, input: bytes = b"", options: Optional[RunOptions] = None) -> bytes:
    out = io.BytesIO()
    run_string(source, stdin=io.BytesIO(input), stdout=out, options=options)
    return out.getvalue()


def run_file(
    path: str | Path,
    *,
    stdin: Optional[BinaryIO] = None,
    stdout: Optional[BinaryIO] = None,
    options: Optional[RunOptions] = None,
    encoding: str = "utf-8",
) -> RunResult:
    return run_string(read_source(path, encoding=encoding), stdin=stdin, stdout=stdout, options=options)
