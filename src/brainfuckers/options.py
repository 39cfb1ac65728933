from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RunOptions:
    newline_as_zero: bool = False
    flush_output: bool = True
