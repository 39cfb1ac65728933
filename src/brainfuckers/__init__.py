from .api import RunResult, read_source, run_bytes, run_file, run_string
from .errors import BFError, UnmatchedBracketError
from .interpreter import Interpreter
from .options import RunOptions
from .program import Program
from .tape import Tape

__all__ = [
    'Interpreter',
    'Program',
    'Tape',
    'BFError',
    'UnmatchedBracketError',
    'RunOptions',
    'RunResult',
    'run_string',
    'run_bytes',
    'run_file',
    'read_source',
]
