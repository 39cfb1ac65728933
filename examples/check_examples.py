#!/usr/bin/env python3

import os
import subprocess
import sys


ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))


def _run_example(path: str, *, input_data: bytes, timeout_s: float = 10.0) -> dict:
    cmd = [sys.executable, "-m", "brainfuckers", path]
    env = dict(os.environ)
    env["PYTHONPATH"] = os.pathsep.join(filter(None, [os.path.join(ROOT, "src"), env.get("PYTHONPATH")]))
    try:
        p = subprocess.run(
            cmd,
            input=input_data,
            capture_output=True,
            cwd=ROOT,
            env=env,
            timeout=timeout_s,
        )
        return {
            "ok": p.returncode == 0,
            "returncode": p.returncode,
            "stdout": p.stdout,
            "stderr": p.stderr.decode("utf-8", errors="replace"),
            "timeout": False,
        }
    except subprocess.TimeoutExpired as e:
        return {
            "ok": False,
            "returncode": None,
            "stdout": e.stdout or b"",
            "stderr": (e.stderr or b"").decode("utf-8", errors="replace") + "\n[TIMEOUT]",
            "timeout": True,
        }


EXAMPLES = [
    {"file": "examples/hello.bf", "input": b"", "expect": b"Hello World!\n"},
    {"file": "examples/cat.bf", "input": b"some input\n", "expect": b"some input\n"},
    {"file": "examples/reverse.bf", "input": b"stressed", "expect": b"desserts"},
    {"file": "examples/add_digits.bf", "input": b"34", "expect": b"7"},
]


def main() -> int:
    print("=== Brainfuck Examples Verification ===")

    any_fail = False
    for ex in EXAMPLES:
        r = _run_example(ex["file"], input_data=ex["input"])
        passed = r["ok"] and r["stdout"] == ex["expect"]
        status = "PASS" if passed else "FAIL"
        print(f"\n[{status}] {ex['file']}")

        if passed:
            continue

        any_fail = True
        print(f"Expected: {ex['expect']!r}")
        print(f"Got:      {r['stdout']!r}")
        print(f"Return code: {r['returncode']}  Timeout: {r['timeout']}")
        print("--- stderr ---")
        print(r["stderr"])

    if any_fail:
        print("\nSome examples FAILED.")
        return 1

    print("\nAll examples passed.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
