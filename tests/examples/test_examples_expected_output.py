"""Run every example script and compare stdout with its ``# =>`` annotations."""

from __future__ import annotations

import ast
import os
import subprocess
import sys
from dataclasses import dataclass
from pathlib import Path

import pytest

REPO_ROOT = Path(__file__).resolve().parents[2]
EXAMPLES_ROOT = REPO_ROOT / "examples"
SRC_ROOT = REPO_ROOT / "src"


@dataclass(frozen=True, slots=True)
class ExampleScript:
    path: Path
    expected_lines: list[str]


def _example_paths() -> list[Path]:
    return sorted(EXAMPLES_ROOT.glob("ex_*/0*_*.py"))


def _expected_lines(path: Path) -> list[str]:
    source = path.read_text(encoding="utf-8")
    source_lines = source.splitlines()
    print_calls = sorted(
        (
            node
            for node in ast.walk(ast.parse(source, filename=str(path)))
            if isinstance(node, ast.Call)
            and isinstance(node.func, ast.Name)
            and node.func.id == "print"
        ),
        key=lambda node: (node.lineno, node.col_offset),
    )

    expected: list[str] = []
    for call in print_calls:
        line = source_lines[(call.end_lineno or call.lineno) - 1]
        if "# =>" not in line:
            msg = f"{path}:{call.lineno}: print() must end with a '# =>' expectation."
            raise AssertionError(msg)
        expected.append(line.split("# =>", maxsplit=1)[1].strip())
    return expected


def test_examples_are_present() -> None:
    assert len(_example_paths()) >= 5


@pytest.mark.parametrize(
    "script",
    [
        pytest.param(
            ExampleScript(path=path, expected_lines=_expected_lines(path)),
            id=str(path.relative_to(REPO_ROOT)),
        )
        for path in _example_paths()
    ],
)
def test_example_stdout_matches_annotations(script: ExampleScript) -> None:
    env = {key: value for key, value in os.environ.items() if not key.startswith("DEPINJ_")}
    env["PYTHONPATH"] = os.pathsep.join(
        part for part in (str(SRC_ROOT), env.get("PYTHONPATH")) if part
    )

    completed = subprocess.run(  # noqa: S603
        [sys.executable, str(script.path)],
        cwd=script.path.parent,
        env=env,
        capture_output=True,
        text=True,
        check=False,
    )

    assert completed.returncode == 0, completed.stderr
    assert completed.stderr == ""
    assert completed.stdout.splitlines() == script.expected_lines
