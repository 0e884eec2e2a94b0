from __future__ import annotations

import sys

import pytest

from go_bench_compare._process import run_command
from go_bench_compare.errors import CommandError, truncate_detail


def test_returns_stdout() -> None:
    assert run_command([sys.executable, "-c", "print('ok')"]).strip() == "ok"


def test_nonzero_exit_raises_with_detail() -> None:
    script = "import sys; sys.stderr.write('boom'); sys.exit(3)"
    with pytest.raises(CommandError, match="exit 3") as excinfo:
        run_command([sys.executable, "-c", script])
    assert excinfo.value.returncode == 3
    assert excinfo.value.detail == "boom"


def test_missing_executable_raises() -> None:
    with pytest.raises(CommandError, match="command not found") as excinfo:
        run_command(["definitely-not-a-real-binary-xyz"])
    assert excinfo.value.returncode is None


def test_truncate_detail_keeps_tail() -> None:
    assert truncate_detail("  short  ") == "short"
    assert truncate_detail("a" * 10 + "tail", limit=4) == "tail"


def test_undecodable_output_is_replaced() -> None:
    script = "import sys; sys.stdout.buffer.write(b'BenchmarkX-8 1 1 ns/op \\xff\\n')"
    output = run_command([sys.executable, "-c", script])
    assert output == "BenchmarkX-8 1 1 ns/op \ufffd\n"


def test_undecodable_stderr_is_kept_in_detail() -> None:
    script = "import sys; sys.stderr.buffer.write(b'bad \\xfe'); sys.exit(2)"
    with pytest.raises(CommandError) as excinfo:
        run_command([sys.executable, "-c", script])
    assert excinfo.value.detail == "bad \ufffd"
