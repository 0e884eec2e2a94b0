from __future__ import annotations

from pathlib import Path

import pytest

from go_bench_compare.errors import UsageError
from go_bench_compare.options import BenchOptions, parse_options


def test_defaults() -> None:
    options = parse_options([])
    assert options == BenchOptions()
    assert options.before == "master"
    assert options.after == "HEAD"
    assert options.bench_time == "1s"
    assert options.packages == ("./...",)


def test_short_and_long_flags() -> None:
    short = parse_options(["-b", "v1.0.0", "-a", "feature", "-t", "500ms"])
    long = parse_options(["--before", "v1.0.0", "--after", "feature", "--bench_time", "500ms"])
    assert short == long
    assert short.before == "v1.0.0"
    assert short.after == "feature"
    assert short.bench_time == "500ms"


def test_repository_and_packages() -> None:
    options = parse_options(["-C", "/src/goby", "-p", "./vm/...", "--package", "./parser"])
    assert options.repository == Path("/src/goby")
    assert options.packages == ("./vm/...", "./parser")


def test_options_are_immutable() -> None:
    options = parse_options([])
    with pytest.raises(AttributeError):
        options.before = "other"  # type: ignore[misc]


def test_unknown_flag_is_usage_error() -> None:
    with pytest.raises(UsageError, match="unrecognized arguments") as excinfo:
        parse_options(["--bogus"])
    assert "usage:" in excinfo.value.usage


def test_missing_value_is_usage_error() -> None:
    with pytest.raises(UsageError, match="expected one argument"):
        parse_options(["--before"])


def test_empty_value_is_usage_error() -> None:
    with pytest.raises(UsageError, match="bench_time"):
        parse_options(["-t", ""])
