"""Benchmark fixtures and configuration."""

from __future__ import annotations

import pytest


@pytest.fixture
def large_argv() -> list[str]:
    """Generate a long argument vector mixing every argument kind."""
    argv = ["prog"]
    for i in range(2000):
        argv.extend(
            [
                "-vxz",
                f"--output=build/{i}.o",
                "-j",
                str(i),
                f"src/file_{i}.c",
            ]
        )
    argv.extend(["--", "-literal"])
    return argv


@pytest.fixture
def large_argv_bytes(large_argv: list[str]) -> list[bytes]:
    """Same vector as bytes, as read from a POSIX argv."""
    return [arg.encode() for arg in large_argv]
