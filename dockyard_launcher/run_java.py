"""Blocking execution of Java archives."""

from __future__ import annotations

import subprocess
from collections.abc import Sequence


class JavaRunError(RuntimeError):
    """Raised when the Java command cannot run or exits unsuccessfully."""

    def __init__(self, message: str, exit_code: int | None = None) -> None:
        super().__init__(message)
        self.exit_code = exit_code


def run_java_jar(jar_path: str, args: Sequence[str] = (), java: str = "java") -> None:
    """Run ``<java> -jar <jar_path> <args...>`` and wait for it to finish."""
    try:
        completed = subprocess.run([java, "-jar", str(jar_path), *args])
    except OSError as exc:
        raise JavaRunError(f"Command execution failed: {exc}") from exc

    if completed.returncode != 0:
        code = completed.returncode if completed.returncode >= 0 else -1
        raise JavaRunError("Failed", exit_code=code)