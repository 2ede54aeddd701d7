"""Asynchronous execution of Java archives."""

from __future__ import annotations

import asyncio
from collections.abc import Sequence

from .errors import JavaProcessError


class AdvancedJavaExecutor:
    """Runs ``<java> -jar <jar> <args...>`` and waits for it to finish."""

    def __init__(self, java: str = "java") -> None:
        self.java = java

    async def execute_jar(self, jar_path: str, args: Sequence[str] = ()) -> None:
        """Run the jar; raise JavaProcessError if it cannot start or exits non-zero."""
        try:
            process = await asyncio.create_subprocess_exec(
                self.java, "-jar", str(jar_path), *args
            )
        except OSError as exc:
            raise JavaProcessError(None, exc) from exc

        try:
            returncode = await process.wait()
        except OSError as exc:
            raise JavaProcessError(None, exc) from exc

        if returncode != 0:
            raise JavaProcessError(
                returncode if returncode >= 0 else None,
                OSError("Java process execution failed"),
            )