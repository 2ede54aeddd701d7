"""Error raised when a Java process cannot be started or exits unsuccessfully."""

from __future__ import annotations

from datetime import datetime


class JavaProcessError(Exception):
    """A Java process failed; carries the exit code, when it failed and the cause."""

    def __init__(
        self,
        exit_code: int | None,
        source: BaseException,
        timestamp: datetime | None = None,
    ) -> None:
        self.exit_code = exit_code
        self.source = source
        self.timestamp = timestamp if timestamp is not None else datetime.now()
        super().__init__(exit_code, source, self.timestamp)
        self.__cause__ = source

    def __str__(self) -> str:
        code = "unknown" if self.exit_code is None else str(self.exit_code)
        return (
            f"Java process failed at {self.timestamp.isoformat()} "
            f"with exit code: {code}"
        )