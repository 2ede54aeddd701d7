"""Command line entry point: download the Dockyard server and run it."""

from __future__ import annotations

import argparse
import asyncio
import os
import sys
from collections.abc import Sequence

from .downloader import download_file
from .run_java import run_java_jar

DEFAULT_SERVER_URL = "https://releases.lukynka.cloud/DockyardServer-0.9.0.jar"
DEFAULT_OUTPUT = "server.jar"


def welcome_message() -> str:
    """The banner printed on start-up."""
    return (
        "Loading DockyardMC Python\u2122 Edition! "
        "(TRADEMARK OWNED BY THE PYTHON\u2122 SOFTWARE FOUNDATION\u2122)\n"
    )


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="dockyard-launcher",
        description="Download the Dockyard server jar and run it.",
    )
    parser.add_argument("--url", default=DEFAULT_SERVER_URL, help="server jar URL")
    parser.add_argument("--output", default=DEFAULT_OUTPUT, help="where to save the jar")
    parser.add_argument("--java", default="java", help="java executable")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Print the banner, download the server jar and run it; return an exit status."""
    options = _parse_args(argv)

    sys.stdout.write(welcome_message())
    sys.stdout.flush()

    try:
        asyncio.run(download_file(options.url, options.output))
    except Exception as exc:
        print(f"Download failed: {exc}", file=sys.stderr)
        return 1

    jar_path = os.path.join(".", options.output)
    try:
        run_java_jar(jar_path, [], java=options.java)
    except Exception as exc:
        print(f"Failed to run server: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())