# dockyard-launcher

A small launcher for the DockyardMC server. When it runs, it:

1. prints a welcome banner,
2. downloads the DockyardServer 0.9.0 jar and saves it as `server.jar` in the current
   directory,
3. starts the server with `java -jar ./server.jar` and waits for it to exit.

A `java` executable must be on your `PATH`, unless you name another one with `--java`.

## Installation

```
pip install .
```

## Usage

```
dockyard-launcher
```

Options:

- `--url URL` — where to download the server jar from (defaults to the DockyardServer
  0.9.0 release).
- `--output PATH` — where to save the jar, relative to the current directory
  (default `server.jar`).
- `--java JAVA` — the Java executable to run (default `java`).

The command exits with status 0 when the server process exits successfully. If the
download fails (network error, an HTTP status outside 2xx, or the file cannot be
written), it prints `Download failed: ...` to standard error and exits with status 1.
If the Java process cannot be started or exits with a non-zero status, it prints
`Failed to run server: ...` and exits with status 1.

## Library use

The pieces can also be used on their own:

- `dockyard_launcher.downloader.download_file(url, output_path)` is a coroutine. It
  fetches a URL, creates any missing parent directories and writes the body to
  `output_path`, replacing any existing file. It raises
  `dockyard_launcher.downloader.DownloadError` (a subclass of `OSError`) on failure.
- `dockyard_launcher.run_java.run_java_jar(jar_path, args=(), java="java")` runs
  `java -jar <jar_path> <args...>` and waits for it to finish. It raises
  `dockyard_launcher.run_java.JavaRunError` on failure; its `exit_code` attribute holds
  the process's exit status when it ran but failed.
- `dockyard_launcher.executor.AdvancedJavaExecutor(java="java").execute_jar(jar_path, args=())`
  is the async version. It raises `dockyard_launcher.errors.JavaProcessError`, which
  carries `exit_code` (or `None` when unknown), `timestamp` (when the failure happened)
  and `source` (the underlying error).
- `dockyard_launcher.cli.welcome_message()` returns the start-up banner and
  `dockyard_launcher.cli.main(argv=None)` runs the whole launcher, returning its exit
  status.

## What it does not do

The launcher does not install or locate a Java runtime, verify the downloaded jar,
cache it between runs, or configure the server. Every run downloads the jar again
and hands control to the server process until it exits.

## Development

```
pip install -e ".[test]"
pytest
```