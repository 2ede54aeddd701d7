import sys

import pytest

from dockyard_launcher.errors import JavaProcessError
from dockyard_launcher.executor import AdvancedJavaExecutor


@pytest.fixture
def fake_java(tmp_path):
    script = tmp_path / "fakejava"
    script.write_text(
        f"#!{sys.executable}\n"
        "import sys, pathlib\n"
        "args = sys.argv[1:]\n"
        "pathlib.Path(sys.argv[0]).with_name('calls.txt').write_text('\\n'.join(args))\n"
        "sys.exit(int(pathlib.Path(args[1]).read_text() or 0))\n"
    )
    script.chmod(0o755)
    return script


def _jar(tmp_path, code):
    jar = tmp_path / "server.jar"
    jar.write_text(str(code))
    return jar


@pytest.mark.asyncio
async def test_success_passes_arguments(fake_java, tmp_path):
    jar = _jar(tmp_path, 0)
    executor = AdvancedJavaExecutor(java=str(fake_java))
    result = await executor.execute_jar(str(jar), ["--nogui", "x"])
    assert result is None
    calls = (tmp_path / "calls.txt").read_text().split("\n")
    assert calls == ["-jar", str(jar), "--nogui", "x"]


@pytest.mark.asyncio
async def test_nonzero_exit_raises_with_code(fake_java, tmp_path):
    jar = _jar(tmp_path, 3)
    executor = AdvancedJavaExecutor(java=str(fake_java))
    with pytest.raises(JavaProcessError) as info:
        await executor.execute_jar(str(jar), [])
    assert info.value.exit_code == 3
    assert str(info.value.source) == "Java process execution failed"


@pytest.mark.asyncio
async def test_missing_java_raises_without_code(tmp_path):
    executor = AdvancedJavaExecutor(java=str(tmp_path / "no-such-java"))
    with pytest.raises(JavaProcessError) as info:
        await executor.execute_jar(str(tmp_path / "server.jar"), [])
    assert info.value.exit_code is None
    assert isinstance(info.value.__cause__, FileNotFoundError)


def test_default_java_command():
    assert AdvancedJavaExecutor().java == "java"