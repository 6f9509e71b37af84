"""Tests for the Prettier command line wrapper."""

import subprocess
from pathlib import Path

import pytest

from schema_interfaces.codegen.core.formatter import FormatterError, PrettierFormatter


class RecordingRun:
    """Replacement for subprocess.run returning canned results."""

    def __init__(self, returncode=0, stdout="", stderr="", exc=None):
        self.returncode = returncode
        self.stdout = stdout
        self.stderr = stderr
        self.exc = exc
        self.calls = []

    def __call__(self, command, **kwargs):
        self.calls.append((command, kwargs))
        if self.exc:
            raise self.exc
        return subprocess.CompletedProcess(command, self.returncode, self.stdout, self.stderr)


@pytest.fixture
def fake_run(monkeypatch):
    """Install a RecordingRun in place of subprocess.run."""

    def install(**kwargs):
        run = RecordingRun(**kwargs)
        monkeypatch.setattr("schema_interfaces.codegen.core.formatter.subprocess.run", run)
        return run

    return install


class TestLoad:
    """Tests for locating the executable."""

    def test_found_on_path(self, monkeypatch):
        monkeypatch.setattr(
            "schema_interfaces.codegen.core.formatter.shutil.which",
            lambda name: f"/usr/bin/{name}",
        )
        assert PrettierFormatter().load() == "/usr/bin/prettier"

    def test_missing(self, monkeypatch):
        monkeypatch.setattr(
            "schema_interfaces.codegen.core.formatter.shutil.which", lambda name: None
        )

        with pytest.raises(FormatterError, match="Unable to find Prettier"):
            PrettierFormatter().load()

    def test_explicit_executable(self):
        assert PrettierFormatter("/opt/prettier").load() == "/opt/prettier"


class TestFormat:
    """Tests for formatting source text."""

    def test_passes_source_on_stdin(self, fake_run):
        run = fake_run(stdout="formatted;\n")

        output = PrettierFormatter("prettier").format("raw", config_path=Path("/p/.prettierrc"))

        command, kwargs = run.calls[0]
        assert output == "formatted;\n"
        assert command == ["prettier", "--parser", "typescript", "--config", "/p/.prettierrc"]
        assert kwargs["input"] == "raw"
        assert kwargs["timeout"] == 60

    def test_no_config(self, fake_run):
        run = fake_run(stdout="x")

        PrettierFormatter("prettier").format("raw")

        assert run.calls[0][0] == ["prettier", "--parser", "typescript", "--no-config"]

    def test_output_path_applies_config_overrides(self, fake_run):
        """Test that the target file is named so matching overrides apply."""
        run = fake_run(stdout="x")
        formatter = PrettierFormatter("prettier")

        formatter.format(
            "raw", config_path="/proj/.prettierrc", file_path=Path("src/gen/interfaces.ts")
        )

        assert run.calls[0][0] == [
            "prettier",
            "--parser",
            "typescript",
            "--stdin-filepath",
            "src/gen/interfaces.ts",
            "--config",
            "/proj/.prettierrc",
        ]

    def test_failure(self, fake_run):
        fake_run(returncode=2, stderr="SyntaxError: Unexpected token")

        with pytest.raises(FormatterError, match="Prettier failed: SyntaxError"):
            PrettierFormatter("prettier").format("export type = ;")

    def test_timeout(self, fake_run):
        fake_run(exc=subprocess.TimeoutExpired("prettier", 5))

        with pytest.raises(FormatterError, match="timed out"):
            PrettierFormatter("prettier", timeout=5).format("x")

    def test_os_error(self, fake_run):
        fake_run(exc=FileNotFoundError("prettier"))

        with pytest.raises(FormatterError, match="Unable to run Prettier"):
            PrettierFormatter("prettier").format("x")


class TestResolveConfig:
    """Tests for project config lookup."""

    def test_config_found(self, fake_run):
        run = fake_run(stdout=".prettierrc\n")

        assert PrettierFormatter("prettier").resolve_config("src/interfaces.ts") == Path(".prettierrc")
        assert run.calls[0][0] == ["prettier", "--find-config-path", "src/interfaces.ts"]

    def test_no_config(self, fake_run):
        fake_run(returncode=1, stderr="No config")
        assert PrettierFormatter("prettier").resolve_config("interfaces.ts") is None

    def test_empty_output(self, fake_run):
        fake_run(stdout="")
        assert PrettierFormatter("prettier").resolve_config("interfaces.ts") is None
