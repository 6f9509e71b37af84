"""
Prettier integration for generated code.

Prettier is an optional Node.js tool; it is located on demand and driven
through its command line. A missing executable is a hard error once
formatting has been requested.
"""

from __future__ import annotations

import shutil
import subprocess
from pathlib import Path

from ...logging_config import get_logger

logger = get_logger(__name__)

DEFAULT_TIMEOUT = 60


class FormatterError(Exception):
    """Raised when the external formatter is unavailable or fails."""

    pass


class PrettierFormatter:
    """Runs the prettier CLI on source text."""

    def __init__(self, executable: str | None = None, timeout: int = DEFAULT_TIMEOUT):
        """
        Args:
            executable: Path to prettier; looked up on PATH when omitted.
            timeout: Seconds allowed per prettier invocation.
        """
        self._executable = executable
        self.timeout = timeout

    def load(self) -> str:
        """Locate the prettier executable.

        Raises:
            FormatterError: If prettier cannot be found.
        """
        executable = self._executable or shutil.which("prettier")
        if not executable:
            logger.error("Prettier requested but not found on PATH")
            raise FormatterError("Unable to find Prettier. Is it installed?")
        self._executable = executable
        return executable

    def resolve_config(self, file_path: str | Path) -> Path | None:
        """Find the prettier config file that applies to ``file_path``."""
        result = self._run(["--find-config-path", str(file_path)], check=False)
        config_path = result.stdout.strip()

        if result.returncode != 0 or not config_path:
            logger.debug("No prettier config found for %s", file_path)
            return None

        logger.debug("Using prettier config %s", config_path)
        return Path(config_path)

    def format(
        self,
        source: str,
        parser: str = "typescript",
        config_path: str | Path | None = None,
        file_path: str | Path | None = None,
    ) -> str:
        """Return ``source`` reformatted by prettier.

        ``file_path`` names the file the source will be written to, so that
        config overrides matching that file apply.
        """
        args = ["--parser", parser]
        if file_path:
            args += ["--stdin-filepath", str(file_path)]
        if config_path:
            args += ["--config", str(config_path)]
        else:
            args.append("--no-config")

        result = self._run(args, input_text=source)
        return result.stdout

    def _run(
        self,
        args: list[str],
        input_text: str | None = None,
        check: bool = True,
    ) -> subprocess.CompletedProcess:
        command = [self.load(), *args]
        logger.debug("Running %s", " ".join(command))

        try:
            result = subprocess.run(
                command,
                input=input_text,
                capture_output=True,
                text=True,
                encoding="utf-8",
                timeout=self.timeout,
            )
        except subprocess.TimeoutExpired as e:
            raise FormatterError(f"Prettier timed out after {self.timeout}s") from e
        except OSError as e:
            raise FormatterError(f"Unable to run Prettier: {e}") from e

        if check and result.returncode != 0:
            message = result.stderr.strip() or f"exit code {result.returncode}"
            raise FormatterError(f"Prettier failed: {message}")

        return result
