"""
gofmt formatter — delegate canonical formatting to the Go toolchain.

Pipes the source through ``gofmt`` on stdin. Use this when baselines
are also touched by gofmt in CI so both sides agree byte for byte.
"""

from __future__ import annotations

import logging
import shutil
import subprocess

from swaggerdocs.adapters.base import SourceFormatter
from swaggerdocs.core.errors import FormatError

logger = logging.getLogger(__name__)


class GofmtFormatter(SourceFormatter):
    """Run source through an external ``gofmt`` binary.

    Args:
        binary: gofmt executable name or path.
        timeout: Seconds before the run is abandoned.
    """

    def __init__(self, binary: str = "gofmt", timeout: int = 30):
        self._binary = binary
        self._timeout = timeout

    @property
    def name(self) -> str:
        return "gofmt"

    def is_available(self) -> bool:
        return shutil.which(self._binary) is not None

    def format(self, source: str) -> str:
        executable = shutil.which(self._binary)
        if executable is None:
            raise FormatError(f"{self._binary} not found on PATH")

        logger.debug("Running %s on %d bytes", executable, len(source))
        try:
            result = subprocess.run(
                [executable],
                input=source,
                capture_output=True,
                text=True,
                encoding="utf-8",
                timeout=self._timeout,
            )
        except subprocess.TimeoutExpired as e:
            raise FormatError(f"{self._binary} timed out after {self._timeout}s") from e
        except OSError as e:
            raise FormatError(f"cannot run {self._binary}: {e}") from e

        if result.returncode != 0:
            raise FormatError(f"could not format output data: {result.stderr.strip()}")

        return result.stdout
