"""
JSON renderer for printing the status registry as a code to reason mapping.
"""

import json
import logging
import shutil
import subprocess
import sys
from typing import Optional, Sequence, TextIO

from ..errors import RenderError
from ..registry import StatusRegistry

logger = logging.getLogger(__name__)


class JsonRenderer:
    """
    Renders a StatusRegistry as `{"<code>": "<reason>", ...}`.

    Pretty output is delegated to an external formatter (`jq .` by default)
    when it is installed. If the formatter is missing or fails, the document
    is indented in-process instead.
    """

    DEFAULT_FORMATTER = ("jq", ".")

    def __init__(self, formatter: Optional[Sequence[str]] = DEFAULT_FORMATTER):
        """
        Args:
            formatter: Command used to pretty-print JSON read from stdin,
                or None to always indent in-process.
        """
        self.formatter = tuple(formatter) if formatter else None

    @staticmethod
    def serialize(registry: StatusRegistry, indent: Optional[int] = None) -> str:
        """
        Serialize the registry to a JSON string.

        Raises:
            RenderError: If the registry cannot be encoded.
        """
        separators = (",", ":") if indent is None else (",", ": ")
        try:
            return json.dumps(
                registry.to_dict(),
                indent=indent,
                separators=separators,
                ensure_ascii=False,
            )
        except (TypeError, ValueError) as e:
            raise RenderError(f"Failed to serialize status registry: {e}") from e

    def render(self, registry: StatusRegistry, pretty: bool = True) -> str:
        compact = self.serialize(registry)
        if not pretty:
            return compact

        formatted = self._run_formatter(compact)
        if formatted is not None:
            return formatted
        return self.serialize(registry, indent=2)

    def print(
        self,
        registry: StatusRegistry,
        pretty: bool = True,
        file: Optional[TextIO] = None,
    ) -> None:
        print(self.render(registry, pretty=pretty), file=file or sys.stdout)

    def _run_formatter(self, document: str) -> Optional[str]:
        """Pipe the document through the external formatter; None on any failure."""
        if not self.formatter:
            return None

        executable = shutil.which(self.formatter[0])
        if executable is None:
            logger.debug("JSON formatter %r not found, indenting in-process", self.formatter[0])
            return None

        try:
            result = subprocess.run(
                [executable, *self.formatter[1:]],
                input=document,
                capture_output=True,
                text=True,
                check=False,
            )
        except OSError as e:
            logger.debug("Could not run JSON formatter %s: %s", executable, e)
            return None

        if result.returncode != 0:
            logger.debug(
                "JSON formatter exited with status %d: %s",
                result.returncode,
                result.stderr.strip(),
            )
            return None

        output = result.stdout.strip()
        return output or None
