"""Raw JSON content file handler."""

import json
from pathlib import Path
from typing import Any

from draft_markdown.formats.base import FormatHandler
from draft_markdown.formatting.ir import ContentState


class RawJSONHandler(FormatHandler):
    """Handler for raw content state (.json) files.

    The file holds the object produced by Draft.js ``convertToRaw``:

        {"blocks": [...], "entityMap": {...}}

    Documents saved under a top-level "content" key are accepted too.
    """

    @property
    def supported_extensions(self) -> tuple[str, ...]:
        return (".json",)

    def read(self, path: Path) -> ContentState:
        """Parse a raw content state file.

        Raises:
            ValueError: If the file is not a JSON object of the raw shape
        """
        raw = json.loads(path.read_text(encoding=self.encoding))
        return self.parse(raw)

    def parse(self, raw: Any) -> ContentState:
        """Convert already-decoded JSON into a ContentState."""
        if isinstance(raw, dict) and "blocks" not in raw and "content" in raw:
            raw = raw["content"]
        if raw is None:
            return ContentState()
        if not isinstance(raw, dict):
            raise ValueError(
                f"Expected a JSON object with 'blocks', got {type(raw).__name__}"
            )
        try:
            return ContentState.from_raw(raw)
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            raise ValueError(f"Malformed raw content: {e}") from e
