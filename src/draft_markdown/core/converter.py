"""Main file conversion orchestrator."""

import logging
from pathlib import Path
from typing import Optional

from draft_markdown.config import get_settings
from draft_markdown.formats import get_handler, SUPPORTED_EXTENSIONS
from draft_markdown.formatting.ir import ContentState, MissingEntityError
from draft_markdown.formatting.renderer import MarkdownRenderer

logger = logging.getLogger(__name__)


class ConversionError(Exception):
    """Error during content conversion."""

    pass


class DocumentConverter:
    """Orchestrates the conversion pipeline.

    Pipeline:
    1. Read input file into a ContentState
    2. Render the ContentState to markdown
    3. Write the markdown text to the output file
    """

    def __init__(
        self,
        indent_width: Optional[int] = None,
        encoding: Optional[str] = None,
    ) -> None:
        """Initialize the converter.

        Args:
            indent_width: Spaces per list depth level (default from settings)
            encoding: Encoding for reading and writing files (default from settings)
        """
        settings = get_settings()
        self.encoding = encoding or settings.encoding
        self.renderer = MarkdownRenderer(indent_width=indent_width)

    def read_file(self, input_path: Path) -> ContentState:
        """Load a content file through the handler for its extension.

        Raises:
            ConversionError: If the file is missing, unsupported or malformed
        """
        if not input_path.exists():
            raise ConversionError(f"Input file not found: {input_path}")

        ext = input_path.suffix.lower()
        if ext not in SUPPORTED_EXTENSIONS:
            raise ConversionError(
                f"Unsupported format: {ext}. "
                f"Supported: {', '.join(SUPPORTED_EXTENSIONS)}"
            )

        handler = get_handler(ext)(encoding=self.encoding)
        try:
            return handler.read(input_path)
        except (OSError, ValueError) as e:
            raise ConversionError(f"Could not read {input_path.name}: {e}") from e

    def convert(self, document: ContentState) -> str:
        """Render a document to markdown.

        Raises:
            ConversionError: If a block references an unknown entity
        """
        try:
            return self.renderer.render(document)
        except MissingEntityError as e:
            raise ConversionError(str(e)) from e

    def convert_file(self, input_path: Path, output_path: Path) -> str:
        """Convert a content file to a markdown file.

        Args:
            input_path: Path to the raw content file
            output_path: Path for the markdown output

        Returns:
            The markdown text that was written

        Raises:
            ConversionError: If conversion fails
        """
        document = self.read_file(input_path)
        logger.info("Read %d block(s) from %s", len(document.blocks), input_path)

        markdown = self.convert(document)

        try:
            output_path.write_text(markdown, encoding=self.encoding)
        except OSError as e:
            raise ConversionError(f"Could not write {output_path}: {e}") from e
        logger.info("Wrote %s", output_path)

        return markdown
