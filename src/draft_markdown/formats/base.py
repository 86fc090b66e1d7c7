"""Abstract base class for content file format handlers."""

from abc import ABC, abstractmethod
from pathlib import Path

from draft_markdown.formatting.ir import ContentState


class FormatHandler(ABC):
    """Abstract base class for content file format handlers.

    Each handler reads a stored rich-text document and returns the
    ContentState IR that the renderer consumes.
    """

    def __init__(self, encoding: str = "utf-8") -> None:
        self.encoding = encoding

    @property
    @abstractmethod
    def supported_extensions(self) -> tuple[str, ...]:
        """Return tuple of supported file extensions (e.g., ('.json',))."""
        ...

    @abstractmethod
    def read(self, path: Path) -> ContentState:
        """Load a document from file.

        Args:
            path: Path to the input file

        Returns:
            The ContentState stored in the file
        """
        ...
