"""Drawing reader for loading DXF files.

This module provides the DxfReader class for reading drawing files from disk
and parsing them into Document models.
"""

from pathlib import Path

from dxfview.domain import Document
from dxfview.exceptions import DocumentReadError
from dxfview.io.parser import parse


class DxfReader:
    """Loads DXF files and parses them into documents.

    Bytes are decoded as UTF-8 with replacement so that undecodable bytes and
    NUL characters survive into the text handed to the parser.

    Example:
        reader = DxfReader(Path("drawing.dxf"))
        document = reader.load()
        for entity in document.entities:
            print(entity.kind)
    """

    def __init__(self, path: Path, encoding: str = "utf-8") -> None:
        """Initialize the reader.

        Args:
            path: Path to the DXF file
            encoding: Text encoding used to decode the file
        """
        self._path = path
        self._encoding = encoding
        self._raw: str | None = None
        self._document: Document | None = None

    def read_text(self) -> str:
        """Read and decode the file contents.

        Returns:
            Decoded text

        Raises:
            DocumentReadError: If the file cannot be read
        """
        if not self._path.exists():
            raise DocumentReadError(str(self._path), "file not found")
        if not self._path.is_file():
            raise DocumentReadError(str(self._path), "not a regular file")

        try:
            data = self._path.read_bytes()
        except OSError as e:
            raise DocumentReadError(str(self._path), str(e)) from e

        try:
            return data.decode(self._encoding, errors="replace")
        except LookupError as e:
            raise DocumentReadError(str(self._path), f"unknown encoding {self._encoding!r}") from e

    def load(self) -> Document:
        """Read and parse the file.

        A fresh Document replaces any previously loaded one.

        Returns:
            Parsed document

        Raises:
            DocumentReadError: If the file cannot be read
        """
        self._raw = self.read_text()
        self._document = parse(self._raw)
        return self._document

    @property
    def document(self) -> Document:
        """Return the loaded document.

        Raises:
            RuntimeError: If the file has not been loaded yet
        """
        if self._document is None:
            raise RuntimeError("Drawing not loaded. Call load() first.")
        return self._document

    @property
    def raw_length(self) -> int:
        """Return the length of the decoded text.

        Raises:
            RuntimeError: If the file has not been loaded yet
        """
        if self._raw is None:
            raise RuntimeError("Drawing not loaded. Call load() first.")
        return len(self._raw)

    def close(self) -> None:
        """Drop the loaded text and document."""
        self._raw = None
        self._document = None

    def __enter__(self) -> "DxfReader":
        """Context manager entry."""
        self.load()
        return self

    def __exit__(self, _exc_type: object, _exc_val: object, _exc_tb: object) -> None:
        """Context manager exit."""
        self.close()
