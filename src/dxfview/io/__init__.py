"""Drawing I/O layer for dxfview.

This module handles reading DXF text into domain models and writing rendered
images. It provides a clean abstraction between files on disk and the
domain models.

Key responsibilities:
- Split ASCII DXF text into tag records
- Extract entities from the ENTITIES section
- Flag probable binary DXF input
- Save rendered images

Key classes and functions:
- parse: Raw DXF text to Document
- scan_tags: Raw DXF text to tag records
- DxfReader: Load drawing files
- ImageWriter: Save rendered images
"""

from dxfview.io.parser import (
    BINARY_DXF_WARNING,
    EntityExtractor,
    SectionWalker,
    parse,
)
from dxfview.io.reader import DxfReader
from dxfview.io.tags import TagRecord, parse_number, scan_tags
from dxfview.io.writer import ImageWriter

__all__ = [
    "BINARY_DXF_WARNING",
    "DxfReader",
    "EntityExtractor",
    "ImageWriter",
    "SectionWalker",
    "TagRecord",
    "parse",
    "parse_number",
    "scan_tags",
]
