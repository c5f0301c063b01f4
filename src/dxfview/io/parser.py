"""Entity extraction from a DXF tag stream.

The tag stream is flat: section markers, then entity markers, then (for the
legacy POLYLINE form only) nested VERTEX records closed by SEQEND. It is
walked with an explicit cursor over the record list; there is no recursion.

Key components:
- EntityExtractor: Turns one run of records into a typed entity, or nothing
- SectionWalker: Tracks the ENTITIES section and dispatches extraction
- parse: Top-level entry point from raw text to Document

Malformed entities are dropped without raising. The only warning produced is
the binary-DXF heuristic.
"""

import logging
import math
from collections.abc import Sequence

from dxfview.domain import Arc, Circle, Document, Entity, Line, Point, Polyline
from dxfview.io.tags import TagRecord, parse_number, scan_tags

logger = logging.getLogger(__name__)

BINARY_DXF_WARNING = "This file appears to be binary DXF. Rendering may be incomplete."

# Group codes
CODE_MARKER = 0
CODE_NAME = 2
CODE_X = 10
CODE_Y = 20
CODE_X2 = 11
CODE_Y2 = 21
CODE_RADIUS = 40
CODE_START_ANGLE = 50
CODE_END_ANGLE = 51
CODE_FLAGS = 70

FLAG_CLOSED = 1


def read_number(body: Sequence[TagRecord], code: int) -> float | None:
    """Read the first value with the given code as a finite float.

    Args:
        body: Records belonging to one entity
        code: Group code to look up

    Returns:
        Parsed value, or None if the code is absent or its value is invalid
    """
    for record in body:
        if record.code == code:
            return parse_number(record.value)
    return None


def read_point(body: Sequence[TagRecord], x_code: int, y_code: int) -> Point | None:
    """Read a point from a pair of coordinate codes."""
    x = read_number(body, x_code)
    y = read_number(body, y_code)
    if x is None or y is None:
        return None
    return Point(x, y)


def read_flags(body: Sequence[TagRecord]) -> int:
    """Read the integer bit-flags field, defaulting to 0."""
    value = read_number(body, CODE_FLAGS)
    if value is None:
        return 0
    return math.trunc(value)


def read_header_flags(body: Sequence[TagRecord]) -> int:
    """Read the flags of a nested POLYLINE header.

    Unlike compact fields, every code 70 record overwrites the previous one,
    and an unparsable value resets the flags to 0.
    """
    flags = 0
    for record in body:
        if record.code == CODE_FLAGS:
            value = parse_number(record.value)
            flags = math.trunc(value) if value is not None else 0
    return flags


def pair_vertices(body: Sequence[TagRecord]) -> list[Point]:
    """Pair interleaved X/Y codes into vertices.

    Each X opens a pending vertex and the next Y closes it. An X followed by
    another X loses its pending value; a Y without a pending X is ignored.

    Args:
        body: Records of a compact polyline

    Returns:
        Vertices in source order
    """
    vertices: list[Point] = []
    pending_x: float | None = None

    for record in body:
        if record.code == CODE_X:
            pending_x = parse_number(record.value)
        elif record.code == CODE_Y and pending_x is not None:
            y = parse_number(record.value)
            if y is not None:
                vertices.append(Point(pending_x, y))
            pending_x = None

    return vertices


def build_polyline(vertices: Sequence[Point], flags: int) -> Polyline | None:
    """Build a polyline from accumulated vertices and its flags field.

    Shared by the compact LWPOLYLINE and the nested POLYLINE front ends.

    Args:
        vertices: Accumulated vertices
        flags: Bit-flags; bit 0 marks the polyline closed

    Returns:
        Polyline, or None with fewer than two vertices
    """
    if len(vertices) < 2:
        return None
    return Polyline(points=tuple(vertices), closed=(flags & FLAG_CLOSED) == FLAG_CLOSED)


def _body_end(records: Sequence[TagRecord], start: int) -> int:
    """Index of the next marker record at or after start."""
    i = start
    while i < len(records) and records[i].code != CODE_MARKER:
        i += 1
    return i


class EntityExtractor:
    """Extracts typed entities from runs of tag records.

    Each extraction method takes the record list and the index of an entity
    marker, and returns the entity (or None) together with the index of the
    first record it did not consume.
    """

    SIMPLE_TYPES = ("LINE", "LWPOLYLINE", "CIRCLE", "ARC")
    NESTED_POLYLINE = "POLYLINE"
    VERTEX = "VERTEX"
    SEQEND = "SEQEND"

    def extract(self, records: Sequence[TagRecord], index: int) -> tuple[Entity | None, int]:
        """Extract the entity starting at a marker record.

        Args:
            records: Full record list
            index: Index of the code-0 marker

        Returns:
            Tuple of (entity or None, next index)
        """
        if records[index].value == self.NESTED_POLYLINE:
            return self.extract_nested_polyline(records, index)
        return self.extract_simple(records, index)

    def extract_simple(
        self, records: Sequence[TagRecord], index: int
    ) -> tuple[Entity | None, int]:
        """Extract a flat entity whose body runs up to the next marker."""
        end = _body_end(records, index + 1)
        body = records[index + 1 : end]
        entity_type = records[index].value

        entity: Entity | None
        if entity_type == "LINE":
            entity = self._line(body)
        elif entity_type == "LWPOLYLINE":
            entity = build_polyline(pair_vertices(body), read_flags(body))
        elif entity_type == "CIRCLE":
            entity = self._circle(body)
        elif entity_type == "ARC":
            entity = self._arc(body)
        else:
            return None, end

        if entity is None:
            logger.debug("Dropped %s at record %d: incomplete fields", entity_type, index)
        return entity, end

    def extract_nested_polyline(
        self, records: Sequence[TagRecord], index: int
    ) -> tuple[Polyline | None, int]:
        """Extract a POLYLINE followed by VERTEX records and SEQEND.

        Any marker other than VERTEX or SEQEND ends the sequence without being
        consumed, so a missing SEQEND does not swallow the next entity.
        """
        i = _body_end(records, index + 1)
        flags = read_header_flags(records[index + 1 : i])

        vertices: list[Point] = []
        while i < len(records):
            record = records[i]
            if record.code != CODE_MARKER:
                i += 1
                continue

            if record.value == self.VERTEX:
                end = _body_end(records, i + 1)
                point = read_point(records[i + 1 : end], CODE_X, CODE_Y)
                if point is not None:
                    vertices.append(point)
                i = end
                continue

            if record.value == self.SEQEND:
                i += 1
            break

        polyline = build_polyline(vertices, flags)
        if polyline is None:
            logger.debug(
                "Dropped POLYLINE at record %d: %d vertices", index, len(vertices)
            )
        return polyline, i

    def _line(self, body: Sequence[TagRecord]) -> Line | None:
        start = read_point(body, CODE_X, CODE_Y)
        end = read_point(body, CODE_X2, CODE_Y2)
        if start is None or end is None:
            return None
        return Line(start=start, end=end)

    def _circle(self, body: Sequence[TagRecord]) -> Circle | None:
        center = read_point(body, CODE_X, CODE_Y)
        radius = read_number(body, CODE_RADIUS)
        if center is None or radius is None or radius <= 0:
            return None
        return Circle(center=center, radius=radius)

    def _arc(self, body: Sequence[TagRecord]) -> Arc | None:
        center = read_point(body, CODE_X, CODE_Y)
        radius = read_number(body, CODE_RADIUS)
        start_angle = read_number(body, CODE_START_ANGLE)
        end_angle = read_number(body, CODE_END_ANGLE)
        if (
            center is None
            or radius is None
            or radius <= 0
            or start_angle is None
            or end_angle is None
        ):
            return None
        return Arc(
            center=center,
            radius=radius,
            start_angle_deg=start_angle,
            end_angle_deg=end_angle,
        )


class SectionWalker:
    """Walks tag records and extracts entities from the ENTITIES section.

    Example:
        walker = SectionWalker()
        entities = walker.walk(scan_tags(text))
    """

    def __init__(self, extractor: EntityExtractor | None = None) -> None:
        """Initialize the walker.

        Args:
            extractor: Entity extractor to dispatch to (default: new instance)
        """
        self.extractor = extractor or EntityExtractor()

    def walk(self, records: Sequence[TagRecord]) -> list[Entity]:
        """Extract all entities in source order.

        Args:
            records: Tag records from scan_tags

        Returns:
            Extracted entities
        """
        entities: list[Entity] = []
        in_entities = False
        i = 0

        while i < len(records):
            record = records[i]

            if record.code == CODE_MARKER and record.value == "SECTION":
                name = records[i + 1] if i + 1 < len(records) else None
                in_entities = (
                    name is not None and name.code == CODE_NAME and name.value == "ENTITIES"
                )
                i += 2
                continue

            if record.code == CODE_MARKER and record.value == "ENDSEC":
                in_entities = False
                i += 1
                continue

            if not in_entities or record.code != CODE_MARKER:
                i += 1
                continue

            entity, i = self.extractor.extract(records, i)
            if entity is not None:
                entities.append(entity)

        return entities


def parse(raw: str) -> Document:
    """Parse ASCII DXF text into a Document.

    Never raises for malformed content: invalid entities are omitted. Input
    containing a NUL byte is flagged as probable binary DXF, and extraction
    still runs on whatever text structure is present.

    Args:
        raw: Complete file contents

    Returns:
        Document with entities in source order and any warnings
    """
    warnings: list[str] = []
    if "\x00" in raw:
        warnings.append(BINARY_DXF_WARNING)

    records = scan_tags(raw)
    entities = SectionWalker().walk(records)
    logger.debug("Parsed %d records into %d entities", len(records), len(entities))

    return Document(entities=tuple(entities), warnings=tuple(warnings))
