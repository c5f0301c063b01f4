"""Viewer orchestration for loading, drawing and exporting drawings.

This module ties the reader, renderer and image writer together behind a
single object configured from ViewerSettings.

Key components:
- DrawingViewer: Main orchestrator class for headless viewing
"""

import time
from pathlib import Path

from PIL import Image

from dxfview.config import ViewerSettings
from dxfview.core.raster import RasterSurface
from dxfview.core.renderer import find_nearest_vertex, render
from dxfview.core.surface import RecordingSurface
from dxfview.domain import Document, Measurement, Point, Viewport
from dxfview.exceptions import DocumentEmptyError
from dxfview.io import DxfReader, ImageWriter
from dxfview.utils import ParseStats, ViewerLogger, configure_logging


class DrawingViewer:
    """Orchestrates loading, rendering and snapping for DXF drawings.

    Manages the complete workflow:
    1. Load and parse a drawing file
    2. Render it onto a raster canvas sized from the settings
    3. Answer nearest-vertex queries against the same view
    4. Save the rendered image

    Example:
        settings = ViewerSettings()
        viewer = DrawingViewer(settings)
        document = viewer.load(Path("bracket.dxf"))
        viewer.export_png(Path("bracket.dxf"), document=document)
    """

    def __init__(self, settings: ViewerSettings, quiet: bool = False) -> None:
        """Initialize the viewer with configuration.

        Args:
            settings: Viewer settings (display, canvas, measure and logging)
            quiet: Suppress console logging except errors
        """
        self.settings = settings
        self.logger = configure_logging(
            log_file=settings.logging.log_file,
            console_level=settings.logging.log_level,
            file_level=settings.logging.file_log_level,
            quiet=quiet,
        )
        self.viewer_logger = ViewerLogger(self.logger)

    @property
    def stats(self) -> ParseStats:
        """Statistics accumulated by this viewer."""
        return self.viewer_logger.stats

    @staticmethod
    def default_output_path(path: Path) -> Path:
        """Image path used when none is given: the drawing path with .png."""
        return ImageWriter.get_output_path(path)

    def _mark(self) -> float:
        now = time.time()
        if self.stats.start_time is None:
            self.stats.start_time = now
        return now

    def load(self, path: Path) -> Document:
        """Read and parse a drawing file.

        Args:
            path: Path to the DXF file

        Returns:
            Parsed document, possibly empty and with warnings

        Raises:
            DocumentReadError: If the file cannot be read
        """
        start = self._mark()
        with DxfReader(path) as reader:
            document = reader.document
        self.stats.end_time = time.time()
        self.viewer_logger.log_document_loaded(
            str(path), document, (self.stats.end_time - start) * 1000
        )
        return document

    def create_surface(self) -> RasterSurface:
        """Create a blank raster surface sized from the canvas settings."""
        canvas = self.settings.canvas
        return RasterSurface(canvas.width, canvas.height, canvas.pixel_ratio)

    def render_to_image(
        self,
        document: Document,
        viewport: Viewport | None = None,
        measurement: Measurement | None = None,
    ) -> Image.Image:
        """Draw a document onto a fresh raster canvas.

        Args:
            document: Parsed drawing
            viewport: Zoom and pan (default: identity)
            measurement: Optional measuring overlay

        Returns:
            Rendered Pillow image at device resolution
        """
        start = self._mark()
        surface = self.create_surface()
        render(surface, document, self.settings.to_render_options(viewport, measurement))
        self.stats.end_time = time.time()
        self.viewer_logger.log_render(
            surface.image.width,
            surface.image.height,
            surface.pixel_ratio,
            (self.stats.end_time - start) * 1000,
        )
        return surface.image

    def export_png(
        self,
        path: Path,
        output: Path | None = None,
        viewport: Viewport | None = None,
        measurement: Measurement | None = None,
        document: Document | None = None,
    ) -> Path:
        """Load a drawing, render it and save the image as PNG.

        Args:
            path: Path to the DXF file
            output: Image path (default: drawing path with .png suffix)
            viewport: Zoom and pan (default: identity)
            measurement: Optional measuring overlay
            document: Already loaded document for this path (skips loading)

        Returns:
            Path the image was written to

        Raises:
            DocumentReadError: If the file cannot be read
            DocumentEmptyError: If the drawing contains no supported entities
            ImageSaveError: If the image cannot be written
        """
        if document is None:
            document = self.load(path)
        if document.is_empty():
            raise DocumentEmptyError(str(path))

        image = self.render_to_image(document, viewport, measurement)
        output_path = output or self.default_output_path(path)
        saved = ImageWriter(image, output_path).save()
        self.logger.info("Image saved", path=str(saved))
        return saved

    def snap(
        self,
        document: Document,
        screen_x: float,
        screen_y: float,
        viewport: Viewport | None = None,
    ) -> Point | None:
        """Find the vertex nearest to a canvas position.

        Args:
            document: Parsed drawing
            screen_x: Query X in logical canvas pixels
            screen_y: Query Y in logical canvas pixels
            viewport: Zoom and pan (default: identity)

        Returns:
            Document-space vertex within the snap radius, or None
        """
        canvas = self.settings.canvas
        # Snapping reads only the canvas geometry
        surface = RecordingSurface(canvas.width, canvas.height, canvas.pixel_ratio)
        result = find_nearest_vertex(
            surface,
            document,
            self.settings.to_render_options(viewport),
            screen_x,
            screen_y,
            self.settings.measure.snap_radius,
        )
        self.viewer_logger.log_snap(screen_x, screen_y, result)
        return result
