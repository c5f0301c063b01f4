"""Configuration settings for dxfview."""

from pathlib import Path

from pydantic import BaseModel, Field

from dxfview.domain import Measurement, RenderOptions, Viewport

HEX_COLOR_PATTERN = r"^\s*#(?:[0-9a-fA-F]{3}){1,2}\s*$"


class DisplayConfig(BaseModel):
    """Configuration for how drawings are displayed."""

    line_color: str = Field(
        default="#4c9aff",
        pattern=HEX_COLOR_PATTERN,
        description="Stroke color used when drawing entities (#rgb or #rrggbb)",
    )
    background_color: str = Field(
        default="#10131a",
        pattern=HEX_COLOR_PATTERN,
        description="Canvas background color (#rgb or #rrggbb)",
    )
    padding: float = Field(
        default=24.0,
        ge=0.0,
        le=200.0,
        description="Padding in pixels around the fitted drawing",
    )
    show_gridlines: bool = Field(
        default=True,
        description="Draw the adaptive background grid",
    )
    grid_step: float = Field(
        default=1.0,
        ge=0.0001,
        le=1_000_000.0,
        description="Base grid spacing in drawing units (treated as mm)",
    )


class CanvasConfig(BaseModel):
    """Configuration for the output canvas."""

    width: int = Field(
        default=800,
        ge=10,
        le=16384,
        description="Canvas width in logical pixels",
    )
    height: int = Field(
        default=600,
        ge=10,
        le=16384,
        description="Canvas height in logical pixels",
    )
    pixel_ratio: float = Field(
        default=1.0,
        ge=0.25,
        le=8.0,
        description="Device pixels per logical pixel",
    )


class MeasureConfig(BaseModel):
    """Configuration for vertex snapping and measurement."""

    snap_radius: float = Field(
        default=14.0,
        ge=0.0,
        le=200.0,
        description="Maximum snapping distance in pixels",
    )
    use_inches: bool = Field(
        default=False,
        description="Report distances in inches instead of millimeters",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class ViewerSettings(BaseModel):
    """Main application settings."""

    display: DisplayConfig = Field(default_factory=DisplayConfig)
    canvas: CanvasConfig = Field(default_factory=CanvasConfig)
    measure: MeasureConfig = Field(default_factory=MeasureConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    def to_render_options(
        self,
        viewport: Viewport | None = None,
        measurement: Measurement | None = None,
    ) -> RenderOptions:
        """Build render options for one draw.

        Args:
            viewport: Current zoom/pan (default: identity)
            measurement: Optional measuring overlay

        Returns:
            RenderOptions combining display settings and view state
        """
        return RenderOptions(
            line_color=self.display.line_color.strip(),
            background_color=self.display.background_color.strip(),
            padding=self.display.padding,
            show_gridlines=self.display.show_gridlines,
            grid_step=self.display.grid_step,
            viewport=viewport or Viewport(),
            measurement=measurement,
        )


def get_default_settings() -> ViewerSettings:
    """Get default application settings."""
    return ViewerSettings()
