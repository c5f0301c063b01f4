"""Image writer for saving rendered drawings.

This module provides the ImageWriter class for writing rendered images with
the default output naming convention.
"""

from pathlib import Path

from PIL import Image

from dxfview.exceptions import ImageSaveError

IMAGE_FORMAT = "PNG"


class ImageWriter:
    """Saves rendered images to disk.

    Example:
        writer = ImageWriter(surface.image, Path("drawing.png"))
        writer.save()
    """

    def __init__(self, image: Image.Image, output_path: Path) -> None:
        """Initialize the image writer.

        Args:
            image: Rendered Pillow image
            output_path: Path where the image will be saved
        """
        self._image = image
        self._output_path = output_path

    @staticmethod
    def get_output_path(input_path: Path) -> Path:
        """Generate the default image path for a drawing.

        Args:
            input_path: Path to the drawing file

        Returns:
            Path with a .png suffix next to the drawing

        Example:
            >>> ImageWriter.get_output_path(Path("plans/bracket.dxf"))
            PosixPath('plans/bracket.png')
        """
        return input_path.with_suffix(".png")

    def save(self) -> Path:
        """Save the image as PNG, creating parent directories as needed.

        Returns:
            Path the image was written to

        Raises:
            ImageSaveError: If the image cannot be written
        """
        try:
            self._output_path.parent.mkdir(parents=True, exist_ok=True)
            self._image.save(self._output_path, format=IMAGE_FORMAT)
        except (OSError, ValueError) as e:
            raise ImageSaveError(str(self._output_path), str(e)) from e
        return self._output_path
