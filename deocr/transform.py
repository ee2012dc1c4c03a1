"""Process one confirmed PDF into its removed-ocr counterpart"""

import logging
from pathlib import Path
from typing import Callable, Optional, Union

from .engines.base import TextLayerStripper
from .errors import OutputDirectoryError, PathStructureError

logger = logging.getLogger(__name__)

OUTPUT_DIR_NAME = "removed-ocr"


def output_path_for(input_path: Union[str, Path], output_dir_name: str = OUTPUT_DIR_NAME) -> Path:
    """
    Compute ``<parent>/<output_dir_name>/<file name>`` for an input path.

    Raises:
        PathStructureError: If the path has no file name or no parent
    """
    path = Path(input_path)
    if not path.name:
        raise PathStructureError(f"Failed to get file name of {path}")
    if path.parent == path:
        raise PathStructureError(f"Failed to get parent directory of {path}")
    return path.parent / output_dir_name / path.name


def remove_ocr(
    input_path: Union[str, Path],
    stripper: TextLayerStripper,
    output_dir_name: str = OUTPUT_DIR_NAME,
    on_dir_created: Optional[Callable[[Path], None]] = None,
) -> Path:
    """
    Strip the text layer of one PDF into the sibling output directory.

    The original file is left untouched.

    Args:
        input_path: A confirmed PDF
        stripper: Engine doing the actual work
        output_dir_name: Name of the output directory next to the input
        on_dir_created: Called with the output directory when it had to be created

    Returns:
        Path of the written file

    Raises:
        ProcessingError: Any failure, see the subclasses in deocr.errors
    """
    input_path = Path(input_path)
    output_file = output_path_for(input_path, output_dir_name)
    output_dir = output_file.parent

    if not output_dir.is_dir():
        try:
            output_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise OutputDirectoryError(f"Failed to create {output_dir}: {e}") from e
        logger.info(f"Created output directory: {output_dir}")
        if on_dir_created is not None:
            on_dir_created(output_dir)

    stripper.strip(input_path, output_file)
    return output_file
