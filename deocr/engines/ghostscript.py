"""Strip text layer from PDF using Ghostscript"""

import logging
import shutil
import subprocess
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from ..errors import EngineFailedError, EngineNotFoundError, EngineTimeoutError
from .base import TextLayerStripper

logger = logging.getLogger(__name__)

# Keep the tail of Ghostscript's stderr in error messages
STDERR_TAIL_CHARS = 500


def default_executable() -> str:
    """Console Ghostscript binary name for this platform"""
    if sys.platform.startswith("win"):
        return "gswin64c"
    return "gs"


class GhostscriptStripper(TextLayerStripper):
    """Run ``gs -sDEVICE=pdfwrite -dFILTERTEXT`` as a subprocess"""

    name = "ghostscript"

    def __init__(
        self,
        executable: Optional[str] = None,
        timeout: Optional[float] = None,
        extra_args: Sequence[str] = (),
    ):
        """
        Args:
            executable: Ghostscript binary, looked up on PATH
            timeout: Seconds before the subprocess is killed; None waits forever
            extra_args: Additional switches inserted before the input path
        """
        self.executable = executable or default_executable()
        self.timeout = timeout
        self.extra_args = list(extra_args)

    def build_command(self, input_path: Path, output_path: Path) -> List[str]:
        """Ghostscript argument vector for one file"""
        return [
            self.executable,
            "-o", str(output_path),
            "-sDEVICE=pdfwrite",
            "-dFILTERTEXT",  # This removes text
            *self.extra_args,
            str(input_path),
        ]

    def is_available(self) -> bool:
        return shutil.which(self.executable) is not None

    def strip(self, input_path: Path, output_path: Path) -> None:
        gs_cmd = self.build_command(input_path, output_path)
        logger.debug(f"Running: {' '.join(gs_cmd)}")

        try:
            result = subprocess.run(
                gs_cmd,
                capture_output=True,
                text=True,
                errors="replace",
                timeout=self.timeout,
            )
        except FileNotFoundError as e:
            raise EngineNotFoundError(
                f"Ghostscript ({self.executable}) not found. Please install it"
            ) from e
        except subprocess.TimeoutExpired as e:
            raise EngineTimeoutError(
                f"Ghostscript timed out after {self.timeout}s on {input_path}"
            ) from e
        except OSError as e:
            raise EngineNotFoundError(f"Failed to launch {self.executable}: {e}") from e

        if result.returncode != 0:
            stderr = (result.stderr or "").strip()[-STDERR_TAIL_CHARS:]
            raise EngineFailedError(
                f"Ghostscript exited with status {result.returncode}: {stderr}",
                returncode=result.returncode,
                stderr=stderr,
            )
