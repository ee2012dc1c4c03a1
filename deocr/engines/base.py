"""Engine interface: strip the text layer from one PDF"""

from abc import ABC, abstractmethod
from pathlib import Path


class TextLayerStripper(ABC):
    """
    Narrow capability the batch depends on.

    Implementations write a copy of ``input_path`` without its text layer
    to ``output_path`` and raise an ``EngineError`` subclass on failure.
    The input file must never be modified.
    """

    name = "engine"

    @abstractmethod
    def strip(self, input_path: Path, output_path: Path) -> None:
        """Write a text-free copy of input_path to output_path"""

    def is_available(self) -> bool:
        """Whether the engine can be used in this environment"""
        return True
