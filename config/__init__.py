"""Configuration module for deocr"""

from .settings import DeOCRSettings, settings

__all__ = ["DeOCRSettings", "settings"]
