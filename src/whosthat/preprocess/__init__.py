"""Text preprocessing applied after masking."""

from .normalizer import NormalizationResult, normalize

__all__ = ["NormalizationResult", "normalize"]
