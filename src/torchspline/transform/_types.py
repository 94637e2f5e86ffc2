"""Shared types for transform module."""

from typing import Literal

# Normalization mode for FFT-based transforms
NormMode = Literal["forward", "backward", "ortho"]

__all__ = ["NormMode"]
