"""Locality preserving visualisation of binary files along a Hilbert curve."""

from hilbmap.errors import (DegenerateSizeError, HilbmapError, InputError,
                            MappingInvariantViolation, OutputError)
from hilbmap.hilbert import (Hilbert, hilbert_index, hilbert_indices,
                             hilbert_point, hilbert_points, map_byte_index)
from hilbmap.layout import CanvasLayout, layout
from hilbmap.pipeline import Rendering, convert, render

__all__ = [
    "CanvasLayout",
    "DegenerateSizeError",
    "Hilbert",
    "HilbmapError",
    "InputError",
    "MappingInvariantViolation",
    "OutputError",
    "Rendering",
    "convert",
    "hilbert_index",
    "hilbert_indices",
    "hilbert_point",
    "hilbert_points",
    "layout",
    "map_byte_index",
    "render",
]
