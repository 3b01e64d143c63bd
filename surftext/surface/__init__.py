"""Surface model, height-grid parsing and text serialization."""

from surftext.surface.grid import Sample, Surface
from surftext.surface.parser import load_surface, parse_encoded_text, parse_surface, read_encoded_text
from surftext.surface.serializer import serialize_document, serialize_symbols

__all__ = [
    "Sample",
    "Surface",
    "load_surface",
    "parse_surface",
    "parse_encoded_text",
    "read_encoded_text",
    "serialize_document",
    "serialize_symbols",
]
