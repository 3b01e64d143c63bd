"""surftext — encode surface height grids as symbol texts for n-gram comparison."""

from surftext.engine import Encoder, EncoderConfig, get_registry
from surftext.main import EncodingRun, configure_logging, encode_surface
from surftext.surface import Surface, load_surface

__all__ = [
    "Encoder",
    "EncoderConfig",
    "EncodingRun",
    "Surface",
    "configure_logging",
    "encode_surface",
    "get_registry",
    "load_surface",
]

__version__ = "0.1.0"
