"""Surface and encoded-text parsers.

Height files are whitespace-separated N×N grids, optionally preceded by a
metadata line in the same ``rms:..:clx:..:cly:..:N:..`` form the encoder
writes. Without a header, rms is computed from the heights.
"""

from __future__ import annotations

import io
import logging
from pathlib import Path

import numpy as np

from surftext.errors import SurfaceError
from surftext.models.metadata import SurfaceMetadata
from surftext.surface.grid import Surface

logger = logging.getLogger(__name__)


def _split_header(text: str) -> tuple[SurfaceMetadata | None, list[str]]:
    lines = [line for line in text.splitlines() if line.strip()]
    if lines and SurfaceMetadata.is_metadata_line(lines[0]):
        return SurfaceMetadata.from_line(lines[0]), lines[1:]
    return None, lines


def parse_surface(text: str) -> Surface:
    """Parse a height grid into a Surface."""
    meta, rows = _split_header(text)
    if not rows:
        raise SurfaceError("No height rows found")

    try:
        grid = np.loadtxt(io.StringIO("\n".join(rows)), dtype=np.float64, ndmin=2)
    except ValueError as e:
        raise SurfaceError(f"Unreadable height grid: {e}") from e

    if meta is None:
        return Surface.from_grid(grid)

    if grid.shape != (meta.side, meta.side):
        raise SurfaceError(
            f"Header declares N={meta.side} but grid has shape {grid.shape}"
        )
    return Surface.from_grid(grid, rms=meta.rms, clx=meta.clx, cly=meta.cly)


def load_surface(path: str | Path, encoding: str = "utf-8") -> Surface:
    path = Path(path)
    surface = parse_surface(path.read_text(encoding=encoding))
    logger.info("Loaded surface %s: N=%d, rms=%g", path.name, surface.side, surface.rms)
    return surface


def parse_encoded_text(text: str) -> tuple[SurfaceMetadata, list[str]]:
    """Split a rendered text into its metadata and its symbol rows."""
    meta, rows = _split_header(text)
    if meta is None:
        raise SurfaceError("Encoded text has no metadata line")
    if len(rows) != meta.side or any(len(row) != meta.side for row in rows):
        raise SurfaceError(f"Expected {meta.side} rows of {meta.side} symbols")
    return meta, rows


def read_encoded_text(
    path: str | Path, encoding: str = "utf-8"
) -> tuple[SurfaceMetadata, list[str]]:
    return parse_encoded_text(Path(path).read_text(encoding=encoding))
