"""Write encoded surfaces as text grids."""

from __future__ import annotations

from collections.abc import Iterable

from surftext.models.metadata import SurfaceMetadata


def serialize_symbols(symbols: Iterable[str], side: int) -> str:
    """Lay symbols out as rows of ``side`` characters, then a blank line.

    Every row ends with a newline; a final newline closes the grid.
    """
    if side <= 0:
        raise ValueError(f"Row length must be positive, got {side}")
    chunks: list[str] = []
    for i, symbol in enumerate(symbols, start=1):
        chunks.append(symbol)
        if i % side == 0:
            chunks.append("\n")
    chunks.append("\n")
    return "".join(chunks)


def serialize_document(symbols: Iterable[str], metadata: SurfaceMetadata) -> str:
    """Metadata line followed by the symbol grid."""
    return metadata.to_line() + "\n" + serialize_symbols(symbols, metadata.side)
