"""Entry points: logging setup and the surface → text → graph flow."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from surftext.config import Settings, settings
from surftext.engine.config import EncoderConfig
from surftext.engine.encoder import Encoder
from surftext.graph.ngram import GraphLoadResult
from surftext.surface.grid import Surface

logger = logging.getLogger(__name__)


def configure_logging(source: Settings | None = None) -> None:
    load_dotenv()
    source = source or settings
    logging.basicConfig(
        level=getattr(logging, source.log_level.upper(), logging.INFO),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )


@dataclass
class EncodingRun:
    encoder: Encoder
    text_path: Path
    graph: GraphLoadResult


def encode_surface(
    surface: Surface,
    text_path: str | Path,
    zones: int | None = None,
    strategy: str | None = None,
    scale: int | None = None,
    source: Settings | None = None,
) -> EncodingRun:
    """Encode ``surface``, write its text to ``text_path`` and build its n-gram graph."""
    source = source or settings
    zones = zones if zones is not None else source.default_zones
    strategy = strategy or source.default_strategy
    text_path = Path(text_path)

    # Boundary tables are computed on the rescaled heights
    if scale is not None:
        surface = surface.rescaled(surface.rms * 10.0**scale)
    encoder = Encoder(surface, zones, strategy, EncoderConfig.from_settings(source))
    encoder.classify()
    encoder.render_to(text_path)

    graph = encoder.to_graph(
        text_path,
        min_rank=source.ngram_min_rank,
        max_rank=source.ngram_max_rank,
        window=source.ngram_window,
    )
    if not graph.ok:
        logger.warning("Encoded %s but graph construction failed", text_path.name)
    return EncodingRun(encoder=encoder, text_path=text_path, graph=graph)
