"""Encoder configuration — controls domains and classification policy."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from surftext.config import Settings, settings


class OutOfDomainPolicy(str, enum.Enum):
    CLAMP = "clamp"  # snap to the nearest outer zone
    RAISE = "raise"  # OutOfDomainError


@dataclass
class EncoderConfig:
    """Tunables shared by the partition strategies and the encoder."""

    # Fixed report-unit domain of the uniform-width strategy
    uniform_low: float = -100.0
    uniform_high: float = 100.0

    # What the classifier does with values beyond the table span
    out_of_domain: OutOfDomainPolicy = OutOfDomainPolicy.CLAMP

    # Rendered text files
    text_encoding: str = "utf-8"

    @classmethod
    def from_settings(cls, source: Settings | None = None) -> EncoderConfig:
        source = source or settings
        return cls(
            out_of_domain=OutOfDomainPolicy(source.out_of_domain.lower()),
            text_encoding=source.text_encoding,
        )
