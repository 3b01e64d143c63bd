"""Surface metadata carried on the first line of a rendered text."""

from __future__ import annotations

from pydantic import BaseModel, Field

from surftext.errors import SurfaceError

_KEYS = ("rms", "clx", "cly", "N")


class SurfaceMetadata(BaseModel):
    rms: float = Field(..., description="Root-mean-square reference height")
    clx: float = Field(default=0.0, description="Correlation length along x")
    cly: float = Field(default=0.0, description="Correlation length along y")
    side: int = Field(..., gt=0, description="Grid side length N (N x N samples)")

    def to_line(self) -> str:
        """``rms:<rms>:clx:<clx>:cly:<cly>:N:<N>`` with round-trippable floats."""
        return f"rms:{self.rms!r}:clx:{self.clx!r}:cly:{self.cly!r}:N:{self.side}"

    @classmethod
    def from_line(cls, line: str) -> SurfaceMetadata:
        parts = line.strip().split(":")
        if len(parts) != 2 * len(_KEYS) or tuple(parts[0::2]) != _KEYS:
            raise SurfaceError(f"Malformed metadata line: {line.strip()!r}")
        values = parts[1::2]
        try:
            return cls(
                rms=float(values[0]),
                clx=float(values[1]),
                cly=float(values[2]),
                side=int(values[3]),
            )
        except ValueError as e:
            raise SurfaceError(f"Malformed metadata line: {line.strip()!r} ({e})") from e

    @staticmethod
    def is_metadata_line(line: str) -> bool:
        return line.lstrip().startswith("rms:")
