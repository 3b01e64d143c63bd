"""Tests for height-grid and encoded-text parsing."""

import pytest

from surftext.errors import SurfaceError
from surftext.models.metadata import SurfaceMetadata
from surftext.surface.parser import load_surface, parse_encoded_text, parse_surface


def test_parse_with_header(uniform_grid_text):
    surface = parse_surface(uniform_grid_text)
    assert surface.side == 2
    assert surface.rms == 1.5
    assert (surface.clx, surface.cly) == (0.1, 0.2)
    assert list(surface.heights) == [1.0, -2.0, 3.5, 4.0]


def test_parse_without_header():
    surface = parse_surface("2 -2\n2 -2\n")
    assert surface.rms == pytest.approx(2.0)


def test_header_side_mismatch():
    with pytest.raises(SurfaceError, match="N=3"):
        parse_surface("rms:1.0:clx:0.0:cly:0.0:N:3\n1 2\n3 4\n")


def test_garbage_rows():
    with pytest.raises(SurfaceError):
        parse_surface("1 2\nx y\n")


def test_empty_text():
    with pytest.raises(SurfaceError):
        parse_surface("\n\n")


def test_load_surface(tmp_path, uniform_grid_text):
    path = tmp_path / "heights.txt"
    path.write_text(uniform_grid_text)
    assert load_surface(path).side == 2


def test_parse_encoded_text():
    meta, rows = parse_encoded_text("rms:2.0:clx:0.5:cly:0.5:N:2\nAB\nCD\n\n")
    assert meta == SurfaceMetadata(rms=2.0, clx=0.5, cly=0.5, side=2)
    assert rows == ["AB", "CD"]


def test_encoded_text_needs_header():
    with pytest.raises(SurfaceError):
        parse_encoded_text("AB\nCD\n")


def test_encoded_text_row_lengths():
    with pytest.raises(SurfaceError):
        parse_encoded_text("rms:2.0:clx:0.5:cly:0.5:N:2\nABC\nD\n")
