from pathlib import Path

import pytest

from core.filtering.dimensions import in_range, matches_dims, probe_dimensions
from core.models.domain import Dimensions, Range

from conftest import make_image


def _fixed_probe(width, height):
    return lambda path: Dimensions(width=width, height=height)


def _failing_probe(path):
    return None


@pytest.mark.parametrize(
    ("value", "bounds", "expected"),
    [
        (5, None, True),
        (5, Range(), True),
        (5, Range(min=5), True),
        (4, Range(min=5), False),
        (10, Range(max=10), True),
        (11, Range(max=10), False),
        (0, Range(min=0, max=0), True),
        (200, Range(min=200, max=1000), True),
        (1000, Range(min=200, max=1000), True),
        (1001, Range(min=200, max=1000), False),
    ],
)
def test_in_range(value, bounds, expected):
    assert in_range(value, bounds) is expected


def test_probe_reads_header_size(tmp_path):
    path = make_image(tmp_path / "wide.png", (640, 480))
    assert probe_dimensions(path) == Dimensions(width=640, height=480)


def test_probe_returns_none_for_unreadable_files(tmp_path):
    bogus = tmp_path / "broken.jpg"
    bogus.write_bytes(b"definitely not a jpeg")
    assert probe_dimensions(bogus) is None
    assert probe_dimensions(tmp_path / "missing.png") is None


def test_no_ranges_matches_without_probing():
    def exploding_probe(path):
        raise AssertionError("probe should not be called")

    assert matches_dims(Path("x.png"), None, None, probe=exploding_probe)


def test_width_and_height_are_conjunctive():
    probe = _fixed_probe(500, 300)
    assert matches_dims(Path("a.png"), Range(200, 1000), Range(100, 400), probe=probe)
    assert not matches_dims(Path("a.png"), Range(200, 1000), Range(400, None), probe=probe)
    assert not matches_dims(Path("a.png"), Range(None, 499), None, probe=probe)
    assert matches_dims(Path("a.png"), None, Range(300, 300), probe=probe)


@pytest.mark.parametrize(
    ("width_range", "height_range"),
    [(Range(), None), (None, Range()), (Range(0, None), Range(0, None)), (Range(1, 2), None)],
)
def test_probe_failure_excludes_image_whatever_the_bounds(width_range, height_range):
    assert not matches_dims(Path("a.png"), width_range, height_range, probe=_failing_probe)


def test_matches_real_file(tmp_path):
    path = make_image(tmp_path / "small.png", (100, 100))
    assert not matches_dims(path, Range(200, 1000), None)
    assert matches_dims(path, Range(50, 150), Range(100, 100))
