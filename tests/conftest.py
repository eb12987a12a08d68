import json

import pytest
from PIL import Image


def make_image(path, size, fmt=None):
    path.parent.mkdir(parents=True, exist_ok=True)
    Image.new("RGB", size, (200, 120, 40)).save(path, format=fmt)
    return path


def write_metas(path, records):
    path.write_text(json.dumps(records), encoding="utf-8")
    return path


@pytest.fixture
def image_root(tmp_path):
    """Root holding a.png (500x300), b.jpg (100x100) and c.txt."""
    root = tmp_path / "images"
    make_image(root / "a.png", (500, 300))
    make_image(root / "b.jpg", (100, 100), fmt="JPEG")
    (root / "c.txt").write_text("not an image", encoding="utf-8")
    return root


@pytest.fixture
def metadata_file(tmp_path, image_root):
    return write_metas(
        tmp_path / "metas.json",
        [
            {"path": str(image_root / "a.png"), "score": 8.2},
            {"path": str(image_root / "b.jpg"), "score": 3.0},
        ],
    )
