import os

from PIL import Image
import pytest

from animation import Animation, assemble
from palette import build_palette
from scene import Star
from writer import WriteError, write_animation


@pytest.fixture
def animation(settings):
    stars = [Star(-150.0, 80.0, depth, 3.0) for depth in (1.0, 3.0, 5.0)]
    return assemble(stars, build_palette(), settings)


def test_writes_complete_gif(animation, tmp_path):
    path = write_animation(animation, str(tmp_path))
    assert os.path.dirname(path) == str(tmp_path)
    name = os.path.basename(path)
    assert name.startswith("space-")
    assert name.endswith(".gif")
    assert os.listdir(str(tmp_path)) == [name]
    with Image.open(path) as gif:
        assert gif.n_frames == 30


def test_names_are_unique(animation, tmp_path):
    paths = {write_animation(animation, str(tmp_path)) for _ in range(3)}
    assert len(paths) == 3
    assert sorted(os.listdir(str(tmp_path))) == \
        sorted(os.path.basename(p) for p in paths)


def test_failed_encode_leaves_nothing(tmp_path):
    with pytest.raises(WriteError):
        write_animation(Animation([], build_palette()), str(tmp_path))
    assert os.listdir(str(tmp_path)) == []


def test_missing_directory(animation, tmp_path):
    with pytest.raises(WriteError):
        write_animation(animation, str(tmp_path / "missing"))


class HalfWritten(object):

    """Writes a few bytes, then fails the way a broken encoder might."""

    def __init__(self, error):
        self.error = error

    def save(self, fp):
        fp.write(b"partial")
        raise self.error


@pytest.mark.parametrize("error", [TypeError("bad frame"), KeyError("duration")])
def test_any_encode_error_removes_partial_file(tmp_path, error):
    with pytest.raises(WriteError):
        write_animation(HalfWritten(error), str(tmp_path))
    assert os.listdir(str(tmp_path)) == []


def test_interrupt_removes_partial_file_and_propagates(tmp_path):
    with pytest.raises(KeyboardInterrupt):
        write_animation(HalfWritten(KeyboardInterrupt()), str(tmp_path))
    assert os.listdir(str(tmp_path)) == []
