import pytest

from settings import Settings


@pytest.fixture
def settings(tmp_path):
    """Default geometry, a small scene, and a scratch output directory."""
    return Settings(output_dir=str(tmp_path), count=2,
                    min_stars=5, max_stars=20)
