import os
from pathlib import Path
from unittest.mock import patch

import pytest

from plugspec.config import Options
from plugspec.spec import SpecNormalizer


@pytest.fixture(autouse=True)
def mock_settings_env_vars(tmp_path):
    """Automatically mock HOME to keep user options and logs out of the real home."""
    fake_home = tmp_path / "fake_home"
    fake_home.mkdir()

    with patch("pathlib.Path.home", return_value=fake_home):
        with patch.dict(os.environ, {"HOME": str(fake_home)}):
            yield


@pytest.fixture
def options(tmp_path: Path) -> Options:
    return Options(
        root=str(tmp_path / "root"),
        dev_path=str(tmp_path / "dev"),
        dev_patterns=("mydev",),
    )


@pytest.fixture
def normalizer(options: Options) -> SpecNormalizer:
    return SpecNormalizer(options)
