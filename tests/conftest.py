import pytest
import tempfile
import shutil
from pathlib import Path

from pathbufd.core.config import Config, get_config, set_config


@pytest.fixture
def temp_workspace():
    """Create a temporary directory for test files."""
    temp_dir = tempfile.mkdtemp()
    yield Path(temp_dir)
    shutil.rmtree(temp_dir)


@pytest.fixture
def tight_config():
    """Install a configuration with a small allocator limit."""
    previous = get_config()
    config = Config(max_capacity=32, min_non_zero_capacity=8)
    set_config(config)
    yield config
    set_config(previous)


@pytest.fixture
def nested_path():
    """A relative path a few segments deep."""
    from pathbufd import PathBufD
    return PathBufD("src/pathbufd/core")


@pytest.fixture
def default_config(monkeypatch):
    """Install a configuration built from an environment without overrides."""
    monkeypatch.delenv("PATHBUFD_MAX_CAPACITY", raising=False)
    monkeypatch.delenv("PATHBUFD_MIN_NON_ZERO_CAPACITY", raising=False)
    previous = get_config()
    config = Config()
    set_config(config)
    yield config
    set_config(previous)
