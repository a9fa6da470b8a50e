"""Test that all modules can be imported successfully."""


def test_core_imports():
    """Test core module imports."""
    from pathbufd.core import PathBufD, Config, CapacityError, build_path, pathd
    
    # Basic instantiation tests
    config = Config()
    assert config.max_capacity > 0
    
    buf = PathBufD.new()
    assert buf.capacity() == 0
    assert issubclass(CapacityError, Exception)
    assert isinstance(pathd("a"), str)
    assert isinstance(build_path("a"), PathBufD)


def test_utils_imports():
    """Test utils module imports."""
    from pathbufd.utils import PathUtils, setup_logging, to_display_str
    
    assert hasattr(PathUtils, 'split_segments')
    assert callable(setup_logging)
    assert to_display_str("a") == "a"


def test_package_exports():
    import pathbufd
    
    for name in pathbufd.__all__:
        assert hasattr(pathbufd, name)
