import importlib


def test_importable() -> None:
    module = importlib.import_module("tle_parser")
    assert hasattr(module, "parse")
    assert hasattr(module, "Tle")
    assert module.__version__
