"""Root conftest: with no sys.path handling of its own, its presence makes
pytest's rootdir insertion put the project root on sys.path, so the tests
import climate_analysis and config without an install."""
