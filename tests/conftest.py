import pytest

from gridgeom import get_geometry_config, set_diagnostic_sink, set_geometry_config


@pytest.fixture
def diagnostics():
    records = []

    def _sink(component, operation, message):
        records.append((component, operation, message))

    previous = set_diagnostic_sink(_sink)
    yield records
    set_diagnostic_sink(previous)


@pytest.fixture(autouse=True)
def _restore_geometry_config():
    config = get_geometry_config()
    yield
    set_geometry_config(config)
