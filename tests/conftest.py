import pytest


@pytest.fixture
def sequence_source():
    """Deterministic stand-in for the CSPRNG: a source returning `values` in order."""
    def make(values):
        it = iter(values)
        return lambda: next(it)
    return make


@pytest.fixture
def passcraft_home(tmp_path, monkeypatch):
    monkeypatch.setenv("PASSCRAFT_HOME", str(tmp_path))
    return tmp_path
