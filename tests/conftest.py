import pytest

from fakes import RecordingUI


@pytest.fixture
def ui():
    return RecordingUI()


@pytest.fixture
def no_sleep(monkeypatch):
    calls = []
    monkeypatch.setattr("time.sleep", lambda seconds: calls.append(seconds))
    return calls
