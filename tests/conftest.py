# tests/conftest.py
# shared fixtures: keep log output inside tmp dirs, scripted randomness

import pytest

from trigram_markov.utils.logger_utils import Log


@pytest.fixture(autouse=True)
def isolated_log(tmp_path, monkeypatch):
    log_file = tmp_path / "test.log"
    monkeypatch.setattr(Log, "path", str(log_file))
    monkeypatch.setattr(Log, "echo", False)
    return log_file


class ScriptedRandom:
    """RandomSource returning preset indices, fails loudly if one is out of range."""

    def __init__(self, picks):
        self.picks = list(picks)
        self.calls = []

    def randrange(self, n):
        if not self.picks:
            raise AssertionError(f"unexpected draw over {n} items")
        v = self.picks.pop(0)
        assert 0 <= v < n, f"scripted pick {v} out of range for {n}"
        self.calls.append(n)
        return v


@pytest.fixture
def scripted():
    return ScriptedRandom
