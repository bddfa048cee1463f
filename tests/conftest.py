import pytest

from motus.estimator import EntropyEstimate
from motus.errors import AnalysisError


CRACK_TIMES = {
    "100/h": "centuries",
    "10/s": "centuries",
    "10^4/s": "3 years",
    "10^10/s": "2 minutes",
}


class StubEstimator:
    """Returns a fixed estimate and remembers what it was asked about."""

    def __init__(self, score=4, guesses_log10=15.6, crack_times=None):
        self.score = score
        self.guesses_log10 = guesses_log10
        self.crack_times = dict(crack_times or CRACK_TIMES)
        self.seen = []

    def estimate(self, password):
        self.seen.append(password)
        return EntropyEstimate(self.score, self.guesses_log10, dict(self.crack_times))


class FailingEstimator:
    def estimate(self, password):
        raise AnalysisError("estimator exploded")


@pytest.fixture
def stub_estimator():
    return StubEstimator()


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    # keep the user's real settings file out of every test
    monkeypatch.setenv("APPDATA", str(tmp_path))
    monkeypatch.setenv("HOME", str(tmp_path))
    return tmp_path
