"""
motus.estimator

Boundary to the password entropy estimator. The report only needs a score,
the log10 of the guess count and four crack-time strings; ZxcvbnEstimator
pulls those out of the zxcvbn package. Tests pass their own estimator.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Protocol, Tuple

from zxcvbn import zxcvbn

from .errors import AnalysisError

logger = logging.getLogger(__name__)

# (key used in structured output, row label in text output, zxcvbn field)
CRACK_TIME_PROFILES: Tuple[Tuple[str, str, str], ...] = (
    ("100/h", "100 attempts/hour", "online_throttling_100_per_hour"),
    ("10/s", "10 attempts/second", "online_no_throttling_10_per_second"),
    ("10^4/s", "10^4 attempts/second", "offline_slow_hashing_1e4_per_second"),
    ("10^10/s", "10^10 attempts/second", "offline_fast_hashing_1e10_per_second"),
)

CRACK_TIME_KEYS = tuple(key for key, _, _ in CRACK_TIME_PROFILES)


@dataclass(frozen=True)
class EntropyEstimate:
    score: int
    guesses_log10: float
    crack_times: Dict[str, str]  # keyed by CRACK_TIME_KEYS


class Estimator(Protocol):
    def estimate(self, password: str) -> EntropyEstimate:
        ...


class ZxcvbnEstimator:
    """Estimator backed by zxcvbn."""

    def __init__(self, user_inputs=None):
        self.user_inputs = list(user_inputs or [])

    def estimate(self, password: str) -> EntropyEstimate:
        if not password:
            raise AnalysisError("unable to analyze an empty password")
        try:
            result = zxcvbn(password, user_inputs=self.user_inputs)
            display = result["crack_times_display"]
            crack_times = {key: str(display[field]) for key, _, field in CRACK_TIME_PROFILES}
            estimate = EntropyEstimate(
                score=int(result["score"]),
                guesses_log10=float(result["guesses_log10"]),
                crack_times=crack_times,
            )
        except Exception as e:
            raise AnalysisError(f"unable to analyze password's safety: {e}") from e
        logger.debug("zxcvbn score=%d log10=%.2f", estimate.score, estimate.guesses_log10)
        return estimate
