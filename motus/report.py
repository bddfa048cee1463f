"""
motus.report

Security report for a generated password:
- SecurityAnalysis: strength level, guesses as "10^N", crack-time strings
- render_report(analysis, console): three rich tables (password, analysis, crack times)
- to_dict()/password_output(): structured form for JSON output
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

from rich.console import Console
from rich.table import Table
from rich.text import Text

from .estimator import CRACK_TIME_KEYS, CRACK_TIME_PROFILES, EntropyEstimate, Estimator
from .generator import PasswordKind
from .strength import PasswordStrength, classify, from_label

logger = logging.getLogger(__name__)

MAX_WIDTH = 80


def format_guesses(guesses_log10: float) -> str:
    """9.6 -> '10^10'"""
    return f"10^{guesses_log10:.0f}"


@dataclass(frozen=True)
class SecurityAnalysis:
    password: str
    strength: PasswordStrength
    guesses: str
    crack_times: Dict[str, str]

    @classmethod
    def from_estimate(cls, password: str, estimate: EntropyEstimate) -> "SecurityAnalysis":
        missing = [k for k in CRACK_TIME_KEYS if k not in estimate.crack_times]
        if missing:
            raise ValueError(f"estimate is missing crack times: {', '.join(missing)}")
        return cls(
            password=password,
            strength=classify(estimate.score),
            guesses=format_guesses(estimate.guesses_log10),
            crack_times={k: estimate.crack_times[k] for k in CRACK_TIME_KEYS},
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "strength": self.strength.label,
            "guesses": self.guesses,
            "crack_times": dict(self.crack_times),
        }

    @classmethod
    def from_dict(cls, password: str, data: Dict[str, Any]) -> "SecurityAnalysis":
        return cls(
            password=password,
            strength=from_label(data["strength"]),
            guesses=data["guesses"],
            crack_times={k: data["crack_times"][k] for k in CRACK_TIME_KEYS},
        )


def analyze(password: str, estimator: Estimator) -> SecurityAnalysis:
    """Run the estimator and build the report. Estimator errors propagate."""
    estimate = estimator.estimate(password)
    analysis = SecurityAnalysis.from_estimate(password, estimate)
    logger.debug("analysis: strength=%s guesses=%s", analysis.strength.label, analysis.guesses)
    return analysis


def password_output(kind, password: str, analysis: Optional[SecurityAnalysis] = None) -> Dict[str, Any]:
    """Structured output; the analysis key is only present when one was made."""
    out: Dict[str, Any] = {"kind": PasswordKind(kind).value, "password": password}
    if analysis is not None:
        out["analysis"] = analysis.to_dict()
    return out


# ---------------- text rendering ----------------

def _password_table(analysis: SecurityAnalysis) -> Table:
    table = Table(show_header=True, header_style="bold")
    table.add_column("Generated Password", max_width=MAX_WIDTH, overflow="fold")
    table.add_row(Text(analysis.password))
    return table


def _analysis_table(analysis: SecurityAnalysis) -> Table:
    table = Table(title="Security Analysis", title_justify="left", show_header=False)
    table.add_column(style="bold")
    table.add_column()
    table.add_row("Strength", Text(analysis.strength.label, style=analysis.strength.color))
    table.add_row("Guesses", Text(analysis.guesses))
    return table


def _crack_times_table(analysis: SecurityAnalysis) -> Table:
    table = Table(title="Crack Times", title_justify="left", show_header=False)
    table.add_column(style="bold")
    table.add_column()
    for key, label, _ in CRACK_TIME_PROFILES:
        table.add_row(Text(label), Text(analysis.crack_times[key]))
    return table


def render_report(analysis: SecurityAnalysis, console: Console) -> None:
    console.print(_password_table(analysis))
    console.print(_analysis_table(analysis))
    console.print(_crack_times_table(analysis))
