"""Declarative threshold rules and their reduction into a bounded score.

A rule pairs a predicate over a metrics object with a signed delta and the
messages it contributes when it fires. Scorers keep their rules as data and
run them through :func:`apply_rules`, which is pure and order preserving.
"""

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from typing import Generic, TypeVar

MIN_SCORE = 0.0
MAX_SCORE = 100.0
BASE_SCORE = 50.0

M = TypeVar("M")


def clamp(value: float, low: float = MIN_SCORE, high: float = MAX_SCORE) -> float:
    """Clamp a value into [low, high]."""
    return max(low, min(high, value))


@dataclass(frozen=True)
class Rule(Generic[M]):
    """A scoring rule: when ``applies`` holds, add ``delta`` and emit messages.

    ``per`` turns the delta into a per-item amount, e.g. -5 for each snack.
    """

    name: str
    applies: Callable[[M], bool]
    delta: float = 0.0
    warnings: tuple[str, ...] = ()
    recommendations: tuple[str, ...] = ()
    advice: tuple[str, ...] = ()
    per: Callable[[M], float] | None = None

    def delta_for(self, metrics: M) -> float:
        if self.per is None:
            return self.delta
        return self.delta * self.per(metrics)


@dataclass(frozen=True)
class RuleOutcome:
    """Result of reducing a rule list over metrics."""

    score: float
    fired: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    recommendations: list[str] = field(default_factory=list)
    advice: list[str] = field(default_factory=list)


def apply_rules(
    metrics: M, rules: Iterable[Rule[M]], base: float = BASE_SCORE
) -> RuleOutcome:
    """Apply every firing rule to ``base`` and clamp the result."""
    score = base
    fired: list[str] = []
    warnings: list[str] = []
    recommendations: list[str] = []
    advice: list[str] = []
    for rule in rules:
        if not rule.applies(metrics):
            continue
        score += rule.delta_for(metrics)
        fired.append(rule.name)
        warnings.extend(rule.warnings)
        recommendations.extend(rule.recommendations)
        advice.extend(rule.advice)
    return RuleOutcome(
        score=clamp(score),
        fired=fired,
        warnings=warnings,
        recommendations=recommendations,
        advice=advice,
    )


def always(_: object) -> bool:
    """Predicate for rules that always fire."""
    return True
