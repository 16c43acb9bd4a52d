"""Health analysis service that runs every condition scorer."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from nutrition_engine.domain.foods import FoodEntry
from nutrition_engine.domain.scores import (
    DiabetesScore,
    FertilityScore,
    GeneralHealthScore,
    HealthReport,
    PCOSScore,
)
from nutrition_engine.services.scoring.diabetes import DiabetesScorer
from nutrition_engine.services.scoring.fertility import (
    FertilityScorer,
    female_fertility_scorer,
    male_fertility_scorer,
)
from nutrition_engine.services.scoring.general import GeneralHealthScorer
from nutrition_engine.services.scoring.pcos import PCOSScorer

_logger = logging.getLogger(__name__)


@dataclass
class HealthAnalysisService:
    """Score a list of food entries against each supported condition."""

    pcos_scorer: PCOSScorer = field(default_factory=PCOSScorer)
    diabetes_scorer: DiabetesScorer = field(default_factory=DiabetesScorer)
    general_scorer: GeneralHealthScorer = field(default_factory=GeneralHealthScorer)
    female_fertility: FertilityScorer = field(default_factory=female_fertility_scorer)
    male_fertility: FertilityScorer = field(default_factory=male_fertility_scorer)
    verbose: bool = False

    def analyze_pcos(self, entries: Iterable[FoodEntry]) -> PCOSScore:
        result = self.pcos_scorer.analyze(entries)
        self._log("pcos", result.score)
        return result

    def analyze_diabetes(self, entries: Iterable[FoodEntry]) -> DiabetesScore:
        result = self.diabetes_scorer.analyze(entries)
        self._log("diabetes", result.score)
        return result

    def analyze_general_health(
        self, entries: Iterable[FoodEntry]
    ) -> GeneralHealthScore:
        result = self.general_scorer.analyze(entries)
        self._log("general_health", result.score)
        return result

    def analyze_female_fertility(self, entries: Iterable[FoodEntry]) -> FertilityScore:
        result = self.female_fertility.analyze(entries)
        self._log("female_fertility", result.score)
        return result

    def analyze_male_fertility(self, entries: Iterable[FoodEntry]) -> FertilityScore:
        result = self.male_fertility.analyze(entries)
        self._log("male_fertility", result.score)
        return result

    def analyze_all(self, entries: Iterable[FoodEntry]) -> HealthReport:
        """Run every scorer over the same entries."""
        materialized = list(entries)
        return HealthReport(
            pcos=self.analyze_pcos(materialized),
            diabetes=self.analyze_diabetes(materialized),
            general_health=self.analyze_general_health(materialized),
            female_fertility=self.analyze_female_fertility(materialized),
            male_fertility=self.analyze_male_fertility(materialized),
        )

    def _log(self, condition: str, score: float) -> None:
        if self.verbose:
            _logger.info("Health score: condition=%s score=%.1f", condition, score)
        else:
            _logger.debug("Health score: condition=%s score=%.1f", condition, score)
