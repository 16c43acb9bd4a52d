"""Dependency container wiring for the engine."""

from dataclasses import dataclass

from nutrition_engine.app_logging import configure_logging
from nutrition_engine.config import Settings
from nutrition_engine.services.analysis import HealthAnalysisService
from nutrition_engine.services.glycemic import GlycemicEngine
from nutrition_engine.services.nutrition import NutritionCalculator
from nutrition_engine.services.scoring.diabetes import DiabetesScorer
from nutrition_engine.services.scoring.fertility import (
    female_fertility_scorer,
    male_fertility_scorer,
)
from nutrition_engine.services.scoring.general import GeneralHealthScorer
from nutrition_engine.services.scoring.pcos import PCOSScorer
from nutrition_engine.services.units import UnitConversionResolver


@dataclass
class EngineContainer:
    """Holds engine-wide dependencies."""

    settings: Settings
    resolver: UnitConversionResolver
    calculator: NutritionCalculator
    glycemic: GlycemicEngine
    analysis_service: HealthAnalysisService


def build_container(settings: Settings | None = None) -> EngineContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    configure_logging(
        "DEBUG" if resolved_settings.debug else resolved_settings.log_level
    )
    resolver = UnitConversionResolver()
    calculator = NutritionCalculator(
        resolver=resolver,
        default_grams_per_piece=resolved_settings.default_grams_per_piece,
    )
    glycemic = GlycemicEngine()
    analysis_service = HealthAnalysisService(
        pcos_scorer=PCOSScorer(glycemic=glycemic),
        diabetes_scorer=DiabetesScorer(glycemic=glycemic),
        general_scorer=GeneralHealthScorer(glycemic=glycemic),
        female_fertility=female_fertility_scorer(glycemic),
        male_fertility=male_fertility_scorer(glycemic),
        verbose=resolved_settings.debug,
    )
    return EngineContainer(
        settings=resolved_settings,
        resolver=resolver,
        calculator=calculator,
        glycemic=glycemic,
        analysis_service=analysis_service,
    )
