"""Tests for the health analysis service."""

import logging

from nutrition_engine.services.analysis import HealthAnalysisService
from nutrition_engine.services.scoring.fertility import female_fertility_scorer
from tests.conftest import make_entry


def test_analyze_all_runs_every_scorer(analysis_service: HealthAnalysisService) -> None:
    entries = iter([make_entry("white rice", carbs=50), make_entry("salmon")])

    report = analysis_service.analyze_all(entries)

    assert report.pcos.glycemic_load == 36.5
    assert report.diabetes.carb_load == 50
    assert report.female_fertility.fertility_foods == ["salmon"]
    assert report.male_fertility.fertility_foods == ["salmon"]


def test_verbose_service_logs_scores(caplog, monkeypatch) -> None:
    monkeypatch.setattr(logging.getLogger("nutrition_engine"), "propagate", True)
    service = HealthAnalysisService(
        female_fertility=female_fertility_scorer(), verbose=True
    )

    with caplog.at_level(logging.INFO, logger="nutrition_engine.services.analysis"):
        service.analyze_female_fertility([])

    assert "condition=female_fertility" in caplog.text
