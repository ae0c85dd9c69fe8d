"""Lightweight evaluation harness for deterministic scenarios."""

from __future__ import annotations

from typing import Dict, List

from agents.clothing_advisor import ClothingAdvisor
from babyweather_app.config import AdvisorConfig
from evaluation.scenarios import EvaluationScenario, SCENARIOS
from models.recommendation import Recommendation


def _evaluate_expectations(expectations: Dict[str, object], recommendation: Recommendation) -> Dict[str, object]:
    checks: Dict[str, bool] = {}
    items = set(recommendation.items)
    if "band" in expectations:
        checks["band"] = recommendation.band.value == expectations["band"]
    if "outer" in expectations:
        checks["outer"] = recommendation.slots.outer == expectations["outer"]
    if expectations.get("outer_candidates_include"):
        outer_candidates = set(recommendation.debug_summary.get("candidates", {}).get("outer", []))
        checks["outer_candidates_include"] = set(expectations["outer_candidates_include"]) <= outer_candidates
    if expectations.get("items_include"):
        checks["items_include"] = set(expectations["items_include"]) <= items
    if expectations.get("items_exclude"):
        checks["items_exclude"] = not set(expectations["items_exclude"]) & items
    if "alternatives" in expectations:
        actual = {slot: list(names) for slot, names in recommendation.alternatives.items()}
        checks["alternatives"] = actual == expectations["alternatives"]
    checks["meta_cards_capped"] = len(recommendation.meta_cards) <= 3
    return {"passed": all(checks.values()), "checks": checks}


def run_scenario(scenario: EvaluationScenario, advisor: ClothingAdvisor | None = None) -> Dict[str, object]:
    advisor = advisor or ClothingAdvisor(AdvisorConfig(tip_seed=0))
    recommendation = advisor.recommend(
        scenario.weather,
        scenario.mode,
        scenario.profile,
        manual_temperature=scenario.manual_temperature,
        alternative_indices=scenario.alternative_indices,
    )
    evaluation = _evaluate_expectations(scenario.expectations, recommendation)
    return {
        "scenario": scenario.name,
        "passed": evaluation["passed"],
        "checks": evaluation["checks"],
        "item_count": len(recommendation.items),
        "response": recommendation.to_dict(),
    }


def run_evaluation_suite() -> List[Dict[str, object]]:
    return [run_scenario(scenario) for scenario in SCENARIOS]


def run_smoke_checks() -> List[str]:
    results = run_evaluation_suite()
    return [f"{result['scenario']}: {'passed' if result['passed'] else 'failed'}" for result in results]


__all__ = ["run_evaluation_suite", "run_scenario", "run_smoke_checks"]
