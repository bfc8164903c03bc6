"""
scoring/ - Multi-Event Scoring Core

Modules:
    utils.py        - Half-up rounding and lenient number parsing
    formulas.py     - ScoringFormula / ScoringTable (World Athletics coefficients)
    units.py        - Feet/meters and time parse/format
    engine.py       - ScoringEngine: result -> points, points -> estimated result
    events.py       - Event configuration per competition (kind, unit, day)
    score_sheet.py  - Whole-performance scoring with day subtotals
"""

from multievent.scoring.engine import ScoringEngine, calculate_points, estimate_result
from multievent.scoring.formulas import (
    DEFAULT_SCORING_TABLE,
    ScoringFormula,
    ScoringTable,
    build_scoring_table,
)

__all__ = [
    "DEFAULT_SCORING_TABLE",
    "ScoringEngine",
    "ScoringFormula",
    "ScoringTable",
    "build_scoring_table",
    "calculate_points",
    "estimate_result",
]
