"""Logline diagnosis: scores, word economy, rewrites and recommendations in one pass.

`diagnose` is the single entry point for a full report; `compare` runs two
loglines through it and lines the results up side by side. Neither keeps state
between calls and neither raises on malformed input.
"""

from __future__ import annotations

import logging
import random
from typing import List, Optional

from .config import DoctorSettings, make_rng
from .models import (
    ComparisonPoint,
    ConceptInput,
    Diagnosis,
    ElementAnalysis,
    LoglineComparison,
    WordEconomyReport,
)
from .rewrites import generate
from .scoring import score_all
from .templates import get_templates_for_genre
from .word_economy import analyze

logger = logging.getLogger(__name__)

MAX_QUICK_FIXES = 5
QUICK_FIX_BELOW = 70
PRIORITY_BELOW = 60
TIE_MARGIN = 3


def _weakest(analyses: List[ElementAnalysis]) -> ElementAnalysis:
    weakest = analyses[0]
    for a in analyses[1:]:
        if a.score <= weakest.score:
            weakest = a
    return weakest


def quick_fixes(analyses: List[ElementAnalysis], economy: WordEconomyReport) -> List[str]:
    fixes: List[str] = []
    if economy.bloat_words:
        fixes.append('Remove filler words: "' + '", "'.join(economy.bloat_words[:3]) + '"')
    if len(economy.weak_verbs) > 2:
        fixes.append(f'Replace weak verbs like "{economy.weak_verbs[0]}" with stronger action words')
    if economy.status == "too_long":
        fixes.append(f"Cut {economy.word_count - economy.ideal_max} words to hit the sweet spot")
    for a in analyses:
        if a.score < QUICK_FIX_BELOW and a.suggestions:
            fixes.append(f"{a.element}: {a.suggestions[0]}")
    return fixes[:MAX_QUICK_FIXES]


def overall_assessment(score: int, analyses: List[ElementAnalysis]) -> str:
    weakest = _weakest(analyses).element.lower()
    if score >= 85:
        return (
            "Your logline is strong and market-ready. Minor refinements could push it to exceptional. "
            f"Focus on making your {weakest} even sharper."
        )
    if score >= 70:
        return (
            f"Good foundation with room for improvement. Your {weakest} is the weakest link—"
            "strengthening it could boost your score significantly."
        )
    if score >= 55:
        return (
            "Your concept has potential but the execution needs work. "
            f"Focus on clarifying your {weakest} and raising the stakes."
        )
    return (
        f"This logline needs substantial revision, starting with your {weakest}. Clearly define your "
        "protagonist, their goal, and what's at stake if they fail."
    )


def top_recommendation(analyses: List[ElementAnalysis], economy: WordEconomyReport) -> str:
    weakest = _weakest(analyses)
    if weakest.score < PRIORITY_BELOW:
        return f"Priority: Fix your {weakest.element.lower()}. {weakest.weakness}".rstrip()
    if economy.status != "optimal":
        return f"Priority: {economy.recommendation}"
    return f"Priority: Polish your {weakest.element.lower()} to elevate from good to great."


def diagnose(
    concept: ConceptInput,
    *,
    rng: Optional[random.Random] = None,
    seed: Optional[int] = None,
    settings: Optional[DoctorSettings] = None,
) -> Diagnosis:
    rng = make_rng(rng, seed, settings)
    logline, genre, score = concept.logline, concept.genre, concept.current_score

    analyses = score_all(logline, genre)
    economy = analyze(logline)
    rewrites = generate(logline, genre, score, analyses, rng)
    templates = get_templates_for_genre(genre)
    if not templates:
        logger.debug("no templates for genre %r", genre)

    return Diagnosis(
        concept=concept,
        current_score=score,
        element_analyses=analyses,
        word_economy=economy,
        rewrites=rewrites,
        templates=templates,
        overall_assessment=overall_assessment(score, analyses),
        quick_fixes=quick_fixes(analyses, economy),
        top_recommendation=top_recommendation(analyses, economy),
    )

# ───────────────── A/B comparison ───────────────── #

def _winner(a: int, b: int, margin: int = 0) -> str:
    if abs(a - b) <= margin:
        return "Tie"
    return "A" if a > b else "B"


_STATUS_RANK = {"optimal": 0, "too_long": 1, "too_short": 1}


def _points(da: Diagnosis, db: Diagnosis) -> List[ComparisonPoint]:
    points = [ComparisonPoint(
        category="Overall Score",
        value_a=f"{da.current_score}/100",
        value_b=f"{db.current_score}/100",
        winner=_winner(da.current_score, db.current_score),
        analysis="Greenlight score supplied with each version.",
    )]
    for ea, eb in zip(da.element_analyses, db.element_analyses):
        points.append(ComparisonPoint(
            category=ea.element,
            value_a=f"{ea.score}/95",
            value_b=f"{eb.score}/95",
            winner=_winner(ea.score, eb.score),
            analysis=ea.assessment if ea.score >= eb.score else eb.assessment,
        ))
    wa, wb = da.word_economy, db.word_economy
    points.append(ComparisonPoint(
        category="Word Economy",
        value_a=f"{wa.word_count} words ({wa.status})",
        value_b=f"{wb.word_count} words ({wb.status})",
        # lower rank wins, then fewer filler words
        winner=_winner(
            -(_STATUS_RANK[wa.status] * 100 + len(wa.bloat_words)),
            -(_STATUS_RANK[wb.status] * 100 + len(wb.bloat_words)),
        ),
        analysis="Closer to the 25-45 word band with less filler is better.",
    ))
    return points


def _advantages(primary: Diagnosis, secondary: Diagnosis, points: List[ComparisonPoint], side: str) -> List[str]:
    out: List[str] = []
    if primary.current_score > secondary.current_score:
        out.append("Higher overall greenlight score")
    for p in points[1:-1]:
        if p.winner == side:
            out.append(f"Stronger {p.category.lower()}")
    if points[-1].winner == side:
        out.append("Tighter word economy")
    if len(primary.quick_fixes) < len(secondary.quick_fixes):
        out.append("Fewer quick fixes needed")
    return out


def compare(
    concept_a: ConceptInput,
    concept_b: ConceptInput,
    *,
    rng: Optional[random.Random] = None,
    seed: Optional[int] = None,
    settings: Optional[DoctorSettings] = None,
) -> LoglineComparison:
    """Diagnose two versions of a logline and pick the stronger one (|diff| <= 3 is a tie)."""
    rng = make_rng(rng, seed, settings)
    da = diagnose(concept_a, rng=rng)
    db = diagnose(concept_b, rng=rng)

    diff = da.current_score - db.current_score
    winner = _winner(da.current_score, db.current_score, TIE_MARGIN)
    points = _points(da, db)
    adv_a = _advantages(da, db, points, "A")
    adv_b = _advantages(db, da, points, "B")

    if winner == "Tie":
        recommendation = (
            "Both versions are competitively strong. Consider combining the best elements: "
            "take the stronger protagonist/conflict from one and the unique hook from the other."
        )
    else:
        other = "B" if winner == "A" else "A"
        win_adv = adv_a if winner == "A" else adv_b
        lose_adv = adv_b if winner == "A" else adv_a
        reasons = ", ".join(a.lower() for a in win_adv[:3]) or "a higher overall score"
        keep = lose_adv[0].lower() if lose_adv else "its unique angle"
        recommendation = (
            f"Version {winner} scores higher due to: {reasons}. However, Version {other} has "
            f"elements worth preserving, particularly: {keep}."
        )

    return LoglineComparison(
        diagnosis_a=da,
        diagnosis_b=db,
        winner=winner,
        score_difference=abs(diff),
        points=points,
        advantages_a=adv_a,
        advantages_b=adv_b,
        recommendation=recommendation,
    )
