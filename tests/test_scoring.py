from __future__ import annotations

import pathlib
import sys

PROJECT_ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

import pytest

from core.models import ELEMENTS
from core.scoring import (
    DIMENSIONS,
    NO_HOOK,
    NOT_DEFINED,
    WEAKNESSES,
    clip,
    extract_text,
    score_all,
    score_element,
    score_points,
)

SAMPLES = [
    "",
    "   ",
    "A hero saves the world",
    "They must save the world from death or lose their family forever",
    "A haunted detective must stop a killer before her family dies, but the secret bond of love breaks.",
    "When a grieving mother discovers a forbidden secret, she must destroy the monster that hunts her "
    "children before the clock runs out—or lose everyone she loves forever.",
    "someone someone someone",
    "!!!,,,...",
]


def test_empty_logline_scores_at_base_with_placeholders():
    analyses = score_all("", "Drama")

    assert [a.element for a in analyses] == list(ELEMENTS)
    assert [a.score for a in analyses] == [DIMENSIONS[e].base for e in ELEMENTS]
    assert [a.extracted_text for a in analyses] == [NOT_DEFINED, NOT_DEFINED, NOT_DEFINED, NO_HOOK, NOT_DEFINED]
    assert all(a.matched_rules == [] for a in analyses)


def test_protagonist_bonuses_add_up():
    analysis = score_element("A retired detective must stop a killer", "Thriller", "Protagonist")

    assert analysis.score == 60 + 10 + 8 + 5
    assert analysis.matched_rules == ["profession", "trait", "obligation"]
    assert analysis.assessment == "Strong, specific protagonist"
    assert analysis.weakness == ""
    assert analysis.suggestions == ["Your protagonist is well-defined"]


def test_generic_protagonist_penalised():
    analysis = score_element("A man must stop them", "Drama", "Protagonist")

    assert analysis.score == 55
    assert analysis.matched_rules == ["obligation", "generic_person"]
    assert analysis.assessment == "Weak or generic protagonist"
    assert analysis.weakness == WEAKNESSES["Protagonist"]
    assert len(analysis.suggestions) == 3


def test_age_qualifier_cancels_generic_penalty():
    points, matched = score_points("A man, young and bitter, must run", "Protagonist")

    assert matched == ["trait", "obligation"]
    assert points == 60 + 8 + 5


def test_scores_capped_at_95():
    text = "They must save the world from death or lose their family forever"
    points, _ = score_points(text, "Stakes")

    assert points == 100
    assert score_element(text, "Action", "Stakes").score == 95


def test_hook_rewards_focused_length():
    twenty = " ".join(["word"] * 20)
    _, matched = score_points(twenty, "Unique Hook")
    _, matched_short = score_points("word word", "Unique Hook")

    assert matched == ["focused_length"]
    assert matched_short == []


def test_adequate_tier_has_weakness_below_70():
    # 55 + connective 8 = 63
    analysis = score_element("A story about a town while winter falls", "Drama", "Conflict")

    assert analysis.score == 63
    assert analysis.assessment == "Conflict present but could be sharper"
    assert analysis.weakness == WEAKNESSES["Conflict"]


@pytest.mark.parametrize("text", SAMPLES)
def test_every_score_within_bounds(text):
    for analysis in score_all(text, "Unknown"):
        assert 0 <= analysis.score <= 95
        assert analysis.extracted_text
        assert analysis.suggestions


def test_extractors():
    line = "A cop must stop the killer, before dawn. She discovers a map or else."

    assert extract_text(line, "Protagonist") == "A cop must stop the killer"
    assert extract_text(line, "Conflict") == "must stop the killer"
    assert extract_text(line, "Stakes") == "before dawn"
    assert extract_text(line, "Unique Hook") == "discovers a map or else"
    assert extract_text("Her Love survives", "Emotional Core") == "Love"
    assert extract_text("nothing here", "Emotional Core") == NOT_DEFINED


def test_clip_shared_with_rewrite_predictions():
    from core.rewrites import _predicted

    assert clip(120) == 95 and clip(-4) == 0
    assert _predicted(90, 10, 92) == clip(100, 0, 92) == 92
