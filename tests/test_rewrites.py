from __future__ import annotations

import pathlib
import random
import sys

PROJECT_ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

import pytest

from core.models import ELEMENTS, ElementAnalysis
from core.rewrites import (
    FULL_IMPROVEMENT,
    GENERIC_EXPLANATION,
    PROTAGONIST_ADJECTIVES,
    STRATEGIES,
    TARGETED,
    add_hook,
    extract_action,
    extract_protagonist,
    fill_template,
    generate,
    raise_stakes,
    strengthen_conflict,
    strengthen_protagonist,
)

LOGLINE = "A retired detective must find the stolen map before dawn."
RANGES = {"full": (FULL_IMPROVEMENT, 95)}
RANGES.update({t.rewrite_type: (t.improvement, t.cap) for t in TARGETED})


def _analyses(**scores):
    """ElementAnalysis list with every dimension at 50 unless overridden."""
    out = []
    for element in ELEMENTS:
        key = element.lower().replace(" ", "_")
        out.append(ElementAnalysis(
            element=element,
            extracted_text="x",
            score=scores.get(key, 50),
            assessment="x",
        ))
    return out


def test_only_full_rewrite_when_every_dimension_is_strong():
    strong = _analyses(protagonist=90, conflict=90, stakes=90, unique_hook=90, emotional_core=90)
    rewrites = generate(LOGLINE, "Thriller", 60, strong, random.Random(1))

    assert [r.rewrite_type for r in rewrites] == ["full"]


@pytest.mark.parametrize("score", [75, 80, 95])
def test_no_protagonist_rewrite_when_protagonist_scores_75_or_more(score):
    for seed in range(10):
        rewrites = generate(LOGLINE, "Drama", 50, _analyses(protagonist=score), random.Random(seed))
        assert "protagonist" not in [r.rewrite_type for r in rewrites]


def test_weak_everywhere_gives_four_sorted_candidates():
    for seed in range(25):
        rewrites = generate(LOGLINE, "Horror", 50, _analyses(), random.Random(seed))
        improvements = [r.score_improvement for r in rewrites]

        assert len(rewrites) == 4
        assert improvements == sorted(improvements, reverse=True)
        assert len({r.rewrite_type for r in rewrites}) == 4


@pytest.mark.parametrize("current", [-40, 0, 50, 88, 120])
def test_predicted_scores_stay_in_type_range(current):
    for seed in range(25):
        for r in generate(LOGLINE, "Action", current, _analyses(), random.Random(seed)):
            (lo, hi), cap = RANGES[r.rewrite_type]
            assert lo <= r.score_improvement <= hi
            assert 0 <= r.predicted_score <= cap
            assert r.predicted_score == max(0, min(current + r.score_improvement, cap))
            assert set(r.projected_element_scores) == set(ELEMENTS)
            assert all(0 <= v <= 100 for v in r.projected_element_scores.values())


def test_same_seed_same_candidates():
    a = generate(LOGLINE, "Sci-Fi", 70, _analyses(), random.Random(99))
    b = generate(LOGLINE, "Sci-Fi", 70, _analyses(), random.Random(99))

    assert a == b


@pytest.mark.parametrize("genre", sorted(STRATEGIES))
def test_full_rewrite_fills_every_slot_with_logline_protagonist(genre):
    for seed in range(6):
        full = generate(LOGLINE, genre.upper(), 50, _analyses(), random.Random(seed))
        full = [r for r in full if r.rewrite_type == "full"][0]

        assert "[" not in full.text and "]" not in full.text
        assert "retired detective" in full.text.lower()
        assert full.text[0].isupper()
        assert len(full.changes_highlighted) == 3


def test_unknown_genre_uses_generic_rewrite():
    rewrites = generate("A hero saves the world.", "Western", 50, _analyses(), random.Random(3))
    full = [r for r in rewrites if r.rewrite_type == "full"][0]

    assert full.text == "A hero saves the world—with everything they love hanging in the balance."
    assert full.explanation == GENERIC_EXPLANATION


def test_generic_rewrite_compresses_long_loglines():
    long_line = " ".join(f"w{i}" for i in range(40))
    rewrites = generate(long_line, "", 50, _analyses(), random.Random(3))
    full = [r for r in rewrites if r.rewrite_type == "full"][0]

    assert full.text == "W0 " + " ".join(f"w{i}" for i in range(1, 25)) + "—and nothing will ever be the same."


def test_empty_logline_still_produces_candidates():
    rewrites = generate("", "Comedy", 0, _analyses(), random.Random(0))

    assert 1 <= len(rewrites) <= 4
    assert all(r.text for r in rewrites)


def test_extract_protagonist_and_action():
    assert extract_protagonist(LOGLINE) == "a retired detective"
    assert extract_protagonist("A hero saves the world") == "a hero"
    assert extract_protagonist("An aging pilot, haunted by the crash, must land") == "an aging pilot"
    assert extract_protagonist("Nobody knows") is None
    assert extract_action(LOGLINE) == "find the stolen map"
    assert extract_action("She is forced to flee, again.") == "flee"
    assert extract_action("Nothing happens") is None


def test_fill_template_prefers_known_values_then_bank():
    text = fill_template(
        "[PROTAGONIST] must [ACTION] in [PLACE] with [UNKNOWN SLOT].",
        {"PLACE": ("Paris",)},
        {"PROTAGONIST": "a chef", "ACTION": None},
        random.Random(0),
    )

    assert text == "A chef must action in Paris with unknown slot."


def test_strengthen_protagonist_inserts_genre_adjective():
    adj = random.Random(3).choice(PROTAGONIST_ADJECTIVES["thriller"])

    assert strengthen_protagonist("A cop must stop the heist.", "Thriller", random.Random(3)) == (
        f"A {adj} cop must stop the heist."
    )


def test_strengthen_protagonist_fixes_article_and_falls_back():
    text = strengthen_protagonist("An engineer races home.", "Fantasy", random.Random(0))
    adj = random.Random(0).choice(PROTAGONIST_ADJECTIVES["fantasy"])
    article = "An" if adj[0] in "aeiou" else "A"
    assert text == f"{article} {adj} engineer races home."

    adj = random.Random(5).choice(PROTAGONIST_ADJECTIVES["drama"])
    article = "An" if adj[0] in "aeiou" else "A"
    assert strengthen_protagonist("Detectives chase ghosts.", "Western", random.Random(5)) == (
        f"{article} {adj} protagonist detectives chase ghosts."
    )


def test_clause_transforms():
    assert strengthen_conflict("A cop must stop the heist.", "thriller") == (
        "A cop must stop the heist—while a ruthless enemy closes in."
    )
    assert raise_stakes("A cop must stop the heist", "Western") == (
        "A cop must stop the heist—or face devastating consequences."
    )
    assert add_hook("A cop must stop the heist", "Horror") == (
        "A cop must stop the heist. The catch? The only way out is to face the truth they've been running from."
    )
