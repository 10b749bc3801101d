from __future__ import annotations

import pathlib
import sys

PROJECT_ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

import pytest

from core.word_economy import RECOMMENDATIONS, analyze, length_status, tighten

OPTIMAL = (
    "A retired detective with a failing memory must track down the serial killer who murdered "
    "her partner before the trail goes cold and the entire city buries the truth forever."
)
WITH_FILLER = (
    "A retired detective with a very failing memory must basically track down the serial killer who "
    "actually murdered her partner before the trail goes cold and the entire city buries the truth forever."
)
WEAK_VERB_HEAVY = (
    "The man is tired and he has a plan that was made when they were young and it is a plan "
    "he has kept for years while the world goes on without him."
)


def test_short_logline_is_too_short():
    report = analyze("A hero saves the world")

    assert report.word_count == 5
    assert report.status == "too_short"
    assert report.recommendation == RECOMMENDATIONS["too_short"]


def test_thirty_words_without_filler_is_optimal():
    report = analyze(OPTIMAL)

    assert report.word_count == 30
    assert report.status == "optimal"
    assert report.bloat_words == []
    assert report.weak_verbs == ["goes"]
    assert report.recommendation == RECOMMENDATIONS["praise"]


def test_filler_words_flagged_and_tighten_recommended():
    report = analyze(WITH_FILLER)

    assert report.status == "optimal"
    assert report.bloat_words == ["very", "basically", "actually"]
    assert report.recommendation == RECOMMENDATIONS["tighten"]


def test_more_than_three_weak_verbs_triggers_tighten_and_list_is_capped():
    report = analyze(WEAK_VERB_HEAVY)

    assert report.status == "optimal"
    assert report.bloat_words == []
    assert report.weak_verbs == ["is", "has", "was", "were", "is"]
    assert report.recommendation == RECOMMENDATIONS["tighten"]


def test_length_outranks_prose_quality():
    long_line = f"{WITH_FILLER} {OPTIMAL}"
    report = analyze(long_line)

    assert report.status == "too_long"
    assert report.bloat_words
    assert report.recommendation == RECOMMENDATIONS["too_long"]


def test_punctuation_stripped_but_token_spelling_kept():
    report = analyze("Really, she just... wants out.")

    assert report.bloat_words == ["Really,", "just..."]
    assert report.weak_verbs == ["wants"]


def test_redundant_phrases_found_by_substring():
    report = analyze("In order to win, due to the fact that she is broke, she gambles.")

    assert report.redundant_phrases == ["in order to", "due to the fact that"]


def test_empty_and_whitespace_loglines():
    for text in ("", "   \n\t "):
        report = analyze(text)
        assert report.word_count == 0
        assert report.status == "too_short"
        assert report.bloat_words == [] and report.weak_verbs == [] and report.redundant_phrases == []


@pytest.mark.parametrize(
    "count, status",
    [(0, "too_short"), (24, "too_short"), (25, "optimal"), (45, "optimal"), (46, "too_long")],
)
def test_status_depends_only_on_word_count(count, status):
    assert length_status(count) == status
    assert analyze(" ".join(["word"] * count)).status == status


def test_tighten_cuts_filler_and_swaps_weak_verbs():
    assert tighten("He really gets the job in order to pay rent") == "He seizes the job to pay rent"
    assert tighten("A cop who is tired is trying to stop a thief") == "A cop tired struggles to stop a thief"
    assert tighten("") == ""
