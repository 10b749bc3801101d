from __future__ import annotations

import pathlib
import sys

PROJECT_ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

import pytest

from core.templates import SUPPORTED_GENRES, get_all_templates, get_templates_for_genre


def test_catalog_has_two_templates_per_genre():
    templates = get_all_templates()

    assert len(templates) == 2 * len(SUPPORTED_GENRES)
    for genre in SUPPORTED_GENRES:
        assert len([t for t in templates if t.genre == genre]) == 2


def test_lookup_is_case_insensitive():
    lower = get_templates_for_genre("horror")

    assert lower == get_templates_for_genre("Horror") == get_templates_for_genre("HORROR")
    assert [t.template_name for t in lower] == ["The Haunting", "The Survival"]


@pytest.mark.parametrize("genre", ["Western", "", None])
def test_unknown_genre_returns_nothing(genre):
    assert get_templates_for_genre(genre) == []


def test_templates_are_complete():
    for t in get_all_templates():
        assert "[" in t.structure and "]" in t.structure
        assert t.example and t.tip
        assert len(t.key_elements) == 4


def test_catalog_cannot_be_mutated_through_lookup():
    get_all_templates().clear()

    assert len(get_all_templates()) == 16


def test_key_elements_are_shared_read_only():
    from core.doctor import diagnose
    from core.models import ConceptInput

    d = diagnose(ConceptInput(logline="x", genre="Drama", current_score=50), seed=1)
    template = d.templates[0]

    assert isinstance(template.key_elements, tuple)
    with pytest.raises(AttributeError):
        template.key_elements.clear()
    with pytest.raises(AttributeError):
        get_templates_for_genre("horror")[0].key_elements.append("extra")
    assert len(get_templates_for_genre("drama")[0].key_elements) == 4
    assert "extra" not in get_all_templates()[2].key_elements
