from typing import List, Dict, Any, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

ELEMENTS = ("Protagonist", "Conflict", "Stakes", "Unique Hook", "Emotional Core")
REWRITE_TYPES = ("full", "protagonist", "conflict", "stakes", "hook")
WORD_STATUSES = ("too_short", "optimal", "too_long")


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


class ConceptInput(_Frozen):
    logline: str = ""
    genre: str = ""
    current_score: int = 0

    @field_validator("logline", "genre", mode="before")
    @classmethod
    def _coerce_text(cls, v: Any) -> str:
        if v is None:
            return ""
        return v if isinstance(v, str) else str(v)

    @field_validator("current_score", mode="before")
    @classmethod
    def _coerce_score(cls, v: Any) -> int:
        try:
            return int(v)
        except (TypeError, ValueError, OverflowError):
            return 0


class ElementAnalysis(_Frozen):
    element: str
    extracted_text: str
    score: int
    assessment: str
    weakness: str = ""
    suggestions: List[str] = Field(default_factory=list)
    matched_rules: List[str] = Field(default_factory=list)


class WordEconomyReport(_Frozen):
    word_count: int
    ideal_min: int = 25
    ideal_max: int = 45
    status: str
    bloat_words: List[str] = Field(default_factory=list)
    weak_verbs: List[str] = Field(default_factory=list)
    redundant_phrases: List[str] = Field(default_factory=list)
    recommendation: str = ""


class RewriteCandidate(_Frozen):
    text: str
    predicted_score: int
    score_improvement: int
    rewrite_type: str
    explanation: str
    changes_highlighted: List[str] = Field(default_factory=list)
    # illustrative projection per dimension, not a re-score of `text`
    projected_element_scores: Dict[str, int] = Field(default_factory=dict)


class GenreTemplate(_Frozen):
    genre: str
    template_name: str
    structure: str
    example: str
    key_elements: Tuple[str, ...] = ()
    tip: str = ""


class Diagnosis(_Frozen):
    concept: ConceptInput
    current_score: int
    element_analyses: List[ElementAnalysis] = Field(default_factory=list)
    word_economy: WordEconomyReport
    rewrites: List[RewriteCandidate] = Field(default_factory=list)
    templates: List[GenreTemplate] = Field(default_factory=list)
    overall_assessment: str = ""
    quick_fixes: List[str] = Field(default_factory=list)
    top_recommendation: str = ""

    def weakest_element(self) -> Optional[ElementAnalysis]:
        """Lowest-scoring dimension; on ties the later dimension wins."""
        weakest = None
        for a in self.element_analyses:
            if weakest is None or a.score <= weakest.score:
                weakest = a
        return weakest

    def element(self, name: str) -> Optional[ElementAnalysis]:
        for a in self.element_analyses:
            if a.element == name:
                return a
        return None


class ComparisonPoint(_Frozen):
    category: str
    value_a: str
    value_b: str
    winner: str  # "A", "B" or "Tie"
    analysis: str = ""


class LoglineComparison(_Frozen):
    diagnosis_a: Diagnosis
    diagnosis_b: Diagnosis
    winner: str
    score_difference: int
    points: List[ComparisonPoint] = Field(default_factory=list)
    advantages_a: List[str] = Field(default_factory=list)
    advantages_b: List[str] = Field(default_factory=list)
    recommendation: str = ""
