# core/report.py
# Export helpers for a Diagnosis: a Markdown document and a pandas breakdown table.

from typing import List

import pandas as pd

from core.models import Diagnosis

STATUS_LABELS = {"too_short": "Too short", "optimal": "Optimal", "too_long": "Too long"}


def element_frame(diagnosis: Diagnosis) -> pd.DataFrame:
    """One row per dimension, weakest first."""
    df = pd.DataFrame(
        {
            "element": [a.element for a in diagnosis.element_analyses],
            "score": [a.score for a in diagnosis.element_analyses],
            "assessment": [a.assessment for a in diagnosis.element_analyses],
            "extracted_text": [a.extracted_text for a in diagnosis.element_analyses],
            "weakness": [a.weakness for a in diagnosis.element_analyses],
        }
    )
    return df.sort_values("score", kind="stable").reset_index(drop=True)


def rewrite_frame(diagnosis: Diagnosis) -> pd.DataFrame:
    return pd.DataFrame(
        [
            {
                "rewrite_type": r.rewrite_type,
                "predicted_score": r.predicted_score,
                "score_improvement": r.score_improvement,
                "text": r.text,
            }
            for r in diagnosis.rewrites
        ],
        columns=["rewrite_type", "predicted_score", "score_improvement", "text"],
    )


def diagnosis_to_markdown(diagnosis: Diagnosis) -> str:
    def section(title: str, body: str) -> str:
        return f"## {title}\n\n{body.strip()}\n\n"

    concept = diagnosis.concept
    md = [f"# Logline Diagnosis ({concept.genre or 'Unspecified genre'})\n\n> {concept.logline}\n\n"]
    md.append(section("Assessment", f"**Score:** {diagnosis.current_score}/100\n\n{diagnosis.overall_assessment}"))
    md.append(section("Top recommendation", diagnosis.top_recommendation))

    rows = ["| Element | Score | Assessment |", "|---|---|---|"]
    rows += [f"| {a.element} | {a.score} | {a.assessment} |" for a in diagnosis.element_analyses]
    md.append(section("Element breakdown", "\n".join(rows)))

    we = diagnosis.word_economy
    lines: List[str] = [
        f"- Words: {we.word_count} (ideal {we.ideal_min}-{we.ideal_max}, {STATUS_LABELS.get(we.status, we.status)})",
    ]
    if we.bloat_words:
        lines.append(f"- Filler: {', '.join(we.bloat_words)}")
    if we.weak_verbs:
        lines.append(f"- Weak verbs: {', '.join(we.weak_verbs)}")
    if we.redundant_phrases:
        lines.append(f"- Redundant phrases: {', '.join(we.redundant_phrases)}")
    lines.append(f"- {we.recommendation}")
    md.append(section("Word economy", "\n".join(lines)))

    if diagnosis.quick_fixes:
        md.append(section("Quick fixes", "\n".join(f"- {x}" for x in diagnosis.quick_fixes)))
    if diagnosis.rewrites:
        body = []
        for i, r in enumerate(diagnosis.rewrites, start=1):
            body.append(
                f"{i}. **{r.rewrite_type}** (+{r.score_improvement}, predicted {r.predicted_score})\n"
                f"   {r.text}\n"
                f"   _{r.explanation}_"
            )
        md.append(section("Rewrites", "\n".join(body)))
    if diagnosis.templates:
        body = []
        for t in diagnosis.templates:
            body.append(f"- **{t.template_name}**: {t.structure}\n  - Example: {t.example}\n  - Tip: {t.tip}")
        md.append(section("Templates", "\n".join(body)))
    return "".join(md)
