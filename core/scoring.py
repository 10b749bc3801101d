"""Per-dimension logline scoring.

Each dimension starts from a base score and collects fixed bonuses from a table
of keyword rules matched against the lowercased logline. A dimension may carry
one penalty rule. Scores are clamped to [0, 95]; nothing here raises on odd
input, an empty logline simply scores at the base.
"""

from __future__ import annotations

import logging
import re
from typing import Callable, List, NamedTuple, Optional, Tuple

from .models import ELEMENTS, ElementAnalysis

logger = logging.getLogger(__name__)

MAX_SCORE = 95
STRONG, ADEQUATE, WEAKNESS_BELOW = 80, 60, 70


def clip(x, lo=0, hi=MAX_SCORE):
    return max(lo, min(hi, x))


def _word_count(text: str) -> int:
    return len(text.split())


class Rule(NamedTuple):
    name: str
    points: int
    pattern: Optional[str] = None
    check: Optional[Callable[[str], bool]] = None
    unless: Optional[str] = None

    def hit(self, lower: str) -> bool:
        if self.pattern is not None and not re.search(self.pattern, lower):
            return False
        if self.check is not None and not self.check(lower):
            return False
        if self.unless is not None and re.search(self.unless, lower):
            return False
        return True


class Dimension(NamedTuple):
    base: int
    rules: Tuple[Rule, ...]


DIMENSIONS = {
    "Protagonist": Dimension(60, (
        Rule("profession", 10, r"\b(detective|doctor|lawyer|soldier|agent|scientist|teacher|nurse|cop|pilot)\b"),
        Rule("trait", 8, r"\b(young|aging|retired|disgraced|brilliant|struggling|ambitious)\b"),
        Rule("wounded_background", 10, r"\b(single mother|widowed|orphaned|estranged|haunted)\b"),
        Rule("obligation", 5, r"\b(must|forced to|has to|needs to)\b"),
        Rule("generic_person", -10, r"\b(someone|a person|a man|a woman|they)\b", unless=r"\b(young|old|aging)\b"),
    )),
    "Conflict": Dimension(55, (
        Rule("action_verb", 12, r"\b(must|fight|stop|prevent|escape|survive|save|protect|defeat)\b"),
        Rule("connective", 8, r"\b(against|versus|before|while|as|when)\b"),
        Rule("aggression", 10, r"\b(threatens|attacks|hunts|chases|stalks|destroys)\b"),
        Rule("antagonist", 8, r"\b(killer|enemy|villain|monster|threat|danger)\b"),
        Rule("time_pressure", 10, r"\b(hours|days|before|deadline|time runs out|clock)\b"),
    )),
    "Stakes": Dimension(50, (
        Rule("mortal_peril", 15, r"\b(death|die|kill|murder|destroy|apocalypse|extinction)\b"),
        Rule("protective", 10, r"\b(save|rescue|protect|lose|sacrifice)\b"),
        Rule("collective", 12, r"\b(world|humanity|everyone|family|children|loved ones)\b"),
        Rule("finality", 8, r"\b(forever|never|only chance|last hope|final)\b"),
        Rule("personal", 5, r"\b(her|his|their|own)\b"),
    )),
    "Unique Hook": Dimension(55, (
        Rule("discovery", 8, r"\b(discovers|learns|realizes|finds out|uncovers)\b"),
        Rule("secrecy", 10, r"\b(secret|hidden|mysterious|unknown|forbidden)\b"),
        Rule("singularity", 7, r"\b(only one|chosen|unique|special|different)\b"),
        Rule("twist", 10, r"\b(but|however|except|unless|twist)\b"),
        Rule("dash_or_ellipsis", 5, r"—|\.\.\."),
        Rule("focused_length", 8, check=lambda lower: 20 <= _word_count(lower) <= 40),
    )),
    "Emotional Core": Dimension(50, (
        Rule("feeling", 12, r"\b(love|heart|soul|dream|hope|fear|grief|guilt|shame)\b"),
        Rule("family", 10, r"\b(family|father|mother|son|daughter|brother|sister|child)\b"),
        Rule("wound", 10, r"\b(betrayed|abandoned|lost|broken|healing|redemption)\b"),
        Rule("bond", 8, r"\b(relationship|friendship|bond|trust|loyalty)\b"),
    )),
}

# (strong, adequate, weak) assessment copy
ASSESSMENTS = {
    "Protagonist": (
        "Strong, specific protagonist",
        "Adequate but could be more specific",
        "Weak or generic protagonist",
    ),
    "Conflict": (
        "Clear, compelling central conflict",
        "Conflict present but could be sharper",
        "Conflict is unclear or weak",
    ),
    "Stakes": (
        "High, clear stakes that create urgency",
        "Stakes present but could be higher",
        "Stakes are low or unclear",
    ),
    "Unique Hook": (
        "Fresh, marketable concept",
        "Decent hook but feels familiar",
        "Hook is missing or too generic",
    ),
    "Emotional Core": (
        "Strong emotional resonance",
        "Some emotional element present",
        "Lacks emotional connection",
    ),
}

WEAKNESSES = {
    "Protagonist": "Your protagonist lacks specificity. Who are they beyond their role?",
    "Conflict": "Your conflict needs more tension. What's truly at stake?",
    "Stakes": "Raise the stakes. What does the protagonist lose if they fail?",
    "Unique Hook": "What makes this story different from others like it?",
    "Emotional Core": "Add emotional stakes. Why should we care?",
}

# (affirmation when strong, hints otherwise)
SUGGESTIONS = {
    "Protagonist": ("Your protagonist is well-defined", (
        'Add a defining trait or flaw (e.g., "a paranoid" or "a grieving")',
        "Specify their profession or role for instant context",
        "Include what makes them uniquely suited (or unsuited) for this challenge",
    )),
    "Conflict": ("Your conflict is compelling", (
        'Add a clear "must" statement: what does the protagonist HAVE to do?',
        "Include an antagonistic force or obstacle",
        "Add a ticking clock or deadline for urgency",
    )),
    "Stakes": ("Stakes are appropriately high", (
        "Add what happens if the protagonist fails",
        "Make it personal: family, loved ones, or their own soul",
        'Include "or else" consequences that matter',
    )),
    "Unique Hook": ("Your hook is fresh and marketable", (
        "Add an ironic twist or unexpected element",
        "What makes THIS story different from others in the genre?",
        "Consider a \"What if?\" premise that's never been done",
    )),
    "Emotional Core": ("Strong emotional resonance", (
        "Connect the external conflict to an internal wound",
        "Add family or relationship stakes",
        "What does the protagonist stand to lose emotionally?",
    )),
}

NOT_DEFINED = "Not clearly defined"
NO_HOOK = "Consider adding a unique hook"
EMOTION_WORDS = ("love", "family", "betrayal", "redemption", "loss", "hope", "fear", "guilt")

_EXTRACTORS = {
    "Protagonist": (re.compile(r"^[^,.]+"), NOT_DEFINED),
    "Conflict": (re.compile(r"must\s+[^,.]+|forced\s+to\s+[^,.]+|has\s+to\s+[^,.]+", re.I), NOT_DEFINED),
    "Stakes": (re.compile(r"before\s+[^,.]+|or\s+[^,.]+|to\s+save\s+[^,.]+", re.I), NOT_DEFINED),
    "Unique Hook": (re.compile(r"discovers?\s+[^,.]+|learns?\s+[^,.]+", re.I), NO_HOOK),
}


def score_points(text: str, element: str) -> Tuple[int, List[str]]:
    """Raw score for one dimension plus the names of the rules that fired.

    At most one negative rule is applied. The result is not clamped.
    """
    dim = DIMENSIONS[element]
    lower = (text or "").lower()
    points = dim.base
    matched: List[str] = []
    penalised = False
    for rule in dim.rules:
        if rule.points < 0 and penalised:
            continue
        if rule.hit(lower):
            points += rule.points
            matched.append(rule.name)
            penalised = penalised or rule.points < 0
    return points, matched


def extract_text(logline: str, element: str) -> str:
    text = logline or ""
    if element == "Emotional Core":
        lower = text.lower()
        for word in EMOTION_WORDS:
            if word in lower:
                return word.capitalize()
        return NOT_DEFINED

    pattern, placeholder = _EXTRACTORS[element]
    m = pattern.search(text)
    if not m or not m.group(0).strip():
        return placeholder
    return m.group(0).strip()


def assess(element: str, score: int) -> str:
    strong, adequate, weak = ASSESSMENTS[element]
    if score >= STRONG:
        return strong
    if score >= ADEQUATE:
        return adequate
    return weak


def suggestions_for(element: str, score: int) -> List[str]:
    affirm, hints = SUGGESTIONS[element]
    if score >= STRONG:
        return [affirm]
    return list(hints)


def score_element(logline: str, genre: str, element: str) -> ElementAnalysis:
    points, matched = score_points(logline, element)
    score = clip(points)
    return ElementAnalysis(
        element=element,
        extracted_text=extract_text(logline, element),
        score=score,
        assessment=assess(element, score),
        weakness=WEAKNESSES[element] if score < WEAKNESS_BELOW else "",
        suggestions=suggestions_for(element, score),
        matched_rules=matched,
    )


def score_all(logline: str, genre: str) -> List[ElementAnalysis]:
    analyses = [score_element(logline, genre, e) for e in ELEMENTS]
    logger.debug("element scores: %s", {a.element: a.score for a in analyses})
    return analyses
