import re

from .lexicon import FILLER_WORDS, WEAK_VERBS, REDUNDANT_PHRASES, FILLER_CUTS, VERB_SWAPS
from .models import WordEconomyReport


IDEAL_MIN = 25
IDEAL_MAX = 45
MAX_WEAK_VERBS = 5

RECOMMENDATIONS = {
    "too_short": (
        "Your logline is too brief. Add more specific details about the protagonist, "
        "conflict, or stakes."
    ),
    "too_long": (
        "Your logline is too wordy. Cut to the essential conflict and remove any subplots "
        "or unnecessary details."
    ),
    "tighten": "Good length, but tighten your prose. Replace weak verbs with stronger action words.",
    "praise": "Excellent word economy. Your logline is concise and punchy.",
}


def _bare(word: str) -> str:
    return re.sub(r"[^\w]", "", word.lower())


def length_status(word_count: int) -> str:
    if word_count < IDEAL_MIN:
        return "too_short"
    if word_count > IDEAL_MAX:
        return "too_long"
    return "optimal"


def analyze(logline: str) -> WordEconomyReport:
    words = (logline or "").split()
    status = length_status(len(words))

    bloat = [w for w in words if _bare(w) in FILLER_WORDS]
    weak = [w for w in words if _bare(w) in WEAK_VERBS]
    lower = (logline or "").lower()
    redundant = [p for p in REDUNDANT_PHRASES if p in lower]

    # priority: length first, then prose quality
    if status != "optimal":
        recommendation = RECOMMENDATIONS[status]
    elif bloat or len(weak) > 3:
        recommendation = RECOMMENDATIONS["tighten"]
    else:
        recommendation = RECOMMENDATIONS["praise"]

    return WordEconomyReport(
        word_count=len(words),
        ideal_min=IDEAL_MIN,
        ideal_max=IDEAL_MAX,
        status=status,
        bloat_words=bloat,
        weak_verbs=weak[:MAX_WEAK_VERBS],
        redundant_phrases=redundant,
        recommendation=recommendation,
    )


def tighten(logline: str) -> str:
    """Strip filler constructions and swap weak verb phrases for active ones."""
    text = logline or ""
    for pattern, repl in FILLER_CUTS:
        text = re.sub(pattern, repl, text)
    for weak, strong in VERB_SWAPS:
        text = text.replace(weak, strong)
    return re.sub(r"\s{2,}", " ", text).strip()
