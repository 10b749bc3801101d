# core/lexicon.py
# Word lists for the word-economy checks and the prose tightener.
# Everything here is immutable; callers only test membership or iterate.

FILLER_WORDS = frozenset({
    "very", "really", "just", "actually", "basically", "literally",
    "simply", "totally", "completely", "absolutely", "definitely",
    "suddenly", "finally", "eventually", "immediately", "quickly",
})

WEAK_VERBS = frozenset({
    "is", "are", "was", "were", "has", "have", "had",
    "goes", "gets", "makes", "does", "tries", "wants",
    "needs", "starts", "begins", "seems", "appears",
})

# Order matters only for reporting: phrases are listed in the order found here.
REDUNDANT_PHRASES = (
    "in order to", "due to the fact that", "at this point in time",
    "for the purpose of", "in the event that", "on account of",
    "with regard to", "in spite of the fact", "as a matter of fact",
)

# (pattern, replacement) pairs applied in sequence by word_economy.tighten
FILLER_CUTS = (
    (r"\s+that is\s+", " "),
    (r"\s+who is\s+", " "),
    (r"\s+in order to\s+", " to "),
    (r"\s+begins to\s+", " "),
    (r"\s+starts to\s+", " "),
    (r"\s+very\s+", " "),
    (r"\s+really\s+", " "),
    (r"\s+actually\s+", " "),
)

VERB_SWAPS = (
    (" is trying ", " struggles "),
    (" is going ", " races "),
    (" is looking ", " hunts "),
    (" gets ", " seizes "),
    (" goes ", " plunges "),
)
