# core/rewrites.py
# Rewrite candidates for a logline: one full genre rewrite plus targeted
# rewrites for each weak dimension. All randomness comes from the caller's rng.

from __future__ import annotations

import logging
import random
import re
from typing import Dict, List, NamedTuple, Optional, Sequence, Tuple

from .models import ELEMENTS, ElementAnalysis, RewriteCandidate
from .scoring import clip
from .word_economy import tighten

logger = logging.getLogger(__name__)

MAX_CANDIDATES = 4
TARGET_BELOW = 75

_SLOT = re.compile(r"\[([A-Z][A-Z /\-]*)\]")

# ───────────────── Full rewrites ───────────────── #

class GenreStrategy(NamedTuple):
    templates: Tuple[str, ...]
    slots: Dict[str, Tuple[str, ...]]
    explanation: str
    changes: Tuple[str, ...]


STRATEGIES: Dict[str, GenreStrategy] = {
    "thriller": GenreStrategy(
        templates=(
            "When [PROTAGONIST] discovers [THREAT], they have 48 hours to [ACTION] before [ANTAGONIST] "
            "[CONSEQUENCE]—and the only person who can help is someone they can't trust.",
            "[PROTAGONIST] must [ACTION] to stop [ANTAGONIST] from [PLAN], but the deeper they dig, the more "
            "they realize the conspiracy reaches into their own [PERSONAL ELEMENT].",
            "After [INCITING INCIDENT], [PROTAGONIST] becomes the only one who can stop [THREAT]—but doing so "
            "means exposing [SECRET] that could destroy everything they've built.",
        ),
        slots={
            "PROTAGONIST": ("a disgraced federal agent", "a paranoid crypto analyst", "a rookie night-shift nurse"),
            "ACTION": ("expose the truth", "clear their name", "find the missing witness"),
            "THREAT": ("a murder that was never reported", "a plot to poison the city's water supply",
                       "a list of sleeper agents with their own name on it"),
            "ANTAGONIST": ("a killer who already knows their name", "a rogue intelligence unit",
                           "the partner they trusted most"),
            "CONSEQUENCE": ("strikes again", "silences them forever", "erases every trace of them"),
            "PLAN": ("framing them for a massacre", "rigging the election", "selling the codes to the highest bidder"),
            "PERSONAL ELEMENT": ("family", "marriage", "past"),
            "INCITING INCIDENT": ("a witness dies in their custody", "a stranger hands them a flash drive",
                                  "their mentor vanishes"),
            "SECRET": ("a cover-up they helped build", "the identity of their real father", "their own crime"),
        },
        explanation="Restructured with ticking clock, clearer threat, and higher personal stakes.",
        changes=("Added time pressure", "Sharpened antagonist threat", "Made stakes personal"),
    ),
    "horror": GenreStrategy(
        templates=(
            "When [PROTAGONIST] [INCITING INCIDENT], they unleash [HORROR] that knows their deepest fears—and "
            "won't stop until it consumes everyone they love.",
            "[PROTAGONIST] must survive [HORROR] in [LOCATION], but the real monster is the [DARK SECRET] "
            "they've been hiding from themselves.",
            "After [INCITING INCIDENT], [PROTAGONIST] realizes [HORROR] has been watching them for years—and "
            "tonight, it's finally ready to claim them.",
        ),
        slots={
            "PROTAGONIST": ("a grieving mother", "a skeptical paranormal debunker", "an isolated lighthouse keeper"),
            "INCITING INCIDENT": ("opens a sealed room in their new house", "performs a forbidden ritual",
                                  "answers a call from a dead friend"),
            "HORROR": ("something ancient", "a presence that wears familiar faces", "a hunger with no name"),
            "LOCATION": ("a snowbound sanatorium", "a house with no doors out", "a town that forgets the dead"),
            "DARK SECRET": ("guilt", "crime", "lie"),
        },
        explanation="Enhanced with escalating dread, psychological depth, and visceral threat.",
        changes=("Added supernatural escalation", "Connected to protagonist's fears", "Raised survival stakes"),
    ),
    "comedy": GenreStrategy(
        templates=(
            "[PROTAGONIST] must [ACTION] to [REAL GOAL], but their [FLAW] keeps making everything hilariously "
            "worse—especially when [COMPLICATION].",
            "When [PROTAGONIST] pretends to be [FALSE IDENTITY] to [REAL GOAL], they never expected to "
            "[UNEXPECTED TWIST] or fall for [ROMANTIC INTEREST].",
            "Forced to [ACTION], [PROTAGONIST] must survive [COMEDIC CHALLENGE] while hiding [SECRET] from "
            "[ANTAGONIST]—and accidentally becoming [IRONIC RESULT].",
        ),
        slots={
            "PROTAGONIST": ("a germaphobic influencer", "an overconfident wedding planner", "a neurotic substitute teacher"),
            "ACTION": ("run a failing goat farm", "coach a hopeless pub quiz team", "plan their ex's wedding"),
            "REAL GOAL": ("inherit a fortune", "win back their job", "impress their future in-laws"),
            "FLAW": ("pathological honesty", "crippling vanity", "inability to say no"),
            "COMPLICATION": ("their mother moves in", "the goats go viral", "the boss shows up unannounced"),
            "FALSE IDENTITY": ("a celebrity chef", "a long-lost cousin", "a world-famous life coach"),
            "UNEXPECTED TWIST": ("actually be good at it", "become a local hero", "start a small cult"),
            "ROMANTIC INTEREST": ("the one person who sees through them", "their rival", "the town sheriff"),
            "COMEDIC CHALLENGE": ("a week of family dinners", "a corporate retreat", "a children's talent show"),
            "SECRET": ("a stolen llama", "a second marriage", "the fact that they can't swim"),
            "ANTAGONIST": ("a suspicious landlord", "their perfect sister", "a competitive neighbor"),
            "IRONIC RESULT": ("employee of the month", "the face of the campaign they sabotaged",
                              "exactly who they swore they'd never be"),
        },
        explanation="Restructured with clearer comedy premise, absurd situation, and heart.",
        changes=("Sharpened comedic contrast", "Added escalating complications", "Included emotional stakes"),
    ),
    "drama": GenreStrategy(
        templates=(
            "[PROTAGONIST] must [ACTION] that forces them to confront [PAST TRAUMA]—and choose between "
            "[OPTION] and the [RELATIONSHIP] they never knew they needed.",
            "When [INCITING INCIDENT] brings [PROTAGONIST] back to [PLACE], they must [ACTION] while facing "
            "the [MISTAKE] that defined their past.",
            "After [LOSS], [PROTAGONIST] gets one chance to [ACTION] but must first sacrifice everything "
            "they've built to protect themselves.",
        ),
        slots={
            "PROTAGONIST": ("a workaholic surgeon", "an estranged son", "a washed-up jazz pianist"),
            "ACTION": ("care for the father who abandoned them", "rebuild the family farm",
                       "make peace with a dying rival"),
            "PAST TRAUMA": ("the accident they caused", "the night their brother disappeared",
                            "a childhood they refuse to remember"),
            "OPTION": ("the career they built as armor", "a fresh start abroad", "the life they planned"),
            "RELATIONSHIP": ("family", "friendship", "love"),
            "INCITING INCIDENT": ("a funeral", "a letter from prison", "a diagnosis"),
            "PLACE": ("the small town they fled", "their childhood home", "the family restaurant"),
            "MISTAKE": ("betrayal", "lie", "failure"),
            "LOSS": ("a public disgrace", "the death of their spouse", "a failed comeback"),
        },
        explanation="Deepened emotional conflict, character flaw, and transformation arc.",
        changes=("Clarified internal conflict", "Added character flaw", "Raised emotional stakes"),
    ),
    "sci-fi": GenreStrategy(
        templates=(
            "When [PROTAGONIST] discovers [SCI-FI ELEMENT], they must [ACTION] before [CONSEQUENCE] changes the "
            "fate of [UNIVERSAL STAKES]—and the cost may be their own [PERSONAL SACRIFICE].",
            "In a world where [SCI-FI PREMISE], [PROTAGONIST] must [ACTION] that will force them to question "
            "[PHILOSOPHICAL QUESTION]—and everything they believed about [THEME].",
            "[PROTAGONIST] becomes the only one who can [ACTION] after [SCI-FI ELEMENT], but using this power "
            "means becoming the very thing they've sworn to destroy.",
        ),
        slots={
            "PROTAGONIST": ("a quantum physicist", "a memory editor", "the last engineer on a generation ship"),
            "ACTION": ("shut down the machine", "reach the colony", "rewrite the signal"),
            "SCI-FI ELEMENT": ("a signal from their future self", "a door to parallel worlds",
                               "an AI that remembers them"),
            "CONSEQUENCE": ("a cascade failure", "the next jump", "a corporate purge"),
            "UNIVERSAL STAKES": ("humanity", "every world they've touched", "the last human city"),
            "PERSONAL SACRIFICE": ("memories", "identity", "life"),
            "SCI-FI PREMISE": ("memories can be deleted", "death is a subscription", "no one is allowed to dream"),
            "PHILOSOPHICAL QUESTION": ("what makes them human", "whether free will exists", "who deserves to live"),
            "THEME": ("love", "memory", "progress"),
        },
        explanation="Clarified high concept, grounded human element, and raised universal stakes.",
        changes=("Sharpened sci-fi concept", "Added human emotional core", "Expanded stakes"),
    ),
    "action": GenreStrategy(
        templates=(
            "[PROTAGONIST] must [ACTION] against [OVERWHELMING ODDS], but the real fight is against "
            "[PERSONAL DEMON]—and failure means losing [PERSONAL STAKES] forever.",
            "When [ANTAGONIST] [WRONG], [PROTAGONIST] comes out of retirement for one last mission to "
            "[ACTION]—and this time, it's personal.",
            "Betrayed by [ALLY], [PROTAGONIST] has [TIME LIMIT] to [ACTION] before [ANTAGONIST] "
            "[DEVASTATING CONSEQUENCE]—armed only with [LIMITED RESOURCES] and a score to settle.",
        ),
        slots={
            "PROTAGONIST": ("a disgraced Navy SEAL", "a retired getaway driver", "a legendary bodyguard"),
            "ACTION": ("rescue the hostages", "bring down the cartel", "stop the hijacked train"),
            "OVERWHELMING ODDS": ("an army of mercenaries", "the entire city police force", "a private military"),
            "PERSONAL DEMON": ("the rage that ended their career", "their own guilt", "an old addiction"),
            "PERSONAL STAKES": ("their daughter", "the only family they have left", "their partner"),
            "ANTAGONIST": ("a rogue admiral", "the Russian mob", "a billionaire arms dealer"),
            "WRONG": ("kidnaps their sister", "burns down their village", "frames them for treason"),
            "ALLY": ("their own agency", "their oldest friend", "the handler they trusted"),
            "TIME LIMIT": ("twelve hours", "one night", "until sunrise"),
            "DEVASTATING CONSEQUENCE": ("detonates the device", "sells the launch codes", "wipes out the city"),
            "LIMITED RESOURCES": ("a stolen car", "six bullets", "a broken radio"),
        },
        explanation="Restructured with clear mission, overwhelming odds, and personal stakes.",
        changes=("Defined clear goal", "Added impossible odds", "Made it personal"),
    ),
    "romance": GenreStrategy(
        templates=(
            "[PROTAGONIST] and [LOVE INTEREST] are forced to [SITUATION] where their [CONTRAST] collides—until "
            "[EVENT] forces them to see each other differently.",
            "When [PROTAGONIST] runs into [LOVE INTEREST] at [SITUATION], old feelings resurface—but "
            "[OBSTACLE] stands between them and the second chance they never knew they wanted.",
            "To [ACTION], [PROTAGONIST] must team up with [LOVE INTEREST], but their growing feelings threaten "
            "to expose [SECRET] that could ruin everything.",
        ),
        slots={
            "PROTAGONIST": ("a cynical divorce lawyer", "a successful chef", "a commitment-phobic architect"),
            "ACTION": ("save the family vineyard", "win the baking championship", "sell the old inn"),
            "LOVE INTEREST": ("an eternal optimist wedding planner", "the high school sweetheart they ghosted",
                              "their fiercest business rival"),
            "SITUATION": ("share a vacation rental", "a small-town funeral", "plan the same wedding"),
            "CONTRAST": ("opposite worldviews", "competing ambitions", "clashing families"),
            "EVENT": ("a hurricane", "a wrong-number text", "a stolen dog"),
            "OBSTACLE": ("an engagement ring", "an ocean", "a family feud"),
            "SECRET": ("a fake engagement", "a buyout deal", "who really wrote the letters"),
        },
        explanation="Enhanced chemistry potential, obstacles, and emotional vulnerability.",
        changes=("Strengthened meet-cute", "Added romantic obstacles", "Deepened vulnerability"),
    ),
    "fantasy": GenreStrategy(
        templates=(
            "[PROTAGONIST] discovers they are [DESTINY] and must [ACTION] to defeat [DARK FORCE] before "
            "[APOCALYPSE].",
            "When [PROTAGONIST] discovers [HIDDEN WORLD], they must [ACTION] while hiding their [SECRET] from "
            "[THREAT].",
            "Exiled by [BETRAYER], [PROTAGONIST] must [ACTION] with a magic that feeds on [PRICE]—before "
            "[DARK FORCE] claims the throne.",
        ),
        slots={
            "PROTAGONIST": ("an orphaned stable girl", "a disgraced court mage", "a one-eyed blacksmith"),
            "ACTION": ("unite the fractured kingdoms", "find the last dragon egg", "break the sleeping curse"),
            "DESTINY": ("the last heir to dragon magic", "the prophesied Breaker", "a changeling queen"),
            "DARK FORCE": ("the Shadowlord", "the Hollow King", "a witch who devours names"),
            "APOCALYPSE": ("eternal night consumes the realm", "the veil between worlds tears",
                           "the last river runs dry"),
            "HIDDEN WORLD": ("a fae court beneath the city", "the dead still walk the market",
                             "their shadow has a will of its own"),
            "SECRET": ("new sight", "true name", "bloodline"),
            "THREAT": ("the hunters who kill seers", "the Inquisition", "their own family"),
            "BETRAYER": ("their twin", "the council of mages", "the king they swore to protect"),
            "PRICE": ("memories", "years of their life", "the people they love"),
        },
        explanation="Grounded the epic quest in a personal cost, with a clearer dark force and world-ending stakes.",
        changes=("Sharpened the quest", "Defined the dark force", "Raised world-ending stakes"),
    ),
}

GENERIC_EXPLANATION = "Tightened prose, clarified conflict, and raised stakes."
GENERIC_CHANGES = ("Improved clarity", "Strengthened conflict", "Raised stakes")
GENERIC_BASE = "A reluctant hero must face their greatest challenge"

FULL_IMPROVEMENT = (12, 21)
FULL_PROJECTION = ((75, 94), (78, 94), (80, 94), (72, 94), (70, 94))

# ───────────────── Targeted rewrites ───────────────── #

PROTAGONIST_ADJECTIVES = {
    "thriller": ("haunted", "disgraced", "brilliant but paranoid", "veteran", "rookie"),
    "horror": ("skeptical", "guilt-ridden", "psychically sensitive", "grieving", "isolated"),
    "comedy": ("hopelessly optimistic", "cynical", "socially awkward", "overconfident", "neurotic"),
    "drama": ("emotionally guarded", "workaholic", "estranged", "reformed", "struggling"),
    "sci-fi": ("visionary", "skeptical", "genetically engineered", "time-displaced", "last surviving"),
    "action": ("retired", "legendary", "disavowed", "one-man-army", "reluctant"),
    "romance": ("commitment-phobic", "hopelessly romantic", "jaded", "secretly vulnerable", "ambitious"),
    "fantasy": ("unlikely", "exiled", "half-trained", "cursed", "reluctant"),
}

CONFLICT_ADDITIONS = {
    "thriller": "while a ruthless enemy closes in",
    "horror": "as an ancient evil awakens",
    "comedy": "while everything that can go wrong does",
    "drama": "while confronting the ghosts of their past",
    "sci-fi": "before the fabric of reality tears apart",
    "action": "against impossible odds and a ticking clock",
    "romance": "while fighting their growing attraction",
    "fantasy": "as an ancient prophecy comes due",
}

STAKES_ADDITIONS = {
    "thriller": "or everyone they love will die",
    "horror": "or become the monster's next victim",
    "comedy": "or lose everything—including their dignity",
    "drama": "or lose their last chance at redemption",
    "sci-fi": "or watch humanity face extinction",
    "action": "or watch the world burn",
    "romance": "or lose their one true love forever",
    "fantasy": "or watch the realm fall into eternal darkness",
}

HOOK_SENTENCES = {
    "thriller": "But there's a twist: the killer might be the only one who can save them.",
    "horror": "The catch? The only way out is to face the truth they've been running from.",
    "comedy": "The problem? They're terrible at it—and falling for the wrong person.",
    "drama": "What they don't know: this journey will change them more than they ever expected.",
    "sci-fi": "The discovery: they might not be who—or what—they think they are.",
    "action": "The complication: the enemy knows every move before they make it.",
    "romance": "The twist: falling in love was never part of the plan.",
    "fantasy": "The catch? The magic that could save them is the same magic that's killing them.",
}

DEFAULT_CONFLICT = "while facing their greatest challenge"
DEFAULT_STAKES = "or face devastating consequences"
DEFAULT_HOOK = "Nothing is what it seems."


class TargetedRewrite(NamedTuple):
    rewrite_type: str
    element: str
    improvement: Tuple[int, int]
    cap: int
    explanation: str
    changes: Tuple[str, ...]
    projection: Tuple[Tuple[int, int], ...]  # ranges in ELEMENTS order


TARGETED = (
    TargetedRewrite(
        "protagonist", "Protagonist", (6, 13), 92,
        "Made protagonist more specific with a defining flaw or unique trait.",
        ("Added specificity to protagonist", "Included character flaw", "Made them more relatable"),
        ((85, 94), (70, 84), (70, 84), (70, 84), (75, 89)),
    ),
    TargetedRewrite(
        "conflict", "Conflict", (7, 15), 93,
        "Sharpened the central conflict with clearer obstacles and opposition.",
        ("Clarified antagonistic force", "Added urgency", "Made conflict more external"),
        ((70, 84), (88, 97), (75, 89), (72, 84), (70, 84)),
    ),
    TargetedRewrite(
        "stakes", "Stakes", (8, 17), 94,
        "Raised the stakes by making consequences more severe and personal.",
        ("Added life-or-death element", "Made stakes personal", "Added time pressure"),
        ((72, 84), (75, 89), (90, 97), (73, 84), (78, 94)),
    ),
    TargetedRewrite(
        "hook", "Unique Hook", (9, 19), 95,
        "Added a unique hook that differentiates this from similar stories.",
        ("Added fresh angle", "Included ironic element", "Made concept more marketable"),
        ((73, 84), (75, 87), (76, 89), (92, 97), (72, 84)),
    ),
)

# ───────────────── text helpers ───────────────── #

_PROTAGONIST_STOPS = {
    "must", "is", "are", "was", "has", "have", "who", "whose", "that", "and", "with", "to",
    "in", "on", "at", "from", "after", "when", "while", "becomes", "discovers", "learns",
}


def genre_key(genre: str) -> str:
    return (genre or "").strip().lower()


def _clean(text: str) -> str:
    text = re.sub(r"\s+", " ", text).strip()
    text = re.sub(r"\s+([,.;:!?])", r"\1", text)
    if text:
        text = text[0].upper() + text[1:]
    return text


def _end_sentence(text: str) -> str:
    text = text.rstrip()
    if text and text[-1] not in ".!?":
        text += "."
    return text


def _strip_end(text: str) -> str:
    return text.rstrip().rstrip(".!?").rstrip()


def _lower_first(text: str) -> str:
    return text[:1].lower() + text[1:]


def _article_for(word: str) -> str:
    return "an" if word[:1].lower() in "aeiou" else "a"


def extract_protagonist(logline: str) -> Optional[str]:
    """Leading "a/an ..." noun phrase, e.g. "a retired detective"."""
    words = (logline or "").split()
    for i, w in enumerate(words[:10]):
        if w.lower() not in ("a", "an"):
            continue
        phrase: List[str] = []
        for nxt in words[i + 1:i + 6]:
            bare = re.sub(r"[^\w'-]", "", nxt)
            low = bare.lower()
            if not bare or low in _PROTAGONIST_STOPS:
                break
            # third-person verb ("hunts", "saves") ends the noun phrase
            if phrase and low.endswith("s") and not low.endswith("ss"):
                break
            phrase.append(bare)
            if bare != nxt:
                break
        if phrase:
            return f"{_article_for(phrase[0])} {' '.join(phrase)}"
        return None
    return None


_ACTION = re.compile(
    r"\b(?:must|forced to|has to|needs to)\s+(.+?)(?=\s+(?:before|while|or|when|as|but|until)\b|[,.;!?—]|$)",
    re.I,
)


def extract_action(logline: str) -> Optional[str]:
    m = _ACTION.search(logline or "")
    if not m:
        return None
    action = m.group(1).strip()
    return action or None


def fill_template(template: str, slots: Dict[str, Sequence[str]], known: Dict[str, Optional[str]],
                  rng: random.Random) -> str:
    """Replace every [SLOT] with a known value from the logline or a pick from the slot bank."""

    def repl(m: "re.Match[str]") -> str:
        name = m.group(1)
        value = known.get(name)
        if value:
            return value
        bank = slots.get(name)
        if bank:
            return rng.choice(bank)
        return name.lower()

    return _clean(_SLOT.sub(repl, template))

# ───────────────── transforms ───────────────── #

def rewrite_full(logline: str, genre: str, rng: random.Random) -> Tuple[str, str, List[str]]:
    strategy = STRATEGIES.get(genre_key(genre))
    if strategy is None:
        logger.debug("no rewrite strategy for genre %r; using generic", genre)
        return _rewrite_generic(logline), GENERIC_EXPLANATION, list(GENERIC_CHANGES)

    template = rng.choice(strategy.templates)
    known = {
        "PROTAGONIST": extract_protagonist(logline),
        "ACTION": extract_action(logline),
    }
    return fill_template(template, strategy.slots, known, rng), strategy.explanation, list(strategy.changes)


def _rewrite_generic(logline: str) -> str:
    words = tighten(logline).split() or GENERIC_BASE.split()
    if len(words) > 30:
        return _clean(" ".join(words[:25]) + "—and nothing will ever be the same.")
    return _clean(_strip_end(" ".join(words)) + "—with everything they love hanging in the balance.")


def strengthen_protagonist(logline: str, genre: str, rng: random.Random) -> str:
    adjectives = PROTAGONIST_ADJECTIVES.get(genre_key(genre), PROTAGONIST_ADJECTIVES["drama"])
    adj = rng.choice(adjectives)
    words = (logline or "").split()
    for i, w in enumerate(words[:10]):
        if w.lower() in ("a", "an"):
            article = _article_for(adj)
            words[i] = article.capitalize() if w[0].isupper() else article
            words.insert(i + 1, adj)
            return _clean(" ".join(words))
    article = _article_for(adj).capitalize()
    return _clean(f"{article} {adj} protagonist {_lower_first((logline or '').strip())}")


def strengthen_conflict(logline: str, genre: str) -> str:
    addition = CONFLICT_ADDITIONS.get(genre_key(genre), DEFAULT_CONFLICT)
    return _clean(f"{_strip_end(logline or '')}—{addition}.")


def raise_stakes(logline: str, genre: str) -> str:
    stakes = STAKES_ADDITIONS.get(genre_key(genre), DEFAULT_STAKES)
    return _clean(f"{_strip_end(logline or '')}—{stakes}.")


def add_hook(logline: str, genre: str) -> str:
    hook = HOOK_SENTENCES.get(genre_key(genre), DEFAULT_HOOK)
    return _clean(f"{_end_sentence(logline or '')} {hook}")


def _targeted_text(kind: str, logline: str, genre: str, rng: random.Random) -> str:
    if kind == "protagonist":
        return strengthen_protagonist(logline, genre, rng)
    if kind == "conflict":
        return strengthen_conflict(logline, genre)
    if kind == "stakes":
        return raise_stakes(logline, genre)
    return add_hook(logline, genre)

# ───────────────── Public API ───────────────── #

def _project(ranges: Sequence[Tuple[int, int]], rng: random.Random) -> Dict[str, int]:
    return {name: rng.randint(lo, hi) for name, (lo, hi) in zip(ELEMENTS, ranges)}


def _predicted(current_score: int, improvement: int, cap: int) -> int:
    return clip(current_score + improvement, 0, cap)


def generate(
    logline: str,
    genre: str,
    current_score: int,
    analyses: Sequence[ElementAnalysis],
    rng: random.Random,
) -> List[RewriteCandidate]:
    """Full rewrite plus targeted rewrites for dimensions scoring below 75.

    Returns at most four candidates ordered by score improvement, highest first.
    """
    scores = {a.element: a.score for a in analyses}

    improvement = rng.randint(*FULL_IMPROVEMENT)
    text, explanation, changes = rewrite_full(logline, genre, rng)
    candidates = [RewriteCandidate(
        text=text,
        predicted_score=_predicted(current_score, improvement, 95),
        score_improvement=improvement,
        rewrite_type="full",
        explanation=explanation,
        changes_highlighted=changes,
        projected_element_scores=_project(FULL_PROJECTION, rng),
    )]

    for target in TARGETED:
        # a dimension missing from the analyses is treated as weak
        if scores.get(target.element, 0) >= TARGET_BELOW:
            continue
        improvement = rng.randint(*target.improvement)
        candidates.append(RewriteCandidate(
            text=_targeted_text(target.rewrite_type, logline, genre, rng),
            predicted_score=_predicted(current_score, improvement, target.cap),
            score_improvement=improvement,
            rewrite_type=target.rewrite_type,
            explanation=target.explanation,
            changes_highlighted=list(target.changes),
            projected_element_scores=_project(target.projection, rng),
        ))

    candidates.sort(key=lambda c: c.score_improvement, reverse=True)
    logger.debug("generated %d rewrite candidates", len(candidates))
    return candidates[:MAX_CANDIDATES]
