# core/templates.py
# Genre logline templates: two structural patterns per supported genre.

from typing import List

from core.models import GenreTemplate

SUPPORTED_GENRES = (
    "Thriller", "Horror", "Drama", "Comedy", "Sci-Fi", "Action", "Romance", "Fantasy",
)

TEMPLATES = (
    # Thriller
    GenreTemplate(
        genre="Thriller",
        template_name="The Hunted",
        structure="When [PROTAGONIST] discovers [SECRET/THREAT], they must [ACTION] before [ANTAGONIST] [CONSEQUENCE].",
        example=(
            "When a forensic accountant discovers her firm is laundering money for the cartel, "
            "she must expose the truth before the hitman tracking her silences her forever."
        ),
        key_elements=("Time pressure", "Life-or-death stakes", "Clear antagonist", "Moral dilemma"),
        tip="Thrillers need urgency. Add a ticking clock and make the threat personal.",
    ),
    GenreTemplate(
        genre="Thriller",
        template_name="The Conspiracy",
        structure="[PROTAGONIST] uncovers [CONSPIRACY] and must [ACTION] while being hunted by [ANTAGONIST].",
        example=(
            "A journalist uncovers a government cover-up of alien contact and must get the story out "
            "while being hunted by a black ops team determined to bury the truth."
        ),
        key_elements=("Conspiracy element", "Institutional antagonist", "Truth vs power", "Paranoia"),
        tip="Make the conspiracy feel both massive and personal to your protagonist.",
    ),
    # Horror
    GenreTemplate(
        genre="Horror",
        template_name="The Haunting",
        structure=(
            "When [PROTAGONIST] [INCITING INCIDENT], they unleash [HORROR] that forces them to "
            "confront [INNER DEMON/PAST TRAUMA]."
        ),
        example=(
            "When a grieving mother uses a forbidden ritual to contact her dead son, she unleashes "
            "something ancient that feeds on guilt—and knows all her secrets."
        ),
        key_elements=("Supernatural threat", "Psychological depth", "Past trauma", "Escalating dread"),
        tip="Great horror loglines hint at both external and internal monsters.",
    ),
    GenreTemplate(
        genre="Horror",
        template_name="The Survival",
        structure="[GROUP] must survive [HORROR] while trapped in [LOCATION], but the real threat is [TWIST].",
        example=(
            "Five friends must survive the night in a remote cabin stalked by something inhuman, "
            "but the real threat is the dark secret one of them is hiding."
        ),
        key_elements=("Isolation", "Group dynamics", "Hidden threat", "Survival stakes"),
        tip="Contained horror works best. Trap your characters with the threat.",
    ),
    # Drama
    GenreTemplate(
        genre="Drama",
        template_name="The Transformation",
        structure="A [FLAWED PROTAGONIST] must [CHALLENGE] which forces them to [INTERNAL CHANGE] or lose [STAKES].",
        example=(
            "A workaholic surgeon must care for the father who abandoned her when he develops dementia, "
            "forcing her to choose between the career she built as armor and the family she never had."
        ),
        key_elements=("Character flaw", "Forced situation", "Emotional stakes", "Transformation arc"),
        tip="Drama is about internal change. Make the external conflict mirror the internal one.",
    ),
    GenreTemplate(
        genre="Drama",
        template_name="The Redemption",
        structure="After [FALL FROM GRACE], [PROTAGONIST] gets one chance to [REDEMPTION] but must first [SACRIFICE].",
        example=(
            "After a drunk driving accident kills his best friend, a disgraced athlete gets one chance "
            "to coach his friend's troubled son to the championships—but must first face the family he destroyed."
        ),
        key_elements=("Past mistake", "Second chance", "Sacrifice required", "Forgiveness theme"),
        tip="Redemption stories need a clear fall, a path back, and a meaningful sacrifice.",
    ),
    # Comedy
    GenreTemplate(
        genre="Comedy",
        template_name="Fish Out of Water",
        structure=(
            "A [TYPE OF PERSON] is forced into [OPPOSITE WORLD] where they must [GOAL] while "
            "hilariously failing at [COMEDY SOURCE]."
        ),
        example=(
            "A germaphobic influencer is forced to spend a month on her grandfather's pig farm to inherit "
            "his fortune, where she must win over the town while hilariously failing at every aspect of rural life."
        ),
        key_elements=("Contrast", "Culture clash", "Physical comedy potential", "Heart beneath laughs"),
        tip="Comedy loglines should make the reader smile. Find the inherent absurdity.",
    ),
    GenreTemplate(
        genre="Comedy",
        template_name="The Deception",
        structure=(
            "To [GOAL], [PROTAGONIST] must pretend to be [FALSE IDENTITY], but complications arise "
            "when [COMPLICATION]."
        ),
        example=(
            "To win back his ex, a struggling actor pretends to be her new boyfriend's long-lost brother, "
            "but complications arise when he starts falling for the boyfriend's actual sister."
        ),
        key_elements=("Lie/deception", "Escalating complications", "Romantic element", "Identity confusion"),
        tip="Comedy lies need to snowball. Each fix should create two new problems.",
    ),
    # Sci-Fi
    GenreTemplate(
        genre="Sci-Fi",
        template_name="The Discovery",
        structure=(
            "When [PROTAGONIST] discovers [SCI-FI ELEMENT], they must [ACTION] before [CONSEQUENCE] "
            "changes [STAKES] forever."
        ),
        example=(
            "When a quantum physicist discovers she can communicate with her parallel selves, she must "
            "prevent a catastrophe that destroyed their worlds before it erases her reality forever."
        ),
        key_elements=("High concept hook", "Scientific grounding", "Universal stakes", "Human element"),
        tip="Sci-fi loglines need a clear, graspable concept. One big idea, well-executed.",
    ),
    GenreTemplate(
        genre="Sci-Fi",
        template_name="The Question",
        structure=(
            "In a world where [SCI-FI PREMISE], [PROTAGONIST] must [ACTION] that challenges "
            "[PHILOSOPHICAL QUESTION]."
        ),
        example=(
            "In a world where memories can be deleted, a memory editor discovers she erased her own past "
            "and must piece together who she was—even if the truth destroys who she's become."
        ),
        key_elements=("World-building hook", "Identity/humanity theme", "Moral complexity", "Personal stakes"),
        tip='The best sci-fi asks "What if?" and then "What does it mean to be human?"',
    ),
    # Action
    GenreTemplate(
        genre="Action",
        template_name="The Mission",
        structure=(
            "[SPECIALIST PROTAGONIST] must [IMPOSSIBLE MISSION] against [OVERWHELMING ODDS] to save "
            "[PERSONAL STAKES]."
        ),
        example=(
            "A disgraced Navy SEAL must infiltrate a hijacked nuclear submarine and stop a rogue admiral "
            "from starting World War III—while his daughter is held hostage aboard."
        ),
        key_elements=("Skilled protagonist", "Clear mission", "Ticking clock", "Personal stakes"),
        tip="Action loglines need a clear goal, massive obstacles, and something personal at stake.",
    ),
    GenreTemplate(
        genre="Action",
        template_name="The Revenge",
        structure=(
            "When [ANTAGONIST] [WRONG], [PROTAGONIST] comes out of [RETIREMENT/HIDING] to [REVENGE] "
            "using [SPECIAL SKILLS]."
        ),
        example=(
            "When the Russian mob kills his dog—a gift from his dying wife—a retired hitman comes out of "
            "hiding to wage a one-man war against the entire organization."
        ),
        key_elements=("Clear wrong", "Lethal protagonist", "Overwhelming enemies", "Emotional core"),
        tip="Revenge action needs a wrong so clear the audience roots for maximum carnage.",
    ),
    # Romance
    GenreTemplate(
        genre="Romance",
        template_name="Opposites Attract",
        structure=(
            "A [TYPE A] and a [TYPE B] are forced to [SITUATION] where they clash over [CONFLICT] "
            "until [REALIZATION]."
        ),
        example=(
            "A cynical divorce lawyer and an eternal optimist wedding planner are forced to share a "
            "vacation rental where they clash over everything—until a hurricane traps them together."
        ),
        key_elements=("Clear contrast", "Forced proximity", "Banter potential", "Vulnerability moment"),
        tip="Romance loglines need chemistry potential. Show why they'll clash AND connect.",
    ),
    GenreTemplate(
        genre="Romance",
        template_name="Second Chance",
        structure=(
            "When [PROTAGONIST] reunites with [LOST LOVE] after [TIME/EVENT], they must [CHALLENGE] "
            "while confronting [PAST ISSUE]."
        ),
        example=(
            "When a successful chef returns to her small town for her father's funeral, she reunites with "
            "the high school sweetheart she ghosted—who now runs her family's restaurant."
        ),
        key_elements=("History together", "Unresolved feelings", "Changed circumstances", "Obstacle to overcome"),
        tip="Second chance romance needs a believable reason they separated and reunited.",
    ),
    # Fantasy
    GenreTemplate(
        genre="Fantasy",
        template_name="The Chosen One",
        structure=(
            "A [UNLIKELY HERO] discovers they are [DESTINY] and must [QUEST] to defeat [DARK FORCE] "
            "before [APOCALYPSE]."
        ),
        example=(
            "An orphaned stable girl discovers she's the last heir to dragon magic and must unite the "
            "fractured kingdoms to defeat the Shadowlord before eternal night consumes the realm."
        ),
        key_elements=("Unlikely hero", "Destiny/prophecy", "Epic quest", "World-ending stakes"),
        tip="Fantasy chosen one stories need to subvert expectations. What makes YOUR hero different?",
    ),
    GenreTemplate(
        genre="Fantasy",
        template_name="The Hidden World",
        structure=(
            "When [PROTAGONIST] discovers [HIDDEN WORLD/MAGIC], they must navigate [CHALLENGE] while "
            "hiding their [SECRET] from [THREAT]."
        ),
        example=(
            "When a Chicago detective discovers she can see the fae creatures hidden among us, she must "
            "solve a murder in their shadow court while hiding her new sight from the hunters who kill seers."
        ),
        key_elements=("World revelation", "Dual existence", "Hidden dangers", "Identity secret"),
        tip="Hidden world fantasy works best when both worlds feel equally real and dangerous.",
    ),
)


def get_templates_for_genre(genre: str) -> List[GenreTemplate]:
    """Templates whose genre matches case-insensitively; empty for unknown genres."""
    key = (genre or "").strip().lower()
    return [t for t in TEMPLATES if t.genre.lower() == key]


def get_all_templates() -> List[GenreTemplate]:
    return list(TEMPLATES)
