"""
The nine semantic categories that partition the template catalog.
"""

from dataclasses import dataclass

from .metadata import Category


@dataclass(frozen=True)
class CategoryInfo:
    id: Category
    name: str
    description: str
    templates: tuple[str, ...]


categories: dict[Category, CategoryInfo] = {
    Category.REACTIONS: CategoryInfo(
        id=Category.REACTIONS,
        name="Reactions & Emotions",
        description="Express feelings, surprise, shock, happiness, disappointment, satisfaction, or other emotional responses",
        templates=(
            "fine", "harold", "feelsgood", "sadfrog", "grumpycat", "facepalm", "astronaut",
            "scc", "whatyear", "gandalf", "disastergirl", "cheems", "stop-it", "ams",
        ),
    ),
    Category.COMPARISONS: CategoryInfo(
        id=Category.COMPARISONS,
        name="Comparisons & Choices",
        description="Compare options, show preferences, A vs B situations, distractions, or things that are actually the same",
        templates=(
            "drake", "db", "pooh", "glasses", "both", "same", "spiderman", "exit", "ds",
            "handshake", "midwit", "stonks", "woman-cat",
        ),
    ),
    Category.SOCIAL: CategoryInfo(
        id=Category.SOCIAL,
        name="Social Situations",
        description="Awkward moments, social anxiety, interactions, relationships, being a good or bad person",
        templates=("awkward", "awesome", "awkward-awesome", "ggg", "ss", "afraid", "hipster", "sb", "fa"),
    ),
    Category.QUESTIONING: CategoryInfo(
        id=Category.QUESTIONING,
        name="Questions & Uncertainty",
        description="Doubt, confusion, philosophical questions, skepticism, not understanding, or misidentifying things",
        templates=(
            "fry", "keanu", "philosoraptor", "noidea", "wonka", "pigeon", "rollsafe", "inigo",
            "yuno", "toohigh", "crazypills",
        ),
    ),
    Category.SUCCESS_FAIL: CategoryInfo(
        id=Category.SUCCESS_FAIL,
        name="Success & Failure",
        description="Achievements, victories, bad luck, mistakes, things going right or wrong",
        templates=("success", "blb", "iw", "boat", "aag", "jetpack", "bender", "mw"),
    ),
    Category.STATEMENTS: CategoryInfo(
        id=Category.STATEMENTS,
        name="Bold Statements & Opinions",
        description="Hot takes, opinions, declarations, emphatic statements, warnings, or corrections",
        templates=(
            "cmm", "sparta", "mordor", "morpheus", "dwight", "ackbar", "captain", "fetch",
            "imsorry", "bad",
        ),
    ),
    Category.NARRATIVE: CategoryInfo(
        id=Category.NARRATIVE,
        name="Stories & Dialogue",
        description="Multi-panel stories, conversations, arguments, plans that backfire, or sequential narratives",
        templates=("gru", "chair", "reveal", "gb", "panik-kalm-panik", "ptj", "captain-america", "drowning"),
    ),
    Category.META: CategoryInfo(
        id=Category.META,
        name="Meta & Self-Referential",
        description="Memes about memes, internet culture, self-aware humor, or commenting on the meme format itself",
        templates=("older", "xy", "doge", "yodawg", "mb", "jd"),
    ),
    Category.CHARACTERS: CategoryInfo(
        id=Category.CHARACTERS,
        name="Character-Specific",
        description="Templates featuring specific people, TV/movie characters, or internet personalities",
        templates=(
            "kermit", "spongebob", "patrick", "michael-scott", "interesting", "dragon", "winter",
            "fwp", "aint-got-time", "officespace", "ski",
        ),
    ),
}


def get_category(category_id: str) -> CategoryInfo | None:
    try:
        return categories[Category(category_id)]
    except ValueError:
        return None


def get_category_for_template(template_id: str) -> CategoryInfo | None:
    for category in categories.values():
        if template_id in category.templates:
            return category
    return None
