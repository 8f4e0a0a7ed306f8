from __future__ import annotations

from collections.abc import Sequence

from pacing.domain.services.rand import Rand
from pacing.domain.services.roman import to_roman

NAME_PARTS: tuple[tuple[str, ...], ...] = (
    (
        "br", "cr", "dr", "fr", "gr", "j", "kr", "l", "m", "n", "pr", " ", " ", " ",
        "r", "sh", "tr", "v", "wh", "x", "y", "z",
    ),
    ("a", "a", "e", "e", "i", "i", "o", "o", "u", "u", "ae", "ie", "oo", "ou"),
    ("b", "ck", "d", "g", "k", "m", "n", "p", "t", "v", "x", "z"),
)

SICK_LADDER = ("dead", "comatose", "crippled", "sick", "undernourished")
YOUNG_LADDER = ("fetal", "baby", "preadolescent", "teenage", "underage")
BIG_LADDER = ("greater", "massive", "enormous", "giant", "titantic")
SPECIAL_SPACED = ("veteran", "cursed", "warrior", "undead", "demon")
SPECIAL_JOINED = ("Battle-", "cursed ", "Were-", "undead ", "demon ")

_VOWELS = "AEIOUaeiou"


def title_case(text: str) -> str:
    return " ".join(word[:1].upper() + word[1:].lower() for word in text.split())


def generate_name(rng: Rand, fragments: int = 6) -> str:
    raw = "".join(rng.choice(NAME_PARTS[index % 3]) for index in range(fragments))
    return title_case(raw)


def act_name(act: int) -> str:
    if act == 0:
        return "Prologue"
    return f"Act {to_roman(act)}"


def plural(subject: str) -> str:
    if subject.endswith("y"):
        return subject[:-1] + "ies"
    if subject.endswith("us"):
        return subject[:-2] + "i"
    if subject.endswith(("x", "s", "ch", "sh")):
        return subject + "es"
    if subject.endswith("f"):
        return subject[:-1] + "ves"
    if subject.endswith(("man", "Man")):
        return subject[:-2] + "en"
    return subject + "s"


def indefinite(subject: str, quantity: int) -> str:
    if quantity == 1:
        article = "an" if subject and subject[0] in _VOWELS else "a"
        return f"{article} {subject}"
    return f"{quantity} {plural(subject)}"


def definite(subject: str, quantity: int) -> str:
    if quantity > 1:
        subject = plural(subject)
    return f"the {subject}"


def prefix(items: Sequence[str], index: int, subject: str, sep: str = " ") -> str:
    """Prepend ``items[index - 1]``; indices outside ``[1, len]`` leave the subject alone."""

    if index < 1 or index > len(items):
        return subject
    return f"{items[index - 1]}{sep}{subject}"


def sick(intensity: int, subject: str) -> str:
    return prefix(SICK_LADDER, max(len(SICK_LADDER) - intensity, 0), subject)


def young(intensity: int, subject: str) -> str:
    return prefix(YOUNG_LADDER, max(len(YOUNG_LADDER) - intensity, 0), subject)


def big(intensity: int, subject: str) -> str:
    return prefix(BIG_LADDER, intensity, subject)


def special(intensity: int, subject: str) -> str:
    if " " in subject:
        return prefix(SPECIAL_SPACED, intensity, subject)
    return prefix(SPECIAL_JOINED, intensity, subject, sep="")


def terminate_message(player_name: str, rng: Rand) -> str:
    adjective = rng.choice(("faithful", "noble", "loyal", "brave"))
    return f"Terminate {adjective} {player_name}?"
