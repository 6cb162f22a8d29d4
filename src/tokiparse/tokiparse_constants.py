"""
Vocabulary and grammatical role tables for toki pona.

Every word the parser understands is listed in `VOCABULARY`; anything else is
rejected by the classifier. The role sets below drive the grammar:

    PREDICATE_MARKERS: words that open a predicate (`li`, imperative `o`)
    PREPOSITIONS:      words that may open a trailing prepositional phrase
    PREVERBS:          modal/aspect words that can prefix a verb
    PARTICLES:         function words that can never head a noun phrase

All tables are immutable and built once at import time.
"""

VOCABULARY: tuple[str, ...] = (
    "a", "akesi", "ala", "alasa", "ale", "anpa", "ante", "anu", "awen",
    "e", "en", "epiku", "esun",
    "ijo", "ike", "ilo", "insa",
    "jaki", "jan", "jasima", "jelo", "jo",
    "kala", "kalama", "kama", "kasi", "ken", "kepeken", "kili", "kin",
    "kipisi", "kiwen", "ko", "kon", "kule", "kulupu", "kute",
    "la", "lanpan", "lape", "laso", "lawa", "leko", "len", "lete", "li",
    "lili", "linja", "lipu", "loje", "lon", "luka", "lukin", "lupa",
    "ma", "mama", "mani", "meli", "meso", "mi", "mije", "misikeke", "moku",
    "moli", "monsi", "monsuta", "mu", "mun", "musi", "mute",
    "n", "namako", "nanpa", "nasa", "nasin", "nena", "ni", "nimi", "noka",
    "o", "oko", "olin", "ona", "open",
    "pakala", "pali", "palisa", "pan", "pana", "pi", "pilin", "pimeja",
    "pini", "pipi", "poka", "poki", "pona", "pu",
    "sama", "seli", "selo", "seme", "sewi", "sijelo", "sike", "sin", "sina",
    "sinpin", "sitelen", "soko", "sona", "soweli", "su", "suli", "suno",
    "supa", "suwi",
    "tan", "taso", "tawa", "telo", "tenpo", "toki", "tomo", "tonsi", "tu",
    "unpa", "uta", "utala",
    "walo", "wan", "waso", "wawa", "weka", "wile",
)

PREDICATE_MARKERS = frozenset({"li", "o"})
PREPOSITIONS = frozenset({"tawa", "kepeken", "lon"})
PREVERBS = frozenset({"kama", "wile"})
PARTICLES = frozenset({"li", "o", "la", "e", "a"})

# `mi` and `sina` may drop `li`.
BARE_PRONOUN_SUBJECTS = frozenset({"mi", "sina"})

ALIASES_ENV_VAR = "TOKIPARSE_ALIASES"

__all__ = [
    "ALIASES_ENV_VAR",
    "BARE_PRONOUN_SUBJECTS",
    "PARTICLES",
    "PREDICATE_MARKERS",
    "PREPOSITIONS",
    "PREVERBS",
    "VOCABULARY",
]
