"""
Word classifier for toki pona.

Maps token text onto the closed vocabulary and answers the role questions the
grammar asks about a word.

Classes:
    Word: Enumeration of every vocabulary entry. Values are the lower-case spellings.

Functions:
    classify(token, aliases=None) -> Word:
        Case-insensitive exact lookup. Raises `UnrecognizedWord` for anything else.
    is_predicate_marker(word), is_preposition(word), is_preverb(word), is_particle(word):
        Role predicates, also available as `Word` methods.

Example:
    >>> classify("Moku")
    <Word.MOKU: 'moku'>
    >>> Word.LI.is_predicate_marker()
    True
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from tokiparse.tokiparse_constants import (
    PARTICLES,
    PREDICATE_MARKERS,
    PREPOSITIONS,
    PREVERBS,
)
from tokiparse.tokiparse_errors import UnrecognizedWord

if TYPE_CHECKING:
    from tokiparse.tokiparse_aliases import AliasMapper


class Word(Enum):
    """A single entry of the toki pona vocabulary.

    Members carry no data beyond their spelling; grammatical roles are derived
    from the role tables in `tokiparse_constants`.
    """

    A = "a"
    AKESI = "akesi"
    ALA = "ala"
    ALASA = "alasa"
    ALE = "ale"
    ANPA = "anpa"
    ANTE = "ante"
    ANU = "anu"
    AWEN = "awen"
    E = "e"
    EN = "en"
    EPIKU = "epiku"
    ESUN = "esun"
    IJO = "ijo"
    IKE = "ike"
    ILO = "ilo"
    INSA = "insa"
    JAKI = "jaki"
    JAN = "jan"
    JASIMA = "jasima"
    JELO = "jelo"
    JO = "jo"
    KALA = "kala"
    KALAMA = "kalama"
    KAMA = "kama"
    KASI = "kasi"
    KEN = "ken"
    KEPEKEN = "kepeken"
    KILI = "kili"
    KIN = "kin"
    KIPISI = "kipisi"
    KIWEN = "kiwen"
    KO = "ko"
    KON = "kon"
    KULE = "kule"
    KULUPU = "kulupu"
    KUTE = "kute"
    LA = "la"
    LANPAN = "lanpan"
    LAPE = "lape"
    LASO = "laso"
    LAWA = "lawa"
    LEKO = "leko"
    LEN = "len"
    LETE = "lete"
    LI = "li"
    LILI = "lili"
    LINJA = "linja"
    LIPU = "lipu"
    LOJE = "loje"
    LON = "lon"
    LUKA = "luka"
    LUKIN = "lukin"
    LUPA = "lupa"
    MA = "ma"
    MAMA = "mama"
    MANI = "mani"
    MELI = "meli"
    MESO = "meso"
    MI = "mi"
    MIJE = "mije"
    MISIKEKE = "misikeke"
    MOKU = "moku"
    MOLI = "moli"
    MONSI = "monsi"
    MONSUTA = "monsuta"
    MU = "mu"
    MUN = "mun"
    MUSI = "musi"
    MUTE = "mute"
    N = "n"
    NAMAKO = "namako"
    NANPA = "nanpa"
    NASA = "nasa"
    NASIN = "nasin"
    NENA = "nena"
    NI = "ni"
    NIMI = "nimi"
    NOKA = "noka"
    O = "o"
    OKO = "oko"
    OLIN = "olin"
    ONA = "ona"
    OPEN = "open"
    PAKALA = "pakala"
    PALI = "pali"
    PALISA = "palisa"
    PAN = "pan"
    PANA = "pana"
    PI = "pi"
    PILIN = "pilin"
    PIMEJA = "pimeja"
    PINI = "pini"
    PIPI = "pipi"
    POKA = "poka"
    POKI = "poki"
    PONA = "pona"
    PU = "pu"
    SAMA = "sama"
    SELI = "seli"
    SELO = "selo"
    SEME = "seme"
    SEWI = "sewi"
    SIJELO = "sijelo"
    SIKE = "sike"
    SIN = "sin"
    SINA = "sina"
    SINPIN = "sinpin"
    SITELEN = "sitelen"
    SOKO = "soko"
    SONA = "sona"
    SOWELI = "soweli"
    SU = "su"
    SULI = "suli"
    SUNO = "suno"
    SUPA = "supa"
    SUWI = "suwi"
    TAN = "tan"
    TASO = "taso"
    TAWA = "tawa"
    TELO = "telo"
    TENPO = "tenpo"
    TOKI = "toki"
    TOMO = "tomo"
    TONSI = "tonsi"
    TU = "tu"
    UNPA = "unpa"
    UTA = "uta"
    UTALA = "utala"
    WALO = "walo"
    WAN = "wan"
    WASO = "waso"
    WAWA = "wawa"
    WEKA = "weka"
    WILE = "wile"

    def __str__(self) -> str:
        return self.value

    def is_predicate_marker(self) -> bool:
        return self.value in PREDICATE_MARKERS

    def is_preposition(self) -> bool:
        return self.value in PREPOSITIONS

    def is_preverb(self) -> bool:
        return self.value in PREVERBS

    def is_particle(self) -> bool:
        """Particles (`li`, `o`, `la`, `e`, `a`) can never head a noun phrase."""
        return self.value in PARTICLES


word_hashmap: dict[str, Word] = {word.value: word for word in Word}


def classify(token: str, aliases: AliasMapper | None = None) -> Word:
    """Resolves token text to its vocabulary entry.

    Args:
        token: The token text, already stripped of punctuation.
        aliases: Optional alias mapper consulted before the vocabulary lookup.

    Returns:
        The matching `Word`.

    Raises:
        UnrecognizedWord: If the lower-cased text is not a vocabulary entry
            (or a configured alias of one).
    """
    text = token.lower()
    if aliases is not None:
        text = aliases.resolve(text) or text
    word = word_hashmap.get(text)
    if word is None:
        raise UnrecognizedWord(token)
    return word


def is_predicate_marker(word: Word) -> bool:
    return word.is_predicate_marker()


def is_preposition(word: Word) -> bool:
    return word.is_preposition()


def is_preverb(word: Word) -> bool:
    return word.is_preverb()


def is_particle(word: Word) -> bool:
    return word.is_particle()


__all__ = [
    "Word",
    "classify",
    "is_particle",
    "is_predicate_marker",
    "is_preposition",
    "is_preverb",
    "word_hashmap",
]
