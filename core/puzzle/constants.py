"""
Puzzle Engine Constants

Tunable parameters and word-class lookup tables for the sentence puzzles.
"""

from core.schemas import Direction


# ---- Hints ----

HINT_CAP = 3                # Maximum hints per puzzle
FIRST_HINT_PLACEMENTS = 2   # Tokens placed by the first hint
NEXT_HINT_PLACEMENTS = 1    # Tokens placed by each later hint


# ---- Pre-placement ----

PREFILL_MIN_TOKENS = 11     # Pre-fill only when the sentence is longer than 10 tokens
PREFILL_RATIO = 0.35        # Share of slots pre-occupied before the user starts
TIME_ADVERB_WINDOW = 0.30   # Time adverbs count as strategic in the first 30%
SHORT_WORD_WINDOW = 0.60    # Short words count as strategic in the first 60%
SHORT_WORD_MAX_LENGTH = 3


# ---- Normalization ----

PUNCTUATION = ".,!?;:"
BLANK_MARKERS = ("_____", "[MOT]", "{MOT}")


# ---- Hint Priority ----
# Weight per word class, plus a bonus for the first half of the sentence

CLASS_WEIGHTS = {
    "article": 3,
    "preposition": 3,
    "conjunction": 2,
    "pronoun": 2,
    "time_adverb": 1,
    "short_word": 1,
    "other": 0,
}
FIRST_HALF_BONUS = 1


# ---- Word-Class Tables ----
# Keyed by direction: dutch_to_french sentences are Dutch, french_to_dutch are French.
# Entries are matched on normalized form (lowercase, no diacritics).

WORD_CLASS_TABLES = {
    Direction.DUTCH_TO_FRENCH: {
        "article": {"de", "het", "een", "'t"},
        "preposition": {
            "aan", "achter", "bij", "binnen", "boven", "buiten", "door", "in",
            "langs", "met", "na", "naar", "naast", "om", "onder", "op", "over",
            "sinds", "tegen", "tot", "tussen", "uit", "van", "voor", "zonder",
        },
        "conjunction": {
            "als", "dat", "dus", "en", "hoewel", "maar", "nadat", "of", "omdat",
            "terwijl", "toen", "voordat", "want", "wanneer", "zodat",
        },
        "pronoun": {
            "die", "deze", "dit", "er", "haar", "hem", "hen", "hij", "hun", "ik",
            "je", "jij", "jou", "jouw", "jullie", "me", "mij", "mijn", "ons",
            "onze", "u", "uw", "we", "wij", "ze", "zij", "zich", "zijn",
        },
        "time_adverb": {
            "al", "altijd", "binnenkort", "daarna", "dan", "eerst", "gisteren",
            "later", "morgen", "nog", "nooit", "nu", "overmorgen", "soms",
            "straks", "vaak", "vanavond", "vandaag", "vanmorgen", "vanochtend",
        },
    },
    Direction.FRENCH_TO_DUTCH: {
        "article": {"au", "aux", "des", "du", "l'", "la", "le", "les", "un", "une"},
        "preposition": {
            "a", "apres", "avant", "avec", "chez", "contre", "d'", "dans", "de",
            "depuis", "en", "entre", "par", "pendant", "pour", "sans", "sous",
            "sur", "vers",
        },
        "conjunction": {
            "car", "comme", "donc", "et", "lorsque", "mais", "ni", "ou", "parce",
            "puisque", "qu'", "quand", "que", "si",
        },
        "pronoun": {
            "ce", "ces", "cette", "elle", "elles", "il", "ils", "j'", "je", "leur",
            "lui", "m'", "ma", "me", "mes", "moi", "mon", "nous", "on", "s'", "sa",
            "se", "ses", "son", "t'", "ta", "te", "tes", "toi", "ton", "tu", "vous",
        },
        "time_adverb": {
            "aujourd'hui", "bientot", "deja", "demain", "ensuite", "hier",
            "jamais", "maintenant", "parfois", "puis", "souvent", "tard", "tot",
            "toujours",
        },
    },
}
