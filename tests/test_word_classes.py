"""Tests for the word-class classifier."""

from core.puzzle.word_classes import WordClass, classify
from core.schemas import Direction

NL = Direction.DUTCH_TO_FRENCH
FR = Direction.FRENCH_TO_DUTCH


class TestDutch:
    def test_article_wins_over_pronoun(self):
        assert classify("het", NL) == WordClass.ARTICLE

    def test_tables(self):
        assert classify("de", NL) == WordClass.ARTICLE
        assert classify("met", NL) == WordClass.PREPOSITION
        assert classify("omdat", NL) == WordClass.CONJUNCTION
        assert classify("wij", NL) == WordClass.PRONOUN

    def test_case_and_punctuation_ignored(self):
        assert classify("Vandaag,", NL) == WordClass.TIME_ADVERB

    def test_short_and_other(self):
        assert classify("kat", NL) == WordClass.SHORT_WORD
        assert classify("fiets", NL) == WordClass.OTHER

    def test_punctuation_only(self):
        assert classify(".", NL) == WordClass.OTHER


class TestFrench:
    def test_elided_forms(self):
        assert classify("l'homme", FR) == WordClass.ARTICLE
        assert classify("j'ai", FR) == WordClass.PRONOUN
        assert classify("d'eau", FR) == WordClass.PREPOSITION

    def test_diacritics(self):
        assert classify("Déjà", FR) == WordClass.TIME_ADVERB
        assert classify("à", FR) == WordClass.PREPOSITION

    def test_apostrophe_word_in_table(self):
        assert classify("aujourd'hui", FR) == WordClass.TIME_ADVERB

    def test_tables_are_per_direction(self):
        assert classify("de", FR) == WordClass.PREPOSITION
        assert classify("met", FR) == WordClass.SHORT_WORD
