"""Tests for tokenization and normalization."""

from core.puzzle.tokenizer import (
    complete_blank_sentence,
    normalize_sentence,
    normalize_word,
    same_word,
    tokenize,
)


class TestTokenize:
    def test_splits_on_whitespace_runs(self):
        assert tokenize("  Ik  lees\teen boek. ") == ["Ik", "lees", "een", "boek."]

    def test_keeps_attached_punctuation(self):
        assert tokenize("Ja, ik kom!") == ["Ja,", "ik", "kom!"]

    def test_empty(self):
        assert tokenize("") == []
        assert tokenize("   ") == []


class TestNormalize:
    def test_lowercase_and_diacritics(self):
        assert normalize_word("Déjà") == "deja"
        assert normalize_word("Één") == "een"

    def test_punctuation_kept_by_default(self):
        assert normalize_word("boek.") == "boek."

    def test_punctuation_stripped_on_request(self):
        assert normalize_word("boek.", strip_punctuation=True) == "boek"
        assert normalize_word("Quoi?!", strip_punctuation=True) == "quoi"

    def test_sentence(self):
        assert normalize_sentence("Ik  lees, een Boek!") == "ik lees een boek"

    def test_same_word(self):
        assert same_word("École", "ecole")
        assert not same_word("boek", "boek.")
        assert same_word("boek", "boek.", strip_punctuation=True)


class TestCompleteBlankSentence:
    def test_fills_blank_and_drops_period(self):
        assert complete_blank_sentence("Ik lees een _____.", "boek") == "Ik lees een boek"

    def test_alternative_marker(self):
        assert complete_blank_sentence("De gras is [MOT] in de tuin.", "groen") == "De gras is groen in de tuin"

    def test_question_mark_kept(self):
        assert complete_blank_sentence("Waar is de _____?", "fiets") == "Waar is de fiets?"

    def test_word_taken_literally(self):
        assert complete_blank_sentence("Een _____.", r"a\1") == r"Een a\1"
