"""Tests for prompt building and structured-output handling (no network)."""

from types import SimpleNamespace

import pytest

from core import generation
from core.generation import (
    GenerationError,
    blank_to_content,
    build_blank_prompt,
    build_error_prompt,
    error_to_content,
    generate_error_sentence,
    generate_fill_in_the_blank,
)
from core.schemas import AIErrorSentence, AIFillInTheBlank, Direction

NL = Direction.DUTCH_TO_FRENCH
FR = Direction.FRENCH_TO_DUTCH


class FakeCompletions:
    def __init__(self, parsed):
        self.parsed = parsed
        self.calls = []

    def parse(self, **kwargs):
        self.calls.append(kwargs)
        message = SimpleNamespace(parsed=self.parsed)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])


def _fake_client(parsed):
    completions = FakeCompletions(parsed)
    client = SimpleNamespace(beta=SimpleNamespace(chat=SimpleNamespace(completions=completions)))
    return client, completions


class TestPrompts:
    def test_blank_prompt_language_and_hint(self):
        prompt = build_blank_prompt("boek", NL, context="school", hint="livre")
        assert "Dutch sentence" in prompt
        assert '"boek"' in prompt
        assert '"livre"' in prompt
        assert "Context: school." in prompt
        assert "_____" in prompt

    def test_blank_prompt_french(self):
        prompt = build_blank_prompt("livre", FR)
        assert "French sentence" in prompt
        assert "Context" not in prompt

    def test_error_prompt_error_type(self):
        prompt = build_error_prompt("huis", NL, error_type="article")
        assert "exactly ONE grammatical mistake" in prompt
        assert "of this kind: article" in prompt


class TestConversion:
    def test_blank_requires_blank(self):
        with pytest.raises(GenerationError):
            blank_to_content(AIFillInTheBlank(sentence="Ik lees een boek.", missing_word="boek"), "boek")

    def test_blank_content(self):
        content = blank_to_content(
            AIFillInTheBlank(sentence="Ik lees een _____.", missing_word="boek", translation="Je lis un livre."),
            "boek",
        )
        assert content.sentence_text == "Ik lees een _____."
        assert content.missing_or_error_word == "boek"
        assert content.translation == "Je lis un livre."

    def test_error_content(self):
        content = error_to_content(
            AIErrorSentence(
                sentence_with_error="Ik heb gisteren gegaan.",
                sentence_correct="Ik ben gisteren gegaan.",
                error_type="auxiliary",
                explanation="Gaan se conjugue avec zijn.",
            ),
            "gaan",
        )
        assert content.sentence_text == "Ik heb gisteren gegaan."
        assert content.correct_text == "Ik ben gisteren gegaan."
        assert content.error_type == "auxiliary"
        assert content.missing_or_error_word == "gaan"

    def test_error_content_rejects_empty(self):
        with pytest.raises(GenerationError):
            error_to_content(AIErrorSentence(sentence_with_error=" ", sentence_correct="Ik ben."), "zijn")


class TestGenerate:
    def test_fill_in_the_blank(self, monkeypatch):
        client, completions = _fake_client(
            AIFillInTheBlank(sentence="Ik drink _____.", missing_word="water")
        )
        monkeypatch.setattr(generation, "_client", client)

        content = generate_fill_in_the_blank("water", NL, model="test-model")

        assert content.sentence_text == "Ik drink _____."
        call = completions.calls[0]
        assert call["model"] == "test-model"
        assert call["response_format"] is AIFillInTheBlank
        assert call["messages"][0]["role"] == "system"

    def test_model_from_environment(self, monkeypatch):
        client, completions = _fake_client(
            AIErrorSentence(sentence_with_error="De huis is groot.", sentence_correct="Het huis is groot.")
        )
        monkeypatch.setattr(generation, "_client", client)
        monkeypatch.setenv("OPENAI_MODEL", "env-model")

        content = generate_error_sentence("huis", NL)

        assert content.correct_text == "Het huis is groot."
        assert completions.calls[0]["model"] == "env-model"

    def test_unparsed_output_raises(self, monkeypatch):
        client, _ = _fake_client(None)
        monkeypatch.setattr(generation, "_client", client)
        with pytest.raises(GenerationError):
            generate_fill_in_the_blank("water", NL)

    def test_missing_api_key(self, monkeypatch):
        monkeypatch.setattr(generation, "_client", None)
        monkeypatch.delenv("OPENAI_API_KEY", raising=False)
        with pytest.raises(ValueError):
            generation.get_client()
