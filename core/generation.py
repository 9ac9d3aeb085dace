"""
AI-powered sentence generation for the puzzle exercises.

Two generators, both using OpenAI structured outputs:
1. Fill-in-the-blank sentences (reorder exercises)
2. Sentences with a single grammatical error (find-error exercises)

Usage:
    from core.generation import generate_fill_in_the_blank, generate_error_sentence

    blank = generate_fill_in_the_blank("boek", Direction.DUTCH_TO_FRENCH, hint="livre")
    error = generate_error_sentence("boek", Direction.DUTCH_TO_FRENCH)
"""

from __future__ import annotations

import logging
import os
from typing import Optional

from dotenv import load_dotenv
from openai import OpenAI

from core.schemas import (
    AIErrorSentence,
    AIFillInTheBlank,
    Direction,
    SentenceContent,
)

# Load environment variables
load_dotenv()

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "gpt-4o-2024-08-06"
MAX_SENTENCE_WORDS = 10

LANGUAGE_NAMES = {
    "nl": "Dutch",
    "fr": "French",
}

SYSTEM_PROMPT_BLANK = (
    "You are an assistant that writes language exercises for beginner learners "
    "of Dutch and French. You write short fill-in-the-blank sentences where the "
    "learner must find the missing word."
)

SYSTEM_PROMPT_ERROR = (
    "You are an assistant that writes grammar exercises for beginner learners "
    "of Dutch and French. You write a short sentence containing exactly one "
    "typical learner mistake, together with its corrected version."
)


class GenerationError(Exception):
    """The model returned no usable structured output."""


# Initialize OpenAI client (module-level, reused across calls)
_client: Optional[OpenAI] = None


def get_client() -> OpenAI:
    """Get or create the OpenAI client."""
    global _client
    if _client is None:
        api_key = os.getenv("OPENAI_API_KEY")
        if not api_key:
            raise ValueError("OPENAI_API_KEY not found in environment variables")
        _client = OpenAI(api_key=api_key)
    return _client


def get_model() -> str:
    return os.getenv("OPENAI_MODEL", DEFAULT_MODEL)


# ---- Prompts ----

def build_blank_prompt(
    word: str,
    direction: Direction,
    context: Optional[str] = None,
    hint: Optional[str] = None
) -> str:
    """Prompt for a fill-in-the-blank sentence using `word`."""
    language = LANGUAGE_NAMES[Direction(direction).sentence_language]

    prompt = f'Write a SIMPLE and OBVIOUS {language} sentence that uses the word "{word}"'
    if hint:
        prompt += f' (meaning: "{hint}")'
    prompt += ".\n"
    if context:
        prompt += f"Context: {context}.\n"

    prompt += (
        "The sentence is for a beginner exercise: the missing word must be easy "
        "to guess from the rest of the sentence.\n"
        "Replace the word with _____ in `sentence` and give the word exactly as "
        "it appears in the sentence in `missing_word`.\n"
        f"Keep the sentence short (at most {MAX_SENTENCE_WORDS} words) and end it with a period.\n"
        "Examples:\n"
        '- word "boek": "Ik lees een _____."\n'
        '- word "water": "Ik drink _____."\n'
    )
    return prompt


def build_error_prompt(
    word: str,
    direction: Direction,
    context: Optional[str] = None,
    hint: Optional[str] = None,
    error_type: Optional[str] = None
) -> str:
    """Prompt for a sentence with one grammatical error around `word`."""
    language = LANGUAGE_NAMES[Direction(direction).sentence_language]

    prompt = f'Write a short {language} sentence that uses the word "{word}"'
    if hint:
        prompt += f' (meaning: "{hint}")'
    prompt += " and introduce exactly ONE grammatical mistake a learner would make.\n"
    if error_type:
        prompt += f"The mistake must be of this kind: {error_type}.\n"
    if context:
        prompt += f"Context: {context}.\n"

    prompt += (
        "Rules:\n"
        "- `sentence_with_error` and `sentence_correct` use the same words except for the mistake\n"
        "- Typical mistakes: word order, article (de/het, le/la), verb conjugation, agreement\n"
        f"- At most {MAX_SENTENCE_WORDS} words\n"
        "- `explanation` is one short sentence in French explaining the mistake\n"
    )
    return prompt


# ---- Generators ----

def _parse(system_prompt: str, prompt: str, response_format, model: Optional[str], word: str):
    client = get_client()

    completion = client.beta.chat.completions.parse(
        model=model or get_model(),
        messages=[
            {
                "role": "system",
                "content": system_prompt
            },
            {
                "role": "user",
                "content": prompt
            }
        ],
        response_format=response_format,
    )

    parsed = completion.choices[0].message.parsed
    if parsed is None:
        raise GenerationError(f"Failed to parse structured output for word: {word}")
    return parsed


def blank_to_content(generated: AIFillInTheBlank, word: str) -> SentenceContent:
    """Convert a fill-in-the-blank response into SentenceContent."""
    if "_____" not in generated.sentence:
        raise GenerationError(f"Generated sentence has no blank: {generated.sentence!r}")
    return SentenceContent(
        sentence_text=generated.sentence,
        missing_or_error_word=generated.missing_word or word,
        translation=generated.translation,
    )


def error_to_content(generated: AIErrorSentence, word: str) -> SentenceContent:
    """Convert an error-sentence response into SentenceContent."""
    if not generated.sentence_with_error.strip() or not generated.sentence_correct.strip():
        raise GenerationError(f"Generated error sentence is empty for word: {word}")
    return SentenceContent(
        sentence_text=generated.sentence_with_error,
        missing_or_error_word=word,
        correct_text=generated.sentence_correct,
        explanation=generated.explanation,
        translation=generated.translation,
        error_type=generated.error_type,
    )


def generate_fill_in_the_blank(
    word: str,
    direction: Direction,
    context: Optional[str] = None,
    hint: Optional[str] = None,
    model: Optional[str] = None
) -> SentenceContent:
    """
    Generate reorder-exercise content for a word.

    Args:
        word: The word in the sentence language
        direction: Exercise direction (selects the sentence language)
        context: Optional lesson context
        hint: Optional translation of the word
        model: OpenAI model to use (defaults to OPENAI_MODEL)

    Returns:
        SentenceContent with a _____ blank in sentence_text

    Raises:
        ValueError: If OPENAI_API_KEY is not set
        GenerationError: If the structured output is missing or unusable
        openai.APIError: If the API call fails
    """
    prompt = build_blank_prompt(word, direction, context, hint)
    generated = _parse(SYSTEM_PROMPT_BLANK, prompt, AIFillInTheBlank, model, word)
    logger.info("[GENERATION] Fill-in-the-blank sentence for %r: %s", word, generated.sentence)
    return blank_to_content(generated, word)


def generate_error_sentence(
    word: str,
    direction: Direction,
    context: Optional[str] = None,
    hint: Optional[str] = None,
    error_type: Optional[str] = None,
    model: Optional[str] = None
) -> SentenceContent:
    """
    Generate find-error content for a word.

    Raises:
        ValueError: If OPENAI_API_KEY is not set
        GenerationError: If the structured output is missing or unusable
        openai.APIError: If the API call fails
    """
    prompt = build_error_prompt(word, direction, context, hint, error_type)
    generated = _parse(SYSTEM_PROMPT_ERROR, prompt, AIErrorSentence, model, word)
    logger.info("[GENERATION] Error sentence for %r: %s", word, generated.sentence_with_error)
    return error_to_content(generated, word)
