"""
Read-aloud helper.

Streamlit has no text-to-speech widget, so the browser's speech
synthesis is driven from a zero-height HTML component.
"""

from __future__ import annotations

import json

import streamlit as st

SPEECH_RATE = 0.9


def _js_string(value: str) -> str:
    # Escape "</" so a closing tag in the text cannot end the script
    return json.dumps(value).replace("</", "<\\/")


def speech_script(text: str, locale: str, rate: float = SPEECH_RATE) -> str:
    """
    Build the HTML snippet that reads `text` aloud in `locale`.

    Values are JSON-encoded, with closing tags escaped.
    """
    return (
        "<script>\n"
        "const synth = window.parent.speechSynthesis || window.speechSynthesis;\n"
        "if (synth) {\n"
        "  synth.cancel();\n"
        f"  const utterance = new SpeechSynthesisUtterance({_js_string(text)});\n"
        f"  utterance.lang = {_js_string(locale)};\n"
        f"  utterance.rate = {rate};\n"
        "  synth.speak(utterance);\n"
        "}\n"
        "</script>"
    )


def speak(text: str, locale: str) -> None:
    """Read `text` aloud in the browser."""
    if not text:
        return
    st.components.v1.html(speech_script(text, locale), height=0)


def render_speak_button(text: str, locale: str, key: str, label: str = "🔊 Écouter") -> bool:
    """
    Render a button that reads `text` aloud when clicked.

    Returns:
        True if the button was clicked
    """
    if st.button(label, key=key, disabled=not text):
        speak(text, locale)
        return True
    return False
