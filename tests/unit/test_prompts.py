"""Tests for the prompt builder."""

import pytest

from frontend.prompts import SYSTEM_PROMPTS, ActionMode, build_messages


class TestBuildMessages:

    def test_summarize(self):
        messages = build_messages(ActionMode.SUMMARIZE, "Some long text")
        assert messages == [
            {"role": "system", "content": SYSTEM_PROMPTS[ActionMode.SUMMARIZE]},
            {"role": "user", "content": "Some long text"},
        ]

    def test_translate_system_prompt(self):
        system, _ = build_messages(ActionMode.TRANSLATE, "Bonjour")
        assert system["content"].startswith("You are a translator.")

    def test_mode_only_changes_system_message(self):
        text = 'Translate to "German":  "héllo\n\twörld" 🌍  '
        summarize = build_messages(ActionMode.SUMMARIZE, text)
        translate = build_messages(ActionMode.TRANSLATE, text)

        assert summarize[1] == translate[1]
        assert translate[1]["content"] == text
        assert summarize[0]["content"] != translate[0]["content"]

    def test_accepts_string_mode(self):
        assert build_messages("translate", "x")[0]["content"] == SYSTEM_PROMPTS[ActionMode.TRANSLATE]

    def test_unknown_mode_rejected(self):
        with pytest.raises(ValueError):
            build_messages("paraphrase", "x")
