"""测试 modes.py — 模式表查找与默认回落。"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from wonderlens.modes import Mode, resolve

PROMPTS_FILE = Path(__file__).parent.parent / "fixtures" / "mode_prompts.json"


class TestResolve:
    """模式名 → ModeProfile。"""

    @pytest.mark.parametrize("name", ["education", "speculative", "mindful", "funny", "default"])
    def test_named_modes(self, name):
        profile = resolve(name)
        assert profile.mode == Mode(name)
        assert profile.prompt
        assert profile.voice_id

    @pytest.mark.parametrize("name", ["educate", "EDUCATION", "nonsense", ""])
    def test_unknown_mode_is_default(self, name):
        assert resolve(name) is resolve("default")

    def test_none_is_default(self):
        assert resolve(None) is resolve("default")

    def test_surrounding_whitespace_ignored(self):
        assert resolve("  funny ").mode == Mode.FUNNY


class TestProfiles:
    """模式表内容。"""

    def test_five_profiles(self):
        assert len({resolve(m.value).prompt for m in Mode}) == 5

    def test_voices(self):
        assert resolve("education").voice_id == "Yko7PKHZNXotIFUBG7I9"
        assert resolve("speculative").voice_id == "XB0fDUnXU5powFXDhCwa"
        assert resolve("mindful").voice_id == "piTKgcLEGmPE4e6mEKli"
        assert resolve("funny").voice_id == "ThT5KcBeYPX3keUQqHPh"
        assert resolve("default").voice_id == resolve("education").voice_id

    @pytest.mark.parametrize("name,keyword", [
        ("education", "educator"),
        ("speculative", "mystery-solver"),
        ("mindful", "mindful"),
        ("funny", "comedian"),
        ("default", "friendly companion"),
    ])
    def test_prompt_persona(self, name, keyword):
        assert keyword in resolve(name).prompt

    def test_prompts_target_red_box(self):
        for profile in (resolve(m.value) for m in Mode):
            assert "red box" in profile.prompt
            assert "Don't use any emojis" in profile.prompt

    def test_profiles_immutable(self):
        profile = resolve("funny")
        with pytest.raises(AttributeError):
            profile.voice_id = "other"  # type: ignore[misc]


class TestPromptText:
    """prompt 文本与客户端约定的版本逐字一致。"""

    @pytest.fixture(scope="class")
    def expected(self) -> dict[str, str]:
        return json.loads(PROMPTS_FILE.read_text(encoding="utf-8"))

    @pytest.mark.parametrize("name", ["education", "speculative", "mindful", "funny", "default"])
    def test_prompt_verbatim(self, expected, name):
        assert resolve(name).prompt == expected[name]

    def test_speculative_keeps_question_list(self):
        assert "Instead of just saying 'this is a tree,' speculate about:" in resolve("speculative").prompt

    def test_mindful_keeps_activity_focus(self):
        prompt = resolve("mindful").prompt
        assert "Your response should be primarily about mindfulness activities" in prompt
        assert "counting their breaths while observing it" in prompt

    def test_funny_keeps_pop_culture_examples(self):
        assert "Ent vibes from Lord of the Rings" in resolve("funny").prompt
