"""Unit tests for thumbnail prompt construction."""

import pytest

from app.exceptions import InvalidColorSchemeError, InvalidStyleError, ValidationError
from app.schemas.thumbnail import AspectRatio, ColorScheme, ThumbnailStyle
from app.services.prompt_builder import COLOR_SCHEME_PROMPTS, STYLE_PROMPTS, build_prompt

CLOSING = "Make it bold, professional, and impossible to ignore."


class TestLookupTables:
    """Every preset must have a prompt fragment."""

    def test_every_style_has_description(self):
        assert set(STYLE_PROMPTS) == set(ThumbnailStyle)
        assert len(STYLE_PROMPTS) == 5

    def test_every_color_scheme_has_description(self):
        assert set(COLOR_SCHEME_PROMPTS) == set(ColorScheme)
        assert len(COLOR_SCHEME_PROMPTS) == 8


class TestBuildPrompt:
    """Tests for build_prompt."""

    @pytest.mark.parametrize("style", list(ThumbnailStyle))
    @pytest.mark.parametrize("aspect_ratio", list(AspectRatio))
    def test_contains_style_and_ends_with_aspect_clause(self, style, aspect_ratio):
        prompt = build_prompt("My Video", style, aspect_ratio)

        assert STYLE_PROMPTS[style] in prompt
        assert prompt.endswith(CLOSING)
        assert f"The thumbnail should be {aspect_ratio.value}," in prompt

    def test_accepts_plain_strings(self):
        prompt = build_prompt("Cooking pasta", "Minimalist", "1:1")

        assert prompt.startswith("Create a minimalist thumbnail")
        assert "for: Cooking pasta." in prompt
        assert "1:1" in prompt

    def test_color_scheme_appended(self):
        prompt = build_prompt("Night drive", ThumbnailStyle.TECH_FUTURISTIC, "16:9", color_scheme="neon")

        assert COLOR_SCHEME_PROMPTS[ColorScheme.NEON] in prompt
        assert "color scheme." in prompt

    def test_no_color_scheme_clause_when_omitted(self):
        prompt = build_prompt("Night drive", ThumbnailStyle.TECH_FUTURISTIC, "16:9")

        for description in COLOR_SCHEME_PROMPTS.values():
            assert description not in prompt
        assert "color scheme." not in prompt

    def test_user_prompt_appended_before_closing_clause(self):
        prompt = build_prompt("Budget travel", "Photorealistic", "9:16", user_prompt="a backpacker at sunrise")

        details_index = prompt.index("Additional details: a backpacker at sunrise.")
        closing_index = prompt.index("The thumbnail should be 9:16")
        assert details_index < closing_index

    def test_user_prompt_kept_verbatim(self):
        """Trailing punctuation written by the user is not stripped."""
        prompt = build_prompt("Cliffhanger", "Illustrated", "16:9", user_prompt="  and then...  ")

        assert "Additional details: and then... " in prompt
        assert "Additional details: and then. " not in prompt

    def test_user_prompt_gets_single_full_stop(self):
        prompt = build_prompt("Cliffhanger", "Illustrated", "16:9", user_prompt="a red door.")

        assert "Additional details: a red door. The thumbnail" in prompt

    def test_blank_user_prompt_ignored(self):
        prompt = build_prompt("Budget travel", "Photorealistic", "9:16", user_prompt="   ")

        assert "Additional details" not in prompt

    def test_clause_order(self):
        prompt = build_prompt(
            "Retro games", "Illustrated", "16:9", color_scheme="pastel", user_prompt="pixel hearts"
        )

        style_index = prompt.index(STYLE_PROMPTS[ThumbnailStyle.ILLUSTRATED])
        color_index = prompt.index(COLOR_SCHEME_PROMPTS[ColorScheme.PASTEL])
        details_index = prompt.index("Additional details")
        assert style_index < color_index < details_index
        assert prompt.endswith(CLOSING)

    def test_deterministic(self):
        args = ("Same title", "Bold & Graphic", "16:9", "sunset", "same details")
        assert build_prompt(*args) == build_prompt(*args)


class TestBuildPromptErrors:
    """Unknown presets are rejected."""

    def test_unknown_style(self):
        with pytest.raises(InvalidStyleError, match="Unknown"):
            build_prompt("Title", "Unknown", "16:9")

    def test_unknown_style_is_validation_error(self):
        with pytest.raises(ValidationError):
            build_prompt("Title", "minimalist", "16:9")

    def test_unknown_color_scheme(self):
        with pytest.raises(InvalidColorSchemeError):
            build_prompt("Title", "Minimalist", "16:9", color_scheme="rainbow")

    def test_unsupported_aspect_ratio(self):
        with pytest.raises(ValidationError, match="aspect ratio"):
            build_prompt("Title", "Minimalist", "4:3")
