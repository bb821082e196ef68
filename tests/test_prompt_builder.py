import pytest

from backend.prompts import CAPTION_TEMPLATE, PromptBuilder
from config.constants import DEFAULT_TONE, NO_NOTES_PLACEHOLDER


def test_prompt_names_language_count_and_json_shape():
    prompt = PromptBuilder.build_caption_prompt(language="Japanese")

    assert "Generate exactly 3 engaging social media captions in Japanese" in prompt
    assert "Write ONLY in Japanese language" in prompt
    assert "Keep each caption under 280 characters" in prompt
    assert "JSON array of objects with 'caption' and 'hashtags' fields" in prompt


def test_defaults_for_missing_notes_and_tone():
    prompt = PromptBuilder.build_caption_prompt(
        language="English", image_notes="  ", tone=None
    )
    assert NO_NOTES_PLACEHOLDER in prompt
    assert DEFAULT_TONE in prompt


def test_notes_tone_and_image_count_are_included():
    prompt = PromptBuilder.build_caption_prompt(
        language="Spanish",
        image_count=2,
        image_notes="Image 1: beach",
        tone="playful",
    )
    assert "Total images in post: 2" in prompt
    assert "Image descriptions: Image 1: beach" in prompt
    assert "Overall tone: playful" in prompt


def test_traditional_chinese_forbids_simplified_script():
    prompt = PromptBuilder.build_caption_prompt(language="Traditional Chinese")
    assert "繁體中文" in prompt
    assert "NOT Simplified Chinese" in prompt
    assert "hashtags must also use Traditional Chinese characters" in prompt


def test_other_languages_carry_no_script_note():
    prompt = PromptBuilder.build_caption_prompt(language="French")
    assert "Simplified" not in prompt
    assert "Write ONLY in French language\n" in prompt


def test_combine_image_notes_keeps_positions_and_skips_blanks():
    combined = PromptBuilder.combine_image_notes(["beach", None, "  ", "sunset "])
    assert combined == "Image 1: beach. Image 4: sunset"


def test_combine_image_notes_empty():
    assert PromptBuilder.combine_image_notes([None, ""]) == ""


def test_custom_template_override():
    prompt = PromptBuilder.build_caption_prompt(
        language="Korean", template="Caption in {language}."
    )
    assert prompt == "Caption in Korean."


def test_template_with_unknown_field_raises():
    with pytest.raises(KeyError):
        PromptBuilder.build_caption_prompt(
            language="English", template="{language} {mood}"
        )


def test_default_template_is_used():
    prompt = PromptBuilder.build_caption_prompt(language="English")
    assert prompt.startswith(CAPTION_TEMPLATE.split("{")[0])
