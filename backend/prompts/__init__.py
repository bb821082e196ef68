"""
Prompt construction for caption generation.

- PromptBuilder: Builds the per-language caption instruction
"""

from backend.prompts.prompt_builder import CAPTION_TEMPLATE, PromptBuilder

__all__ = ['PromptBuilder', 'CAPTION_TEMPLATE']
