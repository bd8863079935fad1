"""
Core translation modules
"""
from .text_processor import split_lines
from .translation_modes import (
    TranslationMode,
    FullFileTranslationMode,
    LineRangeTranslationMode,
    LineInsertTranslationMode,
    create_translation_mode
)
from .translator import translate_content

__all__ = [
    'split_lines',
    'TranslationMode',
    'FullFileTranslationMode',
    'LineRangeTranslationMode',
    'LineInsertTranslationMode',
    'create_translation_mode',
    'translate_content'
]
