"""
Output path helpers
"""
import os


def generate_output_filename(input_path: str, target_language: str) -> str:
    """
    Generate output filename based on input and target language

    Args:
        input_path: Input file path
        target_language: Target language code

    Returns:
        Generated output filename, e.g. docs/index_fr.md
    """
    base, ext = os.path.splitext(input_path)
    lang_suffix = target_language.lower().replace(' ', '_')
    return f"{base}_{lang_suffix}{ext}"
