"""
File utilities for translation operations
"""
from enum import Enum

from tqdm.auto import tqdm

from doclang.config import DEFAULT_MODEL, DEFAULT_SOURCE_LANGUAGE, DEFAULT_TARGET_LANGUAGE
from doclang.core.translator import translate_content
from doclang.utils.file_service import FileService


class FileResult(Enum):
    """Outcome of translating one file"""
    COMPLETED = "completed"
    SKIPPED = "skipped"  # addressed region held no lines
    FAILED = "failed"


def _emit(log_callback, key, message):
    if log_callback:
        log_callback(key, message)
    else:
        tqdm.write(message)


async def translate_file(input_filepath, output_filepath, translation_mode,
                         source_language=DEFAULT_SOURCE_LANGUAGE, target_language=DEFAULT_TARGET_LANGUAGE,
                         model_name=DEFAULT_MODEL, llm_client=None, file_service=None,
                         log_callback=None, custom_instructions=""):
    """
    Translate one file with the given translation mode

    Reads the region addressed by the mode, translates it, then writes the
    result into the output file. Nothing is translated or written when the
    region is empty.

    Args:
        input_filepath (str): Path to source file
        output_filepath (str): Path to target file
        translation_mode (TranslationMode): Read/write placement policy
        source_language (str): Source language code
        target_language (str): Target language code
        model_name (str): LLM model name
        llm_client (LLMClient): Client used for the translation call
        file_service (FileService): Line-addressable file access
        log_callback (callable): Logging callback
        custom_instructions (str): Additional translation instructions

    Returns:
        FileResult: COMPLETED if the target file was written, SKIPPED if
        there was nothing to translate, FAILED otherwise
    """
    file_service = file_service or FileService()

    _emit(log_callback, "translation_start",
          translation_mode.format_start_message(input_filepath, output_filepath, source_language, target_language))

    try:
        content = translation_mode.read_content(file_service, input_filepath)
    except (OSError, UnicodeError) as e:
        _emit(log_callback, "file_read_error", f"ERROR: Reading input file '{input_filepath}': {e}")
        return FileResult.FAILED

    if content is None:
        _emit(log_callback, "no_content_error", translation_mode.get_no_content_error_message())
        return FileResult.SKIPPED

    translated_content = await translate_content(
        content,
        source_language,
        target_language,
        model_name,
        llm_client=llm_client,
        log_callback=log_callback,
        custom_instructions=custom_instructions
    )

    if not translated_content:
        _emit(log_callback, "translation_error", f"ERROR: Translation of '{input_filepath}' failed, '{output_filepath}' left unchanged.")
        return FileResult.FAILED

    try:
        translation_mode.write_content(file_service, output_filepath, translated_content)
    except (OSError, UnicodeError) as e:
        _emit(log_callback, "file_write_error", f"ERROR: Saving output file '{output_filepath}': {e}")
        return FileResult.FAILED

    _emit(log_callback, "translation_complete", translation_mode.format_completion_message(output_filepath))
    return FileResult.COMPLETED


async def translate_files(file_pairs, translation_mode,
                          source_language=DEFAULT_SOURCE_LANGUAGE, target_language=DEFAULT_TARGET_LANGUAGE,
                          model_name=DEFAULT_MODEL, llm_client=None, file_service=None,
                          log_callback=None, custom_instructions=""):
    """
    Translate a batch of (input, output) file pairs with one translation mode

    Files are processed one after the other so two writes never target the
    same file at once. A file that fails does not stop the batch.

    Returns:
        dict: total, completed, skipped (no content) and failed counts
    """
    file_service = file_service or FileService()
    file_pairs = list(file_pairs)
    stats = {'total': len(file_pairs), 'completed': 0, 'skipped': 0, 'failed': 0}

    iterator = tqdm(file_pairs, desc=f"Translating {source_language} to {target_language}", unit="file") if not log_callback else file_pairs

    for input_filepath, output_filepath in iterator:
        result = await translate_file(
            input_filepath, output_filepath, translation_mode,
            source_language, target_language, model_name,
            llm_client=llm_client,
            file_service=file_service,
            log_callback=log_callback,
            custom_instructions=custom_instructions
        )

        stats[result.value] += 1

    return stats
