"""
Command-line interface for documentation translation
"""
import argparse
import asyncio
import sys

from doclang.config import (
    DEFAULT_MODEL, API_ENDPOINT, LLM_PROVIDER, GEMINI_API_KEY, OPENAI_API_KEY,
    DEFAULT_SOURCE_LANGUAGE, DEFAULT_TARGET_LANGUAGE, DEFAULT_TRANSLATION_MODE,
    TRANSLATION_MODES, TranslationConfig
)
from doclang.core.llm_client import create_llm_client
from doclang.utils.file_detector import generate_output_filename
from doclang.utils.file_utils import translate_files
from doclang.utils.unified_logger import setup_cli_logger, LogType


def build_parser():
    parser = argparse.ArgumentParser(description="Translate documentation files, or a range of lines in them, using an LLM.")
    parser.add_argument("-i", "--input", required=True, nargs="+", help="Path(s) to the source file(s).")
    parser.add_argument("-o", "--output", default=None, help="Path to the target file (single input only). If not specified, uses input filename with a language suffix.")
    parser.add_argument("-sl", "--source_lang", default=DEFAULT_SOURCE_LANGUAGE, help=f"Source language (default: {DEFAULT_SOURCE_LANGUAGE}).")
    parser.add_argument("-tl", "--target_lang", default=DEFAULT_TARGET_LANGUAGE, help=f"Target language (default: {DEFAULT_TARGET_LANGUAGE}).")
    parser.add_argument("-m", "--model", default=DEFAULT_MODEL, help=f"LLM model (default: {DEFAULT_MODEL}).")
    parser.add_argument("--mode", default=DEFAULT_TRANSLATION_MODE, choices=TRANSLATION_MODES,
                        help="file: translate the whole file, replace: replace a line range in the target, "
                             f"insert: insert a translated line range into the target (default: {DEFAULT_TRANSLATION_MODE}).")
    parser.add_argument("--start-line", dest="start_line", type=int, default=None, help="First line to translate (1-based, replace/insert modes).")
    parser.add_argument("--end-line", dest="end_line", type=int, default=None, help="Last line to translate, inclusive (replace/insert modes).")
    parser.add_argument("--api_endpoint", default=API_ENDPOINT, help=f"API endpoint for Ollama or OpenAI compatible provider (default: {API_ENDPOINT}).")
    parser.add_argument("--provider", default=LLM_PROVIDER, choices=["ollama", "gemini", "openai"], help=f"LLM provider to use (default: {LLM_PROVIDER}).")
    parser.add_argument("--gemini_api_key", default=GEMINI_API_KEY, help="Google Gemini API key (required if using gemini provider).")
    parser.add_argument("--openai_api_key", default=OPENAI_API_KEY, help="OpenAI API key.")
    parser.add_argument("--custom_instructions", default="", help="Additional custom instructions for translation.")
    parser.add_argument("--verbose", action="store_true", help="Show raw LLM prompts and responses.")
    parser.add_argument("--no-color", action="store_true", help="Disable colored output.")
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.output and len(args.input) > 1:
        parser.error("--output can only be used with a single input file")

    if args.provider == "gemini" and not args.gemini_api_key:
        parser.error("--gemini_api_key is required when using gemini provider")

    config = TranslationConfig.from_cli_args(args)
    try:
        config.validate()
    except ValueError as e:
        parser.error(str(e))
    translation_mode = config.create_translation_mode()

    file_pairs = [(path, args.output or generate_output_filename(path, args.target_lang)) for path in args.input]

    logger = setup_cli_logger(enable_colors=config.enable_colors, verbose=args.verbose)
    logger.info("Translation Started", LogType.TRANSLATION_START, {
        'source_lang': config.source_language,
        'target_lang': config.target_language,
        'mode': config.mode,
        'start_line': config.start_line,
        'end_line': config.end_line,
        'model': config.model,
        'files': len(file_pairs),
        'llm_provider': config.llm_provider
    })

    llm_client = create_llm_client(config.llm_provider, config.api_endpoint, config.model,
                                   gemini_api_key=config.gemini_api_key,
                                   openai_api_key=config.openai_api_key)

    stats = asyncio.run(translate_files(
        file_pairs,
        translation_mode,
        config.source_language,
        config.target_language,
        config.model,
        llm_client=llm_client,
        log_callback=logger.create_legacy_callback(),
        custom_instructions=config.custom_instructions
    ))

    logger.info("Translation Completed", LogType.TRANSLATION_END, {'stats': stats})
    return 0 if stats['completed'] == stats['total'] else 1


if __name__ == "__main__":
    sys.exit(main())
