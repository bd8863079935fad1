"""
Centralized configuration class
"""
import os
from dataclasses import dataclass
from typing import Optional
from dotenv import load_dotenv

# Load .env file if it exists
load_dotenv()

# Load from environment variables with defaults
API_ENDPOINT = os.getenv('API_ENDPOINT', 'http://localhost:11434/api/generate')
DEFAULT_MODEL = os.getenv('DEFAULT_MODEL', 'mistral-small:24b')
REQUEST_TIMEOUT = int(os.getenv('REQUEST_TIMEOUT', '60'))
OLLAMA_NUM_CTX = int(os.getenv('OLLAMA_NUM_CTX', '4096'))
MAX_TRANSLATION_ATTEMPTS = int(os.getenv('MAX_TRANSLATION_ATTEMPTS', '2'))
RETRY_DELAY_SECONDS = int(os.getenv('RETRY_DELAY_SECONDS', '2'))

# LLM Provider configuration
LLM_PROVIDER = os.getenv('LLM_PROVIDER', 'ollama')  # 'ollama', 'gemini' or 'openai'
GEMINI_API_KEY = os.getenv('GEMINI_API_KEY', '')
GEMINI_MODEL = os.getenv('GEMINI_MODEL', 'gemini-2.0-flash')
OPENAI_API_KEY = os.getenv('OPENAI_API_KEY', '')

# Languages are opaque codes, only passed through to prompts and messages
DEFAULT_SOURCE_LANGUAGE = os.getenv('DEFAULT_SOURCE_LANGUAGE', 'en')
DEFAULT_TARGET_LANGUAGE = os.getenv('DEFAULT_TARGET_LANGUAGE', 'fr')

# Translation mode: 'file', 'replace' or 'insert'
DEFAULT_TRANSLATION_MODE = os.getenv('DEFAULT_TRANSLATION_MODE', 'file')
TRANSLATION_MODES = ('file', 'replace', 'insert')
LINE_RANGE_MODES = ('replace', 'insert')

# Translation tags
TRANSLATE_TAG_IN = "<TRANSLATED>"
TRANSLATE_TAG_OUT = "</TRANSLATED>"
INPUT_TAG_IN = "<TO TRANSLATE>"
INPUT_TAG_OUT = "</TO TRANSLATE>"


class InvalidLineRangeError(ValueError):
    """Raised when a configured line window is missing, non-positive or inverted"""
    pass


def validate_line_range(start_line: Optional[int], end_line: Optional[int]) -> None:
    """
    Validate a 1-based inclusive line window

    Args:
        start_line: First line of the window
        end_line: Last line of the window (inclusive)

    Raises:
        InvalidLineRangeError: If the window cannot be used by a line range mode
    """
    if start_line is None or end_line is None:
        raise InvalidLineRangeError("Both start line and end line are required for line range modes.")
    if start_line < 1 or end_line < 1:
        raise InvalidLineRangeError(f"Line numbers are 1-based, got {start_line}-{end_line}.")
    if start_line > end_line:
        raise InvalidLineRangeError(f"Start line {start_line} is after end line {end_line}.")


@dataclass
class TranslationConfig:
    """Unified configuration for a translation run"""

    # Core settings
    source_language: str = DEFAULT_SOURCE_LANGUAGE
    target_language: str = DEFAULT_TARGET_LANGUAGE
    model: str = DEFAULT_MODEL
    api_endpoint: str = API_ENDPOINT

    # LLM Provider settings
    llm_provider: str = LLM_PROVIDER
    gemini_api_key: str = GEMINI_API_KEY
    openai_api_key: str = OPENAI_API_KEY

    # Translation mode
    mode: str = DEFAULT_TRANSLATION_MODE
    start_line: Optional[int] = None
    end_line: Optional[int] = None
    custom_instructions: str = ""

    # LLM parameters
    timeout: int = REQUEST_TIMEOUT
    max_attempts: int = MAX_TRANSLATION_ATTEMPTS
    retry_delay: int = RETRY_DELAY_SECONDS

    enable_colors: bool = True

    @classmethod
    def from_cli_args(cls, args) -> 'TranslationConfig':
        """Create config from CLI arguments"""
        return cls(
            source_language=args.source_lang,
            target_language=args.target_lang,
            model=args.model,
            api_endpoint=args.api_endpoint,
            llm_provider=getattr(args, 'provider', LLM_PROVIDER),
            gemini_api_key=getattr(args, 'gemini_api_key', GEMINI_API_KEY),
            openai_api_key=getattr(args, 'openai_api_key', OPENAI_API_KEY),
            mode=getattr(args, 'mode', DEFAULT_TRANSLATION_MODE),
            start_line=getattr(args, 'start_line', None),
            end_line=getattr(args, 'end_line', None),
            custom_instructions=getattr(args, 'custom_instructions', ''),
            enable_colors=not getattr(args, 'no_color', False)
        )

    def validate(self) -> None:
        """Reject configurations that no translation mode can run with"""
        if self.mode not in TRANSLATION_MODES:
            raise ValueError(f"Unknown translation mode: {self.mode}. Supported modes: {', '.join(TRANSLATION_MODES)}")
        if self.mode in LINE_RANGE_MODES:
            validate_line_range(self.start_line, self.end_line)

    def create_translation_mode(self):
        """Build the translation mode instance for this run"""
        from doclang.core.translation_modes import create_translation_mode
        return create_translation_mode(self.mode, self.start_line, self.end_line)

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization"""
        return {
            'source_language': self.source_language,
            'target_language': self.target_language,
            'model': self.model,
            'api_endpoint': self.api_endpoint,
            'llm_provider': self.llm_provider,
            'mode': self.mode,
            'start_line': self.start_line,
            'end_line': self.end_line,
            'custom_instructions': self.custom_instructions,
            'timeout': self.timeout,
            'max_attempts': self.max_attempts,
            'retry_delay': self.retry_delay
        }
