"""
Translation modes: which part of a source file is translated and where the
translated text is written in the target file
"""
import os
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from doclang.config import validate_line_range
from .text_processor import split_lines


class TranslationMode(ABC):
    """
    Abstract base class for translation modes

    A mode is an immutable value created once per run. The same instance can
    be used for every file of a batch: its addressing does not depend on the
    file being processed. Line numbers are 1-based and inclusive.

    Errors raised by the file service (missing or unreadable files) are not
    handled here and reach the caller unchanged.
    """

    name = ""

    @abstractmethod
    def read_content(self, file_service, input_file: str) -> Optional[str]:
        """
        Read the part of input_file to translate

        Returns:
            The text to translate, or None when the addressed region holds
            no lines. An empty region is not an error.
        """
        pass

    @abstractmethod
    def write_content(self, file_service, output_file: str, translated_content: str) -> None:
        """Write translated_content into output_file following the mode's placement"""
        pass

    @abstractmethod
    def format_start_message(self, input_file: str, output_file: str,
                             source_lang: str, target_lang: str) -> str:
        pass

    @abstractmethod
    def format_completion_message(self, output_file: str) -> str:
        pass

    @abstractmethod
    def get_no_content_error_message(self) -> str:
        pass


@dataclass(frozen=True)
class FullFileTranslationMode(TranslationMode):
    """Translate a whole file and overwrite the whole target file"""

    name = "file"

    def read_content(self, file_service, input_file: str) -> Optional[str]:
        content = file_service.read_all_text(input_file)
        return content if content else None

    def write_content(self, file_service, output_file: str, translated_content: str) -> None:
        translated_lines = split_lines(translated_content)
        # Always terminate the last line, translations come back stripped
        if translated_lines[-1] != "":
            translated_lines.append("")
        file_service.write_all_text(output_file, os.linesep.join(translated_lines))

    def format_start_message(self, input_file: str, output_file: str,
                             source_lang: str, target_lang: str) -> str:
        return f"Translating {input_file} to {output_file} [{source_lang} to {target_lang}]"

    def format_completion_message(self, output_file: str) -> str:
        return f"Saved translated file {output_file}"

    def get_no_content_error_message(self) -> str:
        return "ERROR: Source file is empty."


@dataclass(frozen=True)
class LineRangeTranslationMode(TranslationMode):
    """
    Translate lines start_line..end_line and replace the same lines in the
    target file
    """

    start_line: int
    end_line: int

    name = "replace"

    def read_content(self, file_service, input_file: str) -> Optional[str]:
        source_lines = file_service.read_lines(input_file, self.start_line, self.end_line)
        return os.linesep.join(source_lines) if source_lines else None

    def write_content(self, file_service, output_file: str, translated_content: str) -> None:
        translated_lines = split_lines(translated_content)
        file_service.replace_lines(output_file, self.start_line, self.end_line, translated_lines)

    def format_start_message(self, input_file: str, output_file: str,
                             source_lang: str, target_lang: str) -> str:
        return (f"Translating lines {self.start_line}-{self.end_line} from {input_file} "
                f"into {output_file} [{source_lang} to {target_lang}]")

    def format_completion_message(self, output_file: str) -> str:
        return f"Replaced lines {self.start_line}-{self.end_line} in {output_file}"

    def get_no_content_error_message(self) -> str:
        return f"ERROR: No lines found in range {self.start_line}-{self.end_line}."


@dataclass(frozen=True)
class LineInsertTranslationMode(TranslationMode):
    """
    Translate lines start_line..end_line and insert them into an existing
    target file before the line at start_line

    Lines already in the target are shifted down, never removed. The number
    of inserted lines follows the translation, not the source window.
    """

    start_line: int
    end_line: int

    name = "insert"

    def read_content(self, file_service, input_file: str) -> Optional[str]:
        source_lines = file_service.read_lines(input_file, self.start_line, self.end_line)
        return os.linesep.join(source_lines) if source_lines else None

    def write_content(self, file_service, output_file: str, translated_content: str) -> None:
        translated_lines = split_lines(translated_content)
        file_service.insert_lines(output_file, self.start_line, translated_lines)

    def format_start_message(self, input_file: str, output_file: str,
                             source_lang: str, target_lang: str) -> str:
        return (f"Translating lines {self.start_line}-{self.end_line} from {input_file} "
                f"and inserting into {output_file} [{source_lang} to {target_lang}]")

    def format_completion_message(self, output_file: str) -> str:
        return f"Inserted translated lines at position {self.start_line} in {output_file}"

    def get_no_content_error_message(self) -> str:
        return f"ERROR: No lines found in range {self.start_line}-{self.end_line}."


_MODES = {
    FullFileTranslationMode.name: FullFileTranslationMode,
    LineRangeTranslationMode.name: LineRangeTranslationMode,
    LineInsertTranslationMode.name: LineInsertTranslationMode,
}


def create_translation_mode(mode_name: str, start_line: Optional[int] = None,
                            end_line: Optional[int] = None) -> TranslationMode:
    """
    Factory function to create translation modes

    Args:
        mode_name: 'file', 'replace' or 'insert'
        start_line: First line of the window (line range modes only)
        end_line: Last line of the window, inclusive (line range modes only)

    Raises:
        ValueError: If the mode is unknown
        InvalidLineRangeError: If a line range mode gets an unusable window
    """
    mode_class = _MODES.get((mode_name or "").lower())
    if mode_class is None:
        raise ValueError(f"Unknown translation mode: {mode_name}. Supported modes: {', '.join(_MODES)}")
    if mode_class is FullFileTranslationMode:
        return mode_class()
    validate_line_range(start_line, end_line)
    return mode_class(start_line, end_line)
