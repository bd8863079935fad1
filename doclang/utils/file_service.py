"""
Line-addressable file access used by translation modes
"""
import os
from pathlib import Path
from typing import List, Sequence

from doclang.core.text_processor import split_file_lines, split_lines_with_endings, detect_newline


class FileService:
    """
    Read and mutate text files by 1-based, inclusive line numbers

    Line endings are normalized on read. Mutations leave the terminator of
    every untouched line as it was, give new lines the first terminator found
    in the file and keep whether the file ends with a newline. Missing or
    unreadable files raise the usual OSError and UnicodeError subclasses.
    """

    def __init__(self, encoding: str = "utf-8"):
        self.encoding = encoding

    def exists(self, path) -> bool:
        return os.path.isfile(path)

    def read_all_text(self, path) -> str:
        # newline='' keeps \r\n and \r intact so the convention can be detected
        with open(path, 'r', encoding=self.encoding, newline='') as f:
            return f.read()

    def write_all_text(self, path, content: str) -> None:
        parent = Path(path).parent
        parent.mkdir(parents=True, exist_ok=True)
        with open(path, 'w', encoding=self.encoding, newline='') as f:
            f.write(content)

    def read_all_lines(self, path) -> List[str]:
        return split_file_lines(self.read_all_text(path))

    def read_lines(self, path, start_line: int, end_line: int) -> List[str]:
        """
        Read lines start_line..end_line (1-based, inclusive)

        Args:
            path: File to read
            start_line: First line to return
            end_line: Last line to return

        Returns:
            list: The lines inside the window, empty when the window lies
            outside the file or is inverted
        """
        lines = self.read_all_lines(path)
        if start_line > end_line or start_line > len(lines):
            return []
        return lines[max(start_line, 1) - 1:end_line]

    def insert_lines(self, path, at_line: int, lines_to_insert: Sequence[str]) -> None:
        """
        Insert lines before the line currently at position at_line

        Existing lines from at_line on are shifted down, never overwritten.
        When at_line is past the last line the new lines are appended at the
        end of the file, without padding.

        Raises:
            ValueError: If at_line is lower than 1
            FileNotFoundError: If the target file does not exist
        """
        if at_line < 1:
            raise ValueError(f"Line numbers are 1-based, got {at_line}.")
        entries, newline = self._load(path)
        index = min(at_line - 1, len(entries))
        final_ending = entries[-1][1] if entries else ""
        entries[index:index] = [(line, newline) for line in lines_to_insert]
        self._save(path, entries, newline, final_ending)

    def replace_lines(self, path, start_line: int, end_line: int, new_lines: Sequence[str]) -> None:
        """
        Replace lines start_line..end_line (1-based, inclusive) with new_lines

        Only the part of the window that exists in the file is removed; the
        new lines are placed at start_line, or appended when start_line lies
        past the last line.
        """
        if start_line < 1:
            raise ValueError(f"Line numbers are 1-based, got {start_line}.")
        entries, newline = self._load(path)
        start_index = min(start_line - 1, len(entries))
        end_index = max(start_index, min(end_line, len(entries)))
        final_ending = entries[-1][1] if entries else ""
        entries[start_index:end_index] = [(line, newline) for line in new_lines]
        self._save(path, entries, newline, final_ending)

    def _load(self, path):
        content = self.read_all_text(path)
        return split_lines_with_endings(content), detect_newline(content, os.linesep)

    def _save(self, path, entries, newline, final_ending):
        # Untouched lines keep their own terminator, new ones use the first one
        # found in the file. Only the last line follows the original final newline.
        parts = [line + (ending or newline) for line, ending in entries[:-1]]
        if entries:
            parts.append(entries[-1][0] + final_ending)
        with open(path, 'w', encoding=self.encoding, newline='') as f:
            f.write("".join(parts))
