"""
Text processing module for line splitting and newline handling
"""
import re

# Order matters: \r\n must win over a lone \r
LINE_SEPARATOR_PATTERN = re.compile(r'\r\n|\r|\n')


def split_lines(text):
    """
    Split text into lines on any of the \\r\\n, \\r or \\n conventions

    Empty elements are kept, so a trailing separator yields a trailing
    empty line and the line count always equals separators + 1.

    Args:
        text (str): Text to split, conventions may be mixed

    Returns:
        list: Lines without their separators
    """
    return LINE_SEPARATOR_PATTERN.split(text)


def split_file_lines(text):
    """
    Split file content into lines

    Unlike split_lines, a single terminator at the end of the content
    closes the last line instead of opening an empty one.
    """
    if not text:
        return []
    lines = split_lines(text)
    if lines[-1] == "":
        lines.pop()
    return lines


def detect_newline(text, default="\n"):
    """Return the first line separator used in text, or default if there is none"""
    match = LINE_SEPARATOR_PATTERN.search(text or "")
    if match:
        return match.group(0)
    return default


def split_lines_with_endings(text):
    """
    Split file content into (line, terminator) pairs

    The terminator is '' only for a last line without one; empty text gives [].
    """
    entries = []
    position = 0
    for match in LINE_SEPARATOR_PATTERN.finditer(text or ""):
        entries.append((text[position:match.start()], match.group(0)))
        position = match.end()
    if text and position < len(text):
        entries.append((text[position:], ""))
    return entries
