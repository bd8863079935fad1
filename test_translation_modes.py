#!/usr/bin/env python3
"""
Test script for translation modes: read windows, insertion, replacement and messages
"""

import dataclasses
import os
import sys
import tempfile
from pathlib import Path

# Add the project root to the Python path
sys.path.insert(0, str(Path(__file__).parent))

from doclang.config import InvalidLineRangeError
from doclang.core.translation_modes import (
    FullFileTranslationMode,
    LineRangeTranslationMode,
    LineInsertTranslationMode,
    create_translation_mode
)
from doclang.utils.file_service import FileService


def _write(directory, name, lines):
    path = os.path.join(directory, name)
    with open(path, 'w', encoding='utf-8', newline='') as f:
        f.write("".join(f"{line}\n" for line in lines))
    return path


def _read(path):
    return FileService().read_all_lines(path)


def test_read_window():
    """Test that the read window returns the exact lines, in order"""
    print("=== Test 1: Read window ===")

    with tempfile.TemporaryDirectory() as tmp:
        source_lines = [f"source {i}" for i in range(1, 11)]
        source = _write(tmp, "source.md", source_lines)
        mode = LineInsertTranslationMode(3, 5)

        content = mode.read_content(FileService(), source)
        print(f"Read: {content!r}")

        assert content == os.linesep.join(["source 3", "source 4", "source 5"])
        for start, end in [(1, 1), (1, 10), (4, 9), (10, 10)]:
            window = LineInsertTranslationMode(start, end).read_content(FileService(), source)
            assert window.split(os.linesep) == source_lines[start - 1:end]
    print("✓ Read window returns end - start + 1 verbatim lines\n")


def test_read_nothing():
    """Test the no-content sentinel"""
    print("=== Test 2: No content ===")

    with tempfile.TemporaryDirectory() as tmp:
        source = _write(tmp, "source.md", ["one", "two"])
        empty = _write(tmp, "empty.md", [])

        assert LineInsertTranslationMode(3, 5).read_content(FileService(), source) is None
        assert LineRangeTranslationMode(3, 5).read_content(FileService(), source) is None
        for start in (1, 2, 50):
            assert LineInsertTranslationMode(start, start + 3).read_content(FileService(), empty) is None
        assert FullFileTranslationMode().read_content(FileService(), empty) is None
    print("✓ Empty regions return None instead of raising\n")


def test_window_partially_past_end():
    """Test a window that starts inside the file and ends after it"""
    with tempfile.TemporaryDirectory() as tmp:
        source = _write(tmp, "source.md", ["one", "two", "three"])
        content = LineInsertTranslationMode(2, 8).read_content(FileService(), source)
        assert content == os.linesep.join(["two", "three"])


def test_insert_scenario():
    """Test inserting a 2-line translation into an 8-line target at line 3"""
    print("=== Test 3: Insert scenario ===")

    with tempfile.TemporaryDirectory() as tmp:
        target_lines = [f"target {i}" for i in range(1, 9)]
        target = _write(tmp, "target.md", target_lines)
        mode = LineInsertTranslationMode(3, 5)

        mode.write_content(FileService(), target, "A\nB")
        result = _read(target)
        print(f"Result: {result}")

        assert len(result) == 10
        assert result[0:2] == ["target 1", "target 2"]
        assert result[2:4] == ["A", "B"]
        assert result[4:10] == target_lines[2:8]
    print("✓ Original lines 3-8 moved to positions 5-10\n")


def test_insert_line_count_delta():
    """Test that insertion only adds the translated lines"""
    with tempfile.TemporaryDirectory() as tmp:
        for start_line, translated in [(1, "X"), (4, "X\nY\nZ"), (6, "X\n\nY"), (7, "X")]:
            target_lines = [f"line {i}" for i in range(1, 7)]
            target = _write(tmp, "target.md", target_lines)
            translated_count = len(translated.split("\n"))

            LineInsertTranslationMode(start_line, start_line + 1).write_content(FileService(), target, translated)
            result = _read(target)

            assert len(result) == len(target_lines) + translated_count
            assert result[:start_line - 1] == target_lines[:start_line - 1]
            assert result[start_line - 1 + translated_count:] == target_lines[start_line - 1:]


def test_newline_conventions():
    """Test that translated text is split on \\r\\n, \\r and \\n, mixed or not"""
    print("=== Test 4: Newline conventions ===")

    with tempfile.TemporaryDirectory() as tmp:
        for translated in ["A\r\nB\r\nC", "A\rB\rC", "A\nB\nC", "A\r\nB\rC", "A\nB\r\nC"]:
            target = _write(tmp, "target.md", ["first", "last"])
            LineInsertTranslationMode(2, 2).write_content(FileService(), target, translated)
            result = _read(target)
            print(f"{translated!r} -> {result}")
            assert result == ["first", "A", "B", "C", "last"]
    print("✓ All newline conventions give the same lines\n")


def test_insert_missing_target():
    """Test that a missing target file reaches the caller unchanged"""
    with tempfile.TemporaryDirectory() as tmp:
        missing = os.path.join(tmp, "missing.md")
        try:
            LineInsertTranslationMode(1, 2).write_content(FileService(), missing, "A")
        except FileNotFoundError:
            pass
        else:
            raise AssertionError("Writing into a missing target should raise FileNotFoundError")

        try:
            LineInsertTranslationMode(1, 2).read_content(FileService(), missing)
        except FileNotFoundError:
            pass
        else:
            raise AssertionError("Reading a missing source should raise FileNotFoundError")


def test_replace_mode():
    """Test replacing the same window in the target"""
    print("=== Test 5: Replace mode ===")

    with tempfile.TemporaryDirectory() as tmp:
        target_lines = [f"target {i}" for i in range(1, 9)]
        target = _write(tmp, "target.md", target_lines)

        LineRangeTranslationMode(3, 5).write_content(FileService(), target, "A\nB")
        result = _read(target)
        print(f"Result: {result}")

        assert result == ["target 1", "target 2", "A", "B", "target 6", "target 7", "target 8"]
    print("✓ Lines 3-5 replaced by the translation\n")


def test_full_file_mode():
    """Test whole file read and overwrite"""
    print("=== Test 6: Full file mode ===")

    with tempfile.TemporaryDirectory() as tmp:
        source = _write(tmp, "source.md", ["# Title", "", "Body"])
        target = os.path.join(tmp, "fr", "nested", "target.md")
        mode = FullFileTranslationMode()

        content = mode.read_content(FileService(), source)
        assert content == "# Title\n\nBody\n"

        mode.write_content(FileService(), target, "# Titre\r\n\r\nCorps")
        assert _read(target) == ["# Titre", "", "Corps"]

        mode.write_content(FileService(), target, "Remplacé")
        assert _read(target) == ["Remplacé"]
    print("✓ Whole target overwritten, parent folders created\n")


def test_full_file_write_ends_with_newline():
    """Test that whole-file output always ends with a line terminator"""
    with tempfile.TemporaryDirectory() as tmp:
        target = os.path.join(tmp, "target.md")
        for translated in ("Bonjour\nMonde", "Bonjour\nMonde\n", "Bonjour\r\nMonde\r\n"):
            FullFileTranslationMode().write_content(FileService(), target, translated)
            with open(target, "r", encoding="utf-8", newline="") as f:
                assert f.read() == os.linesep.join(["Bonjour", "Monde", ""])


def test_messages():
    """Test that messages embed the concrete parameters"""
    print("=== Test 7: Messages ===")

    insert = LineInsertTranslationMode(3, 5)
    start = insert.format_start_message("docs/en/a.md", "docs/fr/a.md", "en", "fr")
    print(start)
    assert "3-5" in start and "docs/en/a.md" in start and "docs/fr/a.md" in start
    assert "en" in start and "fr" in start
    assert insert.format_completion_message("docs/fr/a.md") == "Inserted translated lines at position 3 in docs/fr/a.md"
    assert insert.get_no_content_error_message() == "ERROR: No lines found in range 3-5."

    replace = LineRangeTranslationMode(7, 12)
    assert "7-12" in replace.format_start_message("a.md", "b.md", "en", "de")
    assert "7-12" in replace.format_completion_message("b.md")
    assert "7-12" in replace.get_no_content_error_message()

    full = FullFileTranslationMode()
    assert "a.md" in full.format_start_message("a.md", "b.md", "en", "de")
    assert "b.md" in full.format_completion_message("b.md")
    assert full.get_no_content_error_message().startswith("ERROR")
    print("✓ Messages reference lines, paths and languages\n")


def test_modes_are_immutable():
    """Test that a mode cannot be changed once created"""
    mode = LineInsertTranslationMode(3, 5)
    try:
        mode.start_line = 4
    except dataclasses.FrozenInstanceError:
        pass
    else:
        raise AssertionError("Modes should be immutable")
    assert mode == LineInsertTranslationMode(3, 5)


def test_create_translation_mode():
    """Test the mode factory and its range validation"""
    assert isinstance(create_translation_mode("file"), FullFileTranslationMode)
    assert create_translation_mode("replace", 2, 4) == LineRangeTranslationMode(2, 4)
    assert create_translation_mode("INSERT", 1, 1) == LineInsertTranslationMode(1, 1)

    for start_line, end_line in [(5, 3), (0, 2), (-1, 4), (None, 3), (2, None)]:
        try:
            create_translation_mode("insert", start_line, end_line)
        except InvalidLineRangeError:
            pass
        else:
            raise AssertionError(f"Range {start_line}-{end_line} should be rejected")

    try:
        create_translation_mode("append", 1, 2)
    except ValueError:
        pass
    else:
        raise AssertionError("Unknown modes should be rejected")


def run_all_tests():
    """Run all test functions"""
    print("Running translation mode tests...\n")

    try:
        test_read_window()
        test_read_nothing()
        test_window_partially_past_end()
        test_insert_scenario()
        test_insert_line_count_delta()
        test_newline_conventions()
        test_insert_missing_target()
        test_replace_mode()
        test_full_file_mode()
        test_full_file_write_ends_with_newline()
        test_messages()
        test_modes_are_immutable()
        test_create_translation_mode()

        print("\n" + "="*50)
        print("✓ ALL TESTS PASSED!")
        print("="*50)

    except AssertionError as e:
        print(f"\n✗ TEST FAILED: {e}")
        sys.exit(1)


if __name__ == "__main__":
    run_all_tests()
