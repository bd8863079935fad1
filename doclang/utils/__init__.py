"""
Utility modules
"""
from .file_service import FileService
from .file_utils import translate_file, translate_files, FileResult

__all__ = [
    'FileService',
    'translate_file',
    'translate_files',
    'FileResult'
]
