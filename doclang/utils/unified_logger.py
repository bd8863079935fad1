"""
Unified logging system for DocLanguageTranslator
Provides consistent console output for every translation mode
"""
import sys
import os
from datetime import datetime
from typing import Optional, Dict, Any, Callable
from enum import Enum


class LogLevel(Enum):
    """Log levels with priority values"""
    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40
    CRITICAL = 50


class LogType(Enum):
    """Types of log messages for special handling"""
    GENERAL = "general"
    LLM_REQUEST = "llm_request"
    LLM_RESPONSE = "llm_response"
    FILE_OPERATION = "file_operation"
    NO_CONTENT = "no_content"
    TRANSLATION_START = "translation_start"
    TRANSLATION_END = "translation_end"
    ERROR_DETAIL = "error_detail"


class Colors:
    """ANSI color codes for terminal output"""
    NO_COLOR = os.environ.get('NO_COLOR') is not None or not sys.stdout.isatty()

    YELLOW = '' if NO_COLOR else '\033[93m'  # LLM requests and warnings
    WHITE = '' if NO_COLOR else '\033[97m'   # Main text
    GRAY = '' if NO_COLOR else '\033[90m'    # Technical details
    ENDC = '' if NO_COLOR else '\033[0m'

    @classmethod
    def disable(cls):
        """Disable all colors"""
        cls.YELLOW = cls.WHITE = cls.GRAY = cls.ENDC = ''


# Orchestrator message keys with a dedicated log type
_KEY_LOG_TYPES = {
    "translation_start": LogType.FILE_OPERATION,
    "translation_complete": LogType.FILE_OPERATION,
    "no_content_error": LogType.NO_CONTENT,
    "file_read_error": LogType.ERROR_DETAIL,
    "file_write_error": LogType.ERROR_DETAIL,
    "translation_error": LogType.ERROR_DETAIL,
}


class UnifiedLogger:
    """
    Unified logger that provides consistent logging for the CLI and tests
    """

    def __init__(self,
                 name: str = "DocLanguageTranslator",
                 console_output: bool = True,
                 enable_colors: bool = True,
                 min_level: LogLevel = LogLevel.INFO,
                 storage_callback: Optional[Callable] = None):
        """
        Initialize the unified logger

        Args:
            name: Logger name/identifier
            console_output: Whether to output to console
            enable_colors: Whether to use colored output
            min_level: Minimum log level to display
            storage_callback: Callback for storing structured log entries
        """
        self.name = name
        self.console_output = console_output
        self.enable_colors = enable_colors
        self.min_level = min_level
        self.storage_callback = storage_callback
        self.start_time = None

        if not enable_colors:
            Colors.disable()

    def _format_timestamp(self) -> str:
        return datetime.now().strftime("%H:%M:%S")

    def _format_console_message(self, level: LogLevel, message: str,
                                log_type: LogType = LogType.GENERAL,
                                data: Optional[Dict[str, Any]] = None) -> str:
        """Format message for console output"""
        if log_type == LogType.LLM_REQUEST:
            return self._format_llm_request(data or {})
        elif log_type == LogType.LLM_RESPONSE:
            return self._format_llm_response(data or {})
        elif log_type == LogType.TRANSLATION_START:
            return self._format_translation_start(data or {})
        elif log_type == LogType.TRANSLATION_END:
            return self._format_translation_end(data or {})
        elif log_type == LogType.ERROR_DETAIL:
            return self._format_error_detail(message, data or {})

        color = Colors.YELLOW if level in (LogLevel.WARNING, LogLevel.ERROR, LogLevel.CRITICAL) else Colors.WHITE
        if level == LogLevel.DEBUG:
            color = Colors.GRAY
        level_str = f"[{level.name}] " if level != LogLevel.INFO else ""
        return f"{color}[{self._format_timestamp()}] {level_str}{message}{Colors.ENDC}"

    def _format_llm_request(self, data: Dict[str, Any]) -> str:
        output = [
            f"{Colors.YELLOW}{'=' * 80}{Colors.ENDC}",
            f"{Colors.YELLOW}[{self._format_timestamp()}] SENDING TO LLM{Colors.ENDC}"
        ]
        if 'model' in data:
            output.append(f"{Colors.GRAY}Model: {data['model']}{Colors.ENDC}")
        output.append(f"\n{Colors.WHITE}RAW PROMPT:{Colors.ENDC}")
        output.append(f"{Colors.WHITE}{data.get('prompt', '')}{Colors.ENDC}")
        return '\n'.join(output)

    def _format_llm_response(self, data: Dict[str, Any]) -> str:
        output = [f"{Colors.WHITE}[{self._format_timestamp()}] LLM RESPONSE{Colors.ENDC}"]
        if 'execution_time' in data:
            output.append(f"{Colors.GRAY}Execution time: {data['execution_time']:.2f} seconds{Colors.ENDC}")
        output.append(f"\n{Colors.WHITE}RAW RESPONSE (including tags):{Colors.ENDC}")
        output.append(f"{Colors.WHITE}{data.get('response', '')}{Colors.ENDC}")
        return '\n'.join(output)

    def _format_translation_start(self, data: Dict[str, Any]) -> str:
        self.start_time = datetime.now()
        output = [f"{Colors.YELLOW}TRANSLATION STARTED{Colors.ENDC}"]
        output.append(f"{Colors.WHITE}Mode: {data.get('mode', 'Unknown')}{Colors.ENDC}")
        if data.get('start_line') is not None:
            output.append(f"{Colors.WHITE}Lines: {data['start_line']}-{data.get('end_line')}{Colors.ENDC}")
        output.append(f"{Colors.WHITE}Languages: {data.get('source_lang', 'Unknown')} → {data.get('target_lang', 'Unknown')}{Colors.ENDC}")
        output.append(f"{Colors.GRAY}Model: {data.get('model', 'Unknown')}{Colors.ENDC}")
        if 'files' in data:
            output.append(f"{Colors.WHITE}Files: {data['files']}{Colors.ENDC}")
        return '\n'.join(output)

    def _format_translation_end(self, data: Dict[str, Any]) -> str:
        output = [f"\n{Colors.WHITE}TRANSLATION COMPLETE{Colors.ENDC}"]
        if self.start_time:
            output.append(f"{Colors.GRAY}Duration: {datetime.now() - self.start_time}{Colors.ENDC}")
        if 'stats' in data:
            stats = data['stats']
            output.append(f"{Colors.WHITE}Completed files: {stats.get('completed', 0)}{Colors.ENDC}")
            if stats.get('skipped', 0) > 0:
                output.append(f"{Colors.YELLOW}Skipped files (no content): {stats['skipped']}{Colors.ENDC}")
            if stats.get('failed', 0) > 0:
                output.append(f"{Colors.YELLOW}Failed files: {stats['failed']}{Colors.ENDC}")
        return '\n'.join(output)

    def _format_error_detail(self, message: str, data: Dict[str, Any]) -> str:
        if message.startswith("ERROR: "):
            message = message[len("ERROR: "):]
        output = [f"{Colors.WHITE}[{self._format_timestamp()}] ERROR: {message}{Colors.ENDC}"]
        if 'details' in data:
            output.append(f"{Colors.GRAY}Details: {data['details']}{Colors.ENDC}")
        if 'input_file' in data:
            output.append(f"{Colors.GRAY}File: {data['input_file']}{Colors.ENDC}")
        return '\n'.join(output)

    def log(self, level: LogLevel, message: str,
            log_type: LogType = LogType.GENERAL,
            data: Optional[Dict[str, Any]] = None):
        """
        Main logging method

        Args:
            level: Log level
            message: Log message
            log_type: Type of log for special formatting
            data: Additional data for the log entry
        """
        if level.value < self.min_level.value:
            return

        if self.console_output:
            console_msg = self._format_console_message(level, message, log_type, data)
            if console_msg:
                print(console_msg)

        if self.storage_callback:
            self.storage_callback({
                'timestamp': datetime.now().isoformat(),
                'level': level.name,
                'type': log_type.value,
                'message': message,
                'data': data or {}
            })

    # Convenience methods
    def debug(self, message: str, log_type: LogType = LogType.GENERAL, data: Optional[Dict[str, Any]] = None):
        self.log(LogLevel.DEBUG, message, log_type, data)

    def info(self, message: str, log_type: LogType = LogType.GENERAL, data: Optional[Dict[str, Any]] = None):
        self.log(LogLevel.INFO, message, log_type, data)

    def warning(self, message: str, log_type: LogType = LogType.GENERAL, data: Optional[Dict[str, Any]] = None):
        self.log(LogLevel.WARNING, message, log_type, data)

    def error(self, message: str, log_type: LogType = LogType.GENERAL, data: Optional[Dict[str, Any]] = None):
        self.log(LogLevel.ERROR, message, log_type, data)

    def create_legacy_callback(self):
        """
        Create a callback matching the (key, message, data) signature used
        by the translation functions
        """
        def legacy_callback(key: str, details: str = "", data: Optional[Dict[str, Any]] = None):
            if data and isinstance(data, dict):
                log_type = data.get('type')
                if log_type == 'llm_request':
                    self.debug("LLM Request", LogType.LLM_REQUEST, data)
                    return
                if log_type == 'llm_response':
                    self.debug("LLM Response", LogType.LLM_RESPONSE, data)
                    return

            log_type = _KEY_LOG_TYPES.get(key, LogType.GENERAL)
            if "error" in key.lower():
                self.error(details or key, log_type)
            elif "warning" in key.lower():
                self.warning(details or key, log_type)
            else:
                self.info(details or key, log_type)

        return legacy_callback


# Global logger instance
_global_logger = None


def get_logger(name: str = "DocLanguageTranslator", **kwargs) -> UnifiedLogger:
    """
    Get or create the global logger instance

    Args:
        name: Logger name
        **kwargs: Additional arguments for UnifiedLogger

    Returns:
        UnifiedLogger instance
    """
    global _global_logger
    if _global_logger is None:
        _global_logger = UnifiedLogger(name, **kwargs)
    return _global_logger


def setup_cli_logger(enable_colors: bool = True, verbose: bool = False) -> UnifiedLogger:
    """Setup logger for CLI usage"""
    return get_logger(
        console_output=True,
        enable_colors=enable_colors,
        min_level=LogLevel.DEBUG if verbose else LogLevel.INFO
    )
