"""Base logging functionality for algorithm tracing and debugging."""

import logging
from typing import Any, cast, Callable, List, TypeVar
from functools import wraps

F = TypeVar("F", bound=Callable[..., Any])


class AlgorithmLogger:
    """Base logger class for algorithm tracing and debugging.

    Messages go to a stdlib ``logging.Logger`` and are also kept in an
    in-memory record so a caller can dump the trace of a single run.
    """

    def __init__(self, name: str):
        self.name = name
        self.disabled = False
        self._records: List[str] = []
        self._section_open = False

        self.logger = logging.getLogger(name)

        # Only add a default StreamHandler if no handlers exist, so two
        # AlgorithmLogger instances sharing a name do not duplicate output.
        if not self.logger.handlers:
            handler = logging.StreamHandler()
            formatter = logging.Formatter("%(message)s")
            handler.setFormatter(formatter)
            self.logger.addHandler(handler)
            self.logger.setLevel(logging.INFO)
            self.logger.propagate = False
        else:
            if self.logger.level == logging.NOTSET:
                self.logger.setLevel(logging.INFO)
            self.logger.propagate = False

    def section(self, title: str):
        """Open a new section in the log."""
        if self.disabled:
            return
        self._section_open = True
        line = f"{'=' * 20} {title} {'=' * 20}"
        self.logger.info(f"\n{line}\n")
        self._records.append(line)

    def info(self, message: str):
        """Log info message."""
        if self.disabled:
            return
        self.logger.info(message)
        self._records.append(message)

    def error(self, message: str):
        """Log an error message."""
        if self.disabled:
            return
        self.logger.error(message)
        self._records.append(f"ERROR: {message}")

    def debug(self, message: str):
        """Log debug message."""
        if self.disabled:
            return
        self.logger.debug(message)
        if self.logger.isEnabledFor(logging.DEBUG):
            self._records.append(message)

    def result(self, label: str, value: Any):
        """Log a result with a label."""
        if self.disabled:
            return
        line = f"{label}: {value}"
        self.logger.info(line)
        self._records.append(line)

    def end_section(self):
        """End the current section."""
        if self.disabled:
            return
        self._section_open = False

    def clear(self):
        """Clear all accumulated records."""
        self._records = []
        self._section_open = False

    def get_text_content(self) -> str:
        """Return the accumulated records as one newline-joined string."""
        return "\n".join(self._records)

    def log_execution(self, func: F) -> F:
        """Decorator for logging function execution with type safety."""

        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            self.section(f"Executing {func.__name__}")
            try:
                result = func(*args, **kwargs)
                self.info(f"{func.__name__} completed successfully")
                return result
            except Exception as e:
                self.error(f"Error in {func.__name__}: {str(e)}")
                raise
            finally:
                self.end_section()

        return cast(F, wrapper)
