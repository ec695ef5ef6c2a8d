"""
Logging wrapper for the path compressor.

Reports every compression step through a callback for debugging.
"""

from typing import Callable

from ..compressor import PathCompressor


class LoggingPathCompressor:
    """Wrapper that intercepts compressor steps to log them."""

    def __init__(
        self, compressor: PathCompressor, log_callback: Callable[[str, str], None]
    ):
        """
        Initialize logging wrapper.

        Args:
            compressor: Compressor instance to wrap
            log_callback: Callback function(message, level) for logging
        """
        self._compressor = compressor
        self._log = log_callback

        self._wrap_step_hook()

    def _wrap_step_hook(self):
        """Route the compressor's step notifications to the log callback."""
        original_on_step = self._compressor._on_step

        def logged_on_step(message: str, level: str):
            self._log(message, level)
            return original_on_step(message, level)

        self._compressor._on_step = logged_on_step

    def compress(
        self, current_directory: str, home_directory: str | None, target_length: int
    ) -> str:
        """Compress a path, logging the request and the result."""
        self._log(
            f"compress {current_directory!r} home={home_directory!r} "
            f"target={target_length}",
            "debug",
        )
        result = self._compressor.compress(
            current_directory, home_directory, target_length
        )
        self._log(f"result {result!r} ({len(result)} chars)", "debug")
        return result

    def __getattr__(self, name):
        """Pass through all other attributes to wrapped compressor."""
        return getattr(self._compressor, name)
