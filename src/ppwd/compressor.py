"""
Path compression for shell prompts.

Shortens a directory path to fit a length budget by collapsing every
intermediate segment to its first character, e.g.::

    /home/alice/src/project/docs  ->  ~/s/p/docs

The home directory prefix is replaced by a marker first, and the final
segment is always kept in full.
"""

from typing import Callable

from .config.constants import HOME_MARKER, PATH_SEPARATOR

StepCallback = Callable[[str, str], None]


def _ignore_step(message: str, level: str) -> None:
    pass


class PathCompressor:
    """Compresses directory paths to a target display length."""

    def __init__(
        self, home_marker: str = HOME_MARKER, separator: str = PATH_SEPARATOR
    ):
        """
        Initialize compressor.

        Args:
            home_marker: Text that replaces a matching home directory prefix
            separator: Path segment separator
        """
        self.home_marker = home_marker
        self.separator = separator
        self._on_step: StepCallback = _ignore_step

    def home_prefix_length(
        self, current_directory: str, home_directory: str | None
    ) -> int:
        """
        Return how many leading characters the home marker replaces.

        This is a literal prefix test: "/us" matches "/usr/local" too.
        An absent or empty home directory never matches.

        Returns:
            Length of the matched home prefix, or 0 when there is no match
        """
        if not home_directory:
            return 0
        if not current_directory.startswith(home_directory):
            return 0
        return len(home_directory)

    def compress(
        self,
        current_directory: str,
        home_directory: str | None,
        target_length: int,
    ) -> str:
        """
        Compress a directory path to approach a target length.

        A negative target length means "always compress": its absolute value
        is the target and the fast path is skipped.

        Args:
            current_directory: Absolute path to display
            home_directory: Home directory to replace with the marker, if any
            target_length: Desired maximum length (negative forces compression)

        Returns:
            The (possibly) compressed path
        """
        always_compress = target_length < 0
        if always_compress:
            target_length = -target_length

        # Equal length is not short enough here; the loop guard handles it
        if not always_compress and len(current_directory) < target_length:
            self._on_step(
                f"{current_directory!r} already fits in {target_length}", "info"
            )
            return current_directory

        parts: list[str] = []
        output_length = 0

        cursor = self.home_prefix_length(current_directory, home_directory)
        if cursor:
            parts.append(self.home_marker)
            output_length += len(self.home_marker)
            self._on_step(f"home prefix {home_directory!r} matched", "info")

        last_separator = current_directory.rfind(self.separator)
        end = len(current_directory)

        while output_length + (end - cursor) > target_length:
            if cursor == last_separator:
                self._on_step("reached final segment", "debug")
                break
            if cursor >= end:
                break
            if current_directory[cursor] == self.separator:
                parts.append(self.separator)
                output_length += 1
                cursor += 1
                continue

            next_separator = current_directory.find(self.separator, cursor + 1)
            if next_separator == -1:
                next_separator = end
            self._on_step(
                f"collapsed {current_directory[cursor:next_separator]!r}", "debug"
            )
            parts.append(current_directory[cursor])
            output_length += 1
            cursor = next_separator

        parts.append(current_directory[cursor:])
        return "".join(parts)


def compress(
    current_directory: str, home_directory: str | None, target_length: int
) -> str:
    """Compress a path with the default home marker and separator."""
    return PathCompressor().compress(current_directory, home_directory, target_length)
