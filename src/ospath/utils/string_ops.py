"""Low-level string helpers shared by the path syntax functions."""

from typing import List, Sequence, TypeVar

T = TypeVar("T", str, list)


class StringOps:
    """Separator-aware string utilities with no knowledge of paths."""

    @staticmethod
    def split_on(text: str, separator: str) -> List[str]:
        """
        Split text on every occurrence of separator.

        Consecutive, leading and trailing separators produce empty strings,
        so nothing is skipped here; callers filter what they don't want.

        Args:
            text: String to split
            separator: Delimiter to split on

        Returns:
            List of tokens, possibly containing empty strings
        """
        return text.split(separator)

    @staticmethod
    def join_with(separator: str, parts: Sequence[str]) -> str:
        """
        Join parts with separator.

        Args:
            separator: Delimiter placed between parts
            parts: Tokens to join

        Returns:
            Joined string, or an empty string when parts is empty
        """
        return separator.join(parts)

    @staticmethod
    def starts_with(haystack: str, needle: str) -> bool:
        """Check whether haystack begins with needle."""
        return haystack.startswith(needle)

    @staticmethod
    def common_prefix(first: T, second: T) -> T:
        """
        Return the longest leading run shared by two sequences.

        Works element-wise, so it compares characters for strings and
        whole components for lists of components.

        Args:
            first: Sequence whose slice is returned
            second: Sequence compared against

        Returns:
            Slice of first up to the first mismatch
        """
        for i, item in enumerate(first):
            if i >= len(second) or item != second[i]:
                return first[:i]
        return first
