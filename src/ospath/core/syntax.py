"""
Lexical path operations.

Everything in this module works on strings alone. No function here touches
the filesystem, so results may differ from what the kernel would resolve
when symbolic links are involved.
"""

from typing import Iterable, List, Tuple

from ..utils.string_ops import StringOps

SEP = '/'
CURDIR = '.'
PARDIR = '..'


class PathSyntax:
    """Pure string manipulation of POSIX paths."""

    @staticmethod
    def is_absolute(path: str) -> bool:
        """Return whether a path is absolute."""
        return StringOps.starts_with(path, SEP)

    @staticmethod
    def components(path: str) -> List[str]:
        """Split a path into its non-empty, non-'.' components."""
        return [comp for comp in StringOps.split_on(path, SEP)
                if comp and comp != CURDIR]

    @staticmethod
    def normalize(path: str) -> str:
        """
        Normalize a pathname by collapsing redundant separators and up-level
        references so that A//B, A/B/, A/./B and A/foo/../B all become A/B.

        Exactly two leading slashes are kept as-is since POSIX leaves their
        meaning to the implementation; three or more collapse to one.

        Args:
            path: Path to normalize

        Returns:
            Normalized path, "." when nothing is left
        """
        if not path:
            return CURDIR

        initial_slashes = 0
        if StringOps.starts_with(path, SEP):
            initial_slashes = 1
            if StringOps.starts_with(path, SEP * 2) and not StringOps.starts_with(path, SEP * 3):
                initial_slashes = 2

        new_comps: List[str] = []
        for comp in PathSyntax.components(path):
            if comp != PARDIR:
                new_comps.append(comp)
            elif new_comps and new_comps[-1] != PARDIR:
                new_comps.pop()
            elif not initial_slashes:
                # Can't climb above an unknown relative root
                new_comps.append(comp)
            # '..' at the root of an absolute path stays at the root

        result = SEP * initial_slashes + StringOps.join_with(SEP, new_comps)
        return result or CURDIR

    @staticmethod
    def split(path: str) -> Tuple[str, str]:
        """
        Split the pathname into a pair (head, tail) where tail is the last
        pathname component and head is everything leading up to that.

        Trailing slashes are stripped from head unless it is made of
        slashes only, so "/" and "////foo" keep their root.
        """
        index = path.rfind(SEP) + 1
        head, tail = path[:index], path[index:]
        if head and head != SEP * len(head):
            head = head.rstrip(SEP)
        return head, tail

    @staticmethod
    def base_name(path: str) -> str:
        """
        Return the final component of a pathname.

        Unlike the Unix basename program, '/foo/bar/' gives ''.
        """
        return PathSyntax.split(path)[1]

    @staticmethod
    def dir_name(path: str) -> str:
        """Return the directory component of a pathname."""
        return PathSyntax.split(path)[0]

    @staticmethod
    def join(first: str, second: str, *rest: str) -> str:
        """
        Join two or more path fragments.

        A separator is inserted only where the accumulated path doesn't
        already end with one. An absolute fragment discards everything
        joined before it. Fragments are otherwise appended verbatim, so a
        trailing separator on the last one is kept.

        Args:
            first: Leading fragment
            second: Second fragment
            *rest: Any further fragments

        Returns:
            Joined path
        """
        result = first
        for part in (second,) + rest:
            if PathSyntax.is_absolute(part):
                result = part
                continue
            if result and not result.endswith(SEP):
                result += SEP
            result += part
        return result

    @staticmethod
    def common_prefix(paths: Iterable[str]) -> str:
        """
        Return the longest prefix, taken character by character, shared by
        all paths.

        This may return an invalid path; use common_path() for a
        component-aware result.
        """
        paths = list(paths)
        if not paths:
            return ''
        # The prefix shared by the extremes is shared by everything between
        return StringOps.common_prefix(min(paths), max(paths))

    @staticmethod
    def common_path(paths: Iterable[str]) -> str:
        """
        Return the longest common sub-path of the given paths.

        Returns an empty string when paths is empty or mixes absolute and
        relative paths. '..' is compared as an ordinary component.
        """
        paths = list(paths)
        if not paths:
            return ''

        if len({PathSyntax.is_absolute(p) for p in paths}) > 1:
            return ''

        split_paths = [PathSyntax.components(p) for p in paths]
        common = StringOps.common_prefix(min(split_paths), max(split_paths))

        prefix = SEP if PathSyntax.is_absolute(paths[0]) else ''
        return prefix + StringOps.join_with(SEP, common)
