import re
from functools import lru_cache
from urllib.parse import unquote


@lru_cache(maxsize=256)
def _compile_pattern(pattern: str) -> "re.Pattern[str]":
    # Only '*' is a wildcard, everything else matches literally.
    return re.compile("^" + re.escape(pattern).replace(r"\*", ".*") + r"\Z")


def normalize_path(path: str) -> str:
    """Trim the slashes of a request path, then decode it; the root path is '/'."""
    trimmed = (path or "").strip("/")
    return unquote(trimmed) if trimmed else "/"


class RequestContext:
    """The path of the request a menu is being built for."""

    def __init__(self, path: str = "/"):
        self.path = normalize_path(path)

    def matches(self, *patterns: str) -> bool:
        """Check whether the request path matches any of the given patterns.

        Args:
            *patterns: Path patterns such as ``"admin"`` or ``"admin/*"``.
                Patterns are compared as given, without trimming slashes.

        Returns:
            True if at least one pattern matches the whole path.
        """
        for pattern in patterns:
            if pattern == self.path:
                return True
            if _compile_pattern(pattern).match(self.path):
                return True
        return False

    def __repr__(self) -> str:
        return f"RequestContext(path={self.path!r})"
