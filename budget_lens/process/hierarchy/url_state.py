# Path: budget_lens/process/hierarchy/url_state.py
"""
URL State - the page-address collaborator of the hierarchy store.

The store only needs two things from the hosting page: read a query
parameter and replace it in place (no new history entry). UrlState is
that seam; InMemoryUrlState implements it over a plain URL string for
the CLI, server-side rendering and tests.

The breadcrumb travels as one comma-separated parameter, order kept,
absent when the path is empty.
"""

from abc import ABC, abstractmethod
from typing import Iterable, Optional
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

from budget_lens.process.hierarchy.constants import PATH_SEPARATOR


# ==============================================================================
# PATH PARAMETER CODEC
# ==============================================================================
def parse_path_param(value: Optional[str]) -> list[str]:
    """
    Decode a path parameter value.

    Args:
        value: Raw parameter value, or None when absent

    Returns:
        Ordered ids with empty segments dropped
    """
    if not value:
        return []
    return [segment for segment in value.split(PATH_SEPARATOR) if segment]


def format_path_param(path: Iterable[str]) -> Optional[str]:
    """
    Encode a breadcrumb path as a parameter value.

    Args:
        path: Ordered ids

    Returns:
        Comma-joined ids, or None for an empty path (parameter removed)
    """
    ids = list(path)
    if not ids:
        return None
    return PATH_SEPARATOR.join(ids)


# ==============================================================================
# COLLABORATOR INTERFACE
# ==============================================================================
class UrlState(ABC):
    """
    Abstract access to the current page URL's query parameters.

    Implementations must replace the current history entry on write,
    never push a new one.
    """

    @abstractmethod
    def get_param(self, name: str) -> Optional[str]:
        """Return the value of a query parameter, or None if absent."""

    @abstractmethod
    def replace_param(self, name: str, value: Optional[str]) -> None:
        """Set a query parameter in place; None removes it."""

    def read_path(self, name: str) -> list[str]:
        """Read and decode a breadcrumb parameter."""
        return parse_path_param(self.get_param(name))

    def write_path(self, name: str, path: Iterable[str]) -> None:
        """Encode and write a breadcrumb parameter."""
        self.replace_param(name, format_path_param(path))


class InMemoryUrlState(UrlState):
    """
    URL held as a string, with a browser-like history list.

    Example:
        url_state = InMemoryUrlState("https://example.org/budget?path=dod,army")
        url_state.read_path("path")  # ["dod", "army"]
        url_state.write_path("path", ["dod"])
        url_state.url  # "https://example.org/budget?path=dod"
    """

    def __init__(self, url: str = "/"):
        self.history: list[str] = [url]

    @property
    def url(self) -> str:
        """Current URL (last history entry)."""
        return self.history[-1]

    def push(self, url: str) -> None:
        """Navigate to a new URL, adding a history entry."""
        self.history.append(url)

    def get_param(self, name: str) -> Optional[str]:
        query = urlsplit(self.url).query
        for key, value in parse_qsl(query, keep_blank_values=True):
            if key == name:
                return value
        return None

    def replace_param(self, name: str, value: Optional[str]) -> None:
        parts = urlsplit(self.url)
        params = []
        written = value is None
        # keep the parameter's position, like URLSearchParams.set
        for key, val in parse_qsl(parts.query, keep_blank_values=True):
            if key != name:
                params.append((key, val))
            elif not written:
                params.append((name, value))
                written = True
        if not written:
            params.append((name, value))
        self.history[-1] = urlunsplit(parts._replace(query=urlencode(params)))

    def __repr__(self) -> str:
        return f"InMemoryUrlState(url='{self.url}')"


__all__ = [
    'UrlState',
    'InMemoryUrlState',
    'parse_path_param',
    'format_path_param',
]
