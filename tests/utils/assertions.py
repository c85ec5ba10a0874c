"""Custom assertion helpers for Incapsula client tests."""

from urllib.parse import parse_qsl, urlsplit


def query_params(url: str) -> list[tuple[str, str]]:
    """Query string of a URL as ordered (key, value) pairs."""
    return parse_qsl(urlsplit(url).query, keep_blank_values=True)


def assert_path(url: str, expected: str) -> None:
    """Assert the URL path (no query) equals expected."""
    path = urlsplit(url).path
    if path != expected:
        raise AssertionError(f"Expected path {expected!r}, got {path!r}")


def assert_credentials(url: str, api_id: str = "foo", api_key: str = "bar") -> None:
    """Assert api_id and api_key are the last two query parameters."""
    params = query_params(url)
    if params[-2:] != [("api_id", api_id), ("api_key", api_key)]:
        raise AssertionError(f"Credentials missing or misplaced in query: {params}")
