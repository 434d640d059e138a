"""GitHub web URL resolution."""

import re

from pydantic import AnyUrl, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

_url_adapter = TypeAdapter(AnyUrl)

# RFC 3986 unreserved, reserved and percent characters
_URI_CHARACTERS = re.compile(r"[A-Za-z0-9\-._~:/?#\[\]@!$&'()*+,;=%]+")


def is_hierarchical_url(value: str) -> bool:
    """Check that ``value`` is a well-formed ``scheme://host/...`` URL."""
    if not value or not _URI_CHARACTERS.fullmatch(value):
        return False
    if "://" not in value:
        return False
    try:
        url = _url_adapter.validate_python(value)
    except PydanticValidationError:
        return False
    return bool(url.scheme and url.host)


def normalize_remote_url(url: str) -> str:
    """Normalize a git remote URL to an HTTPS base URL.

    Handles:
    - git@github.com:org/repo.git -> https://github.com/org/repo
    - https://github.com/org/repo.git -> https://github.com/org/repo
    """
    url = re.sub(r"\.git$", "", url.strip())
    ssh_match = re.match(r"git@([^:]+):(.+)", url)
    if ssh_match:
        host, path = ssh_match.groups()
        return f"https://{host}/{path}"
    return url


class WebURLResolver:
    """Builds GitHub web links from a web repository URL.

    Supports:
    - Blob: https://github.com/org/repo/blob/<revision>/<path>
    - Commit: https://github.com/org/repo/commit/<revision>
    """

    def __init__(self, web_repository_url: str | None) -> None:
        self._base = web_repository_url

    def blob(self, revision: str, path: str) -> str:
        return f"{self._base}/blob/{revision}/{path}"

    def commit(self, revision: str) -> str:
        return f"{self._base}/commit/{revision}"
