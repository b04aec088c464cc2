"""clone url parsing and credential handling"""

import re

import httpx

from vcs_models.exceptions import InvalidCloneURLError

_SCHEME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*:")


def parse_clone_url(clone_url: str) -> httpx.URL:
    """parse an absolute clone url

    Raises:
        InvalidCloneURLError: if the url has no scheme or httpx rejects it
    """
    if not _SCHEME_RE.match(clone_url):
        raise InvalidCloneURLError(
            f"invalid clone url: parse {clone_url}: missing protocol scheme"
        )
    try:
        return httpx.URL(clone_url)
    except httpx.InvalidURL as e:
        raise InvalidCloneURLError(
            f"invalid clone url: parse {clone_url}: {e}"
        ) from e


def with_credentials(url: httpx.URL, username: str, password: str) -> httpx.URL:
    """return url with username:password@ in front of the host

    credentials are percent-encoded as userinfo; when both are empty the url
    comes back without any userinfo.
    """
    if not username and not password:
        return without_credentials(url)
    return url.copy_with(username=username, password=password)


def without_credentials(url: httpx.URL) -> httpx.URL:
    return url.copy_with(username="", password="")


def sanitize_clone_url(clone_url: str) -> str:
    """strip any embedded credentials from a clone url so it's safe to log"""
    return str(without_credentials(parse_clone_url(clone_url)))
