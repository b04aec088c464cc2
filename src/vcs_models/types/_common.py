"""shared helpers and validators"""

from typing import Annotated

from pydantic import AfterValidator


def split_repo_full_name(full_name: str) -> tuple[str, str]:
    """split a full name into (owner, repo) on its last /

    owner keeps any nested groups, e.g. "group/subgroup/owner/repo" gives
    ("group/subgroup/owner", "repo"). a name without a / has no owner.
    empty segments are returned as-is, callers decide whether they're valid.
    """
    owner, sep, repo = full_name.rpartition("/")
    if not sep:
        return "", full_name
    return owner, repo


_ESCAPES = {
    "\a": r"\a",
    "\b": r"\b",
    "\f": r"\f",
    "\n": r"\n",
    "\r": r"\r",
    "\t": r"\t",
    "\v": r"\v",
    "\\": r"\\",
    '"': r"\"",
}


def quote(s: str) -> str:
    """double-quote a string for error messages, escaping like go's %q

    other ascii control characters become \\xNN, non-printable unicode
    becomes \\uNNNN or \\UNNNNNNNN.
    """
    out = []
    for ch in s:
        if ch in _ESCAPES:
            out.append(_ESCAPES[ch])
        elif ch.isprintable() or ch == " ":
            out.append(ch)
        elif ord(ch) < 0x80:
            out.append(f"\\x{ord(ch):02x}")
        elif ord(ch) <= 0xFFFF:
            out.append(f"\\u{ord(ch):04x}")
        else:
            out.append(f"\\U{ord(ch):08x}")
    return '"' + "".join(out) + '"'


def validate_repo_full_name(v: str) -> str:
    """reject full names that are missing an owner or a repo"""
    owner, repo = split_repo_full_name(v)
    if not owner or not repo:
        raise ValueError(
            f"invalid repo format {quote(v)}, "
            f"owner {quote(owner)} or repo {quote(repo)} was empty"
        )
    return v


RepoFullName = Annotated[str, AfterValidator(validate_repo_full_name)]
