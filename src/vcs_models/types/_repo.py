"""repository types"""

import logging

from pydantic import BaseModel, ConfigDict, Field

from vcs_models import settings as _settings
from vcs_models.exceptions import (
    ClonePathMismatchError,
    EmptyCloneURLError,
    EmptyRepoFullNameError,
    RepoFormatError,
)
from vcs_models.types._common import quote, split_repo_full_name
from vcs_models.types._hosts import VCSHost, VCSHostType
from vcs_models.types._urls import (
    parse_clone_url,
    with_credentials,
    without_credentials,
)

logger = logging.getLogger(__name__)


class Repo(BaseModel):
    """a validated repository on a VCS host

    clone_url carries the basic-auth credentials and is left out of repr;
    use sanitized_clone_url for anything user facing.
    """

    model_config = ConfigDict(frozen=True)

    full_name: str
    owner: str
    name: str
    clone_url: str = Field(repr=False)
    sanitized_clone_url: str
    vcs_host: VCSHost


def new_repo(
    host_type: VCSHostType,
    full_name: str,
    clone_url: str,
    username: str,
    password: str,
    *,
    allow_nested_groups: bool | None = None,
) -> Repo:
    """build a Repo from a full name and the clone url reported by the host

    Args:
        host_type: which provider the repo lives on
        full_name: repository full name, e.g. "owner/repo" or
                   "group/subgroup/repo" on hosts with nested groups
        clone_url: http(s) clone url, ".git" is appended when missing
        username: basic-auth user injected into clone_url
        password: basic-auth password or token injected into clone_url
        allow_nested_groups: whether owner may contain /'s. defaults to
                             settings.nested_group_hosts for host_type

    Returns:
        Repo with credentialed and sanitized clone urls

    Raises:
        EmptyRepoFullNameError: if full_name is empty
        EmptyCloneURLError: if clone_url is empty
        InvalidCloneURLError: if clone_url can't be parsed
        RepoFormatError: if full_name doesn't split into owner and repo
        ClonePathMismatchError: if clone_url doesn't point at full_name
                                (not checked for bitbucket server)
    """
    if full_name == "":
        raise EmptyRepoFullNameError("repoFullName can't be empty")
    if clone_url == "":
        raise EmptyCloneURLError("cloneURL can't be empty")

    if not clone_url.endswith(".git"):
        clone_url += ".git"
    url = parse_clone_url(clone_url)

    owner, repo = split_repo_full_name(full_name)
    if not owner or not repo:
        raise RepoFormatError(
            f"invalid repo format {quote(full_name)}, "
            f"owner {quote(owner)} or repo {quote(repo)} was empty"
        )
    if allow_nested_groups is None:
        allow_nested_groups = _settings.settings.allows_nested_groups(host_type)
    if "/" in owner and not allow_nested_groups:
        raise RepoFormatError(
            f"invalid repo format {quote(full_name)}, "
            f"owner {quote(owner)} should not contain any /'s"
        )

    # bitbucket server clone urls are templated by the caller, e.g.
    # /scm/<project>/<repo>.git, so they never match the full name
    if host_type == VCSHostType.BITBUCKET_SERVER:
        logger.debug("skipping clone url path check for %s", full_name)
    else:
        expected_path = f"/{full_name}.git"
        if url.path != expected_path:
            raise ClonePathMismatchError(
                f"expected clone url to have path {quote(expected_path)} "
                f"but had {quote(url.path)}"
            )

    sanitized = str(without_credentials(url))
    logger.debug("built repo %s with clone url %s", full_name, sanitized)
    return Repo(
        full_name=full_name,
        owner=owner,
        name=repo,
        clone_url=str(with_credentials(url, username, password)),
        sanitized_clone_url=sanitized,
        vcs_host=VCSHost(hostname=url.host, type=host_type),
    )
