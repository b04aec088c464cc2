"""public types API for repos and projects"""

from vcs_models.types._common import RepoFullName, split_repo_full_name
from vcs_models.types._hosts import VCSHost, VCSHostType
from vcs_models.types._project import Project, clean_project_path, new_project
from vcs_models.types._repo import Repo, new_repo
from vcs_models.types._urls import sanitize_clone_url

__all__ = [
    "Project",
    "Repo",
    "RepoFullName",
    "VCSHost",
    "VCSHostType",
    "clean_project_path",
    "new_project",
    "new_repo",
    "sanitize_clone_url",
    "split_repo_full_name",
]
