"""project types"""

import posixpath

from pydantic import BaseModel, ConfigDict


class Project(BaseModel):
    """a directory inside a repo that is worked on independently"""

    model_config = ConfigDict(frozen=True)

    repo_full_name: str
    path: str  # relative to the repo root, "." for the root itself

    def __str__(self) -> str:
        return f"repofullname={self.repo_full_name} path={self.path}"


def clean_project_path(path: str) -> str:
    """normalize a repo path to a cleaned relative form

    "./another/path" -> "another/path", "/" -> ".", "" -> "."
    """
    cleaned = posixpath.normpath(path).lstrip("/")
    return cleaned or "."


def new_project(repo_full_name: str, path: str) -> Project:
    """build a Project for path in repo_full_name, normalizing the path"""
    return Project(repo_full_name=repo_full_name, path=clean_project_path(path))
