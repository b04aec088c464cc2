"""tests for settings"""

import pytest
from pydantic import ValidationError

from vcs_models.settings import Settings
from vcs_models.types import VCSHostType


class TestSettings:
    """test loading settings"""

    def test_defaults(self, monkeypatch):
        """only gitlab allows nested groups by default"""
        monkeypatch.delenv("VCS_MODELS_NESTED_GROUP_HOSTS", raising=False)
        s = Settings(_env_file=None)
        assert s.nested_group_hosts == [VCSHostType.GITLAB]
        assert s.allows_nested_groups(VCSHostType.GITLAB)
        assert not s.allows_nested_groups(VCSHostType.GITHUB)

    def test_from_env(self, monkeypatch):
        """host names are read from the environment and canonicalized"""
        monkeypatch.setenv(
            "VCS_MODELS_NESTED_GROUP_HOSTS", '["gitlab", "bitbucketserver"]'
        )
        s = Settings(_env_file=None)
        assert s.nested_group_hosts == [
            VCSHostType.GITLAB,
            VCSHostType.BITBUCKET_SERVER,
        ]
        assert s.allows_nested_groups(VCSHostType.BITBUCKET_SERVER)

    def test_rejects_unknown_host(self):
        """unknown host names fail validation"""
        with pytest.raises(ValidationError, match="unknown vcs host type"):
            Settings(_env_file=None, nested_group_hosts=["gitea"])
