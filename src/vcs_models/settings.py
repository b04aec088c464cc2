from typing import Annotated

from pydantic import BeforeValidator, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from vcs_models.types._hosts import VCSHostType


def _parse_host_type(v: object) -> object:
    if isinstance(v, str):
        return VCSHostType.parse(v)
    return v


HostTypeName = Annotated[VCSHostType, BeforeValidator(_parse_host_type)]


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="VCS_MODELS_", env_file=[".env"], extra="ignore"
    )

    # host types whose repo owners may contain /'s (e.g. gitlab subgroups)
    nested_group_hosts: list[HostTypeName] = Field(
        default_factory=lambda: [VCSHostType.GITLAB]
    )

    def allows_nested_groups(self, host_type: VCSHostType) -> bool:
        return host_type in self.nested_group_hosts


settings = Settings()
