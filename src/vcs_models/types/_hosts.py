"""hosting provider types"""

from enum import StrEnum

from pydantic import BaseModel, ConfigDict


class VCSHostType(StrEnum):
    """supported hosting providers"""

    GITHUB = "Github"
    GITLAB = "Gitlab"
    BITBUCKET_CLOUD = "BitbucketCloud"
    BITBUCKET_SERVER = "BitbucketServer"

    @classmethod
    def parse(cls, value: str) -> "VCSHostType":
        """look up a host type by its canonical name, ignoring case

        Raises:
            ValueError: if value names no supported host type
        """
        for member in cls:
            if member.value.lower() == value.strip().lower():
                return member
        raise ValueError(
            f"unknown vcs host type: '{value}'. "
            f"expected one of {', '.join(m.value for m in cls)}"
        )


class VCSHost(BaseModel):
    """hostname of a VCS together with the kind of provider serving it"""

    model_config = ConfigDict(frozen=True)

    hostname: str
    type: VCSHostType
