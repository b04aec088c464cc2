"""errors raised while building repo and project values"""


class VCSModelError(ValueError):
    """base error for every validation failure in this package"""


class EmptyRepoFullNameError(VCSModelError):
    """repo full name was empty"""


class EmptyCloneURLError(VCSModelError):
    """clone url was empty"""


class InvalidCloneURLError(VCSModelError):
    """clone url could not be parsed"""


class RepoFormatError(VCSModelError):
    """full name could not be split into owner and repo"""


class ClonePathMismatchError(VCSModelError):
    """clone url path does not point at the declared full name"""
