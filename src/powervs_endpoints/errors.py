# powervs_endpoints/errors.py


class EndpointsError(Exception):
    """
    Base class for all errors raised while resolving or exporting endpoints.
    """


class InfrastructureNotFoundError(EndpointsError):
    """
    The cluster Infrastructure singleton does not exist.
    """

    def __init__(self, name: str) -> None:
        super().__init__(f"infrastructure object {name!r} not found")
        self.name = name


class InfrastructureReadError(EndpointsError):
    """
    Reading the Infrastructure object failed for a reason other than absence.
    """

    def __init__(self, name: str, reason: str) -> None:
        super().__init__(f"failed to read infrastructure object {name!r}: {reason}")
        self.name = name
        self.reason = reason


class UnknownServiceKeyError(EndpointsError, KeyError):
    """
    A service key has no environment variable in the translation table.
    """

    def __init__(self, key: str) -> None:
        super().__init__(f"unknown service key {key!r}")
        self.key = key

    def __str__(self) -> str:
        return self.args[0]


class EnvironmentWriteError(EndpointsError):
    """
    Writing an environment variable failed or did not read back as written.
    """

    def __init__(self, name: str, reason: str) -> None:
        super().__init__(f"failed to set environment variable {name!r}: {reason}")
        self.name = name
        self.reason = reason
