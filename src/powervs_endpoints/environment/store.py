# environment/store.py

import os
from typing import Protocol

from powervs_endpoints.errors import EnvironmentWriteError


class EnvironmentStore(Protocol):
    """
    Key-value store holding environment variables.
    """

    def set(self, name: str, value: str) -> None: ...

    def get(self, name: str) -> str | None: ...


class ProcessEnvironment:
    """
    Environment store backed by the real process environment.

    Writes are visible to anything in the process that reads os.environ,
    including SDK clients constructed later.
    """

    __slots__ = ()

    def set(self, name: str, value: str) -> None:
        try:
            os.environ[name] = value
        except (OSError, ValueError) as error:
            raise EnvironmentWriteError(name, str(error)) from error

    def get(self, name: str) -> str | None:
        return os.environ.get(name)


class InMemoryEnvironment:
    """
    Dictionary-backed environment store.

    Substitutes for the process environment in tests and dry runs so that
    nothing leaks between callers.
    """

    __slots__ = ("_values",)

    def __init__(self, values: dict[str, str] | None = None) -> None:
        self._values: dict[str, str] = dict(values or {})

    def set(self, name: str, value: str) -> None:
        if not name or "=" in name:
            raise EnvironmentWriteError(name, "invalid variable name")
        self._values[name] = value

    def get(self, name: str) -> str | None:
        return self._values.get(name)

    def as_dict(self) -> dict[str, str]:
        return dict(self._values)


_process_environment = ProcessEnvironment()


def default_store() -> EnvironmentStore:
    return _process_environment


def set_environment_variable(
    name: str,
    value: str,
    *,
    store: EnvironmentStore | None = None,
) -> None:
    """
    Write an environment variable.

    Args:
        name (str): Variable name.
        value (str): Variable value.
        store (EnvironmentStore | None, optional): Target store; defaults to
            the process environment.

    Raises:
        EnvironmentWriteError: If the underlying write fails.
    """
    (store or default_store()).set(name, value)


def get_environment_variable(
    name: str,
    *,
    store: EnvironmentStore | None = None,
) -> str:
    """
    Read an environment variable.

    Args:
        name (str): Variable name.
        store (EnvironmentStore | None, optional): Source store; defaults to
            the process environment.

    Returns:
        str: The current value, or an empty string if unset.
    """
    return (store or default_store()).get(name) or ""
