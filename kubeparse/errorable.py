"""Success/failure container returned by every kubeparse decoder."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, Literal, TypeGuard, TypeVar, Union

T = TypeVar("T")


class FailureReason(str, Enum):
    """Programmatic identifier for why a decoder could not produce a value."""

    FAILED_TO_RUN = "failed-to-run"
    """The kubectl process was not created."""

    KUBECTL_ERROR = "kubectl-error"
    """kubectl ran but returned a non-zero exit code."""

    FAILED_TO_PARSE = "failed-to-parse"
    """kubectl succeeded but its standard output could not be interpreted."""


@dataclass(frozen=True)
class Succeeded(Generic[T]):
    """A decoder successfully computed ``result``."""

    result: T

    @property
    def succeeded(self) -> Literal[True]:
        return True


@dataclass(frozen=True)
class Failed:
    """A decoder could not compute a value.

    ``error`` holds kubectl's stderr when ``reason`` is
    :attr:`FailureReason.KUBECTL_ERROR`, and a default message otherwise.
    """

    reason: FailureReason
    error: str

    @property
    def succeeded(self) -> Literal[False]:
        return False


Errorable = Union[Succeeded[T], Failed]


def succeeded(e: Errorable[T]) -> TypeGuard[Succeeded[T]]:
    """Return True when ``e`` carries a result; narrows ``e`` for type checkers."""

    return isinstance(e, Succeeded)


def failed(e: Errorable[T]) -> TypeGuard[Failed]:
    """Return True when ``e`` carries a failure reason and error message."""

    return isinstance(e, Failed)


__all__ = ["Errorable", "Failed", "FailureReason", "Succeeded", "failed", "succeeded"]
