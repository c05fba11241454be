"""Input and payload types shared by the kubeparse decoders."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Literal, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


@dataclass(frozen=True)
class ShellResult:
    """The result of invoking an external program via the shell."""

    code: int
    stdout: str
    stderr: str


# None when the kubectl process could not be created.
KubectlOutput = ShellResult | None


@dataclass(frozen=True)
class TableLines:
    """Line-oriented view of tabular kubectl output.

    ``header`` is the first line, kept verbatim. ``body`` holds the remaining
    non-empty lines. An empty header always comes with an empty body.
    """

    header: str
    body: tuple[str, ...] = ()


class KubernetesList(BaseModel, Generic[T]):
    """How ``kubectl -o json`` formats a list of resources."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    api_version: str = Field(..., alias="apiVersion", description="The Kubernetes API version.")
    kind: Literal["List"] = Field(..., description="Identifies this object to the Kubernetes API as a list.")
    items: list[T] = Field(default_factory=list)
    metadata: dict[str, str] = Field(default_factory=dict, description="Additional data about the list.")
