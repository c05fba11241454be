"""Parser interfaces for kubectl output."""

from __future__ import annotations

from typing import Any

from kubeparse.errorable import Errorable
from kubeparse.models import KubectlOutput


class ParserError(RuntimeError):
    """Raised when a parser cannot be resolved or strict decoding rejects kubectl output."""


class BaseParser:
    """Base interface for kubectl output parsers."""

    name: str = "base"

    def parse(self, output: KubectlOutput) -> Errorable[Any]:
        raise NotImplementedError("Parsers must implement parse()")
