"""Typed parsing of kubectl output."""

from __future__ import annotations

from .config import strict_json_enabled
from .errorable import Errorable, Failed, FailureReason, Succeeded, failed, succeeded
from .models import KubectlOutput, KubernetesList, ShellResult, TableLines
from .parsers import (
    BaseParser,
    ParserError,
    as_table_lines,
    available_parsers,
    get_parser,
    parse_json,
    parse_json_collection,
    parse_table_lines,
    parse_tabular,
)

__version__ = "0.1.0"

__all__ = [
    "BaseParser",
    "Errorable",
    "Failed",
    "FailureReason",
    "KubectlOutput",
    "KubernetesList",
    "ParserError",
    "ShellResult",
    "Succeeded",
    "TableLines",
    "as_table_lines",
    "available_parsers",
    "failed",
    "get_parser",
    "parse_json",
    "parse_json_collection",
    "parse_table_lines",
    "parse_tabular",
    "strict_json_enabled",
    "succeeded",
]
