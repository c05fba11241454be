"""Parser registry for kubectl output formats."""

from __future__ import annotations

from .base import BaseParser, ParserError
from .json import JSONListParser, JSONParser, parse_json, parse_json_collection
from .table import TableParser, as_table_lines, parse_table_lines, parse_tabular

_PARSER_CLASSES: dict[str, type[BaseParser]] = {
    JSONParser.name: JSONParser,
    JSONListParser.name: JSONListParser,
    TableParser.name: TableParser,
}


def get_parser(name: str) -> BaseParser:
    normalized = (name or "").lower()
    if normalized not in _PARSER_CLASSES:
        raise ParserError(f"No parser registered for '{name}'")
    parser_cls = _PARSER_CLASSES[normalized]
    return parser_cls()


def available_parsers() -> list[str]:
    return sorted(_PARSER_CLASSES)


__all__ = [
    "BaseParser",
    "JSONListParser",
    "JSONParser",
    "ParserError",
    "TableParser",
    "as_table_lines",
    "available_parsers",
    "get_parser",
    "parse_json",
    "parse_json_collection",
    "parse_table_lines",
    "parse_tabular",
]
