"""Decode the default column-aligned output of ``kubectl get``."""

from __future__ import annotations

import logging
import re

from kubeparse.constants import COLUMN_DELIMITER, COLUMN_SEPARATOR, FAILED_TO_RUN_MESSAGE
from kubeparse.errorable import Errorable, Failed, FailureReason, Succeeded, failed
from kubeparse.models import KubectlOutput, TableLines

from .base import BaseParser

logger = logging.getLogger("kubeparse.table")


def parse_tabular(output: KubectlOutput) -> Errorable[list[dict[str, str]]]:
    """Parse tabular kubectl output into a list of dicts.

    Each non-header row maps to a dict with one entry per column, keyed by the
    lower-cased column header.

    Args:
        output: The result of invoking kubectl via the shell.

    Returns:
        A success value containing one dict per body row if kubectl ran
        successfully, otherwise the failure from :func:`as_table_lines`.
    """

    table = as_table_lines(output)
    if failed(table):
        return table

    return Succeeded(parse_table_lines(table.result))


def as_table_lines(output: KubectlOutput) -> Errorable[TableLines]:
    """Split tabular kubectl output into a header line and body lines.

    If kubectl ran successfully but printed nothing, the header is the empty
    string and the body is empty. Stderr is ignored whenever the exit code is
    zero, so "No resources found." is not a failure.
    """

    if output is None:
        logger.debug("kubectl process was not created")
        return Failed(FailureReason.FAILED_TO_RUN, FAILED_TO_RUN_MESSAGE)

    if output.code != 0:
        logger.debug("kubectl exited with status %s", output.code)
        return Failed(FailureReason.KUBECTL_ERROR, output.stderr)

    header, *rest = output.stdout.split("\n")
    if not header:
        return Succeeded(TableLines(header="", body=()))

    body = tuple(line for line in rest if line)
    return Succeeded(TableLines(header=header, body=body))


def parse_table_lines(
    table: TableLines, column_separator: re.Pattern[str] | str = COLUMN_SEPARATOR
) -> list[dict[str, str]]:
    """Map each body line of ``table`` to a dict keyed by column name.

    Cells are matched to columns by position. Cells past the last column are
    dropped; a short row simply lacks the trailing columns.
    """

    if not table.header or not table.body:
        return []

    separator = re.compile(column_separator) if isinstance(column_separator, str) else column_separator
    column_headers = [name.strip() for name in _split_columns(table.header.lower(), separator)]
    rows = [_parse_line(line, column_headers, separator) for line in table.body]
    logger.debug("Parsed %d row(s) across %d column(s)", len(rows), len(column_headers))
    return rows


def _split_columns(line: str, separator: re.Pattern[str]) -> list[str]:
    return separator.sub(COLUMN_DELIMITER, line).split(COLUMN_DELIMITER)


def _parse_line(line: str, column_headers: list[str], separator: re.Pattern[str]) -> dict[str, str]:
    return {column: value.strip() for column, value in zip(column_headers, _split_columns(line, separator))}


class TableParser(BaseParser):
    """Parse the default table printed by ``kubectl get``."""

    name = "table"

    def parse(self, output: KubectlOutput) -> Errorable[list[dict[str, str]]]:
        return parse_tabular(output)
