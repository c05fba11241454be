"""Shared constants for kubeparse decoders."""

from __future__ import annotations

import re

# kubectl pads table columns with runs of spaces; any whitespace run separates cells.
COLUMN_SEPARATOR = re.compile(r"\s+")
COLUMN_DELIMITER = "|"

FAILED_TO_RUN_MESSAGE = "Unable to run kubectl"
EMPTY_JSON_MESSAGE = "Kubectl returned empty JSON"
INVALID_JSON_MESSAGE = "Unable to parse kubectl output as JSON"

STRICT_JSON_ENV_VAR = "KUBEPARSE_STRICT_JSON"
FORCE_ENV_OVERRIDE_VAR = "KUBEPARSE_FORCE_ENV_OVERRIDE"
