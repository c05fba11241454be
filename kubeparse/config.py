"""Opt-in settings for kubeparse decoders.

Nothing here runs at import time and nothing writes to ``os.environ``. Callers
that want environment-driven behaviour ask for it explicitly, e.g.
``parse_json(output, strict=strict_json_enabled())``.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path

from dotenv import dotenv_values

from kubeparse.constants import FORCE_ENV_OVERRIDE_VAR, STRICT_JSON_ENV_VAR


def _is_true(raw: str | None) -> bool:
    return (raw or "false").strip().lower() == "true"


def read_env(
    env_file: str | Path | None = None, environ: Mapping[str, str] | None = None
) -> dict[str, str | None]:
    """Return process environment merged with an optional .env file.

    The process environment wins unless the .env file sets
    ``KUBEPARSE_FORCE_ENV_OVERRIDE=true``.
    """

    values: dict[str, str | None] = dict(os.environ if environ is None else environ)
    if env_file is None or not Path(env_file).exists():
        return values

    dotenv = dotenv_values(env_file)
    if _is_true(dotenv.get(FORCE_ENV_OVERRIDE_VAR)):
        return dict(dotenv)
    return {**dotenv, **values}


def strict_json_enabled(env_file: str | Path | None = None, environ: Mapping[str, str] | None = None) -> bool:
    """Whether ``KUBEPARSE_STRICT_JSON`` asks for malformed JSON to raise."""

    return _is_true(read_env(env_file, environ).get(STRICT_JSON_ENV_VAR))
