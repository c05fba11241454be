"""Decode ``kubectl -o json`` output."""

from __future__ import annotations

import json
import logging
from functools import lru_cache
from typing import Any

from pydantic import TypeAdapter, ValidationError

from kubeparse.constants import EMPTY_JSON_MESSAGE, FAILED_TO_RUN_MESSAGE, INVALID_JSON_MESSAGE
from kubeparse.errorable import Errorable, Failed, FailureReason, Succeeded
from kubeparse.models import KubectlOutput, KubernetesList

from .base import BaseParser, ParserError

logger = logging.getLogger("kubeparse.json")


@lru_cache(maxsize=128)
def _adapter(model: Any) -> TypeAdapter[Any]:
    return TypeAdapter(model)


def parse_json(output: KubectlOutput, model: Any = None, *, strict: bool = False) -> Errorable[Any]:
    """Parse JSON kubectl output into an object.

    Args:
        output: The result of invoking kubectl via the shell.
        model: Optional type to validate the payload against (a pydantic model,
            dataclass, TypedDict or any other type pydantic understands). When
            omitted the plain ``json.loads`` value is returned.
        strict: Raise :class:`ParserError` on malformed output instead of
            returning a failure. Use :func:`kubeparse.config.strict_json_enabled`
            to take the value from the environment.

    Returns:
        A success value containing the deserialised object if kubectl ran
        successfully and produced valid JSON, otherwise a failure value.
    """

    if output is None:
        logger.debug("kubectl process was not created")
        return Failed(FailureReason.FAILED_TO_RUN, FAILED_TO_RUN_MESSAGE)

    if output.code != 0:
        logger.debug("kubectl exited with status %s", output.code)
        return Failed(FailureReason.KUBECTL_ERROR, output.stderr)

    text = output.stdout.strip()
    if not text:
        return Failed(FailureReason.FAILED_TO_PARSE, EMPTY_JSON_MESSAGE)

    try:
        if model is None:
            value = json.loads(text)
        else:
            value = _adapter(model).validate_json(text)
    except (json.JSONDecodeError, ValidationError) as exc:
        if strict:
            raise ParserError(f"{INVALID_JSON_MESSAGE}: {exc}") from exc
        logger.debug("Rejected kubectl JSON output: %s", exc)
        return Failed(FailureReason.FAILED_TO_PARSE, f"{INVALID_JSON_MESSAGE}: {exc}")

    return Succeeded(value)


def parse_json_collection(
    output: KubectlOutput, item_model: Any = None, *, strict: bool = False
) -> Errorable[KubernetesList[Any]]:
    """Parse JSON kubectl output into a :class:`KubernetesList`.

    Use this when the kubectl command requested a list of resources rather
    than a single resource. ``item_model`` types the entries of ``items``.
    """

    envelope = KubernetesList[Any] if item_model is None else KubernetesList[item_model]
    return parse_json(output, envelope, strict=strict)


class JSONParser(BaseParser):
    """Parse a single resource printed by ``kubectl get <kind> <name> -o json``."""

    name = "json"

    def __init__(self, model: Any = None, *, strict: bool = False) -> None:
        self.model = model
        self.strict = strict

    def parse(self, output: KubectlOutput) -> Errorable[Any]:
        return parse_json(output, self.model, strict=self.strict)


class JSONListParser(JSONParser):
    """Parse a resource list printed by ``kubectl get <kind> -o json``."""

    name = "json_list"

    def parse(self, output: KubectlOutput) -> Errorable[KubernetesList[Any]]:
        return parse_json_collection(output, self.model, strict=self.strict)
