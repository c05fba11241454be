"""Tests for the kubectl JSON decoders."""

import pytest
from pydantic import BaseModel

from kubeparse import ShellResult
from kubeparse.errorable import FailureReason
from kubeparse.models import KubernetesList
from kubeparse.parsers.json import ParserError, _adapter, parse_json, parse_json_collection


class WidgetMetadata(BaseModel):
    name: str
    namespace: str | None = None


class WidgetSpec(BaseModel):
    count: int
    isThreaded: bool
    model: str


class Kubewidget(BaseModel):
    kind: str
    metadata: WidgetMetadata
    spec: WidgetSpec


KUBEWIDGET_JSON = """
{
    "kind": "Widget",
    "metadata": {
        "name": "mywidget",
        "namespace": "myns"
    },
    "spec": {
        "count": 1789,
        "isThreaded": true,
        "model": "KW-3000"
    }
}
"""

KUBEWIDGETS_COLLECTION_JSON = (
    '{"apiVersion": "fake", "kind": "List", "items": [' + KUBEWIDGET_JSON + '], "metadata": {}}'
)

NO_KUBEWIDGETS_JSON = '{"apiVersion": "fake", "kind": "List", "items": [], "metadata": {}}'


def _ok(stdout: str) -> ShellResult:
    return ShellResult(code=0, stdout=stdout, stderr="")


def test_parse_json_reports_failure_when_kubectl_failed_to_run():
    result = parse_json(None)
    assert result.succeeded is False
    assert result.reason == FailureReason.FAILED_TO_RUN
    assert result.error == "Unable to run kubectl"


def test_parse_json_reports_stderr_on_non_zero_exit():
    result = parse_json(ShellResult(code=1, stdout="", stderr="oh noes"))
    assert result.succeeded is False
    assert result.reason == FailureReason.KUBECTL_ERROR
    assert result.error == "oh noes"


@pytest.mark.parametrize("stdout", ["", "   \n\t"])
def test_parse_json_reports_failure_on_empty_output(stdout):
    result = parse_json(_ok(stdout))
    assert result.succeeded is False
    assert result.reason == FailureReason.FAILED_TO_PARSE
    assert result.error == "Kubectl returned empty JSON"


def test_parse_json_returns_plain_objects_without_model():
    result = parse_json(_ok(KUBEWIDGET_JSON))
    assert result.succeeded is True
    widget = result.result
    assert widget["kind"] == "Widget"
    assert widget["metadata"]["name"] == "mywidget"
    assert widget["spec"]["count"] == 1789


def test_parse_json_validates_against_model():
    result = parse_json(_ok(KUBEWIDGET_JSON), Kubewidget)
    assert result.succeeded is True
    widget = result.result
    assert isinstance(widget, Kubewidget)
    assert widget.kind == "Widget"
    assert widget.metadata.namespace == "myns"
    assert widget.spec.count == 1789
    assert widget.spec.isThreaded is True
    assert widget.spec.model == "KW-3000"


def test_parse_json_is_repeatable():
    output = _ok(KUBEWIDGET_JSON)
    assert parse_json(output) == parse_json(output)


def test_parse_json_reports_malformed_output_as_parse_failure():
    result = parse_json(_ok("{not json"))
    assert result.succeeded is False
    assert result.reason == FailureReason.FAILED_TO_PARSE
    assert result.error.startswith("Unable to parse kubectl output as JSON")


def test_parse_json_reports_model_mismatch_as_parse_failure():
    result = parse_json(_ok('{"kind": "Widget"}'), Kubewidget)
    assert result.succeeded is False
    assert result.reason == FailureReason.FAILED_TO_PARSE


def test_parse_json_strict_mode_raises_parser_error():
    with pytest.raises(ParserError):
        parse_json(_ok("{not json"), strict=True)


def test_parse_json_ignores_strict_environment_setting(monkeypatch):
    monkeypatch.setenv("KUBEPARSE_STRICT_JSON", "true")
    result = parse_json(_ok("{not json"))
    assert result.reason == FailureReason.FAILED_TO_PARSE


def test_parse_json_reuses_type_adapter_per_model():
    _adapter.cache_clear()
    parse_json(_ok(KUBEWIDGET_JSON), Kubewidget)
    parse_json(_ok(KUBEWIDGET_JSON), Kubewidget)
    info = _adapter.cache_info()
    assert info.misses == 1
    assert info.hits == 1


def test_parse_json_collection_returns_all_items():
    result = parse_json_collection(_ok(KUBEWIDGETS_COLLECTION_JSON), Kubewidget)
    assert result.succeeded is True
    widgets = result.result
    assert isinstance(widgets, KubernetesList)
    assert widgets.kind == "List"
    assert widgets.api_version == "fake"
    assert len(widgets.items) == 1
    assert widgets.items[0].spec.count == 1789


def test_parse_json_collection_without_item_model_keeps_raw_items():
    result = parse_json_collection(_ok(KUBEWIDGETS_COLLECTION_JSON))
    assert result.succeeded is True
    assert result.result.items[0]["spec"]["count"] == 1789


def test_parse_json_collection_returns_empty_list_when_no_items():
    result = parse_json_collection(_ok(NO_KUBEWIDGETS_JSON), Kubewidget)
    assert result.succeeded is True
    assert result.result.kind == "List"
    assert len(result.result.items) == 0


def test_parse_json_collection_rejects_non_list_envelope():
    result = parse_json_collection(_ok(KUBEWIDGET_JSON))
    assert result.succeeded is False
    assert result.reason == FailureReason.FAILED_TO_PARSE


def test_parse_json_collection_passes_process_failures_through():
    assert parse_json_collection(None).reason == FailureReason.FAILED_TO_RUN
    result = parse_json_collection(ShellResult(code=2, stdout="", stderr="forbidden"))
    assert result.reason == FailureReason.KUBECTL_ERROR
    assert result.error == "forbidden"
