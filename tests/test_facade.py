from __future__ import annotations

import httpx
import pytest

import quicklog

from tests.fixtures.collector_stub import CollectorStub


@pytest.fixture(autouse=True)
def reset_default_client(monkeypatch):
    monkeypatch.setattr(quicklog, "_default_client", None)


def test_calls_before_configure_fail() -> None:
    with pytest.raises(quicklog.ConfigurationError):
        quicklog.tag_trace("t1", "x:y")


def test_configure_then_log_entry() -> None:
    stub = CollectorStub()
    quicklog.configure(
        project_id=1,
        api_key="k",
        api_url="http://test",
        client=httpx.Client(transport=stub.transport()),
    )
    ctx = quicklog.trace_ctx("u1", "", "")

    quicklog.log_entry(None, "a-type", "object:1", "target:2", {"key": "value"}, ctx, "x:y")

    assert stub.paths == ["/entries", "/tags"]
    assert {p["trace_id"] for p in stub.payloads} == {ctx.trace_id}


def test_configure_rejects_config_and_fields_together() -> None:
    with pytest.raises(TypeError):
        quicklog.configure(quicklog.QuicklogConfig(project_id=1, api_key="k"), project_id=2)


def test_reconfigure_replaces_default_client() -> None:
    first = quicklog.configure(project_id=1, api_key="k")
    second = quicklog.configure(project_id=2, api_key="k")

    assert quicklog.get_client() is second
    assert first is not second
    assert first._client.is_closed
    assert not second._client.is_closed
    second.close()
