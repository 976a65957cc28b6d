"""Unit tests for dependencies module."""

from types import SimpleNamespace

from stellar_explain.core.dependencies import get_account_service, get_explain_service


def _request(**state):
    return SimpleNamespace(app=SimpleNamespace(state=SimpleNamespace(**state)))


def test_get_explain_service_reads_app_state():
    service = object()
    assert get_explain_service(_request(explain_service=service)) is service


def test_get_account_service_reads_app_state():
    service = object()
    assert get_account_service(_request(account_service=service)) is service
