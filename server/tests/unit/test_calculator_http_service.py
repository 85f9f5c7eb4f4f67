from __future__ import annotations

import json

import httpx
import pytest
from httpx import Response

from calc_api.core.config import AppSettings
from calc_api.expression.errors import DivisionByZero, EmptyExpression, InvalidCharacter
from calc_api.services.calculator_http import CalculatorHttpService, CalculatorHttpServiceError

CALCULATE_URL = "http://calculator.local/api/v1/calculate"


def test_evaluate_returns_result(respx_mock):
    service = CalculatorHttpService(base_url="http://calculator.local", timeout=1.5)
    route = respx_mock.post(CALCULATE_URL).mock(return_value=Response(200, json={"result": "3"}))

    result = service.evaluate("1+2")

    assert result.result == "3"
    assert result.value == 3.0
    assert result.expression == "1+2"
    assert json.loads(route.calls.last.request.content) == {"expression": "1+2"}


def test_evaluate_reraises_remote_evaluation_errors(respx_mock):
    service = CalculatorHttpService(base_url="http://calculator.local")
    respx_mock.post(CALCULATE_URL).mock(
        return_value=Response(
            422,
            json={
                "error": "invalid character: &",
                "errorType": "INVALID_CHARACTER",
                "details": {"character": "&"},
            },
        )
    )

    with pytest.raises(InvalidCharacter) as excinfo:
        service.evaluate("1&2")

    assert excinfo.value.char == "&"


def test_evaluate_reraises_remote_division_by_zero(respx_mock):
    service = CalculatorHttpService(base_url="http://calculator.local")
    respx_mock.post(CALCULATE_URL).mock(
        return_value=Response(422, json={"error": "division by zero", "errorType": "DIVISION_BY_ZERO"})
    )

    with pytest.raises(DivisionByZero):
        service.evaluate("1/0")


def test_evaluate_raises_on_http_error(respx_mock):
    service = CalculatorHttpService(base_url="http://calculator.local")
    respx_mock.post(CALCULATE_URL).mock(return_value=Response(500, json={"error": "fail"}))

    with pytest.raises(CalculatorHttpServiceError) as excinfo:
        service.evaluate("5+5")

    assert excinfo.value.message == "fail"
    assert excinfo.value.details == {"status_code": 500}


def test_evaluate_raises_on_invalid_json(respx_mock):
    service = CalculatorHttpService(base_url="http://calculator.local")
    respx_mock.post(CALCULATE_URL).mock(return_value=Response(200, text="not json"))

    with pytest.raises(CalculatorHttpServiceError):
        service.evaluate("5+5")


def test_evaluate_raises_on_malformed_result(respx_mock):
    service = CalculatorHttpService(base_url="http://calculator.local")
    respx_mock.post(CALCULATE_URL).mock(return_value=Response(200, json={"result": "abc"}))

    with pytest.raises(CalculatorHttpServiceError):
        service.evaluate("5+5")


def test_evaluate_rejects_empty_expression(respx_mock):
    service = CalculatorHttpService(base_url="http://calculator.local")
    with pytest.raises(EmptyExpression):
        service.evaluate("   ")
    assert not respx_mock.calls


def test_evaluate_handles_network_error(monkeypatch):
    service = CalculatorHttpService(base_url="http://calculator.local")

    def fail_request(*args, **kwargs):
        raise httpx.ConnectError("unreachable")

    monkeypatch.setattr(httpx, "Client", lambda *args, **kwargs: DummyClient(fail_request))

    with pytest.raises(CalculatorHttpServiceError):
        service.evaluate("2+2")


class DummyClient:
    def __init__(self, callback):
        self._callback = callback

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        return False

    def post(self, *args, **kwargs):
        return self._callback(*args, **kwargs)


def test_from_settings_requires_base_url(monkeypatch):
    monkeypatch.setattr(
        "calc_api.services.calculator_http.get_settings",
        lambda: AppSettings(_env_file=None, calc_http_base_url=None),
    )

    with pytest.raises(CalculatorHttpServiceError):
        CalculatorHttpService.from_settings()


def test_from_settings_uses_timeout(monkeypatch):
    settings = AppSettings(_env_file=None, calc_http_base_url="http://calculator.local/", calc_http_timeout_sec=7.5)
    monkeypatch.setattr("calc_api.services.calculator_http.get_settings", lambda: settings)

    service = CalculatorHttpService.from_settings()

    assert service.base_url == "http://calculator.local"
    assert service.timeout == 7.5
    assert service.api_prefix == "/api/v1"


@pytest.mark.parametrize("details", ["&", ["&"], 7])
def test_evaluate_tolerates_non_mapping_error_details(respx_mock, details):
    service = CalculatorHttpService(base_url="http://calculator.local")
    respx_mock.post(CALCULATE_URL).mock(
        return_value=Response(
            422,
            json={"error": "invalid character: &", "errorType": "INVALID_CHARACTER", "details": details},
        )
    )

    with pytest.raises(InvalidCharacter) as excinfo:
        service.evaluate("1&2")

    assert excinfo.value.char == ""
