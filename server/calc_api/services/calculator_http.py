from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import httpx
from pydantic import ValidationError

from calc_api.core.config import get_settings
from calc_api.core.exceptions import AppError
from calc_api.expression.errors import ERRORS_BY_TYPE, EmptyExpression, EvaluationError
from calc_api.models.calculator import CalculationResponse, CalculationResult


class CalculatorHttpServiceError(AppError):
    status_code = 502
    error_type = "CALCULATOR_HTTP_ERROR"


def _remote_error(payload: Any) -> EvaluationError | None:
    """Rebuild the evaluation error a remote calculator reported, if it is a known kind."""
    if not isinstance(payload, dict):
        return None
    cls = ERRORS_BY_TYPE.get(payload.get("errorType"))
    if cls is None:
        return None
    return cls.from_details(payload.get("details"))


@dataclass
class CalculatorHttpService:
    """Client for a calculator exposed over HTTP by this same application."""

    base_url: str
    timeout: float = 5.0
    api_prefix: str = "/api/v1"

    @classmethod
    def from_settings(cls) -> "CalculatorHttpService":
        settings = get_settings()
        if not settings.calc_http_base_url:
            raise CalculatorHttpServiceError("CALC_HTTP_BASE_URL is not configured.")
        return cls(
            base_url=settings.calc_http_base_url.rstrip("/"),
            timeout=float(settings.calc_http_timeout_sec),
            api_prefix=settings.api_prefix,
        )

    def evaluate(self, expression: str) -> CalculationResult:
        if not expression.strip():
            raise EmptyExpression()

        url = f"{self.base_url}{self.api_prefix}/calculate"
        try:
            with httpx.Client(timeout=self.timeout) as client:
                response = client.post(url, json={"expression": expression})
        except httpx.RequestError as exc:
            raise CalculatorHttpServiceError("Calculator service is unavailable.") from exc

        try:
            payload = response.json()
        except ValueError:
            payload = None

        if response.status_code != 200:
            if response.status_code == 422:
                remote = _remote_error(payload)
                if remote is not None:
                    raise remote
            message = "Calculator request failed."
            if isinstance(payload, dict) and isinstance(payload.get("error"), str):
                message = payload["error"]
            raise CalculatorHttpServiceError(message, details={"status_code": response.status_code})

        if payload is None:
            raise CalculatorHttpServiceError("Calculator response was not valid JSON.")

        try:
            body = CalculationResponse.model_validate(payload)
            value = float(body.result)
        except (ValidationError, ValueError) as exc:
            raise CalculatorHttpServiceError("Calculator response was malformed.") from exc

        return CalculationResult(expression=expression, value=value, result=body.result)
