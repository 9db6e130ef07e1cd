from __future__ import annotations

import logging
from typing import Optional, Dict, Any

import requests

from ...base import PhoneValidator, ValidationFailed, ValidationRequest, ValidationResult
from ...utils.logger import get_logger, log_event
from phonecheck.utils.config_loader import DEFAULT_PROVIDER_URL, Settings


class AbstractApiPhoneValidator(PhoneValidator):
    """Phone validator backed by the AbstractAPI Phone Validation service.

    One GET per lookup, no retries and no caching. HTTP errors, transport
    errors and undecodable bodies are all reported as ``ValidationFailed``.
    """

    source_name = "abstractapi"

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_PROVIDER_URL,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.api_key = api_key
        self.base_url = base_url
        self.timeout = timeout
        self.session = session
        self.logger = get_logger("provider.abstractapi")

    @classmethod
    def from_settings(cls, settings: Settings) -> "AbstractApiPhoneValidator":
        return cls(
            api_key=settings.api_key,
            base_url=settings.provider_url,
            timeout=settings.timeout,
        )

    def _get(self, params: Dict[str, str]) -> requests.Response:
        getter = self.session.get if self.session is not None else requests.get
        return getter(self.base_url, params=params, timeout=self.timeout)

    def lookup(self, request: ValidationRequest) -> ValidationResult:
        params = {"api_key": self.api_key, "phone": request.full_number}

        try:
            response = self._get(params)
            response.raise_for_status()
            payload: Any = response.json()
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            log_event(
                self.logger,
                level=logging.ERROR,
                message="Phone validation request rejected",
                extra={"phone": request.full_number, "status": status},
            )
            raise ValidationFailed(str(exc)) from exc
        except requests.JSONDecodeError as exc:
            log_event(
                self.logger,
                level=logging.ERROR,
                message="Phone validation response is not JSON",
                extra={"phone": request.full_number, "error": str(exc)},
            )
            raise ValidationFailed(f"Malformed provider response: {exc}") from exc
        except requests.RequestException as exc:
            log_event(
                self.logger,
                level=logging.ERROR,
                message="Phone validation request failed",
                extra={"phone": request.full_number, "error": str(exc)},
            )
            raise ValidationFailed(str(exc)) from exc

        if not isinstance(payload, dict):
            raise ValidationFailed(f"Unexpected provider response type: {type(payload).__name__}")

        log_event(
            self.logger,
            level=logging.DEBUG,
            message="Phone validation response received",
            extra={"phone": request.full_number, "valid": payload.get("valid")},
        )
        return ValidationResult.from_payload(payload)
