import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional, Tuple, Union

import requests

from inhand.api import salary_client

from .form import InputForm
from .models import Result, parse_result

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "Failed to calculate salary breakdown. Please try again."


def connectivity_message(base_url: Optional[str] = None) -> str:
    base = base_url or salary_client.api_base()
    return f"Cannot connect to server. Please make sure the backend server is running at {base}."


@dataclass(frozen=True)
class Idle:
    pass


@dataclass(frozen=True)
class Loading:
    request_id: int


@dataclass(frozen=True)
class Succeeded:
    result: Result
    payload: Dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class Failed:
    message: str


RequestState = Union[Idle, Loading, Succeeded, Failed]


def _error_from_body(response: Optional[requests.Response]) -> Optional[str]:
    if response is None:
        return None
    try:
        body = response.json()
    except ValueError:
        return None
    if not isinstance(body, dict):
        return None
    error = body.get("error")
    if isinstance(error, str) and error.strip():
        return error
    return None


def classify_error(exc: BaseException, base_url: Optional[str] = None) -> str:
    if isinstance(exc, requests.ConnectionError):
        return connectivity_message(base_url)
    error = _error_from_body(getattr(exc, "response", None))
    if error:
        return error
    text = str(exc).strip()
    return text or GENERIC_ERROR_MESSAGE


class RequestController:
    """Owns the request lifecycle for the calculator page.

    Every submission takes a new request id. A completion is applied only when
    it belongs to the latest submission, so a slow earlier response can never
    overwrite a newer result or error.
    """

    def __init__(
        self,
        send: Optional[Callable[[Dict[str, str]], Any]] = None,
        base_url: Optional[str] = None,
    ):
        self._send = send or salary_client.post_salary
        self._base_url = base_url
        self._latest_id = 0
        self.state: RequestState = Idle()

    @property
    def loading(self) -> bool:
        return isinstance(self.state, Loading)

    def begin(self, form: InputForm) -> Optional[Tuple[int, Dict[str, str]]]:
        self._latest_id += 1
        message = form.validate()
        if message is not None:
            self.state = Failed(message)
            return None
        self.state = Loading(self._latest_id)
        return self._latest_id, form.trimmed().model_dump()

    def complete(self, request_id: int, state: Union[Succeeded, Failed]) -> RequestState:
        if request_id != self._latest_id:
            logger.info("Discarding stale salary response for request %s (latest is %s)", request_id, self._latest_id)
            return self.state
        self.state = state
        return self.state

    def execute(self, request_id: int, payload: Dict[str, str]) -> RequestState:
        try:
            body = self._send(payload)
            result = parse_result(body)
        except Exception as exc:
            logger.error("Salary API error: %s", exc, exc_info=True)
            return self.complete(request_id, Failed(classify_error(exc, self._base_url)))
        return self.complete(request_id, Succeeded(result=result, payload=body))

    def submit(self, form: InputForm) -> RequestState:
        ticket = self.begin(form)
        if ticket is None:
            return self.state
        request_id, payload = ticket
        return self.execute(request_id, payload)
