import logging
import os
from typing import Any, Dict
from urllib.parse import urlparse, urlunparse

import requests

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "http://localhost:5000"
SALARY_API_URL = os.getenv("SALARY_API_URL") or DEFAULT_API_URL
SALARY_API_TIMEOUT = float(os.getenv("SALARY_API_TIMEOUT", "120"))
SALARY_HEALTH_TIMEOUT = float(os.getenv("SALARY_HEALTH_TIMEOUT", "1.0"))
SALARY_PATH = "/api/salary"


def api_base(url: str | None = None) -> str:
    parsed = urlparse(url or SALARY_API_URL)
    path = parsed.path.rstrip("/")
    if path.endswith(SALARY_PATH):
        path = path[: -len(SALARY_PATH)]
    base = parsed._replace(path=path, params="", query="", fragment="")
    return urlunparse(base)


def salary_endpoint(url: str | None = None) -> str:
    return f"{api_base(url)}{SALARY_PATH}"


def check_salary_service_online(timeout: float | None = None, url: str | None = None) -> bool:
    base = api_base(url)
    health_timeout = timeout if timeout is not None else SALARY_HEALTH_TIMEOUT
    for path in ("/health", "/"):
        try:
            resp = requests.get(f"{base}{path}", timeout=health_timeout)
        except requests.RequestException:
            continue
        # Any non-5xx HTTP response means the server is up.
        if resp.status_code < 500:
            return True
    return False


def post_salary(
    payload: Dict[str, str],
    timeout: float | None = None,
    url: str | None = None,
) -> Dict[str, Any]:
    endpoint = salary_endpoint(url)
    logger.debug("POST %s for %s / %s", endpoint, payload.get("company"), payload.get("position"))
    resp = requests.post(
        endpoint,
        json=payload,
        timeout=SALARY_API_TIMEOUT if timeout is None else timeout,
    )
    resp.raise_for_status()
    return resp.json()
