from unittest.mock import MagicMock, patch

import pytest
import requests

from inhand.api import salary_client
from inhand.core.sample_payloads import SAMPLE_BREAKDOWN, SAMPLE_FORM


def _response(status: int, body: bytes) -> requests.Response:
    resp = requests.Response()
    resp.status_code = status
    resp._content = body
    resp.url = "http://localhost:5000/api/salary"
    return resp


def test_api_base_strips_endpoint_and_slash():
    assert salary_client.api_base("http://localhost:5000/") == "http://localhost:5000"
    assert salary_client.api_base("https://calc.example.com/api/salary") == "https://calc.example.com"
    assert salary_client.salary_endpoint("http://10.0.0.2:8080") == "http://10.0.0.2:8080/api/salary"


def test_default_base_is_local():
    assert salary_client.DEFAULT_API_URL == "http://localhost:5000"


def test_post_salary_sends_json_body():
    with patch.object(salary_client.requests, "post", return_value=_response(200, b'{"status": "success"}')) as post:
        body = salary_client.post_salary(SAMPLE_FORM, url="http://localhost:5000")
    assert body == {"status": "success"}
    args, kwargs = post.call_args
    assert args[0] == "http://localhost:5000/api/salary"
    assert kwargs["json"] == SAMPLE_FORM
    assert kwargs["timeout"] == salary_client.SALARY_API_TIMEOUT


def test_post_salary_raises_for_error_status():
    with patch.object(salary_client.requests, "post", return_value=_response(400, b'{"error": "Invalid CTC format"}')):
        with pytest.raises(requests.HTTPError) as excinfo:
            salary_client.post_salary(SAMPLE_FORM)
    assert excinfo.value.response.json()["error"] == "Invalid CTC format"


def test_post_salary_returns_breakdown():
    import json

    raw = json.dumps(SAMPLE_BREAKDOWN).encode()
    with patch.object(salary_client.requests, "post", return_value=_response(200, raw)):
        body = salary_client.post_salary(SAMPLE_FORM)
    assert body["monthly_breakdown"]["final_in_hand_salary"] == 65000


def test_online_when_server_answers():
    with patch.object(salary_client.requests, "get", return_value=MagicMock(status_code=404)):
        assert salary_client.check_salary_service_online()


def test_offline_when_connection_refused():
    with patch.object(salary_client.requests, "get", side_effect=requests.ConnectionError("refused")):
        assert not salary_client.check_salary_service_online()


def test_offline_on_server_error():
    with patch.object(salary_client.requests, "get", return_value=MagicMock(status_code=503)):
        assert not salary_client.check_salary_service_online()
