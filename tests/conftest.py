import pytest

from jsonpath_assert import HTTPRequest


@pytest.fixture
def hello_body():
    return '{"a": 12345, "b": [{"key": "c", "value": "result"}]}'


@pytest.fixture
def nested_body():
    return '{"a": {"b": {"c": {"d": 1, "f": [3, 4, 5]}}}}'


@pytest.fixture
def json_request():
    return HTTPRequest.from_json("POST", "http://localhost:8080/hello", {"name": "jan", "tags": ["a", "b"]})
