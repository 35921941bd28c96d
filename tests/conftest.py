import pytest

from lotto_checker import create_app
from lotto_checker.clients.check_client import LottoCheckClient


CHECK_URL = "http://scoring.test/api/lotto/check"

_NOT_JSON = object()


class FakeResponse:
    def __init__(self, status_code=200, body=None):
        self.status_code = status_code
        self._body = body

    @property
    def ok(self):
        return 200 <= self.status_code < 300

    def json(self):
        if self._body is _NOT_JSON:
            raise ValueError("Expecting value: line 1 column 1 (char 0)")
        return self._body


class FakeHttp:
    """Stands in for requests.Session; records every POST."""

    def __init__(self):
        self.calls = []
        self.response = FakeResponse(200, {"winningNumbers": None, "results": []})
        self.error = None

    def reply(self, body, status_code=200):
        self.response = FakeResponse(status_code, body)

    def reply_not_json(self, status_code=200):
        self.response = FakeResponse(status_code, _NOT_JSON)

    def fail_with(self, error):
        self.error = error

    def post(self, url, json=None, timeout=None):
        self.calls.append({"url": url, "json": json, "timeout": timeout})
        if self.error is not None:
            raise self.error
        return self.response

    @property
    def sent_lines(self):
        return [c["json"]["userLottoStrings"] for c in self.calls]


WINNING = {
    "winningNumbers": [3, 11, 19, 25, 33, 41],
    "bonusNumber": 7,
    "drwNo": 1150,
    "firstPrize": 2000000000,
}


@pytest.fixture()
def fake_http():
    return FakeHttp()


@pytest.fixture()
def check_client(fake_http):
    return LottoCheckClient(CHECK_URL, timeout_seconds=3.0, http=fake_http)


@pytest.fixture()
def app(fake_http):
    app = create_app({"TESTING": True, "CHECK_API_URL": CHECK_URL, "CHECK_API_TIMEOUT": 3.0})
    app.extensions["check_client"] = LottoCheckClient(CHECK_URL, timeout_seconds=3.0, http=fake_http)
    return app


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def winning():
    return dict(WINNING)
