import pytest
import requests


class FakeResponse:
    def __init__(self, status_code=200, payload=None, reason="OK", json_error=None):
        self.status_code = status_code
        self.reason = reason
        self._payload = payload
        self._json_error = json_error

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 400

    def json(self):
        if self._json_error is not None:
            raise self._json_error
        return self._payload


class FakeHttpSession:
    """Stands in for ``requests.Session``; replays queued responses or exceptions."""

    def __init__(self, *responses):
        self.responses = list(responses)
        self.calls = []

    def get(self, url, **kwargs):
        self.calls.append(url)
        outcome = self.responses.pop(0) if len(self.responses) > 1 else self.responses[0]
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


def make_campaign(name, **fields):
    campaign = {"name": name}
    campaign.update(fields)
    return campaign


@pytest.fixture
def buyers_dataset():
    return {
        "reports": [
            {
                "id": "buyers",
                "name": "Buyers",
                "description": "Residential buyers",
                "color": "#2C537A",
                "segments": [
                    {
                        "id": "first-time",
                        "name": "First-time Buyers",
                        "objective": "Convert enquiries to viewings",
                        "stages": {
                            "lead": {
                                "campaigns": [
                                    make_campaign("Welcome email", channel="email", timing="Day 0"),
                                    make_campaign("Follow-up SMS", channel="sms", timing="Day 2"),
                                    make_campaign("Nurture flow", channel="ma", timing="Day 5"),
                                ]
                            },
                            "deal": {"campaigns": []},
                        },
                    },
                    {
                        "id": "upsizers",
                        "name": "Upsizers",
                        "objective": "Re-engage past clients",
                        "stages": {},
                    },
                ],
            }
        ]
    }


@pytest.fixture
def ok_response(buyers_dataset):
    return FakeResponse(200, buyers_dataset)


@pytest.fixture
def server_error():
    return FakeResponse(500, None, reason="Internal Server Error")


@pytest.fixture
def connection_error():
    return requests.exceptions.ConnectionError("Connection refused")
