"""
Testing secret generation
- Trick: replace requests.get with a fake so nothing touches the network.
"""

import collections

import pytest
import requests

import cows_bulls.random_client as random_client
from cows_bulls.config import Settings

LOCAL = Settings(random_source="local")
REMOTE = Settings(random_source="random.org", random_timeout=1.0)


class FakeResponse:
    def __init__(self, text: str, status_code: int = 200):
        self.text = text
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code != 200:
            raise requests.HTTPError(f"{self.status_code} error")


def test_generate_gives_four_unique_digits():
    for _ in range(200):
        secret = random_client.generate(LOCAL)
        assert len(secret) == 4
        assert len(set(secret)) == 4
        for digit in secret:
            assert 0 <= digit <= 9


def test_generate_is_roughly_uniform_per_position():
    # 4000 samples -> each digit expected 400 times per position
    counts = [collections.Counter() for _ in range(4)]
    for _ in range(4000):
        secret = random_client.generate(LOCAL)
        for position, digit in enumerate(secret):
            counts[position][digit] += 1

    for position_counts in counts:
        assert set(position_counts) == set(range(10))
        for digit in range(10):
            # very loose bounds: this should never flake
            assert 250 < position_counts[digit] < 550


def test_generate_uses_random_org_sequence(monkeypatch):
    calls = []

    def fake_get(url, params=None, timeout=None):
        calls.append((url, params, timeout))
        return FakeResponse("5\n0\n9\n2\n1\n3\n4\n6\n7\n8\n")

    monkeypatch.setattr(random_client.requests, "get", fake_get)

    assert random_client.generate(REMOTE) == [5, 0, 9, 2]
    url, params, timeout = calls[0]
    assert url == random_client.SEQUENCE_URL
    assert params["min"] == 0 and params["max"] == 9
    assert timeout == 1.0


@pytest.mark.parametrize(
    "response",
    [
        FakeResponse("", status_code=503),
        FakeResponse("1\n2\n3\n"),              # too short
        FakeResponse("1\n1\n2\n3\n4\n5\n6\n7\n8\n9\n"),  # repeated digit
        FakeResponse("<html>oops</html>"),      # not numbers
    ],
)
def test_generate_falls_back_on_bad_response(monkeypatch, caplog, response):
    monkeypatch.setattr(random_client.requests, "get", lambda *args, **kwargs: response)

    secret = random_client.generate(REMOTE)

    assert len(secret) == 4
    assert len(set(secret)) == 4
    assert "using local shuffle" in caplog.text


def test_generate_falls_back_when_offline(monkeypatch):
    def offline(*args, **kwargs):
        raise requests.ConnectionError("no internet")

    monkeypatch.setattr(random_client.requests, "get", offline)

    secret = random_client.generate(REMOTE)
    assert len(set(secret)) == 4


def test_local_source_never_calls_network(monkeypatch):
    def boom(*args, **kwargs):
        raise AssertionError("network used")

    monkeypatch.setattr(random_client.requests, "get", boom)
    assert len(random_client.generate(LOCAL)) == 4
