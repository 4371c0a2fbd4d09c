# apps/adapters/tests/test_purgomalum.py
"""
Tests for the PurgoMalum profanity checker
"""
from unittest.mock import MagicMock

import pytest
import requests

from apps.adapters.profanity.purgomalum import PurgomalumClient
from apps.core.exceptions import PurgomalumError


def make_client(status_code=200, text="false", side_effect=None):
    session = MagicMock(spec=requests.Session)
    if side_effect is not None:
        session.get.side_effect = side_effect
    else:
        session.get.return_value = MagicMock(status_code=status_code, text=text)
    return PurgomalumClient(base_url="https://purgomalum.test/", session=session), session


class TestPurgomalumClient:

    def test_contains_profanity_true(self):
        client, _ = make_client(text="true")

        assert client.contains_profanity("bad words") is True

    def test_contains_profanity_false(self):
        client, _ = make_client(text="false\n")

        assert client.contains_profanity("후라이드") is False

    def test_request_format(self):
        """Text is sent as a query parameter to the containsprofanity endpoint"""
        client, session = make_client()

        client.contains_profanity("양념치킨")

        session.get.assert_called_once_with(
            "https://purgomalum.test/service/containsprofanity",
            params={"text": "양념치킨"},
            timeout=5.0,
        )

    def test_error_status(self):
        client, _ = make_client(status_code=500, text="Internal error")

        with pytest.raises(PurgomalumError):
            client.contains_profanity("후라이드")

    def test_unexpected_body(self):
        client, _ = make_client(text="<html>maintenance</html>")

        with pytest.raises(PurgomalumError):
            client.contains_profanity("후라이드")

    def test_connection_error(self):
        client, _ = make_client(side_effect=requests.ConnectionError("refused"))

        with pytest.raises(PurgomalumError, match="refused"):
            client.contains_profanity("후라이드")
