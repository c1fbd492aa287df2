"""Tests for the requests-backed Transport."""

import logging
import sys
import os
from unittest.mock import MagicMock

import pytest
import requests

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from tgbind.transport import Transport

URL = "https://api.telegram.org/bot123:SECRET/getMe"


def _response(content: bytes, status: int = 200) -> MagicMock:
    response = MagicMock()
    response.status_code = status
    response.content = content
    return response


# ── Blocking calls ───────────────────────────────────────────────────────────


class TestBlockingCalls:
    def test_get(self) -> None:
        session = MagicMock()
        session.get.return_value = _response(b'{"ok":true}')
        assert Transport(session=session, timeout=5).get(URL) == b'{"ok":true}'
        session.get.assert_called_once_with(URL, timeout=5)

    def test_post_sends_utf8_json(self) -> None:
        session = MagicMock()
        session.post.return_value = _response(b"{}")
        Transport(session=session).post(URL, '{"text":"héllo"}')
        session.post.assert_called_once_with(
            URL,
            data='{"text":"héllo"}'.encode("utf-8"),
            headers={"Content-Type": "application/json"},
            timeout=None,
        )

    def test_error_status_returns_body(self) -> None:
        body = b'{"ok":false,"error_code":401,"description":"Unauthorized"}'
        session = MagicMock()
        session.get.return_value = _response(body, status=401)
        assert Transport(session=session).get(URL) == body

    def test_fetch_raises_on_error_status(self) -> None:
        response = _response(b"Not Found", status=404)
        response.raise_for_status.side_effect = requests.HTTPError("404 Client Error")
        session = MagicMock()
        session.get.return_value = response
        with pytest.raises(requests.HTTPError):
            Transport(session=session).fetch("https://api.telegram.org/file/bot123:SECRET/x.jpg")

    def test_log_omits_token(self, caplog: pytest.LogCaptureFixture) -> None:
        session = MagicMock()
        session.get.return_value = _response(b"{}")
        with caplog.at_level(logging.DEBUG, logger="tgbind"):
            Transport(session=session).get(URL)
        record = next(r for r in caplog.records if r.name == "tgbind.transport")
        assert record.api_endpoint == "getMe"
        assert record.status_code == 200
        assert "SECRET" not in str(record.__dict__)


# ── Async entry points ───────────────────────────────────────────────────────


class TestAsyncRequest:
    @pytest.mark.asyncio
    async def test_get(self) -> None:
        session = MagicMock()
        session.get.return_value = _response(b'{"ok":true,"result":true}')
        assert await Transport(session=session).request("GET", URL) == b'{"ok":true,"result":true}'
        session.post.assert_not_called()

    @pytest.mark.asyncio
    async def test_post_without_body_sends_empty_object(self) -> None:
        session = MagicMock()
        session.post.return_value = _response(b"{}")
        await Transport(session=session).request("post", URL)
        assert session.post.call_args.kwargs["data"] == b"{}"

    @pytest.mark.asyncio
    async def test_unsupported_method(self) -> None:
        with pytest.raises(ValueError):
            await Transport(session=MagicMock()).request("PUT", URL, "{}")

    @pytest.mark.asyncio
    async def test_connection_error_propagates(self) -> None:
        session = MagicMock()
        session.post.side_effect = requests.ConnectionError("refused")
        with pytest.raises(requests.ConnectionError):
            await Transport(session=session).request("POST", URL, "{}")

    @pytest.mark.asyncio
    async def test_download(self) -> None:
        session = MagicMock()
        session.get.return_value = _response(b"\x00\x01")
        assert await Transport(session=session).download("https://api.telegram.org/file/bot1:x/a.bin") == b"\x00\x01"


class TestLifecycle:
    def test_close(self) -> None:
        session = MagicMock()
        Transport(session=session).close()
        session.close.assert_called_once_with()

    def test_default_session(self) -> None:
        transport = Transport(timeout=2.5)
        assert isinstance(transport._session, requests.Session)
        assert transport.timeout == 2.5
        transport.close()
