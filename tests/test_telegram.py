import json
from urllib.parse import parse_qs, urlparse

import requests
import responses

from smitto.telegram import API_URL, UPDATE_ID_SETTING, TelegramService

TOKEN = "token"
BASE = f"{API_URL}/bot{TOKEN}"


def make_service(settings=None):
    return TelegramService(TOKEN, "bot", settings if settings is not None else {}, requests.Session())


def test_auth_returns_bot_description():
    service = make_service()
    with responses.RequestsMock() as rsps:
        rsps.add(
            responses.GET,
            f"{BASE}/getMe",
            json={"ok": True, "result": {"id": 7, "first_name": "Bot", "username": "bot"}},
        )
        result = service.auth()
    assert result == {"id": 7, "first_name": "Bot", "username": "bot"}


def test_auth_failure_returns_none():
    service = make_service()
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, f"{BASE}/getMe", status=401, json={"ok": False})
        assert service.auth() is None


def test_auth_not_ok_returns_none():
    service = make_service()
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, f"{BASE}/getMe", json={"ok": False})
        assert service.auth() is None


def test_handle_updates_passes_messages_from_chat():
    service = make_service()
    service.chat_id = 42
    seen = []
    service.message_received_handlers.append(seen.append)
    payload = {
        "ok": True,
        "result": [
            {"update_id": 5, "message": {"from": {"id": 42}, "text": "hello"}},
            {"update_id": 6, "message": {"from": {"id": 99}, "text": "stranger"}},
            {"update_id": 7, "message": {"from": {"id": 42}, "text": "again"}},
        ],
    }
    assert service.handle_updates(payload) == ["hello", "again"]
    assert seen == ["hello", "again"]
    assert service.update_id == 7


def test_handle_updates_skips_already_seen():
    service = make_service()
    service.chat_id = 42
    service.update_id = 10
    payload = {"ok": True, "result": [{"update_id": 9, "message": {"from": {"id": 42}, "text": "old"}}]}
    assert service.handle_updates(payload) == []
    assert service.update_id == 10


def test_handle_updates_ignores_not_ok():
    service = make_service()
    payload = {"ok": False, "result": [{"update_id": 3}]}
    assert service.handle_updates(payload) == []
    assert service.update_id == 0


def test_get_updates_asks_from_next_offset():
    service = make_service()
    service.chat_id = 42
    service.update_id = 5
    with responses.RequestsMock() as rsps:
        rsps.add(
            responses.GET,
            f"{BASE}/getUpdates",
            json={"ok": True, "result": [{"update_id": 6, "message": {"from": {"id": 42}, "text": "hi"}}]},
        )
        received = service.get_updates()
        query = parse_qs(urlparse(rsps.calls[0].request.url).query)
    assert query == {"offset": ["6"]}
    assert received == ["hi"]
    assert service.update_id == 6


def test_send_message_without_chat_sends_nothing():
    service = make_service()
    with responses.RequestsMock() as rsps:
        assert service.send_message("hello") is False
        assert len(rsps.calls) == 0


def test_send_message_without_token_sends_nothing():
    service = TelegramService("", "bot", {}, requests.Session())
    with responses.RequestsMock() as rsps:
        assert service.send_message("hello", 42) is False
        assert len(rsps.calls) == 0


def test_send_message_posts_json_to_default_chat():
    service = make_service()
    service.chat_id = 42
    with responses.RequestsMock() as rsps:
        rsps.add(responses.POST, f"{BASE}/sendMessage", json={"ok": True, "result": {}})
        assert service.send_message("hello") is True
        body = json.loads(rsps.calls[0].request.body)
    assert body == {"chat_id": 42, "text": "hello"}


def test_prepare_start_without_token_refuses():
    service = TelegramService("", "bot", {}, requests.Session())
    assert service.prepare_start() is False


def test_prepare_start_restores_update_id_and_authorises():
    service = make_service({UPDATE_ID_SETTING: "17"})
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, f"{BASE}/getMe", json={"ok": True, "result": {"id": 1}})
        assert service.prepare_start() is True
        assert len(rsps.calls) == 1
    assert service.update_id == 17


def test_process_stop_saves_update_id():
    settings = {}
    service = make_service(settings)
    service.update_id = 23
    service.process_stop()
    assert settings[UPDATE_ID_SETTING] == "23"


def test_process_work_fetches_updates():
    service = make_service()
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, f"{BASE}/getUpdates", json={"ok": True, "result": [{"update_id": 4}]})
        service.process_work()
        assert len(rsps.calls) == 1
    assert service.update_id == 4