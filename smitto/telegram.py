"""A service that polls a Telegram bot for messages and sends replies."""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, MutableMapping
from typing import Any

import requests

from .service import Service

_log = logging.getLogger(__name__)

API_URL = "https://api.telegram.org"
UPDATE_ID_SETTING = "TelegramBot/update_id"
REQUEST_TIMEOUT = 30.0


def _to_int(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return 0
    return int(value)


def _to_dict(value: Any) -> dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _to_str(value: Any) -> str:
    return value if isinstance(value, str) else ""


class TelegramService(Service):
    """Polls the bot's updates and passes messages from ``chat_id`` on.

    Texts of received messages go to every callable in
    ``message_received_handlers``. The last processed update id is kept in
    ``settings`` between runs.
    """

    def __init__(
        self,
        token: str,
        botname: str = "",
        settings: MutableMapping[str, str] | None = None,
        session: requests.Session | None = None,
    ) -> None:
        super().__init__("TelegramService", 1.0)
        self.botname = botname
        self.settings: MutableMapping[str, str] = settings if settings is not None else {}
        self.chat_id = 0
        self.update_id = 0
        self.message_received_handlers: list[Callable[[str], Any]] = []
        self._token = token.strip()
        self._session = session if session is not None else requests.Session()
        self._updates_lock = threading.Lock()

    def _call(self, method: str, endpoint: str, **kwargs: Any) -> dict[str, Any] | None:
        url = f"{API_URL}/bot{self._token}/{endpoint}"
        try:
            response = self._session.request(method, url, timeout=REQUEST_TIMEOUT, **kwargs)
            response.raise_for_status()
        except requests.RequestException as exc:
            _log.error("err %s", exc)
            return None
        try:
            document = _to_dict(response.json())
        except ValueError:
            document = {}
        if document.get("ok") is True:
            return document
        _log.debug("%s", response.text)
        return None

    def auth(self) -> dict[str, Any] | None:
        """Ask who the bot is; return its description or ``None`` on failure."""
        document = self._call("GET", "getMe")
        if document is None:
            return None
        result = _to_dict(document.get("result"))
        _log.info(
            "TelegramBot: %s {username:%s} id:%d",
            _to_str(result.get("first_name")),
            _to_str(result.get("username")),
            _to_int(result.get("id")),
        )
        return result

    def get_updates(self) -> list[str]:
        """Fetch new updates; return the texts of messages passed on."""
        if not self._updates_lock.acquire(blocking=False):
            return []
        try:
            document = self._call("GET", "getUpdates", params={"offset": self.update_id + 1})
            if document is None:
                return []
            return self.handle_updates(document)
        finally:
            self._updates_lock.release()

    def handle_updates(self, payload: dict[str, Any]) -> list[str]:
        """Process a ``getUpdates`` answer; return the texts passed on."""
        if _to_dict(payload).get("ok") is not True:
            return []
        updates = payload.get("result")
        received: list[str] = []
        for update in updates if isinstance(updates, list) else []:
            update = _to_dict(update)
            update_id = _to_int(update.get("update_id"))
            if update_id <= self.update_id:
                continue
            self.update_id = update_id
            message = update.get("message")
            if not isinstance(message, dict):
                continue
            sender = _to_dict(message.get("from"))
            if _to_int(sender.get("id")) == self.chat_id:
                text = _to_str(message.get("text"))
                received.append(text)
                for handler in list(self.message_received_handlers):
                    handler(text)
        return received

    def send_message(self, text: str, chat_id: int = 0) -> bool:
        """Send ``text`` to ``chat_id`` or the configured chat; tell if it went."""
        target = chat_id or self.chat_id
        if not target or not self._token:
            return False
        document = self._call(
            "POST",
            "sendMessage",
            json={"chat_id": target, "text": text},
            headers={"Connection": "close"},
        )
        return document is not None

    def prepare_start(self) -> bool:
        """Refuse to start without a token; restore the update id and authorise."""
        if not self._token:
            _log.error("TelegramBot: preparing the service, token is not set")
            return False
        try:
            self.update_id = int(self.settings.get(UPDATE_ID_SETTING, 0))
        except (TypeError, ValueError):
            self.update_id = 0
        _log.info("TelegramBot: preparing the service, update_id=%d", self.update_id)
        self.auth()
        return True

    def process_work(self) -> None:
        """Poll for updates."""
        self.get_updates()

    def process_stop(self) -> None:
        """Remember the last processed update id."""
        self.settings[UPDATE_ID_SETTING] = str(self.update_id)