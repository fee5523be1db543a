# -*- coding: utf-8 -*-
"""
arena_client.py - Are.na API client
Builds text blocks from clipboard content and posts them to a channel
"""

import json
from typing import Optional, Callable
from dataclasses import dataclass
from urllib.parse import quote
import requests

from .config import DEFAULT_REQUEST_TIMEOUT

ARENA_API_ENDPOINT = "https://api.are.na/v2/channels/{slug}/blocks"
USER_AGENT = "Clip2Arena Connector (https://github.com/animanoir)"
PREVIEW_LENGTH = 40


def normalize_content(content: str) -> str:
    """Collapse line breaks to single spaces"""
    return content.replace("\r\n", " ").replace("\n", " ").replace("\r", " ")


def preview(content: str, length: int = PREVIEW_LENGTH) -> str:
    """Short single-line preview for status messages"""
    text = normalize_content(content)
    return text[:length] + "..." if len(text) > length else text


@dataclass
class ArenaBlock:
    """A text block as sent to Are.na"""
    content: str
    title: str = ""

    @classmethod
    def from_clipboard(cls, content: str, title: str = "") -> 'ArenaBlock':
        return cls(content=normalize_content(content), title=title or "")

    def to_dict(self) -> dict:
        """Convert to the API payload; title is omitted when empty"""
        data = {'content': self.content}
        if self.title:
            data['title'] = self.title
        return data

    def to_json(self) -> bytes:
        """Compact UTF-8 JSON body"""
        return json.dumps(
            self.to_dict(), ensure_ascii=False, separators=(',', ':')
        ).encode('utf-8')


@dataclass
class SendOutcome:
    """Result of one send attempt"""
    success: bool
    message: str
    status_code: Optional[int] = None
    content: str = ""


class ArenaClient:
    """
    Posts text blocks to an Are.na channel.
    Each call is independent and safe to run from several threads at once.
    """

    def __init__(
        self,
        timeout: float = DEFAULT_REQUEST_TIMEOUT,
        user_agent: str = USER_AGENT,
        on_log: Optional[Callable[[str], None]] = None
    ):
        self.timeout = timeout
        self.user_agent = user_agent
        self.on_log = on_log or (lambda x: None)

    def _log(self, message: str):
        self.on_log(f"[ARENA] {message}")

    @staticmethod
    def block_url(channel_slug: str) -> str:
        return ARENA_API_ENDPOINT.format(slug=quote(channel_slug, safe=''))

    def _headers(self, token: str) -> dict:
        return {
            'Content-Type': 'application/json',
            'Authorization': f'Bearer {token}',
            'User-Agent': self.user_agent
        }

    def send_block(self, token: str, channel_slug: str, content: str, title: str = "") -> SendOutcome:
        """Send clipboard text as a block and classify the response"""
        block = ArenaBlock.from_clipboard(content, title)
        short = preview(content)

        try:
            body = block.to_json()
        except (TypeError, ValueError) as e:
            # UnicodeEncodeError (e.g. unpaired surrogates) is a ValueError
            return SendOutcome(False, f"❌ Error encoding JSON: {e}", content=short)

        self._log(f"Posting {len(body)} bytes to channel '{channel_slug}'")
        try:
            response = requests.post(
                self.block_url(channel_slug),
                data=body,
                headers=self._headers(token),
                timeout=self.timeout
            )
        except requests.RequestException as e:
            return SendOutcome(False, f"❌ Error sending request to Are.na: {e}", content=short)

        status = response.status_code
        if 200 <= status < 300:
            return SendOutcome(True, f"✅ Sent to Are.na! (Status: {status})", status, short)

        try:
            detail = response.text
        except (ValueError, requests.RequestException):
            detail = ""
        return SendOutcome(
            False,
            f"❌ Error sending to Are.na. Status: {status}, Response: {detail}",
            status,
            short
        )
