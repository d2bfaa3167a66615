"""Delivery of commands to the image-editing server over TCP."""

from __future__ import annotations

import socket
from dataclasses import dataclass

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 9999
DEFAULT_TIMEOUT = 5.0
WIRE_ENCODING = "cp949"


class ServerUnavailable(ConnectionError):
    """Raised when the server cannot be reached."""


@dataclass
class CommandClient:
    """Sends each command on its own short-lived connection."""

    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    timeout: float | None = DEFAULT_TIMEOUT

    def send(self, text: str) -> int:
        """Send one command and close the connection; return the bytes sent."""
        payload = text.encode(WIRE_ENCODING, errors="replace")
        try:
            conn = socket.create_connection((self.host, self.port), timeout=self.timeout)
        except OSError as exc:
            raise ServerUnavailable(
                f"cannot connect to {self.host}:{self.port}: {exc}"
            ) from exc
        with conn:
            conn.sendall(payload)
        return len(payload)


def send_command(
    text: str,
    host: str = DEFAULT_HOST,
    port: int = DEFAULT_PORT,
    timeout: float | None = DEFAULT_TIMEOUT,
) -> int:
    """Send one command to the server at host:port."""
    return CommandClient(host, port, timeout).send(text)