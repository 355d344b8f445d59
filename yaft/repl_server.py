from __future__ import annotations

"""
Simple TCP REPL server for yaft.

Protocol: JSON per line over TCP.
- Request: {"cmd": "eval", "code": "1 2 +"} or {"cmd": "clear"}
- Response: {"ok": true, "stack": "[ 3 ]"}
  or {"ok": false, "error": <message>, "stack": <rendered stack>}

Each connection gets its own Interpreter, so definitions persist across
requests on one connection and are never shared between connections.
"""

import json
import logging
import socket
import threading
from typing import Tuple

from yaft.config import get_server_address
from yaft.interpreter import Interpreter
from yaft.printer import format_stack
from yaft.types.errors import YaftError

logger = logging.getLogger(__name__)


def handle_request(interp: Interpreter, line: bytes | str) -> dict:
    """Answer one request line against the connection's session."""
    try:
        req = json.loads(line)
    except ValueError as ex:
        return {"ok": False, "error": f"Invalid request: {ex}"}
    if not isinstance(req, dict):
        return {"ok": False, "error": "Invalid request: expected a JSON object"}

    cmd = req.get("cmd")
    if cmd == "eval":
        code = req.get("code", "")
        if not isinstance(code, str):
            return {"ok": False, "error": "Invalid request: code must be a string"}
        try:
            interp.eval(code)
        except YaftError as ex:
            return {"ok": False, "error": str(ex), "stack": format_stack(interp.stack)}
        return {"ok": True, "stack": format_stack(interp.stack)}
    if cmd == "clear":
        interp.reset()
        return {"ok": True, "stack": format_stack(interp.stack)}
    return {"ok": False, "error": f"Unknown cmd: {cmd}"}


class ReplServer:
    def __init__(self, host: str | None = None, port: int | None = None):
        default_host, default_port = get_server_address()
        self.host = host if host is not None else default_host
        self.port = port if port is not None else default_port

    def serve_forever(self):
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
            s.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
            s.bind((self.host, self.port))
            s.listen(5)
            logger.info("Listening on %s:%d", self.host, self.port)
            while True:
                conn, addr = s.accept()
                threading.Thread(target=self._handle_client, args=(conn, addr), daemon=True).start()

    def _handle_client(self, conn: socket.socket, addr: Tuple[str, int]):
        logger.info("Connection from %s:%d", *addr)
        interp = Interpreter()
        with conn:
            buf = b""
            while True:
                data = conn.recv(4096)
                if not data:
                    break
                buf += data
                while b"\n" in buf:
                    line, buf = buf.split(b"\n", 1)
                    line = line.strip()
                    if not line:
                        continue
                    resp = handle_request(interp, line)
                    conn.sendall((json.dumps(resp) + "\n").encode("utf-8"))


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    ReplServer().serve_forever()
