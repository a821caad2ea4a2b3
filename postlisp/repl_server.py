"""
Simple TCP REPL server for PostLisp.

Protocol: JSON per line over TCP.
- Request: {"cmd": "eval", "code": "(1 2 +)"}
- Response: {"ok": true, "result": "(3)", "graphics": ["(1,2)", ...]}
         or {"ok": false, "error": "Error: <message>"}
- Request: {"cmd": "reset"} -> {"ok": true}

A single Interpreter is shared by every client so definitions persist across
evaluations. Evaluations are serialized with a lock; a semantic error resets
the session to the baseline environment.
"""

from __future__ import annotations

import json
import logging
import socket
import threading
from typing import Any, Tuple

from postlisp.config import get_repl_address
from postlisp.errors import PostLispSemanticError
from postlisp.interpreter import Interpreter
from postlisp.printer import to_string

logger = logging.getLogger(__name__)


class ReplServer:
    def __init__(self, host: str | None = None, port: int | None = None):
        default_host, default_port = get_repl_address()
        self.host = host if host is not None else default_host
        self.port = port if port is not None else default_port
        # Keep a single interpreter to maintain session state
        self.interp = Interpreter()
        self.lock = threading.Lock()

    def evaluate(self, code: str) -> dict[str, Any]:
        with self.lock:
            if not self.interp.parse(code):
                return {"ok": False, "error": "Error: parse error"}
            try:
                result = self.interp.eval()
            except PostLispSemanticError as ex:
                logger.info("semantic error, resetting session: %s", ex)
                self.interp.reset()
                return {"ok": False, "error": f"Error: {ex}"}
            except RecursionError:
                self.interp.reset()
                return {"ok": False, "error": "Error: maximum recursion depth exceeded"}
            return {
                "ok": True,
                "result": to_string(result),
                "graphics": [to_string(g) for g in self.interp.graphics],
            }

    def handle_request(self, req: Any) -> dict[str, Any]:
        if not isinstance(req, dict):
            return {"ok": False, "error": "Invalid request: expected a JSON object"}
        cmd = req.get("cmd")
        if cmd == "eval":
            code = req.get("code", "")
            if not isinstance(code, str):
                return {"ok": False, "error": "Invalid request: code must be a string"}
            return self.evaluate(code)
        if cmd == "reset":
            with self.lock:
                self.interp.reset()
            return {"ok": True}
        return {"ok": False, "error": f"Unknown cmd: {cmd}"}

    def handle_line(self, line: bytes) -> dict[str, Any]:
        try:
            req = json.loads(line.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as ex:
            return {"ok": False, "error": f"Invalid request: {ex}"}
        return self.handle_request(req)

    def serve_forever(self):
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
            s.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
            s.bind((self.host, self.port))
            s.listen(5)
            logger.info("listening on %s:%d", self.host, self.port)
            while True:
                conn, addr = s.accept()
                threading.Thread(target=self._handle_client, args=(conn, addr), daemon=True).start()

    def _handle_client(self, conn: socket.socket, addr: Tuple[str, int]):
        logger.debug("client connected: %s", addr)
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
                    resp = self.handle_line(line)
                    conn.sendall((json.dumps(resp) + "\n").encode("utf-8"))
        logger.debug("client disconnected: %s", addr)


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(message)s")
    ReplServer().serve_forever()


if __name__ == "__main__":
    main()
