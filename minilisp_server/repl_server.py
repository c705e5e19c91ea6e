from __future__ import annotations

"""
Simple TCP REPL server for minilisp.

Protocol: JSON per line over TCP.
- Request: {"cmd": "eval", "code": "(progn ...)"}
- Response: {"ok": true, "result": <printed value>, "output": <println text>}
  or {"ok": false, "kind": <error kind>, "error": <message>, "output": <println text>}

A single Interpreter is kept alive so that definitions persist across
requests and clients.
"""

import json
import logging
import socket
import threading
from io import StringIO
from typing import Any, Tuple

from minilisp.errors import LispError
from minilisp.interpreter import EvalResult, Interpreter


logger = logging.getLogger(__name__)

HOST = "127.0.0.1"
PORT = 8765


class ReplServer:
    def __init__(self, host: str = HOST, port: int = PORT, interp: Interpreter | None = None):
        self.host = host
        self.port = port
        # Keep a single interpreter to maintain session state
        self.interp = interp or Interpreter()
        # Evaluation touches process-global runtime settings; one request at a time
        self._lock = threading.Lock()

    def serve_forever(self):
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
            s.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
            s.bind((self.host, self.port))
            s.listen(5)
            logger.info("listening on %s:%d", self.host, self.port)
            while True:
                conn, addr = s.accept()
                threading.Thread(target=self._handle_client, args=(conn, addr), daemon=True).start()

    def handle_request(self, req: Any) -> dict:
        if not isinstance(req, dict) or req.get("cmd") != "eval":
            cmd = req.get("cmd") if isinstance(req, dict) else None
            return {"ok": False, "kind": "ProtocolError", "error": f"Unknown cmd: {cmd}"}
        code = req.get("code", "")
        if not isinstance(code, str):
            return {"ok": False, "kind": "ProtocolError", "error": "code must be a string"}
        with self._lock:
            captured = StringIO()
            previous_output = self.interp.output
            self.interp.output = captured
            try:
                result = self.interp.try_eval(code)
                if result.ok:
                    return {"ok": True, "result": str(result), "output": captured.getvalue()}
            except LispError as exc:
                # the value was computed but cannot be printed
                result = EvalResult(ok=False, error=exc)
            finally:
                self.interp.output = previous_output
        return {
            "ok": False,
            "kind": result.kind,
            "error": str(result.error),
            "output": captured.getvalue(),
        }

    def _handle_client(self, conn: socket.socket, addr: Tuple[str, int]):
        logger.info("client connected: %s", addr)
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
                    try:
                        req = json.loads(line.decode("utf-8"))
                    except ValueError as ex:
                        resp = {"ok": False, "kind": "ProtocolError", "error": f"Invalid request: {ex}"}
                    else:
                        resp = self.handle_request(req)
                    conn.sendall((json.dumps(resp) + "\n").encode("utf-8"))
        logger.info("client disconnected: %s", addr)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    ReplServer().serve_forever()
