import io
import json
import socket
import threading

import pytest

from minilisp.interpreter import Interpreter
from minilisp_server.repl_server import ReplServer


@pytest.fixture
def server():
    return ReplServer(interp=Interpreter())


def test_eval_request(server):
    resp = server.handle_request({"cmd": "eval", "code": "(define x 2) (println x) (+ x 1)"})
    assert resp == {"ok": True, "result": "3", "output": "2\n"}


def test_definitions_persist_between_requests(server):
    server.handle_request({"cmd": "eval", "code": "(defun sq (n) (* n n))"})
    resp = server.handle_request({"cmd": "eval", "code": "(sq 12)"})
    assert resp["ok"] and resp["result"] == "144"


def test_error_response(server):
    resp = server.handle_request({"cmd": "eval", "code": "(println 1) (car 5)"})
    assert resp == {
        "ok": False,
        "kind": "TypeError",
        "error": "car accepts single list argument only",
        "output": "1\n",
    }


@pytest.mark.parametrize(
    "req",
    [{"cmd": "shutdown"}, ["eval"], {"cmd": "eval", "code": 5}],
)
def test_protocol_errors(server, req):
    resp = server.handle_request(req)
    assert resp["ok"] is False
    assert resp["kind"] == "ProtocolError"


def test_output_is_restored_after_request(server, capsys):
    server.handle_request({"cmd": "eval", "code": "(println 1)"})
    assert server.interp.output is None
    server.interp.eval("(println 2)")
    assert capsys.readouterr().out == "2\n"


def test_caller_output_is_kept_after_request():
    sink = io.StringIO()
    server = ReplServer(interp=Interpreter(output=sink))
    resp = server.handle_request({"cmd": "eval", "code": "(println 1)"})
    assert resp["output"] == "1\n"
    assert server.interp.output is sink
    server.interp.eval("(println 2)")
    assert sink.getvalue() == "2\n"


def test_cyclic_result_is_printed(server):
    resp = server.handle_request({"cmd": "eval", "code": "(define r (list 1 2)) (setcdr (cdr r) r)"})
    assert resp == {"ok": True, "result": "(2 1 . ...)", "output": ""}


def test_handle_client_line_protocol(server):
    srv_sock, client = socket.socketpair()
    worker = threading.Thread(
        target=server._handle_client, args=(srv_sock, ("local", 0)), daemon=True
    )
    worker.start()
    with client:
        client.sendall(b'{"cmd": "eval", "code": "(+ 1 2)"}\n\nnot json\n')
        reader = client.makefile("rb")
        first = json.loads(reader.readline())
        second = json.loads(reader.readline())
        reader.close()
        client.shutdown(socket.SHUT_WR)
        worker.join(timeout=5)
    assert first == {"ok": True, "result": "3", "output": ""}
    assert second["ok"] is False and second["kind"] == "ProtocolError"
    assert not worker.is_alive()
