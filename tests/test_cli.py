import socket
import threading

import pytest

from imgremote.cli import build_parser, main
from imgremote.commands import Command, success_message


def _serve_once():
    server = socket.create_server(("127.0.0.1", 0))
    port = server.getsockname()[1]
    received = []

    def run():
        try:
            conn, _ = server.accept()
            with conn:
                chunks = []
                while True:
                    chunk = conn.recv(4096)
                    if not chunk:
                        break
                    chunks.append(chunk)
                received.append(b"".join(chunks))
        finally:
            server.close()

    thread = threading.Thread(target=run, daemon=True)
    thread.start()
    return port, thread, received


def _closed_port():
    probe = socket.create_server(("127.0.0.1", 0))
    port = probe.getsockname()[1]
    probe.close()
    return port


def test_parser_defaults_match_server_address():
    args = build_parser().parse_args(["save"])
    assert (args.host, args.port) == ("127.0.0.1", 9999)
    assert args.action == "save"


def test_parser_rejects_bad_color_channel():
    with pytest.raises(SystemExit):
        build_parser().parse_args(["fill-color", "0", "256", "0"])


def test_parser_requires_action():
    with pytest.raises(SystemExit):
        build_parser().parse_args([])


def test_simple_action_is_sent(capsys):
    port, thread, received = _serve_once()
    code = main(["--port", str(port), "flip-v"])
    thread.join(5)
    assert code == 0
    assert received == [b"FLIP_V"]
    assert success_message(Command.FLIP_V) in capsys.readouterr().out


def test_border_color_is_sent():
    port, thread, received = _serve_once()
    code = main(["--port", str(port), "border-color", "4", "5", "6"])
    thread.join(5)
    assert code == 0
    assert received == [b"SET_BORDERCOLOR 4 5 6"]


def test_open_sends_absolute_path(tmp_path):
    image = tmp_path / "picture.png"
    image.write_bytes(b"")
    port, thread, received = _serve_once()
    code = main(["--port", str(port), "open", str(image)])
    thread.join(5)
    assert code == 0
    assert received == [("OPEN " + str(image.absolute())).encode("cp949")]


def test_open_missing_file_is_rejected(tmp_path):
    with pytest.raises(SystemExit):
        main(["--port", str(_closed_port()), "open", str(tmp_path / "absent.png")])


def test_unreachable_server_reports_failure(capsys):
    code = main(["--port", str(_closed_port()), "--timeout", "2", "save"])
    assert code == 1
    assert "Failed to connect" in capsys.readouterr().err