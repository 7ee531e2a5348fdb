import socket

from smart_chessboard.board import ChessBoard
from smart_chessboard.main import START_FEN, main


def _read_all(server):
    conn, _ = server.accept()
    with conn:
        conn.settimeout(5)
        chunks = []
        while chunk := conn.recv(4096):
            chunks.append(chunk)
    return b"".join(chunks)


def test_offline_prints_final_board(capsys):
    assert main(["--offline"]) == 0
    out = capsys.readouterr().out
    expected = ChessBoard.from_fen(START_FEN)
    for mv in ("E2E4", "E7E5", "G1F3"):
        expected.move(mv)
    capsys.readouterr()
    assert out.endswith(expected.render())
    assert out.startswith(ChessBoard.from_fen(START_FEN).render())


def test_moves_are_sent_to_server():
    with socket.create_server(("127.0.0.1", 0)) as server:
        port = server.getsockname()[1]
        assert main(["--port", str(port)]) == 0
        assert _read_all(server) == b"E2E4E7E5G1F3"


def test_invalid_move_reported(capsys):
    assert main(["--offline", "E2E5"]) == 0
    assert "Invalid Move\n" in capsys.readouterr().out


def test_malformed_move_reported(capsys):
    assert main(["--offline", "Z9"]) == 0
    assert "Invalid Move structure" in capsys.readouterr().out


def test_unreachable_server_fails(capsys):
    probe = socket.create_server(("127.0.0.1", 0))
    port = probe.getsockname()[1]
    probe.close()
    assert main(["--port", str(port), "E2E4"]) == 1
    assert "[ERROR]" in capsys.readouterr().out