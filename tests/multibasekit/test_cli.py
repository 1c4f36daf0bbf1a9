import io

import pytest

from multibasekit.cli import main


def _stdin(monkeypatch, data: bytes):
    monkeypatch.setattr("sys.stdin", io.TextIOWrapper(io.BytesIO(data)))


def test_encode_text(capsysbinary):
    assert main(["encode", "base58_btc", "--text", "hello"]) == 0
    assert capsysbinary.readouterr().out == b"zCn8eVZg\n"


def test_encode_hex_and_stdin(capsysbinary, monkeypatch):
    assert main(["encode", "base16_upper", "--hex", "00ff"]) == 0
    assert capsysbinary.readouterr().out == b"F00FF\n"

    _stdin(monkeypatch, b"hi")
    assert main(["encode", "base64"]) == 0
    assert capsysbinary.readouterr().out == b"maGk\n"


def test_decode(capsysbinary, monkeypatch):
    assert main(["decode", "zCn8eVZg"]) == 0
    assert capsysbinary.readouterr().out == b"68656c6c6f\n"

    assert main(["decode", "zCn8eVZg", "--raw"]) == 0
    assert capsysbinary.readouterr().out == b"hello\n"

    _stdin(monkeypatch, b"maGk\n")
    assert main(["decode", "--raw"]) == 0
    assert capsysbinary.readouterr().out == b"hi\n"


def test_codec_and_encodings(capsysbinary):
    assert main(["codec", "zCn8eVZg"]) == 0
    assert capsysbinary.readouterr().out == b"base58_btc\n"

    assert main(["encodings", "--family", "base58"]) == 0
    assert capsysbinary.readouterr().out == b"base58_flickr\nbase58_btc\n"

    assert main(["encodings"]) == 0
    assert len(capsysbinary.readouterr().out.splitlines()) == 22

    assert main(["encodings", "--families"]) == 0
    assert b"base32" in capsysbinary.readouterr().out.splitlines()


@pytest.mark.parametrize(
    "argv",
    [
        ["encode", "nonsense_codec", "--text", "x"],
        ["encode", "base16_lower", "--hex", "zz"],
        ["decode", "Xgarbage"],
        ["decode", "z0OIl"],
        ["codec", "*&^"],
        ["encodings", "--family", "base36"],
    ],
)
def test_failures_exit_non_zero(argv, capsysbinary):
    assert main(argv) == 1
    captured = capsysbinary.readouterr()
    assert captured.out == b""
    assert b"error:" in captured.err


def test_decode_stdin_strips_only_one_line_end(capsysbinary, monkeypatch):
    # identity payload that itself ends in a newline
    _stdin(monkeypatch, b"\x00ab\n\n")
    assert main(["decode"]) == 0
    assert capsysbinary.readouterr().out == b"61620a\n"

    _stdin(monkeypatch, b"\x00ab\r\n\r\n")
    assert main(["decode"]) == 0
    assert capsysbinary.readouterr().out == b"61620d0a\n"


def test_decode_stdin_no_strip(capsysbinary, monkeypatch):
    _stdin(monkeypatch, b"\x00ab\n")
    assert main(["decode", "--no-strip"]) == 0
    assert capsysbinary.readouterr().out == b"61620a\n"
