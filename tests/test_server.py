import io
import os
import signal
from unittest import mock

import pytest

from sigtalk.bits import encode_byte, encode_message, signal_for_bit
from sigtalk.server import Receiver, main


@pytest.fixture
def kill():
    with mock.patch("sigtalk.server.os.kill") as fake:
        yield fake


def test_full_byte_is_written(kill):
    out = io.BytesIO()
    receiver = Receiver(out, 0)
    results = [receiver.handle(signal_for_bit(b), 55) for b in encode_byte(ord("A"))]
    assert out.getvalue() == b"A"
    assert results[-1] == ord("A")
    assert results[:-1] == [None] * 7


def test_every_bit_is_acknowledged(kill):
    receiver = Receiver(io.BytesIO(), 0)
    results = [receiver.handle(signal_for_bit(bit), 55) for bit in encode_byte(0x5A)]
    assert results[-1] == 0x5A
    assert kill.call_count == 8
    assert all(c.args == (55, signal.SIGUSR1) for c in kill.call_args_list)


def test_partial_byte_writes_nothing(kill):
    out = io.BytesIO()
    receiver = Receiver(out, 0)
    for bit in list(encode_byte(ord("z")))[:5]:
        receiver.handle(signal_for_bit(bit), 9)
    assert out.getvalue() == b""
    assert kill.call_count == 5


def test_message_round_trip(kill):
    out = io.BytesIO()
    receiver = Receiver(out, 0)
    for bit in encode_message("hello, world"):
        receiver.handle(signal_for_bit(bit), 3)
    assert out.getvalue() == b"hello, world\n"


def test_ack_goes_to_latest_sender(kill):
    receiver = Receiver(io.BytesIO(), 0)
    results = [receiver.handle(signal.SIGUSR1, 10), receiver.handle(signal.SIGUSR2, 20)]
    assert results == [None, None]
    assert [c.args[0] for c in kill.call_args_list] == [10, 20]


def test_unknown_signal_rejected(kill):
    receiver = Receiver(io.BytesIO(), 0)
    with pytest.raises(ValueError):
        receiver.handle(signal.SIGTERM, 10)
    assert kill.call_count == 0


def test_main_rejects_arguments(capsys):
    assert main(["extra"]) == -1
    assert capsys.readouterr().out.startswith("Use:")


def test_main_prints_pid_and_stops_on_interrupt(capsys):
    with mock.patch("signal.pthread_sigmask", create=True, return_value=set()), \
            mock.patch("signal.sigwaitinfo", create=True, side_effect=KeyboardInterrupt):
        assert main([]) == 0
    assert capsys.readouterr().out == f"Server PID: {os.getpid()}\n"