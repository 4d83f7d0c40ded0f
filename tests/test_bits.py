import signal

import pytest

from sigtalk.bits import (
    BitDecoder,
    bit_for_signal,
    encode_byte,
    encode_message,
    signal_for_bit,
)


def test_signal_mapping():
    assert signal_for_bit(1) == signal.SIGUSR1
    assert signal_for_bit(0) == signal.SIGUSR2


@pytest.mark.parametrize("bit", [0, 1])
def test_signal_round_trip(bit):
    assert bit_for_signal(signal_for_bit(bit)) == bit


def test_signal_for_bit_rejects_other():
    with pytest.raises(ValueError):
        signal_for_bit(2)


def test_bit_for_signal_rejects_other():
    with pytest.raises(ValueError):
        bit_for_signal(signal.SIGINT)


def test_encode_byte_lsb_first():
    assert list(encode_byte(ord("A"))) == [1, 0, 0, 0, 0, 0, 1, 0]


def test_encode_byte_extremes():
    assert list(encode_byte(0)) == [0] * 8
    assert list(encode_byte(255)) == [1] * 8


@pytest.mark.parametrize("value", [-1, 256])
def test_encode_byte_out_of_range(value):
    with pytest.raises(ValueError):
        list(encode_byte(value))


def test_encode_message_appends_newline():
    bits = list(encode_message("hi"))
    assert len(bits) == 3 * 8
    assert bits[-8:] == list(encode_byte(ord("\n")))


def test_encode_message_empty_is_just_newline():
    assert list(encode_message(b"")) == list(encode_byte(ord("\n")))


def _decode(bits):
    decoder = BitDecoder()
    out = bytearray()
    for bit in bits:
        byte = decoder.feed(bit)
        if byte is not None:
            out.append(byte)
    return bytes(out)


@pytest.mark.parametrize("message", ["hello", "", "héllo wörld", "a\nb"])
def test_round_trip_text(message):
    assert _decode(encode_message(message)) == message.encode("utf-8") + b"\n"


def test_round_trip_all_bytes():
    data = bytes(range(256))
    assert _decode(encode_message(data)) == data + b"\n"


def test_decoder_returns_none_until_full():
    decoder = BitDecoder()
    results = [decoder.feed(b) for b in encode_byte(ord("z"))]
    assert results[:7] == [None] * 7
    assert results[7] == ord("z")
    assert decoder.count == 0 and decoder.value == 0


def test_decoder_rejects_bad_bit():
    with pytest.raises(ValueError):
        BitDecoder().feed(3)