"""Send a message to a receiving process one bit per signal."""

from __future__ import annotations

import os
import signal
import sys
import time
from types import FrameType, TracebackType

from sigtalk.bits import encode_byte, encode_message, signal_for_bit
from sigtalk.numbers import parse_int

ACK_SIGNAL = signal.SIGUSR1
DEFAULT_POLL_INTERVAL = 0.00001


class Sender:
    """Transmit bytes to *pid*, waiting for an acknowledgement after each bit.

    The acknowledgement handler for SIGUSR1 is installed on construction and
    the previous handler is restored when the sender is closed.
    """

    def __init__(self, pid: int, poll_interval: float = DEFAULT_POLL_INTERVAL) -> None:
        if pid <= 0:
            raise ValueError(f"invalid PID: {pid!r}")
        self.pid = pid
        self.poll_interval = poll_interval
        self._acked = False
        self._previous = signal.signal(ACK_SIGNAL, self._on_ack)

    def _on_ack(self, signum: int, frame: FrameType | None) -> None:
        self._acked = True

    def _send_bit(self, bit: int) -> None:
        self._acked = False
        os.kill(self.pid, signal_for_bit(bit))
        while not self._acked:
            time.sleep(self.poll_interval)

    def send_byte(self, value: int) -> None:
        """Send the eight bits of *value*, least significant first."""
        for bit in encode_byte(value):
            self._send_bit(bit)

    def send_message(self, message: bytes | str) -> None:
        """Send *message* followed by a newline."""
        for bit in encode_message(message):
            self._send_bit(bit)

    def close(self) -> None:
        """Restore the signal handler that was in place before."""
        if self._previous is not None:
            signal.signal(ACK_SIGNAL, self._previous)
            self._previous = None

    def __enter__(self) -> Sender:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


def main(argv: list[str] | None = None) -> int:
    """Send the message given on the command line to the server PID."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 2:
        sys.stderr.write("Usage: sigtalk-client [server_pid] [message]\n")
        return -1
    pid = parse_int(args[0])
    if pid <= 0:
        sys.stderr.write("Invalid PID\n")
        return -1
    try:
        with Sender(pid) as sender:
            sender.send_message(args[1])
    except OSError as exc:
        sys.stderr.write(f"{exc}\n")
        return -1
    return 0


if __name__ == "__main__":
    sys.exit(main())