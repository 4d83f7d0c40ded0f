"""Receive messages sent one bit per signal and write them out."""

from __future__ import annotations

import os
import signal
import sys
import time
from typing import BinaryIO

from sigtalk.bits import BitDecoder, bit_for_signal
from sigtalk.numbers import int_to_str

ACK_SIGNAL = signal.SIGUSR1
DATA_SIGNALS = frozenset({signal.SIGUSR1, signal.SIGUSR2})
DEFAULT_ACK_DELAY = 0.0001


class Receiver:
    """Decode incoming bit signals into bytes written to *output*."""

    def __init__(self, output: BinaryIO, ack_delay: float = DEFAULT_ACK_DELAY) -> None:
        self.output = output
        self.ack_delay = ack_delay
        self.decoder = BitDecoder()

    def handle(self, signum: int, sender_pid: int) -> int | None:
        """Take one bit signal from *sender_pid* and acknowledge it.

        Returns the completed byte, or None while a byte is still partial.
        """
        byte = self.decoder.feed(bit_for_signal(signum))
        if byte is not None:
            self.output.write(bytes([byte]))
            self.output.flush()
        if self.ack_delay:
            time.sleep(self.ack_delay)
        os.kill(sender_pid, ACK_SIGNAL)
        return byte

    def serve(self) -> None:
        """Wait for bit signals forever, handling each with its sender's PID."""
        previous = signal.pthread_sigmask(signal.SIG_BLOCK, DATA_SIGNALS)
        try:
            while True:
                info = signal.sigwaitinfo(DATA_SIGNALS)
                self.handle(info.si_signo, info.si_pid)
        finally:
            signal.pthread_sigmask(signal.SIG_SETMASK, previous)


def main(argv: list[str] | None = None) -> int:
    """Print this process's PID and receive messages until interrupted."""
    args = sys.argv[1:] if argv is None else list(argv)
    if args:
        sys.stdout.write("Use: sigtalk-server\n")
        return -1
    sys.stdout.write(f"Server PID: {int_to_str(os.getpid())}\n")
    sys.stdout.flush()
    receiver = Receiver(sys.stdout.buffer)
    try:
        receiver.serve()
    except KeyboardInterrupt:
        return 0
    return 0


if __name__ == "__main__":
    sys.exit(main())