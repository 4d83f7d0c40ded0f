# sigtalk

sigtalk sends text from one process to another on the same machine. It uses
only the two user signals, `SIGUSR1` and `SIGUSR2`, and each signal carries
one bit. After every bit the receiver sends `SIGUSR1` back to the sender. The
sender waits for that acknowledgement before it sends the next bit.

The sender works on any POSIX system. The receiver waits for signals with
`signal.sigwaitinfo`, and Python offers that call on Linux but not on macOS,
so you need Linux to run the receiver.

## Installation

```
pip install .
```

## Usage

Start the receiver in one terminal:

```
sigtalk-server
```

The receiver prints its process id and then waits for signals until you
interrupt it with Ctrl-C:

```
Server PID: 12345
```

From another terminal, send a message to that process id:

```
sigtalk-client 12345 "hello there"
```

The receiver writes `hello there` followed by a newline to its standard
output.

`sigtalk-client` expects exactly two arguments, the process id and the
message. If you give it a different number of arguments, or a process id that
is not a positive number, or if a signal cannot be delivered, it writes an
error to standard error and exits with a non-zero status. `sigtalk-server`
takes no arguments. If you give it any, it prints a usage line and exits with
a non-zero status.

## Wire format

- The client encodes a text message as UTF-8 and appends a newline.
- It sends the bits of each byte least significant bit first.
- `SIGUSR1` means 1 and `SIGUSR2` means 0.
- The receiver writes each byte to standard output once it has collected
  eight bits, and acknowledges every bit with `SIGUSR1` to the process that
  sent it.

## Library use

- `sigtalk.bits`:
  - `signal_for_bit` and `bit_for_signal` map between bits and signals.
  - `encode_byte` and `encode_message` yield bits.
  - `BitDecoder.feed` reassembles bytes from those bits.
- `sigtalk.client.Sender(pid, poll_interval)` installs the acknowledgement
  handler. It sends data with `send_byte` and `send_message`. Call `close()`,
  or use it as a context manager, to restore the previous handler.
- `sigtalk.server.Receiver(output, ack_delay)` decodes signals into `output`:
  - `handle(signum, sender_pid)` processes one signal.
  - `serve()` blocks the two signals and waits for them forever.
- `sigtalk.numbers`:
  - `parse_int` parses integers with C `int` semantics.
  - `int_to_str` formats 32-bit integers.
- `sigtalk.textops` holds bounded string helpers: `split`, `trim`, `substr`,
  `find_bounded`, `compare_bounded`, `compare_bytes`, `bounded_copy`,
  `bounded_concat` and `map_indexed`.

```python
from sigtalk.bits import BitDecoder, encode_message

decoder = BitDecoder()
received = bytes(
    byte
    for bit in encode_message(b"hi")
    if (byte := decoder.feed(bit)) is not None
)
assert received == b"hi\n"
```

## Limitations

- The receiver keeps a single decoder for all senders. If two clients send at
  the same time, their bits interleave and the output is garbled.
- There is no checksum, no framing beyond the trailing newline, and no
  timeout. If no acknowledgement arrives, the sender waits forever.