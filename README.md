# seqwrap

TCP carries sequence numbers as 32-bit values. These values wrap around, and
they start at an arbitrary initial sequence number (ISN). Inside a TCP
implementation it is easier to work with 64-bit *absolute* sequence numbers
that start at zero. `seqwrap` converts between the two.

## Installation

```
pip install seqwrap
```

## Usage

```python
from seqwrap.wrapping import WrappingInt32, wrap, unwrap

isn = WrappingInt32(0xFFFFFFF0)

# absolute -> relative (32-bit, wraps around)
seqno = wrap(0x20, isn)
print(seqno)            # 16

# relative -> absolute, choosing the value closest to a recent checkpoint
unwrap(seqno, isn, 0)   # 32
```

`WrappingInt32` is an immutable 32-bit value. Its arithmetic is modulo 2**32,
and a value passed to it that lies outside the 32-bit range is reduced modulo
2**32.

```python
a = WrappingInt32(5)
a + 10                  # WrappingInt32(raw_value=15)
a - 10                  # WrappingInt32(raw_value=4294967291)
WrappingInt32(3) - WrappingInt32(7)   # -4: signed 32-bit offset between two points
a == WrappingInt32(5)   # True
str(a)                  # '5'
```

- `wrap(n, isn)` turns the absolute sequence number `n` into a `WrappingInt32`.
- `unwrap(n, isn, checkpoint)` returns the absolute sequence number that wraps
  to `n` and lies closest to `checkpoint`.

## What it does not do

`seqwrap` handles sequence-number arithmetic only. It does not contain a TCP
sender, a TCP receiver or a connection. It does not parse or build segments,
and it does not send anything over a network.

## Running the tests

```
pip install seqwrap[test]
pytest
```