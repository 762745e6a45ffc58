# iso8583

Building blocks for writing and reading ISO 8583 financial messages:

- **Padding**: `iso8583.padding` provides `LeftPadder`, `RightPadder` and
  `NonePadder` (with a shared instance `NONE`). They fill field data out to a
  fixed length and strip the fill again.
- **Length prefixes**: `iso8583.prefix` holds prefixers that write and read
  the length of a field. Each family is a `Prefixers` object with `fixed`,
  `L`, `LL`, `LLL` and `LLLL` members, looked up by name with `by_name`:
  - `iso8583.prefix.ascii.ASCII`: ASCII decimal digits
  - `iso8583.prefix.bcd.BCD`: packed BCD digits (the module also offers
    `encode_bcd` and `decode_bcd`)
  - `iso8583.prefix.binary.BINARY`: big-endian binary integers
  - `iso8583.prefix.hex.HEX`: upper-case ASCII hex
  - `iso8583.prefix.ebcdic.EBCDIC`: EBCDIC (code page 037) digits
  - `iso8583.prefix.ebcdic1047.EBCDIC1047`: EBCDIC (code page 1047) digits
  - `iso8583.prefix.none.NONE`: only `fixed`, which writes nothing and takes
    all remaining data

  `iso8583.prefix.bertlv.BER_TLV` is a single `BerTLVPrefixer` that handles
  BER-TLV short-form and long-form lengths.
- **Sorting**: `iso8583.sorting` sorts lists of tags in place with
  `sort_strings`, `sort_strings_by_int` and `sort_strings_by_hex`.
- **Network headers**: `iso8583.network` reads and writes the length headers
  that frame messages on a connection: `ASCII4BytesHeader`,
  `BCD2BytesHeader`, `Binary2BytesHeader` and `VMLHeader`.

## Installation

```
pip install .
```

## Usage

### Padding

```python
from iso8583.padding import LeftPadder, RightPadder

LeftPadder("0").pad(b"12345", 10)       # b"0000012345"
LeftPadder("0").unpad(b"0000012345")    # b"12345"
RightPadder("0").pad(b"12345", 10)      # b"1234500000"
```

A padder takes exactly one character. Data that is already long enough is
returned unchanged.

### Length prefixes

```python
from iso8583.prefix.ascii import ASCII
from iso8583.prefix.bcd import BCD

ASCII.LL.encode_length(20, 12)          # b"12"
ASCII.LL.decode_length(20, b"12abc")    # (12, 2): the length and the bytes read
ASCII.LL.inspect()                      # "ASCII.LL"

BCD.by_name("LLL").encode_length(340, 200)   # b"\x02\x00"
```

`decode_length` returns a tuple of the decoded length and the number of
bytes it consumed. Fixed prefixers write no bytes and return the configured
length. A length that is too large, has too many digits or cannot be parsed
raises `iso8583.prefix.base.PrefixError`, a subclass of `ValueError`.

### Sorting tags

```python
from iso8583.sorting import sort_strings_by_hex, sort_strings_by_int

tags = ["B0", "10", "ABCD"]
sort_strings_by_hex(tags)   # tags is now ["10", "B0", "ABCD"]

ids = ["11", "5", "1"]
sort_strings_by_int(ids)    # ids is now ["1", "5", "11"]
```

An element that is not a decimal integer (or an even-length hex string for
`sort_strings_by_hex`) raises `ValueError`.

### Network headers

```python
import io
from iso8583.network import BCD2BytesHeader, VMLHeader

header = BCD2BytesHeader()
header.length = 115
buf = io.BytesIO()
header.write_to(buf)        # writes b"\x01\x15" and returns 2

buf.seek(0)
incoming = BCD2BytesHeader()
incoming.read_from(buf)     # returns 2
incoming.length             # 115

vml = VMLHeader()
vml.read_from(io.BytesIO(b"\x00\x0f\x00\x20"))
vml.length                  # 15
vml.is_session_control      # True
```

`write_to` and `read_from` work with any binary stream that has `write` or
`read`. A short read, a malformed header, or a length out of range raises
`iso8583.network.HeaderError`, a subclass of `ValueError`. `VMLHeader`
refuses lengths above `MAX_MESSAGE_LENGTH` (2048).

## What this package does not do

It has no message, field or message-spec types: it does not pack or unpack
whole ISO 8583 messages, build bitmaps, or mask card data for display. It
also opens no connections; the network headers only read from and write to
streams you supply.

## Running the tests

```
pip install .[test]
pytest
```