import pytest

from iso8583.prefix.base import PrefixError
from iso8583.prefix.ebcdic import EBCDIC, EbcdicFixedPrefixer, EbcdicVarPrefixer


def test_encode_length_digits_validation():
    with pytest.raises(PrefixError, match="number of digits in length: 123 exceeds: 2"):
        EBCDIC.LL.encode_length(999, 123)


def test_encode_length_max_length_validation():
    with pytest.raises(PrefixError, match="field length: 22 is larger than maximum: 20"):
        EBCDIC.LL.encode_length(20, 22)


def test_decode_length_not_enough_data():
    with pytest.raises(
        PrefixError, match="length mismatch: want to read 3 bytes, get only 1"
    ):
        EBCDIC.LLL.decode_length(20, bytes([0x22]))


HELPER_CASES = [
    (1, 5, 3, bytes([0xF3])),
    (2, 20, 2, bytes([0xF0, 0xF2])),
    (2, 20, 12, bytes([0xF1, 0xF2])),
    (3, 340, 2, bytes([0xF0, 0xF0, 0xF2])),
    (3, 340, 200, bytes([0xF2, 0xF0, 0xF0])),
    (4, 9999, 1234, bytes([0xF1, 0xF2, 0xF3, 0xF4])),
]


@pytest.mark.parametrize("digits, max_len, value, out", HELPER_CASES)
def test_encode_length(digits, max_len, value, out):
    assert EbcdicVarPrefixer(digits).encode_length(max_len, value) == out


@pytest.mark.parametrize("digits, max_len, value, out", HELPER_CASES)
def test_decode_length(digits, max_len, value, out):
    assert EbcdicVarPrefixer(digits).decode_length(max_len, out) == (value, digits)


def test_shared_prefixers_encode_and_decode():
    assert EBCDIC.L.encode_length(5, 3) == bytes([0xF3])
    assert EBCDIC.LLL.encode_length(340, 200) == bytes([0xF2, 0xF0, 0xF0])
    assert EBCDIC.LL.decode_length(20, bytes([0xF1, 0xF2])) == (12, 2)
    assert EBCDIC.LLLL.decode_length(9999, bytes([0xF1, 0xF2, 0xF3, 0xF4])) == (1234, 4)


def test_decode_length_rejects_larger_than_maximum():
    with pytest.raises(PrefixError, match="data length 20 is larger than maximum 16"):
        EBCDIC.LL.decode_length(16, bytes([0xF2, 0xF0]))


def test_decode_length_rejects_non_digits():
    with pytest.raises(PrefixError, match="invalid syntax"):
        EBCDIC.LL.decode_length(99, bytes([0x93, 0xF3]))


def test_fixed_prefixer():
    pref = EbcdicFixedPrefixer()
    assert pref.encode_length(8, 8) == b""
    assert pref.decode_length(8, b"1234") == (8, 0)


def test_fixed_prefixer_encode_length_validation():
    with pytest.raises(PrefixError, match="field length: 12 should be fixed: 8"):
        EbcdicFixedPrefixer().encode_length(8, 12)


def test_fixed_prefixer_accepts_shorter_data():
    assert EbcdicFixedPrefixer().encode_length(8, 5) == b""


def test_inspect():
    assert EbcdicVarPrefixer(3).inspect() == "EBCDIC.LLL"
    assert EBCDIC.fixed.inspect() == "EBCDIC.Fixed"