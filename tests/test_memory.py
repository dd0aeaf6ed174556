import pytest

from ftkit.memory import (
    SIZE_MAX,
    bzero,
    calloc,
    memchr,
    memcmp,
    memcpy,
    memmove,
    memset,
)


def test_memset_fills_prefix_only():
    buf = bytearray(b"hello world")
    result = memset(buf, ord("x"), 5)
    assert result is buf
    assert buf[:5] == b"x" * 5
    assert buf[5:] == b" world"


def test_memset_uses_low_byte():
    a = memset(bytearray(4), 0x141, 4)
    b = memset(bytearray(4), 0x41, 4)
    assert a == b


def test_memset_zero_count_changes_nothing():
    buf = bytearray(b"abc")
    memset(buf, 0, 0)
    assert buf == b"abc"


def test_memset_past_end_rejected():
    with pytest.raises(ValueError):
        memset(bytearray(3), 0, 4)


def test_bzero_clears_prefix():
    buf = bytearray(b"abcdef")
    bzero(buf, 3)
    assert buf[:3] == bytes(3)
    assert buf[3:] == b"def"


def test_memcpy_copies_and_returns_dest():
    dest = bytearray(b"0123456789")
    src = b"abcdef"
    result = memcpy(dest, src, 4)
    assert result is dest
    assert dest[:4] == src[:4]
    assert dest[4:] == b"456789"


def test_memcpy_rejects_short_source():
    with pytest.raises(ValueError):
        memcpy(bytearray(10), b"ab", 3)


def test_memmove_forward_overlap():
    original = b"abcdef"
    buf = bytearray(original)
    memmove(buf, 2, 0, 4)
    assert buf == original[:2] + original[:4]


def test_memmove_backward_overlap():
    original = b"abcdef"
    buf = bytearray(original)
    memmove(buf, 0, 2, 4)
    assert buf == original[2:6] + original[4:]


def test_memmove_same_offset_is_identity():
    buf = bytearray(b"abcdef")
    memmove(buf, 1, 1, 5)
    assert buf == b"abcdef"


def test_memmove_out_of_range_rejected():
    with pytest.raises(ValueError):
        memmove(bytearray(6), 3, 0, 4)


def test_memchr_finds_first_occurrence():
    data = b"abcabc"
    index = memchr(data, ord("c"), len(data))
    assert index == data.index(b"c")


def test_memchr_respects_count():
    assert memchr(b"abcabc", ord("c"), 2) is None


def test_memchr_uses_low_byte():
    data = b"\x00\x01\x41"
    assert memchr(data, 0x141, 3) == memchr(data, 0x41, 3)


def test_memcmp_equal_prefix():
    assert memcmp(b"abcx", b"abcy", 3) == 0


def test_memcmp_sign_and_difference():
    assert memcmp(b"abc", b"abd", 3) < 0
    assert memcmp(b"abd", b"abc", 3) > 0
    assert memcmp(b"abc", b"abd", 3) == -memcmp(b"abd", b"abc", 3)


def test_memcmp_is_unsigned():
    assert memcmp(b"\xff", b"\x00", 1) > 0


def test_calloc_returns_zeroed_buffer():
    buf = calloc(4, 8)
    assert len(buf) == 32
    assert not any(buf)


def test_calloc_zero_size():
    assert calloc(0, 10) == bytearray()
    assert calloc(10, 0) == bytearray()


def test_calloc_overflow():
    with pytest.raises(OverflowError):
        calloc(SIZE_MAX, 2)


def test_calloc_negative_rejected():
    with pytest.raises(ValueError):
        calloc(-1, 4)