import pytest

from pipex.memory import (
    SIZE_MAX,
    bzero,
    calloc,
    memchr,
    memcmp,
    memcpy,
    memmove,
    memset,
)


def test_memchr_finds_first_occurrence():
    data = b"hello world"
    index = memchr(data, ord("o"), len(data))
    assert data[index] == ord("o")
    assert ord("o") not in data[:index]


def test_memchr_respects_limit():
    data = b"hello world"
    assert memchr(data, ord("w"), 5) is None


def test_memchr_masks_value_to_a_byte():
    data = bytes([1, 2, 255])
    assert memchr(data, -1, 3) == 2


def test_memchr_rejects_count_past_end():
    with pytest.raises(ValueError):
        memchr(b"ab", ord("a"), 3)


def test_memcmp_equal_prefix_is_zero():
    assert memcmp(b"abcX", b"abcY", 3) == 0


def test_memcmp_sign_follows_first_difference():
    assert memcmp(b"abc", b"abd", 3) < 0
    assert memcmp(b"abd", b"abc", 3) > 0


def test_memcmp_is_antisymmetric():
    a, b = b"\x10\x80", b"\x10\x01"
    assert memcmp(a, b, 2) == -memcmp(b, a, 2)


def test_memcmp_zero_length():
    assert memcmp(b"a", b"b", 0) == 0


def test_memset_fills_prefix_only():
    original = b"abcdef"
    buf = bytearray(original)
    result = memset(buf, ord("x"), 3)
    assert result is buf
    assert set(buf[:3]) == {ord("x")}
    assert buf[3:] == original[3:]


def test_bzero_clears_prefix():
    original = b"abcdef"
    buf = bytearray(original)
    bzero(buf, 4)
    assert not any(buf[:4])
    assert buf[4:] == original[4:]


def test_memcpy_copies_bytes():
    dest = bytearray(6)
    src = b"abcdef"
    result = memcpy(dest, src, 4)
    assert result is dest
    assert dest[:4] == src[:4]
    assert not any(dest[4:])


def test_memcpy_both_missing_returns_none():
    assert memcpy(None, None, 3) is None


def test_memcpy_one_missing_raises():
    with pytest.raises(ValueError):
        memcpy(bytearray(2), None, 1)


def test_memmove_forward_overlap():
    buf = bytearray(b"abcdef")
    view = memoryview(buf)
    result = memmove(view[2:], view, 4)
    assert bytes(result) == b"abcd"
    assert bytes(view) == b"ababcd"


def test_memmove_backward_overlap():
    original = b"abcdef"
    buf = bytearray(original)
    view = memoryview(buf)
    result = memmove(view, view[2:], 4)
    assert bytes(result[:4]) == original[2:6]
    assert bytes(result[4:]) == original[4:]
    assert bytes(view) == b"cdefef"


def test_calloc_is_zeroed():
    block = calloc(3, 4)
    assert len(block) == 3 * 4
    assert not any(block)


def test_calloc_zero_count():
    assert calloc(0, 5) == bytearray()


def test_calloc_overflow():
    with pytest.raises(OverflowError):
        calloc(2, SIZE_MAX)


def test_calloc_negative():
    with pytest.raises(ValueError):
        calloc(-1, 1)