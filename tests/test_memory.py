import pytest

from pixkit.memory import bzero, calloc, memchr, memcmp, memcpy, memmove, memset


def test_memset_fills_prefix_only():
    buf = bytearray(b"abcdef")
    result = memset(buf, ord("x"), 3)
    assert result is buf
    assert buf == bytearray(b"xxxdef")


def test_memset_takes_value_modulo_256():
    buf = bytearray(4)
    memset(buf, 0x141, 4)
    assert buf == bytearray(b"AAAA")


def test_memset_count_too_large():
    with pytest.raises(IndexError):
        memset(bytearray(2), 0, 3)


def test_memset_negative_count():
    with pytest.raises(ValueError):
        memset(bytearray(2), 0, -1)


def test_memchr_finds_first_occurrence():
    data = b"hello"
    assert memchr(data, ord("l"), len(data)) == data.index(b"l")


def test_memchr_respects_limit():
    assert memchr(b"hello", ord("o"), 4) == -1
    assert memchr(b"hello", ord("o"), 5) == 4


def test_memchr_absent():
    assert memchr(b"abc", ord("z"), 3) == -1


def test_memcmp_equal_prefix():
    assert memcmp(b"abcX", b"abcY", 3) == 0


def test_memcmp_sign_follows_unsigned_order():
    assert memcmp(b"\x80", b"\x01", 1) > 0
    assert memcmp(b"\x01", b"\x80", 1) < 0


def test_memcmp_gives_byte_difference():
    assert memcmp(b"abd", b"abb", 3) == ord("d") - ord("b")


def test_memcmp_antisymmetric():
    a, b = b"pixel", b"pixie"
    assert memcmp(a, b, 5) == -memcmp(b, a, 5)


def test_memcpy_copies_prefix():
    dst = bytearray(b"......")
    result = memcpy(dst, b"abcdef", 4)
    assert result is dst
    assert dst == bytearray(b"abcd..")


def test_memcpy_count_exceeds_source():
    with pytest.raises(IndexError):
        memcpy(bytearray(10), b"ab", 3)


def test_memmove_forward_overlap():
    buf = bytearray(b"abcdef")
    memmove(buf, 2, 0, 4)
    assert buf == bytearray(b"ababcd")


def test_memmove_backward_overlap():
    buf = bytearray(b"abcdef")
    memmove(buf, 0, 2, 4)
    assert buf == bytearray(b"cdefef")


def test_memmove_zero_count_leaves_buffer():
    buf = bytearray(b"abc")
    memmove(buf, 1, 0, 0)
    assert buf == bytearray(b"abc")


def test_memmove_out_of_range():
    with pytest.raises(IndexError):
        memmove(bytearray(4), 2, 0, 3)


def test_bzero_clears_prefix():
    buf = bytearray(b"abcd")
    bzero(buf, 2)
    assert buf == bytearray(b"\x00\x00cd")


def test_calloc_size_and_zeroes():
    buf = calloc(3, 4)
    assert len(buf) == 12
    assert not any(buf)


def test_calloc_zero_count():
    assert calloc(0, 8) == bytearray()


def test_calloc_negative():
    with pytest.raises(ValueError):
        calloc(-1, 4)