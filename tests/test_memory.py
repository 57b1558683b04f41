import pytest

from ftkit.memory import bzero, calloc, memchr, memcmp, memcpy, memmove, memset


def test_bzero_clears_prefix_only():
    buffer = bytearray(b"abcdef")
    bzero(buffer, 3)
    assert buffer[:3] == bytes(3)
    assert buffer[3:] == b"def"


def test_bzero_rejects_overlong_span():
    with pytest.raises(ValueError):
        bzero(bytearray(b"ab"), 3)


def test_calloc_is_zero_filled_with_product_length():
    block = calloc(4, 8)
    assert len(block) == 4 * 8
    assert not any(block)


def test_calloc_zero_elements_is_empty():
    assert len(calloc(0, 16)) == 0


def test_calloc_negative_raises():
    with pytest.raises(ValueError):
        calloc(-1, 4)


def test_memchr_finds_first_occurrence():
    data = b"hello world"
    index = memchr(data, ord("o"), len(data))
    assert index == data.index(b"o")
    assert data[index] == ord("o")


def test_memchr_respects_length():
    data = b"hello world"
    assert memchr(data, ord("w"), 5) is None


def test_memchr_wraps_value_to_byte():
    data = b"\x00\x01\x02"
    assert memchr(data, 256 + 2, 3) == memchr(data, 2, 3)


def test_memchr_rejects_overlong_span():
    with pytest.raises(ValueError):
        memchr(b"abc", 0, 4)


def test_memcmp_equal_spans():
    assert memcmp(b"abcX", b"abcY", 3) == 0
    assert memcmp(b"anything", b"different", 0) == 0


def test_memcmp_sign_and_antisymmetry():
    first, second = b"abc", b"abd"
    assert memcmp(first, second, 3) < 0
    assert memcmp(second, first, 3) > 0
    assert memcmp(first, second, 3) == -memcmp(second, first, 3)


def test_memcmp_is_byte_difference():
    assert memcmp(b"\x05", b"\x02", 1) == 3


def test_memcmp_treats_bytes_as_unsigned():
    assert memcmp(b"\xff", b"\x01", 1) > 0


def test_memcpy_copies_prefix_and_returns_dest():
    dest = bytearray(b"xxxxxx")
    src = b"abcdef"
    result = memcpy(dest, src, 4)
    assert result is dest
    assert dest[:4] == src[:4]
    assert dest[4:] == b"xx"


def test_memcpy_rejects_short_dest():
    with pytest.raises(ValueError):
        memcpy(bytearray(2), b"abcd", 3)


def test_memmove_forward_overlap():
    buffer = bytearray(b"123456789")
    original = bytes(buffer)
    result = memmove(buffer, 2, 0, 5)
    assert result is buffer
    assert buffer[2:7] == original[0:5]
    assert buffer[:2] == original[:2]
    assert buffer[7:] == original[7:]


def test_memmove_backward_overlap():
    buffer = bytearray(b"123456789")
    original = bytes(buffer)
    memmove(buffer, 0, 3, 5)
    assert buffer[0:5] == original[3:8]
    assert buffer[5:] == original[5:]


def test_memmove_same_offset_is_unchanged():
    buffer = bytearray(b"abc")
    memmove(buffer, 1, 1, 2)
    assert buffer == b"abc"


def test_memmove_out_of_bounds_raises():
    with pytest.raises(ValueError):
        memmove(bytearray(4), 2, 0, 3)


def test_memset_fills_prefix():
    buffer = bytearray(b"abcdef")
    result = memset(buffer, ord("z"), 4)
    assert result is buffer
    assert buffer[:4] == b"z" * 4
    assert buffer[4:] == b"ef"


def test_memset_wraps_value_to_byte():
    first = memset(bytearray(3), 0x141, 3)
    second = memset(bytearray(3), 0x41, 3)
    assert first == second


def test_memset_rejects_non_int_value():
    with pytest.raises(TypeError):
        memset(bytearray(3), "a", 3)