import pytest

from espterm.utf8 import (
    CACHE_SIZE,
    FALLBACK_REF,
    REPLACEMENT,
    UnicodeCache,
    is_cache_ref,
    utf8_encode,
)


@pytest.mark.parametrize(
    "code_point", [0x00, 0x41, 0x7F, 0x80, 0xE9, 0x7FF, 0x800, 0x20AC, 0xFFFF, 0x10000, 0x1F600, 0x10FFFF]
)
def test_encode_matches_standard_encoding(code_point):
    assert utf8_encode(code_point, False) == chr(code_point).encode("utf-8")


def test_encode_surrogate_without_fix():
    assert utf8_encode(0xD800, False) == "\ud800".encode("utf-8", "surrogatepass")


def test_encode_surrogate_fix_shifts_up():
    assert utf8_encode(0xD800, True) == chr(0xE000).encode("utf-8")
    assert utf8_encode(0xD7FF, True) == chr(0xD7FF).encode("utf-8")


def test_encode_out_of_range():
    with pytest.raises(ValueError):
        utf8_encode(0x110000, False)
    with pytest.raises(ValueError):
        utf8_encode(0x10FFFF, True)
    with pytest.raises(ValueError):
        utf8_encode(-1, False)


def test_replacement_constant_matches_encoded_fffd():
    assert utf8_encode(0xFFFD, False) == REPLACEMENT
    assert REPLACEMENT == b"\xef\xbf\xbd"


@pytest.mark.parametrize("ref,expected", [(0, True), (31, True), (32, False), (126, False), (127, True), (255, True)])
def test_is_cache_ref(ref, expected):
    assert is_cache_ref(ref) is expected


def test_ascii_passes_through():
    cache = UnicodeCache()
    assert cache.add(b"A") == ord("A")
    assert cache.retrieve(ord("A")) == b"A"


def test_control_char_gives_fallback():
    cache = UnicodeCache()
    assert cache.add(b"\x07") == FALLBACK_REF


def test_add_and_retrieve_round_trip():
    cache = UnicodeCache()
    data = "é".encode()
    ref = cache.add(data)
    assert is_cache_ref(ref)
    assert cache.retrieve(ref) == data


def test_same_character_same_ref():
    cache = UnicodeCache()
    a = cache.add("€".encode())
    b = cache.add("€".encode())
    assert a == b


def test_reference_counting():
    cache = UnicodeCache()
    data = "ß".encode()
    ref = cache.add(data)
    cache.inc(ref)
    cache.remove(ref)
    assert cache.retrieve(ref) == data
    cache.remove(ref)
    with pytest.raises(KeyError):
        cache.retrieve(ref)
    with pytest.raises(KeyError):
        cache.remove(ref)
    with pytest.raises(KeyError):
        cache.inc(ref)


def test_freed_slot_is_reused():
    cache = UnicodeCache()
    ref = cache.add("α".encode())
    cache.remove(ref)
    other = cache.add("β".encode())
    assert other == ref
    assert cache.retrieve(other) == "β".encode()


def test_clear_frees_everything():
    cache = UnicodeCache()
    refs = [cache.add(chr(0x100 + i).encode()) for i in range(5)]
    cache.clear()
    for ref in refs:
        with pytest.raises(KeyError):
            cache.retrieve(ref)


def test_fill_cache():
    cache = UnicodeCache()
    chars = [chr(0x100 + i).encode() for i in range(CACHE_SIZE)]
    refs = [cache.add(c) for c in chars]
    assert len(set(refs)) == CACHE_SIZE
    assert all(is_cache_ref(r) for r in refs)
    assert [cache.retrieve(r) for r in refs] == chars
    assert cache.add(chr(0x3000).encode()) == FALLBACK_REF


def test_ascii_ops_are_noops():
    cache = UnicodeCache()
    cache.inc(ord("x"))
    cache.remove(ord("x"))
    assert cache.retrieve(ord("x")) == b"x"


def test_invalid_ref_raises():
    cache = UnicodeCache()
    with pytest.raises(KeyError):
        cache.retrieve(255)