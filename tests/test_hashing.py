import pytest

from blogkit.hashing import MersenneTwister64, hash_n, pair_hash, stable_hash


def test_mt19937_64_standard_ten_thousandth_value():
    generator = MersenneTwister64(5489)
    for _ in range(9999):
        generator()
    assert generator() == 9981545732273789042


def test_default_seed_matches_explicit():
    first = MersenneTwister64()
    second = MersenneTwister64(5489)
    assert [first() for _ in range(5)] == [second() for _ in range(5)]


def test_generator_is_iterable():
    generator = MersenneTwister64(7)
    reference = MersenneTwister64(7)
    assert [next(generator) for _ in range(3)] == [reference() for _ in range(3)]


def test_outputs_are_64_bit():
    generator = MersenneTwister64(123)
    assert all(0 <= generator() < 2**64 for _ in range(1000))


def test_negative_seed_is_masked():
    assert MersenneTwister64(-1)() == MersenneTwister64(2**64 - 1)()


@pytest.mark.parametrize("value", [1, 2, 3])
def test_int_hash_is_identity(value):
    assert stable_hash(value) == value


def test_empty_string_hash_is_fnv_offset_basis():
    assert stable_hash("") == 14695981039346656037


def test_equal_strings_hash_equal():
    s1 = "Vorbrodt's C++ Blog"
    s2 = "Vorbrodt's C++ Blog"
    assert stable_hash(s1) == stable_hash(s2)
    assert stable_hash(s1) == stable_hash(s1.encode("utf-8"))


def test_float_zeros_hash_equal():
    assert stable_hash(0.0) == stable_hash(-0.0) == 0


def test_unsupported_type():
    with pytest.raises(TypeError):
        stable_hash(["list"])


def test_pair_hash_equal_pairs():
    h1 = pair_hash("Vorbrodt's C++ Blog", "https://vorbrodt.blog")
    h2 = pair_hash("Vorbrodt's C++ Blog", "https://vorbrodt.blog")
    h3 = pair_hash("https://vorbrodt.blog", "Vorbrodt's C++ Blog")
    assert h1 == h2
    assert h1 != h3
    assert 0 <= h3 < 2**64


def test_hash_n_length_and_determinism():
    s = "Hash from this string is..."
    first = hash_n(s, 3)
    assert len(first) == 3
    assert first == hash_n(s, 3)


def test_hash_n_prefix_property():
    s = "Hash from this string is..."
    assert hash_n(s, 5)[:3] == hash_n(s, 3)


def test_hash_n_seeds_generator_with_key_hash():
    key = "key"
    assert hash_n(key, 1) == [MersenneTwister64(stable_hash(key))()]


def test_hash_n_zero_count():
    with pytest.raises(ValueError, match="greater than zero"):
        hash_n("x", 0)