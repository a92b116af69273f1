"""
Unit tests for key hashing and partitioning
"""

import pytest

from mapworker.keyvalue import KeyValue
from mapworker.partitioner import Partitioner, ihash, string_hash


class TestStringHash:
    """Tests for the deterministic string hash"""

    @pytest.mark.parametrize("key,expected", [
        ("", 0),
        ("a", 97),
        ("b", 98),
        ("abc", 96354),
        ("hello", 99162322),
    ])
    def test_known_values(self, key, expected):
        assert string_hash(key) == expected

    def test_wraps_to_signed_32_bits(self):
        """This key's hash overflows to the minimum 32-bit integer"""
        assert string_hash("polygenelubricants") == -2147483648

    def test_hashes_utf16_code_units(self):
        """Characters outside the BMP count as two surrogate units"""
        assert string_hash("\U0001F600") == 31 * 0xD83D + 0xDE00

    def test_lone_surrogate_hashes_as_its_code_unit(self):
        assert string_hash("\ud800") == 0xD800
        assert string_hash("a\udfff") == 31 * 97 + 0xDFFF

    def test_colliding_keys(self):
        assert string_hash("Aa") == string_hash("BB")


class TestIhash:
    """Tests for the non-negative hash"""

    def test_clears_sign_bit(self):
        assert ihash("polygenelubricants") == 0

    def test_never_negative(self):
        keys = ["polygenelubricants", "GydZG_", "DESIGNING WORKHOUSES", "x" * 1000, "ünïcødé"]
        for key in keys:
            h = ihash(key)
            assert 0 <= h <= 0x7FFFFFFF

    def test_matches_positive_hashes(self):
        assert ihash("hello") == string_hash("hello")


class TestPartitioner:
    """Tests for hash-based partitioning"""

    def test_lone_surrogate_key_is_partitioned(self):
        assert Partitioner(3).get_partition("\ud800") == 0xD800 % 3

    def test_rejects_non_positive_partition_count(self):
        with pytest.raises(ValueError):
            Partitioner(0)

    def test_partition_in_range(self):
        partitioner = Partitioner(7)
        for i in range(500):
            assert 0 <= partitioner.get_partition(f"key-{i}") < 7

    def test_same_key_goes_to_same_partition(self):
        """Two independent partitioners agree on every key"""
        p1, p2 = Partitioner(4), Partitioner(4)
        for key in ["test_key", "the", "polygenelubricants", ""]:
            assert p1.get_partition(key) == p2.get_partition(key)

    def test_min_int_hash_key_lands_in_bucket_zero(self):
        assert Partitioner(3).get_partition("polygenelubricants") == 0

    def test_returns_exactly_r_buckets(self):
        buckets = Partitioner(5).partition([])
        assert buckets == [[], [], [], [], []]

    def test_every_pair_assigned_once(self):
        pairs = [KeyValue(f"k{i % 13}", str(i)) for i in range(100)]
        buckets = Partitioner(3).partition(pairs)

        flattened = [kv for bucket in buckets for kv in bucket]
        assert sorted(flattened, key=lambda kv: int(kv.value)) == pairs

    def test_preserves_emission_order_within_bucket(self):
        pairs = [KeyValue("a", "1"), KeyValue("b", "2"), KeyValue("a", "3")]
        buckets = Partitioner(2).partition(pairs)

        assert buckets[1] == [KeyValue("a", "1"), KeyValue("a", "3")]
        assert buckets[0] == [KeyValue("b", "2")]

    def test_single_partition_gets_everything(self):
        pairs = [KeyValue("x", "1"), KeyValue("y", "2")]
        assert Partitioner(1).partition(pairs) == [pairs]
