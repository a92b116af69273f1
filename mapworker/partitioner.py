"""
Hash partitioning of intermediate keys.

Every map task and every reduce task must agree on which partition a key
belongs to, so the hash below is computed from the key's characters only.
Python's built-in hash() is salted per process and cannot be used here.
"""

from typing import Iterable, List

from mapworker.keyvalue import KeyValue

_INT32_MASK = 0xFFFFFFFF
_INT32_MAX = 0x7FFFFFFF


def string_hash(key: str) -> int:
    """
    32-bit signed polynomial hash (h = 31 * h + c) over the UTF-16 code
    units of the key. The result may be negative.
    """
    data = key.encode('utf-16-be', 'surrogatepass')
    h = 0
    for i in range(0, len(data), 2):
        h = (31 * h + ((data[i] << 8) | data[i + 1])) & _INT32_MASK
    if h > _INT32_MAX:
        h -= 1 << 32
    return h


def ihash(key: str) -> int:
    """Non-negative hash of a key; the sign bit is always cleared."""
    return string_hash(key) & _INT32_MAX


class Partitioner:
    """Hash-based partitioning for intermediate keys"""

    def __init__(self, num_partitions: int):
        if num_partitions <= 0:
            raise ValueError(f"num_partitions must be > 0, got {num_partitions}")
        self.num_partitions = num_partitions

    def get_partition(self, key: str) -> int:
        """Get partition ID for a key: ihash(key) mod R"""
        return ihash(key) % self.num_partitions

    def partition(self, pairs: Iterable[KeyValue]) -> List[List[KeyValue]]:
        """
        Split pairs into R buckets

        Args:
            pairs: Key/value pairs in emission order

        Returns:
            List of exactly R lists; each pair appears in exactly one of them,
            and pairs keep their relative order within a bucket
        """
        buckets = [[] for _ in range(self.num_partitions)]
        for kv in pairs:
            buckets[self.get_partition(kv.key)].append(kv)
        return buckets
