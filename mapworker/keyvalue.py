"""
Core data structures passed between the stages of a map task.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class KeyValue:
    """A single key/value pair emitted by a map function."""

    key: str
    value: str

    def __post_init__(self):
        if not isinstance(self.key, str) or not isinstance(self.value, str):
            raise TypeError(f"KeyValue needs string key and value, got "
                            f"{type(self.key).__name__} key {self.key!r} and "
                            f"{type(self.value).__name__} value {self.value!r}")

    def to_dict(self) -> dict:
        """Convert to the on-disk record shape."""
        return {'key': self.key, 'value': self.value}

    @classmethod
    def from_dict(cls, record: dict) -> 'KeyValue':
        """
        Rebuild a pair from a decoded intermediate record

        Raises:
            ValueError: If the record is not an object with string key and value
        """
        if not isinstance(record, dict):
            raise ValueError(f"Intermediate record must be an object, got {type(record).__name__}")
        key = record.get('key')
        value = record.get('value')
        if not isinstance(key, str) or not isinstance(value, str):
            raise ValueError(f"Intermediate record needs string 'key' and 'value': {record!r}")
        return cls(key, value)


@dataclass(frozen=True)
class MapTaskDescriptor:
    """Everything the caller tells us about one map task."""

    job_name: str
    map_index: int
    input_path: str
    reduce_count: int

    def __post_init__(self):
        if not self.job_name:
            raise ValueError("job_name must not be empty")
        if self.map_index < 0:
            raise ValueError(f"map_index must be >= 0, got {self.map_index}")
        if self.reduce_count <= 0:
            raise ValueError(f"reduce_count must be > 0, got {self.reduce_count}")

    def __str__(self):
        return f"MapTask({self.job_name}#{self.map_index}, R={self.reduce_count})"
