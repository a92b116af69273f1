"""
Configuration for map task execution.
"""

import os
from dataclasses import dataclass

_TRUE_VALUES = ('1', 'true', 'yes', 'on')


def _env_flag(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in _TRUE_VALUES


@dataclass
class MapTaskConfig:
    """
    Settings handed to a MapExecutor.

    Attributes:
        intermediate_dir: Directory where intermediate files are written
        debug: Log every emitted key/value pair at DEBUG level
        atomic_writes: Write each partition to a temporary file and rename it into place
    """

    intermediate_dir: str = '.'
    debug: bool = False
    atomic_writes: bool = True

    @classmethod
    def from_env(cls) -> 'MapTaskConfig':
        """Build a config from MAPREDUCE_* environment variables."""
        return cls(
            intermediate_dir=os.environ.get('MAPREDUCE_INTERMEDIATE_DIR', '.'),
            debug=_env_flag('MAPREDUCE_DEBUG', False),
            atomic_writes=_env_flag('MAPREDUCE_ATOMIC_WRITES', True),
        )
