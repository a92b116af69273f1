"""
Intermediate file naming, writing and reading.

A map task writes one file per reduce task. Each file is a UTF-8 JSON array
of {"key": ..., "value": ...} objects. Non-ASCII characters are written as
\\u escapes, so keys holding lone surrogates survive the round trip. Empty
partitions are written as [] so the reduce side can rely on every file
existing.
"""

import json
import logging
import os
import re
import uuid
from typing import List, Sequence

from mapworker.keyvalue import KeyValue

logger = logging.getLogger(__name__)

TEMP_SUFFIX = '.tmp'


def _temp_path(path: str) -> str:
    return f"{path}.{uuid.uuid4().hex}{TEMP_SUFFIX}"


def _is_temp_of(file_name: str, final_name: str) -> bool:
    """True if file_name is a temporary written for final_name"""
    pattern = re.escape(final_name) + r'\.[0-9a-f]{32}' + re.escape(TEMP_SUFFIX)
    return re.fullmatch(pattern, file_name) is not None


def intermediate_name(job_name: str, map_index: int, reduce_index: int) -> str:
    """File name of the intermediate file map task -> reduce task"""
    return f"mrtmp.{job_name}-{map_index}-{reduce_index}"


def intermediate_path(base_dir: str, job_name: str, map_index: int, reduce_index: int) -> str:
    """Full path of an intermediate file under base_dir"""
    return os.path.join(base_dir, intermediate_name(job_name, map_index, reduce_index))


class IntermediateWriter:
    """Writes a map task's partitions to disk"""

    def __init__(self, base_dir: str, atomic: bool = True):
        """
        Args:
            base_dir: Directory for intermediate files (created if missing)
            atomic: Write to a temporary file first and rename it into place
        """
        self.base_dir = base_dir
        self.atomic = atomic

    def write_partitions(self, job_name: str, map_index: int,
                         buckets: Sequence[Sequence[KeyValue]]) -> List[str]:
        """
        Write one file per bucket, overwriting whatever was there before

        Args:
            job_name: Name of the MapReduce job
            map_index: Which map task this is
            buckets: One list of pairs per reduce task

        Returns:
            Paths of the written files, indexed by reduce task

        Raises:
            OSError: If any file cannot be created or written
        """
        os.makedirs(self.base_dir, exist_ok=True)

        paths = []
        for reduce_index, pairs in enumerate(buckets):
            path = intermediate_path(self.base_dir, job_name, map_index, reduce_index)
            self._write_file(path, pairs)
            logger.debug(f"Wrote {len(pairs)} records to {path}")
            paths.append(path)
        return paths

    def _write_file(self, path: str, pairs: Sequence[KeyValue]):
        records = [kv.to_dict() for kv in pairs]

        if not self.atomic:
            with open(path, 'w', encoding='utf-8') as f:
                json.dump(records, f)
            return

        # Created like the final file, so both modes give the same permissions
        tmp_path = _temp_path(path)
        try:
            with open(tmp_path, 'x', encoding='utf-8') as f:
                json.dump(records, f)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_path, path)
        except BaseException:
            # Never leave a half-written temporary file behind
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise


def read_partition(path: str) -> List[KeyValue]:
    """
    Read an intermediate file back into key/value pairs

    Raises:
        OSError: If the file cannot be read
        ValueError: If the content is not a JSON array of {key, value} objects
    """
    with open(path, 'r', encoding='utf-8') as f:
        records = json.load(f)

    if not isinstance(records, list):
        raise ValueError(f"Intermediate file {path} does not contain a JSON array")
    return [KeyValue.from_dict(record) for record in records]


def cleanup_map_outputs(base_dir: str, job_name: str, map_index: int, reduce_count: int) -> int:
    """
    Remove every intermediate file of one map task, including leftover
    temporaries. Call before re-running a failed task.

    Returns:
        Number of files removed
    """
    removed = 0
    for reduce_index in range(reduce_count):
        path = intermediate_path(base_dir, job_name, map_index, reduce_index)
        final_name = os.path.basename(path)
        leftovers = []
        if os.path.isdir(base_dir):
            leftovers = [os.path.join(base_dir, name) for name in sorted(os.listdir(base_dir))
                         if _is_temp_of(name, final_name)]
        for f in [path] + leftovers:
            if os.path.exists(f):
                os.remove(f)
                logger.info(f"Cleaned up intermediate file: {f}")
                removed += 1
    return removed
