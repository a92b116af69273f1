#!/usr/bin/env python3
"""
Check the intermediate files of a map task.
Reads back all R files and verifies every record sits in the partition
its key hashes to.

Usage:
    python3 scripts/check_map_output.py --job-name wc --map-index 0 --reduce-count 4 [--dir .]
"""

import os
import sys
import argparse

from mapworker.intermediate import intermediate_path, read_partition
from mapworker.partitioner import Partitioner


def check_map_output(base_dir: str, job_name: str, map_index: int, reduce_count: int) -> bool:
    """Check and display the intermediate files of one map task."""
    partitioner = Partitioner(reduce_count)
    ok = True
    total_records = 0

    for reduce_index in range(reduce_count):
        path = intermediate_path(base_dir, job_name, map_index, reduce_index)
        if not os.path.exists(path):
            print(f"❌ Missing intermediate file: {path}")
            ok = False
            continue

        try:
            pairs = read_partition(path)
        except (OSError, ValueError) as e:
            print(f"❌ Partition {reduce_index}: ERROR - {e}")
            ok = False
            continue

        misrouted = [kv for kv in pairs if partitioner.get_partition(kv.key) != reduce_index]
        total_records += len(pairs)
        print(f"   Partition {reduce_index}: {len(pairs)} records, {os.path.getsize(path)} bytes")
        if pairs:
            print(f"     Sample: {pairs[:3]}")
        if misrouted:
            print(f"❌ Partition {reduce_index}: {len(misrouted)} records belong elsewhere, "
                  f"e.g. key {misrouted[0].key!r}")
            ok = False

    print(f"\n   Total records for map task {map_index}: {total_records}")
    return ok


if __name__ == '__main__':
    parser = argparse.ArgumentParser(
        description='Check the intermediate files written by a map task'
    )
    parser.add_argument('--dir', type=str, default='.', help='Intermediate directory (default: .)')
    parser.add_argument('--job-name', type=str, required=True, help='Name of the MapReduce job')
    parser.add_argument('--map-index', type=int, required=True, help='Map task index')
    parser.add_argument('--reduce-count', type=int, required=True, help='Number of reduce tasks (R)')

    args = parser.parse_args()

    print(f"Checking map output in: {os.path.abspath(args.dir)}")
    print(f"{'='*60}\n")

    success = check_map_output(args.dir, args.job_name, args.map_index, args.reduce_count)

    if success:
        print(f"\n✅ All {args.reduce_count} partitions present and correctly routed")
    else:
        print(f"\n❌ Map output is incomplete or misrouted")

    sys.exit(0 if success else 1)
