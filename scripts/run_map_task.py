#!/usr/bin/env python3
"""
Run a single map task from the command line.

Usage:
    python3 scripts/run_map_task.py --job-name wc --map-index 0 \
        --input data/pg-1.txt --reduce-count 4 --job-file examples/wordcount.py
"""

import argparse
import logging
import sys

from mapworker.config import MapTaskConfig
from mapworker.keyvalue import MapTaskDescriptor
from mapworker.map_executor import MapExecutor
from mapworker.map_function import FunctionLoader


def main():
    parser = argparse.ArgumentParser(description='Run one map task and write its intermediate files')
    parser.add_argument('--job-name', required=True, help='Name of the MapReduce job')
    parser.add_argument('--map-index', type=int, required=True, help='Index of this map task')
    parser.add_argument('--input', required=True, help='Path to the input split')
    parser.add_argument('--reduce-count', type=int, required=True, help='Number of reduce tasks (R)')
    parser.add_argument('--job-file', required=True, help='Python file defining map_function')
    parser.add_argument('--intermediate-dir', help='Where to write intermediate files '
                        '(default: $MAPREDUCE_INTERMEDIATE_DIR or .)')
    parser.add_argument('--debug', action='store_true', help='Log every emitted pair')
    parser.add_argument('--no-atomic', action='store_true', help='Write partitions in place')
    args = parser.parse_args()

    config = MapTaskConfig.from_env()
    if args.intermediate_dir:
        config.intermediate_dir = args.intermediate_dir
    if args.debug:
        config.debug = True
    if args.no_atomic:
        config.atomic_writes = False

    logging.basicConfig(
        level=logging.DEBUG if config.debug else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    try:
        task = MapTaskDescriptor(args.job_name, args.map_index, args.input, args.reduce_count)
        map_function = FunctionLoader(args.job_file).get_map_function()
        result = MapExecutor(map_function, config).execute(task)
    except Exception as e:
        print(f"❌ Map task failed: {e}")
        sys.exit(1)

    print(f"✅ Map task {result.map_index} completed in {result.execution_time_ms}ms")
    for path, count in zip(result.intermediate_files, result.partition_counts):
        print(f"   {path}: {count} records")


if __name__ == '__main__':
    main()
