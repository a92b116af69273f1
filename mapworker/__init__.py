"""
Map-side worker for the MapReduce framework.
Reads one input split, applies the job's map function and fans the
output out into one intermediate file per reduce task.
"""

from mapworker.config import MapTaskConfig
from mapworker.keyvalue import KeyValue, MapTaskDescriptor
from mapworker.map_function import MapFunction, CallableMapFunction, FunctionLoader
from mapworker.partitioner import Partitioner, ihash
from mapworker.intermediate import (
    IntermediateWriter,
    intermediate_name,
    intermediate_path,
    read_partition,
    cleanup_map_outputs,
)
from mapworker.map_executor import MapExecutor, MapTaskResult, MapTaskState, do_map

__all__ = [
    'MapTaskConfig',
    'KeyValue',
    'MapTaskDescriptor',
    'MapFunction',
    'CallableMapFunction',
    'FunctionLoader',
    'Partitioner',
    'ihash',
    'IntermediateWriter',
    'intermediate_name',
    'intermediate_path',
    'read_partition',
    'cleanup_map_outputs',
    'MapExecutor',
    'MapTaskResult',
    'MapTaskState',
    'do_map',
]
