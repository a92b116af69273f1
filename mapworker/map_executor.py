"""
Map Task Executor
Executes map tasks by reading the input split, applying the map function,
partitioning output, and writing intermediate files
"""

import logging
import threading
import time
from dataclasses import dataclass, field, asdict
from enum import Enum
from typing import Dict, List, Optional, Tuple

import psutil

from mapworker.config import MapTaskConfig
from mapworker.intermediate import IntermediateWriter
from mapworker.keyvalue import MapTaskDescriptor
from mapworker.map_function import MapFunction, CallableMapFunction, invoke
from mapworker.partitioner import Partitioner
from mapworker.splitter import read_split

logger = logging.getLogger(__name__)


class MapTaskState(Enum):
    START = "START"
    READING = "READING"
    INVOKING = "INVOKING"
    PARTITIONING = "PARTITIONING"
    WRITING = "WRITING"
    DONE = "DONE"
    FAILED = "FAILED"


@dataclass
class MapTaskResult:
    """Outcome of a successful map task."""

    job_name: str
    map_index: int
    reduce_count: int
    intermediate_files: List[str] = field(default_factory=list)
    partition_counts: List[int] = field(default_factory=list)
    execution_time_ms: int = 0
    memory_rss_bytes: int = 0

    @property
    def total_records(self) -> int:
        return sum(self.partition_counts)

    def to_dict(self) -> dict:
        """Convert result to dictionary."""
        result = asdict(self)
        result['total_records'] = self.total_records
        return result


class MapExecutor:
    """Executes map tasks for one job's map function"""

    def __init__(self, map_function: MapFunction, config: Optional[MapTaskConfig] = None):
        """
        Initialize the map executor

        Args:
            map_function: The job's map function
            config: Execution settings (defaults to MapTaskConfig())
        """
        self.map_function = map_function
        self.config = config or MapTaskConfig()
        self.writer = IntermediateWriter(self.config.intermediate_dir,
                                         atomic=self.config.atomic_writes)
        self.process = psutil.Process()
        # Task state tracking, keyed by (job_name, map_index)
        self.task_states: Dict[Tuple[str, int], MapTaskState] = {}
        self._state_lock = threading.Lock()

    def get_task_state(self, job_name: str, map_index: int) -> Optional[MapTaskState]:
        """Get the last known state of a task run by this executor."""
        with self._state_lock:
            return self.task_states.get((job_name, map_index))

    def _set_state(self, task: MapTaskDescriptor, state: MapTaskState):
        with self._state_lock:
            self.task_states[(task.job_name, task.map_index)] = state
        logger.debug(f"{task}: {state.value}")

    def execute(self, task: MapTaskDescriptor) -> MapTaskResult:
        """
        Run one map task to completion

        Returns:
            MapTaskResult describing the written intermediate files

        Raises:
            OSError: If the input cannot be read or an intermediate file cannot be written
            Exception: Anything raised by the map function, unchanged
        """
        start_time = time.time()
        state = MapTaskState.START
        self._set_state(task, state)
        logger.info(f"Map task {task.map_index} of job {task.job_name}: starting on {task.input_path}")

        try:
            state = MapTaskState.READING
            self._set_state(task, state)
            content = read_split(task.input_path)

            state = MapTaskState.INVOKING
            self._set_state(task, state)
            pairs = invoke(self.map_function, task.input_path, content)
            logger.info(f"Map task {task.map_index}: map function emitted {len(pairs)} pairs")

            if self.config.debug:
                for kv in pairs:
                    logger.debug(f"key: {kv.key!r}\tvalue: {kv.value!r}")

            state = MapTaskState.PARTITIONING
            self._set_state(task, state)
            buckets = Partitioner(task.reduce_count).partition(pairs)

            state = MapTaskState.WRITING
            self._set_state(task, state)
            paths = self.writer.write_partitions(task.job_name, task.map_index, buckets)

        except Exception as e:
            self._set_state(task, MapTaskState.FAILED)
            logger.error(f"Map task failed - Job: {task.job_name}, Task: {task.map_index}, "
                         f"during {state.value}: {e}")
            raise

        self._set_state(task, MapTaskState.DONE)
        execution_time = int((time.time() - start_time) * 1000)
        result = MapTaskResult(
            job_name=task.job_name,
            map_index=task.map_index,
            reduce_count=task.reduce_count,
            intermediate_files=paths,
            partition_counts=[len(b) for b in buckets],
            execution_time_ms=execution_time,
            memory_rss_bytes=self.process.memory_info().rss,
        )
        logger.info(f"Map task {task.map_index}: wrote {result.total_records} records "
                    f"to {len(paths)} files in {execution_time}ms")
        return result


def do_map(job_name: str, map_index: int, input_path: str, reduce_count: int,
           map_function, config: Optional[MapTaskConfig] = None) -> MapTaskResult:
    """
    Run a single map task.

    map_function may be a MapFunction or a plain function
    (input_name, content) -> iterable of KeyValue or (key, value) tuples.
    """
    if not isinstance(map_function, MapFunction):
        map_function = CallableMapFunction(map_function)
    task = MapTaskDescriptor(job_name, map_index, input_path, reduce_count)
    return MapExecutor(map_function, config).execute(task)
