"""
Map function strategy and loader for user job files.
"""

import abc
import importlib.util
import os
from typing import Callable, Iterable, List

from mapworker.keyvalue import KeyValue


class MapFunction(abc.ABC):
    """A job's map step: (input name, content) -> key/value pairs."""

    @abc.abstractmethod
    def map(self, input_name: str, content: str) -> Iterable[KeyValue]:
        raise NotImplementedError


class CallableMapFunction(MapFunction):
    """Adapts a plain function from a job file to the MapFunction interface."""

    def __init__(self, fn: Callable):
        if not callable(fn):
            raise TypeError(f"map function must be callable, got {type(fn).__name__}")
        self.fn = fn

    def map(self, input_name: str, content: str) -> List[KeyValue]:
        pairs = []
        for item in self.fn(input_name, content):
            # Plain functions usually yield (key, value) tuples; both must be str
            if not isinstance(item, KeyValue):
                key, value = item
                item = KeyValue(key, value)
            pairs.append(item)
        return pairs

    def __repr__(self):
        name = getattr(self.fn, '__qualname__', repr(self.fn))
        return f"CallableMapFunction({name})"


def invoke(map_function: MapFunction, input_name: str, content: str) -> List[KeyValue]:
    """
    Run the map function exactly once and collect its output in emission order.
    Whatever the map function raises is propagated as is.
    """
    return list(map_function.map(input_name, content))


class FunctionLoader:
    """Dynamically loads the map function from a user-provided job file"""

    def __init__(self, job_file: str):
        """
        Initialize the function loader

        Args:
            job_file: Path to user's Python file defining map_function
        """
        self.job_file = job_file
        self.module = None

    def load_module(self):
        """
        Dynamically load the user module

        Returns:
            The loaded module object

        Raises:
            FileNotFoundError: If the job file doesn't exist
        """
        if not os.path.exists(self.job_file):
            raise FileNotFoundError(f"Job file not found: {self.job_file}")

        spec = importlib.util.spec_from_file_location("user_mapreduce_job", self.job_file)
        if spec is None or spec.loader is None:
            raise ImportError(f"Failed to load job file: {self.job_file}")
        module = importlib.util.module_from_spec(spec)
        spec.loader.exec_module(module)
        self.module = module
        return module

    def get_map_function(self) -> MapFunction:
        """
        Get the job's map function wrapped as a MapFunction

        Raises:
            AttributeError: If module doesn't define 'map_function'
        """
        if not self.module:
            self.load_module()

        if not hasattr(self.module, 'map_function'):
            raise AttributeError("Module must define 'map_function'")

        fn = self.module.map_function
        if isinstance(fn, MapFunction):
            return fn
        return CallableMapFunction(fn)
