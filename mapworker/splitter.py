"""
Input split loading.
A map task always works on one whole file held in memory.
"""

import logging

logger = logging.getLogger(__name__)


def read_split(path: str) -> str:
    """
    Load the full content of an input split

    Args:
        path: Path to the input file

    Returns:
        The whole file as text

    Raises:
        OSError: If the file is missing, unreadable or not valid UTF-8
    """
    try:
        with open(path, 'r', encoding='utf-8', newline='') as f:
            content = f.read()
    except UnicodeDecodeError as e:
        raise OSError(f"Input split is not valid UTF-8: {path}: {e}") from e

    logger.debug(f"Read {len(content)} characters from {path}")
    return content
