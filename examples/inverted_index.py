"""
Inverted index MapReduce example.
Maps each word to the line of the input file it appears on.
"""

import os
import string


def map_function(input_name, content):
    """
    Map function: emit (word, "<file>:<line>") for each word.

    Args:
        input_name: Input file name, used as document ID
        content: Whole text of the split

    Yields:
        (word, location) tuples
    """
    doc_id = os.path.basename(input_name)
    table = str.maketrans('', '', string.punctuation)

    for line_num, line in enumerate(content.splitlines()):
        for word in line.translate(table).split():
            yield (word.lower(), f"{doc_id}:{line_num}")
