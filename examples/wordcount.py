"""
Classic MapReduce word count example.
Emits (word, "1") for every word in the input split.
"""

import string


def map_function(input_name, content):
    """
    Map function: emit (word, "1") for each word in the split.

    Args:
        input_name: Input file name (unused)
        content: Whole text of the split

    Yields:
        (word, "1") tuples
    """
    # Remove punctuation and split into words
    words = content.translate(str.maketrans('', '', string.punctuation)).split()

    for word in words:
        if word:  # Skip empty strings
            yield (word.lower(), "1")
