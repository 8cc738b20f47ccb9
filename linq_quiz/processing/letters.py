"""Letter frequency statistics over free text"""
import string
from collections import Counter
from typing import List, Optional

from linq_quiz.models.report import LetterOccurrence
from linq_quiz.processing.errors import NullInputError

import logging

logger = logging.getLogger(__name__)


def get_letter_statistic(text: Optional[str]) -> List[LetterOccurrence]:
    """
    Return the number of occurrences of each letter in a text

    Casing is ignored ('a' is counted as 'A'). Only letters A-Z are counted;
    digits, punctuation, whitespace and non-Latin letters are skipped.
    Letters that do not occur are left out of the result.

    Args:
        text: Text to analyze

    Returns:
        One LetterOccurrence per letter, ordered by first occurrence in the text

    Raises:
        NullInputError: If text is None
    """
    if text is None:
        raise NullInputError("text is None")

    # Filter before upper-casing: 'ß'.upper() == 'SS'
    counts = Counter(char.upper() for char in text if char in string.ascii_letters)

    occurrences = [
        LetterOccurrence(letter=letter, number_of_occurrences=count)
        for letter, count in counts.items()
    ]

    logger.debug(f"Counted {len(occurrences)} distinct letters in text of length {len(text)}")
    return occurrences
