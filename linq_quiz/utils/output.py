"""Output utilities for rendering results

Rendered text carries no trailing newline. render_family_summaries is a
library helper: family records are not read from the command line.
"""
import csv
import io
import json
from typing import List

from linq_quiz.models.report import FamilySummary, LetterOccurrence

import logging

logger = logging.getLogger(__name__)


def _write_csv(header: List[str], rows: List[list]) -> str:
    """Render a header and rows as CSV text without a final line terminator"""
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator='\n')
    writer.writerow(header)
    writer.writerows(rows)
    return buffer.getvalue().rstrip('\n')


def _check_format(fmt: str) -> None:
    if fmt not in ('json', 'csv'):
        raise ValueError(f"Unsupported output format: {fmt!r}")


def render_numbers(values: List[int], fmt: str) -> str:
    """
    Render a number sequence

    Args:
        values: Numbers to render
        fmt: 'json' or 'csv'

    Returns:
        Rendered text
    """
    _check_format(fmt)
    if fmt == 'json':
        return json.dumps(values, indent=2)

    logger.debug(f"Rendering {len(values)} numbers as CSV")
    return _write_csv(['Value'], [[value] for value in values])


def render_family_summaries(rows: List[FamilySummary], fmt: str) -> str:
    """
    Render family summaries using the external field names

    Args:
        rows: Family summaries
        fmt: 'json' or 'csv'

    Returns:
        Rendered text
    """
    _check_format(fmt)
    if fmt == 'json':
        data = [row.model_dump(by_alias=True) for row in rows]
        return json.dumps(data, indent=2)

    logger.debug(f"Rendering {len(rows)} family summaries as CSV")
    return _write_csv(
        ['FamilyID', 'NumberOfFamilyMembers', 'AverageAge'],
        [[row.family_id, row.number_of_family_members, row.average_age] for row in rows]
    )


def render_letter_occurrences(rows: List[LetterOccurrence], fmt: str) -> str:
    """
    Render a letter statistic

    Args:
        rows: Letter occurrences
        fmt: 'json' or 'csv'

    Returns:
        Rendered text
    """
    _check_format(fmt)
    if fmt == 'json':
        return json.dumps([row.model_dump() for row in rows], indent=2)

    logger.debug(f"Rendering {len(rows)} letter occurrences as CSV")
    return _write_csv(
        ['Letter', 'NumberOfOccurrences'],
        [list(row.as_tuple()) for row in rows]
    )
