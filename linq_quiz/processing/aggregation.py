"""Aggregation functions for family statistics"""
from typing import Iterable, List, Optional

from linq_quiz.models.family import Family
from linq_quiz.models.report import FamilySummary
from linq_quiz.processing.errors import NullInputError

import logging

logger = logging.getLogger(__name__)


def summarize_family(family: Family) -> FamilySummary:
    """
    Build the statistic entry for one family

    Families without members get an average age of 0.

    Args:
        family: Family to summarize

    Returns:
        FamilySummary with member count and average age
    """
    ages = [person.age for person in family.persons]

    average_age = 0.0
    if ages:
        average_age = sum(ages) / len(ages)

    return FamilySummary(
        family_id=family.id,
        number_of_family_members=len(ages),
        average_age=average_age
    )


def get_family_statistic(families: Optional[Iterable[Family]]) -> List[FamilySummary]:
    """
    Return a statistic about families

    Args:
        families: Families to analyze

    Returns:
        One FamilySummary per family, in input order

    Raises:
        NullInputError: If families is None
    """
    if families is None:
        raise NullInputError("families is None")

    summaries = [summarize_family(family) for family in families]

    logger.debug(f"Generated {len(summaries)} family summaries")
    return summaries
