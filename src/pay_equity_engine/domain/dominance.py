"""Gender dominance classification for job classes."""

from __future__ import annotations

from .jobs import BALANCED, FEMALE, MALE, Dominance, JobRecord

# The two thresholds differ on purpose and must be tuned independently.
MALE_DOMINANCE_THRESHOLD = 0.80
FEMALE_DOMINANCE_THRESHOLD = 0.70


def classify_dominance(job: JobRecord) -> Dominance:
    """Classify a job class as Male, Female or Balanced by employee composition.

    A class with no employees has no basis for dominance and is Balanced.
    """
    total = job.total_employees
    if total == 0:
        return BALANCED

    male_share = job.males / total
    female_share = job.females / total

    if male_share >= MALE_DOMINANCE_THRESHOLD:
        return MALE
    if female_share >= FEMALE_DOMINANCE_THRESHOLD:
        return FEMALE
    return BALANCED
