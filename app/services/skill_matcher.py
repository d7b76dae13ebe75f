"""
Skill matching heuristic.

Scores how much of a job's requirement list is covered by a candidate's
skills. A requirement counts as covered when any skill contains it as a
case-insensitive substring, so "java" is covered by "JavaScript".
"""

from typing import Iterable, Optional


def calculate_match(
    user_skills: Optional[Iterable[str]],
    job_requirements: Optional[Iterable[str]],
) -> float:
    """
    Percentage (0-100) of job requirements matched by the user's skills.

    Args:
        user_skills: Skills from the candidate profile
        job_requirements: Requirement strings from the job posting

    Returns:
        0 when either side is empty or missing, otherwise
        matched requirements / total requirements * 100
    """
    skills = [skill.lower() for skill in (user_skills or [])]
    requirements = list(job_requirements or [])

    if not skills or not requirements:
        return 0.0

    matched = [
        requirement
        for requirement in requirements
        if any(requirement.lower().strip() in skill for skill in skills)
    ]

    return len(matched) / len(requirements) * 100
