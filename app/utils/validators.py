"""Validators."""

import re
from typing import List


def validate_phone(phone: str) -> bool:
    """Validate phone number."""
    # Simple validation for 10+ digits
    pattern = r'^\+?[\d\s-]{10,}$'
    return bool(re.match(pattern, phone))


def validate_file_extension(filename: str, allowed_extensions: List[str]) -> bool:
    """Validate file extension."""
    if not filename or '.' not in filename:
        return False

    extension = filename.rsplit('.', 1)[-1].lower()
    return extension in [ext.lower() for ext in allowed_extensions]


def parse_skills(raw: str) -> List[str]:
    """Split a comma-separated skills field, dropping blanks."""
    return [skill.strip() for skill in raw.split(",") if skill.strip()]
