from __future__ import annotations

import re
from typing import Any, Dict, Iterable, List, Mapping

ALL_CATEGORIES = "All"
CATEGORY_CHOICES = ["General", "Work", "Personal", "Family", "Friends"]
EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

MISSING_FIELDS_MESSAGE = "Please fill in all required fields"
INVALID_EMAIL_MESSAGE = "Please enter a valid email address"

ContactDict = Mapping[str, Any]


def category_filters(contacts: Iterable[ContactDict]) -> List[str]:
    """Filter buttons: "All" followed by each category in first-seen order."""
    seen = dict.fromkeys(contact["category"] for contact in contacts)
    return [ALL_CATEGORIES, *seen]


def filter_by_category(contacts: Iterable[ContactDict], selected: str) -> List[ContactDict]:
    if not selected or selected == ALL_CATEGORIES:
        return list(contacts)
    return [contact for contact in contacts if contact["category"] == selected]


def group_by_category(contacts: Iterable[ContactDict]) -> Dict[str, List[ContactDict]]:
    groups: Dict[str, List[ContactDict]] = {}
    for contact in contacts:
        groups.setdefault(contact["category"], []).append(contact)
    return {category: groups[category] for category in sorted(groups)}


def validate_contact_form(form: Mapping[str, Any]) -> List[str]:
    # Only a convenience for the user; the API validates again.
    problems = []
    if any(not str(form.get(key) or "").strip() for key in ("name", "phone", "email")):
        problems.append(MISSING_FIELDS_MESSAGE)
        return problems
    if not EMAIL_PATTERN.match(str(form["email"]).strip()):
        problems.append(INVALID_EMAIL_MESSAGE)
    return problems


def contact_count_label(count: int) -> str:
    return f"{count} {'Contact' if count == 1 else 'Contacts'}"


def empty_form() -> Dict[str, str]:
    return {"name": "", "phone": "", "email": "", "category": "General"}
