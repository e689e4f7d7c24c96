"""Field extraction from CHPL API JSON documents.

These functions expect the documented response shapes and raise KeyError or
TypeError on anything else; `Result.map` turns those into failures.
"""


def _string(value, field: str) -> str:
    if not isinstance(value, str):
        raise TypeError(f"{field} must be a string, got {value!r}")
    return value


def names(items: list) -> list[str]:
    """Get the "name" field of each element, preserving order."""
    return [_string(item["name"], "name") for item in items]


def education_type_names(document: dict) -> list[str]:
    """Names from an education types response: {"data": [{"name": ...}]}."""
    return names(document["data"])


def practice_type_names(document: list) -> list[str]:
    """Names from a practice types response: [{"name": ...}]."""
    return names(document)


def sort_names(values: list[str]) -> list[str]:
    """Sort ascending ignoring case, breaking ties on the exact value."""
    return sorted(values, key=lambda name: (name.lower(), name))


def product_listing_ids(search_response: dict) -> list:
    """IDs of search results that carry a "product" field."""
    return [
        result["id"]
        for result in search_response["results"]
        if "product" in result
    ]


def participant_education_types(details: dict) -> set[str]:
    """
    Collect educationTypeName values from one listing's details.

    Walks sed -> testTasks -> testParticipants. Any missing level simply
    contributes nothing; a present non-string name raises TypeError.
    """
    found = set()
    sed = details.get("sed") or {}
    for task in sed.get("testTasks") or []:
        for participant in task.get("testParticipants") or []:
            name = participant.get("educationTypeName")
            if name is not None:
                found.add(_string(name, "educationTypeName"))
    return found
