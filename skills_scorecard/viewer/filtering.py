"""Client-side search over loaded skills."""


def skill_matches(skill: dict, query: str) -> bool:
    """Check a lower-cased query against the searchable fields of a skill."""
    fields = (
        skill.get("name"),
        skill.get("description"),
        skill.get("location"),
        skill.get("overallScore"),
        skill.get("securityRisk"),
    )
    # Report fields arrive untyped from JSON; compare their text form
    return any(query in str(value).lower() for value in fields if value is not None)


def filter_skills(skills: list[dict], query: str) -> list[dict]:
    """Filter skills by a free-text query.

    The query is trimmed and compared case-insensitively against name,
    description, location, overall score and security risk. An empty query
    returns every skill.

    Example:
        >>> skills = [{"name": "Alpha", "overallScore": 90}, {"name": "Beta"}]
        >>> [s["name"] for s in filter_skills(skills, "alpha")]
        ['Alpha']
    """
    q = (query or "").strip().lower()
    if not q:
        return list(skills)
    return [skill for skill in skills if skill_matches(skill, q)]
