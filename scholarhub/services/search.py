"""
Search and filter matching over entity collections.

Every filter field is ANDed together and an unset field always matches. The
functions are pure: they never reorder, copy or mutate the collection.
"""
from typing import Iterable

from ..models.schemas import EntityType, Scholarship, SearchFilters, University

ANY_MAJOR = "Any"


def _contains(haystack: str, needle: str) -> bool:
    return needle.lower() in haystack.lower()


def scholarship_matches(s: Scholarship, filters: SearchFilters) -> bool:
    if filters.query and not (_contains(s.name, filters.query) or _contains(s.description, filters.query)):
        return False
    if filters.country and s.country != filters.country:
        return False
    if filters.major and not (s.major == ANY_MAJOR or _contains(s.major, filters.major)):
        return False
    if filters.budget is not None and s.budget < filters.budget:
        return False
    if filters.deadline is not None and s.deadline < filters.deadline:
        return False
    return True


def university_matches(u: University, filters: SearchFilters) -> bool:
    # budget and deadline do not apply to universities
    if filters.query and not (
        _contains(u.name, filters.query) or any(_contains(p, filters.query) for p in u.programs)
    ):
        return False
    if filters.country and u.country != filters.country:
        return False
    if filters.major and not any(_contains(p, filters.major) for p in u.programs):
        return False
    return True


def search_scholarships(collection: Iterable[Scholarship], filters: SearchFilters) -> list[Scholarship]:
    """Scholarships matching every set filter, in store order."""
    return [s for s in collection if scholarship_matches(s, filters)]


def search_universities(collection: Iterable[University], filters: SearchFilters) -> list[University]:
    """Universities matching query, country and major, in store order."""
    return [u for u in collection if university_matches(u, filters)]


def search(collection: Iterable, filters: SearchFilters, entity_type: EntityType) -> list:
    if EntityType(entity_type) is EntityType.SCHOLARSHIP:
        return search_scholarships(collection, filters)
    return search_universities(collection, filters)
