"""
Request Filtering

Pure filtering of loaded valuation requests. No I/O and no timing concerns;
debouncing of the search term happens in the controller before a term
reaches these filters.
"""

from dataclasses import dataclass, replace
from typing import Any, Iterable, List, Mapping

from valuationdesk.core.models import ValuationRequest

# camelCase filter keys used by forms and query strings
FILTER_KEYS = {
    "propertyType": "property_type",
    "status": "status",
    "stateId": "state_id",
    "search": "search",
}


@dataclass(frozen=True)
class RequestFilters:
    """Active filter values. An empty string means the filter is off."""

    property_type: str = ""
    status: str = ""
    state_id: str = ""
    search: str = ""

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "RequestFilters":
        """Build filters from camelCase keys, ignoring unknown ones."""
        values = {}
        for key, attr in FILTER_KEYS.items():
            value = data.get(key)
            if value is not None:
                values[attr] = str(value)
        return cls(**values)

    def with_value(self, key: str, value: str) -> "RequestFilters":
        """Return a copy with one camelCase filter changed.

        Raises:
            ValueError: If the key is not a known filter.
        """
        if key not in FILTER_KEYS:
            raise ValueError(f"Unknown filter: {key}")
        return replace(self, **{FILTER_KEYS[key]: value or ""})

    @property
    def is_active(self) -> bool:
        return any((self.property_type, self.status, self.state_id, self.search))


def matches(request: ValuationRequest, filters: RequestFilters) -> bool:
    """True if the request passes every active filter."""
    if filters.property_type and request.property_type.value != filters.property_type:
        return False
    if filters.status and request.status.value != filters.status:
        return False
    if filters.state_id and request.state_id != filters.state_id:
        return False
    if filters.search and filters.search.lower() not in request.property_address.lower():
        return False
    return True


def filter_requests(
    requests: Iterable[ValuationRequest],
    filters: RequestFilters,
) -> List[ValuationRequest]:
    """Keep the requests matching all active filters, preserving order."""
    return [r for r in requests if matches(r, filters)]
