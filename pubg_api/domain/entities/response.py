"""Response entity returned by every client operation."""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping


@dataclass(frozen=True, slots=True)
class APIResponse:
    """Parsed body and status of one GET, handed to the caller as-is."""

    status_code: int
    data: Any
    url: str = ""
    headers: Mapping[str, str] = field(default_factory=dict)

    @property
    def included(self) -> List[Dict[str, Any]]:
        """``included`` resources of a JSON:API document.

        Read from the top level of the document, falling back to
        ``data.included``. Anything that is not a list counts as empty.
        """
        if not isinstance(self.data, Mapping):
            return []
        items = self.data.get("included")
        if items is None and isinstance(self.data.get("data"), Mapping):
            items = self.data["data"].get("included")
        return items if isinstance(items, list) else []
