"""Route handling shared by operations with an optional index segment."""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence, TypeVar, Union

from ..config import ConnectionSettings
from ..path import RequestPath
from ..requests import RequestBase, RequestDescriptorBase

ALL_INDICES = "_all"

TIndices = TypeVar("TIndices", bound="IndicesOptionalPathDescriptor")

# None, ALL_INDICES, or a non-empty list of names; each write replaces the last.
IndicesState = Union[None, str, List[str]]


class IndicesOptionalPath(RequestBase):
    """Writes the index segment: ``_all``, a comma joined list, or nothing."""

    def __init__(self, indices: Optional[Sequence[str]] = None, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self._indices: IndicesState = list(indices) if indices else None

    def _route_state(self) -> Dict[str, Any]:
        return {"indices": self._indices}

    def set_route_parameters(self, settings: ConnectionSettings, path: RequestPath) -> None:
        if self._indices == ALL_INDICES:
            path.index = ALL_INDICES
        elif self._indices:
            path.index = ",".join(self._indices)


class IndicesOptionalPathRequest(IndicesOptionalPath):
    @property
    def indices(self) -> Optional[List[str]]:
        if self._indices == ALL_INDICES:
            return None
        return self._indices

    @indices.setter
    def indices(self, value: Optional[Sequence[str]]) -> None:
        self._indices = list(value) if value else None

    @property
    def all_indices(self) -> bool:
        return self._indices == ALL_INDICES

    @all_indices.setter
    def all_indices(self, value: bool) -> None:
        if value:
            self._indices = ALL_INDICES
        elif self._indices == ALL_INDICES:
            self._indices = None


class IndicesOptionalPathDescriptor(IndicesOptionalPath, RequestDescriptorBase):
    def index(self: TIndices, *indices: str) -> TIndices:
        self._indices = list(indices) or None
        return self

    def all_indices(self: TIndices) -> TIndices:
        self._indices = ALL_INDICES
        return self
