"""Concrete operations and the catalog the CLI resolves by name."""

from __future__ import annotations

from typing import Dict, Tuple, Type

from ..requests import RequestBase, RequestDescriptorBase
from .bulk_alias import (
    AliasAction,
    AliasAddAction,
    AliasAddDescriptor,
    AliasRemoveAction,
    AliasRemoveDescriptor,
    BulkAliasDescriptor,
    BulkAliasRequest,
    BulkAliasRequestParameters,
)
from .cat_thread_pool import CatThreadPoolDescriptor, CatThreadPoolRequest, CatThreadPoolRequestParameters
from .get_aliases import ExpandWildcards, GetAliasesDescriptor, GetAliasesRequest, GetAliasesRequestParameters

OPERATIONS: Dict[str, Tuple[Type[RequestBase], Type[RequestDescriptorBase]]] = {
    "get-aliases": (GetAliasesRequest, GetAliasesDescriptor),
    "bulk-aliases": (BulkAliasRequest, BulkAliasDescriptor),
    "cat-thread-pool": (CatThreadPoolRequest, CatThreadPoolDescriptor),
}

__all__ = [
    "AliasAction",
    "AliasAddAction",
    "AliasAddDescriptor",
    "AliasRemoveAction",
    "AliasRemoveDescriptor",
    "BulkAliasDescriptor",
    "BulkAliasRequest",
    "BulkAliasRequestParameters",
    "CatThreadPoolDescriptor",
    "CatThreadPoolRequest",
    "CatThreadPoolRequestParameters",
    "ExpandWildcards",
    "GetAliasesDescriptor",
    "GetAliasesRequest",
    "GetAliasesRequestParameters",
    "OPERATIONS",
]
