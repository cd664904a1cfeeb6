"""Cat thread pool: ``GET /_cat/thread_pool``."""

from __future__ import annotations

from typing import List

from ..models import HttpMethod
from ..parameters import QueryParameter, RequestParameters
from ..requests import RequestBase, RequestDescriptorBase


class CatThreadPoolRequestParameters(RequestParameters):
    default_http_method = HttpMethod.GET
    routes = ("/_cat/thread_pool",)

    local = QueryParameter(bool)
    master_timeout = QueryParameter(str)
    h = QueryParameter(List[str])
    help = QueryParameter(bool)
    v = QueryParameter(bool)
    full_id = QueryParameter(bool)


class CatThreadPoolRequest(RequestBase):
    parameters_class = CatThreadPoolRequestParameters


class CatThreadPoolDescriptor(RequestDescriptorBase):
    parameters_class = CatThreadPoolRequestParameters

    def local(self, local: bool = True) -> "CatThreadPoolDescriptor":
        return self._assign("local", local)

    def master_timeout(self, master_timeout: str) -> "CatThreadPoolDescriptor":
        return self._assign("master_timeout", master_timeout)

    def h(self, *columns: str) -> "CatThreadPoolDescriptor":
        return self._assign("h", list(columns) or None)

    def help(self, help: bool = True) -> "CatThreadPoolDescriptor":
        return self._assign("help", help)

    def v(self, verbose: bool = True) -> "CatThreadPoolDescriptor":
        return self._assign("v", verbose)

    def full_id(self, full_id: bool = True) -> "CatThreadPoolDescriptor":
        return self._assign("full_id", full_id)
