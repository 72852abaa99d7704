# Copyright 2024 Canonical Ltd.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
# http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""The charm store API handling."""

from collections.abc import Iterable
from typing import Any
from urllib.parse import urlencode

from craft_cli import emit

from charmshow.charmurl import CharmURL
from charmshow.env import CharmStoreConfig
from charmshow.errors import StoreError
from charmshow.store.client import Client


class Store:
    """The main interface to the charm store's API.

    Use it as a context manager so the client resources (including the cookies
    jar) are always released, even if the requests fail.
    """

    def __init__(
        self,
        store_config: CharmStoreConfig,
        channel: str | None = None,
        auth: tuple[str, str] | None = None,
    ):
        self._client = Client(
            store_config.base_url,
            channel=channel,
            auth=auth,
            cookie_file=store_config.cookie_file,
        )

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()

    def close(self) -> None:
        """Release the client resources."""
        self._client.close()

    def list_meta_endpoints(self) -> list[str]:
        """Return all the metadata fields the store can serve."""
        emit.progress("Listing available metadata endpoints")
        try:
            response = self._client.request_urlpath_json("GET", "/meta/")
        except StoreError as error:
            raise StoreError("cannot get metadata endpoints", details=str(error)) from error

        if response is None:
            return []
        if not isinstance(response, list):
            raise StoreError(
                "cannot get metadata endpoints",
                details=f"expected a list, got {type(response).__name__}",
            )
        return response

    def get_meta_any(self, charm_url: CharmURL, includes: Iterable[str]) -> dict[str, Any]:
        """Return the requested metadata fields of a charm or bundle.

        Each field is requested as an 'include' parameter, keeping the order.
        """
        query = urlencode([("include", field) for field in includes])
        path = f"/{charm_url.path}/meta/any?{query}"
        emit.progress(f"Getting metadata for {charm_url}")
        try:
            response = self._client.request_urlpath_json("GET", path)
        except StoreError as error:
            raise StoreError(f"cannot get metadata from {path}", details=str(error)) from error

        if not isinstance(response, dict):
            raise StoreError(
                f"cannot get metadata from {path}",
                details=f"expected a mapping, got {type(response).__name__}",
            )
        meta = response.get("Meta")
        if meta is None:
            return {}
        if not isinstance(meta, dict):
            raise StoreError(
                f"cannot get metadata from {path}",
                details=f"expected 'Meta' to be a mapping, got {type(meta).__name__}",
            )
        return meta
