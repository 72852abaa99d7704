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

"""Tests for the store API layer (code in store/store.py)."""

from unittest.mock import patch

import pytest

from charmshow.charmurl import CharmURL
from charmshow.errors import StoreError
from charmshow.store import Store

# -- tests for the store setup


def test_store_client_init(store_config):
    with patch("charmshow.store.store.Client") as client_mock:
        Store(store_config, channel="edge", auth=("bob", "secret"))

    client_mock.assert_called_once_with(
        "https://api.test/v5",
        channel="edge",
        auth=("bob", "secret"),
        cookie_file=store_config.cookie_file,
    )


def test_store_context_closes_client(store_config):
    with patch("charmshow.store.store.Client") as client_mock:
        with Store(store_config):
            client_mock.return_value.close.assert_not_called()

    client_mock.return_value.close.assert_called_once_with()


def test_store_context_closes_client_on_error(store_config):
    """The resources are released even if something went wrong."""
    with patch("charmshow.store.store.Client") as client_mock:
        with pytest.raises(StoreError):
            with Store(store_config):
                raise StoreError("boom")

    client_mock.return_value.close.assert_called_once_with()


def test_store_context_saves_cookies(responses, store_config):
    responses.add(
        responses.GET,
        "https://api.test/v5/meta/",
        json=["id"],
        headers={"Set-Cookie": "macaroon-auth=stuff; Path=/"},
    )

    with Store(store_config) as store:
        store.list_meta_endpoints()

    assert store_config.cookie_file.exists()


# -- tests for listing the metadata endpoints


def test_list_meta_endpoints(emitter, responses, store_config):
    responses.add(responses.GET, "https://api.test/v5/meta/", json=["perm", "id", "archive-size"])

    with Store(store_config) as store:
        result = store.list_meta_endpoints()

    assert result == ["perm", "id", "archive-size"]
    emitter.assert_progress("Listing available metadata endpoints")


def test_list_meta_endpoints_null(responses, store_config):
    responses.add(
        responses.GET, "https://api.test/v5/meta/", body="null", content_type="application/json"
    )

    with Store(store_config) as store:
        result = store.list_meta_endpoints()

    assert result == []


def test_list_meta_endpoints_error(responses, store_config):
    responses.add(
        responses.GET, "https://api.test/v5/meta/", json={"Message": "broken"}, status=500
    )

    with Store(store_config) as store:
        with pytest.raises(StoreError) as cm:
            store.list_meta_endpoints()

    assert str(cm.value) == "cannot get metadata endpoints"
    assert cm.value.details == "broken"


def test_list_meta_endpoints_not_a_list(responses, store_config):
    responses.add(responses.GET, "https://api.test/v5/meta/", json={"id": True})

    with Store(store_config) as store:
        with pytest.raises(StoreError) as cm:
            store.list_meta_endpoints()

    assert str(cm.value) == "cannot get metadata endpoints"
    assert cm.value.details == "expected a list, got dict"


# -- tests for getting the metadata


def test_get_meta_any(emitter, responses, store_config):
    """The includes are sent in order, one parameter each."""
    meta = {"perm": {"Read": ["everyone"]}, "id-name": {"Name": "mysql"}}
    responses.add(
        responses.GET,
        "https://api.test/v5/~bob/trusty/mysql-3/meta/any",
        json={"Id": "cs:~bob/trusty/mysql-3", "Meta": meta},
    )

    charm_url = CharmURL.parse("cs:~bob/trusty/mysql-3")
    with Store(store_config) as store:
        result = store.get_meta_any(charm_url, ["perm", "id-name", "common-info"])

    assert result == meta
    (call,) = responses.calls
    assert call.request.url == (
        "https://api.test/v5/~bob/trusty/mysql-3/meta/any"
        "?include=perm&include=id-name&include=common-info"
    )
    emitter.assert_progress("Getting metadata for cs:~bob/trusty/mysql-3")


def test_get_meta_any_with_channel(responses, store_config):
    responses.add(
        responses.GET, "https://api.test/v5/wordpress/meta/any", json={"Meta": {"id": {}}}
    )

    with Store(store_config, channel="beta") as store:
        store.get_meta_any(CharmURL.parse("wordpress"), ["id"])

    (call,) = responses.calls
    assert call.request.url == (
        "https://api.test/v5/wordpress/meta/any?include=id&channel=beta"
    )


def test_get_meta_any_null_meta(responses, store_config):
    responses.add(
        responses.GET, "https://api.test/v5/wordpress/meta/any", json={"Meta": None}
    )

    with Store(store_config) as store:
        result = store.get_meta_any(CharmURL.parse("wordpress"), ["id"])

    assert result == {}


def test_get_meta_any_error(responses, store_config):
    """The error tells which path was requested."""
    responses.add(
        responses.GET,
        "https://api.test/v5/nope/meta/any",
        json={"Message": "no matching charm or bundle for cs:nope", "Code": "not found"},
        status=404,
    )

    with Store(store_config) as store:
        with pytest.raises(StoreError) as cm:
            store.get_meta_any(CharmURL.parse("nope"), ["id", "perm"])

    assert str(cm.value) == "cannot get metadata from /nope/meta/any?include=id&include=perm"
    assert cm.value.details == "no matching charm or bundle for cs:nope"


@pytest.mark.parametrize(
    ("body", "details"),
    [
        (["id"], "expected a mapping, got list"),
        ({"Meta": ["id"]}, "expected 'Meta' to be a mapping, got list"),
    ],
)
def test_get_meta_any_bad_shape(responses, store_config, body, details):
    responses.add(responses.GET, "https://api.test/v5/wordpress/meta/any", json=body)

    with Store(store_config) as store:
        with pytest.raises(StoreError) as cm:
            store.get_meta_any(CharmURL.parse("wordpress"), ["id"])

    assert str(cm.value) == "cannot get metadata from /wordpress/meta/any?include=id"
    assert cm.value.details == details
