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

import copy

import pytest
import responses as responses_module

from charmshow.env import CharmStoreConfig

SUMMARY_META = {
    "id-revision": {"Revision": 5},
    "id-name": {"Name": "wordpress"},
    "promulgated": {"Promulgated": True},
    "owner": {"User": "charmers"},
    "bugs-url": "https://bugs.example.com/wordpress",
    "homepage": "https://example.com/wordpress",
    "terms": [],
    "perm": {"Read": ["everyone"], "Write": ["charmers", "bob"]},
    "published": {
        "Info": [
            {"Channel": "stable", "Current": True},
            {"Channel": "edge", "Current": False},
        ]
    },
    "charm-metadata": {
        "Summary": "WordPress is a full featured web blogging tool.",
        "SupportedSeries": ["trusty", "xenial"],
        "Tags": ["applications", "blog"],
        "Subordinate": False,
    },
}


@pytest.fixture
def summary_meta():
    """The metadata of a charm as it is used for the summary."""
    return copy.deepcopy(SUMMARY_META)


@pytest.fixture
def bundle_meta(summary_meta):
    """The metadata of a bundle as it is used for the summary."""
    del summary_meta["charm-metadata"]
    summary_meta["id-name"] = {"Name": "wiki-simple"}
    summary_meta["bundle-metadata"] = {"Services": {"wiki": {"Charm": "cs:wiki"}}}
    return summary_meta


@pytest.fixture
def store_config(tmp_path):
    """A store configuration pointing to a fake server."""
    return CharmStoreConfig(api_url="https://api.test/", cookie_file=tmp_path / "cookies.txt")


@pytest.fixture
def responses():
    """Fake the HTTP server; all registered responses must be used."""
    with responses_module.RequestsMock() as rsps:
        yield rsps
