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

"""Tests for the charm and bundle identifiers (code in charmurl.py)."""

import dataclasses

import pytest

from charmshow.charmurl import CharmURL
from charmshow.errors import InvalidCharmURLError


@pytest.mark.parametrize(
    ("url", "expected", "path"),
    [
        ("wordpress", CharmURL(name="wordpress"), "wordpress"),
        ("cs:wordpress", CharmURL(name="wordpress"), "wordpress"),
        ("wordpress-3", CharmURL(name="wordpress", revision=3), "wordpress-3"),
        (
            "trusty/wordpress",
            CharmURL(name="wordpress", series="trusty"),
            "trusty/wordpress",
        ),
        (
            "cs:~bob/trusty/mysql-42",
            CharmURL(name="mysql", user="bob", series="trusty", revision=42),
            "~bob/trusty/mysql-42",
        ),
        ("~bob/mysql", CharmURL(name="mysql", user="bob"), "~bob/mysql"),
        ("wiki-simple", CharmURL(name="wiki-simple"), "wiki-simple"),
        ("wiki-simple-0", CharmURL(name="wiki-simple", revision=0), "wiki-simple-0"),
    ],
)
def test_parse_valid(url, expected, path):
    charm_url = CharmURL.parse(url)
    assert charm_url == expected
    assert charm_url.path == path
    assert str(charm_url) == "cs:" + path


@pytest.mark.parametrize(
    ("url", "reason"),
    [
        ("", "empty URL"),
        ("local:wordpress", "schema 'local' not valid"),
        ("~Bob!/wordpress", "user name 'Bob!' not valid"),
        ("Trusty/wordpress", "series name 'Trusty' not valid"),
        ("WordPress", "name 'WordPress' not valid"),
        ("wordpress-", "name 'wordpress-' not valid"),
        ("1wordpress", "name '1wordpress' not valid"),
        ("~bob/trusty/wordpress/extra", "URL has invalid form"),
    ],
)
def test_parse_invalid(url, reason):
    with pytest.raises(InvalidCharmURLError) as cm:
        CharmURL.parse(url)
    assert cm.value.reason == reason
    assert str(cm.value) == f"cannot parse URL {url!r}: {reason}"


def test_charmurl_is_immutable():
    charm_url = CharmURL.parse("wordpress")
    with pytest.raises(dataclasses.FrozenInstanceError):
        charm_url.name = "mysql"
