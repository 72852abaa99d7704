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

"""Charm and bundle identifiers as understood by the charm store.

The accepted form is::

    [cs:][~user/][series/]name[-revision]

for example ``wordpress``, ``trusty/wordpress-3`` or ``cs:~bob/mysql``.
"""

import dataclasses
import re

from charmshow import const
from charmshow.errors import InvalidCharmURLError

VALID_USER = re.compile(r"^[a-z0-9][a-zA-Z0-9+.-]+$")
VALID_SERIES = re.compile(r"^[a-z]+([a-z0-9]+)?$")
VALID_NAME = re.compile(r"^[a-z][a-z0-9]*(-[a-z0-9]*[a-z][a-z0-9]*)*$")


@dataclasses.dataclass(frozen=True)
class CharmURL:
    """A parsed reference to a charm or bundle in the store."""

    name: str
    user: str | None = None
    series: str | None = None
    revision: int | None = None

    @classmethod
    def parse(cls, url: str) -> "CharmURL":
        """Build a CharmURL from its string form.

        :raises InvalidCharmURLError: if the string is not a valid charm or bundle id.
        """
        if not url:
            raise InvalidCharmURLError(url, "empty URL")

        schema, sep, rest = url.partition(":")
        if not sep:
            rest = url
        elif schema != const.CHARM_URL_SCHEMA:
            raise InvalidCharmURLError(url, f"schema {schema!r} not valid")

        parts = rest.split("/")
        user = None
        if parts[0].startswith("~"):
            user = parts.pop(0)[1:]
            if not VALID_USER.match(user):
                raise InvalidCharmURLError(url, f"user name {user!r} not valid")

        if len(parts) == 2:
            series = parts.pop(0)
            if not VALID_SERIES.match(series):
                raise InvalidCharmURLError(url, f"series name {series!r} not valid")
        elif len(parts) == 1:
            series = None
        else:
            raise InvalidCharmURLError(url, "URL has invalid form")

        name, revision = _split_revision(parts[0])
        if not VALID_NAME.match(name):
            raise InvalidCharmURLError(url, f"name {name!r} not valid")

        return cls(name=name, user=user, series=series, revision=revision)

    @property
    def path(self) -> str:
        """The URL path of the entity in the store, without schema."""
        parts = []
        if self.user is not None:
            parts.append(f"~{self.user}")
        if self.series is not None:
            parts.append(self.series)
        if self.revision is None:
            parts.append(self.name)
        else:
            parts.append(f"{self.name}-{self.revision}")
        return "/".join(parts)

    def __str__(self) -> str:
        return f"{const.CHARM_URL_SCHEMA}:{self.path}"


def _split_revision(name_rev: str) -> tuple[str, int | None]:
    """Separate the trailing revision number, if any, from the name."""
    name, sep, revision = name_rev.rpartition("-")
    if sep and revision.isdigit() and revision.isascii():
        return name, int(revision)
    return name_rev, None
