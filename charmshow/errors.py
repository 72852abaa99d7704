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
"""Charmshow error classes."""

from collections.abc import Iterable

from craft_cli import CraftError


class InvalidCharmURLError(CraftError):
    """The charm or bundle id cannot be parsed."""

    def __init__(self, url: str, reason: str):
        self.url = url
        self.reason = reason
        super().__init__(f"cannot parse URL {url!r}: {reason}")


class StoreError(CraftError):
    """Errors talking to the charm store."""


class NoMetadataEndpointsError(StoreError):
    """The store did not report any metadata endpoint."""

    def __init__(self):
        super().__init__(
            "no metadata endpoints found",
            resolution="Check that the store URL points to a charm store.",
        )


class UnexpectedResponseError(CraftError):
    """The store response does not have the expected shape."""

    def __init__(self, message: str, problems: Iterable[str] = ()):
        self.problems = list(problems)
        details = "\n".join(f"- {problem}" for problem in self.problems) or None
        super().__init__(message, details=details, reportable=False)
