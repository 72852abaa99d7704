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

"""A client to hit the charm store."""

import os
import pathlib
import platform
from http import cookiejar
from json.decoder import JSONDecodeError
from typing import Any

import requests
from craft_cli import emit

from charmshow import __version__, utils
from charmshow.errors import StoreError

TESTING_ENV_PREFIXES = ["TRAVIS", "AUTOPKGTEST_TMP"]


def build_user_agent():
    """Build the charmshow's user agent."""
    if any(key.startswith(prefix) for prefix in TESTING_ENV_PREFIXES for key in os.environ):
        testing = " (testing) "
    else:
        testing = " "
    os_platform = "{0.system}/{0.release} ({0.machine})".format(utils.get_os_platform())
    return f"charmshow/{__version__}{testing}{os_platform} python/{platform.python_version()}"


class Client:
    """Lightweight layer above a requests session to the charm store API.

    All the requests are done in the context of the given channel (if any), using
    HTTP basic authentication if credentials are given. Cookies received from the
    store are kept in a file-backed jar that is saved when the client is closed.
    """

    def __init__(
        self,
        base_url: str,
        *,
        channel: str | None = None,
        auth: tuple[str, str] | None = None,
        cookie_file: pathlib.Path | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.channel = channel
        self.cookie_file = cookie_file

        self._session = requests.Session()
        self._session.headers["User-Agent"] = build_user_agent()
        if auth is not None:
            self._session.auth = auth
        self._session.cookies = self._load_cookies()

    def _load_cookies(self) -> cookiejar.LWPCookieJar:
        """Get the cookie jar, with the cookies from previous runs if any."""
        if self.cookie_file is None:
            return cookiejar.LWPCookieJar()

        jar = cookiejar.LWPCookieJar(str(self.cookie_file))
        if self.cookie_file.exists():
            try:
                jar.load(ignore_discard=True)
            except (cookiejar.LoadError, OSError) as exc:
                emit.debug(f"Ignoring unreadable cookie file {str(self.cookie_file)!r}: {exc!r}")
        return jar

    def save_cookies(self) -> None:
        """Persist the cookie jar, if backed by a file."""
        if self.cookie_file is None:
            return
        try:
            self.cookie_file.parent.mkdir(parents=True, exist_ok=True)
            self._session.cookies.save(ignore_discard=True)
        except OSError as exc:
            emit.debug(f"Could not save cookie file {str(self.cookie_file)!r}: {exc!r}")

    def close(self) -> None:
        """Save the cookies and release the HTTP session."""
        self.save_cookies()
        self._session.close()

    def request_urlpath_json(self, method: str, urlpath: str) -> Any:
        """Return the decoded JSON body of the response to a urlpath.

        :raises StoreError: if the store cannot be reached, answers with an
            error or the body is not valid JSON.
        """
        params = {}
        if self.channel is not None:
            params["channel"] = self.channel

        url = self.base_url + urlpath
        emit.debug(f"Requesting {method} {url} (params: {params})")
        try:
            response = self._session.request(method, url, params=params)
        except requests.RequestException as exc:
            raise StoreError(f"cannot connect to the charm store: {exc}") from exc

        if not response.ok:
            raise StoreError(self._get_error_message(response))

        try:
            result = response.json()
        except JSONDecodeError as json_error:
            raise StoreError(
                f"Could not retrieve json response ({response.status_code}) from request"
            ) from json_error
        emit.trace(f"Store response: {result}")
        return result

    @staticmethod
    def _get_error_message(response: requests.Response) -> str:
        """Extract the error message the store sends in the body, if any."""
        try:
            body = response.json()
        except JSONDecodeError:
            body = None
        if isinstance(body, dict) and body.get("Message"):
            return body["Message"]
        return f"unexpected response status {response.status_code}: {response.reason}"
