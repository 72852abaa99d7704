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

"""Charmshow environment utilities."""
import dataclasses
import os
import pathlib

import platformdirs

from charmshow import const


def get_cookie_file_path() -> pathlib.Path:
    """Path for the file where the store cookies are persisted."""
    cookie_file_env = os.getenv(const.COOKIE_FILE_ENV_VAR)
    if cookie_file_env:
        return pathlib.Path(cookie_file_env).expanduser()

    data_path = platformdirs.user_data_path(appname="charmshow", ensure_exists=True)
    return data_path / const.COOKIE_FILENAME


@dataclasses.dataclass(frozen=True)
class CharmStoreConfig:
    """Definition of the charm store endpoint configuration."""

    api_url: str = const.DEFAULT_STORE_API_URL
    api_version: str = const.STORE_API_VERSION
    cookie_file: pathlib.Path | None = None

    @property
    def base_url(self) -> str:
        """The URL all the API paths hang from."""
        return f"{self.api_url.rstrip('/')}/{self.api_version}"


def get_store_config() -> CharmStoreConfig:
    """Get the appropriate configuration for the store."""
    api_url = os.getenv(const.STORE_API_ENV_VAR) or const.DEFAULT_STORE_API_URL
    return CharmStoreConfig(api_url=api_url, cookie_file=get_cookie_file_path())
