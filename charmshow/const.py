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

"""Constants used in charmshow."""

# region Environment variables
STORE_API_ENV_VAR = "JUJU_CHARMSTORE"
COOKIE_FILE_ENV_VAR = "JUJU_COOKIEFILE"
# endregion
# region Charm store
DEFAULT_STORE_API_URL = "https://api.jujucharms.com/charmstore"
STORE_API_VERSION = "v5"
CHARM_URL_SCHEMA = "cs"
COOKIE_FILENAME = "cookies.txt"
# endregion
# region Metadata fields
COMMON_INFO = "common-info"

# fields that the store serves as part of the "common-info" aggregate
COMMON_INFO_FIELDS = ("bugs-url", "homepage")

# what is requested when no fields, --list nor --all are given
DEFAULT_SUMMARY_FIELDS = (
    "perm",
    "charm-metadata",
    "bundle-metadata",
    "bugs-url",
    "homepage",
    "published",
    "promulgated",
    "owner",
    "terms",
    "id-name",
    "id-revision",
)
# endregion
