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

"""Handling of the metadata fields requested to the store.

Some fields (see ``const.COMMON_INFO_FIELDS``) are not served directly by the
store but inside the "common-info" aggregate; these need to be requested through
it and then brought to the top level of the response.
"""

from collections.abc import Iterable
from typing import Any

from craft_cli import emit

from charmshow import const
from charmshow.errors import UnexpectedResponseError


def classify_includes(
    includes: Iterable[str], common_fields: Iterable[str] = const.COMMON_INFO_FIELDS
) -> tuple[bool, list[str], list[str]]:
    """Separate the fields that are part of the common info from the rest.

    Return if the common info aggregate was explicitly requested, the common info
    fields found (in the given order), and the fields to request to the store: the
    given ones without the common info fields, plus the aggregate at the end if
    needed.
    """
    common_fields = set(common_fields)
    common_info_required = False
    common_info_fields = []
    new_includes = []
    for field in includes:
        if field == const.COMMON_INFO:
            common_info_required = True
        if field in common_fields:
            common_info_fields.append(field)
        else:
            new_includes.append(field)

    if common_info_fields and not common_info_required:
        new_includes.append(const.COMMON_INFO)
    return common_info_required, common_info_fields, new_includes


def project_common_info(
    meta: dict[str, Any], common_info_fields: Iterable[str], common_info_required: bool
) -> dict[str, Any]:
    """Move the requested common info fields to the top level of the metadata.

    Fields not present in the common info are set to an empty string. The aggregate
    is removed unless it was explicitly requested. The metadata is changed in place
    and also returned.

    :raises UnexpectedResponseError: if the common info is not a mapping.
    """
    common_info_fields = list(common_info_fields)
    if not common_info_fields:
        return meta

    common_info = meta.get(const.COMMON_INFO)
    if common_info is None:
        emit.debug("No common info in the store response, using empty values")
        common_info = {}
    elif not isinstance(common_info, dict):
        raise UnexpectedResponseError(
            "Unexpected common info in the store response.",
            [f"{const.COMMON_INFO}: expected a mapping, got {type(common_info).__name__}"],
        )

    for field in common_info_fields:
        meta[field] = common_info.get(field, "")

    if not common_info_required:
        meta.pop(const.COMMON_INFO, None)
    return meta
