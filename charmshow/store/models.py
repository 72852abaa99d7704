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
"""Models for the store metadata shown in the summary."""

from typing import Annotated, Any

import pydantic
from typing_extensions import Self

from charmshow.errors import UnexpectedResponseError


def _none_to_empty(value: Any) -> Any:
    """The store sends null for empty lists."""
    return [] if value is None else value


StringList = Annotated[list[pydantic.StrictStr], pydantic.BeforeValidator(_none_to_empty)]


class _StoreModel(pydantic.BaseModel):
    """Base for the pieces of the store response, which use CamelCase keys."""

    model_config = pydantic.ConfigDict(frozen=True, extra="ignore", populate_by_name=True)


class Channel(_StoreModel):
    """A channel where the charm or bundle is published."""

    name: pydantic.StrictStr = pydantic.Field(alias="Channel")
    current: pydantic.StrictBool = pydantic.Field(alias="Current")


class _IdRevision(_StoreModel):
    revision: pydantic.StrictInt = pydantic.Field(alias="Revision")


class _IdName(_StoreModel):
    name: pydantic.StrictStr = pydantic.Field(alias="Name")


class _Promulgated(_StoreModel):
    promulgated: pydantic.StrictBool = pydantic.Field(alias="Promulgated")


class _Owner(_StoreModel):
    user: pydantic.StrictStr = pydantic.Field(alias="User")


class _Perm(_StoreModel):
    read: StringList = pydantic.Field(alias="Read")
    write: StringList = pydantic.Field(alias="Write")


class _Published(_StoreModel):
    info: Annotated[list[Channel], pydantic.BeforeValidator(_none_to_empty)] = pydantic.Field(
        alias="Info"
    )


class _CharmMetadata(_StoreModel):
    summary: pydantic.StrictStr = pydantic.Field(alias="Summary")
    supported_series: StringList = pydantic.Field(default_factory=list, alias="SupportedSeries")
    tags: StringList = pydantic.Field(default_factory=list, alias="Tags")
    subordinate: pydantic.StrictBool = pydantic.Field(alias="Subordinate")


class _SummaryMeta(_StoreModel):
    """The raw shape of the metadata fields needed for the summary."""

    id_revision: _IdRevision = pydantic.Field(alias="id-revision")
    id_name: _IdName = pydantic.Field(alias="id-name")
    promulgated: _Promulgated
    owner: _Owner
    bugs_url: pydantic.StrictStr = pydantic.Field(alias="bugs-url")
    homepage: pydantic.StrictStr
    terms: StringList = pydantic.Field(default_factory=list)
    perm: _Perm
    published: _Published
    charm_metadata: _CharmMetadata | None = pydantic.Field(default=None, alias="charm-metadata")


def _format_error_location(loc: tuple[int | str, ...]) -> str:
    """Build a dotted path to the failing field, e.g. 'owner.User'."""
    return ".".join(str(part) for part in loc) or "metadata"


class ShowData(pydantic.BaseModel):
    """The information shown in the summary of a charm or bundle.

    Build it with ``unmarshal`` from the metadata returned by the store.
    """

    model_config = pydantic.ConfigDict(frozen=True)

    name: str
    owner: str
    revision: int
    promulgated: bool
    bugs_url: str
    homepage: str
    read: list[str]
    write: list[str]
    terms: list[str] = []
    channels: list[Channel] = []
    bundle: bool = False
    summary: str = ""
    supported_series: list[str] = []
    tags: list[str] = []
    subordinate: bool = False

    @classmethod
    def unmarshal(cls, meta: dict[str, Any]) -> Self:
        """Extract the summary information from the store metadata.

        :raises UnexpectedResponseError: listing every field that is missing or
            does not have the expected type.
        """
        if not isinstance(meta, dict):
            raise UnexpectedResponseError(
                f"unexpected type provided: {type(meta).__name__}",
            )
        try:
            raw = _SummaryMeta.model_validate(meta)
        except pydantic.ValidationError as exc:
            problems = [
                f"{_format_error_location(error['loc'])}: {error['msg']}"
                for error in exc.errors()
            ]
            raise UnexpectedResponseError(
                "Unexpected metadata in the store response.", problems
            ) from exc

        data = {
            "name": raw.id_name.name,
            "owner": raw.owner.user,
            "revision": raw.id_revision.revision,
            "promulgated": raw.promulgated.promulgated,
            "bugs_url": raw.bugs_url,
            "homepage": raw.homepage,
            "read": raw.perm.read,
            "write": raw.perm.write,
            "terms": raw.terms,
            "channels": raw.published.info,
            "bundle": "bundle-metadata" in meta,
        }
        if raw.charm_metadata is not None:
            data["summary"] = raw.charm_metadata.summary
            data["supported_series"] = raw.charm_metadata.supported_series
            data["tags"] = raw.charm_metadata.tags
            data["subordinate"] = raw.charm_metadata.subordinate
        return cls(**data)
