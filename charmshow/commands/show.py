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

"""Infrastructure for the 'show' command."""

import dataclasses
import enum
import textwrap
from typing import Any

from craft_cli import ArgumentParsingError, emit
from tabulate import tabulate

from charmshow import const, meta
from charmshow.charmurl import CharmURL
from charmshow.cmdbase import BaseCommand
from charmshow.errors import InvalidCharmURLError, NoMetadataEndpointsError
from charmshow.store import ShowData, Store
from charmshow.utils import AuthOption, OutputFormat, SingleOptionEnsurer, dump_yaml

_overview = textwrap.dedent(
    """
    Print information about a charm or bundle.

    By default, only a summary is printed:

        charm show trusty/wordpress

    The summary columns are aligned with spaces, not tabs; for output to be
    processed by other programs use --format=yaml or --format=json.

    To select a channel, use the --channel option, for instance:

        charm show --channel edge wordpress

    To specify one or more specific metadata fields:

        charm show wordpress charm-metadata charm-config

    To get all the known metadata:

        charm show --all wordpress

    To get a list of the metadata fields available:

        charm show --list
    """
)


class ShowMode(enum.Enum):
    """What the show command is asked to do."""

    LIST = "list"
    ALL = "all"
    SUMMARY = "summary"
    EXPLICIT = "explicit"


@dataclasses.dataclass(frozen=True)
class ShowRequest:
    """The validated intention of the user, decided once from the command line."""

    mode: ShowMode
    charm_url: CharmURL | None = None
    fields: tuple[str, ...] = ()

    @classmethod
    def from_args(cls, charm_id: str | None, fields: list[str], list_: bool, all_: bool):
        """Validate the command line combination and build the request.

        :raises ArgumentParsingError: if the options or arguments are inconsistent.
        """
        if list_:
            if charm_id is not None or fields:
                raise ArgumentParsingError("cannot specify charm or bundle with --list")
            if all_:
                raise ArgumentParsingError("cannot specify --list and --all at the same time")
            return cls(mode=ShowMode.LIST)

        if charm_id is None:
            raise ArgumentParsingError("no charm or bundle id specified")
        try:
            charm_url = CharmURL.parse(charm_id)
        except InvalidCharmURLError as exc:
            raise ArgumentParsingError(f"invalid charm or bundle id: {exc}") from exc

        if fields:
            return cls(mode=ShowMode.EXPLICIT, charm_url=charm_url, fields=tuple(fields))
        if all_:
            return cls(mode=ShowMode.ALL, charm_url=charm_url)
        return cls(
            mode=ShowMode.SUMMARY, charm_url=charm_url, fields=const.DEFAULT_SUMMARY_FIELDS
        )


def _format_bool(value: bool) -> str:
    return "true" if value else "false"


def format_summary_tabular(metadata: dict[str, Any]) -> str:
    """Build the human oriented summary of a charm or bundle.

    :raises UnexpectedResponseError: if any of the needed fields is missing or
        has an unexpected type in the metadata.
    """
    show_data = ShowData.unmarshal(metadata)

    data = [
        ["Name", show_data.name],
        ["Owner", show_data.owner],
        ["Revision", str(show_data.revision)],
    ]
    if not show_data.bundle:
        data.extend(
            [
                ["Summary", show_data.summary],
                ["Supported Series", ", ".join(show_data.supported_series)],
                ["Tags", ", ".join(show_data.tags)],
                ["Subordinate", _format_bool(show_data.subordinate)],
            ]
        )
    data.extend(
        [
            ["Promulgated", _format_bool(show_data.promulgated)],
            ["Home page", show_data.homepage],
            ["Bugs url", show_data.bugs_url],
            ["Read", ", ".join(show_data.read)],
            ["Write", ", ".join(show_data.write)],
        ]
    )
    if show_data.terms:
        data.append(["Terms", ", ".join(show_data.terms)])

    # the channels go below, in the same columns
    data.append(["CHANNEL", "CURRENT"])
    for channel in show_data.channels:
        data.append([channel.name, _format_bool(channel.current)])

    # blank line between the summary and the channels
    lines = tabulate(data, tablefmt="plain", disable_numparse=True).splitlines()
    header_index = next(idx for idx, line in enumerate(lines) if line.startswith("CHANNEL "))
    lines.insert(header_index, "")
    return "\n".join(lines)


class ShowCommand(BaseCommand):
    """Show information about a charm or bundle."""

    name = "show"
    help_msg = "Print information on a charm or bundle"
    overview = _overview
    common = True

    def fill_parser(self, parser):
        """Add own parameters to the general parser."""
        self.include_format_option(parser)
        parser.add_argument(
            "id",
            nargs="?",
            metavar="charm-or-bundle-id",
            help="The charm or bundle to show, e.g. 'cs:~user/series/name-revision'",
        )
        parser.add_argument(
            "fields",
            nargs="*",
            metavar="field",
            help="The metadata fields to show (defaults to a summary)",
        )
        parser.add_argument(
            "-c",
            "--channel",
            type=SingleOptionEnsurer(str),
            help="The channel to use when getting the information from the store",
        )
        parser.add_argument(
            "--list",
            action="store_true",
            help="List the available metadata fields",
        )
        parser.add_argument(
            "--all",
            action="store_true",
            help="Show all the metadata of the charm or bundle",
        )
        parser.add_argument(
            "--auth",
            type=AuthOption(),
            help="The 'user:passwd' to use for basic HTTP authentication",
        )

    def run(self, parsed_args):
        """Run the command."""
        request = ShowRequest.from_args(
            parsed_args.id, parsed_args.fields, parsed_args.list, parsed_args.all
        )
        emit.debug(f"Show request: {request}")

        auth = None
        if parsed_args.auth is not None:
            auth = (parsed_args.auth.username, parsed_args.auth.password)

        with Store(self.config, channel=parsed_args.channel, auth=auth) as store:
            if request.mode == ShowMode.LIST:
                includes = self._list_fields(store)
                content = sorted(set(includes) | set(const.COMMON_INFO_FIELDS))
            else:
                includes = list(request.fields)
                if not includes:
                    includes = self._list_fields(store)
                content = self._get_metadata(store, request.charm_url, includes)

        fmt = OutputFormat(parsed_args.format)
        if fmt == OutputFormat.TABULAR:
            if request.mode == ShowMode.SUMMARY:
                text = format_summary_tabular(content)
            else:
                text = dump_yaml(content)
        else:
            text = self.format_content(fmt, content)
        self.write_output(text, parsed_args.output)

    def _list_fields(self, store: Store) -> list[str]:
        """Get all the metadata fields the store can serve."""
        includes = store.list_meta_endpoints()
        if not includes:
            raise NoMetadataEndpointsError()
        return includes

    def _get_metadata(
        self, store: Store, charm_url: CharmURL, includes: list[str]
    ) -> dict[str, Any]:
        """Get the metadata with the common info fields brought to the top level."""
        common_info_required, common_info_fields, includes = meta.classify_includes(includes)
        emit.debug(f"Requesting fields {includes} (common info fields: {common_info_fields})")
        metadata = store.get_meta_any(charm_url, includes)
        return meta.project_common_info(metadata, common_info_fields, common_info_required)
