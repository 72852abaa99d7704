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

"""Infrastructure for common base commands functionality."""

import pathlib

import craft_cli
from craft_cli import CraftError, emit

from charmshow.utils import OutputFormat, format_content

FORMAT_HELP_STR = "Produce the result in the specified format (default: %(default)s)"
OUTPUT_HELP_STR = "Write the result to the specified file instead of the standard output"


class BaseCommand(craft_cli.BaseCommand):
    """Subclass this to create a new command.

    The subclass must be declared in the corresponding section of main.COMMAND_GROUPS.

    If the command produces a result that can be shown in different formats, it
    should call the 'include_format_option' method to properly affect the parser,
    build the result text with 'format_content' (or its own formatter for the
    tabular format) and deliver it with 'write_output'.
    """

    def format_content(self, fmt, content):
        """Format the content in one of the generic formats."""
        return format_content(content, fmt)

    def include_format_option(self, parser, default=OutputFormat.TABULAR):
        """Add the 'format' and 'output' options to this parser."""
        parser.add_argument(
            "--format",
            choices=[fmt.value for fmt in OutputFormat],
            default=default.value,
            help=FORMAT_HELP_STR,
        )
        parser.add_argument(
            "-o",
            "--output",
            type=pathlib.Path,
            help=OUTPUT_HELP_STR,
        )

    def write_output(self, text: str, output: pathlib.Path | None = None) -> None:
        """Deliver the already formatted result to the user or the indicated file."""
        if output is None:
            emit.message(text.rstrip("\n"))
            return
        try:
            output.write_text(text if text.endswith("\n") else text + "\n")
        except OSError as exc:
            raise CraftError(f"Cannot write the result to {str(output)!r}: {exc}") from exc
        emit.debug(f"Result written to {str(output)!r}")
