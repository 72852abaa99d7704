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
"""CLI-related utilities for charmshow."""
import enum
import json
from dataclasses import dataclass
from typing import Any

from charmshow.utils.yaml import dump_yaml


class SingleOptionEnsurer:
    """Argparse helper to ensure that the option is specified only once, converting it properly.

    Receives a callable to convert the string from command line to the desired object.

    Example of use:

        parser.add_argument('-c', '--channel',  type=SingleOptionEnsurer(str))
    """

    def __init__(self, converter):
        self.converter = converter
        self.count = 0

    def __call__(self, value):
        """Run by argparse to validate and convert the given argument."""
        self.count += 1
        if self.count > 1:
            raise ValueError("the option can be specified only once")
        return self.converter(value)


@dataclass(frozen=True)
class AuthOption:
    """Argparse helper to validate and convert an 'auth' option.

    Example of use:

        parser.add_argument('--auth',  type=AuthOption())
    """

    username: str | None = None
    password: str | None = None

    def __call__(self, value):
        """Run by argparse to validate and convert the given argument."""
        username, sep, password = value.partition(":")
        if not sep or not username:
            raise ValueError('invalid auth credentials: expected "user:passwd"')
        return AuthOption(username, password)


class OutputFormat(enum.Enum):
    """Output format options for commands."""

    TABULAR = "tabular"
    YAML = "yaml"
    JSON = "json"


def format_content(content: Any, fmt: OutputFormat | str) -> str:
    """Format command output in one of the generic formats (YAML or JSON)."""
    if not isinstance(fmt, OutputFormat):
        try:
            fmt = OutputFormat(fmt)
        except ValueError:
            raise ValueError(f"Unknown output format {str(fmt)}")

    if fmt == OutputFormat.JSON:
        return json.dumps(content, indent=4)
    if fmt == OutputFormat.YAML:
        return dump_yaml(content)
    raise ValueError(f"Output format {fmt.value!r} needs a specific formatter.")
