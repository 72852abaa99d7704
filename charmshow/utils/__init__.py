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

"""Collection of utilities for charmshow."""

from charmshow.utils.cli import (
    AuthOption,
    OutputFormat,
    SingleOptionEnsurer,
    format_content,
)
from charmshow.utils.platform import OSPlatform, get_os_platform
from charmshow.utils.yaml import dump_yaml

__all__ = [
    "AuthOption",
    "OutputFormat",
    "SingleOptionEnsurer",
    "format_content",
    "OSPlatform",
    "get_os_platform",
    "dump_yaml",
]
