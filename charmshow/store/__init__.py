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

"""Interfaces with the charm store."""

from charmshow.store.client import Client, build_user_agent
from charmshow.store.models import Channel, ShowData
from charmshow.store.store import Store

__all__ = [
    "Client",
    "build_user_agent",
    "Channel",
    "ShowData",
    "Store",
]
