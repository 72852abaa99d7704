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

"""Main entry point module for all the tool functionality."""

import logging
import os
import sys

from craft_cli import (
    ArgumentParsingError,
    CommandGroup,
    CraftError,
    Dispatcher,
    EmitterMode,
    ProvideHelpException,
    emit,
)

from charmshow import __version__, const, env, utils
from charmshow.commands import show

# set up the libs' loggers in DEBUG level so their content is grabbed by craft-cli's Emitter
for lib_name in ("urllib3",):
    logger = logging.getLogger(lib_name)
    logger.setLevel(logging.DEBUG)


# the summary of the whole program
GENERAL_SUMMARY = """
Charm helps to inspect charms and bundles published in the charm store.

Use 'charm show' to get a summary of a charm or bundle, or any of
the metadata the store keeps about it.
"""

COMMAND_GROUPS = [
    CommandGroup("Charm store", [show.ShowCommand]),
]

# non-charm useful environment variables to log
EXTRA_ENVIRONMENT = (const.STORE_API_ENV_VAR, const.COOKIE_FILE_ENV_VAR)


def _get_system_details():
    """Produce details about the system."""
    useful_env = {
        name: value for name, value in os.environ.items() if name in EXTRA_ENVIRONMENT
    }
    env_string = ", ".join(f"{name}={value!r}" for name, value in sorted(useful_env.items()))
    if not env_string:
        env_string = "None"

    os_platform = utils.get_os_platform()
    return f"System details: {os_platform}; Environment: {env_string}"


def _emit_error(error, cause=None):
    """Emit the error in a centralized way so we can alter it consistently."""
    if cause is not None:
        error.__cause__ = cause
    emit.error(error)


def main(argv):
    """Provide the main entry point."""
    try:
        dispatcher = Dispatcher("charm", COMMAND_GROUPS, summary=GENERAL_SUMMARY)
        dispatcher.pre_parse_args(argv[1:])
        store_config = env.get_store_config()
        emit.debug(f"Using charm store at {store_config.base_url}")
        dispatcher.load_command(store_config)
        emit.debug(_get_system_details())
        retcode = dispatcher.run()

    except ArgumentParsingError as err:
        print(err, file=sys.stderr)  # to stderr, as argparse normally does
        emit.ended_ok()
        retcode = 1
    except ProvideHelpException as err:
        print(err, file=sys.stderr)  # to stderr, as argparse normally does
        emit.ended_ok()
        retcode = 0
    except CraftError as err:
        _emit_error(err)
        retcode = err.retcode
    except KeyboardInterrupt as exc:
        error = CraftError("Interrupted.")
        _emit_error(error, cause=exc)
        retcode = 1
    except Exception as err:
        error = CraftError(f"charm internal error: {err!r}")
        _emit_error(error, cause=err)
        retcode = 1
    else:
        emit.ended_ok()
        if retcode is None:
            retcode = 0

    return retcode


def cli():
    """Run the tool from the console script."""
    emit.init(EmitterMode.BRIEF, "charm", f"Starting charm version {__version__}")
    sys.exit(main(sys.argv))


if __name__ == "__main__":
    cli()
