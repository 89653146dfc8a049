# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
Every module asks for its own logger by name. Importing omics_coordinate
never changes the logging setup of the host application: the package only
attaches a NullHandler to its top-level logger. Scripts which want the
bundled handlers and format call configure_logging explicitly.
"""

import logging
import logging.config
from os.path import dirname, join

LOGGING_CONFIG_PATH = join(dirname(__file__), "logging.conf")

PACKAGE_LOGGER_NAME = "omics_coordinate"

logging.getLogger(PACKAGE_LOGGER_NAME).addHandler(logging.NullHandler())


def configure_logging(config_path=LOGGING_CONFIG_PATH):
    """
    Load logger, handler and formatter settings from a fileConfig-style
    configuration file. Meant for entry points such as scripts: fileConfig
    replaces any handlers installed on the root logger.
    """
    logging.config.fileConfig(config_path, disable_existing_loggers=False)


def get_logger(name):
    return logging.getLogger(name)
