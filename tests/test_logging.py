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

import logging
import subprocess
import sys
import textwrap

from omics_coordinate.logging import get_logger
from .common import eq_

# runs in a fresh interpreter so that the host's logging setup exists
# before omics_coordinate is imported for the first time
HOST_APPLICATION_SCRIPT = textwrap.dedent("""
    import io
    import logging

    stream = io.StringIO()
    handler = logging.StreamHandler(stream)
    root = logging.getLogger()
    root.addHandler(handler)
    root.setLevel(logging.DEBUG)

    import omics_coordinate
    from omics_coordinate import Interval
    Interval.from_string("chr1:+:1-10", "base")

    assert root.handlers == [handler], root.handlers
    assert root.level == logging.DEBUG, root.level
    logging.getLogger("myapp").info("hello")
    assert stream.getvalue() == "hello\\n", repr(stream.getvalue())
""")

CONFIGURE_LOGGING_SCRIPT = textwrap.dedent("""
    import logging
    from omics_coordinate.logging import configure_logging

    configure_logging()
    package_logger = logging.getLogger("omics_coordinate")
    assert package_logger.level == logging.INFO, package_logger.level
    assert logging.getLogger("omics_coordinate.interval").getEffectiveLevel() == logging.INFO
    assert not package_logger.propagate
""")


def run_script(script):
    return subprocess.run(
        [sys.executable, "-c", script],
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
        universal_newlines=True)


def test_get_logger_returns_named_logger():
    logger = get_logger("omics_coordinate.interval")
    eq_(logger.name, "omics_coordinate.interval")
    assert logger is logging.getLogger("omics_coordinate.interval")


def test_package_logger_has_null_handler():
    handlers = logging.getLogger("omics_coordinate").handlers
    assert any(isinstance(h, logging.NullHandler) for h in handlers), handlers


def test_import_keeps_host_logging_configuration():
    result = run_script(HOST_APPLICATION_SCRIPT)
    eq_(result.returncode, 0, result.stderr)


def test_configure_logging_is_opt_in():
    result = run_script(CONFIGURE_LOGGING_SCRIPT)
    eq_(result.returncode, 0, result.stderr)
