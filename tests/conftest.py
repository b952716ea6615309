"""
Pytest configuration for Kizhi tests.
"""
import sys
import os

import pytest

# Make `import kizhi...` work from a plain checkout (src/ on sys.path)
_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
_SRC_DIR = os.path.join(_ROOT, 'src')

if _SRC_DIR not in sys.path:
    sys.path.insert(0, _SRC_DIR)

from kizhi.debugger import Debugger
from kizhi.lines import ListSink

# Absolute positions:
#   0 set a 9        5 call test
#   1 set b 5        6 def test
#   2 def testtwo    7     sub a 3
#   3     sub b 2    8     print a
#   4     sub b 2    9     call testtwo
SCENARIO = """set a 9
set b 5
def testtwo
    sub b 2
    sub b 2
call test
def test
    sub a 3
    print a
    call testtwo"""


@pytest.fixture
def sink():
    return ListSink()


@pytest.fixture
def debugger(sink):
    return Debugger(sink)


@pytest.fixture
def loaded(debugger):
    """Debugger with the reference scenario loaded."""
    for line in ("set code", SCENARIO, "end set code"):
        assert debugger.execute_line(line)
    return debugger
