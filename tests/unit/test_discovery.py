"""Function discovery pre-pass."""

import pytest

from kizhi.commands import DEBUGGER_COMMANDS
from kizhi.discovery import find_functions
from kizhi.errors import ErrorKind, KizhiError
from kizhi.grammar import Grammar, split_script
from kizhi.memory import Memory

from conftest import SCENARIO


@pytest.fixture
def grammar():
    return Grammar(cls.name for cls in DEBUGGER_COMMANDS)


def test_scenario_functions(grammar):
    memory = Memory()
    found = find_functions(split_script(SCENARIO), memory, grammar)

    assert [f.name for f in found.functions] == ["testtwo", "test"]
    testtwo = memory.functions["testtwo"]
    assert testtwo.lines == ["sub b 2", "sub b 2"]
    assert testtwo.line_offset == 3
    test = memory.functions["test"]
    assert test.lines == ["sub a 3", "print a", "call testtwo"]
    assert test.line_offset == 7
    assert found.main_lines == ["set a 9", "set b 5", "def testtwo", "call test", "def test"]


def test_adjacent_definitions(grammar):
    memory = Memory()
    find_functions(["def f", "    set a 1", "def g", "    set b 2"], memory, grammar)
    assert memory.functions["f"].lines == ["set a 1"]
    assert memory.functions["g"].lines == ["set b 2"]
    assert memory.functions["g"].line_offset == 3


def test_deeper_indentation_kept_verbatim(grammar):
    memory = Memory()
    find_functions(["def f", "    set a 1", "        set b 2"], memory, grammar)
    assert memory.functions["f"].lines == ["set a 1", "    set b 2"]


def test_line_offset_shifts_positions(grammar):
    memory = Memory()
    find_functions(["set a 1", "def f", "    print a"], memory, grammar, line_offset=10)
    assert memory.functions["f"].line_offset == 12


def test_duplicate_keeps_first_body(grammar):
    memory = Memory()
    with pytest.raises(KizhiError) as exc:
        find_functions(["def f", "    set a 1", "def f", "    set a 2"], memory, grammar)
    assert exc.value.kind is ErrorKind.FUNCTION_ALREADY_DEFINED
    assert str(exc.value) == "Function f is already defined"
    assert memory.functions["f"].lines == ["set a 1"]


def test_unknown_top_level_line(grammar):
    with pytest.raises(KizhiError) as exc:
        find_functions(["set a 1", "jump"], Memory(), grammar)
    assert exc.value.kind is ErrorKind.COMMAND_NOT_RECOGNIZED


def test_body_lines_are_not_parsed(grammar):
    memory = Memory()
    find_functions(["def f", "    anything goes"], memory, grammar)
    assert memory.functions["f"].lines == ["anything goes"]
