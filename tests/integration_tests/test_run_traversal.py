# tests/integration_tests/test_run_traversal.py
# This file is part of transiter - Lazy Transitive Traversal
#
# End-to-end tests of the traversal explorer command line

"""End-to-end tests of run_traversal.main: argument handling, output order
per mode, DOT export and exit codes."""

import pytest

import run_traversal
from utils.logger import LogLevel, get_logger, set_log_level


@pytest.fixture(autouse=True)
def reset_log_level():
    yield
    set_log_level(LogLevel.WARNING)


def run(capsys, *argv):
    code = run_traversal.main(list(argv))
    out = capsys.readouterr().out
    return code, out.splitlines()


class TestRunTraversalScenarios:
    """Scenarios driving the CLI as a user would."""

    def test_01_tree_breadth_first_default(self, capsys):
        code, lines = run(capsys, "-t", "1(2(4), 3)")
        assert code == 0
        assert lines == ["1", "2", "3", "4"]

    @pytest.mark.parametrize("mode, expected", [
        ("depth-first", ["1", "2", "4", "3"]),
        ("depth-first-unordered", ["1", "3", "2", "4"]),
        ("DEPTH_FIRST", ["1", "2", "4", "3"]),
        ("priority", ["1", "3", "2", "4"]),
    ])
    def test_02_tree_modes(self, capsys, mode, expected):
        code, lines = run(capsys, "-t", "1(2(4), 3)", "-m", mode)
        assert code == 0
        assert lines == expected

    def test_03_words_with_take(self, capsys):
        code, lines = run(capsys, "-w", "abc", "-n", "10")
        assert code == 0
        assert lines == ["''", "'a'", "'b'", "'c'", "'aa'", "'ab'", "'ac'", "'ba'", "'bb'", "'bc'"]

    def test_04_words_with_max_length_is_finite(self, capsys):
        code, lines = run(capsys, "-w", "ab", "--max-length", "2", "-m", "depth-first")
        assert code == 0
        assert lines == ["''", "'a'", "'aa'", "'ab'", "'b'", "'ba'", "'bb'"]

    def test_05_take_bounds_tree_output(self, capsys):
        code, lines = run(capsys, "-t", "r(a(b, c), d)", "-n", "2", "-m", "depth-first")
        assert code == 0
        assert lines == ["r", "a"]

    def test_06_dot_output(self, capsys):
        code, lines = run(capsys, "-t", "1(2, 3)", "--dot")
        assert code == 0
        assert lines[:3] == ["1", "2", "3"]
        dot = "\n".join(lines[3:])
        assert "digraph" in dot
        assert "n0 -> n1" in dot
        assert "n0 -> n2" in dot

    def test_07_verbose_and_debug_runs(self, capsys):
        for flag in ("-v", "--debug"):
            code, lines = run(capsys, "-t", "1(2)", flag, "-n", "1")
            assert code == 0
            assert "1" in lines
            assert "2" not in lines

    def test_08_malformed_tree_exit_code(self, capsys):
        code, _ = run(capsys, "-t", "1(2")
        assert code == 2

    def test_09_unknown_mode_exit_code(self, capsys):
        code, _ = run(capsys, "-t", "1", "-m", "sideways")
        assert code == 3

    @pytest.mark.parametrize("argv", [
        [],
        ["-t", "1", "-w", "ab"],
        ["-w", "ab"],
        ["-w", "", "-n", "3"],
        ["-t", "1(2, 3)", "-n", "-1"],
        ["-w", "ab", "--max-length", "-1"],
    ])
    def test_10_inconsistent_sources_exit_code(self, capsys, argv):
        code, _ = run(capsys, *argv)
        assert code == 3

    def test_11_priority_on_incomparable_labels_is_unexpected(self, capsys):
        code, _ = run(capsys, "-t", "r(1, a)", "-m", "priority")
        assert code == 5

    def test_12_resolve_mode(self):
        assert run_traversal.resolve_mode("priority") is None
        assert str(run_traversal.resolve_mode("breadth_first")) == "breadth-first"

    @pytest.mark.parametrize("flags, expected", [
        ([], LogLevel.WARNING),
        (["-v"], LogLevel.INFO),
        (["--debug"], LogLevel.DEBUG),
        (["-v", "--debug"], LogLevel.DEBUG),
    ])
    def test_13_flags_set_shared_logger_level(self, capsys, flags, expected):
        code, _ = run(capsys, "-t", "1", *flags)
        assert code == 0
        assert get_logger().level is expected

    def test_14_interrupt_exit_code(self, capsys, monkeypatch):
        def interrupted(*args):
            raise KeyboardInterrupt

        monkeypatch.setattr(run_traversal, "start_traversal", interrupted)
        code, _ = run(capsys, "-t", "1(2)")
        assert code == 4
