"""Tests for the pytest plugin, run through pytester."""

import sys

import pytest

PLUGIN = ("-p", "narrowtest.plugin")


def test_ini_config_is_active_during_session(pytester: pytest.Pytester):
    pytester.makeini("""
        [pytest]
        narrowtest_config = narrowtest.yaml
    """)
    pytester.makefile(".yaml", narrowtest="max_diff: null\nlong_message: false\n")
    pytester.makepyfile("""
        from narrowtest.config import get_config

        def test_config():
            assert get_config().max_diff is None
            assert get_config().long_message is False
    """)

    result = pytester.runpytest(*PLUGIN)

    result.assert_outcomes(passed=1)


def test_config_restored_after_session(pytester: pytest.Pytester):
    from narrowtest.config import get_config

    before = get_config()
    pytester.makeini("""
        [pytest]
        narrowtest_config = narrowtest.yaml
    """)
    pytester.makefile(".yaml", narrowtest="max_diff: 5\n")
    pytester.makepyfile("def test_nothing(): pass")

    pytester.runpytest(*PLUGIN).assert_outcomes(passed=1)

    assert get_config() is before


def test_invalid_config_is_usage_error(pytester: pytest.Pytester):
    pytester.makeini("""
        [pytest]
        narrowtest_config = narrowtest.yaml
    """)
    pytester.makefile(".yaml", narrowtest="max_diff: -3\n")
    pytester.makepyfile("def test_nothing(): pass")

    result = pytester.runpytest(*PLUGIN)

    assert result.ret == pytest.ExitCode.USAGE_ERROR
    result.stderr.fnmatch_lines(["*invalid narrowtest config*"])


def test_missing_config_is_usage_error(pytester: pytest.Pytester):
    pytester.makeini("""
        [pytest]
        narrowtest_config = missing.yaml
    """)
    pytester.makepyfile("def test_nothing(): pass")

    result = pytester.runpytest(*PLUGIN)

    assert result.ret == pytest.ExitCode.USAGE_ERROR


def test_debug_log_option_records_failures(pytester: pytest.Pytester):
    pytester.makepyfile("""
        from narrowtest import expect_is

        def test_identity():
            expect_is([1], [1])
    """)
    log_path = pytester.path / "logs" / "debug.log"

    result = pytester.runpytest(*PLUGIN, f"--narrowtest-debug-log={log_path}")

    result.assert_outcomes(failed=1)
    assert "expect_is failed" in log_path.read_text()


def test_failure_traceback_points_at_test_line(pytester: pytest.Pytester):
    pytester.makepyfile("""
        from narrowtest import expect_equal

        def test_mismatch():
            expect_equal({"key": "val"}, {"key": "other"})
    """)

    result = pytester.runpytest(*PLUGIN)

    result.assert_outcomes(failed=1)
    result.stdout.fnmatch_lines(["*ExpectationFailure: expect_equal:*"])
    result.stdout.no_fnmatch_line("*def _check(*")


def test_checks_still_run_under_optimize(pytester: pytest.Pytester):
    pytester.makepyfile("""
        import pytest

        from narrowtest import ExpectationFailure, expect_none, for_each_at_least_once

        def test_optimized():
            if __debug__:
                pytest.fail("interpreter is not running with -O")
            with pytest.raises(ExpectationFailure):
                expect_none(1)
            with pytest.raises(ExpectationFailure):
                for_each_at_least_once([], lambda n, index, seq: None)
    """)

    result = pytester.run(sys.executable, "-O", "-m", "pytest", *PLUGIN, "-p", "no:cacheprovider")

    result.assert_outcomes(passed=1)
