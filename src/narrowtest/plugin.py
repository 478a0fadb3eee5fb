"""pytest plugin: loads a narrowtest config and debug log for the session."""

from __future__ import annotations

from pathlib import Path

import pytest
import yaml
from pydantic import ValidationError

from narrowtest.config import ExpectConfig, configure, load_config
from narrowtest.verbose import reset_logger, setup_logger

_previous_config_key = pytest.StashKey[ExpectConfig]()
_debug_log_key = pytest.StashKey[Path]()


def pytest_addoption(parser: pytest.Parser) -> None:
    group = parser.getgroup("narrowtest")
    group.addoption(
        "--narrowtest-debug-log",
        default=None,
        metavar="PATH",
        help="Write a debug record for every failed narrowtest expectation to PATH",
    )
    parser.addini(
        "narrowtest_config",
        "Path to a narrowtest YAML config, relative to the rootdir",
        default="",
    )


def pytest_configure(config: pytest.Config) -> None:
    config_path = config.getini("narrowtest_config")
    if config_path:
        path = config.rootpath / config_path
        try:
            expect_config = load_config(path)
        except (OSError, ValueError, ValidationError, yaml.YAMLError) as e:
            raise pytest.UsageError(f"invalid narrowtest config {path}: {e}") from e
        config.stash[_previous_config_key] = configure(expect_config)

    debug_log = config.getoption("narrowtest_debug_log")
    if debug_log:
        path = Path(debug_log)
        setup_logger(path)
        config.stash[_debug_log_key] = path


def pytest_unconfigure(config: pytest.Config) -> None:
    previous = config.stash.get(_previous_config_key, None)
    if previous is not None:
        configure(previous)
        del config.stash[_previous_config_key]

    if _debug_log_key in config.stash:
        reset_logger()
        del config.stash[_debug_log_key]
