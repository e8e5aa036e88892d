"""
Shared pytest fixtures for the termspec test suite.

Grammars are built in-test so expectations do not drift with the built-in
specs. Configuration is redirected to a temp directory for every test.

Usage in tests:
    def test_something(engine):
        suggestions, description, chars = engine.resolve("git comm")
"""

import copy
import logging

import pytest

from termspec.config import Config
from termspec.core import SuggestionCache, SuggestionEngine
from termspec.model import Generator, arg, option, subcommand
from termspec.specs import SpecRegistry


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Point Config at a temp dir and restore every class default afterwards."""
    saved = {
        name: copy.deepcopy(value)
        for name, value in vars(Config).items()
        if name.isupper()
    }
    monkeypatch.delenv("TERMSPEC_LOG_LEVEL", raising=False)
    Config.set_config_dir(tmp_path / "config")
    Config.DEFAULT_FILTER_STRATEGY = "prefix"
    Config.SHOW_HIDDEN_FILES = False
    Config.EXTRA_SPEC_DIRS = []

    yield Config

    for name, value in saved.items():
        setattr(Config, name, value)

    package_logger = logging.getLogger("termspec")
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()
    package_logger.propagate = True
    package_logger.setLevel(logging.NOTSET)


@pytest.fixture
def git_spec():
    """
    A small git grammar:

    - root: persistent --verbose and -C <path>, plain -h/--help
    - commit: -m/--message <msg>, -a/--all
    - build: nothing of its own
    - add: optional variadic pathspec with static suggestions, -f/--force
    - remote: redeclares --verbose as persistent; `remote add <name> <url>`
    - status, stash
    """
    return subcommand(
        "git",
        "version control",
        options=[
            option("--verbose", "Be verbose", persistent=True),
            option("-C", "Run in <path>", [arg("path")], persistent=True),
            option(["-h", "--help"], "Show help"),
        ],
        subcommands=[
            subcommand(
                "commit",
                "Record changes",
                options=[
                    option(["-m", "--message"], "Commit message", [arg("msg")]),
                    option(["-a", "--all"], "Stage everything"),
                ],
            ),
            subcommand("build", "Build the project"),
            subcommand(
                "add",
                "Add files",
                options=[option(["-f", "--force"], "Force")],
                args=[
                    arg(
                        "pathspec",
                        optional=True,
                        variadic=True,
                        suggestions=["a.txt", "b.txt"],
                    )
                ],
            ),
            subcommand(
                "remote",
                "Manage remotes",
                options=[option("--verbose", "Be verbose", persistent=True)],
                subcommands=[
                    subcommand("add", "Add a remote", args=[arg("name"), arg("url")]),
                ],
            ),
            subcommand("status", "Show status"),
            subcommand("stash", "Stash changes"),
        ],
    )


@pytest.fixture
def sudo_spec():
    return subcommand(
        "sudo",
        "Run as another user",
        options=[
            option(["-u", "--user"], "Target user", [arg("user")]),
            option("-E", "Preserve environment"),
            option("-h", "Show help"),
        ],
        args=[arg("command", command=True)],
    )


@pytest.fixture
def registry(git_spec, sudo_spec):
    return SpecRegistry([git_spec, sudo_spec])


@pytest.fixture
def engine(registry):
    return SuggestionEngine(registry=registry, cache=SuggestionCache())


@pytest.fixture
def counting_generator():
    """A function generator that records how often it is invoked."""
    calls = []

    def produce(accepted):
        calls.append(list(accepted))
        return ["100", ("200", "worker")]

    return Generator(function=produce), calls
