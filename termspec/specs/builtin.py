#!/usr/bin/env python3
"""Grammars shipped with termspec."""
from ..model import FilterStrategy, Template, arg, option, subcommand
from ..recommendations.generators import GIT_BRANCHES, PROCESS_NAMES, PROCESSES

_HELP = option(["-h", "--help"], "Show help for the command")

GIT = subcommand(
    "git",
    "Distributed version control system",
    options=[
        option(["-C"], "Run as if git was started in <path>", [arg("path", templates=[Template.FOLDERS])], persistent=True),
        option(["--no-pager"], "Do not pipe output into a pager", persistent=True),
        option(["--version"], "Print the git version"),
        _HELP,
    ],
    subcommands=[
        subcommand(
            "add",
            "Add file contents to the index",
            options=[
                option(["-A", "--all"], "Add changes from all tracked and untracked files"),
                option(["-p", "--patch"], "Interactively choose hunks"),
                option(["-n", "--dry-run"], "Don't actually add the files"),
                option(["-f", "--force"], "Allow adding otherwise ignored files"),
            ],
            args=[arg("pathspec", "Files to add", optional=True, variadic=True, templates=[Template.FILEPATHS])],
        ),
        subcommand(
            "commit",
            "Record changes to the repository",
            options=[
                option(["-m", "--message"], "Use the given message", [arg("message")]),
                option(["-a", "--all"], "Stage modified and deleted files"),
                option(["--amend"], "Replace the tip of the current branch"),
                option(["--no-verify"], "Bypass the pre-commit hooks"),
            ],
        ),
        subcommand(
            ["checkout", "co"],
            "Switch branches or restore working tree files",
            options=[
                option(["-b"], "Create and checkout a new branch", [arg("new-branch")]),
                option(["-f", "--force"], "Throw away local modifications"),
            ],
            args=[arg("branch", optional=True, generator=GIT_BRANCHES)],
        ),
        subcommand(
            "branch",
            "List, create, or delete branches",
            options=[
                option(["-d", "--delete"], "Delete a branch", [arg("branch", generator=GIT_BRANCHES)]),
                option(["-a", "--all"], "List both remote and local branches"),
            ],
            args=[arg("branch", optional=True)],
        ),
        subcommand(
            "push",
            "Update remote refs",
            options=[
                option(["-u", "--set-upstream"], "Set upstream for the branch"),
                option(["-f", "--force"], "Force the update"),
            ],
            args=[
                arg("remote", optional=True, suggestions=["origin", "upstream"]),
                arg("branch", optional=True, generator=GIT_BRANCHES),
            ],
        ),
        subcommand("pull", "Fetch from and integrate with another repository",
                   args=[arg("remote", optional=True, suggestions=["origin", "upstream"])]),
        subcommand("status", "Show the working tree status",
                   options=[option(["-s", "--short"], "Give the output in the short format")]),
        subcommand("log", "Show commit logs",
                   options=[option(["--oneline"], "One line per commit"),
                            option(["-n", "--max-count"], "Limit the number of commits", [arg("number")])]),
        subcommand("diff", "Show changes between commits",
                   options=[option(["--staged", "--cached"], "Diff against the index")],
                   args=[arg("path", optional=True, variadic=True, templates=[Template.FILEPATHS])]),
        subcommand(
            "stash",
            "Stash the changes in a dirty working directory",
            subcommands=[
                subcommand("push", "Save local modifications"),
                subcommand("pop", "Apply and remove a stash"),
                subcommand("list", "List stash entries"),
                subcommand("drop", "Remove a stash entry"),
            ],
        ),
    ],
)

SUDO = subcommand(
    "sudo",
    "Execute a command as another user",
    options=[
        option(["-u", "--user"], "Run the command as this user", [arg("user")]),
        option(["-E", "--preserve-env"], "Preserve the user environment"),
        option(["-k", "--reset-timestamp"], "Invalidate cached credentials"),
        _HELP,
    ],
    args=[arg("command", "Command to run", command=True)],
)

CD = subcommand(
    "cd",
    "Change the shell working directory",
    args=[arg("directory", optional=True, templates=[Template.FOLDERS], suggestions=["-", "~"])],
)

LS = subcommand(
    "ls",
    "List directory contents",
    options=[
        option(["-a", "--all"], "Do not ignore entries starting with ."),
        option(["-l"], "Use a long listing format"),
        option(["-h", "--human-readable"], "Print sizes in human readable format"),
        option(["-R", "--recursive"], "List subdirectories recursively"),
        option(["--color"], "Colorize the output", [arg("when", optional=True, suggestions=["always", "auto", "never"])]),
    ],
    args=[arg("file", optional=True, variadic=True, templates=[Template.FILEPATHS])],
)

KILL = subcommand(
    "kill",
    "Send a signal to a process",
    options=[
        option(["-s"], "Signal to send", [arg("signal", suggestions=["HUP", "INT", "KILL", "TERM", "STOP", "CONT"])]),
        option(["-l", "--list"], "List signal names"),
    ],
    args=[arg("pid", variadic=True, generator=PROCESSES, filter_strategy=FilterStrategy.FUZZY)],
)

PKILL = subcommand(
    "pkill",
    "Signal processes by name",
    options=[option(["-f", "--full"], "Match against the full command line")],
    args=[arg("pattern", generator=PROCESS_NAMES, filter_strategy=FilterStrategy.FUZZY)],
)

SSH = subcommand(
    "ssh",
    "OpenSSH remote login client",
    options=[
        option(["-p"], "Port to connect to", [arg("port")]),
        option(["-i"], "Identity file", [arg("identity_file", templates=[Template.FILEPATHS])]),
        option(["-v"], "Verbose mode"),
    ],
    args=[arg("destination"), arg("command", optional=True, command=True)],
)

BUILTIN_SPECS = (GIT, SUDO, CD, LS, KILL, PKILL, SSH)
