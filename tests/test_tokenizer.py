"""Tests for splitting a command line into the tokens of its last segment."""

from termspec.core.tokenizer import CommandToken, last_segment, parse_command


class TestLastSegment:
    def test_no_delimiter(self):
        assert last_segment("git status") == "git status"

    def test_and_then(self):
        assert last_segment("git add . && git comm") == " git comm"

    def test_or_else_and_statement_end(self):
        assert last_segment("make || echo fail; ls -") == " ls -"


class TestParseCommand:
    def test_empty_line(self):
        assert parse_command("") == []

    def test_whitespace_only(self):
        assert parse_command("   ") == []

    def test_trailing_token_incomplete(self):
        tokens = parse_command("git comm")
        assert tokens == [
            CommandToken("git", complete=True),
            CommandToken("comm", complete=False),
        ]

    def test_trailing_space_completes_every_token(self):
        tokens = parse_command("git commit ")
        assert all(token.complete for token in tokens)
        assert [token.token for token in tokens] == ["git", "commit"]

    def test_option_flag(self):
        tokens = parse_command("git commit -m ")
        assert [token.is_option for token in tokens] == [False, False, True]

    def test_quoted_token_groups_whitespace(self):
        tokens = parse_command('git commit -m "fix the bug" ')
        assert tokens[-1] == CommandToken("fix the bug", complete=True)

    def test_quoted_dash_is_not_an_option(self):
        tokens = parse_command('echo "-n" ')
        assert tokens[-1].is_option is False

    def test_unterminated_quote_stays_incomplete(self):
        tokens = parse_command('git commit -m "wip ')
        assert tokens[-1] == CommandToken("wip ", complete=False)

    def test_escaped_space(self):
        tokens = parse_command(r"cat my\ file ")
        assert tokens[-1].token == "my file"

    def test_only_last_segment_is_tokenized(self):
        tokens = parse_command("git add . && git comm")
        assert [token.token for token in tokens] == ["git", "comm"]

    def test_delimiter_at_end_yields_nothing(self):
        assert parse_command("git add . && ") == []


class TestRawLength:
    def test_plain_token(self):
        assert parse_command("git comm")[-1].raw_length == 4

    def test_escaped_space_counts_backslash(self):
        token = parse_command(r"ls my\ fi")[-1]
        assert token.token == "my fi"
        assert token.raw_length == 6

    def test_open_quote_counts_quote(self):
        token = parse_command('git commit -m "fi')[-1]
        assert token.token == "fi"
        assert token.raw_length == 3

    def test_complete_quoted_token(self):
        token = parse_command("echo 'a b' ")[-1]
        assert token.complete
        assert token.raw_length == 5
