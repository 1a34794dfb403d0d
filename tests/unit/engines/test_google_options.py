"""
Google engine option parsing.
"""

import argparse

import pytest

from dorkhound.engines.google.options import GoogleOptions, build_parser, parse_duration, parse_options, split_pair
from dorkhound.errors import UsageError


class TestParseOptions:
    def test_query_words_are_joined(self, settings):
        options = parse_options(["site:example.org", "intitle:admin"], settings=settings)
        assert options.query == "site:example.org intitle:admin"

    def test_defaults(self, settings):
        options = parse_options(["q"], settings=settings)
        assert options.tld == ".com"
        assert options.num == 10
        assert options.start == 0
        assert options.safe is False
        assert options.verbose is False
        assert options.timeout == settings.timeout_seconds
        assert options.user_agent == settings.user_agent
        assert options.cookies == []
        assert options.headers == []

    def test_every_option(self, settings):
        options = parse_options(
            [
                "-v", "-t", "1m30s", "-U", "agent/1.0", "-n", "50", "--safe", "--start", "20",
                "--tld", ".de", "--lang", "de", "--country", "countryDE",
                "--inurl", "admin", "--intext", "login", "--filetype", "pdf", "--ext", "php",
                "site:example.org",
            ],
            settings=settings,
        )
        assert options == GoogleOptions(
            query="site:example.org",
            verbose=True,
            user_agent="agent/1.0",
            timeout=90.0,
            start=20,
            tld=".de",
            lang="de",
            num=50,
            safe=True,
            country="countryDE",
            inurl="admin",
            intext="login",
            filetype="pdf",
            ext="php",
        )

    def test_missing_query(self, settings):
        with pytest.raises(UsageError, match="query is required"):
            parse_options([], settings=settings)
        with pytest.raises(UsageError, match="query is required"):
            parse_options(["-v", "  "], settings=settings)

    @pytest.mark.parametrize(
        "argv",
        [["-t", "soon", "q"], ["-n", "many", "q"], ["--bogus", "q"], ["--start"]],
    )
    def test_malformed_options_raise_usage_error(self, settings, argv):
        with pytest.raises(UsageError):
            parse_options(argv, settings=settings)


class TestHeadersAndCookies:
    def test_repeatable_headers(self, settings):
        options = parse_options(["-H", "X-One: 1", "-H", "X-Two:two:parts", "-H", "broken", "q"], settings=settings)
        assert options.headers == [["X-One", "1"], ["X-Two", "two:parts"], ["broken"]]
        assert options.header_pairs == [("X-One", "1"), ("X-Two", "two:parts")]

    def test_repeatable_cookies(self, settings):
        options = parse_options(["-C", "NID = abc", "-C", "pref=a=b", "-C", "junk", "q"], settings=settings)
        assert options.cookie_pairs == [("NID", "abc"), ("pref", "a=b")]

    def test_split_pair_splits_once(self):
        assert split_pair(" a : b : c ", ":") == ["a", "b : c"]
        assert split_pair("novalue", "=") == ["novalue"]


class TestParseDuration:
    @pytest.mark.parametrize(
        "value, seconds",
        [("20", 20.0), ("2.5", 2.5), ("20s", 20.0), ("500ms", 0.5), ("1m30s", 90.0), ("2h", 7200.0)],
    )
    def test_valid(self, value, seconds):
        assert parse_duration(value) == pytest.approx(seconds)

    @pytest.mark.parametrize("value", ["", "soon", "10x", "s10"])
    def test_invalid(self, value):
        with pytest.raises(argparse.ArgumentTypeError):
            parse_duration(value)


class TestHelp:
    def test_help_lists_option_groups(self, settings):
        text = build_parser(settings=settings).format_help()
        assert text.startswith("usage: dorkhound google [OPTIONS] QUERY")
        for flag in ("--verbose", "--timeout", "--header", "--cookie", "--user-agent", "--num", "--inurl", "--ext"):
            assert flag in text
