"""Tests for the command line interface."""

import io

import pytest

from editkit.main import main, parse_args, run


@pytest.fixture
def config(tmp_path):
    return tmp_path / "settings.json"


def run_cli(argv: list[str], stdin: str = "") -> tuple[int, str]:
    out = io.StringIO()
    code = run(parse_args(argv), io.StringIO(stdin), out)
    return code, out.getvalue()


class TestCommands:
    """Test each subcommand's output."""

    def test_score(self, config):
        code, out = run_cli(["--config", str(config), "score", "foo_bar", "fb", "--locale", "en_US"])
        assert code == 0
        assert out == "8\n"

    def test_score_no_match(self, config):
        code, out = run_cli(["--config", str(config), "score", "ab", "ba", "--locale", "en_US"])
        assert out == "0\n"

    def test_rank_from_stdin(self, config):
        code, out = run_cli(
            ["--config", str(config), "rank", "fb", "--locale", "en_US"],
            stdin="xyz\nfoo_bar\n\nfooBar\n",
        )
        assert code == 0
        assert out == "8\tfoo_bar\n6\tfooBar\n"

    def test_rank_limit(self, config):
        code, out = run_cli(
            ["--config", str(config), "rank", "a", "--limit", "1", "--locale", "en_US"],
            stdin="a1\na2\n",
        )
        assert out == "5\ta1\n"

    def test_size_uses_tab_width_setting(self, config):
        config.write_text('{"editor": {"tab_width": 8}}')
        code, out = run_cli(["--config", str(config), "size"], stdin="\tab\nx\n")
        assert out == "10x3\n"

    def test_blank_and_offset(self, config, tmp_path, qapp):
        text_file = tmp_path / "code.txt"
        text_file.write_text("hello world\n   \n")
        assert run_cli(["--config", str(config), "blank", str(text_file), "1"])[1] == "true\n"
        assert run_cli(["--config", str(config), "blank", str(text_file), "0"])[1] == "false\n"
        assert run_cli(["--config", str(config), "offset", str(text_file), "0", "world"])[1] == "6\n"


    def test_size_keeps_lone_carriage_return(self, config, tmp_path):
        text_file = tmp_path / "cr.txt"
        text_file.write_bytes(b"ab\rcd")
        code, out = run_cli(["--config", str(config), "size", str(text_file)])
        assert out == "4x1\n"

    def test_rank_reads_utf8(self, config, tmp_path):
        candidates = tmp_path / "names.txt"
        candidates.write_bytes("caf\u00e9\nother\n".encode("utf-8"))
        code, out = run_cli(
            ["--config", str(config), "rank", "\u00e9", str(candidates), "--locale", "en_US"]
        )
        assert out == "1\tcaf\u00e9\n"

    def test_negative_limit_rejected(self, config, capsys):
        with pytest.raises(SystemExit):
            parse_args(["--config", str(config), "rank", "a", "--limit", "-1"])
        assert "must be 0 or more" in capsys.readouterr().err


class TestMain:
    def test_bad_line_reports_error(self, config, tmp_path, qapp, capsys):
        text_file = tmp_path / "code.txt"
        text_file.write_text("one line")
        code = main(["--config", str(config), "blank", str(text_file), "7"])
        assert code == 2
        assert "error:" in capsys.readouterr().err

    def test_missing_file_reports_error(self, config, tmp_path, capsys):
        code = main(["--config", str(config), "size", str(tmp_path / "nope.txt")])
        assert code == 2
        assert "error:" in capsys.readouterr().err

    def test_requires_command(self):
        with pytest.raises(SystemExit):
            parse_args([])
