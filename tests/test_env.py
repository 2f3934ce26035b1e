import pytest

from standx.env import load_env, parse_env_line


@pytest.mark.parametrize("line", ["", "   ", "\n", "# comment", "   # KEY=value", "NOEQUALS"])
def test_parse_env_line_skips(line):
    assert parse_env_line(line) is None


def test_parse_env_line_trims():
    assert parse_env_line("  CHAIN \t=\t bsc  \n") == ("CHAIN", "bsc")


@pytest.mark.parametrize(
    "line, value",
    [('KEY="quoted value"', "quoted value"), ("KEY='single'", "single"), ('KEY="mixed\'', "\"mixed'")],
)
def test_parse_env_line_quotes(line, value):
    assert parse_env_line(line) == ("KEY", value)


def test_parse_env_line_single_quote_char_kept():
    assert parse_env_line('KEY="') == ("KEY", '"')


def test_parse_env_line_value_may_contain_equals():
    assert parse_env_line("KEY=a=b") == ("KEY", "a=b")


def test_load_env_missing_file(tmp_path):
    assert load_env(tmp_path / "absent.env") == {}


def test_load_env_reads_file(tmp_path):
    path = tmp_path / ".env"
    path.write_text(
        "# settings\n"
        "CHAIN=bsc\n"
        "\n"
        'WALLET_PRIVATE_KEY_HEX="placeholder"\r\n'
        "IGNORED LINE\n"
        "CHAIN = base\n",
        encoding="utf-8",
    )
    env = load_env(path)
    assert env == {"CHAIN": "base", "WALLET_PRIVATE_KEY_HEX": "placeholder"}


def test_load_env_default_path(tmp_path, monkeypatch):
    (tmp_path / ".env").write_text("CHAIN=bsc\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    assert load_env() == {"CHAIN": "bsc"}