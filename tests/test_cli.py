import pytest

from columns.cli import parse_config
from columns.config import GameConfig


def test_defaults_match_game_config():
    args, config = parse_config([])
    assert config == GameConfig()
    assert args.seed is None
    assert not args.plain_log


def test_narrow_pit_clamps_spawn_column():
    _, config = parse_config(["--columns", "2", "--rows", "5", "--fall-seconds", "0.5"])
    assert (config.columns, config.rows) == (2, 5)
    assert config.starting_x == 1
    assert config.fall_seconds == 0.5


@pytest.mark.parametrize(
    "argv",
    [
        ["--rows", "2"],
        ["--columns", "0"],
        ["--fall-seconds", "0"],
    ],
)
def test_invalid_values_exit_with_usage_error(argv, capsys):
    with pytest.raises(SystemExit) as excinfo:
        parse_config(argv)
    assert excinfo.value.code == 2
    assert "error:" in capsys.readouterr().err
