import pytest

from viper.logger import Logger, LogLevel


@pytest.fixture(autouse=True)
def _restore_levels():
    yield
    Logger.set_enabled_levels(LogLevel.ALL)


def test_all_enables_every_level(capsys):
    Logger.set_enabled_levels(LogLevel.ALL)
    Logger.info("i {}", 1)
    Logger.warning("w")
    Logger.error("e")
    Logger.debug("d")
    assert capsys.readouterr().out == (
        "\033[31m[INFO] i 1\033[0m\n"
        "\033[33m[WARNING] w\033[0m\n"
        "\033[31m[ERROR] e\033[0m\n"
        "\033[36m[DEBUG] d\033[0m\n"
    )


def test_warning_format(capsys):
    Logger.warning("missing {}", "bass")
    assert capsys.readouterr().out == "\033[33m[WARNING] missing bass\033[0m\n"


def test_error_and_debug_prefixes(capsys):
    Logger.error("boom")
    Logger.debug("trace {}", 3)
    out = capsys.readouterr().out
    assert out == "\033[31m[ERROR] boom\033[0m\n\033[36m[DEBUG] trace 3\033[0m\n"


def test_info_with_args_is_logged(capsys):
    Logger.info("value {}", 1)
    assert capsys.readouterr().out == "\033[31m[INFO] value 1\033[0m\n"


def test_info_without_args_is_raw(capsys):
    Logger.info("plain text")
    assert capsys.readouterr().out == "plain text"


def test_disabled_levels_are_silent(capsys):
    Logger.set_enabled_levels(LogLevel.ERROR)
    Logger.warning("hidden")
    Logger.debug("hidden")
    Logger.error("shown")
    out = capsys.readouterr().out
    assert "hidden" not in out
    assert "[ERROR] shown" in out


def test_none_level_never_logged(capsys):
    Logger.log(LogLevel.NONE, "nothing")
    assert capsys.readouterr().out == ""


def test_extra_args_ignored(capsys):
    Logger.warning("name already exists ", "key")
    assert capsys.readouterr().out == "\033[33m[WARNING] name already exists \033[0m\n"