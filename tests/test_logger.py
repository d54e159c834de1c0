import pytest

from peershare import logger


@pytest.mark.parametrize(
    "func, prefix",
    [
        (logger.info, "\033[34m[INFO]\033[0m"),
        (logger.success, "\033[32m[SUCCESS] \033[0m"),
        (logger.error, "\033[31m[ERROR] \033[0m"),
        (logger.warning, "\033[33m[WARNING]\033[0m"),
    ],
)
def test_prefix_and_message(capsys, func, prefix):
    func("hello")
    out = capsys.readouterr().out
    assert out == prefix + "hello\n"


def test_each_call_is_one_line(capsys):
    logger.info("a")
    logger.error("b")
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 2
    assert lines[0].endswith("a")
    assert lines[1].endswith("b")


def test_message_kept_verbatim(capsys):
    logger.warning("No peers found.")
    out = capsys.readouterr().out
    assert out.endswith("No peers found.\n")
    assert out.startswith(logger.YELLOW)