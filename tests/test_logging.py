"""Tests for the tagged frame logger."""

from zoomview.logging import Logger


def test_log_line_carries_frame(capsys):
    logger = Logger()
    logger.increment_frame()
    logger.log("[CTRL] Layout")
    out = capsys.readouterr().out
    assert "F000001] [CTRL] Layout" in out


def test_muted_tag_is_suppressed(capsys):
    logger = Logger(muted_tags={"input"})
    logger.log("[INPUT] drag 3,4")
    logger.log("[CTRL] pinch")
    out = capsys.readouterr().out
    assert "[INPUT]" not in out
    assert "[CTRL] pinch" in out


def test_errors_pass_through_muted_tag(capsys):
    logger = Logger()
    logger.mute("RENDER")
    logger.log("[RENDER] frame")
    logger.log("[RENDER][ERR] empty zoom range")
    out = capsys.readouterr().out
    assert "[RENDER] frame" not in out
    assert "[RENDER][ERR] empty zoom range" in out

    logger.unmute("render")
    logger.log("[RENDER] frame")
    assert "[RENDER] frame" in capsys.readouterr().out


def test_disabled_logger_is_silent(capsys):
    logger = Logger()
    logger.enabled = False
    logger.log("[APP] hello")
    assert capsys.readouterr().out == ""
