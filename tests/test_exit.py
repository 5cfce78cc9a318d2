import logging
import signal

import pytest

from smitto.exit import (
    APP_SIGINT_EXIT_CODE,
    APP_SIGTERM_EXIT_CODE,
    ExitHelper,
    exit_code_for_signal,
    signal_name,
)


def test_signal_names():
    assert signal_name(signal.SIGINT) == "SIGINT"
    assert signal_name(signal.SIGTERM) == "SIGTERM"


def test_unknown_signal_name():
    assert signal_name(1234) == "SIG-1234"


@pytest.mark.parametrize(
    "sig, code",
    [
        (signal.SIGINT, APP_SIGINT_EXIT_CODE),
        (signal.SIGTERM, APP_SIGTERM_EXIT_CODE),
        (1234, 0),
    ],
)
def test_exit_codes(sig, code):
    assert exit_code_for_signal(sig) == code


def test_pinned_exit_code_values():
    assert exit_code_for_signal(signal.SIGINT) == 201
    assert exit_code_for_signal(signal.SIGTERM) == 202


def test_handle_calls_on_exit_with_code(caplog):
    codes = []
    helper = ExitHelper(codes.append)
    with caplog.at_level(logging.INFO, logger="smitto.exit"):
        helper.handle(signal.SIGTERM, None)
    assert codes == [APP_SIGTERM_EXIT_CODE]
    assert "SIGTERM" in caplog.text


def test_handle_unknown_signal_gives_zero():
    codes = []
    ExitHelper(codes.append).handle(1234, None)
    assert codes == [0]


def test_install_registers_handler():
    helper = ExitHelper(lambda code: None)
    previous = helper.install()
    try:
        assert signal.getsignal(signal.SIGINT) == helper.handle
        assert signal.getsignal(signal.SIGTERM) == helper.handle
        assert int(signal.SIGINT) in previous
    finally:
        for sig, handler in previous.items():
            signal.signal(sig, handler)
    assert signal.getsignal(signal.SIGINT) == previous[int(signal.SIGINT)]