import io
import os
import signal
import threading
import time

import pytest

from sysdrills.signals import (
    STRIKE_LIMIT,
    StrikeCounter,
    ctrlc_main,
    terminate_child_main,
)


def test_strike_counter_counts_below_limit():
    out = io.StringIO()
    counter = StrikeCounter(out=out)
    counter(signal.SIGINT, None)
    counter(signal.SIGINT, None)
    assert counter.count == 2
    assert "[Caught Ctrl-C! Strike 2 of 3]" in out.getvalue()


def test_strike_counter_exits_at_limit():
    out = io.StringIO()
    counter = StrikeCounter(out=out)
    for _ in range(STRIKE_LIMIT - 1):
        counter(signal.SIGINT, None)
    with pytest.raises(SystemExit) as info:
        counter(signal.SIGINT, None)
    assert info.value.code == 0
    assert "That's 3 strikes! Exiting gracefully..." in out.getvalue()


def test_strike_counter_rejects_zero_limit():
    with pytest.raises(ValueError):
        StrikeCounter(limit=0)


def test_ctrlc_main_stops_after_three_interrupts(capsys):
    def _interrupt():
        time.sleep(0.2)
        for _ in range(STRIKE_LIMIT):
            os.kill(os.getpid(), signal.SIGINT)
            time.sleep(0.05)

    before = signal.getsignal(signal.SIGINT)
    sender = threading.Thread(target=_interrupt)
    sender.start()
    result = ctrlc_main(["0.01"])
    sender.join()
    out = capsys.readouterr().out
    assert result == 0
    assert out.count("Caught Ctrl-C!") == STRIKE_LIMIT
    assert signal.getsignal(signal.SIGINT) is before


def test_ctrlc_main_rejects_bad_tick(capsys):
    assert ctrlc_main(["soon"]) == 2
    assert "Usage" in capsys.readouterr().err


def test_terminate_child_main(capfd):
    assert terminate_child_main(["0.3"]) == 0
    out = capfd.readouterr().out
    assert "Father: Signal sent successfully." in out
    assert "Father: Child has been terminated. Exiting." in out


def test_terminate_child_main_rejects_negative_delay(capfd):
    assert terminate_child_main(["-1"]) == 2
    assert "Usage" in capfd.readouterr().err