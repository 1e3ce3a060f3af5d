import asyncio
import json
import logging

import pytest

from doubles import FakeMachine, UnclassifiedErrorMachine

from brew_demo.config import DemoSettings, parse_settings
from brew_demo.demo import main, run_demo, run_demo_safely
from brew_demo.domain.models import PowerState
from brew_demo.services.factory import MachineFactory
from brew_demo.services.timing import scaled_wait

FAST = DemoSettings(warmup_ms=500, pause_ms=1000, time_scale=0.001)


def test_full_demo_completes(caplog, capsys):
    caplog.set_level(logging.INFO, logger="brew_demo")

    stats = asyncio.run(run_demo_safely(FAST))

    assert stats is not None
    assert stats.total_orders == 3
    assert stats.popular_recipes == {"Espresso": 1, "Latte": 1, "Americano": 1}
    assert caplog.text.count("Error correctly caught") == 2
    assert "Strong recipes (>75%): Espresso, Americano, Morning Special" in caplog.text
    assert "Alice's order completed" in caplog.text
    assert "Demo completed!" in caplog.text
    assert "Demo failed" not in caplog.text

    printed = json.loads(capsys.readouterr().out)
    assert printed["total_orders"] == 3


def test_demo_uses_one_shared_machine():
    asyncio.run(run_demo(FAST))
    machine = MachineFactory.get_shared_machine(FAST.machine_name, wait=scaled_wait(FAST.time_scale))
    assert machine.power_state is PowerState.OFF


def test_rerun_at_another_scale_gets_its_own_machine():
    slower = FAST.model_copy(update={"time_scale": 0.002})
    asyncio.run(run_demo(FAST))
    asyncio.run(run_demo(slower))

    fast_machine = MachineFactory.get_shared_machine(FAST.machine_name, wait=scaled_wait(FAST.time_scale))
    slow_machine = MachineFactory.get_shared_machine(slower.machine_name, wait=scaled_wait(slower.time_scale))
    assert fast_machine is not slow_machine


def test_demo_completes_when_machine_raises_unclassified_errors(monkeypatch, caplog):
    monkeypatch.setattr(
        MachineFactory,
        "create_machine",
        staticmethod(lambda name, wait=None: UnclassifiedErrorMachine(name)),
    )
    caplog.set_level(logging.INFO, logger="brew_demo")

    stats = asyncio.run(run_demo_safely(FAST))

    assert stats is not None
    assert stats.total_orders == 3
    assert "Demo completed!" in caplog.text
    assert "Demo failed" not in caplog.text


def test_demo_with_injected_machine():
    machine = FakeMachine("Injected")
    stats = asyncio.run(run_demo(FAST, machine))

    brews = [event for event in machine.events if isinstance(event, tuple)]
    assert brews == [
        ("brew", None),
        ("brew", "Espresso"),
        ("brew", "Espresso"),
        ("brew", "Latte"),
        ("brew", "Americano"),
    ]
    assert stats.total_orders == 3


def test_uncaught_failure_is_logged_not_raised(caplog):
    class Broken(FakeMachine):
        def get_name(self):
            raise RuntimeError("display cable unplugged")

    caplog.set_level(logging.INFO, logger="brew_demo")
    assert asyncio.run(run_demo_safely(FAST, Broken())) is None
    assert "Demo failed" in caplog.text
    assert "display cable unplugged" in caplog.text


def test_main_runs_end_to_end(capsys):
    main(["--time-scale", "0.001", "--log-level", "WARNING"])
    assert json.loads(capsys.readouterr().out)["total_orders"] == 3


def test_parse_settings_defaults():
    settings = parse_settings([])
    assert settings == DemoSettings()
    assert settings.machine_name == "Professional Barista 3000"
    assert settings.warmup_ms == 500
    assert settings.pause_ms == 1000


def test_parse_settings_flags():
    settings = parse_settings(["--machine-name", "Moka", "--warmup-ms", "0", "--pause-ms", "10", "--time-scale", "0.5"])
    assert settings.machine_name == "Moka"
    assert settings.warmup_ms == 0
    assert settings.pause_ms == 10
    assert settings.time_scale == 0.5


@pytest.mark.parametrize("argv", [["--time-scale", "0"], ["--warmup-ms", "-1"], ["--log-level", "LOUD"]])
def test_parse_settings_rejects_bad_values(argv):
    with pytest.raises(SystemExit):
        parse_settings(argv)
