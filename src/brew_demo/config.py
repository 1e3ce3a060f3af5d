"""
Demo settings — command-line flags validated into a Pydantic model.
"""

import argparse
from collections.abc import Sequence

from pydantic import BaseModel, Field, ValidationError

DEFAULT_MACHINE_NAME = "Professional Barista 3000"
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


class DemoSettings(BaseModel):
    """Knobs for one demo run. Defaults reproduce the reference timings."""

    machine_name: str = Field(DEFAULT_MACHINE_NAME, min_length=1)
    warmup_ms: int = Field(500, ge=0)     # Warm-up before every brew
    pause_ms: int = Field(1000, ge=0)     # Pause after each morning-rush order
    time_scale: float = Field(1.0, gt=0)  # Multiplies every simulated delay
    log_level: str = "INFO"


def build_parser() -> argparse.ArgumentParser:
    defaults = DemoSettings()
    parser = argparse.ArgumentParser(description="Simulate a morning at the coffee shop")
    parser.add_argument("--machine-name", default=defaults.machine_name, help="Name of the shared coffee machine")
    parser.add_argument("--warmup-ms", type=int, default=defaults.warmup_ms, help="Warm-up time before each brew")
    parser.add_argument("--pause-ms", type=int, default=defaults.pause_ms, help="Pause between morning-rush orders")
    parser.add_argument(
        "--time-scale",
        type=float,
        default=defaults.time_scale,
        help="Multiply all simulated delays, e.g. 0.1 for a ten times faster run",
    )
    parser.add_argument("--log-level", default=defaults.log_level, choices=LOG_LEVELS, help="Logging verbosity")
    return parser


def parse_settings(argv: Sequence[str] | None = None) -> DemoSettings:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        return DemoSettings(
            machine_name=args.machine_name,
            warmup_ms=args.warmup_ms,
            pause_ms=args.pause_ms,
            time_scale=args.time_scale,
            log_level=args.log_level,
        )
    except ValidationError as exc:
        parser.error(str(exc))
