"""
Configuration for the demo driver and logging setup.
"""

import logging
from dataclasses import dataclass


@dataclass
class DemoConfig:
    """Inputs of the demo expression relu(a*b + c**exponent) and how to report it."""
    a: float = 2.0
    b: float = 3.0
    c: float = -2.0
    exponent: float = 2.0
    precision: int = 2
    show_graph: bool = False
    log_level: str = "WARNING"

    def __post_init__(self):
        if self.precision < 0:
            raise ValueError(f"precision must be non-negative, got {self.precision}")
        self.log_level = self.log_level.upper()
        if not isinstance(logging.getLevelName(self.log_level), int):
            raise ValueError(f"unknown log level {self.log_level!r}")

    @classmethod
    def from_args(cls, args) -> "DemoConfig":
        """Build from an argparse namespace."""
        return cls(
            a=args.a, b=args.b, c=args.c, exponent=args.exponent,
            precision=args.precision,
            show_graph=args.show_graph,
            log_level=args.log_level,
        )


def configure_logging(level: str = "WARNING") -> None:
    """Send log records of `level` and above to stderr."""
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
