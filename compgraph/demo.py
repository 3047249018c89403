"""
Demo: build f = relu((a * b) + c ** exponent), run one backward pass and
print the forward value and the input gradients.
"""

import argparse
import logging
import sys

from .config import DemoConfig, configure_logging
from .core.engine import backward
from .core.graph_utils import format_graph
from .ops import make_leaf, add, multiply, power, rectify

logger = logging.getLogger(__name__)


def parse_args(argv=None):
    """Parse command line arguments."""
    defaults = DemoConfig()
    parser = argparse.ArgumentParser(
        description='Reverse-mode AD demo: relu(a*b + c**exponent)',
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    parser.add_argument('-a', type=float, default=defaults.a, help='value of a')
    parser.add_argument('-b', type=float, default=defaults.b, help='value of b')
    parser.add_argument('-c', type=float, default=defaults.c, help='value of c')
    parser.add_argument('--exponent', type=float, default=defaults.exponent,
                        help='exponent applied to c (receives no gradient)')
    parser.add_argument('--precision', type=int, default=defaults.precision,
                        help='decimal places in the printed results')
    parser.add_argument('--show-graph', action='store_true',
                        help='also print every node of the graph')
    parser.add_argument('--log-level', default=defaults.log_level,
                        help='logging level (DEBUG, INFO, WARNING, ...)')
    return parser.parse_args(argv)


def build_expression(config: DemoConfig):
    """Return (f, {name: leaf}) for the demo expression."""
    a = make_leaf(config.a, name="a")
    b = make_leaf(config.b, name="b")
    c = make_leaf(config.c, name="c")
    e = make_leaf(config.exponent, name="exponent")
    f = rectify(add(multiply(a, b), power(c, e)))
    f.name = "f"
    return f, {"a": a, "b": b, "c": c}


def run(config: DemoConfig, out=None) -> None:
    out = out if out is not None else sys.stdout
    p = config.precision

    f, leaves = build_expression(config)
    print(f"Forward Pass Result: {f.value:.{p}f}", file=out)

    backward(f)
    logger.info("backward pass finished")

    print("--- Gradients ---", file=out)
    for name, leaf in leaves.items():
        print(f"Gradient of {name}: {leaf.gradient:.{p}f}", file=out)

    if config.show_graph:
        print(format_graph(f), file=out)


def main(argv=None) -> int:
    try:
        config = DemoConfig.from_args(parse_args(argv))
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    configure_logging(config.log_level)
    run(config)
    return 0


if __name__ == "__main__":
    sys.exit(main())
