"""Play the endless platformer in a pygame window.

    python -m endless_platformer --preset frantic --seed 7
"""

import argparse
import logging

from .config import CONFIGS, get_config
from .engine import PlatformerEngine


def parse_args(argv=None) -> argparse.Namespace:
    p = argparse.ArgumentParser(prog="endless-platformer", description=__doc__.split("\n")[0])
    p.add_argument("--preset", default="default", choices=sorted(CONFIGS))
    p.add_argument("--seed", type=int, default=None, help="platform generation seed")
    p.add_argument("--fps", type=int, default=None)
    p.add_argument("--log-level", default="INFO")
    return p.parse_args(argv)


def main(argv=None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )
    config = get_config(args.preset)
    if args.fps is not None:
        config.fps = args.fps
    PlatformerEngine(config, seed=args.seed).run()


if __name__ == "__main__":
    main()
