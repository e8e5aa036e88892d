#!/usr/bin/env python3

from .config import Config
from .log import init_logger
from .playground import Playground


def main() -> None:
    Config.ensure_directories()
    init_logger(logfile=str(Config.LOG_FILE) if Config.LOG_TO_FILE else None)

    playground = Playground()
    playground.run()


if __name__ == "__main__":
    main()
