# SPDX-License-Identifier: MIT

from quoteplan.initialize import initialize
from quoteplan.terminal.app import run


def main() -> None:
    initialize()
    run()


if __name__ == "__main__":
    main()
