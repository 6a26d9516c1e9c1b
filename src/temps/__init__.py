# SPDX-License-Identifier: MIT

from temps.cleanup import register_cleanup
from temps.initialize import initialize
from temps.terminal.app import run


def main() -> None:
    initialize()
    register_cleanup()
    run()


if __name__ == "__main__":
    main()
