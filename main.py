"""Entry point for the vec2d command-line calculator."""

import sys

from vec2d.cli import main


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
