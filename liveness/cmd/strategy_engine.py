import sys

from liveness.core.profiles import STRATEGY
from liveness.server import run


def main():
    sys.exit(run(STRATEGY))


if __name__ == "__main__":
    main()
