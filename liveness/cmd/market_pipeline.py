import sys

from liveness.core.profiles import PIPELINE
from liveness.server import run


def main():
    sys.exit(run(PIPELINE))


if __name__ == "__main__":
    main()
