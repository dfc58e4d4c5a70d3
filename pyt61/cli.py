import platform
import sys


def main_cli(argv=None):
    if sys.version_info < (3, 8):
        # We intentionally don't use any new syntax here
        print("pyt61 cannot run on such an old Python version as " + platform.python_version() + ". Python 3.8+ is supported.", file=sys.stderr)
        raise SystemExit(1)


    # pylint: disable=redefined-outer-name,import-outside-toplevel
    from ._cli import main_cli
    main_cli(argv)


if __name__ == "__main__":
    main_cli()
