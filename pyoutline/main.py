from __future__ import annotations
import sys
from pyoutline.app import run_app


def main() -> int:
    """Module entrypoint for `python -m pyoutline.main` or `python -m pyoutline` (via __main__)."""
    return run_app(sys.argv)


if __name__ == "__main__":
    raise SystemExit(main())
