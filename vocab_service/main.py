"""Console entry point for vocab-service.

``vocab-service --server`` is shorthand for ``vocab-service server run``;
any other arguments go to the click CLI unchanged.
"""

from __future__ import annotations

import sys


def _expand_server_flag(argv: list[str]) -> list[str]:
    if "--server" not in argv[1:]:
        return argv
    rest = [arg for arg in argv[1:] if arg != "--server"]
    return [argv[0], "server", "run", *rest]


def main() -> None:
    from vocab_service.cli.main import main as cli_main

    sys.argv = _expand_server_flag(sys.argv)
    cli_main()


if __name__ == "__main__":
    main()
