import sys
from typing import Any

RULE = "=" * 40


def printf(format: str, *args: Any):
    print(format.format(*args), end="")


def printf_err(format: str, *args: Any):
    # resolved per call so a redirected stderr is honoured
    print(format.format(*args), end="", file=sys.stderr)


def print_banner(title: str):
    printf("{0:s}\n{1:^40s}\n{0:s}\n", RULE, title)
