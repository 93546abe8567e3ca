import sys

from .debug import print_table
from .driver import RunError, run
from .shared import printf
from .table import Table

DEMO = "Aapple Agrape Dapple Astrawberry Aorange Ablueberry Araspberry"


def repl(table: Table):
    while True:
        try:
            inpt = input()
        except EOFError:
            break
        run(table, inpt)

    print_table(table)


def run_source(table: Table, source: str):
    result = run(table, source)
    print_table(table)

    if isinstance(result, RunError):
        sys.exit(65)


def run_file(table: Table, filepath: str):
    with open(filepath) as fp:
        run_source(table, fp.read())


def main():
    table = Table()

    if len(sys.argv) == 1:
        repl(table)
    elif len(sys.argv) == 2 and sys.argv[1] == "--demo":
        run_source(table, DEMO)
    elif len(sys.argv) == 2:
        run_file(table, sys.argv[1])
    else:
        printf("Usage: slottable [--demo | path]\n")
        sys.exit(64)


if __name__ == "__main__":
    main()
