from dataclasses import dataclass

from .commands import Command, CommandType, scan_commands
from .debug import print_occupied
from .shared import RULE, print_banner, printf, printf_err
from .table import Table


_debug_trace_commands = False


def set_debug_trace_commands(b: bool):
    global _debug_trace_commands
    _debug_trace_commands = b


@dataclass(frozen=True)
class RunOk:
    pass


@dataclass(frozen=True)
class RunError:
    error_count: int


RunResult = RunOk | RunError


def run(table: Table, source: str, probing_delete: bool = False) -> RunResult:
    error_count = 0

    print_banner("operation sequence")
    for number, command in enumerate(scan_commands(source), start=1):
        match command.type:
            case CommandType.ERROR:
                command_error(number, command)
                error_count += 1
            case CommandType.INVALID_KEY:
                if _debug_trace_commands:
                    printf_err("[token {0:d}] skipped '{1:s}'\n", number, command.lexeme)
            case _:
                execute(table, command, probing_delete)
                if _debug_trace_commands:
                    print_occupied(table)
    printf("{0:s}\n", RULE)

    if error_count:
        return RunError(error_count)
    return RunOk()


def execute(table: Table, command: Command, probing_delete: bool = False) -> bool:
    match command.type:
        case CommandType.ADD:
            result = table.add(command.key)
            printf("add: {0:s} {1:s}\n", command.key, format_bool(result))
        case CommandType.DELETE:
            if probing_delete:
                result = table.delete_probing(command.key)
            else:
                result = table.delete(command.key)
            printf("delete: {0:s} {1:s}\n", command.key, format_bool(result))
        case _:
            raise AssertionError(f"Unhandled operation requested: {command.type}")
    return result


def command_error(number: int, command: Command):
    printf_err("[token {0:d}] Error at '{1:s}': {2:s}\n", number, command.lexeme, command.message)


def format_bool(b: bool) -> str:
    return "true" if b else "false"
