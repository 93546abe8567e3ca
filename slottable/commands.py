from dataclasses import dataclass
import enum

MAX_KEY_LENGTH = 10


class CommandType(enum.Enum):
    ADD = enum.auto()
    DELETE = enum.auto()

    INVALID_KEY = enum.auto()
    ERROR = enum.auto()


@dataclass
class Command:
    type: CommandType
    key: str
    lexeme: str
    message: str = ""


def scan_commands(source: str) -> list[Command]:
    return [scan_command(lexeme) for lexeme in source.split()]


def scan_command(lexeme: str) -> Command:
    op, key = lexeme[0], lexeme[1:]
    match op:
        case "A" | "a":
            return make_command(CommandType.ADD, key, lexeme)
        case "D" | "d":
            return make_command(CommandType.DELETE, key, lexeme)
        case _:
            return error_command(f"Unsupported operation '{op}'", lexeme)


def make_command(typ: CommandType, key: str, lexeme: str) -> Command:
    if not is_valid_key(key):
        return Command(type=CommandType.INVALID_KEY, key=key, lexeme=lexeme)
    return Command(type=typ, key=key, lexeme=lexeme)


def error_command(message: str, lexeme: str) -> Command:
    return Command(type=CommandType.ERROR, key="", lexeme=lexeme, message=message)


def is_valid_key(key: str) -> bool:
    if not 0 < len(key) <= MAX_KEY_LENGTH:
        return False
    return all(is_lower(c) for c in key)


def is_lower(c: str) -> bool:
    return "a" <= c <= "z"
