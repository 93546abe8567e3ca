from slottable.commands import Command, CommandType, is_valid_key, scan_commands


def test_valid_keys():
    assert is_valid_key("a")
    assert is_valid_key("strawberry")

    assert not is_valid_key("")
    assert not is_valid_key("blackcurrant")
    assert not is_valid_key("Apple")
    assert not is_valid_key("a1")
    assert not is_valid_key("é")


def test_scan():
    assert scan_commands("Aapple  dgrape\n") == [
        Command(CommandType.ADD, "apple", "Aapple"),
        Command(CommandType.DELETE, "grape", "dgrape"),
    ]


def test_scan_invalid_keys():
    types = [c.type for c in scan_commands("A Ablackcurrant AApple Dx9")]
    assert types == [CommandType.INVALID_KEY] * 4


def test_scan_unsupported_operation():
    (command,) = scan_commands("Xapple")
    assert command.type == CommandType.ERROR
    assert command.lexeme == "Xapple"
    assert "X" in command.message


def test_scan_empty():
    assert scan_commands("") == []
    assert scan_commands("  \n\t") == []
