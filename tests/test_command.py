import pytest

from todoc.command import CommandType, get_command_type, help_text, print_help


@pytest.mark.parametrize(
    "verb, expected",
    [
        ("help", CommandType.HELP),
        ("h", CommandType.HELP),
        ("-h", CommandType.HELP),
        ("--help", CommandType.HELP),
        ("add", CommandType.CREATE),
        ("a", CommandType.CREATE),
        ("-a", CommandType.CREATE),
        ("--add", CommandType.CREATE),
        ("del", CommandType.DELETE),
        ("d", CommandType.DELETE),
        ("-d", CommandType.DELETE),
        ("--del", CommandType.DELETE),
        ("ls", CommandType.LIST),
        ("--list", CommandType.LIST),
        ("-l", CommandType.LIST),
        ("done", CommandType.DONE),
        ("do", CommandType.DONE),
        ("--do", CommandType.DONE),
        ("--done", CommandType.DONE),
        ("upd", CommandType.UPDATE),
        ("u", CommandType.UPDATE),
        ("--update", CommandType.UPDATE),
        ("-u", CommandType.UPDATE),
    ],
)
def test_known_verbs(verb, expected):
    assert get_command_type(verb) is expected


@pytest.mark.parametrize("verb", ["", "list", "HELP", "-x", "delete", "add "])
def test_unknown_verbs(verb):
    assert get_command_type(verb) is CommandType.UNKNOWN


def test_help_text_first_line():
    assert help_text().splitlines()[0] == "Usage: todo-c [COMMAND] [ARGS]"


def test_print_help_matches_text(capsys):
    print_help()
    assert capsys.readouterr().out == help_text()