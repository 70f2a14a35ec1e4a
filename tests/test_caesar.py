import pytest

from kata.caesar import CIPHERTEXT, encrypt, is_alphabet, main, shift_text

PLAINTEXT = (
    "FABER EST SUAE QUISQUE FORTUNAE APPIUS CLAUDIUS CAECUS DICTUM ARCANUM EST NEUTRON"
)


def test_is_alphabet_true():
    assert is_alphabet("a") is True


def test_is_alphabet_false():
    assert is_alphabet("-") is False


def test_encrypt():
    assert encrypt("a", 3) == "d"


@pytest.mark.parametrize(
    "c, offset, expected",
    [("z", 1, "a"), ("Z", 3, "C"), ("Y", 2, "A"), (" ", 5, " "), ("!", 7, "!")],
)
def test_encrypt_wraps_and_passes_through(c, offset, expected):
    assert encrypt(c, offset) == expected


def test_encrypt_rejects_bad_offset():
    with pytest.raises(ValueError):
        encrypt("a", 27)


def test_shift_text_decodes_sample():
    assert shift_text(CIPHERTEXT, 19) == PLAINTEXT


def test_shift_text_round_trip():
    text = "Hello, World! xyz ABC"
    for offset in range(27):
        assert shift_text(shift_text(text, offset), 26 - offset) == text


def test_main_lists_all_shifts(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 25
    assert lines[18] == f"19: {PLAINTEXT}"