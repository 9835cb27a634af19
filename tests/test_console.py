import pytest

from recursia.console import (
    get_integer,
    get_yes_or_no,
    make_file_selection,
    make_selection_from,
)


def feed(monkeypatch, *replies):
    it = iter(replies)
    monkeypatch.setattr("builtins.input", lambda prompt="": next(it))


def test_get_integer_reprompts_until_valid(monkeypatch, capsys):
    feed(monkeypatch, "abc", "4.5", " 42 ")
    assert get_integer("Number: ") == 42
    out = capsys.readouterr().out
    assert out.count("Illegal integer format. Try again.") == 2


def test_get_integer_negative(monkeypatch):
    feed(monkeypatch, "-7")
    assert get_integer() == -7


@pytest.mark.parametrize(
    "replies, expected",
    [(("Yes",), True), (("n",), False), (("maybe", "", "NO"), False), (("y",), True)],
)
def test_get_yes_or_no(monkeypatch, replies, expected):
    feed(monkeypatch, *replies)
    assert get_yes_or_no("Continue?") is expected


def test_get_yes_or_no_complains_on_bad_answer(monkeypatch, capsys):
    feed(monkeypatch, "what", "yes")
    assert get_yes_or_no("Again?") is True
    assert "starts with 'Y' or 'N'" in capsys.readouterr().out


def test_make_selection_lists_options(monkeypatch, capsys):
    feed(monkeypatch, "2")
    assert make_selection_from("Pick:", ["alpha", "beta", "gamma"]) == 2
    out = capsys.readouterr().out
    assert out.splitlines()[:4] == ["Pick:", "0 alpha", "1 beta", "2 gamma"]


def test_make_selection_rejects_out_of_range(monkeypatch, capsys):
    feed(monkeypatch, "3", "-1", "1")
    assert make_selection_from("Pick:", ["a", "b", "c"]) == 1
    out = capsys.readouterr().out
    assert out.count("Please enter a number between 0 and 2") == 2


def test_make_selection_empty_raises():
    with pytest.raises(ValueError):
        make_selection_from("Pick:", [])


def test_make_file_selection_filters_and_joins(monkeypatch, tmp_path):
    for name in ("b.txt", "a.txt", "c.dat"):
        (tmp_path / name).write_text("x")
    feed(monkeypatch, "1")
    assert make_file_selection(".txt", str(tmp_path)) == str(tmp_path) + "/b.txt"


def test_make_file_selection_keeps_trailing_slash(monkeypatch, tmp_path):
    (tmp_path / "only.txt").write_text("x")
    feed(monkeypatch, "0")
    directory = str(tmp_path) + "/"
    assert make_file_selection(".txt", directory) == directory + "only.txt"


def test_make_file_selection_empty_directory_uses_cwd(monkeypatch, tmp_path):
    (tmp_path / "demo.txt").write_text("x")
    monkeypatch.chdir(tmp_path)
    feed(monkeypatch, "0")
    assert make_file_selection(".txt", "") == "./demo.txt"


def test_make_file_selection_no_matches_raises(tmp_path):
    (tmp_path / "a.dat").write_text("x")
    with pytest.raises(ValueError):
        make_file_selection(".txt", str(tmp_path))