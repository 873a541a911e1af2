import os

import pytest

from passcraft.cli import main
from passcraft.config import load_config
from passcraft.history import history_path, load_history


@pytest.fixture(autouse=True)
def home(passcraft_home):
    return passcraft_home


def password_column(out):
    """Join the folded pieces of the last table column, row by row."""
    return "".join(
        line.split("│")[-2].strip() for line in out.splitlines() if line.count("│") >= 2
    )


def test_generate_records_history_and_settings(capsys):
    assert main(["generate", "--length", "12"]) == 0
    out = capsys.readouterr().out
    assert "Password:" in out
    assert "/ 100" in out
    history = load_history()
    assert len(history) == 1
    assert len(history[0].password) == 12
    assert load_config()["length"] == 12


def test_generate_with_preset():
    assert main(["generate", "--preset", "numbers", "--length", "8"]) == 0
    pw = load_history()[0].password
    assert len(pw) == 8
    assert pw.isdigit()


def test_flags_override_preset():
    assert main(["generate", "--preset", "numbers", "--lowercase", "--no-numbers", "-l", "6"]) == 0
    assert load_history()[0].password.islower()


def test_settings_are_sticky():
    main(["generate", "--preset", "numbers", "--exclude-similar", "--length", "30"])
    main(["generate"])
    pw = load_history()[0].password
    assert len(pw) == 30
    assert set(pw) <= set("23456789")


def test_no_class_selected_fails(capsys):
    code = main(["generate", "--no-uppercase", "--no-lowercase", "--no-numbers", "--no-symbols"])
    assert code == 1
    out = capsys.readouterr().out
    assert "Cannot generate password" in out
    assert "Password:" not in out
    assert not os.path.exists(history_path())
    assert load_config()["uppercase"] is True


def test_invalid_length_fails(capsys):
    assert main(["generate", "--length", "0"]) == 1
    assert "Cannot generate password" in capsys.readouterr().out


def test_unknown_preset_fails(capsys):
    assert main(["generate", "--preset", "emoji"]) == 1
    assert "Unknown preset" in capsys.readouterr().out


def test_no_history():
    main(["generate"])
    assert main(["generate", "--no-history"]) == 0
    assert not os.path.exists(history_path())
    assert load_config()["history_enabled"] is False


def test_batch_export(tmp_path, capsys):
    out_file = tmp_path / "batch.txt"
    assert main(["batch", "--count", "5", "--preset", "numbers", "--export", str(out_file)]) == 0
    lines = out_file.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 5
    assert lines[0].startswith("1. ")
    assert "Exported 5 passwords" in capsys.readouterr().out
    assert not os.path.exists(history_path())


def test_batch_count_out_of_range(capsys):
    assert main(["batch", "--count", "51"]) == 1
    assert "between 1 and 50" in capsys.readouterr().out


def test_score(capsys):
    assert main(["score", "aaaa"]) == 0
    out = capsys.readouterr().out
    assert "25 / 100" in out
    assert "Weak" in out


def test_history_list_and_clear(capsys):
    assert main(["history", "list"]) == 0
    assert "No history yet" in capsys.readouterr().out
    main(["generate", "--preset", "numbers"])
    capsys.readouterr()
    assert main(["history", "list"]) == 0
    assert load_history()[0].password in capsys.readouterr().out
    assert main(["history", "clear", "--yes"]) == 0
    assert load_history() == []


def test_history_clear_aborted(monkeypatch):
    main(["generate"])
    monkeypatch.setattr("builtins.input", lambda prompt: "no")
    assert main(["history", "clear"]) == 0
    assert len(load_history()) == 1


def test_history_disabled_message(capsys):
    main(["generate", "--no-history"])
    capsys.readouterr()
    main(["history", "list"])
    assert "History is disabled" in capsys.readouterr().out


def test_usage_error():
    with pytest.raises(SystemExit) as exc:
        main(["generate", "--length", "many"])
    assert exc.value.code == 2


def test_long_password_printed_unbroken(capsys):
    assert main(["generate", "--preset", "letters", "--length", "120"]) == 0
    pw = load_history()[0].password
    assert len(pw) == 120
    assert pw in capsys.readouterr().out


def test_long_batch_passwords_shown_in_full(tmp_path, capsys):
    out_file = tmp_path / "batch.txt"
    assert main(["batch", "--count", "2", "--length", "100", "--preset", "letters",
                 "--export", str(out_file)]) == 0
    passwords = [line.split(". ", 1)[1] for line in out_file.read_text(encoding="utf-8").splitlines()]
    shown = password_column(capsys.readouterr().out)
    assert "…" not in shown
    assert all(pw in shown for pw in passwords)


def test_long_history_passwords_shown_in_full(capsys):
    main(["generate", "--preset", "letters", "--length", "100"])
    capsys.readouterr()
    assert main(["history", "list"]) == 0
    assert load_history()[0].password in password_column(capsys.readouterr().out)
