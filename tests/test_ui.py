from rustlings.ui import bold, no_emoji, spinner, success, warn


def test_no_emoji_follows_environment(monkeypatch):
    monkeypatch.setenv("NO_EMOJI", "1")
    assert no_emoji() is True
    monkeypatch.delenv("NO_EMOJI")
    assert no_emoji() is False


def test_warn_without_emoji(monkeypatch, capsys):
    monkeypatch.setenv("NO_EMOJI", "1")
    warn("Ran exercises/a.rs with errors")
    assert capsys.readouterr().out == "! Ran exercises/a.rs with errors\n"


def test_warn_with_emoji(monkeypatch, capsys):
    monkeypatch.delenv("NO_EMOJI", raising=False)
    warn("broken [thing]")
    out = capsys.readouterr().out
    assert out.startswith("⚠️")
    assert out.rstrip("\n").endswith(" broken [thing]")


def test_success_without_emoji(monkeypatch, capsys):
    monkeypatch.setenv("NO_EMOJI", "1")
    success("Successfully ran exercises/a.rs")
    assert capsys.readouterr().out == "✓ Successfully ran exercises/a.rs\n"


def test_success_with_emoji(monkeypatch, capsys):
    monkeypatch.delenv("NO_EMOJI", raising=False)
    success("done")
    assert capsys.readouterr().out == "✅ done\n"


def test_bold_keeps_text():
    styled = bold("`I AM NOT DONE`")
    assert styled.plain == "`I AM NOT DONE`"
    assert str(styled.style) == "bold"


def test_spinner_tracks_message():
    with spinner("Compiling a.rs...") as bar:
        assert bar.message == "Compiling a.rs..."
        bar.update("Running a.rs...")
        assert bar.message == "Running a.rs..."