import pytest

from audio_rename import cli


def test_main_defaults_to_current_directory(tmp_path, make_wav, monkeypatch, capsys):
    make_wav(tmp_path / "a.wav", title="Song", track="3")
    monkeypatch.chdir(tmp_path)

    cli.main([])

    out = capsys.readouterr().out
    assert "Supported formats: aac, aiff, ape, flac, m4a, mp3, mp4, ogg, opus, wav, wma" in out
    assert "[done] renamed: 1" in out
    assert "[done] skipped: 0" in out
    assert "[done] failed: 0" in out
    assert (tmp_path / "03 - Song.wav").exists()


def test_main_rejects_missing_root(tmp_path):
    with pytest.raises(SystemExit):
        cli.main([str(tmp_path / "nope")])


def test_main_writes_warnings_log_only_when_requested(tmp_path, capsys):
    music = tmp_path / "music"
    music.mkdir()
    (music / "broken.mp3").write_bytes(b"\x00" * 4096)
    log = tmp_path / "logs" / "rename_warnings.log"

    cli.main([str(music)])
    assert not log.exists()

    cli.main([str(music), "--warnings-log", str(log)])

    assert "broken.mp3" in log.read_text(encoding="utf-8")
    assert "[done] failed: 1" in capsys.readouterr().out


def test_main_pause_waits_for_enter(tmp_path, monkeypatch):
    prompts = []
    monkeypatch.setattr("builtins.input", lambda prompt="": prompts.append(prompt) or "")

    cli.main([str(tmp_path), "--pause"])

    assert len(prompts) == 1
