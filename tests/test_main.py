import pytest

from catcher.config import BG, PADDLE_COLOR, MAX_MISTAKES
from catcher.errors import AssetLoadError
from catcher.game import GamePhase, new_session
from catcher.inputs import Key, KeyDown, PointerClick, PointerMove, QuitEvent
from catcher.main import main, run_loop
from catcher.platform import Assets, load_assets

ASSETS = Assets(play_button="img:play", game_over="img:over", music="mus:bg")


def test_load_assets_loads_all_three(fake_platform, tmp_path):
    platform = fake_platform()
    assets = load_assets(platform, tmp_path)
    assert assets == Assets("img:play_button.png", "img:game_over.png", "mus:background_music.mp3")


def test_loop_stops_on_window_close(fake_platform):
    platform = fake_platform(frames=[[], [], [QuitEvent()]])
    frames = run_loop(platform, ASSETS, new_session(1))
    assert frames == 2
    assert len(platform.named("present")) == 2
    assert len(platform.named("wait")) == 2


def test_loop_stops_on_escape(fake_platform):
    platform = fake_platform(frames=[[KeyDown(Key.ESCAPE)]])
    assert run_loop(platform, ASSETS, new_session(1)) == 0
    assert platform.calls == []


def test_loop_respects_max_frames(fake_platform):
    assert run_loop(fake_platform(), ASSETS, new_session(1), max_frames=5) == 5


def test_menu_frame_clears_then_draws_button(fake_platform):
    platform = fake_platform()
    run_loop(platform, ASSETS, new_session(1), max_frames=1)
    assert platform.calls[0] == ("clear", BG)
    assert platform.calls[1][:2] == ("image", "img:play")
    assert platform.calls[-2:] == [("present",), ("wait",)]


def test_click_starts_music_and_pointer_moves_paddle(fake_platform):
    platform = fake_platform(frames=[[PointerClick(400, 300), PointerMove(200, 500)]])
    session = new_session(1)
    run_loop(platform, ASSETS, session, max_frames=1)

    assert session.phase is GamePhase.PLAYING
    assert platform.named("play_music") == [("play_music", "mus:bg")]
    fills = platform.named("fill")
    assert fills[0][1].x == 150
    assert fills[0][2] == PADDLE_COLOR


def test_pointer_motion_before_play_click_is_ignored(fake_platform):
    platform = fake_platform(frames=[[PointerMove(200, 500), PointerClick(400, 300)]])
    session = new_session(1)
    run_loop(platform, ASSETS, session, max_frames=1)

    assert session.phase is GamePhase.PLAYING
    assert session.paddle.rect.x == 350


def test_game_over_stops_music_and_shows_image(fake_platform, capsys):
    session = new_session(1)
    session.phase = GamePhase.PLAYING
    session.mistakes = MAX_MISTAKES - 1
    session.paddle.rect.x = 0
    session.block.rect.x = 700
    session.block.rect.y = 601

    platform = fake_platform()
    run_loop(platform, ASSETS, session, max_frames=1)

    assert session.phase is GamePhase.GAME_OVER
    assert platform.named("stop_music") == [("stop_music",)]
    assert platform.named("image") == [("image", "img:over", None)]
    out = capsys.readouterr().out
    assert f"Missed! Mistakes: {MAX_MISTAKES}" in out
    assert "GAME OVER!" in out


def test_catch_is_reported(fake_platform, capsys):
    session = new_session(1)
    session.phase = GamePhase.PLAYING
    session.paddle.rect.x = 350
    session.block.rect.x = 370
    session.block.rect.y = 565
    run_loop(fake_platform(), ASSETS, session, max_frames=1)
    assert "Caught it!" in capsys.readouterr().out


def test_main_reports_fatal_errors(monkeypatch, capsys):
    def boom(cfg, max_frames=None):
        raise AssetLoadError("play_button.png", "file not found")

    monkeypatch.setattr("catcher.main.play", boom)
    with pytest.raises(SystemExit) as exc:
        main(["--seed", "3"])
    assert exc.value.code == 1
    assert "[FATAL] Unable to load play_button.png: file not found" in capsys.readouterr().err


def test_main_passes_cli_options(monkeypatch, tmp_path):
    seen = {}

    def fake_play(cfg, max_frames=None):
        seen["cfg"] = cfg
        seen["frames"] = max_frames
        return 0

    monkeypatch.setattr("catcher.main.play", fake_play)
    main(["--seed", "7", "--fps", "30", "--assets", str(tmp_path), "--frames", "12"])
    assert seen["cfg"].seed == 7
    assert seen["cfg"].fps == 30
    assert seen["cfg"].asset_dir == tmp_path
    assert seen["frames"] == 12
