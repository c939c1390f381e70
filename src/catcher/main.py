# main.py
import argparse
import sys
from pathlib import Path
from typing import Iterable, List, Optional

from .config import BG, CFG, Config
from .errors import CatcherError
from .game import Effect, GameSession, new_session, tick
from .inputs import collect_snapshot
from .platform import Assets, Platform, load_assets, open_platform
from .render import DrawCommand, DrawImage, FillRect, ImageId, build_draw_commands


def apply_effects(platform: Platform, assets: Assets, session: GameSession, effects: Iterable[Effect]) -> None:
    for effect in effects:
        if effect is Effect.PLAY_MUSIC:
            platform.play_music_looping(assets.music)
        elif effect is Effect.STOP_MUSIC:
            platform.stop_music()
        elif effect is Effect.CAUGHT:
            print("Caught it!")
        elif effect is Effect.MISSED:
            print(f"Missed! Mistakes: {session.mistakes}")
        elif effect is Effect.GAME_OVER:
            print("GAME OVER!")


def draw_frame(platform: Platform, assets: Assets, commands: List[DrawCommand]) -> None:
    images = {
        ImageId.PLAY_BUTTON: assets.play_button,
        ImageId.GAME_OVER: assets.game_over,
    }
    platform.clear(BG)
    for cmd in commands:
        if isinstance(cmd, FillRect):
            platform.draw_filled_rectangle(cmd.rect, cmd.color)
        elif isinstance(cmd, DrawImage):
            platform.draw_image(images[cmd.image], cmd.dest)
    platform.present_frame()


def run_loop(platform: Platform, assets: Assets, session: GameSession,
             max_frames: Optional[int] = None) -> int:
    """Run frames until quit (or max_frames). Returns the number of frames ticked."""
    frames = 0
    while max_frames is None or frames < max_frames:
        # 1) input
        snapshot = collect_snapshot(platform.poll_input(), platform.pressed_keys())
        if snapshot.quit:
            # the quitting frame is neither updated nor drawn
            break

        # 2) update
        effects = tick(session, snapshot)
        apply_effects(platform, assets, session, effects)

        # 3) render
        draw_frame(platform, assets, build_draw_commands(session))
        platform.wait_frame()
        frames += 1
    return frames


def play(cfg: Config, max_frames: Optional[int] = None) -> int:
    with open_platform(cfg) as platform:
        assets = load_assets(platform, cfg.asset_dir)
        session = new_session(cfg.seed)
        print(f"[GAME] Seed: {session.seed}")
        frames = run_loop(platform, assets, session, max_frames)
        print(f"[GAME] Exiting after {frames} frame(s), mistakes={session.mistakes}")
        return frames


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Catch the falling blocks with the paddle.")
    parser.add_argument("--seed", type=int, default=CFG.seed,
                        help="seed for block positions (default: wall clock)")
    parser.add_argument("--fps", type=int, default=CFG.fps)
    parser.add_argument("--assets", type=Path, default=None,
                        help="directory holding play_button.png, game_over.png, background_music.mp3 "
                             "(default: current directory)")
    parser.add_argument("--frames", type=int, default=None,
                        help="stop after this many frames")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    cfg = Config(seed=args.seed, fps=args.fps)
    if args.assets is not None:
        cfg.asset_dir = args.assets

    try:
        play(cfg, args.frames)
    except CatcherError as exc:
        print(f"[FATAL] {exc}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
