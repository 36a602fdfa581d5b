import argparse
import time

import cv2

import action
import display
import shared
from driver import GameDriver, JumpLatch, Ticker
from game import Game
from score import JsonFileStore, ScoreTracker
from utils import GameState


def _parse_args():
    parser = argparse.ArgumentParser(description="Play flappy bird.")
    parser.add_argument("--seed", type=int, default=None, help="Seed for pipe gap placement.")
    parser.add_argument("--scores-file", default="~/.flappy_bird_scores.json",
                        help="Where the high score is kept.")
    parser.add_argument("--fps", type=int, default=shared.CONSTANTS['FPS'], help="Simulation ticks per second.")
    return parser.parse_args()


def report(prev, state, game):
    if state is GameState.PLAYING and prev is not GameState.PLAYING:
        print(f"Playing (best: {game.session.high_score})")
    elif state is GameState.GAME_OVER:
        snapshot = game.snapshot()
        print(f"Game over! Score: {snapshot.score}")
        if snapshot.is_new_high_score:
            print(f"New high score: {snapshot.score}")


def main():
    args = _parse_args()

    tracker = ScoreTracker(JsonFileStore(args.scores_file))
    game = Game(tracker, seed=args.seed)
    latch = JumpLatch()
    driver = GameDriver(game, Ticker(args.fps), latch)

    # Log transitions on top of the driver's clock handling
    resync = game.on_state_change

    def on_state_change(prev, state):
        resync(prev, state)
        report(prev, state, game)
    game.on_state_change = on_state_change

    cv2.namedWindow(display.WINDOW)
    action.bind_window(display.WINDOW, latch)
    hotkeys = action.register_hotkeys(latch)
    print(f"High score: {tracker.high_score}")

    counter = 0
    last_frame = time.time()
    fps = 0.0
    try:
        while True:
            snapshot = driver.pump()
            frame = display.draw_frame(snapshot)

            now = time.time()
            if now > last_frame:
                fps = 0.9 * fps + 0.1 / (now - last_frame)
            last_frame = now
            counter += 1
            display.show(frame, fps, counter)

            if not action.handle_key(cv2.waitKeyEx(1), latch, jump_keys=not hotkeys):
                break
            if cv2.getWindowProperty(display.WINDOW, cv2.WND_PROP_VISIBLE) < 1:
                break
    except KeyboardInterrupt:
        print("\nInterrupted")
    finally:
        if hotkeys:
            action.unregister_hotkeys()
        cv2.destroyAllWindows()
        tracker.wait(timeout=1.0)


if __name__ == "__main__":
    main()
