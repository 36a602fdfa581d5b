from dataclasses import replace

import shared
from utils import Pipe


def generate_pipe(rng):
    """
    New pipe at the right edge of the playfield.

    top_height is a whole pixel, uniform over [MARGIN, HEIGHT - GAP - MARGIN), so
    the whole gap band stays inside [MARGIN, HEIGHT - MARGIN] and bottom_y is
    exactly top_height + GAP.
    """
    c = shared.CONSTANTS
    low = c['PIPE_MARGIN']
    high = c['GAME_HEIGHT'] - c['PIPE_GAP'] - c['PIPE_MARGIN']
    return Pipe(x=c['GAME_WIDTH'], top_height=float(rng.integers(low, high)))


def pipe_garbage_collection(pipes):
    # Keep only the pipes that are still (partly) in frame
    return [p for p in pipes if p.right > 0]


def needs_spawn(pipes):
    c = shared.CONSTANTS
    return len(pipes) == 0 or pipes[-1].x < c['GAME_WIDTH'] - c['SPAWN_INTERVAL']


def advance_pipes(pipes, bird_x, rng):
    """
    One obstacle step: scroll, drop off-screen pipes, spawn, flag passes.

    bird_x is the bird position before this tick's physics update.

    Returns:
        (tuple of pipes sorted by x, number of pipes passed this tick)
    """
    speed = shared.CONSTANTS['PIPE_SPEED']
    moved = [replace(p, x=p.x - speed) for p in pipes]
    moved = pipe_garbage_collection(moved)

    if needs_spawn(moved):
        moved.append(generate_pipe(rng))

    passed = 0
    for i, p in enumerate(moved):
        if not p.passed and p.right < bird_x:
            moved[i] = replace(p, passed=True)
            passed += 1

    return tuple(moved), passed
