"""
Session state machine.

    start    --jump-->           playing   (impulse)
    playing  --jump-->           playing   (impulse)
    playing  --tick+collision--> gameOver  (high score finalized)
    gameOver --jump-->           playing   (reset, then impulse)
    start / gameOver --tick-->   unchanged

A tick runs, in this order:
    1. physics on the bird
    2. pipes scroll / cleanup / spawn / pass detection against the bird x
       from *before* step 1
    3. one score point per pass event
    4. collision against the bird and pipes from steps 1 and 2
    5. on collision: gameOver, then the tracker settles the high score
"""
from dataclasses import replace

import numpy as np

from collision import is_colliding
from obstacles import advance_pipes
from physics import PHYSICS
from utils import GameSession, GameState, Snapshot, start_bird


def new_session(high_score=0):
    return GameSession(state=GameState.START, score=0, high_score=high_score,
                       bird=start_bird(), pipes=())


def jump(session, physics=PHYSICS):
    if session.state is GameState.GAME_OVER:
        session = replace(new_session(session.high_score), state=GameState.PLAYING)
    elif session.state is GameState.START:
        session = replace(session, state=GameState.PLAYING)
    return replace(session, bird=physics.flap(session.bird))


def tick(session, rng, tracker, physics=PHYSICS):
    if session.state is not GameState.PLAYING:
        return session

    bird = physics.step_frame(session.bird)
    pipes, passed = advance_pipes(session.pipes, session.bird.x, rng)

    score = session.score
    for _ in range(passed):
        score = tracker.on_pipe_passed(score)

    session = replace(session, bird=bird, pipes=pipes, score=score)
    if is_colliding(bird, pipes):
        high_score = tracker.on_session_end(score, session.high_score)
        session = replace(session, state=GameState.GAME_OVER, high_score=high_score)
    return session


class Game:
    """Holds the live session plus the collaborators tick() needs."""

    def __init__(self, tracker, seed=None, on_state_change=None):
        self.tracker = tracker
        self.rng = np.random.default_rng(seed)
        self.on_state_change = on_state_change
        self.session = new_session(tracker.high_score)

    @property
    def state(self):
        return self.session.state

    def _set(self, session):
        prev = self.session.state
        self.session = session
        if session.state is not prev and self.on_state_change is not None:
            self.on_state_change(prev, session.state)

    def press_jump(self):
        self._set(jump(self.session))

    def step(self):
        self._set(tick(self.session, self.rng, self.tracker))

    def snapshot(self):
        return Snapshot.of(self.session)
