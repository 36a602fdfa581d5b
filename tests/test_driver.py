import pytest

from driver import GameDriver, JumpLatch, Ticker
from game import Game
from shared import CONSTANTS
from utils import GameState

FRAME = 1000 / 60


def test_latch_collapses_triggers():
    latch = JumpLatch()
    assert not latch.consume()
    latch.trigger()
    latch.trigger()
    latch.trigger()
    assert latch.consume()
    assert not latch.consume()


def test_ticker_idle_until_resumed():
    ticker = Ticker(fps=60)
    assert ticker.due(10_000) == 0
    ticker.resume(0)
    assert ticker.due(FRAME * 3 + 1) == 3
    assert ticker.due(FRAME * 3 + 2) == 0


def test_ticker_resume_is_idempotent():
    ticker = Ticker(fps=60)
    ticker.resume(0)
    ticker.resume(FRAME * 2)
    assert ticker.due(FRAME * 2 + 1) == 2


def test_ticker_suspend_drops_backlog():
    ticker = Ticker(fps=60)
    ticker.resume(0)
    ticker.suspend()
    ticker.suspend()
    assert ticker.due(5000) == 0
    ticker.resume(5000)
    assert ticker.due(5000 + FRAME + 1) == 1


def test_ticker_caps_catch_up():
    ticker = Ticker(fps=60, max_catch_up=4)
    ticker.resume(0)
    assert ticker.due(1000) == 4
    assert ticker.due(1000 + FRAME + 1) == 1


def test_pump_applies_jump_at_boundary(tracker):
    game = Game(tracker, seed=0)
    driver = GameDriver(game, Ticker(fps=60))
    snap = driver.pump(0)
    assert snap.state is GameState.START
    assert not driver.ticker.active

    driver.latch.trigger()
    driver.latch.trigger()
    snap = driver.pump(1000)
    assert snap.state is GameState.PLAYING
    assert snap.bird.velocity == CONSTANTS['JUMP_FORCE']
    assert driver.ticker.active

    snap = driver.pump(1000 + FRAME * 3 + 1)
    assert snap.bird.velocity == pytest.approx(CONSTANTS['JUMP_FORCE'] + 3 * CONSTANTS['GRAVITY'])


def test_pump_suspends_clock_on_game_over(tracker):
    game = Game(tracker, seed=0)
    driver = GameDriver(game, Ticker(fps=60, max_catch_up=1000))
    driver.latch.trigger()
    driver.pump(0)
    snap = driver.pump(FRAME * 500)
    assert snap.state is GameState.GAME_OVER
    assert not driver.ticker.active

    frozen = driver.pump(FRAME * 600)
    assert frozen == snap

    driver.latch.trigger()
    snap = driver.pump(FRAME * 700)
    assert snap.state is GameState.PLAYING
    assert snap.score == 0
    assert driver.ticker.active
