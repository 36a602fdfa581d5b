import cv2
import numpy as np

import shared
from utils import GameState

WINDOW = "Flappy Bird"

# BGR
SKY = (235, 190, 110)
GROUND = (60, 180, 70)
PIPE_BODY = (40, 160, 40)
PIPE_EDGE = (20, 110, 20)
BIRD = (40, 210, 250)
BIRD_EDGE = (10, 130, 200)
WHITE = (255, 255, 255)
RED = (90, 90, 255)


def _text(frame, msg, y, scale=1.0, color=WHITE, thickness=2):
    # Horizontally centred
    (w, _), _ = cv2.getTextSize(msg, cv2.FONT_HERSHEY_SIMPLEX, scale, thickness)
    x = (frame.shape[1] - w) // 2
    cv2.putText(frame, msg, (x, y), cv2.FONT_HERSHEY_SIMPLEX, scale, color, thickness, cv2.LINE_AA)


def _dim(frame, alpha=0.5):
    overlay = np.zeros_like(frame)
    return cv2.addWeighted(frame, 1 - alpha, overlay, alpha, 0)


def draw_pipes(frame, pipes):
    c = shared.CONSTANTS
    ground_top = c['GAME_HEIGHT'] - c['GROUND_HEIGHT']
    for p in pipes:
        x1, x2 = int(p.x), int(p.right)
        top, bottom = int(p.top_height), int(p.bottom_y)
        cv2.rectangle(frame, (x1, 0), (x2, top), PIPE_BODY, -1)
        cv2.rectangle(frame, (x1, 0), (x2, top), PIPE_EDGE, 2)
        if bottom < ground_top:
            cv2.rectangle(frame, (x1, bottom), (x2, ground_top), PIPE_BODY, -1)
            cv2.rectangle(frame, (x1, bottom), (x2, ground_top), PIPE_EDGE, 2)
    return frame


def draw_bird(frame, bird):
    half = shared.CONSTANTS['BIRD_SIZE'] // 2
    center = (int(bird.x) + half, int(bird.y) + half)
    angle = bird.tilt()
    cv2.ellipse(frame, center, (half, half), angle, 0, 360, BIRD, -1, cv2.LINE_AA)
    cv2.ellipse(frame, center, (half, half), angle, 0, 360, BIRD_EDGE, 2, cv2.LINE_AA)
    # Eye
    eye = (center[0] + half // 2, center[1] - half // 3)
    cv2.circle(frame, eye, 4, WHITE, -1)
    cv2.circle(frame, eye, 2, (0, 0, 0), -1)
    return frame


def draw_frame(snapshot):
    """Render a Snapshot into a fresh BGR image."""
    c = shared.CONSTANTS
    w, h = c['GAME_WIDTH'], c['GAME_HEIGHT']
    frame = np.empty((h, w, 3), dtype=np.uint8)
    frame[:] = SKY

    draw_pipes(frame, snapshot.pipes)
    cv2.rectangle(frame, (0, h - c['GROUND_HEIGHT']), (w, h), GROUND, -1)
    draw_bird(frame, snapshot.bird)

    cv2.putText(frame, f"Score: {snapshot.score}", (20, 40), cv2.FONT_HERSHEY_SIMPLEX,
                1.0, WHITE, 2, cv2.LINE_AA)
    cv2.putText(frame, f"Best: {snapshot.high_score}", (w - 180, 40), cv2.FONT_HERSHEY_SIMPLEX,
                1.0, WHITE, 2, cv2.LINE_AA)

    if snapshot.state is GameState.START:
        frame = _dim(frame)
        _text(frame, "Ready to Fly?", h // 2 - 30, 1.4)
        _text(frame, "Click or press SPACE to jump!", h // 2 + 20, 0.8)
    elif snapshot.state is GameState.GAME_OVER:
        frame = _dim(frame)
        _text(frame, "Game Over!", h // 2 - 40, 1.4, RED)
        _text(frame, f"Score: {snapshot.score}", h // 2 + 10, 1.0)
        if snapshot.is_new_high_score:
            _text(frame, "New High Score!", h // 2 + 50, 0.9, BIRD)
        _text(frame, "Click or press SPACE to play again", h // 2 + 100, 0.7)
    return frame


def show(frame, fps, counter):
    cv2.setWindowTitle(WINDOW, f"Flappy Bird | FPS: {fps:.1f} | Frame: {counter}")
    cv2.imshow(WINDOW, frame)
