from dataclasses import replace

import shared


class BirdPhysics:
    def __init__(self, gravity=None, flap_velocity=None, max_velocity=None):
        self.gravity = shared.CONSTANTS['GRAVITY'] if gravity is None else gravity                 # px/frame^2
        self.flap_velocity = shared.CONSTANTS['JUMP_FORCE'] if flap_velocity is None else flap_velocity  # px/frame
        self.max_velocity = shared.CONSTANTS['MAX_VELOCITY'] if max_velocity is None else max_velocity  # px/frame

    def flap(self, bird):
        # Impulse replaces the current velocity, it never adds to it
        return replace(bird, velocity=self.flap_velocity)

    def step_frame(self, bird):
        # One physics step per frame. Only the falling side is clamped.
        v = bird.velocity + self.gravity
        if v > self.max_velocity:
            v = self.max_velocity
        return replace(bird, y=bird.y + v, velocity=v)


PHYSICS = BirdPhysics()
