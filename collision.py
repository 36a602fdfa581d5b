import shared


def out_of_bounds(bird):
    # Bounding box top against ceiling and ground
    return bird.y <= 0 or bird.y >= shared.CONSTANTS['GAME_HEIGHT'] - shared.CONSTANTS['BIRD_SIZE']


def hits_pipe(bird, pipe):
    size = shared.CONSTANTS['BIRD_SIZE']
    overlaps_x = bird.x < pipe.right and bird.x + size > pipe.x
    outside_gap = bird.y < pipe.top_height or bird.y + size > pipe.bottom_y
    return overlaps_x and outside_gap


def is_colliding(bird, pipes):
    if out_of_bounds(bird):
        return True
    return any(hits_pipe(bird, p) for p in pipes)
