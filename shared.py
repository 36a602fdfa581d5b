from types import MappingProxyType

# Playfield is in px, velocities in px/tick, accelerations in px/tick^2.
# y grows downwards, so a negative velocity moves the bird up.
CONSTANTS = MappingProxyType({
    'GAME_WIDTH': 800,
    'GAME_HEIGHT': 600,
    'GROUND_HEIGHT': 80,    # Only drawn, the bird dies at GAME_HEIGHT - BIRD_SIZE
    'BIRD_SIZE': 40,
    'BIRD_X': 100,          # Fixed bird x position in screen coordinates
    'PIPE_WIDTH': 80,
    'PIPE_GAP': 220,
    'PIPE_MARGIN': 50,      # Gap band never gets closer than this to the top or bottom
    'PIPE_SPEED': 3,
    'SPAWN_INTERVAL': 300,  # Rightmost pipe must travel this far before the next one spawns
    'GRAVITY': 0.8,
    'JUMP_FORCE': -8,
    'MAX_VELOCITY': 10,
    'FPS': 60,
    'HIGH_SCORE_KEY': 'flappyBirdHighScore',
})
