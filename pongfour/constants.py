"""Screen size, colours and gameplay tuning values."""

SCREEN_WIDTH = 1280
SCREEN_HEIGHT = 800

WIN_SCORE = 21

BALL_RADIUS = 20
BALL_SPEED = 7

PADDLE_WIDTH = 25.0
PADDLE_HEIGHT = 120.0
PADDLE_SPEED = 7

# RGBA colours.
MY_DARK_BLUE = (20, 160, 200, 255)
WHITE = (255, 255, 255, 255)
GRAY = (130, 130, 130, 255)
LIGHTGRAY = (200, 200, 200, 255)
DARKBLUE = (0, 82, 172, 255)
YELLOW = (253, 249, 0, 255)
CENTER_LINE = (255, 255, 255, 100)
PAUSE_OVERLAY = (0, 0, 0, 180)