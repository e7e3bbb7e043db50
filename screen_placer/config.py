# Display: one surface pixel covers SCALE layout pixels
SCALE = 10
FPS = 30

WINDOW_WIDTH = 800
WINDOW_HEIGHT = 600

# Inactive outputs are drawn as squares along the top-left edge of the surface
CELL_SIZE = 50

SWAYMSG = "swaymsg"
TOGGLE_MODIFIER = "ctrl"

BACKGROUND_COLOR = (50, 50, 50)
OUTPUT_COLORS = [(255, 0, 0), (0, 255, 0), (0, 0, 255), (255, 200, 0), (0, 200, 200), (200, 0, 200)]
SELECTED_COLOR = (200, 200, 200)
MOVED_COLOR = (100, 100, 100)
INACTIVE_COLOR = (90, 90, 120)
LABEL_COLOR = (0, 0, 0)

INSTRUCTIONS = [
    "ESC to stop",
    "Mouse to drag",
    "Ctrl+click an output to disable it",
    "Ctrl+click a top-left square to enable it",
]
