"""Interactive placement of sway outputs: drag them on a canvas, commit the layout with swaymsg."""

__version__ = "0.1.0"
