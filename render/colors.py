"""
ecosystem_sim module: render/colors.py

Central color palette.
"""

BG = (14, 14, 18)
HUD = (235, 235, 235)

FOOD = (0, 128, 0)
FOV = (0, 0, 255)
FOV_ALPHA = 0.3
