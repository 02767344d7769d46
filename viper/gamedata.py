"""Fonts and line shapes used by the space game."""

GAME_FONT = "ka1.ttf"
GAME_FONT2 = "ka2.ttf"

SHIP_POINTS = (
    (6, 0), (-2, -4), (-2, -6), (-4, -6), (-4, -2), (4, 0), (-4, 2), (-4, 6),
    (-2, 6), (-2, 3), (6, 0), (-3, 0), (-2, -4), (-3, 0), (-2, 3),
)

ENEMY_POINTS = (
    (7, 0), (3, -1), (5, -2), (-3, -3), (0, -2), (-6, -2), (-2, -1), (-7, 0),
    (-2, 1), (-6, 2), (0, 2), (-3, 3), (5, 2), (3, 1), (7, 0), (-1, 0),
    (1, -1), (1, 1), (-1, 0),
)

ROCKET_POINTS = (
    (6, 0), (5, -1), (3, -2), (-5, -4), (-1, -2), (-8, -2), (0, -1), (-10, 0),
    (0, 1), (-8, 2), (-1, 2), (-5, 4), (3, 2), (5, 1), (6, 0),
)