"""Pac-Man game rules: board, pickups, effects, ghosts, player, HUD state and scene."""