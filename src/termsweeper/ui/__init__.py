"""
Terminal front end for the Minesweeper game.
"""
