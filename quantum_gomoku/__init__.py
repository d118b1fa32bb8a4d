"""
Quantum Gomoku core Python package.

This package contains the pure-logic engine and the turn controller used by
game.py, app.py and the CLI. Nothing here performs I/O.
Modules:
- board.py: Board, Cell, Pending, coordinate helpers
- placement.py: place_stone
- lines.py: five-in-a-row detection and winner resolution
- collapse.py: collapse_board, CollapseResult
- session.py: Session, Rules and the turn/observation transitions
- config.py: Rules from environment variables
- cli.py: terminal driver
"""
