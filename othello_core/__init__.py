"""
Othello core Python package.

This package holds the pure game logic behind the Flask API and the CLI,
kept free of any rendering so it can be driven from either surface.
Modules:
- board.py: Board, cell constants, Coord
- moves.py: flip resolution, legal moves, move application
- state.py: GameState, GameMode, GameResult, endgame scoring
- events.py: MoveApplied, TurnSkipped, GameOver
- engine.py: Game (turn / pass / endgame state machine)
- ai.py: computer move strategies
"""
