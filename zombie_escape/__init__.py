"""
zombie_escape — A turn-based grid escape game with chasing zombies.

This package exposes the core modules needed to run the game or embed
the engine in another front-end:

  constants      – layout glyphs, directional vectors, ANSI codes.
  entities       – Status, Zombie, MoveResult.
  state          – GridState, the authoritative per-attempt model.
  level_manager  – load_level() parser, LevelFormatError.
  config         – EngineConfig (zombie sub-steps per turn).
  engine         – Move legality, zombie chase rule, move_player().
  serializer     – GridState → display grid with fixed precedence.
  session        – GameSession, one owned state per game.
  renderer       – clear_screen(), render().
  levels         – Built-in level data dicts.
"""
