from npuzzle.engine.generator.generator import SCRAMBLE_STEPS, BoardGenerator, Difficulty

__all__ = ["SCRAMBLE_STEPS", "BoardGenerator", "Difficulty"]
