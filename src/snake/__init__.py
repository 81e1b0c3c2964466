"""Grid Snake game: simulation in snake.game, drawing in snake.render."""
