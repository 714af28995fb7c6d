import pytest

from brickbreak.game import (
    INITIAL_BALL_VELOCITY,
    INITIAL_LIVES,
    PLAYER_SIZE,
    PLAYER_VELOCITY,
    Action,
    Breakout,
    GameState,
)
from brickbreak.vecmath import Vec2

WIDTH = 720
HEIGHT = 480


class RecordingRenderer:
    def __init__(self):
        self.calls = []

    def draw_sprite(self, sprite, position, size, rotation, color):
        self.calls.append((sprite, position, size, rotation, color))


def make_game(tmp_path, text="2\n"):
    path = tmp_path / "one.lvl"
    path.write_text(text)
    game = Breakout(WIDTH, HEIGHT)
    game.load_levels([path])
    return game, path


def test_player_starts_centered_at_bottom():
    game = Breakout(WIDTH, HEIGHT)
    player = game.player
    assert player.position.x + player.size.x / 2 == WIDTH / 2
    assert player.position.y + player.size.y == HEIGHT
    assert player.size == PLAYER_SIZE


def test_ball_starts_on_top_of_paddle():
    game = Breakout(WIDTH, HEIGHT)
    ball, player = game.ball, game.player
    assert ball.position.x + ball.radius == player.position.x + player.size.x / 2
    assert ball.position.y + 2 * ball.radius == player.position.y
    assert ball.velocity == INITIAL_BALL_VELOCITY


def test_reset_player_sticks_ball():
    game = Breakout(WIDTH, HEIGHT)
    game.player.position = Vec2(5.0, 5.0)
    game.ball.velocity = Vec2(1.0, 1.0)
    game.reset_player()
    assert game.ball.stuck is True
    assert game.ball.velocity == INITIAL_BALL_VELOCITY
    assert game.player.position.y + game.player.size.y == HEIGHT


def test_right_moves_paddle_and_stuck_ball():
    game = Breakout(WIDTH, HEIGHT)
    game.reset_player()
    px, bx = game.player.position.x, game.ball.position.x
    game.update(0.1, {Action.RIGHT})
    assert game.player.position.x - px == pytest.approx(PLAYER_VELOCITY * 0.1)
    assert game.ball.position.x - bx == pytest.approx(PLAYER_VELOCITY * 0.1)


def test_left_moves_paddle_only_when_ball_free():
    game = Breakout(WIDTH, HEIGHT)
    game.reset_player()
    game.ball.stuck = False
    game.ball.velocity = Vec2(0.0, 0.0)
    px, bx = game.player.position.x, game.ball.position.x
    game.update(0.1, {Action.LEFT})
    assert px - game.player.position.x == pytest.approx(PLAYER_VELOCITY * 0.1)
    assert game.ball.position.x == bx


def test_launch_frees_ball():
    game = Breakout(WIDTH, HEIGHT)
    game.reset_player()
    game.update(0.0, [Action.LAUNCH])
    assert game.ball.stuck is False


def test_inputs_ignored_outside_active_state():
    game = Breakout(WIDTH, HEIGHT)
    game.reset_player()
    game.state = GameState.MENU
    px = game.player.position.x
    game.update(0.1, {Action.RIGHT, Action.LAUNCH})
    assert game.player.position.x == px
    assert game.ball.stuck is True


def test_ball_below_bottom_costs_a_life(tmp_path):
    game, _ = make_game(tmp_path)
    game.ball.position = Vec2(100.0, HEIGHT + 100.0)
    game.update(0.0, set())
    assert game.lives == INITIAL_LIVES - 1
    assert game.ball.stuck is True


def test_last_life_resets_level(tmp_path):
    game, _ = make_game(tmp_path)
    game.current_level.bricks[0].destroyed = True
    game.lives = 1
    game.ball.position = Vec2(100.0, HEIGHT + 100.0)
    game.update(0.0, set())
    assert game.lives == INITIAL_LIVES
    assert game.current_level.bricks[0].destroyed is False


def test_reset_level_without_levels_restores_lives():
    game = Breakout(WIDTH, HEIGHT)
    game.lives = 0
    game.reset_level()
    assert game.lives == INITIAL_LIVES
    assert game.current_level is None


def test_ball_hitting_brick_from_below(tmp_path):
    game, _ = make_game(tmp_path, "2\n")
    brick = game.current_level.bricks[0]
    game.ball.position = Vec2(347.5, 237.5)
    game.ball.velocity = INITIAL_BALL_VELOCITY
    game.do_collisions()
    assert brick.destroyed is True
    assert game.ball.velocity.y == -INITIAL_BALL_VELOCITY.y
    assert game.ball.velocity.x == INITIAL_BALL_VELOCITY.x
    assert game.ball.position.y == pytest.approx(brick.position.y + brick.size.y)


def test_solid_brick_survives_but_bounces(tmp_path):
    game, _ = make_game(tmp_path, "1\n")
    brick = game.current_level.bricks[0]
    game.ball.position = Vec2(347.5, 237.5)
    game.ball.velocity = INITIAL_BALL_VELOCITY
    game.do_collisions()
    assert brick.destroyed is False
    assert game.ball.velocity.y == -INITIAL_BALL_VELOCITY.y


def test_paddle_bounce_keeps_speed_and_goes_up():
    game = Breakout(WIDTH, HEIGHT)
    center = game.player.position.x + game.player.size.x / 2
    game.ball.position = Vec2(center - game.ball.radius, game.player.position.y - 17.5)
    old = Vec2(100.0, 350.0)
    game.ball.velocity = old
    game.do_collisions()
    assert game.ball.velocity.x == pytest.approx(0.0)
    assert game.ball.velocity.y < 0
    assert game.ball.velocity.length() == pytest.approx(old.length())


def test_stuck_ball_ignores_paddle():
    game = Breakout(WIDTH, HEIGHT)
    game.reset_player()
    game.ball.position = game.ball.position + Vec2(0.0, 10.0)
    game.do_collisions()
    assert game.ball.velocity == INITIAL_BALL_VELOCITY


def test_draw_active_skips_destroyed_bricks(tmp_path):
    game, _ = make_game(tmp_path, "2 3\n")
    game.current_level.bricks[0].destroyed = True
    renderer = RecordingRenderer()
    game.draw(renderer)
    assert len(renderer.calls) == 4
    assert renderer.calls[0][2] == Vec2(WIDTH, HEIGHT)
    assert renderer.calls[-1][1] == game.ball.position


def test_draw_outside_active_draws_nothing(tmp_path):
    game, _ = make_game(tmp_path)
    game.state = GameState.WIN
    renderer = RecordingRenderer()
    game.draw(renderer)
    assert renderer.calls == []