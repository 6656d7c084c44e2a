import pytest

from brickbreaker.world import (
    BALL_SIZE,
    BALL_SPEED,
    BRICK_SIZE,
    COL,
    ROW,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    START_LIVES,
    Outcome,
    Rect,
    World,
    brick_rect,
    load_map,
    parse_map,
)


def full_grid():
    return [[True] * COL for _ in range(ROW)]


def empty_grid():
    return [[False] * COL for _ in range(ROW)]


def grid_text(grid):
    return "\n".join(" ".join("1" if c else "0" for c in row) for row in grid)


def test_rect_overlap_and_touching():
    a = Rect(0, 0, 10, 10)
    assert a.intersects(Rect(5, 5, 10, 10))
    assert not a.intersects(Rect(10, 0, 10, 10))
    assert not a.intersects(Rect(0, 10, 10, 10))


def test_rect_empty_never_intersects():
    assert not Rect(0, 0, 0, 10).intersects(Rect(0, 0, 10, 10))


def test_rect_contains_edges_inclusive():
    r = Rect(10, 20, 5, 5)
    assert r.contains(10, 20)
    assert r.contains(15, 25)
    assert not r.contains(16, 25)
    assert not r.contains(9, 20)


def test_parse_map_round_trip():
    grid = [[(r + c) % 2 == 0 for c in range(COL)] for r in range(ROW)]
    assert parse_map(grid_text(grid)) == grid


def test_parse_map_ignores_extra_values():
    text = " ".join(["1"] * (ROW * COL)) + " 0 0"
    assert parse_map(text) == full_grid()


def test_parse_map_too_short():
    with pytest.raises(ValueError):
        parse_map("1 0 1")


@pytest.mark.parametrize("bad", ["2", "x", "-1"])
def test_parse_map_invalid_value(bad):
    text = " ".join([bad] + ["1"] * (ROW * COL - 1))
    with pytest.raises(ValueError):
        parse_map(text)


def test_load_map_from_file(tmp_path):
    grid = full_grid()
    grid[1][3] = False
    path = tmp_path / "map.txt"
    path.write_text(grid_text(grid))
    assert load_map(path) == grid


def test_load_map_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_map(tmp_path / "missing.txt")


def test_brick_layout_spacing_and_bounds():
    first = brick_rect(0, 0)
    assert brick_rect(0, 1).x - first.x == 2 * BRICK_SIZE
    assert brick_rect(1, 0).y - first.y == 2 * BRICK_SIZE
    assert first.size == (BRICK_SIZE, BRICK_SIZE)
    last = brick_rect(ROW - 1, COL - 1)
    assert last.right <= SCREEN_WIDTH
    assert first.x > 0


def test_bricks_do_not_overlap():
    rects = [brick_rect(r, c) for r in range(ROW) for c in range(COL)]
    for i, a in enumerate(rects):
        for b in rects[i + 1:]:
            assert not a.intersects(b)


def test_world_initial_state():
    world = World(full_grid())
    assert world.lives == START_LIVES
    assert world.remaining() == ROW * COL
    assert (world.vx, world.vy) == (BALL_SPEED, BALL_SPEED)
    assert world.paddle.bottom == SCREEN_HEIGHT
    assert world.ball.bottom == world.paddle.y
    assert world.ball.x == world.paddle.x + world.paddle.w // 2
    assert world.paddle.x + world.paddle.w // 2 == SCREEN_WIDTH // 2


def test_world_rejects_wrong_shape():
    with pytest.raises(ValueError):
        World([[True] * COL])


def test_first_step_bounces_off_paddle():
    world = World(full_grid())
    start = (world.ball.x, world.ball.y)
    result = world.step()
    assert (world.ball.x, world.ball.y) == (start[0] + BALL_SPEED, start[1] + BALL_SPEED)
    assert world.vy == -BALL_SPEED
    assert result.outcome is Outcome.PLAYING
    assert result.hits == 0


def test_top_wall_bounce():
    world = World(full_grid())
    world.ball.x = SCREEN_WIDTH // 2
    world.ball.y = 1
    world.vy = -BALL_SPEED
    world.step()
    assert world.vy == BALL_SPEED


def test_side_wall_bounce():
    world = World(full_grid())
    world.ball.x = 1
    world.ball.y = SCREEN_HEIGHT // 2
    world.vx = -BALL_SPEED
    world.step()
    assert world.vx == BALL_SPEED


def test_ball_falling_out_loses_life_and_game():
    world = World(full_grid())
    world.lives = 1
    world.ball.x = 10
    world.ball.y = SCREEN_HEIGHT - BALL_SIZE - 1
    result = world.step()
    assert result.life_lost
    assert world.lives == 0
    assert result.outcome is Outcome.LOST
    assert world.vy == -BALL_SPEED


def test_hitting_brick_from_below_flips_vertical_and_wins():
    grid = empty_grid()
    grid[0][0] = True
    world = World(grid)
    brick = brick_rect(0, 0)
    world.ball.x = brick.x - 2
    world.ball.y = brick.bottom
    world.vy = -BALL_SPEED
    result = world.step()
    assert result.hits == 1
    assert world.remaining() == 0
    assert world.vy == BALL_SPEED
    assert world.vx == BALL_SPEED
    assert result.outcome is Outcome.WON


def test_hitting_brick_from_side_flips_horizontal():
    grid = empty_grid()
    grid[0][5] = True
    grid[2][0] = True
    world = World(grid)
    brick = brick_rect(0, 5)
    world.ball.x = brick.x - BALL_SIZE
    world.ball.y = brick.y
    world.vx = BALL_SPEED
    world.vy = 0
    result = world.step()
    assert result.hits == 1
    assert world.vx == -BALL_SPEED
    assert world.remaining() == 1
    assert result.outcome is Outcome.PLAYING


def test_paddle_is_clamped_left_and_right():
    world = World(full_grid())
    for _ in range(200):
        world.move_paddle(-1)
    world.step()
    assert world.paddle.x == 0
    for _ in range(400):
        world.move_paddle(1)
    world.step()
    assert world.paddle.right == SCREEN_WIDTH


def test_reset_restores_state_but_keeps_velocity():
    world = World(full_grid())
    initial_paddle = Rect(world.paddle.x, world.paddle.y, world.paddle.w, world.paddle.h)
    initial_ball = Rect(world.ball.x, world.ball.y, world.ball.w, world.ball.h)
    world.lives = 1
    world.move_paddle(1)
    world.step()
    world.vx = -BALL_SPEED
    world.reset(full_grid())
    assert world.lives == START_LIVES
    assert world.paddle == initial_paddle
    assert world.ball == initial_ball
    assert world.vx == -BALL_SPEED
    assert world.remaining() == ROW * COL