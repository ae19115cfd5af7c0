import pytest

from nightcrawl.collision import (
    Collider,
    CollisionEvent,
    StairCollider,
    StairDirection,
    filter_events,
    optimized_colliders_from_tile_map,
    process,
    scan,
    stair_colliders_from_tile_map,
    sweep,
    swept_aabb,
)


def test_collider_accessors_and_move():
    c = Collider(3.0, 4.0, 10.0, 20.0, vx=1.5, vy=-2.5)
    assert c.bounding_box() == (3.0, 4.0, 13.0, 24.0)
    assert c.speed() == (1.5, -2.5)
    assert c.position() == (3.0, 4.0)
    assert c.is_blocking is True
    c.set_position(7.0, 8.0)
    assert c.position() == (7.0, 8.0)
    assert c.bounding_box() == (7.0, 8.0, 17.0, 28.0)


def test_stair_collider_is_not_blocking():
    s = StairCollider(0.0, 0.0, 16.0, 16.0, StairDirection.RIGHT_UP, True)
    assert s.is_blocking is False
    assert s.speed() == (0.0, 0.0)
    assert s.direction is StairDirection.RIGHT_UP
    assert s.is_top is True
    assert s.temporarily_disabled is False


def test_event_was_collided_range():
    a = Collider(0, 0, 1, 1)
    assert CollisionEvent(0.0, 0, 0, 0, 0, a, a).was_collided()
    assert CollisionEvent(1.0, 0, 0, 0, 0, a, a).was_collided()
    assert not CollisionEvent(-1.0, 0, 0, 0, 0, a, a).was_collided()
    assert not CollisionEvent(1.5, 0, 0, 0, 0, a, a).was_collided()


def test_swept_aabb_horizontal_hit():
    t, nx, ny = swept_aabb(0, 0, 10, 10, 10, 0, 15, 0, 25, 10)
    assert t == pytest.approx(0.5)
    assert (nx, ny) == (-1.0, 0.0)


def test_swept_aabb_moving_left_normal_points_right():
    t, nx, ny = swept_aabb(30, 0, 40, 10, -10, 0, 15, 0, 25, 10)
    assert 0.0 <= t <= 1.0
    assert (nx, ny) == (1.0, 0.0)


def test_swept_aabb_vertical_hit():
    t, nx, ny = swept_aabb(0, 0, 10, 10, 0, 10, 0, 15, 100, 20)
    assert t == pytest.approx(0.5)
    assert (nx, ny) == (0.0, -1.0)


def test_swept_aabb_miss_returns_minus_one():
    assert swept_aabb(0, 0, 10, 10, 1, 0, 50, 50, 60, 60) == (-1.0, 0.0, 0.0)


def test_swept_aabb_too_far_returns_minus_one():
    t, _, _ = swept_aabb(0, 0, 10, 10, 2, 0, 15, 0, 25, 10)
    assert t == -1.0


def test_sweep_uses_relative_motion():
    src = Collider(0, 0, 10, 10, vx=100)
    dest = Collider(15, 0, 10, 10, vx=100)
    event = sweep(src, 0.1, dest)
    assert event.dx == pytest.approx(0.0)
    assert not event.was_collided()
    assert event.src is src and event.dest is dest


def test_scan_keeps_only_collisions():
    src = Collider(0, 0, 10, 10, vx=100)
    near = Collider(15, 0, 10, 10)
    far = Collider(500, 500, 10, 10)
    events = scan(src, 0.1, [near, far])
    assert [e.dest for e in events] == [near]
    assert all(e.was_collided() for e in events)


def test_filter_events_picks_earliest_and_skips():
    src = Collider(0, 0, 1, 1)
    blocking_late = Collider(0, 0, 1, 1)
    blocking_early = Collider(0, 0, 1, 1)
    passable = Collider(0, 0, 1, 1, is_blocking=False)
    late = CollisionEvent(0.6, -1, 0, 0, 0, src, blocking_late)
    early = CollisionEvent(0.3, -1, 0, 0, 0, src, blocking_early)
    through = CollisionEvent(0.1, -1, 0, 0, 0, src, passable)
    deleted = CollisionEvent(0.05, -1, 0, 0, 0, src, blocking_late, is_deleted=True)
    col_x, col_y = filter_events([late, early, through, deleted])
    assert col_x is early
    assert col_y is None
    col_x, _ = filter_events([late, early, through], filter_block=False)
    assert col_x is through
    assert filter_events([early], filter_x=False) == (None, None)


def test_process_without_obstacles_moves_full_step():
    src = Collider(0, 0, 10, 10, vx=100, vy=50)
    process(src, 0.1, [Collider(500, 500, 10, 10)])
    assert src.position() == pytest.approx((100 * 0.1, 50 * 0.1))


def test_process_stops_before_wall():
    src = Collider(0, 0, 10, 10, vx=100)
    wall = Collider(15, 0, 10, 10)
    process(src, 0.1, [wall])
    x, y = src.position()
    assert x == pytest.approx(5.0 - 0.01)
    assert y == pytest.approx(0.0)
    assert x + src.width < wall.x


def test_process_lands_on_ground():
    src = Collider(0, 0, 10, 10, vy=100)
    ground = Collider(0, 15, 100, 5)
    process(src, 0.1, [ground])
    _, y = src.position()
    assert y == pytest.approx(5.0 - 0.01)
    assert y + src.height < ground.y


def test_process_passes_through_non_blocking():
    src = Collider(0, 0, 10, 10, vx=100)
    process(src, 0.1, [Collider(15, 0, 10, 10, is_blocking=False)])
    assert src.position() == pytest.approx((10.0, 0.0))


def test_process_non_blocking_source_ignores_walls():
    src = Collider(0, 0, 10, 10, vx=100, is_blocking=False)
    process(src, 0.1, [Collider(15, 0, 10, 10)])
    assert src.position() == pytest.approx((10.0, 0.0))


def test_optimized_colliders_merge_rectangles():
    tile_map = [
        [0, 0, -1],
        [0, 0, -1],
        [-1, -1, 0],
    ]
    snapshot = [row[:] for row in tile_map]
    colliders = optimized_colliders_from_tile_map(tile_map, 16, 0)
    assert [c.bounding_box() for c in colliders] == [
        (0.0, 0.0, 32.0, 32.0),
        (32.0, 32.0, 48.0, 48.0),
    ]
    assert all(c.is_blocking and c.speed() == (0.0, 0.0) for c in colliders)
    assert tile_map == snapshot


def test_optimized_colliders_cover_every_solid_tile():
    tile_map = [
        [5, 5, 1, 5],
        [5, 1, 5, 5],
        [5, 5, 5, 1],
    ]
    colliders = optimized_colliders_from_tile_map(tile_map, 10, solid_tile_value=5)
    solid = sum(row.count(5) for row in tile_map)
    area = sum(c.width * c.height for c in colliders)
    assert area == solid * 10 * 10
    for c in colliders:
        for r in range(int(c.y) // 10, int(c.y + c.height) // 10):
            for col in range(int(c.x) // 10, int(c.x + c.width) // 10):
                assert tile_map[r][col] == 5


def test_optimized_colliders_default_solid_value_and_empty():
    assert optimized_colliders_from_tile_map([], 16) == []
    colliders = optimized_colliders_from_tile_map([[0]], 8)
    assert [c.bounding_box() for c in colliders] == [(0.0, 0.0, 8.0, 8.0)]


def test_stair_colliders_from_tile_map():
    tile_map = [
        [-1, 1],
        [2, 0],
    ]
    stairs = stair_colliders_from_tile_map(tile_map, 16)
    assert len(stairs) == 2
    first, second = stairs
    assert first.position() == (16.0, 0.0)
    assert first.direction is StairDirection.LEFT_UP
    assert first.is_top is False
    assert second.position() == (0.0, 16.0)
    assert second.direction is StairDirection.RIGHT_UP
    assert second.is_top is True
    assert all(not s.is_blocking and s.width == 16 and s.height == 16 for s in stairs)
    assert all(isinstance(s, StairCollider) for s in stairs)