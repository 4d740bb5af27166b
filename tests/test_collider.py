import pytest

from coinfall.collider import SquareCollider
from coinfall.vector2d import Vector2D


def make(x, y, w=16, h=16):
    return SquareCollider(Vector2D(x, y), w, h)


def test_position_is_shared():
    pos = Vector2D(5, 6)
    collider = SquareCollider(pos, 16, 16)
    pos.x = 40
    pos.y = 50
    assert (collider.x, collider.y) == (40, 50)


def test_overlapping_boxes_collide():
    a = make(0, 0)
    b = make(8, 8)
    assert a.collides_with(b)
    assert b.collides_with(a)


def test_box_collides_with_itself():
    a = make(100, 200, 8, 16)
    assert a.collides_with(a)


@pytest.mark.parametrize("other", [(16, 0), (0, 16), (-16, 0), (0, -16)])
def test_touching_edges_do_not_collide(other):
    a = make(0, 0)
    b = make(*other)
    assert not a.collides_with(b)
    assert not b.collides_with(a)


def test_far_apart_boxes_do_not_collide():
    assert not make(0, 0).collides_with(make(200, 300))


def test_contained_box_collides():
    outer = make(0, 0, 100, 100)
    inner = make(40, 40, 8, 8)
    assert outer.collides_with(inner)
    assert inner.collides_with(outer)


def test_moving_position_changes_result():
    pos = Vector2D(100, 100)
    moving = SquareCollider(pos, 16, 16)
    fixed = make(0, 0)
    assert not moving.collides_with(fixed)
    pos.x, pos.y = 4, 4
    assert moving.collides_with(fixed)