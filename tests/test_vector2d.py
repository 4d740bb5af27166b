from coinfall.vector2d import Vector2D


def test_default_is_origin():
    assert Vector2D() == Vector2D(0, 0)


def test_iadd_then_isub_round_trip():
    v = Vector2D(3, -7)
    delta = Vector2D(10, 4)
    v += delta
    v -= delta
    assert v == Vector2D(3, -7)


def test_iadd_updates_in_place():
    v = Vector2D(1, 2)
    alias = v
    v += Vector2D(5, 6)
    assert alias is v
    assert (v.x, v.y) == (1 + 5, 2 + 6)


def test_isub_of_self_copy_is_origin():
    v = Vector2D(9, -4)
    v -= Vector2D(9, -4)
    assert v == Vector2D()


def test_imul_by_one_keeps_value():
    v = Vector2D(4, 5)
    v *= 1
    assert v == Vector2D(4, 5)


def test_imul_by_zero_gives_origin():
    v = Vector2D(4, 5)
    v *= 0
    assert v == Vector2D()


def test_imul_matches_repeated_addition():
    v = Vector2D(2, -3)
    w = Vector2D(2, -3)
    v *= 3
    w += Vector2D(2, -3)
    w += Vector2D(2, -3)
    assert v == w