from arscrew.camera import Camera
from arscrew.vector import Vector


def test_initial_rect():
    cam = Camera(800, 600)
    assert cam.rect() == (0, 0, 800, 600)
    assert cam.size == Vector(800, 600)


def test_move_accumulates():
    cam = Camera(800, 600)
    cam.move(Vector(10, 20))
    cam.move(Vector(5, 5))
    assert cam.position == Vector(15, 25)


def test_move_clamps_negative():
    cam = Camera(800, 600)
    cam.move(Vector(-5, 10))
    assert cam.position.x == 0
    assert cam.position.y == 10


def test_set_position_clamps_and_copies():
    cam = Camera(800, 600)
    target = Vector(-3, -4)
    cam.set_position(target)
    assert cam.position.x == 0 and cam.position.y == 0
    assert target == Vector(-3, -4)


def test_rect_truncates():
    cam = Camera(320.9, 240.2)
    cam.set_position(Vector(12.7, 3.9))
    assert cam.rect() == (12, 3, 320, 240)


def test_position_is_a_copy():
    cam = Camera(100, 100)
    pos = cam.position
    pos.x = 50
    assert cam.rect()[0] == 0