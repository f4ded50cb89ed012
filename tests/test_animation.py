from arscrew.animation import Animation, AnimationFrame


def make_animation(loop):
    anim = Animation(loop=loop)
    anim.add_frame(AnimationFrame("first", 0.5, (1, 2)))
    anim.add_frame(AnimationFrame("second", 0.5, (3, 4)))
    return anim


def test_stays_on_first_frame_before_duration():
    anim = make_animation(loop=True)
    anim.update(0.25)
    assert anim.current_sprite() == "first"
    assert anim.current_offset() == (1, 2)


def test_advances_to_next_frame():
    anim = make_animation(loop=True)
    anim.update(0.25)
    anim.update(0.3)
    assert anim.current_sprite() == "second"
    assert anim.current_offset() == (3, 4)
    assert anim.finished is False


def test_looping_wraps_to_first_frame():
    anim = make_animation(loop=True)
    anim.update(1.0)
    assert anim.current_sprite() == "first"
    assert anim.finished is False


def test_non_looping_finishes_on_last_frame():
    anim = make_animation(loop=False)
    anim.update(1.0)
    assert anim.finished is True
    assert anim.current_sprite() == "second"
    anim.update(5.0)
    assert anim.current_sprite() == "second"


def test_reset_restores_start():
    anim = make_animation(loop=False)
    anim.update(2.0)
    anim.reset()
    assert anim.finished is False
    assert anim.current_frame == 0
    assert anim.frame_timer == 0.0
    assert anim.current_sprite() == "first"


def test_empty_animation_defaults():
    anim = Animation()
    anim.update(1.0)
    assert anim.current_sprite() is None
    assert anim.current_offset() == (0, 0)
    assert anim.finished is False


def test_zero_duration_single_frame_non_looping_finishes():
    anim = Animation()
    anim.add_frame(AnimationFrame("only", 0.0))
    anim.update(0.0)
    assert anim.finished is True
    assert anim.current_sprite() == "only"