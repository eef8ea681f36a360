import pytest

from phosynth.phone import Phone, PitchPoint


def test_new_phone_has_name_length_and_no_points():
    phone = Phone("a", 120.0)
    assert phone.name == "a"
    assert phone.length == 120.0
    assert phone.pitch_points == []


def test_append_f0_converts_percentage_to_position():
    phone = Phone("o~", 127.0)
    start = phone.append_f0(0.0, 110.0)
    end = phone.append_f0(100.0, 170.0)
    assert start == PitchPoint(0.0, 110.0)
    assert end.pos == pytest.approx(phone.length)
    assert end.freq == 170.0
    assert phone.pitch_points == [start, end]


def test_append_f0_keeps_growing_past_two_points():
    phone = Phone("u", 211.0)
    for pos in (0.0, 25.0, 50.0, 75.0, 100.0):
        phone.append_f0(pos, 100.0)
    assert len(phone.pitch_points) == 5
    positions = [point.pos for point in phone.pitch_points]
    assert positions == sorted(positions)


def test_append_f0_on_zero_length_phone_is_at_zero():
    phone = Phone("_", 0.0)
    phone.append_f0(100.0, 95.0)
    assert phone.pitch_points[0].pos == 0.0


def test_reset_forgets_pitch_points():
    phone = Phone("b", 62.0)
    phone.append_f0(0.0, 100.0)
    phone.append_f0(100.0, 120.0)
    phone.reset()
    assert phone.pitch_points == []
    assert phone.length == 62.0


def test_apply_ratio_scales_length_positions_and_frequency():
    phone = Phone("R", 150.0)
    phone.append_f0(0.0, 100.0)
    phone.append_f0(100.0, 200.0)
    phone.apply_ratio(2.0)
    assert phone.length == pytest.approx(150.0 * 2.0)
    assert phone.pitch_points[1].pos == pytest.approx(150.0 * 2.0)
    assert phone.pitch_points[0].freq == pytest.approx(100.0 / 2.0)
    assert phone.pitch_points[1].freq == pytest.approx(200.0 / 2.0)


def test_apply_ratio_of_one_changes_nothing():
    phone = Phone("Z", 110.0)
    phone.append_f0(50.0, 130.0)
    before = [PitchPoint(p.pos, p.freq) for p in phone.pitch_points]
    phone.apply_ratio(1.0)
    assert phone.length == 110.0
    assert phone.pitch_points == before