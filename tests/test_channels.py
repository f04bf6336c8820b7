import pytest

from dccikit.dcci.channels import (
    InvalidRangeError,
    channel_difference_sum,
    clamp_to_byte,
    force_valid_range,
    get_channel,
    with_channel,
)

BLACK = 0x000000
WHITE = 0xFFFFFF


def test_difference_sum_of_equal_pixels_is_zero():
    assert channel_difference_sum(WHITE, WHITE) == 0
    assert channel_difference_sum(BLACK, BLACK) == 0
    assert channel_difference_sum(0x7F123456, 0x7F123456) == 0


def test_difference_sum_black_white_is_maximal():
    assert channel_difference_sum(WHITE, BLACK) == 765
    assert channel_difference_sum(BLACK, WHITE) == 765


def test_difference_sum_ignores_alpha():
    assert channel_difference_sum(0xFF000000, 0x00000000) == 0
    assert channel_difference_sum(0xFF102030, 0x00302010) == 0x20 + 0 + 0x20


def test_get_channel_for_each_channel():
    red, green, blue = 0xFF0000, 0x00FF00, 0x0000FF
    assert [get_channel(red, c) for c in (1, 2, 3)] == [255, 0, 0]
    assert [get_channel(green, c) for c in (1, 2, 3)] == [0, 255, 0]
    assert [get_channel(blue, c) for c in (1, 2, 3)] == [0, 0, 255]
    assert get_channel(0xFF000000, 0) == 255
    assert get_channel(WHITE, 0) == 0


def test_with_channel_sets_single_channel():
    assert with_channel(0, 0, 0xFF) == 0xFF000000
    assert with_channel(0, 1, 0xFF) == 0xFF0000
    assert with_channel(0, 2, 0xFF) == 0x00FF00
    assert with_channel(0, 3, 0xFF) == 0x0000FF
    assert with_channel(0x12345678, 0, 0xAB) == 0xAB345678


@pytest.mark.parametrize("pixel", [0x00000000, 0xFFFFFFFF, 0x80FF4020, 0x12345678])
@pytest.mark.parametrize("channel", [0, 1, 2, 3])
def test_with_channel_round_trip_keeps_other_channels(pixel, channel):
    for value in (0, 1, 127, 255):
        updated = with_channel(pixel, channel, value)
        assert get_channel(updated, channel) == value
        for other in range(4):
            if other != channel:
                assert get_channel(updated, other) == get_channel(pixel, other)


def test_force_valid_range_clamps():
    assert force_valid_range(-127, 0, 255) == 0
    assert force_valid_range(0, 0, 255) == 0
    assert force_valid_range(127, 0, 255) == 127
    assert force_valid_range(255, 0, 255) == 255
    assert force_valid_range(384, 0, 255) == 255
    assert force_valid_range(5, 5, 5) == 5


def test_force_valid_range_rejects_inverted_range():
    with pytest.raises(InvalidRangeError):
        force_valid_range(0, 1, 0)
    assert issubclass(InvalidRangeError, ValueError)


def test_clamp_to_byte():
    assert clamp_to_byte(-31) == 0
    assert clamp_to_byte(0) == 0
    assert clamp_to_byte(200) == 200
    assert clamp_to_byte(286) == 255
