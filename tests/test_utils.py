import numpy as np
import pytest

from dccikit.utils import (
    crop_scaled,
    enlarge_nearest,
    load_image,
    pad_source,
    resize_for_dcci,
    resize_nearest,
    save_image,
)


def _image(h, w, channels=3):
    return (np.arange(h * w * channels) % 256).astype(np.uint8).reshape(h, w, channels)


@pytest.mark.parametrize("h, w", [(1, 1), (1, 5), (4, 1), (3, 7), (10, 9)])
def test_dcci_prescale_puts_sources_on_even_positions(h, w):
    img = _image(h, w, 4)
    up = resize_for_dcci(img)
    assert up.shape == (2 * h - 1, 2 * w - 1, 4)
    assert np.array_equal(up[::2, ::2], img)


def test_dcci_prescale_gaps_copy_a_neighbour():
    img = _image(3, 4)
    up = resize_for_dcci(img)
    for y in range(up.shape[0]):
        for x in range(up.shape[1]):
            sy = {(y - 1) // 2, (y + 1) // 2} if y % 2 else {y // 2}
            sx = {(x - 1) // 2, (x + 1) // 2} if x % 2 else {x // 2}
            assert any(np.array_equal(up[y, x], img[j, i]) for j in sy for i in sx)


def test_resize_nearest_packed_grid():
    grid = np.arange(6, dtype=np.uint32).reshape(2, 3)
    up = resize_nearest(grid, 3, 5)
    assert up.dtype == np.uint32
    assert up.shape == (3, 5)
    assert np.array_equal(up[::2, ::2], grid)


def test_resize_nearest_validates():
    with pytest.raises(ValueError):
        resize_nearest(np.zeros((2, 2, 3, 1), dtype=np.uint8), 3, 3)
    with pytest.raises(ValueError):
        resize_nearest(np.zeros((2, 2, 3), dtype=np.uint8), 0, 3)


def test_resize_nearest_image_keeps_channels():
    img = _image(4, 6, 4)
    down = resize_nearest(img, 2, 3)
    assert down.shape == (2, 3, 4)
    assert np.array_equal(down, img[::2, ::2])
    assert np.array_equal(resize_nearest(img, 4, 6), img)


def test_enlarge_nearest_makes_blocks():
    img = _image(2, 3, 4)
    up = enlarge_nearest(img, 3)
    assert up.shape == (6, 9, 4)
    for y in range(6):
        for x in range(9):
            assert np.array_equal(up[y, x], img[y // 3, x // 3])
    assert np.array_equal(enlarge_nearest(img, 1), img)


def test_enlarge_nearest_packed_grid():
    grid = np.arange(4, dtype=np.uint32).reshape(2, 2)
    assert enlarge_nearest(grid, 2).tolist() == [
        [0, 0, 1, 1],
        [0, 0, 1, 1],
        [2, 2, 3, 3],
        [2, 2, 3, 3],
    ]
    with pytest.raises(ValueError):
        enlarge_nearest(grid, 0)


def test_pad_replicate_and_mirror():
    img = _image(3, 4)
    edge = pad_source(img, "replicate")
    assert edge.shape == (9, 10, 3)
    assert np.array_equal(edge[3:6, 3:7], img)
    assert np.array_equal(edge[0, 0], img[0, 0])
    mirror = pad_source(img, "mirror")
    assert np.array_equal(mirror[3:6, 3:7], img)
    assert np.array_equal(mirror[3, 0], img[0, 3])
    with pytest.raises(ValueError):
        pad_source(img, "wrap")


def test_mirror_pad_of_single_pixel_repeats_it():
    img = _image(1, 1)
    padded = pad_source(img, "mirror")
    assert padded.shape == (7, 7, 3)
    assert np.all(padded == img[0, 0])


def test_crop_scaled_removes_padding_border():
    scaled = np.zeros((2 * 9 - 1, 2 * 10 - 1, 3), dtype=np.uint8)
    assert crop_scaled(scaled).shape == (2 * 3 - 1, 2 * 4 - 1, 3)


@pytest.mark.parametrize("channels, mode", [(3, "RGB"), (4, "RGBA")])
def test_save_then_load(tmp_path, channels, mode):
    img = _image(5, 6, channels)
    path = tmp_path / "img.png"
    save_image(img, path)
    assert np.array_equal(load_image(path, mode=mode), img)


def test_load_rgb_as_rgba_is_opaque(tmp_path):
    img = _image(2, 2, 3)
    path = tmp_path / "rgb.png"
    save_image(img, path)
    rgba = load_image(path)
    assert rgba.shape == (2, 2, 4)
    assert np.all(rgba[:, :, 3] == 255)


def test_save_image_validates(tmp_path):
    with pytest.raises(TypeError):
        save_image([[0]], tmp_path / "x.png")
    with pytest.raises(TypeError):
        save_image(np.zeros((2, 2, 3), dtype=np.float32), tmp_path / "x.png")
    with pytest.raises(ValueError):
        save_image(np.zeros((2, 2), dtype=np.uint8), tmp_path / "x.png")
