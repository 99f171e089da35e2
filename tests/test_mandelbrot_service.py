import pytest

from mandelbmp.models.complex_number import Complex
from mandelbmp.models.pixel import Pixel
from mandelbmp.services.bitmap_service import BitmapService
from mandelbmp.services.mandelbrot_service import (
    PlotGeometry,
    compute_geometry,
    create_generator,
    is_bounded,
    render,
    render_bitmap,
)


@pytest.mark.parametrize("c", [Complex(100.0, 100.0), Complex(-3.0, 0.0), Complex(0.0, 0.0)])
def test_zero_iterations_is_always_bounded(c):
    assert is_bounded(c, 4.0, 0)


@pytest.mark.parametrize("bound_sq", [0.01, 1.0, 4.0])
@pytest.mark.parametrize("max_iter", [1, 10, 100])
def test_origin_is_always_bounded(bound_sq, max_iter):
    assert is_bounded(Complex(0.0, 0.0), bound_sq, max_iter)


def test_escape_is_strictly_greater_than_bound():
    # c = 1: z = 1, 2, 5, ...
    assert is_bounded(Complex(1.0, 0.0), 4.0, 2)
    assert not is_bounded(Complex(1.0, 0.0), 4.0, 3)
    # c = -2 stays at |z|^2 == 4 forever
    assert is_bounded(Complex(-2.0, 0.0), 4.0, 50)


def test_escape_on_first_iteration():
    assert not is_bounded(Complex(3.0, 0.0), 4.0, 1)


def test_compute_geometry():
    assert compute_geometry(-1.0, -1.0, 1.0, 1.0, 1.0) == PlotGeometry(width=2, height=2, center=(1, 1))


def test_compute_geometry_rounds_half_to_even():
    geometry = compute_geometry(-0.5, -1.0, 1.0, 1.5, 1.0)
    assert (geometry.width, geometry.height) == (2, 3)
    assert geometry.center == (0, 2)
    assert compute_geometry(-2.5, -1.0, 1.0, 2.5, 1.0).center == (2, 2)


def test_generator_maps_pixels_to_plane():
    generator = create_generator((1, 1), 0.5, 4.0, 2)
    # pixel (3, 1) -> c = 1 + 0i
    assert generator(3, 1) == Pixel.BLACK
    assert create_generator((1, 1), 0.5, 4.0, 3)(3, 1) == Pixel.WHITE
    assert generator(1, 1) == Pixel.BLACK


def test_two_by_two_scenario():
    bitmap = render_bitmap(-1.0, -1.0, 1.0, 1.0, 1.0, 4.0, 1)
    assert bitmap.size() == (2, 2)
    # c values: (-1,-1), (0,-1), (-1,0), (0,0); after one step |z|^2 is 2, 1, 1, 0
    assert all(bitmap.get_pixel(x, y) == Pixel.BLACK for x in range(2) for y in range(2))


def test_two_by_two_scenario_with_unit_bound():
    bitmap = render_bitmap(-1.0, -1.0, 1.0, 1.0, 1.0, 1.0, 1)
    assert bitmap.get_pixel(0, 0) == Pixel.WHITE
    assert bitmap.get_pixel(1, 0) == Pixel.BLACK
    assert bitmap.get_pixel(0, 1) == Pixel.BLACK
    assert bitmap.get_pixel(1, 1) == Pixel.BLACK


def test_plot_is_symmetric_about_real_axis():
    bitmap = render_bitmap(-2.0, -1.0, 1.0, 1.0, 0.25, 4.0, 30)
    assert bitmap.size() == (12, 8)
    # real axis sits on row 4
    for x in range(12):
        for y in range(1, 8):
            assert bitmap.get_pixel(x, y) == bitmap.get_pixel(x, 8 - y)


def test_render_squares_bound_and_writes_file(tmp_path):
    path = tmp_path / "plot.bmp"
    bitmap = render(-1.0, -1.0, 1.0, 1.0, 1.0, 1.0, 1, path)
    assert bitmap.get_pixel(0, 0) == Pixel.WHITE
    assert path.read_bytes() == BitmapService().encode(bitmap)
