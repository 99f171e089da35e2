from pathlib import Path

import pytest

from mandelbmp.controllers.render_controller import RenderController
from mandelbmp.models.render_config import RenderConfig


@pytest.fixture
def messages():
    return []


@pytest.fixture
def controller(messages):
    return RenderController(output=messages.append)


def small_config(path: Path, **overrides) -> RenderConfig:
    params = dict(path=path, x1=-1.0, y1=-1.0, x2=1.0, y2=1.0, pixel_size=0.5, bound=2.0, max_iter=5)
    params.update(overrides)
    return RenderConfig(**params)


def test_success(controller, messages, tmp_path):
    path = tmp_path / "plot.bmp"
    assert controller.run(small_config(path))
    assert messages == ["Plot generated"]
    assert path.read_bytes()[:2] == b"BM"


@pytest.mark.parametrize(
    "overrides, fragment",
    [
        ({"x1": 1.0, "x2": 1.0}, "x1 should be less than x2"),
        ({"y1": 2.0, "y2": 1.0}, "y1 should be less than y2"),
        ({"bound": 0.0}, "bound needs to be greater than 0"),
        ({"pixel_size": -0.1}, "pixel_size needs to be greater than 0"),
        ({"x2": float("inf")}, "x2 should be a finite number"),
        ({"x1": float("-inf")}, "x1 should be a finite number"),
        ({"y2": float("nan")}, "y2 should be a finite number"),
        ({"pixel_size": float("nan")}, "pixel_size should be a finite number"),
        ({"pixel_size": float("inf")}, "pixel_size should be a finite number"),
        ({"bound": float("nan")}, "bound should be a finite number"),
        ({"bound": float("inf")}, "bound should be a finite number"),
    ],
)
def test_invalid_arguments_skip_rendering(controller, messages, tmp_path, overrides, fragment):
    path = tmp_path / "plot.bmp"
    assert not controller.run(small_config(path, **overrides))
    assert len(messages) == 1
    assert messages[0].startswith("Wrong arguments")
    assert fragment in messages[0]
    assert not path.exists()


def test_write_failure_is_reported(controller, messages, tmp_path):
    path = tmp_path / "missing" / "plot.bmp"
    assert not controller.run(small_config(path))
    assert len(messages) == 1
    assert messages[0].startswith("Error occurred during saving to file: ")


def test_default_config_values(tmp_path):
    config = RenderConfig(path=tmp_path / "plot.bmp")
    assert (config.x1, config.y1, config.x2, config.y2) == (-1.0, -1.0, 1.0, 1.0)
    assert config.pixel_size == 0.001
    assert config.bound == 2.0
    assert config.max_iter == 80
    assert config.validate() is None
