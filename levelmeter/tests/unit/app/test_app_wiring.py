from __future__ import annotations

from typing import List, Tuple

import pytest

from levelmeter.app.config import MeterConfig
from levelmeter.app.main import App
from levelmeter.domain.errors import InvalidBoundsError
from levelmeter.domain.volume import VolumeModel
from levelmeter.viewmodels.meter_vm import BarGeometry, MeterVM


class WinStub:
    def __init__(self, size: Tuple[int, int] = (325, 100)) -> None:
        self._size = size
        self.geometries: List[BarGeometry] = []
        self.statuses: List[str] = []

    def container_size(self) -> Tuple[int, int]:
        return self._size

    def set_bar_geometry(self, geometry: BarGeometry) -> None:
        self.geometries.append(geometry)

    def set_status_message(self, text: str) -> None:
        self.statuses.append(text)


class LogStub:
    def __init__(self) -> None:
        self.infos: List[tuple] = []
        self.debugs: List[tuple] = []

    def info(self, *args, **kwargs) -> None:
        self.infos.append((args, kwargs))

    def debug(self, *args, **kwargs) -> None:
        self.debugs.append((args, kwargs))


def _make_app(config: MeterConfig | None = None) -> tuple[App, WinStub]:
    app = App.__new__(App)
    app.config = config or MeterConfig()
    app._log = LogStub()
    app.model = VolumeModel.from_bounds(
        app.config.bounds(), initial=app.config.initial_value
    )
    win = WinStub()
    app.win = win
    app.meter_vm = MeterVM(on_bar_changed=app._apply_bar_geometry)
    app._initial_layout()
    return app, win


def test_initial_layout_renders_half_bar():
    app, win = _make_app()

    assert app.meter_vm.container_width == 325
    assert app.meter_vm.container_height == 100
    assert [g.width for g in win.geometries] == [162]
    assert win.statuses == ["Volume: 5 / 10"]


def test_increase_button_updates_model_and_view():
    app, win = _make_app()

    for _ in range(5):
        app._on_increase()

    assert app.model.current_value() == 10
    assert win.geometries[-1].width == 325
    assert win.geometries[-1].at_max is True
    assert win.statuses[-1] == "Volume: 10 / 10"
    assert len(app._log.debugs) == 5


def test_decrease_button_saturates_at_floor():
    app, win = _make_app()

    for _ in range(10):
        app._on_decrease()

    assert app.model.current_value() == 0
    assert win.geometries[-1].width == 0
    assert win.geometries[-1].at_min is True
    # one initial render plus one per press
    assert len(win.geometries) == 11


def test_initial_value_from_config_is_used():
    app, win = _make_app(MeterConfig(initial_value=2))

    assert app.model.current_value() == 2
    assert win.geometries[0].width == 65


def test_invalid_bounds_fail_before_window_is_built(monkeypatch):
    built = []
    monkeypatch.setattr(
        "levelmeter.app.main.MainWindowView",
        lambda **kwargs: built.append(kwargs),
    )

    with pytest.raises(InvalidBoundsError):
        App(MeterConfig(min_value=5, max_value=2))

    assert built == []
