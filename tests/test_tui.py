"""Tests for the terminal UI using Textual's test framework."""

import pytest

from keylight_tui.core.control import Action, ControlLoop, InputEvent, LoopState
from keylight_tui.core.errors import ProtocolError
from keylight_tui.core.models import LightState
from keylight_tui.ui.main_window import KeyLightApp
from keylight_tui.ui.styles.dark_theme import INACTIVE
from keylight_tui.ui.widgets.keylight_widget import Gauge, KeyLightPanel


@pytest.fixture
def app(address, light, mock_service):
    return KeyLightApp(ControlLoop(address, light, mock_service))


def pushed_states(service):
    return [call.args[1] for call in service.set_light_state.await_args_list]


@pytest.mark.integration
@pytest.mark.asyncio
class TestKeyLightApp:
    async def test_mounts_panel_with_initial_state(self, app):
        async with app.run_test() as pilot:
            await pilot.pause()
            assert app.query_one(KeyLightPanel) is not None
            assert app.query_one("#brightness", Gauge).label == "50%"
            assert app.query_one("#temperature", Gauge).label == f"{LightState(temperature=200).kelvin} K"

    @pytest.mark.parametrize(
        "key, expected",
        [
            ("left", LightState(on=True, brightness=40, temperature=200)),
            ("right", LightState(on=True, brightness=60, temperature=200)),
            ("shift+left", LightState(on=True, brightness=49, temperature=200)),
            ("shift+right", LightState(on=True, brightness=51, temperature=200)),
            ("up", LightState(on=True, brightness=50, temperature=190)),
            ("down", LightState(on=True, brightness=50, temperature=210)),
            ("shift+up", LightState(on=True, brightness=50, temperature=199)),
            ("shift+down", LightState(on=True, brightness=50, temperature=201)),
            ("space", LightState(on=False, brightness=50, temperature=200)),
            ("enter", LightState(on=False, brightness=50, temperature=200)),
        ],
    )
    async def test_key_pushes_state(self, app, mock_service, key, expected):
        async with app.run_test() as pilot:
            await pilot.press(key)
            await pilot.pause()

            assert pushed_states(mock_service) == [expected]
            assert app.query_one("#brightness", Gauge).label == f"{expected.brightness}%"

    @pytest.mark.parametrize("key, label", [("up", "Colder"), ("down", "Warmer")])
    async def test_temperature_labels_match_kelvin(self, app, key, label):
        descriptions = {binding.key: binding.description for binding in KeyLightApp.BINDINGS}
        assert descriptions[key] == label

        async with app.run_test() as pilot:
            await pilot.pause()
            before = app.controller.light.kelvin
            await pilot.press(key)
            await pilot.pause()
            after = app.controller.light.kelvin

        if label == "Colder":
            assert after > before
        else:
            assert after < before

    async def test_unbound_key_is_ignored(self, app, mock_service):
        async with app.run_test() as pilot:
            await pilot.press("x")
            await pilot.pause()
            mock_service.set_light_state.assert_not_awaited()

    async def test_power_off_greys_out_gauges(self, app):
        async with app.run_test() as pilot:
            await pilot.pause()
            assert app.query_one("#temperature", Gauge).color != INACTIVE

            await pilot.press("space")
            await pilot.pause()
            assert app.query_one("#brightness", Gauge).color == INACTIVE
            assert app.query_one("#temperature", Gauge).color == INACTIVE

    async def test_quit_exits_cleanly(self, app, mock_service):
        async with app.run_test() as pilot:
            await pilot.press("q")

        assert app.controller.state is LoopState.STOPPED
        assert app.return_code == 0
        assert app.fatal_error is None
        mock_service.set_light_state.assert_not_awaited()

    async def test_escape_quits(self, app):
        async with app.run_test() as pilot:
            await pilot.press("escape")

        assert app.controller.state is LoopState.STOPPED
        assert app.return_code == 0

    async def test_push_failure_exits_with_error(self, app, mock_service):
        mock_service.set_light_state.side_effect = ProtocolError(500, "PUT")

        async with app.run_test() as pilot:
            await pilot.press("right")

        assert isinstance(app.fatal_error, ProtocolError)
        assert app.return_code == 1
        assert app.controller.state is LoopState.STOPPED
        assert mock_service.set_light_state.await_count == 1

    async def test_input_ignored_once_stopped(self, app, mock_service):
        app.controller.quit()
        await app.handle_input(InputEvent(Action.TOGGLE))
        mock_service.set_light_state.assert_not_awaited()
