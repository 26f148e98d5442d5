"""Key bindings for composing and toggling substitute commands."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable

from prompt_toolkit.key_binding import KeyBindings

from subtoggle.core.toggles import ToggleOp

if TYPE_CHECKING:
    from prompt_toolkit.buffer import Buffer

    from .controller import ComposeController

logger = logging.getLogger(__name__)

OP_KEYMAPS = {
    "toggle_replace": ToggleOp.REPLACE,
    "toggle_range": ToggleOp.RANGE,
    "toggle_separator": ToggleOp.SEPARATOR,
    "toggle_dialect": ToggleOp.DIALECT,
}


def captured_text(buffer: Buffer) -> str:
    """The selection if there is one, else the word under the cursor."""
    if buffer.selection_state is not None:
        return buffer.copy_selection().text
    return buffer.document.get_word_under_cursor()


def build_key_bindings(controller: ComposeController) -> KeyBindings:
    """Create bindings for every configured keymap."""
    bindings = KeyBindings()
    settings = controller.settings
    if not settings.keymaps_enabled:
        return bindings

    def bind(name: str, handler: Callable) -> None:
        spec = settings.keymaps.get(name)
        if not spec:
            return
        bindings.add(*spec.split(), eager=True)(handler)
        logger.debug(f"Bound {name} to {spec!r}")

    def _populate(event) -> None:
        controller.compose(captured_text(event.current_buffer))

    bind("populate", _populate)

    for flag in settings.flags:
        bind(settings.flag_keymap_name(flag), _flag_handler(controller, flag))

    for name, op in OP_KEYMAPS.items():
        bind(name, _op_handler(controller, op))

    def _toggle_dashboard(event) -> None:
        controller.toggle_dashboard()

    bind("toggle_dashboard", _toggle_dashboard)
    return bindings


def _flag_handler(controller: ComposeController, flag: str) -> Callable:
    def handler(event) -> None:
        controller.toggle(ToggleOp.FLAG, flag)

    return handler


def _op_handler(controller: ComposeController, op: ToggleOp) -> Callable:
    def handler(event) -> None:
        controller.toggle(op)

    return handler
