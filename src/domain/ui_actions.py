"""UI action constructors for the plugin's reducer.

The reducer that consumes these (modal visibility, stored callbacks,
window width) belongs to the host; nothing here holds state.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Awaitable, Callable, Dict, Optional

from src.ports.outbound import PluginAPIPort


class ActionType(str, Enum):
    SHOW_CONFIRMATION_MODAL = "SHOW_CONFIRMATION_MODAL"
    HIDE_CONFIRMATION_MODAL = "HIDE_CONFIRMATION_MODAL"
    WINDOW_RESIZED = "WINDOW_RESIZED"


@dataclass(frozen=True)
class ShowConfirmationModal:
    on_confirm: Optional[Callable[..., Any]]
    on_cancel: Optional[Callable[..., Any]]
    type: ActionType = ActionType.SHOW_CONFIRMATION_MODAL

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.type.value,
            "onConfirm": self.on_confirm,
            "onCancel": self.on_cancel,
        }


@dataclass(frozen=True)
class HideConfirmationModal:
    type: ActionType = ActionType.HIDE_CONFIRMATION_MODAL

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.type.value}


@dataclass(frozen=True)
class WindowResized:
    window_width: int
    type: ActionType = ActionType.WINDOW_RESIZED

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.type.value, "windowWidth": self.window_width}


def connected(client: PluginAPIPort) -> Callable[[], Awaitable[None]]:
    """Return the startup handshake thunk.

    Awaiting it calls client.connected(); the FetchResult is dropped, so a
    failed handshake is invisible to callers.
    """

    async def _connected() -> None:
        _ = await client.connected()

    return _connected


def show_confirmation_modal(on_confirm, on_cancel) -> ShowConfirmationModal:
    return ShowConfirmationModal(on_confirm=on_confirm, on_cancel=on_cancel)


def hide_confirmation_modal() -> HideConfirmationModal:
    return HideConfirmationModal()


def window_resized(window_width: int) -> WindowResized:
    return WindowResized(window_width=window_width)
