"""Edit module - panels, uploads and the editor facade."""

from ubb_editor.edit.panels import Mode, Panel, PanelKind, ModeStateMachine
from ubb_editor.edit.keys import Key, KeyEvent
from ubb_editor.edit.messages import MessageArea
from ubb_editor.edit.options import EditorOptions
from ubb_editor.edit.upload import (
    LocalUploader,
    UploadCoordinator,
    UploadError,
    UploadFile,
    Uploader,
)
from ubb_editor.edit.editor import UbbEditor

__all__ = [
    "Mode",
    "Panel",
    "PanelKind",
    "ModeStateMachine",
    "Key",
    "KeyEvent",
    "MessageArea",
    "EditorOptions",
    "LocalUploader",
    "UploadCoordinator",
    "UploadError",
    "UploadFile",
    "Uploader",
    "UbbEditor",
]
