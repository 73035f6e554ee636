from ui.widgets.typing_area import TypingArea, GuardedLineEdit
from ui.widgets.session_dialog import CustomTextDialog

__all__ = ["TypingArea", "GuardedLineEdit", "CustomTextDialog"]
