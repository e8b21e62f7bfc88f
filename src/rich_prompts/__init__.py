"""Interactive terminal prompts built on Rich and readchar.

Blocking prompts that draw themselves in place, read keys, and return a
typed value once the user confirms.

Example:
    from rich_prompts import FuzzySelect, Input, MultiSelect

    name = Input("Your name", default="anonymous").interact()
    tools = MultiSelect("Tools", ["git", "make", "docker"]).interact_opt()
    shell = FuzzySelect("Shell", ["bash", "zsh", "fish"]).interact()
"""

from .errors import PromptCancelled, PromptError, TerminalIOError, ValidationError
from .fuzzy import Candidate, FuzzyMatch, filter_view, score
from .history import BasicHistory, History
from .line_editor import LineEditor
from .navigator import ListNavigator, Viewport, VisibleRow
from .prompts import (
    Confirm,
    FuzzySelect,
    Input,
    ListPrompt,
    MultiFuzzySelect,
    MultiSelect,
    Password,
    Prompt,
    Select,
    Sort,
    State,
)
from .render import FrameRenderer
from .terminal import ConsoleTerminal, Terminal
from .themes import DEFAULT_THEME, PLAIN_THEME, Theme, get_theme, register_theme, set_theme
from .validate import Err, Ok, ValidationResult

__all__ = [
    # Prompts
    "Confirm",
    "Input",
    "Password",
    "Select",
    "MultiSelect",
    "Sort",
    "FuzzySelect",
    "MultiFuzzySelect",
    "Prompt",
    "ListPrompt",
    "State",
    # Engine
    "ListNavigator",
    "Viewport",
    "VisibleRow",
    "LineEditor",
    "FrameRenderer",
    "Candidate",
    "FuzzyMatch",
    "score",
    "filter_view",
    # Terminal
    "Terminal",
    "ConsoleTerminal",
    # Theming
    "Theme",
    "DEFAULT_THEME",
    "PLAIN_THEME",
    "get_theme",
    "set_theme",
    "register_theme",
    # Validation and history
    "Ok",
    "Err",
    "ValidationResult",
    "History",
    "BasicHistory",
    # Errors
    "PromptError",
    "ValidationError",
    "TerminalIOError",
    "PromptCancelled",
]
