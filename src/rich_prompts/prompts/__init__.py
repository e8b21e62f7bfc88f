"""Prompt controllers."""

from .base import ListPrompt, Prompt, State
from .confirm import Confirm
from .fuzzy_select import FuzzySelect
from .input import Input
from .multi_fuzzy_select import MultiFuzzySelect
from .multi_select import MultiSelect
from .password import Password
from .select import Select
from .sort import Sort

__all__ = [
    "Prompt",
    "ListPrompt",
    "State",
    "Confirm",
    "Input",
    "Password",
    "Select",
    "MultiSelect",
    "Sort",
    "FuzzySelect",
    "MultiFuzzySelect",
]
