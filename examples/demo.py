#!/usr/bin/env python3
"""Walk through every prompt type.

Run with: python examples/demo.py
Set NO_COLOR=1 or RICH_PROMPTS_THEME=plain for the plain theme.
"""

import sys

from rich_prompts import (
    BasicHistory,
    Confirm,
    FuzzySelect,
    Input,
    MultiSelect,
    Password,
    PromptCancelled,
    Select,
    Sort,
)

LANGUAGES = ["Python", "Rust", "Go", "TypeScript", "Haskell", "OCaml", "Zig", "Elixir"]


def main() -> int:
    history = BasicHistory(max_entries=20)

    try:
        name = Input("Your name", default="anonymous", history=history).interact()
        age = Input(
            "Age",
            parser=int,
            validator=lambda v: None if 0 < v < 150 else "enter a realistic age",
        ).interact()
        Password("Password", confirmation="Repeat password").interact()

        favourite = FuzzySelect("Favourite language", LANGUAGES, show_help=True).interact()
        known = MultiSelect(
            "Languages you know",
            LANGUAGES,
            defaults=[i == favourite for i in range(len(LANGUAGES))],
            allow_empty=False,
        ).interact()
        ranking = Sort("Rank them", [LANGUAGES[i] for i in known], show_help=True).interact()
        editor = Select("Editor", ["vim", "emacs", "vscode", "helix"], default=0).interact()
    except PromptCancelled:
        print("cancelled", file=sys.stderr)
        return 1

    if Confirm("Print a summary?", default=True).interact_opt():
        print(f"{name} ({age}) uses {['vim', 'emacs', 'vscode', 'helix'][editor]}")
        print("ranking:", [LANGUAGES[known[i]] for i in ranking])
    return 0


if __name__ == "__main__":
    sys.exit(main())
