"""Prompting helpers for console-driven programs."""

from __future__ import annotations

import os

DEFAULT_DIRECTORY = "res/"


def get_integer(prompt: str = "") -> int:
    """Prompt until the user types a whole number, then return it."""
    while True:
        reply = input(prompt).strip()
        try:
            return int(reply)
        except ValueError:
            print("Illegal integer format. Try again.")


def get_yes_or_no(prompt: str = "") -> bool:
    """Prompt until the user answers with a word starting with 'y' or 'n'."""
    if prompt and not prompt.endswith(" "):
        prompt += " "
    while True:
        reply = input(prompt).strip().lower()
        if reply.startswith("y"):
            return True
        if reply.startswith("n"):
            return False
        print("Please type a word that starts with 'Y' or 'N'.")


def make_selection_from(title: str, options: list[str]) -> int:
    """Show numbered options and prompt until one is picked; return its index."""
    options = list(options)
    if not options:
        raise ValueError("Internal error: Requesting the user to pick an item from an empty list.")

    print(title)
    for index, option in enumerate(options):
        print(f"{index} {option}")

    while True:
        result = get_integer("Your choice: ")
        if 0 <= result < len(options):
            return result
        print(f"Please enter a number between 0 and {len(options) - 1}")


def make_file_selection(suffix: str, directory: str = DEFAULT_DIRECTORY) -> str:
    """Ask the user to pick a file in directory whose name ends with suffix.

    Returns the chosen file's path, joined to the directory with a '/'.
    """
    effective = directory or "."
    options = sorted(name for name in os.listdir(effective) if name.endswith(suffix))

    if not effective.endswith("/"):
        effective += "/"

    choice = make_selection_from("Please choose a demo file from this list:", options)
    return effective + options[choice]