"""Colouring strings for the terminal."""

import typing

import colorama
from colorama import Fore, Style

colorama.just_fix_windows_console()

Colour = typing.Callable[[str], str]


def _colour(col: str) -> Colour:
    def f(x: str) -> str:
        return f"{col}{x}{Style.RESET_ALL}"
    return f


red = _colour(Fore.RED)
green = _colour(Fore.GREEN)
yellow = _colour(Fore.YELLOW)
bright_red = _colour(Style.BRIGHT + Fore.RED)
bright_green = _colour(Style.BRIGHT + Fore.GREEN)
bright_yellow = _colour(Style.BRIGHT + Fore.YELLOW)
dim = _colour(Style.DIM)
