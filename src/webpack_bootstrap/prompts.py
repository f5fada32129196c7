from __future__ import annotations

from typing import Protocol


class Confirmer(Protocol):
    def confirm(self, message: str) -> bool: ...


def is_affirmative(response: str | None) -> bool:
    """Only a single 'y' or 'Y' counts as yes; anything else declines."""
    if response is None:
        return False
    return response.strip() in ("y", "Y")


class StdinConfirmer:
    def confirm(self, message: str) -> bool:
        print(f"{message} (y/n)", flush=True)
        try:
            response = input()
        except EOFError:
            return False
        return is_affirmative(response)
