"""Redirect signal raised by mutations that end on another view.

A successful mutation hands control to a different view instead of returning
a value. ``redirect`` raises ``RedirectSignal``; the application turns it into
a ``303 See Other`` response (see ``app.main``).
"""

from typing import NoReturn

from fastapi import Request
from fastapi.responses import RedirectResponse


class RedirectSignal(Exception):  # noqa: N818
    def __init__(self, location: str):
        super().__init__(location)
        self.location = location


def redirect(location: str) -> NoReturn:
    raise RedirectSignal(location)


async def redirect_signal_handler(request: Request, exc: RedirectSignal) -> RedirectResponse:
    return RedirectResponse(url=exc.location, status_code=303)
