# blog_search/infrastructure/browser.py

import base64
import sys
import webbrowser
from typing import Optional, TextIO
from urllib.parse import urljoin

from blog_search.domain.interfaces import ClipboardPort, NavigatorPort


class BrowserNavigator(NavigatorPort):
    """
    Opens result URLs in the default browser.
    Relative post URLs ("/2024/01/rust-basics/") resolve against the site base URL.
    """

    def __init__(self, base_url: str = ""):
        self._base_url = base_url

    def resolve(self, url: str) -> str:
        return urljoin(self._base_url, url) if self._base_url else url

    def navigate(self, url: str) -> None:
        target = self.resolve(url)
        print(f"[Navigator] Opening {target}")
        if not webbrowser.open(target):
            raise RuntimeError(f"No browser available to open '{target}'.")


class TerminalClipboard(ClipboardPort):
    """
    Writes to the system clipboard through the terminal's OSC 52 escape
    sequence, which works over SSH and needs no native helper.
    """

    def __init__(self, stream: Optional[TextIO] = None):
        self._stream = stream or sys.stdout

    def write_text(self, text: str) -> None:
        if not self._stream.isatty():
            raise RuntimeError("Clipboard needs an interactive terminal.")
        payload = base64.b64encode(text.encode("utf-8")).decode("ascii")
        self._stream.write(f"\x1b]52;c;{payload}\x07")
        self._stream.flush()
