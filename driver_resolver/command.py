from typing import List

from .models import BrowserOptions


def escape_browser_path(path: str) -> str:
    """Escape spaces in a browser binary path and wrap it in double quotes.

    Spaces that are already escaped are normalised first so they are not
    escaped twice.
    """
    escaped = path.replace("\\ ", " ").replace(" ", "\\ ")
    return f'"{escaped}"'


class CommandBuilder:
    """Builds the helper argument vector for a set of browser options."""

    def __init__(self, binary: str):
        self.binary = binary

    def build(self, options: BrowserOptions) -> List[str]:
        cmd = [self.binary, "--browser", options.browser_name, "--output", "json"]

        if options.browser_version is not None:
            cmd.extend(["--browser-version", options.browser_version])

        if options.binary_path is not None:
            cmd.extend(["--browser-path", escape_browser_path(options.binary_path)])

        return cmd
