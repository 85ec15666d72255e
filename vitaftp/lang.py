"""User-interface strings and their translations.

Every string the interface shows has an identifier such as ``STR_SITE``.
A translation file holds ``IDENTIFIER=text`` lines; the two characters
``\\n`` in a text stand for a line break. Identifiers missing from the
file keep their English text.
"""

from __future__ import annotations

import enum
import os
import re
from dataclasses import dataclass, field

__all__ = [
    "SystemLanguage",
    "Translation",
    "language_file",
    "format_display_site",
    "IDENTIFIERS",
    "DEFAULT_STRINGS",
    "LANG_DIR",
]

LANG_DIR = "ux0:app/FTPCLI001/lang"

DEFAULT_STRINGS: dict[str, str] = {
    "STR_CONNECTION_SETTINGS": "Connection Settings",
    "STR_SITE": "Site",
    "STR_LOCAL": "Local",
    "STR_REMOTE": "Remote",
    "STR_MESSAGES": "Messages",
    "STR_UPDATE_SOFTWARE": "Update Software",
    "STR_CONNECT_FTP": "Connect FTP",
    "STR_DISCONNECT_FTP": "Disconnect FTP",
    "STR_SEARCH": "Search",
    "STR_REFRESH": "Refresh",
    "STR_SERVER": "Server",
    "STR_USERNAME": "Username",
    "STR_PASSWORD": "Password",
    "STR_PORT": "Port",
    "STR_PASV": "Pasv",
    "STR_DIRECTORY": "Directory",
    "STR_FILTER": "Filter",
    "STR_YES": "Yes",
    "STR_NO": "No",
    "STR_CANCEL": "Cancel",
    "STR_CONTINUE": "Continue",
    "STR_CLOSE": "Close",
    "STR_FOLDER": "Folder",
    "STR_FILE": "File",
    "STR_TYPE": "Type",
    "STR_NAME": "Name",
    "STR_SIZE": "Size",
    "STR_DATE": "Date",
    "STR_NEW_FOLDER": "New Folder",
    "STR_RENAME": "Rename",
    "STR_DELETE": "Delete",
    "STR_UPLOAD": "Upload",
    "STR_DOWNLOAD": "Download",
    "STR_SELECT_ALL": "Select All",
    "STR_CLEAR_ALL": "Clear All",
    "STR_UPLOADING": "Uploading",
    "STR_DOWNLOADING": "Downloading",
    "STR_OVERWRITE": "Overwrite",
    "STR_DONT_OVERWRITE": "Don't Overwrite",
    "STR_ASK_FOR_CONFIRM": "Ask for Confirmation",
    "STR_DONT_ASK_CONFIRM": "Don't Ask for Confirmation",
    "STR_ALLWAYS_USE_OPTION": "Always use this option and don't ask again",
    "STR_ACTIONS": "Actions",
    "STR_CONFIRM": "Confirm",
    "STR_OVERWRITE_OPTIONS": "Overwrite Options",
    "STR_PROPERTIES": "Properties",
    "STR_PROGRESS": "Progress",
    "STR_UPDATES": "Updates",
    "STR_DEL_CONFIRM_MSG": "Are you sure you want to delete this file(s)/folder(s)?",
    "STR_CANCEL_ACTION_MSG": "Canceling. Waiting for last action to complete",
    "STR_FAIL_UPLOAD_MSG": "Failed to upload file",
    "STR_FAIL_DOWNLOAD_MSG": "Failed to download file",
    "STR_FAIL_READ_LOCAL_DIR_MSG": "Failed to read contents of directory or folder does not exist.",
    "STR_CONNECTION_CLOSE_ERR_MSG": "426 Connection closed.",
    "STR_REMOTE_TERM_CONN_MSG": "426 Remote Server has terminated the connection.",
    "STR_FAIL_LOGIN_MSG": "300 Failed Login. Please check your username or password.",
    "STR_FAIL_TIMEOUT_MSG": "426 Failed. Connection timeout.",
    "STR_FAIL_DEL_DIR_MSG": "Failed to delete directory",
    "STR_DELETING": "Deleting",
    "STR_FAIL_DEL_FILE_MSG": "Failed to delete file",
    "STR_DELETED": "Deleted",
}

IDENTIFIERS: tuple[str, ...] = tuple(DEFAULT_STRINGS)

_SITE_RE = re.compile(r"[^ ]+\s*([+-]?\d+)")


class SystemLanguage(enum.IntEnum):
    """Console system language codes."""

    JAPANESE = 0
    ENGLISH_US = 1
    FRENCH = 2
    SPANISH = 3
    GERMAN = 4
    ITALIAN = 5
    DUTCH = 6
    PORTUGUESE_PT = 7
    RUSSIAN = 8
    KOREAN = 9
    CHINESE_T = 10
    CHINESE_S = 11
    FINNISH = 12
    SWEDISH = 13
    DANISH = 14
    NORWEGIAN = 15
    POLISH = 16
    PORTUGUESE_BR = 17
    ENGLISH_GB = 18
    TURKISH = 19
    UKRAINIAN = 20


_FILE_NAMES = {
    SystemLanguage.ITALIAN: "Italiano",
    SystemLanguage.SPANISH: "Spanish",
    SystemLanguage.GERMAN: "German",
    SystemLanguage.PORTUGUESE_PT: "Portuguese_BR",
    SystemLanguage.PORTUGUESE_BR: "Portuguese_BR",
    SystemLanguage.RUSSIAN: "Russian",
    SystemLanguage.DUTCH: "Dutch",
    SystemLanguage.FRENCH: "French",
    SystemLanguage.POLISH: "Polish",
    SystemLanguage.JAPANESE: "Japanese",
    SystemLanguage.KOREAN: "Korean",
    SystemLanguage.CHINESE_S: "Chinese_Simplified",
    SystemLanguage.CHINESE_T: "Chinese_Traditional",
}


def language_file(language, console_language, lang_dir=LANG_DIR):
    """Return the path of the translation file to use.

    A configured ``language`` name (spaces around it are ignored) wins;
    otherwise the console language picks the file, English by default.
    """
    name = (language or "").strip(" ")
    if not name:
        name = _FILE_NAMES.get(console_language, "English")
    return f"{lang_dir}/{name}.ini"


def _parse_lines(text: str):
    for line in text.split("\n"):
        identifier, sep, value = line.partition("=")
        identifier = identifier.lstrip()
        if not sep or not identifier or not value:
            continue
        yield identifier, value.replace("\\n", "\n")


@dataclass
class Translation:
    """The interface strings, keyed by identifier."""

    strings: dict[str, str] = field(default_factory=lambda: dict(DEFAULT_STRINGS))

    def __getitem__(self, key):
        if isinstance(key, int):
            key = IDENTIFIERS[key]
        return self.strings[key]

    def update_from_text(self, text):
        """Apply ``IDENTIFIER=text`` lines; unknown identifiers are ignored.

        Returns the identifiers that were changed, in file order.
        """
        changed = []
        for identifier, value in _parse_lines(text):
            if identifier in self.strings:
                self.strings[identifier] = value
                changed.append(identifier)
        return changed

    def load(self, path: str | os.PathLike[str]) -> bool:
        """Apply the translation file at ``path``.

        Returns False, leaving the strings untouched, when it cannot be read.
        """
        try:
            with open(path, encoding="utf-8", errors="replace", newline="") as handle:
                text = handle.read()
        except OSError:
            return False
        self.update_from_text(text)
        return True


def format_display_site(site_label, last_site):
    """Render a site name like ``"Site 3"`` with a translated label.

    Raises ValueError when ``last_site`` carries no site number.
    """
    match = _SITE_RE.match(last_site)
    if match is None:
        raise ValueError(f"no site number in {last_site!r}")
    return f"{site_label} {int(match.group(1))}"