# vitaftp

Support library for a handheld FTP client. It holds the pieces the client
needs around the FTP protocol: settings files, hashing, application
metadata, colour themes, interface translations and plain HTTP downloads.

## Modules

- `vitaftp.inifile` – read and edit Windows-style INI files line by line,
  keeping comments, blank lines, line order and the spelling of keys.
  `parse(text)` and `load(path)` return an `IniFile`; its entries are
  `Entry` objects classified by `EntryType` (`SECTION`, `KEY_VALUE`,
  `COMMENT`). `IniFile` offers `read_string`, `read_bool`, `read_int`,
  `read_float`, `write_string`, `write_bool`, `write_int`, `write_float`,
  `delete_key`, `sections`, `to_text` and `save`. Section and key names
  are matched without regard to ASCII case. A new key goes right after its
  section header; a new section is appended at the end. Floats are written
  with ten decimals in scientific notation.
- `vitaftp.sha1` – a pure-Python SHA-1: the incremental `Sha1` hasher
  (`update`, `digest`, `hexdigest`) and the one-call `sha1(data)`.
  `digest` does not disturb the running state.
- `vitaftp.sfo` – `get_string(buffer, name)` looks up a string value in a
  `param.sfo` buffer and returns `None` when the key is absent. A truncated
  buffer or a wrong magic raises `SfoError`. `SfoHeader` and `SfoEntry`
  describe the binary layout.
- `vitaftp.style` – colour themes stored as INI files. `parse_color` turns
  `"r,g,b,a"` into an `Rgba` tuple (fewer than four parts raise
  `ValueError`); `load_style(path)` returns every colour slot keyed by name,
  opaque white for anything missing or when the file cannot be read;
  `resolve_style_path` picks the style file, falling back to the default.
- `vitaftp.lang` – interface strings keyed by identifiers such as
  `STR_SITE`, English by default. `Translation.update_from_text` and
  `Translation.load` apply `IDENTIFIER=text` lines, where `\n` stands for a
  line break; `language_file` chooses the translation file from a
  configured language name or a `SystemLanguage`; `format_display_site`
  renders a label such as `"Site 3"`.
- `vitaftp.net` – HTTP(S) helpers sending the `USER_AGENT` header.
  `get_download_file_size(url)` returns the Content-Length, or `None` when
  the status is not 200; `get_header_field(url, field)` returns a response
  header or `""`; `download_file(url, dst)` saves the body and returns the
  number of bytes written. Failures raise `DownloadError`. Server
  certificates are not verified.

## Installation

```
pip install .
```

## Examples

Reading and writing INI values:

```python
from vitaftp.inifile import parse

ini = parse("[Site 1]\nserver=ftp.example.com\nport=21\n")
ini.read_int("Site 1", "port", 0)          # 21
ini.write_string("Site 1", "username", "user")
print(ini.to_text())
```

Hashing data:

```python
from vitaftp.sha1 import Sha1, sha1

sha1(b"abc").hex()
h = Sha1()
h.update(b"ab")
h.update(b"c")
h.hexdigest()
```

Parsing a colour from a style file:

```python
from vitaftp.style import parse_color

parse_color("0.95, 0.96, 0.98, 1.00")     # Rgba(r=0.95, g=0.96, b=0.98, a=1.0)
```

Loading a translation:

```python
from vitaftp.lang import Translation

tr = Translation()
tr.update_from_text("STR_SITE=Sito\n")
tr["STR_SITE"]                              # "Sito"
```

## What this package does not do

It has no FTP client of its own: it does not connect to FTP servers, list
or transfer files over FTP, or keep a site list. It has no user interface,
no command-line program and no audio playback; it only provides the
library functions listed above.

## Running the tests

```
pip install .[test]
pytest
```