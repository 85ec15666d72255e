"""Support code for a handheld FTP client: INI files, SHA-1, param.sfo lookup, colour styles, translations and HTTP downloads."""

__version__ = "0.1.0"