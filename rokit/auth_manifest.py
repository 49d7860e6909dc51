"""The authentication manifest, holding tokens for artifact providers."""

from __future__ import annotations

import logging
import textwrap
from pathlib import Path

import tomlkit
from tomlkit.exceptions import TOMLKitError

from rokit.errors import MissingFileError, RokitError
from rokit.providers import ArtifactProvider

_log = logging.getLogger(__name__)

MANIFEST_FILE_NAME = "auth.toml"
REPOSITORY_URL = "https://example.com/rokit"

MANIFEST_DEFAULT_CONTENTS = """
# This file lists authentication tokens managed by Rokit, a toolchain manager for Roblox projects.
# For more information, see <|REPOSITORY_URL|>

# github = "token"
"""


def make_manifest_template(template: str) -> str:
    """Normalise a manifest template: no indentation, the repository URL
    filled in, and exactly one trailing newline."""
    contents = textwrap.dedent(template.strip())
    contents = contents.replace("<|REPOSITORY_URL|>", REPOSITORY_URL)
    return contents + "\n"


def _parse_document(text: str) -> tomlkit.TOMLDocument:
    try:
        return tomlkit.parse(text)
    except TOMLKitError as err:
        raise RokitError(f"TOML parse error: {err}") from err


class AuthManifest:
    """Authentication tokens for artifact providers, stored as TOML.

    Formatting and comments of the underlying document are preserved.
    """

    def __init__(self, document: tomlkit.TOMLDocument) -> None:
        self._document = document

    @classmethod
    def default(cls) -> "AuthManifest":
        """Return a manifest with the default template contents."""
        return cls(_parse_document(make_manifest_template(MANIFEST_DEFAULT_CONTENTS)))

    @classmethod
    def parse(cls, text: str) -> "AuthManifest":
        """Parse a manifest, logging a warning for each invalid entry.

        Raises RokitError if the text is not valid TOML.
        """
        document = _parse_document(text)
        for key, value in document.items():
            try:
                ArtifactProvider.parse(key)
            except ValueError as err:
                _log.warning(
                    "Encountered unknown artifact provider '%s' in auth manifest!"
                    "\nError: %s",
                    key,
                    err,
                )
            if not isinstance(value, str):
                _log.warning(
                    "Encountered invalid value for artifact provider '%s' in auth manifest!"
                    "\nExpected: String\nActual: %s",
                    key,
                    type(value).__name__,
                )
        return cls(document)

    @classmethod
    def load(cls, directory: str | Path) -> "AuthManifest":
        """Load the manifest file from a directory.

        Raises MissingFileError if it does not exist, RokitError otherwise.
        """
        path = Path(directory) / MANIFEST_FILE_NAME
        _log.debug("Loading manifest %s", path)
        try:
            text = path.read_text(encoding="utf-8")
        except FileNotFoundError as err:
            raise MissingFileError(path) from err
        except UnicodeDecodeError as err:
            raise RokitError("unexpected invalid UTF-8") from err
        except OSError as err:
            raise RokitError(f"I/O error: {err}") from err
        return cls.parse(text)

    @classmethod
    def load_or_create(cls, directory: str | Path) -> "AuthManifest":
        """Load the manifest, or create and save a default one if missing."""
        try:
            return cls.load(directory)
        except MissingFileError:
            manifest = cls.default()
            manifest.save(directory)
            return manifest

    def save(self, directory: str | Path) -> None:
        """Write the manifest file into a directory."""
        path = Path(directory) / MANIFEST_FILE_NAME
        _log.debug("Saving manifest %s", path)
        try:
            path.write_text(str(self), encoding="utf-8")
        except OSError as err:
            raise RokitError(f"I/O error: {err}") from err

    def has_token(self, provider: ArtifactProvider) -> bool:
        """Return True if there is an entry for the provider."""
        return provider.as_str() in self._document

    def get_token(self, provider: ArtifactProvider) -> str | None:
        """Return the provider's token, or None if absent or not a string."""
        value = self._document.get(provider.as_str())
        return str(value) if isinstance(value, str) else None

    def get_all_tokens(self) -> dict[ArtifactProvider, str]:
        """Return every valid token, keyed by provider."""
        tokens: dict[ArtifactProvider, str] = {}
        for key, value in self._document.items():
            try:
                provider = ArtifactProvider.parse(key)
            except ValueError:
                continue
            if isinstance(value, str):
                tokens[provider] = str(value)
        return tokens

    def set_token(self, provider: ArtifactProvider, token: str) -> bool:
        """Set the provider's token; return True if an older one was replaced."""
        key = provider.as_str()
        replaced = key in self._document
        self._document[key] = token
        return replaced

    def unset_token(self, provider: ArtifactProvider) -> bool:
        """Remove the provider's token; return True if it was present."""
        key = provider.as_str()
        if key not in self._document:
            return False
        del self._document[key]
        return True

    def __str__(self) -> str:
        return tomlkit.dumps(self._document)