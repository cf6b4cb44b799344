"""
The closed table of subtitle languages addsubs can tag a track with.

Codes are ISO 639-2 abbreviations; the value is the track name written into
the output container. The set is fixed and not configurable.
"""
from enum import Enum

from .exceptions import LangError


class Language(Enum):
    """Supported subtitle track languages, keyed by ISO 639-2 code."""

    JPN = "jpn"
    ENG = "eng"
    SPA = "spa"
    UND = "und"

    @property
    def code(self) -> str:
        return self.value

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]

    @classmethod
    def from_code(cls, code: str) -> "Language":
        """
        Resolves an ISO 639-2 code to a `Language`.

        Raises:
            LangError: If the code is not part of the table. The offending code
                       is kept on the exception.
        """
        try:
            return cls(code)
        except ValueError:
            raise LangError(code) from None


_DISPLAY_NAMES = {
    Language.JPN: "Japanese",
    Language.ENG: "English",
    Language.SPA: "Spanish",
    Language.UND: "Undetermined",
}

SUPPORTED_CODES = tuple(language.code for language in Language)
