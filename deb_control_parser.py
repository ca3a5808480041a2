#!python3
"""Debian control file (dpkg status) parser."""
import re
from dataclasses import dataclass, field

# A field line needs at least one character after the colon. Its value ignores
# horizontal white space around it, as in chapter 5.1 "Syntax of control
# files" of the Debian Policy Manual.
PACKAGE_PATTERN = re.compile(r"^Package:(.+)$")
DESCRIPTION_PATTERN = re.compile(r"^Description:(.+)$")
DEPENDS_PATTERN = re.compile(r"^Depends:(.+)$")
FIELD_WHITESPACE = " \t"
CONTINUATION_PATTERN = re.compile(r"^[ \t]+")
VERSION_PATTERN = re.compile(r" \(.*?\)")

PARAGRAPH_SEPARATOR = "\n\n"


@dataclass
class PackageRecord:
    """Fields extracted from one control paragraph."""

    name: str = ""
    summary: str = ""
    description: str = ""
    dependency_tokens: list = field(default_factory=list)


class DebControlParser:
    """Parser for the stanza format of ``/var/lib/dpkg/status``."""

    @staticmethod
    def split_paragraphs(text: str) -> list:
        """Split control file text into paragraphs.

        Parameters
        ----------
        text : str
            The control file content.

        Returns
        -------
        list
            Paragraph strings, in file order. Empty paragraphs are kept.
        """
        return text.split(PARAGRAPH_SEPARATOR)

    @staticmethod
    def split_lines(paragraph: str) -> list:
        """Split a paragraph into its lines."""
        return paragraph.split("\n")

    @staticmethod
    def _match_field(pattern, line: str):
        match = pattern.match(line)
        if match:
            return match.group(1).strip(FIELD_WHITESPACE)
        return None

    @classmethod
    def _first_field(cls, pattern, lines: list) -> str:
        for line in lines:
            value = cls._match_field(pattern, line)
            if value is not None:
                return value
        return ""

    @classmethod
    def extract_name(cls, lines: list) -> str:
        """Return the first ``Package:`` value of a paragraph, or ""."""
        return cls._first_field(PACKAGE_PATTERN, lines)

    @classmethod
    def extract_summary(cls, lines: list) -> str:
        """Return the first ``Description:`` value of a paragraph, or ""."""
        return cls._first_field(DESCRIPTION_PATTERN, lines)

    @classmethod
    def extract_description(cls, lines: list) -> str:
        """Collect the long description of a paragraph.

        Continuation lines directly following a ``Description:`` field are
        concatenated without separators, each with its leading white space
        removed. The ``Description:`` value itself is the summary and is not
        part of the result.

        Parameters
        ----------
        lines : list
            Lines of one paragraph.

        Returns
        -------
        str
            The trimmed long description, or "" when there is none.
        """
        body = []
        capturing = False

        for line in lines:
            continuation = CONTINUATION_PATTERN.match(line)
            # The continuation indent is dropped, so " more text", " continued"
            # gives "more textcontinued" and a " ." separator becomes ".".
            if capturing and continuation:
                body.append(line[continuation.end():])
                continue
            capturing = cls._match_field(DESCRIPTION_PATTERN, line) is not None

        return "".join(body).strip()

    @classmethod
    def extract_depends(cls, lines: list) -> str:
        """Return the raw ``Depends:`` value of a paragraph, or "".

        Only the field line itself is read; continuation lines are ignored.
        """
        return cls._first_field(DEPENDS_PATTERN, lines)

    @staticmethod
    def tokenize_depends(depends_field: str) -> list:
        """Turn a raw Depends value into dependency tokens.

        Version constraints and commas are removed, and what remains is split
        on spaces. Alternatives keep their ``|`` divider as a token of its
        own, so token order is significant.

        Parameters
        ----------
        depends_field : str
            The raw Depends field value.

        Returns
        -------
        list
            Package names and ``|`` dividers in source order.

        Examples
        --------
        >>> DebControlParser.tokenize_depends("foo (>= 1.0), bar | baz")
        ['foo', 'bar', '|', 'baz']
        """
        if not depends_field:
            return []

        names_only = VERSION_PATTERN.sub("", depends_field).replace(",", "")
        return [token for token in names_only.split(" ") if token]

    @classmethod
    def dependency_tokens(cls, lines: list) -> list:
        """Extract and tokenize the Depends field of a paragraph."""
        return cls.tokenize_depends(cls.extract_depends(lines))

    @classmethod
    def extract_record(cls, paragraph: str) -> PackageRecord:
        """Extract every supported field of one paragraph.

        Parameters
        ----------
        paragraph : str
            One blank-line delimited paragraph.

        Returns
        -------
        PackageRecord
            Extracted fields; missing fields are empty.
        """
        lines = cls.split_lines(paragraph)
        return PackageRecord(
            name=cls.extract_name(lines),
            summary=cls.extract_summary(lines),
            description=cls.extract_description(lines),
            dependency_tokens=cls.dependency_tokens(lines),
        )
