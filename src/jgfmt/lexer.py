from dataclasses import dataclass

from .models import Language

LINE_COMMENT = "line_comment"
BLOCK_COMMENT = "block_comment"
STRING = "string"

# Tokens after which a `/` starts a slashy string rather than a division
OPERAND_PREFIXES = set("=(,~[{:!&|?;")
OPERAND_KEYWORDS = {"return", "assert", "in", "case"}


@dataclass(frozen=True)
class Region:
    """A span of source that is not code: a comment or a string literal."""

    start: int
    end: int
    kind: str

    @property
    def is_comment(self) -> bool:
        return self.kind in (LINE_COMMENT, BLOCK_COMMENT)


def scan(source: str, language: Language) -> list[Region]:
    """Locate comments and string literals in Java or Groovy source.

    Groovy adds triple single-quoted strings, slashy (`/re/`) and dollar-slashy
    (`$/re/$`) strings, and a leading shebang line. A `/` opens a slashy string
    only where an operand is expected, otherwise it is division.
    """
    regions: list[Region] = []
    n = len(source)
    i = 0
    groovy = language is Language.GROOVY

    if groovy and source.startswith("#!"):
        end = _line_end(source, 0)
        regions.append(Region(0, end, LINE_COMMENT))
        i = end

    triples = ('"""', "'''") if groovy else ('"""',)

    while i < n:
        ch = source[i]
        if source.startswith("//", i):
            end = _line_end(source, i)
            kind = LINE_COMMENT
        elif source.startswith("/*", i):
            close = source.find("*/", i + 2)
            end = n if close == -1 else close + 2
            kind = BLOCK_COMMENT
        elif source.startswith(triples, i):
            end = _triple_end(source, i + 3, source[i : i + 3])
            kind = STRING
        elif ch == '"' or ch == "'":
            end = _quote_end(source, i + 1, ch)
            kind = STRING
        elif groovy and source.startswith("$/", i) and not _follows_identifier(source, i):
            end = _dollar_slashy_end(source, i + 2)
            kind = STRING
        elif groovy and ch == "/" and _expects_operand(source, i):
            end = _slashy_end(source, i + 1)
            if end is None:
                i += 1
                continue
            kind = STRING
        else:
            i += 1
            continue
        regions.append(Region(i, end, kind))
        i = end

    return regions


def _expects_operand(source: str, pos: int) -> bool:
    j = pos - 1
    while j >= 0 and source[j] in " \t":
        j -= 1
    if j < 0 or source[j] in "\r\n":
        return True
    if source[j] in OPERAND_PREFIXES:
        return True
    k = j
    while k >= 0 and (source[k].isalnum() or source[k] == "_"):
        k -= 1
    return source[k + 1 : j + 1] in OPERAND_KEYWORDS


def _follows_identifier(source: str, pos: int) -> bool:
    return pos > 0 and (source[pos - 1].isalnum() or source[pos - 1] in "_$")


def _slashy_end(source: str, start: int) -> int | None:
    # None when there is no closing slash, so the `/` is left as code
    j = start
    n = len(source)
    while j < n:
        c = source[j]
        if c == "\\" and source.startswith("/", j + 1):
            j += 2
            continue
        if c == "/":
            return j + 1
        j += 1
    return None


def _dollar_slashy_end(source: str, start: int) -> int:
    j = start
    n = len(source)
    while j < n:
        if source.startswith(("$$", "$/"), j):
            j += 2
            continue
        if source.startswith("/$", j):
            return j + 2
        j += 1
    return n


def _line_end(source: str, start: int) -> int:
    pos = source.find("\n", start)
    return len(source) if pos == -1 else pos


def _quote_end(source: str, start: int, quote: str) -> int:
    # Unterminated literals stop at the end of their line
    j = start
    n = len(source)
    while j < n:
        c = source[j]
        if c == "\\":
            j += 2
            continue
        if c == quote:
            return j + 1
        if c == "\n":
            return j
        j += 1
    return n


def _triple_end(source: str, start: int, delimiter: str) -> int:
    j = start
    n = len(source)
    while j < n:
        if source[j] == "\\":
            j += 2
            continue
        if source.startswith(delimiter, j):
            return j + 3
        j += 1
    return n
