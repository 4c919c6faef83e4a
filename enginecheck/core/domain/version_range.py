"""
Domain — Semantic version ranges (pure).

Parses ``MAJOR.MINOR.PATCH[-pre][+build]`` versions and npm-style range
expressions, and answers whether a version satisfies a range.
No I/O, no subprocess. Unparsable input is logged and never satisfies.

Supported range grammar::

    range     ::= set ( "||" set )*
    set       ::= hyphen | comparator ( " " comparator )*
    hyphen    ::= partial " - " partial
    comparator::= ( "<" | "<=" | ">" | ">=" | "=" | "~" | "~>" | "^" )? partial
    partial   ::= xr ( "." xr ( "." xr pre? build? )? )?
    xr        ::= "*" | "x" | "X" | number

Caret, tilde, X-ranges and hyphen ranges desugar into plain ``<``/``>=``
comparator pairs, exactly like the npm ``semver`` package.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

logger = logging.getLogger(__name__)

# ── Errors ──────────────────────────────────────────────────────


class InvalidVersion(ValueError):
    """Raised when a version string is not valid semver."""


class InvalidRange(ValueError):
    """Raised when a range expression cannot be parsed."""


# ── Versions ────────────────────────────────────────────────────

_IDENT = r"[0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*"

_VERSION_RE = re.compile(
    r"^(?P<major>\d+)\.(?P<minor>\d+)\.(?P<patch>\d+)"
    rf"(?:-(?P<pre>{_IDENT}))?"
    rf"(?:\+(?P<build>{_IDENT}))?$"
)

_XR = r"\d+|[xX*]"

_PARTIAL_RE = re.compile(
    rf"^[v=]*(?P<major>{_XR})"
    rf"(?:\.(?P<minor>{_XR})"
    rf"(?:\.(?P<patch>{_XR})"
    rf"(?:-(?P<pre>{_IDENT}))?"
    rf"(?:\+(?P<build>{_IDENT}))?)?)?$"
)

_COMPARATOR_RE = re.compile(r"^(?P<op>~>?|\^|[<>]=?|=)?(?P<ver>.*)$")

_HYPHEN_RE = re.compile(r"^(?P<low>\S+)\s+-\s+(?P<high>\S+)$")

# Whitespace between an operator and its version ("> = 1.2", "^ 1")
_OP_SPACE_RE = re.compile(r"(~>?|\^|[<>]=?|=)\s+")


def _pre_key(ident: str) -> tuple[int, int | str]:
    # numeric identifiers sort before alphanumeric ones
    if ident.isdigit():
        return (0, int(ident))
    return (1, ident)


@dataclass(frozen=True)
class Version:
    """A parsed semantic version. Build metadata is kept but never compared."""

    major: int
    minor: int
    patch: int
    prerelease: tuple[str, ...] = ()
    build: tuple[str, ...] = ()

    @classmethod
    def parse(cls, text: str) -> Version:
        """Parse a strict ``MAJOR.MINOR.PATCH[-pre][+build]`` string.

        Raises:
            InvalidVersion: If ``text`` is not a valid version.
        """
        m = _VERSION_RE.match(text.strip())
        if not m:
            raise InvalidVersion(f"Invalid version: {text!r}")
        return cls(
            int(m["major"]),
            int(m["minor"]),
            int(m["patch"]),
            tuple(m["pre"].split(".")) if m["pre"] else (),
            tuple(m["build"].split(".")) if m["build"] else (),
        )

    @property
    def release(self) -> tuple[int, int, int]:
        return (self.major, self.minor, self.patch)

    def compare(self, other: Version) -> int:
        """Return -1, 0 or 1 following SemVer 2.0.0 precedence."""
        if self.release != other.release:
            return -1 if self.release < other.release else 1

        a, b = self.prerelease, other.prerelease
        if a == b:
            return 0
        # A release outranks any of its prereleases
        if not a:
            return 1
        if not b:
            return -1

        for x, y in zip(a, b):
            if x == y:
                continue
            return -1 if _pre_key(x) < _pre_key(y) else 1
        return -1 if len(a) < len(b) else 1

    def __lt__(self, other: Version) -> bool:
        return self.compare(other) < 0

    def __le__(self, other: Version) -> bool:
        return self.compare(other) <= 0

    def __gt__(self, other: Version) -> bool:
        return self.compare(other) > 0

    def __ge__(self, other: Version) -> bool:
        return self.compare(other) >= 0

    def __str__(self) -> str:
        text = f"{self.major}.{self.minor}.{self.patch}"
        if self.prerelease:
            text += "-" + ".".join(self.prerelease)
        if self.build:
            text += "+" + ".".join(self.build)
        return text


# ── Comparators ─────────────────────────────────────────────────


@dataclass(frozen=True)
class Comparator:
    """A single ``<op> <version>`` test. ``version=None`` matches anything."""

    op: str
    version: Version | None = None

    def test(self, v: Version) -> bool:
        if self.version is None:
            return True
        c = v.compare(self.version)
        if self.op == "<":
            return c < 0
        if self.op == "<=":
            return c <= 0
        if self.op == ">":
            return c > 0
        if self.op == ">=":
            return c >= 0
        return c == 0

    def __str__(self) -> str:
        if self.version is None:
            return "*"
        op = "" if self.op == "=" else self.op
        return f"{op}{self.version}"


_ANY = Comparator(">=")
# "<0.0.0-0": nothing sorts below it
_NONE = Comparator("<", Version(0, 0, 0, ("0",)))


def _is_x(part: str | None) -> bool:
    return part is None or part in ("x", "X", "*")


def _lower(major: int, minor: int, patch: int, pre: tuple[str, ...] = ()) -> Comparator:
    return Comparator(">=", Version(major, minor, patch, pre))


def _upper(major: int, minor: int, patch: int) -> Comparator:
    # "<X.Y.Z-0" excludes prereleases of the next boundary
    return Comparator("<", Version(major, minor, patch, ("0",)))


def _desugar(op: str, text: str) -> list[Comparator]:
    """Expand one operator + partial version into plain comparators."""
    m = _PARTIAL_RE.match(text)
    if not m:
        raise InvalidRange(f"Invalid comparator: {op}{text!r}")

    xM = _is_x(m["major"])
    xm = xM or _is_x(m["minor"])
    xp = xm or _is_x(m["patch"])
    M = 0 if xM else int(m["major"])
    mi = 0 if xm else int(m["minor"])
    p = 0 if xp else int(m["patch"])
    pre = tuple(m["pre"].split(".")) if m["pre"] and not xp else ()

    if op in ("~", "~>"):
        if xM:
            return [_ANY]
        if xm:
            return [_lower(M, 0, 0), _upper(M + 1, 0, 0)]
        return [_lower(M, mi, p, pre), _upper(M, mi + 1, 0)]

    if op == "^":
        if xM:
            return [_ANY]
        if xm:
            return [_lower(M, 0, 0), _upper(M + 1, 0, 0)]
        if xp:
            if M == 0:
                return [_lower(0, mi, 0), _upper(0, mi + 1, 0)]
            return [_lower(M, mi, 0), _upper(M + 1, 0, 0)]
        if M == 0:
            if mi == 0:
                return [_lower(0, 0, p, pre), _upper(0, 0, p + 1)]
            return [_lower(0, mi, p, pre), _upper(0, mi + 1, 0)]
        return [_lower(M, mi, p, pre), _upper(M + 1, 0, 0)]

    if op in ("", "="):
        if xM:
            return [_ANY]
        if xm:
            return [_lower(M, 0, 0), _upper(M + 1, 0, 0)]
        if xp:
            return [_lower(M, mi, 0), _upper(M, mi + 1, 0)]
        return [Comparator("=", Version(M, mi, p, pre))]

    # <, <=, >, >=
    if not xp:
        return [Comparator(op, Version(M, mi, p, pre))]
    if xM:
        return [_NONE] if op in ("<", ">") else [_ANY]
    if op == ">":
        # ">1" means ">=2.0.0", ">1.2" means ">=1.3.0"
        if xm:
            return [_lower(M + 1, 0, 0)]
        return [_lower(M, mi + 1, 0)]
    if op == "<=":
        if xm:
            return [_upper(M + 1, 0, 0)]
        return [_upper(M, mi + 1, 0)]
    if op == "<":
        return [_upper(M, mi, 0)]
    return [_lower(M, mi, 0)]


def _hyphen(low: str, high: str) -> list[Comparator]:
    lo = _PARTIAL_RE.match(low)
    hi = _PARTIAL_RE.match(high)
    if not lo or not hi:
        raise InvalidRange(f"Invalid hyphen range: {low} - {high}")

    result: list[Comparator] = []
    if not _is_x(lo["major"]):
        result.extend(_desugar(">=", low))

    if _is_x(hi["major"]):
        pass
    elif _is_x(hi["minor"]):
        result.append(_upper(int(hi["major"]) + 1, 0, 0))
    elif _is_x(hi["patch"]):
        result.append(_upper(int(hi["major"]), int(hi["minor"]) + 1, 0))
    else:
        result.extend(_desugar("<=", high))

    return result or [_ANY]


def _parse_set(text: str) -> list[Comparator]:
    text = _OP_SPACE_RE.sub(r"\1", text.strip())
    if not text:
        return [_ANY]

    m = _HYPHEN_RE.match(text)
    if m:
        return _hyphen(m["low"], m["high"])

    comparators: list[Comparator] = []
    for token in text.split():
        cm = _COMPARATOR_RE.match(token)
        if cm is None:
            raise InvalidRange(f"Invalid comparator: {token!r}")
        comparators.extend(_desugar(cm["op"] or "", cm["ver"]))
    return comparators


# ── Ranges ──────────────────────────────────────────────────────


class Range:
    """A parsed range: a union (``||``) of comparator sets."""

    def __init__(self, text: str) -> None:
        self.raw = text
        self.sets = [_parse_set(part) for part in text.split("||")]

    def test(self, version: Version) -> bool:
        return any(_test_set(cs, version) for cs in self.sets)

    def __str__(self) -> str:
        return "||".join(" ".join(str(c) for c in cs) for cs in self.sets)

    def __repr__(self) -> str:
        return f"Range({self.raw!r})"


def _test_set(comparators: list[Comparator], version: Version) -> bool:
    if not all(c.test(version) for c in comparators):
        return False

    if not version.prerelease:
        return True

    # A prerelease only matches when some comparator opts in to
    # prereleases of the same MAJOR.MINOR.PATCH tuple.
    for c in comparators:
        if c.version is None:
            continue
        if c.version.prerelease and c.version.release == version.release:
            return True
    return False


def satisfies(version: str, range_expr: str) -> bool:
    """Whether ``version`` satisfies the npm-style ``range_expr``.

    Invalid versions or ranges never satisfy anything.
    """
    try:
        v = Version.parse(version)
        r = Range(range_expr)
    except ValueError as e:
        logger.warning("Cannot compare %r with %r: %s", version, range_expr, e)
        return False
    return r.test(v)
