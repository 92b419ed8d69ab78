"""A small self-contained checking harness with comparison predicates.

A :class:`CheckRunner` counts checks, records failures and reports them on a
text stream.  The predicates mirror the usual relational checks, including
string comparisons that treat ``None`` as a missing value.
"""

import os
import re
import sys

_EPSILON = 10 * sys.float_info.epsilon


def eq(a, b):
    """Return whether ``a == b``."""
    return a == b


def ne(a, b):
    """Return whether ``a != b``."""
    return a != b


def le(a, b):
    """Return whether ``a <= b``."""
    return a <= b


def lt(a, b):
    """Return whether ``a < b``."""
    return a < b


def ge(a, b):
    """Return whether ``a >= b``."""
    return a >= b


def gt(a, b):
    """Return whether ``a > b``."""
    return a > b


def eqstr(a, b):
    """Return whether two strings are equal; ``None`` never compares equal."""
    if a is None or b is None:
        return False
    return a == b


def nestr(a, b):
    """Return whether two strings differ; ``None`` never compares as different."""
    if a is None or b is None:
        return False
    return a != b


def eqstrcase(a, b):
    """Return whether two strings are equal ignoring case, character by character."""
    if a is None or b is None:
        return False
    if len(a) != len(b):
        return False
    return all(x.upper() == y.upper() for x, y in zip(a, b))


def nestrcase(a, b):
    """Return whether two strings differ ignoring case; ``None`` never differs."""
    if a is None or b is None:
        return False
    return not eqstrcase(a, b)


def almost_eq(a, b):
    """Return whether two floats are equal within a small absolute or relative error."""
    if a == b:
        return True
    if abs(a - b) < _EPSILON:
        return True
    larger, smaller = sorted((abs(a), abs(b)), reverse=True)
    return (larger - smaller) < larger * _EPSILON


def count_regexp(pattern, text):
    """Return the number of non-overlapping matches of ``pattern`` in ``text``."""
    return sum(1 for _ in re.finditer(pattern, text))


_REFERENCE_PREDICATES = frozenset({ne, le, lt, ge, gt, nestr, nestrcase})


def _format(value):
    if value is None:
        return "NULL pointer"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return f'"{value}"'
    return str(value)


def _basename(path):
    return os.path.basename(path.replace("\\", "/"))


class CheckRunner:
    """Runs named checks, counting them and reporting failures on ``stream``."""

    def __init__(self, stream=None):
        self._stream = stream if stream is not None else sys.stderr
        self.total = 0
        self.failed = 0
        self.status = False
        self.name = ""

    def _write(self, text):
        self._stream.write(text)

    def begin(self, name):
        """Start a named check."""
        self.name = name
        self.status = True
        self._write(f"\n---> {name}\n")
        self.total += 1

    def end(self):
        """Finish the current check, report its outcome and return whether it passed."""
        verdict = "     SIKERES" if self.status else "** HIBAS ****"
        self._write(f"{verdict}\t{self.name} <---\n")
        return self.status

    def expect(self, ok, file="?", line=0, expr="", always=False):
        """Record one result; report its location if it failed or ``always`` is set."""
        ok = bool(ok)
        if not ok:
            self.failed += 1
            self.status = False
        if not ok or always:
            self._write(f"\n**** {_basename(file)}({line}): {expr} ****\n")
        return ok

    def expect_that(self, expected, actual, predicate, file="?", line=0, expr=""):
        """Check ``predicate(expected, actual)``, showing both values on failure."""
        ok = self.expect(predicate(expected, actual), file, line, expr)
        if not ok:
            label = "etalon" if predicate in _REFERENCE_PREDICATES else "elvart"
            self._write(
                f"** {label}: {_format(expected)}\n** aktual: {_format(actual)}\n"
            )
        return ok

    def expect_regexp(self, pattern, text, match=-1, file="?", line=0, expr=""):
        """Check that ``pattern`` matches ``text`` exactly ``match`` times.

        A negative ``match`` accepts any number of matches.
        """
        count = count_regexp(pattern, text)
        if match < 0:
            match = count
        ok = self.expect(count == match, file, line, expr)
        if not ok:
            self._write(
                f'** regexp: "{pattern}"\n** string: "{text}"\n'
                f"** elvart/illeszkedik: {match}/{count}\n"
            )
        return ok

    def expect_raises(self, func, exception_type=None, file="?", line=0, expr=""):
        """Check that calling ``func`` raises ``exception_type`` (any exception if None)."""
        wanted = BaseException if exception_type is None else exception_type
        try:
            func()
        except wanted:
            raised = True
        except Exception:
            raised = False
        else:
            raised = False
        ok = self.expect(raised, file, line, expr)
        if not ok:
            if exception_type is None:
                what = "nem dobott kivetelt."
            else:
                what = f"nem dobott '{exception_type.__name__}' kivetelt."
            self._write(f"** Az utasitas {what}\n** Azt vartuk, hogy kivetelt dob.\n")
        return ok

    def summary(self):
        """Report and return the number of failed checks and of all checks."""
        self._write(f"\n==== TESZT VEGE ==== HIBAS/OSSZES: {self.failed}/{self.total}\n")
        return self.failed, self.total