"""Message rendering for log calls.

Contents
    - ``format_message``: ``%``-style positional substitution with a no-argument
      fast path.
    - ``compose_error_message``: joins an error-level message with its cause.
    - ``describe_exception``: one-line rendering of an exception.
    - ``NO_MESSAGE``: fallback text when neither message nor cause is given.
"""

from __future__ import annotations

from typing import Any, Final, Sequence

from ..domain.errors import FormatError

NO_MESSAGE: Final[str] = "No message/exception is set"


def format_message(template: str, args: Sequence[Any]) -> str:
    """Render *template* with positional *args*.

    Why
    ----
    Templates without arguments are returned untouched so literal ``%``
    characters never trip the formatter.

    Raises
    ------
    FormatError
        When placeholders and arguments disagree in count or type.

    Examples
    --------
    >>> format_message("100% done", ())
    '100% done'
    >>> format_message("%s has %d items", ("cart", 3))
    'cart has 3 items'
    >>> format_message("%s and %s", ("x",))
    Traceback (most recent call last):
    ...
    lib_pretty_log.domain.errors.FormatError: Cannot format '%s and %s' with 1 argument(s): not enough arguments for format string
    """

    if not args:
        return template
    try:
        return template % tuple(args)
    except (TypeError, ValueError, KeyError) as exc:
        raise FormatError(f"Cannot format {template!r} with {len(args)} argument(s): {exc}") from exc


def describe_exception(cause: BaseException) -> str:
    """Return ``"<Type>: <text>"``, or just the type name when the text is empty.

    Examples
    --------
    >>> describe_exception(ValueError("boom"))
    'ValueError: boom'
    >>> describe_exception(KeyboardInterrupt())
    'KeyboardInterrupt'
    """

    text = str(cause)
    name = type(cause).__qualname__
    return f"{name}: {text}" if text else name


def compose_error_message(message: str | None, cause: BaseException | None) -> str:
    """Combine an error message with its causal exception.

    Examples
    --------
    >>> compose_error_message("save failed", OSError("disk full"))
    'save failed : OSError: disk full'
    >>> compose_error_message(None, OSError("disk full"))
    'OSError: disk full'
    >>> compose_error_message(None, None)
    'No message/exception is set'
    """

    if cause is not None and message is not None:
        return f"{message} : {describe_exception(cause)}"
    if cause is not None:
        return describe_exception(cause)
    if message is None:
        return NO_MESSAGE
    return message
