"""Call-site introspection for log headers.

Purpose
-------
Find the first stack frame outside the logging library and render the frames
above it as an indented header, so every log call reports where it came from
regardless of how many library layers it passed through.

Contents
--------
* :data:`INTERNAL_MARKER` – module-level attribute flagging library frames.
* :data:`MIN_STACK_OFFSET` – frames always skipped before searching.
* :class:`StackFrame` – the slice of frame data the header needs.
* :func:`capture_stack` – snapshot of the current stack, innermost first.
* :func:`stack_offset` – index just before the first external frame.
* :func:`render_frames` – header strings, outermost frame first.
* :class:`CallSiteInspector` – binds the above for the printer.

System Role
-----------
Called by :class:`lib_pretty_log.application.printer.Printer` once per log
call, inside the printer lock. Any module that wraps the library can set
``__pretty_log_internal__ = True`` at module level to be skipped as well.
"""

from __future__ import annotations

import inspect
import os
import threading
from dataclasses import dataclass
from typing import Callable, Final, Sequence

__pretty_log_internal__ = True

INTERNAL_MARKER: Final[str] = "__pretty_log_internal__"
MIN_STACK_OFFSET: Final[int] = 3
INDENT: Final[str] = "   "


@dataclass(frozen=True, slots=True)
class StackFrame:
    """File, line and function of one frame plus whether the library owns it."""

    file_name: str
    line_number: int
    method_name: str
    internal: bool = False


def capture_stack() -> list[StackFrame]:
    """Return the current stack with this function's own frame at index 0.

    Higher indices are outer callers. Frame objects are released before
    returning so no reference cycles outlive the call.
    """

    frames: list[StackFrame] = []
    frame = inspect.currentframe()
    try:
        while frame is not None:
            code = frame.f_code
            frames.append(
                StackFrame(
                    file_name=os.path.basename(code.co_filename),
                    line_number=frame.f_lineno,
                    method_name=code.co_name,
                    internal=bool(frame.f_globals.get(INTERNAL_MARKER, False)),
                )
            )
            frame = frame.f_back
    finally:
        del frame
    return frames


def stack_offset(frames: Sequence[StackFrame], min_offset: int = MIN_STACK_OFFSET) -> int:
    """Return the index just before the first non-library frame, or ``-1``.

    ``offset + 1`` is therefore the caller of the library. The search starts
    at *min_offset* because the capture call and the printer's own frames are
    always present below it.

    Examples
    --------
    >>> inside = StackFrame("printer.py", 1, "_log", internal=True)
    >>> outside = StackFrame("app.py", 7, "main")
    >>> stack_offset([inside, inside, inside, inside, outside])
    3
    >>> stack_offset([inside] * 5)
    -1
    """

    for index in range(min_offset, len(frames)):
        if not frames[index].internal:
            return index - 1
    return -1


def render_frames(
    frames: Sequence[StackFrame],
    method_count: int,
    offset: int,
    *,
    thread_name: str,
    show_thread_info: bool = True,
) -> list[str]:
    """Render up to *method_count* frames above *offset*, outermost first.

    Why
    ----
    Shallow stacks and oversized counts are normal, not errors: the count is
    clamped to what fits and any index still out of range is skipped for that
    frame only.

    What
    ----
    Each entry reads ``(file:line)=>function | Thread: name | `` and is
    indented three spaces deeper than the previous one. An *offset* of ``-1``
    means no caller was found and yields no lines.

    Examples
    --------
    >>> stack = [StackFrame("lib.py", 1, "log", True)] * 2 + [
    ...     StackFrame("app.py", 10, "handler"),
    ...     StackFrame("app.py", 20, "main"),
    ... ]
    >>> render_frames(stack, 2, 1, thread_name="MainThread")
    ['(app.py:20)=>main | Thread: MainThread | ', '   (app.py:10)=>handler | Thread: MainThread | ']
    """

    if offset < 0:
        return []
    total = len(frames)
    if method_count + offset > total:
        method_count = total - offset - 1

    suffix = f" | Thread: {thread_name} | " if show_thread_info else " | "
    rendered: list[str] = []
    level = ""
    for position in range(method_count, 0, -1):
        index = position + offset
        if index >= total:
            continue
        frame = frames[index]
        rendered.append(f"{level}({frame.file_name}:{frame.line_number})=>{frame.method_name}{suffix}")
        level += INDENT
    return rendered


class CallSiteInspector:
    """Capture the live stack and turn it into header lines.

    Parameters
    ----------
    stack_source:
        Callable returning frames innermost first; defaults to
        :func:`capture_stack`. Tests inject fixed stacks here.
    min_offset:
        Number of innermost frames skipped before searching for the caller.
    """

    def __init__(
        self,
        *,
        stack_source: Callable[[], Sequence[StackFrame]] = capture_stack,
        min_offset: int = MIN_STACK_OFFSET,
    ) -> None:
        self._stack_source = stack_source
        self._min_offset = min_offset

    def header_lines(self, method_count: int, *, show_thread_info: bool = True) -> list[str]:
        """Return one header string per frame for multi-line mode."""

        frames = self._stack_source()
        offset = stack_offset(frames, self._min_offset)
        return render_frames(
            frames,
            method_count,
            offset,
            thread_name=threading.current_thread().name,
            show_thread_info=show_thread_info,
        )

    def header_text(self, method_count: int, *, show_thread_info: bool = True) -> str:
        """Return the same frames concatenated for single-line mode."""

        frames = self._stack_source()
        offset = stack_offset(frames, self._min_offset)
        return "".join(
            render_frames(
                frames,
                method_count,
                offset,
                thread_name=threading.current_thread().name,
                show_thread_info=show_thread_info,
            )
        )
