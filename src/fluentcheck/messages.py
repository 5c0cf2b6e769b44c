"""Failure message rendering shared by every check.

Every failure renders to the same block::

    <custom prefix, if any>
    The checked value is different from the expected one.
    The checked value:
    \t[1]
    The expected value:
    \t[2]

Sentences are written with ``{checked}`` and ``{expected}`` placeholders,
which become "checked value"/"expected value", or "checked [answer]" once
the subject was named with ``as_("answer")``.
"""

from __future__ import annotations

from typing import Any

_UNSET = object()


def escape_braces(text: str) -> str:
    """Escape text so it can be embedded in a message sentence verbatim."""
    return text.replace("{", "{{").replace("}", "}}")


def format_value(value: Any, max_length: int | None = None) -> str:
    text = repr(value)
    if max_length is not None and len(text) > max_length:
        text = text[:max_length] + "..."
    return f"[{text}]"


class FluentMessage:
    """Builder for a failure message.

    The checked value is attached with ``on``, the expected value with
    ``expected`` and an optional comparison verb ("after", "different
    from") with ``comparison``. ``str()`` renders the final text.
    """

    def __init__(
        self,
        sentence: str,
        *,
        prefix: str | None = None,
        label: str | None = None,
        max_value_length: int | None = None,
    ):
        self.sentence = sentence
        self.prefix = prefix
        self.label = label
        self.max_value_length = max_value_length
        self._checked: Any = _UNSET
        self._expected: Any = _UNSET
        self._comparison: str | None = None

    @property
    def noun(self) -> str:
        return f"[{self.label}]" if self.label else "value"

    def on(self, value: Any) -> FluentMessage:
        self._checked = value
        return self

    @property
    def and_(self) -> FluentMessage:
        return self

    def expected(self, value: Any) -> FluentMessage:
        self._expected = value
        return self

    def comparison(self, verb: str | None) -> FluentMessage:
        self._comparison = verb
        return self

    def render(self) -> str:
        noun = self.noun
        lines: list[str] = []
        if self.prefix:
            lines.append(self.prefix)
        lines.append(
            self.sentence.format(checked=f"checked {noun}", expected=f"expected {noun}")
        )
        if self._checked is not _UNSET:
            lines.append(f"The checked {noun}:")
            lines.append("\t" + format_value(self._checked, self.max_value_length))
        if self._expected is not _UNSET:
            header = f"The expected {noun}:"
            if self._comparison:
                header = f"{header} {self._comparison}"
            lines.append(header)
            lines.append("\t" + format_value(self._expected, self.max_value_length))
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"FluentMessage({self.sentence!r})"


def build_message(
    sentence: str,
    *,
    prefix: str | None = None,
    subject_label: str | None = None,
    subject_value: Any = _UNSET,
    comparison_verb: str | None = None,
    expected_value: Any = _UNSET,
    max_value_length: int | None = None,
) -> str:
    """Render a failure message in one call."""
    message = FluentMessage(
        sentence, prefix=prefix, label=subject_label, max_value_length=max_value_length
    )
    if subject_value is not _UNSET:
        message.on(subject_value)
    if expected_value is not _UNSET:
        message.expected(expected_value).comparison(comparison_verb)
    return message.render()
