"""Input validation and sanitization for todo fields."""

from typing import Any

from todoql.core.errors import FieldError, ValidationError

TASK_MAX_LENGTH = 100

# Whitespace and line terminators removed by ECMAScript String.prototype.trim
TRIM_CHARS = (
    "\t\n\v\f\r \u00a0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000\ufeff"
)

_HTML_ESCAPES = str.maketrans(
    {
        "&": "&amp;",
        '"': "&quot;",
        "'": "&#x27;",
        "<": "&lt;",
        ">": "&gt;",
        "/": "&#x2F;",
        "\\": "&#x5C;",
        "`": "&#96;",
    }
)


def escape(value: str) -> str:
    """HTML-escape a string so embedded markup cannot be reflected verbatim.

    Args:
        value: The raw string.

    Returns:
        The escaped string.
    """
    return value.translate(_HTML_ESCAPES)


def sanitize_task(task: str) -> str:
    """Trim and escape a task before it is persisted."""
    return escape(task.strip(TRIM_CHARS))


def task_constraints(task: str) -> dict[str, str]:
    """Return the failed constraints for a task, keyed by rule name.

    Constraints are checked against the trimmed, unescaped value.
    """
    trimmed = task.strip(TRIM_CHARS)
    failed: dict[str, str] = {}
    if not trimmed:
        failed["isNotEmpty"] = "task should not be empty"
    if len(trimmed) > TASK_MAX_LENGTH:
        failed["maxLength"] = (
            f"task must be shorter than or equal to {TASK_MAX_LENGTH} characters"
        )
    return failed


def validate_task(task: str, target: dict[str, Any] | None = None) -> None:
    """Validate a task value.

    Args:
        task: The submitted task.
        target: The whole input object, echoed back in the error.

    Raises:
        ValidationError: If any constraint fails.
    """
    constraints = task_constraints(task)
    if constraints:
        raise ValidationError(
            [
                FieldError(
                    property="task",
                    value=task,
                    constraints=constraints,
                    target=target if target is not None else {"task": task},
                )
            ]
        )
