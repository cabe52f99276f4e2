"""Trimming of stack traces down to the lines that matter."""

PANIC_KEYWORD = b"src/runtime/panic.go"
COMPANY_KEYWORD = b"example.com/acme"
FUNCTION_PACKAGE_KEYWORD = b"/example.com/acme/gdk/pkg/stack/"
PROJECT_KEYWORD = "example.com/acme/gdk"


def _cut_before(data, keyword):
    index = data.find(keyword)
    return data[index:] if index >= 0 else data


def trim(stack):
    """Drop everything before the panic and company keywords.

    Also drops everything after the line holding this package's own location.
    """
    if stack is None:
        return None
    stack = _cut_before(stack, PANIC_KEYWORD)
    stack = _cut_before(stack, COMPANY_KEYWORD)
    index = stack.find(FUNCTION_PACKAGE_KEYWORD)
    if index != -1:
        newline = stack.find(b"\n", index)
        if newline != -1:
            return stack[: newline + 1]
    return stack


def to_list(stack):
    """Split a stack trace into non-empty lines, cutting text before the project keyword."""
    if stack is None:
        return None
    if isinstance(stack, (bytes, bytearray)):
        stack = stack.decode("utf-8", errors="replace")
    return [_cut_before(line, PROJECT_KEYWORD) for line in stack.split("\n") if line]