"""Compiled regular expressions, cached by pattern."""

import re
import threading

_storage = {}
_lock = threading.Lock()
_NAME_CHARS = re.compile(r"[A-Za-z0-9_]*")


def register(pattern):
    """Return the compiled form of ``pattern``, compiling it on first use."""
    with _lock:
        compiled = _storage.get(pattern)
        if compiled is None:
            compiled = re.compile(pattern)
            _storage[pattern] = compiled
        return compiled


def match_string(pattern, text):
    """Return True if ``pattern`` matches anywhere in ``text``."""
    return register(pattern).search(text) is not None


def _group_text(match, name):
    if name.isdigit():
        index = int(name)
        if index > match.re.groups:
            return ""
    else:
        index = match.re.groupindex.get(name)
        if index is None:
            return ""
    return match.group(index) or ""


def _expand(template, match):
    """Expand ``$1``, ``${name}`` and ``$$`` references in ``template``."""
    out = []
    rest = template
    while rest:
        head, dollar, rest = rest.partition("$")
        out.append(head)
        if not dollar:
            break
        if rest.startswith("$"):
            out.append("$")
            rest = rest[1:]
            continue
        braced = rest.startswith("{")
        body = rest[1:] if braced else rest
        name = _NAME_CHARS.match(body).group()
        tail = body[len(name):]
        if not name or (braced and not tail.startswith("}")):
            out.append("$")
            continue
        rest = tail[1:] if braced else tail
        out.append(_group_text(match, name))
    return "".join(out)


def replace_all_string(pattern, text, repl):
    """Replace every match of ``pattern`` in ``text`` with ``repl``.

    Inside ``repl``, ``$1`` or ``${1}`` stands for the first group,
    ``${name}`` for a named group and ``$$`` for a literal dollar sign.
    """
    return register(pattern).sub(lambda match: _expand(repl, match), text)