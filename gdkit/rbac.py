"""Role-based access control with a file-backed policy store.

Requests are ``(subject, object, action)``. A request is allowed when some
policy ``(sub, obj, act)`` exists such that the subject is, or inherits the
role, ``sub``; the object matches ``obj`` under :func:`key_match2`; and the
action equals ``act`` or ``act`` is ``*``.
"""

import csv
import os
import threading
from collections import deque
from enum import Enum
from pathlib import Path

from .regexcache import match_string, replace_all_string

_MAX_HIERARCHY_LEVEL = 10


class Role(str, Enum):
    """Built-in role names."""

    SUPER_ADMIN = "super_admin"
    ADMIN = "admin"
    USER = "user"

    def __str__(self):
        return self.value


def key_match2(key1, key2):
    """Return True if path ``key1`` matches pattern ``key2``.

    In ``key2``, ``/*`` matches any rest of the path and ``:name`` matches
    one path segment.
    """
    pattern = key2.replace("/*", "/.*")
    pattern = replace_all_string(r":[^/]+", pattern, "[^/]+")
    return match_string("^" + pattern + r"\z", key1) if False else match_string(
        "^" + pattern + r"\Z", key1
    )


def _role_name(role):
    return role.value if isinstance(role, Role) else str(role)


class Manager:
    """Holds policies and role assignments and answers access questions."""

    def __init__(self, enable, policy_file):
        path = Path(os.path.normpath(os.fspath(policy_file)))
        if not path.exists():
            path.touch()
        self._enable = enable
        self._policy_file = path
        self._policies = []
        self._groupings = []
        self._lock = threading.RLock()
        self._load()

    def _load(self):
        text = self._policy_file.read_text(encoding="utf-8")
        for number, line in enumerate(text.splitlines(), start=1):
            line = line.strip()
            if not line or line.startswith("#"):
                continue
            tokens = [token.strip() for token in next(csv.reader([line]))]
            ptype, values = tokens[0], tuple(tokens[1:])
            if ptype == "p":
                if len(values) != 3:
                    raise ValueError(f"line {number}: policy needs sub, obj, act")
                if values not in self._policies:
                    self._policies.append(values)
            elif ptype == "g":
                if len(values) != 2:
                    raise ValueError(f"line {number}: role rule needs user, role")
                if values not in self._groupings:
                    self._groupings.append(values)
            else:
                raise ValueError(f"line {number}: unknown policy type {ptype!r}")

    def _direct_roles(self, user):
        return [role for member, role in self._groupings if member == user]

    def _has_link(self, name, role):
        if name == role:
            return True
        seen = {name}
        queue = deque([(name, 0)])
        while queue:
            current, level = queue.popleft()
            if level >= _MAX_HIERARCHY_LEVEL:
                continue
            for parent in self._direct_roles(current):
                if parent == role:
                    return True
                if parent not in seen:
                    seen.add(parent)
                    queue.append((parent, level + 1))
        return False

    def add_role_for_user(self, user, role):
        """Give ``user`` the role; return False if it already had it."""
        rule = (user, _role_name(role))
        with self._lock:
            if rule in self._groupings:
                return False
            self._groupings.append(rule)
            return True

    def delete_role_for_user(self, user, role):
        """Take the role from ``user``; return False if it did not have it."""
        rule = (user, _role_name(role))
        with self._lock:
            if rule not in self._groupings:
                return False
            self._groupings.remove(rule)
            return True

    def has_role_for_user(self, user, role):
        """Return True if ``user`` was given the role directly."""
        with self._lock:
            return _role_name(role) in self._direct_roles(user)

    def get_roles_for_user(self, user):
        """Return the roles given directly to ``user``, in the order they were added."""
        with self._lock:
            return self._direct_roles(user)

    def add_policy(self, sub, obj, act):
        """Allow ``sub`` to do ``act`` on ``obj``; return False if already allowed."""
        rule = (_role_name(sub), obj, act)
        with self._lock:
            if rule in self._policies:
                return False
            self._policies.append(rule)
            return True

    def enforce(self, sub, obj, act):
        """Return True if ``sub`` may do ``act`` on ``obj``; always True when disabled."""
        if not self._enable:
            return True
        with self._lock:
            return any(
                self._has_link(sub, p_sub)
                and key_match2(obj, p_obj)
                and (act == p_act or p_act == "*")
                for p_sub, p_obj, p_act in self._policies
            )

    def assign_user_role(self, user_id, *args):
        """Give the user with numeric id ``user_id`` each of the roles in ``args``."""
        user = str(int(user_id))
        for role in args:
            self.add_role_for_user(user, role)