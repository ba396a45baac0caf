"""
Source signature rendering

Turns ``com.example.Foo`` / ``bar`` into ``c.e.Foo.bar()``.
"""

from typing import Optional


def simplify_class_name(class_name: Optional[str]) -> str:
    """
    Abbreviate every package segment of a dotted name to its first character.

    Args:
        class_name: Dotted name such as ``com.example.Foo``

    Returns:
        Abbreviated name such as ``c.e.Foo``; empty for a missing name
    """
    if not class_name:
        return ""
    *packages, last = class_name.split(".")
    return ".".join([segment[:1] for segment in packages] + [last])


def build_signature(class_name: Optional[str], method_name: Optional[str]) -> str:
    """
    Build ``<simplified class>.<method>()``.

    A missing method keeps the call shape (``c.e.Foo.()``); a missing class
    drops the class part and its dot (``bar()``).
    """
    call = f"{method_name or ''}()"
    simplified = simplify_class_name(class_name)
    if simplified:
        return f"{simplified}.{call}"
    if method_name:
        return call
    return ""
