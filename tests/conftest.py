from __future__ import annotations

from dash.development.base_component import Component


def collect_text(node) -> list[str]:
    """Flatten every string child of a Dash component tree, in render order."""
    if node is None:
        return []
    if isinstance(node, str):
        return [node]
    if isinstance(node, (list, tuple)):
        out = []
        for child in node:
            out.extend(collect_text(child))
        return out
    if isinstance(node, Component):
        return collect_text(getattr(node, "children", None))
    return []

def find_by_class(node, class_name: str) -> list:
    """Return every component whose className contains ``class_name``."""
    found = []
    if isinstance(node, (list, tuple)):
        for child in node:
            found.extend(find_by_class(child, class_name))
        return found
    if isinstance(node, Component):
        classes = (getattr(node, "className", None) or "").split()
        if class_name in classes:
            found.append(node)
        found.extend(find_by_class(getattr(node, "children", None), class_name))
    return found
