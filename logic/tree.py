# logic/tree.py
"""
Diagnostic tree returned by the engine, and its rendering contract.

render() turns a DiagnosticNode into a tree of RenderedPanel records that a
concrete renderer (the Streamlit components, or a snapshot in tests) walks
in depth-first pre-order. A node carrying an error is terminal: it renders
as a single error panel whatever else the payload holds.
No Streamlit dependencies.
"""

from dataclasses import dataclass, field
from typing import Any, Iterator, List, Mapping, Optional, Tuple

from utils.constants import EMPTY_MARKER, EMPTY_PANEL_TEXT
from .topics import TopicMeta, get_topic_meta

ROOT = "root"
SECTION = "section"
ERROR = "error"
HEX = "hex"
ATTRIBUTE = "attribute"
EMPTY = "empty"


def _opt_str(value: Any) -> Optional[str]:
    if value is None:
        return None
    return value if isinstance(value, str) else str(value)


@dataclass(frozen=True)
class Attribute:
    topic: Optional[str] = None
    value: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Attribute":
        return cls(topic=_opt_str(data.get("topic")), value=_opt_str(data.get("value")))


@dataclass(frozen=True)
class DiagnosticNode:
    topic: Optional[str] = None
    identity: Optional[str] = None
    error: Optional[str] = None
    attributes: Tuple[Attribute, ...] = ()
    bytes: Optional[str] = None
    children: Tuple["DiagnosticNode", ...] = ()

    @property
    def is_error(self) -> bool:
        return bool(self.error)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "DiagnosticNode":
        """Build a node from the engine's mapping; missing sequences become empty."""
        if isinstance(data, DiagnosticNode):
            return data
        data = data or {}
        return cls(
            topic=_opt_str(data.get("topic")),
            identity=_opt_str(data.get("identity")),
            error=_opt_str(data.get("error")),
            attributes=tuple(
                a if isinstance(a, Attribute) else Attribute.from_dict(a)
                for a in (data.get("attributes") or [])
            ),
            bytes=_opt_str(data.get("bytes")),
            children=tuple(cls.from_dict(c) for c in (data.get("children") or [])),
        )

    @classmethod
    def failure(cls, message: str, topic: Optional[str] = None) -> "DiagnosticNode":
        return cls(topic=topic, error=message)


@dataclass
class RenderedPanel:
    kind: str
    title: str = ""
    text: Optional[str] = None
    description: Optional[str] = None
    key: str = ROOT
    children: List["RenderedPanel"] = field(default_factory=list)


def _error_panel(node: DiagnosticNode, meta: TopicMeta, key: str) -> RenderedPanel:
    return RenderedPanel(ERROR, title=meta.title, text=node.error, description=meta.description, key=key)


def render(node: DiagnosticNode, catalog: Mapping[str, TopicMeta], root: bool = True) -> RenderedPanel:
    """
    Render a diagnostic tree into panels.

    Args:
        node: Tree to render
        catalog: Topic key -> TopicMeta used to resolve titles/descriptions
        root: Whether ``node`` is the top of the page (root panel kind)

    Returns:
        The top RenderedPanel; nested sections are in ``children``
    """
    meta = get_topic_meta(node.topic, catalog)
    if node.is_error:
        return _error_panel(node, meta, ROOT)

    top = RenderedPanel(ROOT if root else SECTION, title=meta.title, description=meta.description, key=ROOT)
    stack: List[Tuple[DiagnosticNode, RenderedPanel]] = [(node, top)]
    while stack:
        current, panel = stack.pop()
        if current.bytes:
            panel.children.append(RenderedPanel(HEX, title=f"{panel.title} CBOR (hex)".strip(),
                                                text=current.bytes, key=f"{panel.key}/bytes"))
        for i, attr in enumerate(current.attributes):
            attr_meta = get_topic_meta(attr.topic, catalog)
            panel.children.append(RenderedPanel(
                ATTRIBUTE, title=attr_meta.title, text=attr.value or EMPTY_MARKER,
                description=attr_meta.description, key=f"{panel.key}/attr{i}:{attr.topic or ''}",
            ))
        pending: List[Tuple[DiagnosticNode, RenderedPanel]] = []
        for i, child in enumerate(current.children):
            child_meta = get_topic_meta(child.topic, catalog)
            child_key = f"{panel.key}/{i}:{child.identity or child.topic or ''}"
            if child.is_error:
                panel.children.append(_error_panel(child, child_meta, child_key))
                continue
            child_panel = RenderedPanel(SECTION, title=child_meta.title,
                                        description=child_meta.description, key=child_key)
            panel.children.append(child_panel)
            pending.append((child, child_panel))
        if not current.attributes and not current.children and not current.bytes:
            panel.children.append(RenderedPanel(EMPTY, text=EMPTY_PANEL_TEXT, key=f"{panel.key}/empty"))
        # children are filled independently, so stack order only affects build order
        stack.extend(reversed(pending))
    return top


def iter_panels(panel: RenderedPanel) -> Iterator[Tuple[int, RenderedPanel]]:
    """Yield (depth, panel) depth-first, pre-order, children in order."""
    stack: List[Tuple[int, RenderedPanel]] = [(0, panel)]
    while stack:
        depth, current = stack.pop()
        yield depth, current
        stack.extend((depth + 1, c) for c in reversed(current.children))


def outline(panel: RenderedPanel) -> List[str]:
    """Flat text snapshot of a rendered tree."""
    return [f"{depth}|{p.kind}|{p.title}|{p.text or ''}" for depth, p in iter_panels(panel)]


def iter_nodes(node: DiagnosticNode) -> Iterator[DiagnosticNode]:
    """Depth-first pre-order over the nodes (error nodes are not descended into)."""
    stack = [node]
    while stack:
        current = stack.pop()
        yield current
        if not current.is_error:
            stack.extend(reversed(current.children))


def find_attribute(node: DiagnosticNode, topic: str) -> Optional[str]:
    """First attribute value with ``topic`` anywhere in the tree, in traversal order."""
    for current in iter_nodes(node):
        for attr in current.attributes:
            if attr.topic == topic:
                return attr.value
    return None
