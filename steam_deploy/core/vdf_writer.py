# steam_deploy/core/vdf_writer.py
"""Structured writer for Valve KeyValues (VDF) text documents"""

from dataclasses import dataclass, field
from typing import List, Optional

INDENT = "\t"

_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}


def escape(value: object) -> str:
    """
    Escape a key or value for a quoted VDF string

    Args:
        value: Value to escape (converted with ``str``)

    Returns:
        Escaped text safe to place between double quotes
    """
    return "".join(_ESCAPES.get(ch, ch) for ch in str(value))


@dataclass
class VdfNode:
    """A key/value pair or a named block of child nodes"""

    key: str
    value: Optional[str] = None
    children: Optional[List['VdfNode']] = None
    comment: Optional[str] = None

    @property
    def is_block(self) -> bool:
        return self.children is not None

    def add(self, key: str, value: object, comment: Optional[str] = None) -> 'VdfNode':
        """Append a key/value pair and return this block"""
        self._require_block()
        self.children.append(VdfNode(key, str(value), comment=comment))
        return self

    def add_optional(self, key: str, value: Optional[object]) -> 'VdfNode':
        """Append a key/value pair only when value is given"""
        if value is not None and value != "":
            self.add(key, value)
        return self

    def block(self, key: str) -> 'VdfNode':
        """Append a nested block and return it"""
        self._require_block()
        child = VdfNode(key, children=[])
        self.children.append(child)
        return child

    def _require_block(self) -> None:
        if not self.is_block:
            raise TypeError(f"VDF node '{self.key}' holds a value, not a block")

    def render_lines(self, depth: int = 0) -> List[str]:
        pad = INDENT * depth
        if not self.is_block:
            line = f'{pad}"{escape(self.key)}" "{escape(self.value)}"'
            if self.comment:
                line += f" // {self.comment}"
            return [line]

        lines = [f'{pad}"{escape(self.key)}"', f"{pad}{{"]
        for child in self.children:
            lines.extend(child.render_lines(depth + 1))
        lines.append(f"{pad}}}")
        return lines


@dataclass
class VdfDocument:
    """A VDF document with a single root block"""

    root_key: str
    root: VdfNode = field(init=False)

    def __post_init__(self):
        self.root = VdfNode(self.root_key, children=[])

    def add(self, key: str, value: object, comment: Optional[str] = None) -> VdfNode:
        return self.root.add(key, value, comment)

    def add_optional(self, key: str, value: Optional[object]) -> VdfNode:
        return self.root.add_optional(key, value)

    def block(self, key: str) -> VdfNode:
        return self.root.block(key)

    def render(self) -> str:
        """Render the document; the closing root brace has no trailing newline"""
        return "\n".join(self.root.render_lines())
