"""
The class `Node` can be subclassed to define the abstract syntax tree
built by TagNode.  TagNode calls the node class with the values captured by
its rules as positional arguments, then attaches the source span and, when
the cursor asks for it, the node's kind:

    class Number(rdparse.Node):
        def __init__(self, digits):
            super().__init__()
            self.value = int(digits)

    number = rdparse.TagNode(Number, rdparse.Pattern(r"([0-9]+)"))

Any other callable works as a TagNode constructor too; its results get a
span and kind only if they can hold attributes.
"""

from __future__ import annotations
from typing import Any, Optional

from mypy_extensions import mypyc_attr

from rdparse.result import Span


@mypyc_attr(serializable=True, allow_interpreted_subclasses=True)
class Node:
    span: Optional[Span]
    kind: Optional[str]

    def __init__(self) -> None:
        self.span = None
        self.kind = None

    def __eq__(self, other: Any) -> bool:
        if type(self) is type(other):
            return _fields(self) == _fields(other)
        else:
            return NotImplemented

    def __repr__(self) -> str:
        fields = _fields(self)
        return "%s(%s)" % (
            type(self).__name__,
            ", ".join("%s=%r" % item for item in sorted(fields.items())),
        )


def _fields(node: Node) -> dict[str, Any]:
    """Attributes of `node`, other than its span and kind."""
    return {
        k: v for k, v in vars(node).items() if k not in ("span", "kind")
    }
