"""Configuration objects shared across OrderTreeLib.

Traversal order selection and rendering options live here so the tree,
the iterators and the high-level API agree on one vocabulary.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Union


class TraversalOrder(Enum):
    """Order in which a binary tree snapshot is emitted."""
    IN_ORDER = "in_order"      # left, node, right
    PRE_ORDER = "pre_order"    # node, left, right
    POST_ORDER = "post_order"  # left, right, node


_ORDER_ALIASES = {
    'in': TraversalOrder.IN_ORDER,
    'inorder': TraversalOrder.IN_ORDER,
    'in_order': TraversalOrder.IN_ORDER,
    'sorted': TraversalOrder.IN_ORDER,
    'pre': TraversalOrder.PRE_ORDER,
    'preorder': TraversalOrder.PRE_ORDER,
    'pre_order': TraversalOrder.PRE_ORDER,
    'post': TraversalOrder.POST_ORDER,
    'postorder': TraversalOrder.POST_ORDER,
    'post_order': TraversalOrder.POST_ORDER,
}


def parse_order(order: Union[TraversalOrder, str]) -> TraversalOrder:
    """Parse a traversal order from an enum member or alias string.

    Args:
        order: ``TraversalOrder`` member or a name such as ``"pre"``,
            ``"inorder"`` or ``"post_order"`` (case-insensitive, ``-``
            accepted in place of ``_``)

    Returns:
        TraversalOrder enum value

    Raises:
        ValueError: If the name is not recognized
    """
    if isinstance(order, TraversalOrder):
        return order

    key = str(order).strip().lower().replace('-', '_')
    if key in _ORDER_ALIASES:
        return _ORDER_ALIASES[key]

    raise ValueError(
        f"Unknown traversal order: {order}. "
        f"Choose from: {', '.join(_ORDER_ALIASES.keys())}"
    )


@dataclass
class RenderConfig:
    """Options for the textual renderings of a tree.

    Attributes:
        indent: Padding added per depth level beyond the first
        branch: Marker placed before every non-root element
        placeholder: Text printed for an absent child slot
        separator: Separator used by the flat ``[a, b, c]`` rendering
    """
    indent: str = "   "
    branch: str = "|--"
    placeholder: str = "null"
    separator: str = ", "

    def validate(self) -> List[str]:
        """Check the configuration for problems.

        Returns:
            List of human-readable problems, empty when the config is usable
        """
        errors = []
        for name in ('indent', 'branch', 'placeholder', 'separator'):
            value = getattr(self, name)
            if not isinstance(value, str):
                errors.append(f"{name} must be a string, got {type(value).__name__}")
            elif '\n' in value:
                errors.append(f"{name} must not contain line breaks")
        if isinstance(self.placeholder, str) and not self.placeholder:
            errors.append("placeholder must not be empty")
        return errors
