"""
Syntax Shape Detectors

Detectors are pure functions that answer: "Does this node have this shape?"

Design principles:
- Return bool only (no tri-state, no UNKNOWN)
- Stateless (no history, no configuration, no memoization)
- Never mutate the tree
- No reporting, no messages

Ambiguity handling:
- Missing or malformed sub-nodes → return False
- Detectors never raise for any node shape
"""
from .declarations import (
    is_commonjs_import,
    is_plain_require_call,
    is_safe_declaration,
    is_safe_initializer,
    is_selective_require,
)
from .exports import is_export_assignment, is_export_target
from .scope import MODULE_ROOT, TRANSPARENT_SCOPES, is_top_level
from .utils import (
    is_function_call,
    is_identifier,
    is_member_expression,
    is_member_function_call,
)

__all__ = [
    'MODULE_ROOT',
    'TRANSPARENT_SCOPES',
    'is_commonjs_import',
    'is_export_assignment',
    'is_export_target',
    'is_function_call',
    'is_identifier',
    'is_member_expression',
    'is_member_function_call',
    'is_plain_require_call',
    'is_safe_declaration',
    'is_safe_initializer',
    'is_selective_require',
    'is_top_level',
]
