"""
Unit tests for syntax shape detectors.

Tests demonstrate positive matches, negative matches, and edge cases.
"""
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from nomodside.detectors import (
    is_commonjs_import,
    is_export_assignment,
    is_export_target,
    is_function_call,
    is_identifier,
    is_member_expression,
    is_member_function_call,
    is_plain_require_call,
    is_safe_declaration,
    is_safe_initializer,
    is_selective_require,
    is_top_level,
)
from nomodside.nodes import from_estree, parse_source


def parse_code(code: str):
    """Parse JavaScript code into a Node tree."""
    return parse_source(code)


def first_statement(code: str):
    return parse_code(code).get("body")[0]


def expression_of(code: str):
    """The expression of the first (expression) statement."""
    return first_statement(code).get("expression")


def init_of(code: str):
    """The initializer of the first declarator of the first statement."""
    return first_statement(code).get("declarations")[0].get("init")


# Shape Matcher Tests

def test_is_identifier():
    node = expression_of("foo;")
    assert is_identifier(node) == True, "Should match any identifier"
    assert is_identifier(node, "foo") == True, "Should match by name"
    assert is_identifier(node, "bar") == False, "Should not match other name"

    # Edge: not an identifier
    assert is_identifier(expression_of("1;")) == False
    assert is_identifier(None) == False, "Missing node is a non-match"


def test_is_function_call():
    assert is_function_call(expression_of("require('fs');"), "require") == True
    assert is_function_call(expression_of("load('fs');"), "require") == False

    # Negative: member call is not a plain function call
    assert is_function_call(expression_of("a.require('fs');"), "require") == False

    # Negative: not a call
    assert is_function_call(expression_of("require;"), "require") == False
    assert is_function_call(None, "require") == False


def test_is_member_expression():
    node = expression_of("module.exports;")
    assert is_member_expression(node, "module", "exports") == True
    assert is_member_expression(node, "module") == True, "Property name is optional"
    assert is_member_expression(node, "module", "id") == False
    assert is_member_expression(node, "exports") == False

    # Negative: object is not an identifier
    assert is_member_expression(expression_of("a.b.c;"), "a") == False

    # Negative: property must be an identifier
    assert is_member_expression(expression_of("exports['x'];"), "exports") == False

    assert is_member_expression(None, "module") == False


def test_is_member_function_call():
    node = expression_of("Object.freeze({});")
    assert is_member_function_call(node, "Object", "freeze") == True
    assert is_member_function_call(node, "Object", "assign") == False
    assert is_member_function_call(expression_of("freeze({});"), "Object", "freeze") == False
    assert is_member_function_call(expression_of("Object.freeze;"), "Object", "freeze") == False


def test_malformed_nodes_do_not_raise():
    # A call node whose callee field is missing entirely
    call = from_estree({"type": "CallExpression", "arguments": []})
    assert is_function_call(call, "require") == False
    assert is_member_function_call(call, "Object", "freeze") == False
    assert is_selective_require(call) == False

    # A member node with no object/property
    member = from_estree({"type": "MemberExpression"})
    assert is_member_expression(member, "module") == False
    assert is_export_target(member) == False


# Scope Tests

def test_top_level_statements():
    program = parse_code("a(); { b(); { c(); } }")
    body = program.get("body")

    assert is_top_level(body[0]) == True, "Direct child of the module root"

    block = body[1]
    assert is_top_level(block) == True, "A bare block is itself top level"

    inner = block.get("body")[0]
    assert is_top_level(inner) == True, "Bare blocks are transparent"

    nested_block_stmt = block.get("body")[1].get("body")[0]
    assert is_top_level(nested_block_stmt) == True, "Nested bare blocks are transparent"


def test_nested_statements_are_not_top_level():
    cases = {
        "function f() { a(); }": lambda p: p.get("body")[0].get("body").get("body")[0],
        "if (x) { a(); }": lambda p: p.get("body")[0].get("consequent").get("body")[0],
        "if (x) a();": lambda p: p.get("body")[0].get("consequent"),
        "while (x) { a(); }": lambda p: p.get("body")[0].get("body").get("body")[0],
        "for (;;) { a(); }": lambda p: p.get("body")[0].get("body").get("body")[0],
        "try { a(); } catch (e) {}": lambda p: p.get("body")[0].get("block").get("body")[0],
        "class A { m() { a(); } }": lambda p: (
            p.get("body")[0].get("body").get("body")[0]
            .get("value").get("body").get("body")[0]
        ),
    }
    for code, pick in cases.items():
        node = pick(parse_code(code))
        assert is_top_level(node) == False, f"Should not be top level: {code}"


def test_always_true_condition_is_still_nested():
    """Single-hop opacity: the body of `if (true)` is not top level."""
    program = parse_code("if (true) { a(); }")
    inner = program.get("body")[0].get("consequent").get("body")[0]
    assert is_top_level(inner) == False


def test_scope_edge_cases():
    program = parse_code("a();")
    assert is_top_level(program) == False, "Root has no parent"
    assert is_top_level(None) == False

    # A block that is not attached to anything
    orphan = from_estree({
        "type": "BlockStatement",
        "body": [{"type": "EmptyStatement"}],
    })
    assert is_top_level(orphan.get("body")[0]) == False


# Declaration Tests

def test_require_calls():
    assert is_plain_require_call(init_of("const fs = require('fs');")) == True
    assert is_plain_require_call(init_of("const fs = load('fs');")) == False

    assert is_selective_require(init_of("const r = require('fs').readFile;")) == True
    assert is_selective_require(init_of("const r = require('fs').promises();")) == True
    assert is_selective_require(init_of("const r = require('fs');")) == False
    assert is_selective_require(init_of("const r = other('fs').readFile;")) == False


def test_is_commonjs_import():
    assert is_commonjs_import(first_statement("const fs = require('fs');")) == True
    assert is_commonjs_import(
        first_statement("const a = require('a'), b = require('b').b;")
    ) == True

    # All or nothing: one failing declarator rejects the statement
    assert is_commonjs_import(
        first_statement("const a = require('a'), b = compute();")
    ) == False

    # Edge: not a declaration
    assert is_commonjs_import(first_statement("require('a');")) == False


def test_is_safe_initializer():
    safe = [
        "const f = () => 1;",
        "const f = function () {};",
        "const f = function named() {};",
        "const n = 42;",
        "const s = 'text';",
        "const t = `template`;",
        "const k = Symbol('key');",
        "const c = Object.freeze({ a: 1 });",
    ]
    for code in safe:
        assert is_safe_initializer(init_of(code)) == True, f"Should be safe: {code}"

    unsafe = [
        "const c = computeConfig();",
        "const o = { a: 1 };",
        "const a = [1, 2];",
        "const c = Object.assign({}, x);",
        "const c = new Map();",
        "const i = other;",
    ]
    for code in unsafe:
        assert is_safe_initializer(init_of(code)) == False, f"Should not be safe: {code}"

    assert is_safe_initializer(None) == False


def test_is_safe_declaration():
    assert is_safe_declaration(first_statement("const a = 1, b = 'x';")) == True
    assert is_safe_declaration(first_statement("const a = 1, b = make();")) == False

    # Missing initializer fails the declarator
    assert is_safe_declaration(first_statement("let a;")) == False


# Export Tests

def test_is_export_target():
    targets = [
        "module.exports;",
        "module.exports.name;",
        "exports;",
        "exports.name;",
    ]
    for code in targets:
        assert is_export_target(expression_of(code)) == True, f"Should be export: {code}"

    not_targets = ["module;", "module.id;", "foo.exports;", "window.x;"]
    for code in not_targets:
        assert is_export_target(expression_of(code)) == False, f"Not export: {code}"


def test_is_export_assignment():
    assert is_export_assignment(expression_of("module.exports = {};")) == True
    assert is_export_assignment(expression_of("exports.a = 1;")) == True
    assert is_export_assignment(expression_of("exports = {};")) == True

    assert is_export_assignment(expression_of("window.a = 1;")) == False
    assert is_export_assignment(expression_of("module.exports;")) == False
    assert is_export_assignment(expression_of("setup(module.exports);")) == False


def test_computed_export_targets():
    """Computed access is not inspected: only the property's node type counts."""
    assert is_export_assignment(expression_of("exports[name] = value;")) == True
    assert is_export_assignment(expression_of("module.exports[name] = value;")) == True

    assert is_export_assignment(expression_of("exports['name'] = value;")) == False
    assert is_export_assignment(expression_of("module['exports'] = value;")) == False
