import pytest

from ast_nodes import BinaryAdd, Identifier, Number, Print, Program, VarDecl
from errors import LangSyntaxError
from lexer import scan
from parser import Parser, parse


def parse_source(source):
    return parse(scan(source))


def test_empty_program():
    assert parse([]) == Program(())


def test_let_and_print():
    program = parse_source("let x = 2 + 3;\nprint(x);")
    assert program == Program((
        VarDecl("x", BinaryAdd(Number(2), Number(3))),
        Print(Identifier("x")),
    ))


def test_single_atom_expressions():
    program = parse_source("let a = 7; print(a);")
    assert program.body[0].expr == Number(7)
    assert program.body[1].expr == Identifier("a")


def test_parser_class_entry_point():
    program = Parser(scan("print(1 + y);")).parse_program()
    assert program.body == (Print(BinaryAdd(Number(1), Identifier("y"))),)


def test_chained_addition_is_rejected():
    with pytest.raises(LangSyntaxError) as excinfo:
        parse_source("print(1 + 2 + 3);")
    assert "Expected ')', found '+'" in str(excinfo.value)


def test_chained_addition_in_let_is_rejected():
    with pytest.raises(LangSyntaxError) as excinfo:
        parse_source("let x = 1 + 2 + 3;")
    assert "Expected ';', found '+'" in str(excinfo.value)


def test_missing_let_is_unknown_statement():
    with pytest.raises(LangSyntaxError) as excinfo:
        parse_source("x = 5;")
    assert "Unknown statement: 'x'" in str(excinfo.value)


def test_error_message_has_position():
    with pytest.raises(LangSyntaxError) as excinfo:
        parse_source("let a = 1;\nprint(a +);")
    error = excinfo.value
    assert (error.line, error.column) == (2, 10)
    assert str(error) == "Line 2:10 - Expected number or identifier, found ')'"


def test_end_of_input_where_token_expected():
    with pytest.raises(LangSyntaxError) as excinfo:
        parse_source("let x = 1")
    assert str(excinfo.value) == "Expected ';', found <end>"
    assert excinfo.value.line is None


def test_end_of_input_where_atom_expected():
    with pytest.raises(LangSyntaxError) as excinfo:
        parse_source("print(")
    assert str(excinfo.value) == "Expected number or identifier, found <end>"


def test_let_requires_identifier_name():
    with pytest.raises(LangSyntaxError) as excinfo:
        parse_source("let 5 = 3;")
    assert "Expected identifier, found '5'" in str(excinfo.value)


def test_keyword_is_not_an_atom():
    with pytest.raises(LangSyntaxError) as excinfo:
        parse_source("print(let);")
    assert "Expected number or identifier, found 'let'" in str(excinfo.value)


def test_print_requires_parentheses():
    with pytest.raises(LangSyntaxError) as excinfo:
        parse_source("print x;")
    assert "Expected '(', found 'x'" in str(excinfo.value)


def test_stops_at_first_error():
    with pytest.raises(LangSyntaxError) as excinfo:
        parse_source("let = 1; print(;")
    assert "Expected identifier, found '='" in str(excinfo.value)


def test_syntax_error_is_a_builtin_syntax_error():
    with pytest.raises(SyntaxError):
        parse_source(";")
