from lexer import TokenType
from ast_nodes import Number, Identifier, BinaryAdd, VarDecl, Print, Program
from errors import LangSyntaxError

TOKEN_NAMES = {
    TokenType.ID: "identifier",
    TokenType.EQUALS: "'='",
    TokenType.SEMICOLON: "';'",
    TokenType.LPAREN: "'('",
    TokenType.RPAREN: "')'",
}

def describe(token):
    if token is None:
        return "<end>"
    return f"'{token.value}'"

class Parser:
    def __init__(self, tokens):
        self.tokens = list(tokens)
        self.pos = 0
        self.current_token = self.tokens[0] if self.tokens else None

    def advance(self):
        self.pos += 1
        if self.pos < len(self.tokens):
            self.current_token = self.tokens[self.pos]
        else:
            self.current_token = None

    def error(self, message):
        token = self.current_token
        if token is None:
            return LangSyntaxError(message)
        return LangSyntaxError(message, token.line, token.column)

    def check(self, token_type):
        return self.current_token is not None and self.current_token.type == token_type

    def expect(self, token_type):
        if not self.check(token_type):
            raise self.error(
                f"Expected {TOKEN_NAMES[token_type]}, found {describe(self.current_token)}"
            )
        token = self.current_token
        self.advance()
        return token

    def parse_atom(self):
        """Atom := NUMBER | IDENT"""
        if self.check(TokenType.NUMBER):
            return Number(self.expect(TokenType.NUMBER).value)
        if self.check(TokenType.ID):
            return Identifier(self.expect(TokenType.ID).value)
        raise self.error(
            f"Expected number or identifier, found {describe(self.current_token)}"
        )

    def parse_expression(self):
        """
        Expr := Atom ('+' Atom)?

        Only one addition is recognized; a second '+' is left for the
        caller, which then fails on the token it expected instead.
        """
        left = self.parse_atom()
        if self.check(TokenType.PLUS):
            self.advance()
            right = self.parse_atom()
            return BinaryAdd(left, right)
        return left

    def parse_statement(self):
        if self.check(TokenType.LET):
            self.advance()
            name = self.expect(TokenType.ID).value
            self.expect(TokenType.EQUALS)
            expr = self.parse_expression()
            self.expect(TokenType.SEMICOLON)
            return VarDecl(name, expr)

        elif self.check(TokenType.PRINT):
            self.advance()
            self.expect(TokenType.LPAREN)
            expr = self.parse_expression()
            self.expect(TokenType.RPAREN)
            self.expect(TokenType.SEMICOLON)
            return Print(expr)

        else:
            raise self.error(f"Unknown statement: {describe(self.current_token)}")

    def parse_program(self):
        body = []
        while self.current_token is not None:
            body.append(self.parse_statement())
        return Program(tuple(body))

def parse(tokens):
    return Parser(tokens).parse_program()
