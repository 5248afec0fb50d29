from dataclasses import dataclass
from enum import Enum, auto

class TokenType(Enum):
    LET = auto()
    PRINT = auto()
    ID = auto()
    NUMBER = auto()
    EQUALS = auto()
    SEMICOLON = auto()
    PLUS = auto()
    LPAREN = auto()
    RPAREN = auto()

KEYWORDS = {
    'let': TokenType.LET,
    'print': TokenType.PRINT,
}

SYMBOLS = {
    '=': TokenType.EQUALS,
    ';': TokenType.SEMICOLON,
    '+': TokenType.PLUS,
    '(': TokenType.LPAREN,
    ')': TokenType.RPAREN,
}

DIGITS = '0123456789'
ID_START = 'abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ_'
ID_CHARS = ID_START + DIGITS

@dataclass(frozen=True)
class Token:
    type: TokenType
    value: object
    line: int
    column: int

class Lexer:
    """
    Converts MiniLang source into a list of tokens.

    Never fails: any character that does not start a recognized token
    is skipped.
    """
    def __init__(self, source):
        self.source = source
        self.pos = 0
        self.line = 1
        self.column = 1
        self.current_char = self.source[0] if source else None

    def advance(self):
        if self.current_char == '\n':
            self.line += 1
            self.column = 0
        self.pos += 1
        self.column += 1
        if self.pos < len(self.source):
            self.current_char = self.source[self.pos]
        else:
            self.current_char = None

    def number(self):
        start_pos = self.pos
        while self.current_char and self.current_char in DIGITS:
            self.advance()
        return int(self.source[start_pos:self.pos])

    def identifier(self):
        start_pos = self.pos
        while self.current_char and self.current_char in ID_CHARS:
            self.advance()
        return self.source[start_pos:self.pos]

    def keyword(self):
        """Keywords win over identifiers at the same position, even as a prefix: `letter` is `let` `ter`."""
        for word in KEYWORDS:
            if self.source.startswith(word, self.pos):
                for _ in word:
                    self.advance()
                return word
        return None

    def tokenize(self):
        tokens = []

        while self.current_char:
            start_line = self.line
            start_column = self.column

            if self.current_char in ID_START:
                keyword = self.keyword()
                if keyword:
                    tokens.append(Token(KEYWORDS[keyword], keyword, start_line, start_column))
                else:
                    word = self.identifier()
                    tokens.append(Token(TokenType.ID, word, start_line, start_column))
                continue

            if self.current_char in DIGITS:
                num = self.number()
                tokens.append(Token(TokenType.NUMBER, num, start_line, start_column))
                continue

            if self.current_char in SYMBOLS:
                symbol = self.current_char
                self.advance()
                tokens.append(Token(SYMBOLS[symbol], symbol, start_line, start_column))
                continue

            # whitespace and unrecognized characters
            self.advance()

        return tokens

def scan(source):
    return Lexer(source).tokenize()
