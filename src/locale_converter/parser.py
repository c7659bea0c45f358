"""Parser for exported translation object literals."""

import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional

from .constants import DEFAULT_MAX_DEPTH
from .models import Leaf, Node, TreeValue
from .types import MalformedLiteral


_IDENTIFIER_START = re.compile(r"[A-Za-z_$]")
_IDENTIFIER = re.compile(r"[A-Za-z_$][A-Za-z0-9_$]*")

_PUNCTUATION = {
    "{": "LBRACE",
    "}": "RBRACE",
    ":": "COLON",
    ",": "COMMA",
    ";": "SEMICOLON",
}


class TokenType(Enum):
    """Token kinds of the object-literal grammar."""
    IDENTIFIER = "identifier"
    STRING = "string"
    LBRACE = "{"
    RBRACE = "}"
    COLON = ":"
    COMMA = ","
    SEMICOLON = ";"
    EOF = "end of input"


@dataclass(frozen=True)
class Token:
    type: TokenType
    value: str
    line: int
    column: int


class LiteralTokenizer:
    """
    Splits literal source text into tokens.

    Whitespace and ``//`` / ``/* */`` comments are skipped. Strings are
    single-quoted; ``\\'`` is the only escape sequence, every other
    backslash is kept as written.
    """

    def __init__(self, text: str):
        self.text = text
        self.pos = 0
        self.line = 1
        self.column = 1

    def tokenize(self) -> List[Token]:
        tokens = []
        while True:
            self._skip_trivia()
            if self.pos >= len(self.text):
                tokens.append(Token(TokenType.EOF, "", self.line, self.column))
                return tokens
            tokens.append(self._next_token())

    def _next_token(self) -> Token:
        ch = self.text[self.pos]
        line, column = self.line, self.column

        if ch in _PUNCTUATION:
            self._advance(1)
            return Token(TokenType[_PUNCTUATION[ch]], ch, line, column)

        if ch == "'":
            return Token(TokenType.STRING, self._read_string(), line, column)

        if _IDENTIFIER_START.match(ch):
            match = _IDENTIFIER.match(self.text, self.pos)
            self._advance(len(match.group()))
            return Token(TokenType.IDENTIFIER, match.group(), line, column)

        if ch == '"' or ch == "`":
            raise MalformedLiteral("Only single-quoted strings are supported", line, column)

        raise MalformedLiteral(f"Unexpected character {ch!r}", line, column)

    def _read_string(self) -> str:
        line, column = self.line, self.column
        self._advance(1)
        chars = []

        while self.pos < len(self.text):
            ch = self.text[self.pos]
            if ch == "\\" and self.text.startswith("'", self.pos + 1):
                chars.append("'")
                self._advance(2)
            elif ch == "'":
                self._advance(1)
                return "".join(chars)
            else:
                chars.append(ch)
                self._advance(1)

        raise MalformedLiteral("Unterminated string", line, column)

    def _skip_trivia(self) -> None:
        while self.pos < len(self.text):
            ch = self.text[self.pos]
            if ch.isspace():
                self._advance(1)
            elif self.text.startswith("//", self.pos):
                end = self.text.find("\n", self.pos)
                self._advance((len(self.text) if end == -1 else end) - self.pos)
            elif self.text.startswith("/*", self.pos):
                end = self.text.find("*/", self.pos + 2)
                if end == -1:
                    raise MalformedLiteral("Unterminated comment", self.line, self.column)
                self._advance(end + 2 - self.pos)
            else:
                return

    def _advance(self, count: int) -> None:
        for ch in self.text[self.pos:self.pos + count]:
            if ch == "\n":
                self.line += 1
                self.column = 1
            else:
                self.column += 1
        self.pos += count


class LiteralParser:
    """
    Recursive-descent parser for ``export default { ... } as const;`` files.

    The text is never evaluated. Grammar::

        file   := ["export" "default"] object ["as" "const"] [";"]
        object := "{" [entry ("," entry)* [","]] "}"
        entry  := (identifier | string) ":" (string | object)
    """

    def __init__(self, max_depth: int = DEFAULT_MAX_DEPTH,
                 logger: Optional[logging.Logger] = None):
        """
        Initialize the literal parser.

        Args:
            max_depth: Maximum object nesting accepted before failing
            logger: Optional logger instance
        """
        self.max_depth = max_depth
        self.logger = logger or logging.getLogger(__name__)
        self._tokens: List[Token] = []
        self._index = 0

    def parse(self, text: str) -> Node:
        """
        Parse literal source text into a tree.

        Args:
            text: Source text of the exported object literal

        Returns:
            Root node, keys in source order

        Raises:
            MalformedLiteral: On any syntax violation
        """
        if not text.strip():
            raise MalformedLiteral("Literal source is empty")

        self._tokens = LiteralTokenizer(text).tokenize()
        self._index = 0

        if self._peek_keyword("export"):
            self._advance()
            self._expect_keyword("default")

        root = self._parse_object(depth=1)

        if self._peek_keyword("as"):
            self._advance()
            self._expect_keyword("const")
        if self._peek().type == TokenType.SEMICOLON:
            self._advance()

        self._expect(TokenType.EOF)

        self.logger.debug(f"Parsed literal with {len(root)} top-level keys, depth {root.depth()}")
        return root

    def _parse_object(self, depth: int) -> Node:
        start = self._expect(TokenType.LBRACE)
        if depth > self.max_depth:
            raise MalformedLiteral(
                f"Object nesting exceeds the maximum depth of {self.max_depth}",
                start.line, start.column
            )

        children: Dict[str, TreeValue] = {}
        while self._peek().type != TokenType.RBRACE:
            key = self._parse_key()
            self._expect(TokenType.COLON)
            children[key] = self._parse_value(depth)

            separator = self._peek()
            if separator.type == TokenType.COMMA:
                self._advance()
            elif separator.type != TokenType.RBRACE:
                self._fail("Expected ',' or '}'", separator)

        self._advance()
        return Node(children)

    def _parse_key(self) -> str:
        token = self._peek()
        if token.type in (TokenType.IDENTIFIER, TokenType.STRING):
            if not token.value:
                raise MalformedLiteral("Property key cannot be empty", token.line, token.column)
            self._advance()
            return token.value
        self._fail("Expected a property key", token)

    def _parse_value(self, depth: int) -> TreeValue:
        token = self._peek()
        if token.type == TokenType.STRING:
            self._advance()
            return Leaf(token.value)
        if token.type == TokenType.LBRACE:
            return self._parse_object(depth + 1)
        self._fail("Expected a string or object value", token)

    def _peek(self) -> Token:
        return self._tokens[self._index]

    def _peek_keyword(self, word: str) -> bool:
        token = self._peek()
        return token.type == TokenType.IDENTIFIER and token.value == word

    def _advance(self) -> Token:
        token = self._tokens[self._index]
        if token.type != TokenType.EOF:
            self._index += 1
        return token

    def _expect(self, token_type: TokenType) -> Token:
        token = self._peek()
        if token.type != token_type:
            self._fail(f"Expected '{token_type.value}'", token)
        return self._advance()

    def _expect_keyword(self, word: str) -> Token:
        if not self._peek_keyword(word):
            self._fail(f"Expected '{word}'", self._peek())
        return self._advance()

    @staticmethod
    def _fail(message: str, token: Token):
        found = token.type.value if token.type != TokenType.IDENTIFIER else token.value
        if token.type == TokenType.STRING:
            found = "string"
        raise MalformedLiteral(f"{message}, found {found}", token.line, token.column)


def parse_literal(text: str, max_depth: int = DEFAULT_MAX_DEPTH) -> Node:
    """Parse ``text`` with a default LiteralParser."""
    return LiteralParser(max_depth=max_depth).parse(text)
