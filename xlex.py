# Scanner for bracketed expression text and the parse error types shared by all parsers.

from collections import OrderedDict
import re

from xops import KEYWORDS, VARS

#...............................................................................................
class ParseError (SyntaxError):
	def __init__ (self, msg, pos = None):
		super ().__init__ (msg)

		self.pos = pos

class EmptyExpression (ParseError):
	def __init__ (self):
		super ().__init__ ('string must contain a non-empty arithmetic expression')

class UnexpectedCharacter (ParseError):
	def __init__ (self, pos, found = None):
		super ().__init__ (f'unexpected character at pos {pos}' if found is None else f'unexpected character {found!r} at pos {pos}', pos)

		self.found = found

class InvalidOperationToken (ParseError):
	def __init__ (self, pos, token):
		super ().__init__ (f'invalid operation token {token!r} at pos {pos}', pos)

		self.token = token

class InvalidToken (ParseError):
	def __init__ (self, pos, expected, found):
		super ().__init__ (f'invalid token at pos {pos}: expected {expected}, but found {found}', pos)

		self.expected, self.found = expected, found

class MissingClosingBracket (ParseError):
	def __init__ (self, pos, found):
		super ().__init__ (f"there must be closing bracket (')'), but found {found} at pos {pos}", pos)

		self.found = found

class InvalidOperation (ParseError):
	def __init__ (self, pos, found, msg = None):
		super ().__init__ (msg or f'invalid operation at pos {pos}: {found}', pos)

		self.found = found

class ArityMismatch (InvalidOperation):
	def __init__ (self, pos, sym, expected, actual):
		super ().__init__ (pos, sym, f'operation {sym!r}{"" if pos is None else f" at pos {pos}"} takes {expected} argument{"s" if expected != 1 else ""}, but {actual} given')

		self.sym, self.expected, self.actual = sym, expected, actual

class StackUnderflow (ParseError):
	def __init__ (self, pos, sym, expected, actual):
		super ().__init__ (f'operation {sym!r} at pos {pos} needs {expected} operand{"s" if expected != 1 else ""}, but only {actual} on stack', pos)

		self.sym, self.expected, self.actual = sym, expected, actual

class MalformedFlatExpression (ParseError):
	def __init__ (self, count):
		super ().__init__ (f'expression leaves {count} values on stack instead of one')

		self.count = count

class InvalidNumber (ParseError):
	def __init__ (self, pos, text):
		super ().__init__ (f'integer literal at pos {pos} is too long ({len (text)} characters, at most {MAX_DIGITS} digits)', pos)

		self.text = text

class InvalidVariableName (ParseError):
	def __init__ (self, pos, name):
		super ().__init__ (f'{name!r} is not a valid variable name, expected one of {", ".join (VARS)}', pos)

		self.name = name

#...............................................................................................
MAX_DIGITS = 4000 # longest integer literal, below the interpreter's int <-> str conversion limit

def int_literal (text, pos): # optionally signed digit run -> int
	if len (text.lstrip ('-')) > MAX_DIGITS:
		raise InvalidNumber (pos, text)

	try:
		return int (text)

	except ValueError:
		raise InvalidNumber (pos, text) from None

class Token (str):
	__slots__ = ['text', 'pos']

	def __new__ (cls, str_, text = None, pos = None):
		self      = str.__new__ (cls, str_)
		self.text = text or ''
		self.pos  = pos

		return self

	def __repr__ (self):
		return f'Token ({str.__repr__ (self)}, {self.text!r}, {self.pos})'

	@property
	def desc (self): # for error messages
		return 'end of input' if self == '$end' else repr (self.text)

TOKENS = OrderedDict ([
	('LPAREN', r'\('),
	('RPAREN', r'\)'),
	('OP',     r'[+\-*/]'),
	('NUM',    r'\d+'),
	('WORD',   r'(?P<letters>[a-zA-Z]+)\d*'),
	('ignore', r' +'),
])

_rec_TOKENS = re.compile ('|'.join (f'(?P<{tok}>{pat})' for tok, pat in TOKENS.items ()))

def tokenize (text):
	tokens = []
	end    = len (text)
	pos    = 0

	while pos < end:
		m = _rec_TOKENS.match (text, pos)

		if m is None:
			raise UnexpectedCharacter (pos, text [pos])

		tok = m.lastgroup
		s   = m.group (0)

		if tok == 'WORD':
			if s not in KEYWORDS: # not 'sumrec3' as a whole, only letters count, trailing digits are scanned as number
				s = m.group ('letters')

				if s in KEYWORDS:
					tok = 'OP'
				elif s in VARS:
					tok = 'VAR'
				else:
					raise InvalidOperationToken (pos, s)

			else:
				tok = 'OP'

		if tok != 'ignore':
			tokens.append (Token (tok, s, pos))

		pos += len (s)

	tokens.append (Token ('$end', '', pos))

	return tokens
