# Builds expression tree from fully bracketed prefix '(+ x 1)' or postfix '(x 1 +)' text, shift / reduce over an explicit stack of open groups.

import os
import sys

from xast import AST
from xops import lookup
from xlex import tokenize, int_literal, EmptyExpression, UnexpectedCharacter, InvalidToken, MissingClosingBracket, InvalidOperation, ArityMismatch

_XPARSER_DEBUG = os.environ.get ('XTREE_DEBUG')

class Parser:
	def __init__ (self, postfix = False):
		self.postfix = postfix
		self.stop    = {'RPAREN', '$end', 'OP'} if postfix else {'RPAREN', '$end'} # tokens which end argument list of group

	def take (self):
		tok          = self.tokens [self.tokidx]
		self.tokidx += tok != '$end' # never step past end

		return tok

	def peek (self):
		return self.tokens [self.tokidx]

	def operation (self):
		tok = self.take ()

		if tok != 'OP':
			raise InvalidOperation (tok.pos, tok.desc)

		return tok

	def term (self, tok): # number or variable
		if tok == 'NUM':
			return AST ('#', int_literal (tok.text, tok.pos))
		elif tok == 'VAR':
			return AST ('@', tok.text)

		raise InvalidToken (tok.pos, 'number, variable or bracketed expression', tok.desc)

	def close (self, op, args): # group arguments complete, operation (postfix) and ')' follow
		if self.postfix:
			op = self.operation ()

		arity = lookup (op.text).arity

		if len (args) != arity:
			raise ArityMismatch (op.pos, op.text, arity, len (args))

		ast = AST ('-op', op.text, tuple (args))
		tok = self.take ()

		if tok != 'RPAREN':
			raise MissingClosingBracket (tok.pos, tok.desc)

		return ast

	def expr (self):
		groups = [] # [(op, args), ...] of open '(', op is None until read in postfix mode

		while 1:
			if groups and self.peek () in self.stop:
				ast = self.close (*groups.pop ())

			else:
				tok = self.take ()

				if tok == 'LPAREN':
					groups.append ((None if self.postfix else self.operation (), []))

					continue

				ast = self.term (tok)

			if not groups:
				return ast

			groups [-1] [1].append (ast)

	def parse (self, text):
		if not text.strip ():
			raise EmptyExpression ()

		self.tokens = tokenize (text)
		self.tokidx = 0

		if _XPARSER_DEBUG:
			print ('tokens:', self.tokens, file = sys.stderr)

		ast = self.expr ()
		tok = self.peek ()

		if tok != '$end':
			raise UnexpectedCharacter (tok.pos, tok.text)

		if _XPARSER_DEBUG:
			print ('ast:   ', repr (ast), file = sys.stderr)

		return ast

def parse_prefix (text):
	return Parser ().parse (text)

def parse_postfix (text):
	return Parser (postfix = True).parse (text)
