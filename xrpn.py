# Builds expression tree from flat bracket-free postfix (RPN) text 'x 2 * 1 +', stack reduction over whitespace separated words.

import os
import re
import sys

from xast import AST
from xops import VARS, lookup
from xlex import int_literal, EmptyExpression, StackUnderflow, MalformedFlatExpression, InvalidVariableName

_XRPN_DEBUG = os.environ.get ('XTREE_DEBUG')

_rec_WORD   = re.compile (r'\S+')
_rec_INT    = re.compile (r'-?\d+')

def words (text): # -> [(word, pos), ...]
	return [(m.group (), m.start ()) for m in _rec_WORD.finditer (text)]

def reduce_words (text, arity, apply, num, var): # arity (word) -> int or None if not operation, var (word) -> None if not valid
	if not text.strip ():
		raise EmptyExpression ()

	stack = []

	for word, pos in words (text):
		n = arity (word)

		if n is not None:
			if len (stack) < n:
				raise StackUnderflow (pos, word, n, len (stack))

			args = tuple (stack [-n:])

			del stack [-n:]

			stack.append (apply (word, args))

		elif _rec_INT.fullmatch (word):
			stack.append (num (int_literal (word, pos)))

		else:
			val = var (word)

			if val is None:
				raise InvalidVariableName (pos, word)

			stack.append (val)

	if len (stack) != 1:
		raise MalformedFlatExpression (len (stack))

	return stack [0]

#...............................................................................................
def _arity (word):
	op = lookup (word)

	return op and op.arity

def parse_flat_postfix (text):
	ast = reduce_words (text, _arity,
		lambda sym, args: AST ('-op', sym, args),
		lambda num: AST ('#', num),
		lambda var: AST ('@', var) if var in VARS else None)

	if _XRPN_DEBUG:
		print ('ast:', repr (ast), file = sys.stderr)

	return ast
